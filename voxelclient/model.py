"""Voxel models and their meshing into colored, ambient-occluded quads."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

import numpy as np

# Outward normal of each face: +x, -x, +y, -y, +z, -z.
FACE_NORMALS = ((1, 0, 0), (-1, 0, 0), (0, 1, 0), (0, -1, 0), (0, 0, 1), (0, 0, -1))
# Two axes spanning each face, used to look at the neighbours around a face.
FACE_DELTA1 = ((0, 1, 0), (0, 1, 0), (1, 0, 0), (1, 0, 0), (1, 0, 0), (1, 0, 0))
FACE_DELTA2 = ((0, 0, 1), (0, 0, 1), (0, 0, 1), (0, 0, 1), (0, 1, 0), (0, 1, 0))

# Offsets of the 2nd, 3rd and 4th quad corner relative to the first, per face.
_DX = ((0, 0, 0, 0, 0, 0), (0, 0, 1, 1, 1, 1), (0, 0, 1, 1, 1, 1))
_DY = ((0, 0, 0, 0, 1, 1), (1, 1, 0, 0, 0, 0), (1, 1, 0, 0, 1, 1))
_DZ = ((1, 1, 1, 1, 0, 0), (0, 0, 0, 0, 0, 0), (1, 1, 1, 1, 0, 0))

# Triangle orders; the split diagonal is chosen from the occlusion values.
_ORDER1 = (
    (0, 2, 1, 1, 2, 3),
    (0, 1, 2, 1, 3, 2),
    (0, 1, 2, 1, 3, 2),
    (0, 2, 1, 1, 2, 3),
    (3, 1, 2, 2, 1, 0),
    (3, 2, 1, 2, 0, 1),
)
_ORDER2 = (
    (0, 2, 3, 0, 3, 1),
    (0, 3, 2, 0, 1, 3),
    (0, 3, 2, 0, 1, 3),
    (0, 2, 3, 0, 3, 1),
    (1, 0, 3, 2, 3, 0),
    (1, 3, 0, 2, 0, 3),
)

FACE_SHIFT = 24
OCCLUSION_SHIFT = 27
COLOR_MASK = 0x00FFFFFF


@dataclass(frozen=True)
class VoxelModel:
    """A box of voxels; ``full`` and ``voxels`` are indexed x-major, then y, then z."""

    size_x: int
    size_y: int
    size_z: int
    voxels: Sequence[int]
    full: Sequence[bool]

    def __post_init__(self) -> None:
        if min(self.size_x, self.size_y, self.size_z) < 0:
            raise ValueError("model sizes cannot be negative")
        count = self.size_x * self.size_y * self.size_z
        if len(self.voxels) != count or len(self.full) != count:
            raise ValueError("voxels and full must hold size_x * size_y * size_z entries")


@dataclass(frozen=True)
class RgbVertex:
    """A model vertex; ``info`` packs occlusion, face and RGB color."""

    position: tuple[float, float, float]
    info: int


@dataclass
class Model:
    """A pre-loaded model to draw: registry id, position, scale and rotation."""

    mesh_id: int
    pos_x: float
    pos_y: float
    pos_z: float
    scale: float = 1.0
    rot_y: float = 0.0
    rot_offset: tuple[float, float, float] = field(default=(0.0, 0.0, 0.0))


def ambient_occlusion(corners: int, edge: int) -> int:
    """Occlusion level of a quad corner, from 0 (darkest) to 3 (unoccluded)."""
    if edge == 2:
        return 0
    if edge == 1 and corners == 1:
        return 1
    if edge + corners == 1:
        return 2
    return 3


def mesh_model(model: VoxelModel) -> tuple[list[RgbVertex], list[int]]:
    """Build one quad for every voxel face that is not covered by another voxel."""
    sx, sy, sz = model.size_x, model.size_y, model.size_z
    solid = np.asarray(model.full, dtype=bool).reshape(sx, sy, sz)
    occl = np.pad(solid, 1, constant_values=False)
    colors = list(model.voxels)

    vertices: list[RgbVertex] = []
    indices: list[int] = []

    for s, (nx, ny, nz) in enumerate(FACE_NORMALS):
        d1, d2 = FACE_DELTA1[s], FACE_DELTA2[s]
        for i in range(sx):
            for j in range(sy):
                for k in range(sz):
                    if not occl[i + 1, j + 1, k + 1]:
                        continue
                    if occl[i + 1 + nx, j + 1 + ny, k + 1 + nz]:
                        continue

                    corners = [0, 0, 0, 0]
                    edges = [0, 0, 0, 0]
                    for i2 in (-1, 0, 1):
                        for j2 in (-1, 0, 1):
                            xx = i + 1 + nx + d1[0] * i2 + d2[0] * j2
                            yy = j + 1 + ny + d1[1] * i2 + d2[1] * j2
                            zz = k + 1 + nz + d1[2] * i2 + d2[2] * j2
                            if not occl[xx, yy, zz]:
                                continue
                            match (i2, j2):
                                case (-1, -1):
                                    corners[0] += 1
                                case (-1, 1):
                                    corners[1] += 1
                                case (1, -1):
                                    corners[2] += 1
                                case (1, 1):
                                    corners[3] += 1
                                case (-1, 0):
                                    edges[0] += 1
                                    edges[1] += 1
                                case (1, 0):
                                    edges[2] += 1
                                    edges[3] += 1
                                case (0, -1):
                                    edges[0] += 1
                                    edges[2] += 1
                                case (0, 1):
                                    edges[1] += 1
                                    edges[3] += 1

                    color = colors[i * sy * sz + j * sz + k] & COLOR_MASK
                    info = [
                        (s << FACE_SHIFT)
                        + (ambient_occlusion(c, e) << OCCLUSION_SHIFT)
                        + color
                        for c, e in zip(corners, edges)
                    ]

                    xs = [float(i)] + [float(i + _DX[n][s]) for n in range(3)]
                    ys = [float(j)] + [float(j + _DY[n][s]) for n in range(3)]
                    zs = [float(k)] + [float(k + _DZ[n][s]) for n in range(3)]
                    if s == 0:
                        xs = [x + 1.0 for x in xs]
                    elif s == 2:
                        ys = [y + 1.0 for y in ys]
                    elif s == 4:
                        zs = [z + 1.0 for z in zs]

                    base = len(vertices)
                    vertices.extend(
                        RgbVertex((x, y, z), v) for x, y, z, v in zip(xs, ys, zs, info)
                    )
                    a00, a01, a10, a11 = (v >> OCCLUSION_SHIFT for v in info)
                    order = _ORDER1[s] if a00 + a11 < a01 + a10 else _ORDER2[s]
                    indices.extend(base + o for o in order)

    return vertices, indices