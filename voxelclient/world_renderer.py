"""World rendering data: chunk and model meshes, matrices and chunk culling."""

from __future__ import annotations

import math
from collections.abc import Hashable, Iterable, Sequence
from dataclasses import dataclass

import numpy as np

from voxelclient.buffers import MultiBuffer
from voxelclient.frustum import Frustum, contains_chunk
from voxelclient.model import Model, RgbVertex, VoxelModel, mesh_model

CHUNK_BUFFER_CAPACITY = 1000
MODEL_BUFFER_CAPACITY = 1

# Maps OpenGL clip-space depth [-1, 1] to the [0, 1] range used by the GPU backend.
OPENGL_TO_WGPU = np.array(
    [
        [1.0, 0.0, 0.0, 0.0],
        [0.0, 1.0, 0.0, 0.0],
        [0.0, 0.0, 0.5, 0.5],
        [0.0, 0.0, 0.0, 1.0],
    ]
)


@dataclass(frozen=True)
class ChunkVertex:
    """A vertex of a chunk mesh."""

    pos: tuple[float, float, float]
    texture_top_left: tuple[float, float]
    texture_size: tuple[float, float]
    texture_max_uv: tuple[float, float]
    texture_uv: tuple[float, float]
    occl_and_face: int


def opengl_to_wgpu_view_projection(frustum: Frustum, aspect_ratio: float) -> np.ndarray:
    """View/projection matrix of ``frustum`` with depth remapped to [0, 1], as float32."""
    return (OPENGL_TO_WGPU @ frustum.get_view_projection(aspect_ratio)).astype(np.float32)


def translation_matrix(x: float, y: float, z: float) -> list[float]:
    """Column-major 4x4 matrix translating by (x, y, z)."""
    return [
        1.0, 0.0, 0.0, 0.0,
        0.0, 1.0, 0.0, 0.0,
        0.0, 0.0, 1.0, 0.0,
        float(x), float(y), float(z), 1.0,
    ]


def model_matrix(model: Model) -> np.ndarray:
    """4x4 float32 transform of ``model``: scale, rotate about its offset, then place."""
    offset = np.asarray(model.rot_offset, dtype=float)
    c, s = math.cos(model.rot_y), math.sin(model.rot_y)
    rotation = np.array([[c, 0.0, s], [0.0, 1.0, 0.0], [-s, 0.0, c]])
    linear = rotation * model.scale
    translation = rotation @ (-offset) + np.array([model.pos_x, model.pos_y, model.pos_z]) + offset
    matrix = np.eye(4)
    matrix[:3, :3] = linear
    matrix[:3, 3] = translation
    return matrix.astype(np.float32)


class WorldMeshes:
    """Packed storage of the chunk and model meshes drawn in the world."""

    def __init__(self) -> None:
        self.chunk_index_buffers: MultiBuffer = MultiBuffer(CHUNK_BUFFER_CAPACITY)
        self.chunk_vertex_buffers: MultiBuffer = MultiBuffer(CHUNK_BUFFER_CAPACITY)
        self.model_index_buffers: MultiBuffer = MultiBuffer(MODEL_BUFFER_CAPACITY)
        self.model_vertex_buffers: MultiBuffer = MultiBuffer(MODEL_BUFFER_CAPACITY)

    @classmethod
    def from_models(cls, models: Iterable[VoxelModel]) -> WorldMeshes:
        """Create the storage with every model meshed under its position as id."""
        meshes = cls()
        for mesh_id, voxel_model in enumerate(models):
            vertices, indices = mesh_model(voxel_model)
            meshes.add_model_mesh(mesh_id, vertices, indices)
        return meshes

    def update_chunk_mesh(
        self, pos: Hashable, vertices: Sequence[ChunkVertex], indices: Sequence[int]
    ) -> None:
        """Store the mesh of the chunk at ``pos``; empty meshes are ignored."""
        if vertices and indices:
            self.chunk_vertex_buffers.update(pos, vertices)
            self.chunk_index_buffers.update(pos, indices)

    def remove_chunk_mesh(self, pos: Hashable) -> None:
        self.chunk_vertex_buffers.remove(pos)
        self.chunk_index_buffers.remove(pos)

    def add_model_mesh(
        self, mesh_id: int, vertices: Sequence[RgbVertex], indices: Sequence[int]
    ) -> None:
        """Store a model mesh; raises ``ValueError`` if it is empty."""
        self.model_index_buffers.update(mesh_id, indices)
        self.model_vertex_buffers.update(mesh_id, vertices)

    def visible_chunks(
        self,
        frustum: Frustum,
        aspect_ratio: float,
        enable_culling: bool,
        chunk_size: int,
    ) -> list[Hashable]:
        """Positions of the stored chunks that should be drawn."""
        if not enable_culling:
            return self.chunk_index_buffers.keys()
        view = frustum.get_view_matrix()
        planes = frustum.get_planes(aspect_ratio)
        return [
            pos
            for pos in self.chunk_index_buffers.keys()
            if contains_chunk(planes, view, pos, chunk_size)
        ]

    @staticmethod
    def _draw_range(
        index_buffers: MultiBuffer, vertex_buffers: MultiBuffer, key: Hashable
    ) -> tuple[int, int, int] | None:
        index = index_buffers.get_pos_len(key)
        vertex = vertex_buffers.get_pos_len(key)
        if index is None or vertex is None:
            return None
        index_pos, index_len = index
        return index_pos, index_pos + index_len, vertex[0]

    def chunk_draw_range(self, pos: Hashable) -> tuple[int, int, int] | None:
        """(first index, end index, base vertex) of a chunk, or ``None``."""
        return self._draw_range(self.chunk_index_buffers, self.chunk_vertex_buffers, pos)

    def model_draw_range(self, mesh_id: int) -> tuple[int, int, int] | None:
        """(first index, end index, base vertex) of a model, or ``None``."""
        return self._draw_range(self.model_index_buffers, self.model_vertex_buffers, mesh_id)