"""Camera frustum, view/projection matrices and chunk culling."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

import numpy as np

FOV = math.radians(90.0)
Z_NEAR = 0.1
Z_FAR = 3000.0


@dataclass(frozen=True)
class Plane:
    """All points p such that normal . p + d = 0."""

    normal: np.ndarray
    d: float

    def dist(self, point) -> float:
        """Signed distance from ``point`` to the plane."""
        normal = np.asarray(self.normal, dtype=float)
        return float((normal @ np.asarray(point, dtype=float) + self.d) / np.linalg.norm(normal))


def _rotation_x(angle: float) -> np.ndarray:
    c, s = math.cos(angle), math.sin(angle)
    return np.array([[1, 0, 0, 0], [0, c, -s, 0], [0, s, c, 0], [0, 0, 0, 1]], dtype=float)


def _rotation_y(angle: float) -> np.ndarray:
    c, s = math.cos(angle), math.sin(angle)
    return np.array([[c, 0, s, 0], [0, 1, 0, 0], [-s, 0, c, 0], [0, 0, 0, 1]], dtype=float)


def _perspective(aspect: float, fovy: float, znear: float, zfar: float) -> np.ndarray:
    f = 1.0 / math.tan(fovy / 2.0)
    m = np.zeros((4, 4))
    m[0, 0] = f / aspect
    m[1, 1] = f
    m[2, 2] = -(zfar + znear) / (zfar - znear)
    m[2, 3] = -2.0 * zfar * znear / (zfar - znear)
    m[3, 2] = -1.0
    return m


def _side_plane(point: np.ndarray, other: np.ndarray) -> Plane:
    normal = np.cross(point, other)
    return Plane(normal=normal, d=float(-(normal @ point) / np.linalg.norm(normal)))


@dataclass
class Frustum:
    """The player's view frustum; yaw and pitch are in degrees."""

    position: np.ndarray = field(default_factory=lambda: np.zeros(3))
    yaw: float = 0.0
    pitch: float = 0.0

    def __post_init__(self) -> None:
        self.position = np.asarray(self.position, dtype=float)

    @classmethod
    def from_yaw_pitch(cls, position, yaw_pitch) -> Frustum:
        return cls(position=position, yaw=yaw_pitch.yaw, pitch=yaw_pitch.pitch)

    def get_view_projection(self, aspect_ratio: float) -> np.ndarray:
        return _perspective(aspect_ratio, FOV, Z_NEAR, Z_FAR) @ self.get_view_matrix()

    def get_view_matrix(self) -> np.ndarray:
        rotation = _rotation_x(-math.radians(self.pitch)) @ _rotation_y(-math.radians(self.yaw))
        translation = np.eye(4)
        translation[:3, 3] = -self.position
        return rotation @ translation

    def get_planes(self, aspect_ratio: float) -> list[tuple[Plane, Plane]]:
        """Three pairs of opposite planes in view space: front/back, right/left, top/bottom."""
        t = math.tan(FOV / 2.0)
        h_near = t * 2.0 * Z_NEAR
        w_near = h_near * aspect_ratio
        up = np.array([0.0, 1.0, 0.0])
        right = np.array([1.0, 0.0, 0.0])
        near_center = np.array([0.0, 0.0, -Z_NEAR])
        near_right = near_center + np.array([w_near * 0.5, 0.0, 0.0])
        near_left = near_center - np.array([w_near * 0.5, 0.0, 0.0])
        near_top = near_center + np.array([h_near * 0.5, 0.0, 0.0])
        near_bottom = near_center - np.array([h_near * 0.5, 0.0, 0.0])
        return [
            (
                Plane(normal=np.array([0.0, 0.0, -1.0]), d=-Z_NEAR),
                Plane(normal=np.array([0.0, 0.0, 1.0]), d=Z_FAR),
            ),
            (_side_plane(near_right, -up), _side_plane(near_left, up)),
            (_side_plane(near_top, right), _side_plane(near_bottom, -right)),
        ]


def contains_chunk(planes, view_matrix, chunk_pos, chunk_size: int) -> bool:
    """Whether the chunk may lie in the frustum; false positives are possible."""
    center = np.array([p * chunk_size + chunk_size // 2 for p in chunk_pos] + [1], dtype=float)
    transformed = np.asarray(view_matrix, dtype=float) @ center
    center_view = transformed[:3] / transformed[3]
    radius = chunk_size * math.sqrt(3.0) / 2.0
    keep = False
    for plane1, plane2 in planes:
        d1 = plane1.dist(center_view)
        d2 = plane2.dist(center_view)
        if (d1 > 0.0 and d2 > 0.0) or max(abs(d1), abs(d2)) < radius:
            keep = True
    return keep