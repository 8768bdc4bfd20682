"""Vertex and index data for the flat parts of the user interface."""

from __future__ import annotations

from dataclasses import dataclass

from voxelclient.gui import PrimitiveBuffer

CROSSHAIR_HALF_HEIGHT = 15.0
CROSSHAIR_HALF_WIDTH = 2.0
CROSSHAIR_COLOR = (1.0, 1.0, 1.0, 0.5)
CROSSHAIR_Z = -1.0
CROSSHAIR_INDICES = (0, 1, 2, 1, 2, 3, 4, 5, 6, 5, 6, 7)


@dataclass(frozen=True)
class UiVertex:
    """A colored vertex in window coordinates."""

    position: tuple[float, float, float]
    color: tuple[float, float, float, float]


def build_ui_geometry(
    primitives: PrimitiveBuffer,
    window_width: float,
    window_height: float,
    draw_crosshair: bool,
) -> tuple[list[UiVertex], list[int]]:
    """Triangulate rectangles, triangle meshes and the optional crosshair."""
    vertices: list[UiVertex] = []
    indices: list[int] = []

    for rect in primitives.rectangle:
        color = tuple(rect.color)
        left, top = rect.x, rect.y
        right, bottom = rect.x + rect.width, rect.y + rect.height
        a = len(vertices)
        vertices.extend(
            UiVertex((px, py, rect.z), color)
            for px, py in ((left, top), (right, top), (left, bottom), (right, bottom))
        )
        b, c, d = a + 1, a + 2, a + 3
        indices.extend((b, a, c, b, c, d))

    for mesh in primitives.triangles:
        offset = len(vertices)
        color = tuple(mesh.color)
        vertices.extend(UiVertex(tuple(position), color) for position in mesh.vertices)
        indices.extend(index + offset for index in mesh.indices)

    if draw_crosshair:
        cx, cy = window_width / 2.0, window_height / 2.0
        hh, hw = CROSSHAIR_HALF_HEIGHT, CROSSHAIR_HALF_WIDTH
        corners = (
            (cx - hw, cy - hh),
            (cx + hw, cy - hh),
            (cx - hw, cy + hh),
            (cx + hw, cy + hh),
            (cx - hh, cy - hw),
            (cx + hh, cy - hw),
            (cx - hh, cy + hw),
            (cx + hh, cy + hw),
        )
        offset = len(vertices)
        vertices.extend(UiVertex((px, py, CROSSHAIR_Z), CROSSHAIR_COLOR) for px, py in corners)
        indices.extend(index + offset for index in CROSSHAIR_INDICES)

    return vertices, indices


def ui_transform(window_width: float, window_height: float) -> list[float]:
    """Column-major 4x4 matrix mapping window coordinates to clip space.

    (0, 0) goes to the top-left corner (-1, 1), (width, height) to (1, -1),
    and depth z to 0.5 * z + 0.5.
    """
    return [
        2.0 / window_width, 0.0, 0.0, 0.0,
        0.0, -2.0 / window_height, 0.0, 0.0,
        0.0, 0.0, 0.5, 0.0,
        -1.0, 1.0, 0.5, 1.0,
    ]