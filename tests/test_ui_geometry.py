import numpy as np
import pytest

from voxelclient.gui import Gui, PrimitiveBuffer, TrianglesPrimitive
from voxelclient.ui_geometry import (
    CROSSHAIR_COLOR,
    CROSSHAIR_INDICES,
    UiVertex,
    build_ui_geometry,
    ui_transform,
)

RED = (1.0, 0.0, 0.0, 1.0)


def test_empty_buffer_without_crosshair():
    assert build_ui_geometry(PrimitiveBuffer(), 800, 600, False) == ([], [])


def test_rectangle_becomes_two_triangles():
    buffer = PrimitiveBuffer()
    buffer.draw_rect(10, 20, 30, 40, RED, 0.5)
    vertices, indices = build_ui_geometry(buffer, 800, 600, False)
    assert [v.position for v in vertices] == [
        (10, 20, 0.5),
        (10 + 30, 20, 0.5),
        (10, 20 + 40, 0.5),
        (10 + 30, 20 + 40, 0.5),
    ]
    assert all(v.color == RED for v in vertices)
    assert indices == [1, 0, 2, 1, 2, 3]


def test_second_rectangle_indices_are_offset():
    buffer = PrimitiveBuffer()
    buffer.draw_rect(0, 0, 1, 1, RED, 0.0)
    buffer.draw_rect(5, 5, 1, 1, RED, 0.0)
    vertices, indices = build_ui_geometry(buffer, 800, 600, False)
    assert len(vertices) == 8
    assert indices[6:] == [i + 4 for i in indices[:6]]


def test_triangles_follow_rectangles_with_offset_indices():
    buffer = PrimitiveBuffer()
    buffer.draw_rect(0, 0, 1, 1, RED, 0.0)
    mesh = TrianglesPrimitive(
        vertices=((0.0, 0.0, 0.0), (1.0, 0.0, 0.0), (0.0, 1.0, 0.0)),
        indices=(0, 1, 2),
        color=RED,
    )
    buffer.triangles.append(mesh)
    vertices, indices = build_ui_geometry(buffer, 800, 600, False)
    assert vertices[4:] == [UiVertex(p, RED) for p in mesh.vertices]
    assert indices[6:] == [4, 5, 6]


def test_crosshair_is_centered_and_appended_last():
    buffer = PrimitiveBuffer()
    buffer.draw_rect(0, 0, 1, 1, RED, 0.0)
    vertices, indices = build_ui_geometry(buffer, 800, 600, True)
    cross = vertices[4:]
    assert len(cross) == 8
    assert all(v.color == CROSSHAIR_COLOR for v in cross)
    assert all(v.position[2] == -1.0 for v in cross)
    xs = [v.position[0] for v in cross]
    ys = [v.position[1] for v in cross]
    assert (min(xs) + max(xs)) / 2 == 800 / 2
    assert (min(ys) + max(ys)) / 2 == 600 / 2
    assert indices[6:] == [i + 4 for i in CROSSHAIR_INDICES]


def test_crosshair_bars_are_transposes_of_each_other():
    vertices, _ = build_ui_geometry(PrimitiveBuffer(), 400, 400, True)
    vertical = [v.position[:2] for v in vertices[:4]]
    horizontal = [v.position[:2] for v in vertices[4:]]
    assert sorted((y, x) for x, y in vertical) == sorted(horizontal)


def test_geometry_from_gui_button():
    gui = Gui()
    gui.update_mouse_position(-100, -100)
    gui.prepare()
    gui.button(0, 10, 10, 50, 20).build()
    vertices, indices = build_ui_geometry(gui.drain_primitives(), 800, 600, False)
    assert len(vertices) == 8
    assert len(indices) == 12
    assert max(indices) == len(vertices) - 1


@pytest.mark.parametrize(
    "point, expected",
    [
        ((0.0, 0.0, 0.0), (-1.0, 1.0, 0.5)),
        ((800.0, 600.0, 1.0), (1.0, -1.0, 1.0)),
        ((400.0, 300.0, -1.0), (0.0, 0.0, 0.0)),
    ],
)
def test_ui_transform_maps_window_to_clip_space(point, expected):
    matrix = np.array(ui_transform(800, 600)).reshape(4, 4).T
    result = matrix @ np.array([*point, 1.0])
    assert result[:3] == pytest.approx(expected)
    assert result[3] == pytest.approx(1.0)


def test_ui_transform_has_sixteen_entries():
    assert len(ui_transform(1600, 900)) == 16