"""Outline geometry for the block the player points at."""

from __future__ import annotations

from dataclasses import dataclass

FACE_OFFSET = 0.001
INNER_HIGH = 0.999
INNER_LOW = 0.001


@dataclass(frozen=True)
class SkyboxVertex:
    """A vertex holding only a position."""

    position: tuple[float, float, float]


def _vertex(coords: list[int], face: int) -> SkyboxVertex:
    position = [float(c) for c in coords]
    for axis in range(3):
        if axis == face // 2:
            position[axis] += FACE_OFFSET if face % 2 == 0 else -FACE_OFFSET
        else:
            position[axis] = INNER_HIGH if position[axis] == 1.0 else INNER_LOW
    return SkyboxVertex(tuple(position))


def create_target_vertices(face: int) -> list[SkyboxVertex]:
    """Line-list vertices outlining ``face`` (0..5) of the unit block."""
    if not 0 <= face < 6:
        raise ValueError(f"face must be in 0..5, got {face}")
    end = [1 if face == 2 * axis + 1 else 2 for axis in range(3)]
    start = [1 if face == 2 * axis else 0 for axis in range(3)]
    vertices: list[SkyboxVertex] = []
    for i in range(start[0], end[0]):
        for j in range(start[1], end[1]):
            for k in range(start[2], end[2]):
                coords = [i, j, k]
                for axis in range(3):
                    if coords[axis] > start[axis]:
                        first = _vertex(coords, face)
                        coords[axis] = 0
                        second = _vertex(coords, face)
                        coords[axis] = 1
                        vertices.extend((first, second))
    return vertices