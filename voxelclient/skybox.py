"""Geometry of the skybox cube."""

from __future__ import annotations

FAR = 900.0

MESH_INDEX = (0, 1, 2, 3, 2, 1)

EAST = ((FAR, -FAR, -FAR), (FAR, -FAR, FAR), (FAR, FAR, -FAR), (FAR, FAR, FAR))
WEST = ((-FAR, -FAR, -FAR), (-FAR, -FAR, FAR), (-FAR, FAR, -FAR), (-FAR, FAR, FAR))
UP = ((-FAR, FAR, -FAR), (-FAR, FAR, FAR), (FAR, FAR, -FAR), (FAR, FAR, FAR))
DOWN = ((-FAR, -FAR, -FAR), (-FAR, -FAR, FAR), (FAR, -FAR, -FAR), (FAR, -FAR, FAR))
SOUTH = ((-FAR, -FAR, FAR), (-FAR, FAR, FAR), (FAR, -FAR, FAR), (FAR, FAR, FAR))
NORTH = ((-FAR, -FAR, -FAR), (-FAR, FAR, -FAR), (FAR, -FAR, -FAR), (FAR, FAR, -FAR))

FACES = (EAST, WEST, UP, DOWN, SOUTH, NORTH)


def create_skybox() -> tuple[list[tuple[float, float, float]], list[int]]:
    """Return the skybox vertex positions and triangle indices."""
    vertices = [corner for face in FACES for corner in face]
    indices = [index + 4 * face for face in range(len(FACES)) for index in MESH_INDEX]
    return vertices, indices