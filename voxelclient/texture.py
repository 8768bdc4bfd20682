"""Mipmap generation for square RGBA textures."""

from __future__ import annotations

import numpy as np

MIPMAP_LEVELS = 5


def generate_mipmaps(pixels: bytes, size: int) -> list[bytes]:
    """Return up to ``MIPMAP_LEVELS`` RGBA levels, each a 2x2 box-filtered half of the last.

    ``pixels`` is a square ``size`` x ``size`` RGBA8 image. Generation stops early
    once a level would have zero size.
    """
    if size <= 0 or len(pixels) != size * size * 4:
        raise ValueError("only square RGBA images are allowed")
    levels = [bytes(pixels)]
    previous = np.frombuffer(pixels, dtype=np.uint8).reshape(size, size, 4).astype(np.uint16)
    for level in range(1, MIPMAP_LEVELS):
        current = size >> level
        if current == 0:
            break
        block = previous[: 2 * current, : 2 * current]
        summed = (
            block[0::2, 0::2] + block[0::2, 1::2] + block[1::2, 0::2] + block[1::2, 1::2]
        )
        previous = summed // 4
        levels.append(previous.astype(np.uint8).tobytes())
    return levels