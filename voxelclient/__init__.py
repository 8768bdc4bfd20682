"""Voxel game client logic: input, settings, mipmaps, culling, buffers, meshing and GUI."""

__version__ = "0.1.0"