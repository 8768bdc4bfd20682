[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "voxelclient"
version = "0.1.0"
description = "Client-side logic for a voxel game: input, settings, frustum culling, buffer allocation, meshing and an immediate-mode GUI"
requires-python = ">=3.11"
keywords = ["voxel", "game", "meshing", "frustum", "gui", "ambient-occlusion"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]
dependencies = [
    "numpy",
    "tomli-w",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["voxelclient"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py311"
