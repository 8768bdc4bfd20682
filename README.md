# voxelclient

voxelclient holds the logic of a voxel game client. It does not need a windowing system or a GPU. Every part works on plain Python and numpy data.

## What it contains

- **`voxelclient.input`**
  - `InputState` records the state of keys and mouse buttons.
  - Pressing `TOGGLE_FLIGHT` again while it is held toggles flight. `TOGGLE_CULLING` toggles chunk culling the same way.
  - `get_physics_input` returns a `PlayerInput` built from the movement keys.
  - `YawPitch.update_cursor` turns mouse motion into a new yaw and pitch. The yaw wraps to stay within [-180, 180]. The pitch is clamped to [-90, 90].
- **`voxelclient.fps`**
  - `FpsCounter` counts the frames of the last two seconds.
  - `add_frame` takes an optional monotonic timestamp.
- **`voxelclient.settings`**
  - `load_settings(folder, file)` reads a TOML settings file. When the file is missing, it creates the folder and writes the defaults from `Settings`.
  - `write_settings` saves a `Settings` object.
  - Errors while reading, parsing or writing raise `SettingsError`.
- **`voxelclient.texture`**
  - `generate_mipmaps(pixels, size)` returns up to five RGBA levels. Each level averages 2×2 pixel blocks of the level before it.
  - Generation stops early when a level would have zero size.
- **`voxelclient.frustum`**
  - `Frustum` builds the view matrix, the view/projection matrix and the frustum planes. `Plane.dist` gives the signed distance from a point to a plane.
  - `contains_chunk` is a conservative visibility test for chunks. It can report a chunk as visible when it is not.
- **`voxelclient.buffers`**
  - `MultiBuffer` is a segment allocator. It stores several keyed runs of elements and merges adjacent free space. It doubles its capacity when nothing fits.
  - `check_invariants` verifies the segment bookkeeping.
  - `DynamicBuffer` grows to hold whatever is uploaded to it.
- **`voxelclient.skybox`**
  - `create_skybox()` returns the vertices and triangle indices of the skybox cube.
- **`voxelclient.target`**
  - `create_target_vertices(face)` returns line-list vertices that outline one face of the block being pointed at.
- **`voxelclient.model`**
  - `mesh_model` meshes a `VoxelModel` into `RgbVertex` quads. Each quad gets per-corner ambient occlusion.
  - `ambient_occlusion` gives the occlusion level of a single corner.
  - `Model` describes where to draw a model and how to scale and rotate it.
- **`voxelclient.gui`**
  - `Gui` is an immediate-mode GUI with buttons and text. It tracks which widget is hot and which is active, and collects drawing primitives into a `PrimitiveBuffer`.
- **`voxelclient.ui_geometry`**
  - `build_ui_geometry` turns GUI rectangles, triangle meshes and an optional crosshair into `UiVertex` lists and index lists.
  - `ui_transform` maps window coordinates to clip space.
- **`voxelclient.world_renderer`**
  - `WorldMeshes` stores chunk and model meshes in `MultiBuffer`s. It reports which chunks are visible through a frustum. It also gives the draw range of each mesh as (first index, end index, base vertex).
  - `opengl_to_wgpu_view_projection`, `model_matrix` and `translation_matrix` compute the matrices used for drawing.

## Installation

```
pip install .
```

## Examples

```python
from voxelclient.buffers import MultiBuffer

buf = MultiBuffer(10)
buf.update(1, [5, 6, 7, 8])
buf.update(2, [5, 6, 7, 8])
print(buf.get_pos_len(2))  # (4, 4)
buf.remove(1)
print(buf.get_pos_len(1))  # None
```

```python
from voxelclient.gui import Gui

gui = Gui()
gui.update_mouse_position(10, 10)
gui.prepare()
clicked = gui.button(0, 0, 0, 100, 20).text("Hello", (1.0, 1.0, 1.0, 1.0)).build()
gui.finish()
primitives = gui.drain_primitives()
```

## What it does not do

The package computes data only. It leaves out the following:

- It opens no window and draws nothing on screen.
- It does not talk to a GPU and does not render text with fonts.
- It has no network connection to a game server.
- It provides no command that starts a game.

The vertices, indices and matrices it produces are meant to be handed to a renderer that you supply.

## Running the tests

```
pip install .[test]
pytest
```