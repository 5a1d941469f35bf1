# rayshooter

Building blocks for the client of a grid-based first-person shooter. The core is a
software raycaster. It draws walls and billboard sprites into an RGBA pixel buffer held in
memory. Alongside it are texture sampling, directional sprite animation, keyboard and mouse
input handling, and the layout of the HUD and the minimap.

## Modules

- `rayshooter.pixels` provides `Pixels`, a width × height grid of 8-bit RGBA tuples stored
  column by column. A new buffer starts black. It has `set_color`, `blend_color`,
  `get_color`, `clear`, `clear_with(f(x, y))`, `clear_with_column(f(y))`, `column(x)`,
  which returns a mutable list, `columns()`, `dimensions()` and `to_bytes()`. The bytes
  come out column after column. The module also has `blend_color_u8(back, front)`: a
  fully transparent `front` leaves `back` as it is, and any other `front` replaces it.
- `rayshooter.helpers` provides `as_arrays(seq, length)`, which groups a flat sequence into
  tuples, and `flat_arrays(arrays)`, which flattens them again.
- `rayshooter.sampler` provides `TextureSampler`. You build one from a Pillow image, from
  encoded image bytes (`from_bytes`), or as a row-major list of tiles cut from a sheet
  (`from_tiles(tiles_x, tiles_y, gap, data)`). It samples by UV (`sample`) or by pixel
  (`sample_exact`), and both wrap around the edges. `sample_column` and
  `sample_column_exact` sample a whole stretched column. Each texture computes a
  `dominant` colour, which `with_dominant` replaces in a copy. `original_image()` rebuilds
  the image.
- `rayshooter.perspective` provides `Perspective`, a frozen vertical offset plus horizon
  height. It has `from_angle`, `offset_camera` and `offset_subject`.
- `rayshooter.draw_column` provides `calculate_perspective`, `draw_texture_column` and
  `draw_color_column`. They draw a strip of a given height into one screen column and
  pass each pixel through a callback `(current, new) -> color`.
- `rayshooter.ray_gen` provides `RayGenerator`, which holds one unit ray per screen column.
  Build it from a projection distance, or from a field of view with `from_fov`.
- `rayshooter.walls` provides the map and the ray marching:
  - the map types `GridMap`, `SolidWall` and `TexturedWall`;
  - `ray_algorithm`, which returns a `Hit` with a `HitSide`, or `None` when nothing lies
    within `MAX_VIEW_DISTANCE`;
  - `darken`, which gives the side-wall shading;
  - `wall_x`, the texture coordinate along the face that was hit.
- `rayshooter.sprites` provides `Sprite`, a camera-facing textured billboard with a scale
  and a height offset.
- `rayshooter.raycast` provides `RayCaster`. `draw_walls` draws the walls and records a
  depth and a minimap ray point for each column (`depth_map`, `minimap_rays`).
  `draw_sprites` sorts the sprites far to near and draws them wherever no wall is closer.
  Call it after `draw_walls`; if you do not, it raises `RuntimeError`.
- `rayshooter.animated_texture` provides `AnimatedTexture`, which holds named animations
  over a sprite sheet. Add them with `register_state`. It also provides
  `AnimatedTextureState`. `get_sprite(look_angle, elapsed)` moves the animation forward in
  time and picks the frame for the viewing direction. `set_state` switches to another
  animation.
- `rayshooter.input` provides `InputHandler`, `InputState`, `Key`, `MouseButton` and
  `lerp`. The handler works on key presses and releases (`handle_key`) and mouse clicks
  (`handle_click`), and turns on mouse movement only while the mouse is locked
  (`apply_mouse_delta`). It also turns on held arrow keys, through `tick(dt, pressed_keys)`.
  `take_state()` returns the state only when it has changed since the last call.
- `rayshooter.gameui` provides `GameUI` and `GameUiState`. Their methods lay out the HUD as
  `Rect` values, with colours as float RGBA:
  - `health_color()` runs from green through yellow to red;
  - `health_rects(height)` gives the health bar, its shading and its border;
  - `ammo_text()` gives the counter, or `∞` when the weapon has no ammunition limit;
  - `ammo_bars(width, height)` gives the round indicators.
- `rayshooter.minimap` provides `Minimap`. `render_map()` paints a grid map into a `Pixels`
  buffer, eight pixels per cell, and outlines each wall cell in black. `translate` and
  `border_rect` give the map's place at the top right of the screen.
  `vision_polygon` and `entity_rect` give the field-of-view outline and the entity markers
  in screen coordinates.
- `rayshooter.errorwindow` provides `ErrorWindows`, a list of `ErrorWindow` messages with
  rising ids. It has `add_error`, `close` and `remove_closed`.

## Example

```python
from rayshooter.pixels import Pixels
from rayshooter.raycast import RayCaster
from rayshooter.walls import GridMap, SolidWall

wall = SolidWall((200, 40, 40, 255))
rows = (
    [[wall] * 8]
    + [[wall] + [None] * 6 + [wall] for _ in range(6)]
    + [[wall] * 8]
)
grid = GridMap(rows)

pixels = Pixels(320, 200)
caster = RayCaster(320, 200, 70.0)

pixels.clear_with_column(lambda y: (110, 110, 190, 255) if y <= 100 else (90, 90, 90, 255))
perspective = caster.perspective(0.0, 0.65, 0.0)
caster.draw_walls(pixels, (2.5, 2.5), (1.0, 0.0), perspective, grid)

frame = pixels.to_bytes()  # RGBA bytes, column by column
```

## What it does not do

The package never opens a window and never shows anything on screen. It reads no device
input of its own, and it has no networking, no server, no game loop and no command-line
program. The application that uses it has to put the pixel buffer and the HUD and minimap
geometry on screen. It also has to feed key and mouse events to `InputHandler`, and keep
the game world in step.

## Installation

```
pip install .
```

## Running the tests

```
pip install .[test]
pytest
```