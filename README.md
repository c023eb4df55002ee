# quadlite

Small, dependency-free building blocks for the logic side of a game:
colors, 2D geometry, shader `#include` expansion, a type-keyed store,
sprite-sheet animation, a pan-and-zoom camera, input state tracking,
file loading and a lightweight profiler.

## Install

```
pip install quadlite
```

For running the tests:

```
pip install "quadlite[test]"
pytest
```

## Modules

- `quadlite.color` – `Color` (frozen dataclass with float `r`, `g`, `b`, `a`),
  `Color.from_rgba`, `Color.from_bytes`, `Color.to_bytes`, `Color.to_tuple`,
  `color_u8`, `hsl_to_rgb`, `rgb_to_hsl`, and named constants such as
  `RED`, `BLUE`, `WHITE`, `BLACK` and `BLANK`.
- `quadlite.geometry` – `Vec2`, `Rect`, `RectOffset`, `Circle`,
  `polar_to_cartesian`, `cartesian_to_polar`, `clamp`.
- `quadlite.shaders` – `preprocess_shader` replaces every `#include "name"`
  with content from a `PreprocessorConfig`; malformed directives and unknown
  names raise `ShaderPreprocessError`.
- `quadlite.storage` – `Storage` keeps one value per type; module-level
  `store`, `get` (raises `KeyError` when missing) and `try_get` (returns
  `None`) use a shared default store.
- `quadlite.animation` – `Animation`, `AnimationFrame` and `AnimatedSprite`,
  which steps through a sprite-sheet row as `update(dt)` is called.
- `quadlite.mouse_camera` – `MouseCamera` with `offset` and `scale`,
  zooming around a point (`scale_wheel`, `scale_mul`, `scale_new`) and
  panning with the mouse (`update`).
- `quadlite.telemetry` – `Profiler` records nested `Zone`s per `Frame`
  (`begin_zone`/`end_zone` or the `zone` context manager), finishes frames
  with `reset`, and logs strings, including block timings via `log_time`.
  `enable` and `disable` take effect at the next `reset`.
- `quadlite.input` – `InputState` is fed window events
  (`key_down_event`, `mouse_button_down_event`, `touch_event`, ...) and
  answers queries (`is_key_pressed`, `mouse_position_local`, `touches`, ...).
  `end_frame` clears per-frame state. Subscribers registered with
  `register_input_subscriber` get events replayed by `repeat_all_input`.
- `quadlite.files` – `FileLoader` reads files, optionally under an assets
  folder set with `set_pc_assets_folder`; failures raise `FileError`.
  Module-level `load_file`, `load_string` and `set_pc_assets_folder` use a
  shared default loader.

## Example

```python
from quadlite.color import color_u8, rgb_to_hsl
from quadlite.geometry import Rect, Vec2

red = color_u8(255, 0, 0, 255)
print(rgb_to_hsl(red))            # (0.0, 1.0, 0.5)

box = Rect(0, 0, 10, 10)
print(box.contains(Vec2(5, 5)))   # True
print(box.intersect(Rect(5, 5, 10, 10)))  # Rect(x=5, y=5, w=5, h=5)
```

Tracking input over a frame:

```python
from quadlite.input import InputState, MouseButton

state = InputState(screen_width=800, screen_height=600)
state.key_down_event("space", None, False)
state.mouse_button_down_event(MouseButton.LEFT, 400, 300)

print(state.is_key_pressed("space"))        # True
print(state.mouse_position_local())         # Vec2(x=0.0, y=0.0)

state.end_frame()
print(state.is_key_pressed("space"))        # False
print(state.is_key_down("space"))           # True
```

Profiling a frame:

```python
from quadlite.telemetry import Profiler

profiler = Profiler()
profiler.enable()
profiler.reset(1 / 60)          # enabling applies from here on

with profiler.zone("update"):
    pass
profiler.reset(1 / 60)
print([zone.name for zone in profiler.frame().zones])  # ['update']
```

## What this package does not do

It draws nothing: there is no window, renderer, texture or material
handling, and `InputState` must be fed events by whatever windowing layer
you use. There is no frame loop or coroutine scheduler, no scene graph of
nodes and no state machine; the pieces here are meant to be driven by your
own loop, passing in frame times (`AnimatedSprite.update(dt)`,
`Profiler.reset(frame_time)`) explicitly. File loading reads local files
only.