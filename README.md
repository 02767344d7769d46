# viper

A small 2D game engine built on pygame, and a top-down space shooter that
runs on it.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Playing

```
viper
```

The `viper` command calls `viper.main.main()`. It first changes into an
`Assets` directory below the current working directory. If that fails, the
error is logged and it carries on in the current directory. It then opens a
1280×1024 window and loads the following from the working directory:

- fonts: `ka1.ttf`, `ka2.ttf`
- images: `blue_01.png`, `blue_rocket.png`, `red_rocket.png`,
  `large_red_01.png`, `sexy-squidward.png`
- sounds: `bass.wav`, `snare.wav`, `open-hat.wav`, `clap.wav`,
  `cowbell.wav`, `close-hat.wav`, `arcade-fx-288597.mp3`,
  `Yoshi's Island OST - Athletic.mp3`, `game-music-alien-71795.mp3`

If a font or image cannot be loaded, `viper.resources.ResourceError` is
raised. If a sound cannot be loaded, the error is logged and that sound stays
silent. Only error-level messages are printed while the game runs.

Controls:

- `Space`: start a game from the title screen
- `W` / `S`: thrust forward / backward
- `A` / `D`: rotate left / right
- `F`: fire a rocket, at most once every 0.2 s
- `Escape` or closing the window: quit

You start with three lives. Every four seconds an enemy appears 200 to 500
pixels from your ship. Enemies accelerate forward, turn towards you when you
are inside their view cone and fire once a second while they see you.
Destroying an enemy is worth 100 points. After you lose a ship there is a
two-second pause before the next round. When your last life is gone, the
game-over screen shows for three seconds and the game returns to the title.
Ships and rockets wrap around the screen edges.

## The engine

The modules of the `viper` package can also be used on their own.

- `viper.vector`: `Vector2` and `Vector3`, which are mutable and take vector
  or scalar arithmetic, and `Transform` (position, rotation in degrees,
  scale).
- `viper.mathutil`: `deg_to_rad`, `rad_to_deg`, `wrap` (into `[low, high)`)
  and `sign`. The constant `PI` is 3.14.
- `viper.rand`: a shared generator (`generator`, `seed`) with `random_int`,
  `random_float`, `real`, `random_bool` and `on_unit_circle`.
- `viper.timer`: `Time`, a frame clock with `time`, `delta_time`, `tick()`
  and `reset()`. The clock function can be injected.
- `viper.logger`: `Logger` with `LogLevel` flags (`set_enabled_levels`,
  `log`, `info`, `warning`, `error`, `debug`). It writes coloured lines to
  standard output.
- `viper.strings`: ASCII `to_lower` and `to_upper`.
- `viper.file`: small filesystem helpers (`get_current_directory`,
  `set_current_directory`, `get_extension`, `get_filename`, `exists`,
  `get_files_in_directory`, `get_directories_in`, `read_text_file`,
  `write_text_file`).
- `viper.actor`: the abstract `Actor`. It handles movement, damping and
  lifespan, draws from a model or a texture, and gives a collision radius.
- `viper.scene`: `Scene`. It updates actors, drops destroyed ones, tests
  collisions by texture radius and finds actors by name or tag.
- `viper.game`: the abstract `Game`, which holds score, lives and a scene.
- `viper.resources`: `Resource` and `ResourceManager`, which caches loaded
  resources under case-insensitive ids. `resources()` returns the shared
  manager.
- `viper.input`: `InputSystem` and `MouseButton`. They keep this frame's and
  the previous frame's key and mouse state, so presses and releases can be
  detected. `update()` takes the state as arguments or reads it from pygame.
- `viper.audio`: `AudioSystem`, which holds named sounds. It plays them
  through pygame's mixer, or through another backend you pass in.
- `viper.particles`: `Particle` and the pooled `ParticleSystem`.
- `viper.model`: `Model`, a coloured polyline drawn with a transform.
- `viper.renderer`: `Renderer`, which draws on a window or any given
  surface, and `Texture`.
- `viper.text`: `Font` and `Text`.
- `viper.engine`: `Engine`, which owns the renderer, input, audio, particles
  and time. `get_engine()` and `get_renderer()` return the shared instance
  and its renderer.
- `viper.player`, `viper.enemy`, `viper.rocket`, `viper.spacegame`,
  `viper.gamedata`: the space shooter itself.

A short example:

```python
from viper.vector import Vector2
from viper.mathutil import wrap

velocity = Vector2(3.0, 4.0)
print(velocity.length())        # 5.0
print(wrap(370.0, 0.0, 360.0))  # 10.0
```

## What it does not do

- No asset files are shipped. The fonts, images and sounds listed above must
  be supplied in the `Assets` directory.
- The music tracks are loaded but never played.
- Scores are not saved between runs.