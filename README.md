# coinfall

A small arcade game: silver coins and asteroids fall from the top of a
240 × 320 screen while the player steers a ship towards the point being
touched. Catching a coin plays a chime, running into an asteroid plays a
thud.

The display, the touch panel and the buzzer are all in-memory models, so
the game can be driven, inspected and tested without any hardware.

## What is inside

| Module               | What it gives you                                                          |
|----------------------|----------------------------------------------------------------------------|
| `coinfall.game`      | `Game` and `FallingObject`: the frame loop, spawning, falling and hits     |
| `coinfall.sprite`    | `Sprite`: an RGB565 bitmap with a position and a box collider              |
| `coinfall.collider`  | `SquareCollider`: axis-aligned rectangle overlap test                      |
| `coinfall.vector2d`  | `Vector2D`: a mutable 2-D point supporting `+=`, `-=` and `*=`             |
| `coinfall.assets`    | the player, silver coin and asteroid bitmaps and their sizes               |
| `coinfall.screen`    | `FrameBuffer` (an RGB565 pixel canvas) and `Screen` (canvas plus touch)    |
| `coinfall.touch`     | `TouchController` and `TouchBus`: touch sampling, averaging, calibration   |
| `coinfall.audio`     | `Note`, `pwm_wrap`, `PwmDriver` and `AudioChannel` with its sound effects  |
| `coinfall.utilities` | `PseudoRandom`, `crc32` and its incremental helpers, `nibble_to_hex_char`  |

## Playing a few frames

```python
from coinfall.game import Game

game = Game(sleep_ms=lambda ms: None, clock_ms=lambda: 0)
game.init()
game.start()
game.run(120)      # update and render 120 frames
```

`Game.update()` advances one frame and `Game.render()` draws the player;
`Game.run(frames)` does both `frames` times, or forever when given
`None`. By default the game sleeps for real (1 s in `init()`, 16 ms per
frame, and for the length of each sound) and reads a monotonic
millisecond clock; pass `sleep_ms` and `clock_ms` to control time.

Coins spawn at most every 400 ms and asteroids every 50 ms, from pools of
5 and 10. Everything drawn ends up in `game.screen.display`, a
`FrameBuffer` whose colours can be read with `pixel(x, y)`.

## Touch input

The touch panel answers from `TouchBus.readings`, a mapping from command
byte to the raw sample reported, and counts as pressed while
`irq_level` is 0:

```python
from coinfall.screen import Screen
from coinfall.touch import COMMAND_X, COMMAND_Y, TouchBus, TouchController

bus = TouchBus(readings={COMMAND_X: 2000, COMMAND_Y: 2000})
bus.irq_level = 0
screen = Screen(touch=TouchController(bus))
print(screen.read_touch())   # (x, y) on screen, or None
```

`raw_to_screen_x` and `raw_to_screen_y` apply the calibration; each
reading averages five samples.

## Sprites and collisions

```python
from coinfall.assets import PLAYER_SPRITE, PLAYER_WIDTH, PLAYER_HEIGHT
from coinfall.sprite import Sprite

ship = Sprite(PLAYER_SPRITE, PLAYER_WIDTH, PLAYER_HEIGHT)
ship.set_position(120, 280)
ship.move(5, -5)
```

Pixels equal to the transparent colour (0x0000 by default) are skipped
by `draw()` and `draw_scaled()`. Two sprites collide when their
rectangles overlap; touching edges do not count.

## Sound

`AudioChannel` turns notes and tones into settings on a `PwmDriver`,
which records its state and a log of operations in `events`.
`pwm_wrap(frequency)` gives the counter wrap value for a frequency on a
125 MHz clock with a divider of 16. Effects such as `play_coin()`,
`play_hit()`, `play_jump()` and `play_victory()` are sequences of tones
or `Note` values with durations in milliseconds; `play_melody(notes,
durations)` plays any sequence of equal length.

## Checksums and random numbers

```python
from coinfall.utilities import crc32, crc32_init, crc32_update, crc32_finalize

assert crc32(b"123456789") == 0xCBF43926
crc = crc32_update(crc32_init(), b"12345")
crc = crc32_update(crc, b"6789")
assert crc32_finalize(crc) == 0xCBF43926
```

`PseudoRandom` is a small linear congruential generator that gives the
same sequence for the same seed on every platform.

## What it does not do

- There is no window and no audio output: frames go to the in-memory
  `FrameBuffer` and tones to the in-memory `PwmDriver`.
- There is no command to start the game; it is driven from Python.
- There is no score or lives count: catching coins and hitting asteroids
  only removes the object and plays a sound.