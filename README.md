# halloween_ninja

The game logic behind a small side-scrolling Halloween platformer, kept apart
from any graphics or audio back end so that it can be driven and tested on
its own. It has no dependencies outside the standard library.

## Modules

- `halloween_ninja.checks`: `check` and `check_throw` raise `CheckError` with a
  description of the failed condition and where it happened; `check_log` only
  logs it and returns whether the condition held; `log` logs a message with
  the caller's position. Everything goes through the `logging` module.
- `halloween_ninja.rng`: `Random(seed=None)`, a Mersenne Twister that records
  its seed and skips its first outputs. `from_to` returns a value in an
  inclusive range (bounds in either order, ints give ints, floats give
  floats); also `zero_to`, `zero_to_one_less_than`, `boolean`, `index`,
  `choice` and `shuffle`. `index` and `choice` raise `ValueError` on an
  empty container.
- `halloween_ninja.sliders`: sine-based motion. `SliderRatio` moves from 0 to
  1, `SliderFromTo` moves from `start` to `end` and stops,
  `SliderOscillator` moves back and forth forever, and `SliderDrift` moves
  between random places in a range at random speeds. `is_real_close`
  compares numbers allowing float rounding.
- `halloween_ninja.regions`: `Rect` (with `right`, `bottom`, `center`,
  `floored()` and `intersects()`) and `ScreenRegions`, whose `setup(window_size)`
  splits the window into an info bar 7.5% of the height tall and the map
  region below it.
- `halloween_ninja.drifter`: `PositionDrifter`, which drifts a point around
  inside a `Rect`.
- `halloween_ninja.sound_player`: `SoundPlayer` finds `.ogg`, `.flac` and
  `.wav` files under `media_path` and plays one picked at random among those
  whose file name starts with the given name. It handles looping, stopping,
  volume (`set_volume`, `volume_down` by 10, `volume_up`, which unmutes and
  sets the volume to 10) and `mute_button`. Loading goes through a `loader`
  callable; the default, `load_sound`, reads the file's bytes into a `Sound`.
- `halloween_ninja.states`: the `State` enum, `Event`, `EventKind` and `Key`,
  and the states `StartState`, `TitleState`, `PauseState`, `LoseState`,
  `WinState` and `QuitState`, built on `StateBase` and `TimedMessageState`.
  They handle quitting (window closed, Q, Escape), minimum display times and
  moving on to their next state.
- `halloween_ninja.state_machine`: `StateMachine` holds the current state and
  switches only in `change_if_pending(context)`. Factories for further states
  are added with `register(state, factory)` or passed to the constructor.
- `halloween_ninja.level_complete`: `compute_bonuses` and
  `LevelCompleteState`, which waits, counts the displayed score up and awards
  the bonuses one at a time before moving on to play.
- `halloween_ninja.stats_display`: `GraphLayout` and the helpers
  `half_size`, `reduce_to_width`, `data_bar_width`, `data_bar_rects` and
  `average_line_height`, which compute the bars and average line of a bar
  graph of a data set.

## Installing

```
pip install .
pip install ".[test]"
```

## Example

```python
from types import SimpleNamespace

from halloween_ninja.rng import Random
from halloween_ninja.sliders import SliderOscillator
from halloween_ninja.state_machine import StateMachine
from halloween_ninja.states import State

random = Random(seed=42)
print(random.from_to(1, 6))

slider = SliderOscillator(0.0, 100.0, 2.0, 0.0)
for _ in range(10):
    print(slider.update(0.1))


class Audio:
    def play(self, name, pitch=1.0):
        print("play", name)


machine = StateMachine()
context = SimpleNamespace(audio=Audio(), state=machine)
machine.change_if_pending(context)  # enters the start state
machine.change_if_pending(context)  # the start state has asked for the title
assert machine.state_enum is State.TITLE
```

States hand their work to a context object: it needs a `state` attribute
(normally the `StateMachine`) and, depending on the state, `audio`,
`info_region`, `stats`, `pause_screen`, `window`, `level_number` and
`will_quit`.

## What this package does not do

- It draws nothing and opens no window: texts, sprites and graphs exist only
  as strings, rectangles and colours for a renderer to use.
- `Sound` only records playback state (volume, pitch, looping, playing); no
  audio is output.
- The state machine makes only the start, title, pause, lose, win and quit
  states by itself. Play, level-complete and credits states, and level
  loading, are not provided as defaults; `make_state` raises `CheckError`
  for a state with no registered factory.
- There is no command to run the game.

## Running the tests

```
pytest
```