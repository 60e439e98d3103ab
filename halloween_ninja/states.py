"""Game states: the screens the game moves through and how they react to input."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Optional

DEFAULT_MIN_DURATION_SEC = 1.5
TEXT_COLOR_DEFAULT = (220, 220, 220)


class State(enum.Enum):
    """Every state the game can be in."""

    START = 0
    TITLE = 1
    PLAY = 2
    PAUSE = 3
    LEVEL = 4
    LOSE = 5
    WIN = 6
    CREDITS = 7
    QUIT = 8

    def __str__(self) -> str:
        return self.name.capitalize()


class EventKind(enum.Enum):
    """Kinds of window and input events."""

    CLOSED = enum.auto()
    RESIZED = enum.auto()
    KEY_PRESSED = enum.auto()
    KEY_RELEASED = enum.auto()
    MOUSE_MOVED = enum.auto()
    MOUSE_ENTERED = enum.auto()
    MOUSE_LEFT = enum.auto()
    MOUSE_BUTTON_PRESSED = enum.auto()
    MOUSE_BUTTON_RELEASED = enum.auto()
    FOCUS_GAINED = enum.auto()
    FOCUS_LOST = enum.auto()
    TOUCH_BEGAN = enum.auto()
    TOUCH_ENDED = enum.auto()
    TOUCH_MOVED = enum.auto()


class Key(enum.Enum):
    """Keys the states care about."""

    Q = enum.auto()
    S = enum.auto()
    SPACE = enum.auto()
    ESCAPE = enum.auto()
    ENTER = enum.auto()
    OTHER = enum.auto()


@dataclass(frozen=True)
class Event:
    """One window or input event; *key* is set for keyboard events."""

    kind: EventKind
    key: Optional[Key] = None


_IGNORED_EVENT_KINDS = frozenset(
    {
        EventKind.KEY_RELEASED,
        EventKind.MOUSE_MOVED,
        EventKind.MOUSE_ENTERED,
        EventKind.MOUSE_LEFT,
        EventKind.MOUSE_BUTTON_RELEASED,
        EventKind.FOCUS_GAINED,
        EventKind.FOCUS_LOST,
        EventKind.TOUCH_BEGAN,
        EventKind.TOUCH_ENDED,
        EventKind.TOUCH_MOVED,
    }
)


class StateBase:
    """Common behaviour: elapsed time, quit handling and moving on to the next state.

    The context handed to the methods needs a ``state`` attribute offering
    ``is_change_pending()`` and ``set_change_pending(state)``.
    """

    def __init__(
        self,
        state: State,
        next_state: State,
        min_duration_sec: float = -1.0,
        message: str = "",
    ) -> None:
        self._state = state
        self._next_state = next_state
        self.elapsed_time_sec = 0.0
        # any value that is not positive means there is no minimum duration
        self.min_duration_sec = min_duration_sec
        self.message = message

    @property
    def state(self) -> State:
        return self._state

    @property
    def next_state(self) -> State:
        return self._next_state

    def update(self, context: Any, frame_time_sec: float) -> None:
        self.elapsed_time_sec += frame_time_sec

    def handle_event(self, context: Any, event: Event) -> bool:
        """Return True when the event was consumed or a state change is pending."""
        if self.will_ignore_event(context, event):
            return True
        if self.handle_quit_events(context, event):
            return True
        return context.state.is_change_pending()

    def on_enter(self, context: Any) -> None:
        pass

    def on_exit(self, context: Any) -> None:
        pass

    def has_min_time_elapsed(self) -> bool:
        return not (self.min_duration_sec > 0.0) or (
            self.elapsed_time_sec > self.min_duration_sec
        )

    def change_to_next_state(self, context: Any) -> bool:
        """Schedule the next state; False when this state leads to itself."""
        if self._state == self._next_state:
            return False
        context.state.set_change_pending(self._next_state)
        return True

    def will_ignore_event(self, context: Any, event: Event) -> bool:
        # once a change is scheduled every event is ignored
        if context.state.is_change_pending():
            return True
        return event.kind in _IGNORED_EVENT_KINDS

    def handle_quit_events(self, context: Any, event: Event) -> bool:
        """Schedule a quit-like change for closing, Q or Escape; True if one was scheduled."""
        if event.kind is EventKind.CLOSED:
            context.state.set_change_pending(State.QUIT)
            return True

        if self._state is State.PAUSE:
            context.state.set_change_pending(State.PLAY)
            return True

        if event.kind is EventKind.KEY_PRESSED:
            if event.key is Key.Q:
                if self._state is State.PLAY:
                    context.state.set_change_pending(State.LOSE)
                else:
                    context.state.set_change_pending(State.QUIT)
                return True
            if event.key is Key.ESCAPE:
                context.state.set_change_pending(State.QUIT)
                return True

        return False


class StartState(StateBase):
    """The first state; it moves straight on to the title."""

    def __init__(self) -> None:
        super().__init__(State.START, State.TITLE)

    def on_enter(self, context: Any) -> None:
        self.change_to_next_state(context)

    def on_exit(self, context: Any) -> None:
        context.audio.play("respawn")

    def update(self, context: Any, frame_time_sec: float) -> None:
        pass

    def handle_event(self, context: Any, event: Event) -> bool:
        return False


class QuitState(StateBase):
    """The last state; entering it tells the game loop to stop."""

    def __init__(self) -> None:
        super().__init__(State.QUIT, State.QUIT)

    def on_enter(self, context: Any) -> None:
        context.will_quit = True

    def update(self, context: Any, frame_time_sec: float) -> None:
        pass

    def handle_event(self, context: Any, event: Event) -> bool:
        return False


class TimedMessageState(StateBase):
    """Shows a message and moves on after a minimum time or a key press or click."""

    def __init__(
        self,
        state: State,
        next_state: State,
        min_duration_sec: float = DEFAULT_MIN_DURATION_SEC,
        message: str = "",
    ) -> None:
        super().__init__(state, next_state, min_duration_sec, message)
        self.has_clicked_or_pressed = False

    def handle_event(self, context: Any, event: Event) -> bool:
        if super().handle_event(context, event):
            return True

        if event.kind in (EventKind.KEY_PRESSED, EventKind.MOUSE_BUTTON_PRESSED):
            self.has_clicked_or_pressed = True

        if not self.has_min_time_elapsed():
            return False

        if self.has_clicked_or_pressed:
            self.change_to_next_state(context)
            return True

        return False

    def update(self, context: Any, frame_time_sec: float) -> None:
        super().update(context, frame_time_sec)
        if self.has_min_time_elapsed() or self.has_clicked_or_pressed:
            self.change_to_next_state(context)


class TitleState(TimedMessageState):
    """The title screen."""

    TITLE_LINES = ("Super Lucky", "Ninja Girl", "Halloween", "Nightmare")

    def __init__(self) -> None:
        super().__init__(State.TITLE, State.PLAY, DEFAULT_MIN_DURATION_SEC * 2.0, "")


class PauseState(TimedMessageState):
    """The game is paused until any input arrives."""

    def __init__(self) -> None:
        super().__init__(State.PAUSE, State.PLAY, -1.0, "PAUSE")

    def on_enter(self, context: Any) -> None:
        context.audio.play("pause")
        context.pause_screen.update(context.window)

    def on_exit(self, context: Any) -> None:
        context.audio.play("pause")

    def update(self, context: Any, frame_time_sec: float) -> None:
        self.elapsed_time_sec += frame_time_sec
        if self.has_clicked_or_pressed:
            self.change_to_next_state(context)


class _FinalScoreState(TimedMessageState):
    """A closing message with the final score, followed by the credits."""

    SOUND = ""

    def __init__(self, state: State, message: str) -> None:
        super().__init__(state, State.CREDITS, 4.5, message)
        self.score_text = ""

    def on_enter(self, context: Any) -> None:
        context.audio.play(self.SOUND)
        self.score_text = f"Score: {context.info_region.score}"

    def on_exit(self, context: Any) -> None:
        context.audio.stop_all()


class LoseState(_FinalScoreState):
    """The player lost."""

    SOUND = "game-over"

    def __init__(self) -> None:
        super().__init__(State.LOSE, "You Lose\n")

    def on_enter(self, context: Any) -> None:
        super().on_enter(context)

    def on_exit(self, context: Any) -> None:
        super().on_exit(context)


class WinState(_FinalScoreState):
    """The player finished every level."""

    SOUND = "winner"

    def __init__(self) -> None:
        super().__init__(State.WIN, "You Win\n")

    def on_enter(self, context: Any) -> None:
        super().on_enter(context)

    def on_exit(self, context: Any) -> None:
        super().on_exit(context)