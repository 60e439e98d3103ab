from types import SimpleNamespace

import pytest

from halloween_ninja.states import (
    DEFAULT_MIN_DURATION_SEC,
    Event,
    EventKind,
    Key,
    LoseState,
    PauseState,
    QuitState,
    StartState,
    State,
    StateBase,
    TimedMessageState,
    TitleState,
    WinState,
)


class _Pending:
    def __init__(self):
        self.pending = None

    def is_change_pending(self):
        return self.pending is not None

    def set_change_pending(self, state):
        self.pending = state


class _Audio:
    def __init__(self):
        self.played = []
        self.stop_all_count = 0

    def play(self, name, pitch=1.0):
        self.played.append(name)

    def stop_all(self):
        self.stop_all_count += 1


class _PauseScreen:
    def __init__(self):
        self.windows = []

    def update(self, window):
        self.windows.append(window)


def _context(score=0):
    return SimpleNamespace(
        state=_Pending(),
        audio=_Audio(),
        will_quit=False,
        info_region=SimpleNamespace(score=score),
        pause_screen=_PauseScreen(),
        window="window",
    )


def test_state_names_and_order():
    names = [str(StateBase(s, s).state) for s in State]
    assert names == [
        "Start", "Title", "Play", "Pause", "Level", "Lose", "Win", "Credits", "Quit",
    ]
    assert State(0) is State.START


def test_start_state_moves_to_title_and_plays_respawn_on_exit():
    ctx = _context()
    start = StartState()
    start.on_enter(ctx)
    assert ctx.state.pending is State.TITLE
    start.on_exit(ctx)
    assert ctx.audio.played == ["respawn"]
    assert start.handle_event(ctx, Event(EventKind.CLOSED)) is False


def test_quit_state_sets_will_quit_and_cannot_move_on():
    ctx = _context()
    quit_state = QuitState()
    quit_state.on_enter(ctx)
    assert ctx.will_quit is True
    assert quit_state.change_to_next_state(ctx) is False
    assert ctx.state.pending is None


def test_events_ignored_while_change_pending():
    ctx = _context()
    ctx.state.pending = State.WIN
    base = StateBase(State.TITLE, State.PLAY)
    assert base.handle_event(ctx, Event(EventKind.KEY_PRESSED, Key.ESCAPE)) is True
    assert ctx.state.pending is State.WIN


@pytest.mark.parametrize(
    "kind", [EventKind.MOUSE_MOVED, EventKind.KEY_RELEASED, EventKind.FOCUS_LOST]
)
def test_uninteresting_events_are_ignored(kind):
    ctx = _context()
    base = StateBase(State.PLAY, State.PLAY)
    assert base.will_ignore_event(ctx, Event(kind)) is True
    assert base.handle_event(ctx, Event(kind)) is True
    assert ctx.state.pending is None


def test_closed_event_quits():
    ctx = _context()
    base = StateBase(State.PLAY, State.PLAY)
    assert base.handle_event(ctx, Event(EventKind.CLOSED)) is True
    assert ctx.state.pending is State.QUIT


@pytest.mark.parametrize(
    "state, key, expected",
    [
        (State.PLAY, Key.Q, State.LOSE),
        (State.TITLE, Key.Q, State.QUIT),
        (State.PLAY, Key.ESCAPE, State.QUIT),
    ],
)
def test_quit_keys(state, key, expected):
    ctx = _context()
    base = StateBase(state, state)
    assert base.handle_quit_events(ctx, Event(EventKind.KEY_PRESSED, key)) is True
    assert ctx.state.pending is expected


def test_other_key_is_not_a_quit_event():
    ctx = _context()
    base = StateBase(State.PLAY, State.PLAY)
    assert base.handle_quit_events(ctx, Event(EventKind.KEY_PRESSED, Key.SPACE)) is False
    assert base.handle_event(ctx, Event(EventKind.KEY_PRESSED, Key.SPACE)) is False


def test_min_time_elapsed():
    assert StateBase(State.TITLE, State.PLAY).has_min_time_elapsed() is True
    ctx = _context()
    base = StateBase(State.TITLE, State.PLAY, DEFAULT_MIN_DURATION_SEC)
    base.update(ctx, DEFAULT_MIN_DURATION_SEC / 2)
    assert base.has_min_time_elapsed() is False
    base.update(ctx, DEFAULT_MIN_DURATION_SEC)
    assert base.has_min_time_elapsed() is True


def test_timed_message_waits_for_min_time_then_moves_on():
    ctx = _context()
    timed = TimedMessageState(State.LOSE, State.CREDITS, DEFAULT_MIN_DURATION_SEC, "msg")
    assert timed.handle_event(ctx, Event(EventKind.MOUSE_BUTTON_PRESSED)) is False
    assert timed.has_clicked_or_pressed is True
    assert ctx.state.pending is None
    timed.update(ctx, 0.0)
    assert ctx.state.pending is State.CREDITS


def test_timed_message_moves_on_after_time_alone():
    ctx = _context()
    timed = TimedMessageState(State.LOSE, State.CREDITS)
    timed.update(ctx, DEFAULT_MIN_DURATION_SEC / 2)
    assert ctx.state.pending is None
    timed.update(ctx, DEFAULT_MIN_DURATION_SEC)
    assert ctx.state.pending is State.CREDITS


def test_timed_message_key_after_min_time_changes_immediately():
    ctx = _context()
    timed = TimedMessageState(State.WIN, State.CREDITS)
    timed.elapsed_time_sec = DEFAULT_MIN_DURATION_SEC * 2
    assert timed.handle_event(ctx, Event(EventKind.KEY_PRESSED, Key.ENTER)) is True
    assert ctx.state.pending is State.CREDITS


def test_title_state():
    title = TitleState()
    assert title.state is State.TITLE
    assert title.next_state is State.PLAY
    assert title.min_duration_sec == DEFAULT_MIN_DURATION_SEC * 2.0
    assert title.TITLE_LINES == ("Super Lucky", "Ninja Girl", "Halloween", "Nightmare")


def test_pause_state():
    ctx = _context()
    pause = PauseState()
    assert pause.message == "PAUSE"
    pause.on_enter(ctx)
    assert ctx.audio.played == ["pause"]
    assert ctx.pause_screen.windows == ["window"]
    assert pause.handle_event(ctx, Event(EventKind.KEY_PRESSED, Key.SPACE)) is True
    assert ctx.state.pending is State.PLAY
    pause.on_exit(ctx)
    assert ctx.audio.played == ["pause", "pause"]


def test_pause_update_without_input_stays():
    ctx = _context()
    pause = PauseState()
    pause.update(ctx, 100.0)
    assert ctx.state.pending is None
    assert pause.elapsed_time_sec == 100.0


@pytest.mark.parametrize(
    "cls, sound, state, message",
    [
        (LoseState, "game-over", State.LOSE, "You Lose\n"),
        (WinState, "winner", State.WIN, "You Win\n"),
    ],
)
def test_final_score_states(cls, sound, state, message):
    ctx = _context(score=42)
    final = cls()
    assert final.state is state
    assert final.next_state is State.CREDITS
    assert final.message == message
    final.on_enter(ctx)
    assert ctx.audio.played == [sound]
    assert final.score_text == "Score: 42"
    final.on_exit(ctx)
    assert ctx.audio.stop_all_count == 1