"""Owns the current game state and switches to a new one when asked."""

from __future__ import annotations

from typing import Any, Callable, Mapping, Optional

from halloween_ninja.checks import check
from halloween_ninja.states import (
    LoseState,
    PauseState,
    QuitState,
    StartState,
    State,
    StateBase,
    TitleState,
    WinState,
)

StateFactory = Callable[[Any], StateBase]


def _default_factories() -> dict[State, StateFactory]:
    return {
        State.START: lambda _context: StartState(),
        State.TITLE: lambda _context: TitleState(),
        State.PAUSE: lambda _context: PauseState(),
        State.LOSE: lambda _context: LoseState(),
        State.WIN: lambda _context: WinState(),
        State.QUIT: lambda _context: QuitState(),
    }


class StateMachine:
    """Holds one state at a time; changes happen only in change_if_pending().

    States that need more than this package offers are added with register().
    """

    def __init__(self, factories: Optional[Mapping[State, StateFactory]] = None) -> None:
        self._factories = _default_factories()
        if factories:
            self._factories.update(factories)
        self._current: StateBase = StartState()
        self._change_pending: Optional[State] = State.START
        self.reset()

    def register(self, state: State, factory: StateFactory) -> None:
        """Use *factory*, called with the context, to make *state*."""
        self._factories[state] = factory

    def reset(self) -> None:
        self._current = StartState()
        self._change_pending = self._current.state

    @property
    def state(self) -> StateBase:
        return self._current

    @property
    def state_enum(self) -> State:
        return self._current.state

    @property
    def change_pending(self) -> Optional[State]:
        return self._change_pending

    def is_change_pending(self) -> bool:
        return self._change_pending is not None

    def set_change_pending(self, state: State) -> None:
        self._change_pending = state

    def change_if_pending(self, context: Any) -> None:
        if self._change_pending is None:
            return
        self._current.on_exit(context)
        self._current = self.make_state(context, self._change_pending)
        self._change_pending = None
        self._current.on_enter(context)

    def make_state(self, context: Any, state: State) -> StateBase:
        factory = self._factories.get(state)
        check(
            factory is not None,
            "factory is not None",
            f"Asked to make the state {state} but no factory is registered for it.",
        )
        return factory(context)