"""The level-complete screen: tallies the score and awards end-of-level bonuses."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from halloween_ninja.states import Event, EventKind, State, StateBase

LEVEL_COMPLETE_MESSAGE = "Level Complete!\n\n"
PRE_WAIT_SEC = 4.0
POST_WAIT_SEC = 6.0
TIME_BETWEEN_SCORE_UPDATE_SEC = 0.05


@dataclass(frozen=True)
class Bonus:
    """Points awarded at the end of a level and the line announcing them."""

    score: int
    text: str


def compute_bonuses(
    coin_total: int,
    coin_collected: int,
    enemy_total: int,
    enemy_killed: int,
    has_player_died: bool,
) -> list[Bonus]:
    """Return the bonuses earned, in award order; they are shown last first."""
    coin_bonus = coin_total > 0 and coin_total == coin_collected
    enemy_bonus = enemy_total > 0 and enemy_total == enemy_killed
    survive_bonus = not has_player_died
    perfect_bonus = coin_bonus and enemy_bonus and survive_bonus

    bonuses: list[Bonus] = []
    if perfect_bonus:
        bonuses.append(Bonus(1000, "Perfect!"))
    if coin_bonus:
        bonuses.append(Bonus(99, "All Coins Found Bonus!"))
    if enemy_bonus:
        bonuses.append(Bonus(50, "All Enemies Killed Bonus!"))
    if survive_bonus:
        bonuses.append(Bonus(75, "You Didn't Die Bonus!"))
    if len(bonuses) == 3:
        bonuses.append(Bonus(0, "No bonuses, lame."))
    return bonuses


class LevelCompleteState(StateBase):
    """Waits, counts the score up while awarding bonuses one at a time, then plays on.

    The context needs ``audio``, ``info_region`` (with ``score`` and
    ``score_adjust()``), ``stats``, ``state`` and ``level_number``.
    """

    def __init__(self) -> None:
        super().__init__(State.LEVEL, State.PLAY, -1.0, LEVEL_COMPLETE_MESSAGE)
        self.bonuses: list[Bonus] = []
        self.score_text = ""
        self.bonus_text = ""
        self.score_displayed = 0
        self.is_pre_waiting = True
        self.is_showing_bonuses = False
        self.is_post_waiting = False

    def on_enter(self, context: Any) -> None:
        context.audio.play("level-complete")
        self.score_displayed = context.info_region.score
        self._update_score_text()
        stats = context.stats
        self.bonuses = compute_bonuses(
            stats.coin_total,
            stats.coin_collected,
            stats.enemy_total,
            stats.enemy_killed,
            stats.has_player_died,
        )

    def on_exit(self, context: Any) -> None:
        context.level_number += 1

    def handle_event(self, context: Any, event: Event) -> bool:
        if super().handle_event(context, event):
            return True

        if event.kind is EventKind.KEY_PRESSED:
            if not self.is_pre_waiting and not self.is_post_waiting:
                self.score_displayed = context.info_region.score
                self._update_score_text()
                self.elapsed_time_sec += 9999.0
                context.audio.play("bell")

        return False

    def update(self, context: Any, frame_time_sec: float) -> None:
        if self.is_pre_waiting:
            self.elapsed_time_sec += frame_time_sec
            if self.elapsed_time_sec > PRE_WAIT_SEC:
                self.elapsed_time_sec = 0.0
                self.is_pre_waiting = False
                self.is_showing_bonuses = True

        if self.is_showing_bonuses:
            if self.score_displayed == context.info_region.score:
                self.elapsed_time_sec = 0.0
                if self._pop_and_display_next_bonus(context):
                    context.audio.play("bonus")
                else:
                    self.is_showing_bonuses = False
                    self.is_post_waiting = True
            else:
                self.elapsed_time_sec += frame_time_sec
                if self.elapsed_time_sec > TIME_BETWEEN_SCORE_UPDATE_SEC:
                    self.elapsed_time_sec -= TIME_BETWEEN_SCORE_UPDATE_SEC
                    self.score_displayed += _score_step(
                        context.info_region.score - self.score_displayed
                    )
                    self._update_score_text()
                    context.audio.play("bell")

        if self.is_post_waiting:
            self.elapsed_time_sec += frame_time_sec
            if self.elapsed_time_sec > POST_WAIT_SEC:
                context.state.set_change_pending(State.PLAY)

    def _pop_and_display_next_bonus(self, context: Any) -> bool:
        if not self.bonuses:
            return False
        bonus = self.bonuses.pop()
        context.info_region.score_adjust(bonus.score)
        self.bonus_text = bonus.text
        return True

    def _update_score_text(self) -> None:
        self.score_text = f"Score: {self.score_displayed}"


def _score_step(difference: int) -> int:
    """A tenth of the remaining difference, truncated toward zero, but never zero."""
    step = abs(difference) // 10
    if difference < 0:
        step = -step
    return step if step != 0 else 1