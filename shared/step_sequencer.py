"""Walkthrough step sequencer: linear step list gated by player actions."""

from __future__ import annotations
from typing import Callable, Optional, Sequence
from shared.action_classifier import classify_action
from shared.constants import ActionKind, AdvanceCondition, HighlightTarget, Zone
from shared.models import Step, TutorialView, validate_catalog


class StepSequencer:
    """Owns the current position in an ordered step catalog.

    The host calls the notify_* methods as battle events happen; a call
    advances at most one step and only when it satisfies the active step's
    advance condition. Anything else is ignored. Once the last step is
    passed the sequencer is complete and every command is a no-op.
    """

    def __init__(self, steps: Sequence[Step], starter_name: str,
                 on_complete: Callable[[], None],
                 classifier: Callable[[str], ActionKind] = classify_action):
        validate_catalog(steps)
        self._steps = tuple(steps)
        self._starter_name = starter_name
        self._on_complete = on_complete
        self._classify = classifier
        self._index = 0
        self._completed_fired = False

        # Checked in order for a played card; first match wins
        self._card_gates: list[tuple[AdvanceCondition, Callable[[str], bool]]] = [
            (AdvanceCondition.PLAY_ATTACK,
             lambda action_id: self._classify(action_id) == ActionKind.ATTACK),
            (AdvanceCondition.PLAY_DEFEND,
             lambda action_id: self._classify(action_id) == ActionKind.DEFEND),
            (AdvanceCondition.PLAY_ANY_CARD,
             lambda action_id: bool(action_id)),
        ]
        print(f"[tutorial] Started ({len(self._steps)} steps)")

    # ------------------------------------------------------------------ #
    # Derived state
    # ------------------------------------------------------------------ #

    @property
    def step_count(self) -> int:
        return len(self._steps)

    @property
    def current_index(self) -> int:
        return self._index

    @property
    def is_active(self) -> bool:
        return self._index < len(self._steps)

    @property
    def current_step(self) -> Step | None:
        if self._index < len(self._steps):
            return self._steps[self._index]
        return None

    @property
    def current_step_index(self) -> int | None:
        return self._index if self.is_active else None

    @property
    def highlight_target(self) -> HighlightTarget | None:
        step = self.current_step
        return step.highlight if step else None

    @property
    def step_text(self) -> str:
        step = self.current_step
        return step.text(self._starter_name) if step else ""

    @property
    def can_skip(self) -> bool:
        step = self.current_step
        return step.allow_skip if step else False

    @property
    def allow_interaction(self) -> bool:
        step = self.current_step
        return step.allow_interaction if step else False

    @property
    def zone(self) -> Zone:
        step = self.current_step
        return step.zone if step else Zone.BOTTOM

    def view(self) -> TutorialView:
        return TutorialView(
            is_active=self.is_active,
            step_index=self.current_step_index,
            highlight_target=self.highlight_target,
            step_text=self.step_text,
            can_skip=self.can_skip,
            allow_interaction=self.allow_interaction,
            zone=self.zone,
        )

    # ------------------------------------------------------------------ #
    # Commands
    # ------------------------------------------------------------------ #

    def advance(self):
        if not self.is_active:
            return
        self._index += 1
        if self._index < len(self._steps):
            print(f"[tutorial] Step {self._index + 1}/{len(self._steps)} "
                  f"({self._steps[self._index].advance_condition.value})")
            return
        if not self._completed_fired:
            self._completed_fired = True
            print("[tutorial] Completed")
            self._on_complete()

    def skip(self):
        # Whether the active step may be skipped is decided by the overlay (can_skip)
        self.advance()

    # ------------------------------------------------------------------ #
    # Game event notifications
    # ------------------------------------------------------------------ #

    def notify_card_played(self, action_id: Optional[str]) -> bool:
        step = self.current_step
        if step is None:
            return False
        for condition, predicate in self._card_gates:
            if step.advance_condition != condition:
                continue
            if predicate(action_id):
                self.advance()
                return True
        return False

    def notify_turn_ended(self) -> bool:
        return self._try_advance_for(AdvanceCondition.END_TURN)

    def notify_enemy_turn_done(self) -> bool:
        return self._try_advance_for(AdvanceCondition.ENEMY_TURN_DONE)

    def _try_advance_for(self, condition: AdvanceCondition) -> bool:
        step = self.current_step
        if step is None or step.advance_condition != condition:
            return False
        self.advance()
        return True
