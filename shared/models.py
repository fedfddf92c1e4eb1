"""Data classes for walkthrough steps and move definitions.

Used by the walkthrough core and the pygame client.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Callable, Optional, Sequence
from shared.constants import AdvanceCondition, HighlightTarget, Zone


class InvalidCatalogError(ValueError):
    """Raised at startup when a step catalog cannot drive a walkthrough."""


@dataclass(frozen=True)
class Step:
    id: int
    highlight: Optional[HighlightTarget]
    text: Callable[[str], str]  # starter name -> display text
    advance_condition: AdvanceCondition
    zone: Zone
    allow_skip: bool = False
    # Highlighted area stays clickable and no "Got it" button is shown
    allow_interaction: bool = False


def validate_catalog(steps: Sequence[Step]) -> None:
    """Check that a catalog is non-empty with strictly increasing, unique ids."""
    if not steps:
        raise InvalidCatalogError("step catalog is empty")
    prev_id = None
    for step in steps:
        if prev_id is not None and step.id <= prev_id:
            raise InvalidCatalogError(
                f"step ids must be unique and increasing (got {step.id} after {prev_id})"
            )
        prev_id = step.id


@dataclass(frozen=True)
class TutorialView:
    """Read-only snapshot of what the overlay should show for the active step."""
    is_active: bool
    step_index: int | None
    highlight_target: HighlightTarget | None
    step_text: str
    can_skip: bool
    allow_interaction: bool
    zone: Zone


@dataclass
class MoveEffect:
    type: str
    amount: int = 0

    @staticmethod
    def from_dict(d: dict) -> MoveEffect:
        return MoveEffect(type=d["type"], amount=d.get("amount", 0))


@dataclass
class MoveDefinition:
    move_id: str
    name: str
    cost: int
    effects: list[MoveEffect] = field(default_factory=list)

    @staticmethod
    def from_dict(d: dict) -> MoveDefinition:
        return MoveDefinition(
            move_id=d["id"],
            name=d.get("name", d["id"]),
            cost=d.get("cost", 1),
            effects=[MoveEffect.from_dict(e) for e in d.get("effects", [])],
        )
