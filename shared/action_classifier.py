"""Coarse classification of a played card for walkthrough gating."""

from __future__ import annotations
from typing import Optional, Protocol
from shared.constants import (
    ATTACK_EFFECT_TYPES, DEFEND_MOVE_ID, MOVE_VARIANT_SUFFIXES, ActionKind,
)
from shared.models import MoveDefinition
from shared.moves import DEFAULT_MOVES


class MoveLookup(Protocol):
    def lookup(self, move_id: str) -> MoveDefinition: ...


def normalize_action_id(action_id: str) -> str:
    """Strip a variant tag so e.g. 'tackle__parental' looks up as 'tackle'."""
    for suffix in MOVE_VARIANT_SUFFIXES:
        if action_id.endswith(suffix):
            return action_id[:-len(suffix)]
    return action_id


def classify_action(action_id: Optional[str],
                    registry: MoveLookup = DEFAULT_MOVES) -> ActionKind:
    """Classify a played action as ATTACK, DEFEND or OTHER.

    Never raises: an unknown id or a failing registry classifies as OTHER.
    """
    if not action_id:
        return ActionKind.OTHER
    try:
        base_id = normalize_action_id(action_id)
        if base_id == DEFEND_MOVE_ID:
            return ActionKind.DEFEND
        move = registry.lookup(base_id)
        is_attack = any(e.type in ATTACK_EFFECT_TYPES for e in move.effects)
    except Exception as e:
        print(f"[classifier] WARNING: lookup failed for '{action_id}': {e}")
        return ActionKind.OTHER
    return ActionKind.ATTACK if is_attack else ActionKind.OTHER
