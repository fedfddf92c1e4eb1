"""Move definitions for the practice battle and the lookup used to classify played cards."""

from __future__ import annotations
from shared.models import MoveDefinition


class MoveNotFoundError(KeyError):
    pass


# Raw move table, read by MoveDefinition.from_dict()
MOVE_DATA: list[dict] = [
    {"id": "tackle", "name": "Tackle", "cost": 1,
     "effects": [{"type": "damage", "amount": 6}]},
    {"id": "scratch", "name": "Scratch", "cost": 1,
     "effects": [{"type": "damage", "amount": 6}]},
    {"id": "ember", "name": "Ember", "cost": 1,
     "effects": [{"type": "damage", "amount": 5}, {"type": "status", "amount": 2}]},
    {"id": "vine_whip", "name": "Vine Whip", "cost": 1,
     "effects": [{"type": "damage", "amount": 7}]},
    {"id": "water_gun", "name": "Water Gun", "cost": 1,
     "effects": [{"type": "damage", "amount": 7}]},
    {"id": "thunder_shock", "name": "Thunder Shock", "cost": 1,
     "effects": [{"type": "damage", "amount": 5}, {"type": "status", "amount": 1}]},
    {"id": "double_kick", "name": "Double Kick", "cost": 1,
     "effects": [{"type": "multi_hit", "amount": 4}]},
    {"id": "take_down", "name": "Take Down", "cost": 2,
     "effects": [{"type": "recoil", "amount": 12}]},
    {"id": "self_destruct", "name": "Self-Destruct", "cost": 2,
     "effects": [{"type": "self_ko", "amount": 30}]},
    {"id": "giga_drain", "name": "Giga Drain", "cost": 2,
     "effects": [{"type": "heal_on_hit", "amount": 8}]},
    {"id": "defend", "name": "Defend", "cost": 1,
     "effects": [{"type": "block", "amount": 5}]},
    {"id": "withdraw", "name": "Withdraw", "cost": 1,
     "effects": [{"type": "block", "amount": 8}]},
    {"id": "growl", "name": "Growl", "cost": 1,
     "effects": [{"type": "buff", "amount": -1}]},
    {"id": "poison_powder", "name": "Poison Powder", "cost": 1,
     "effects": [{"type": "status", "amount": 2}]},
    {"id": "recover", "name": "Recover", "cost": 2,
     "effects": [{"type": "heal", "amount": 10}]},
    {"id": "splash", "name": "Splash", "cost": 0, "effects": []},
]


class MoveRegistry:
    """Lookup of move definitions by base id."""

    def __init__(self, moves: list[MoveDefinition]):
        self._moves: dict[str, MoveDefinition] = {m.move_id: m for m in moves}

    @staticmethod
    def from_data(data: list[dict]) -> MoveRegistry:
        return MoveRegistry([MoveDefinition.from_dict(d) for d in data])

    def lookup(self, move_id: str) -> MoveDefinition:
        """Return the definition for move_id. Raises MoveNotFoundError if unknown."""
        move = self._moves.get(move_id)
        if move is None:
            raise MoveNotFoundError(f"Move not found: {move_id}")
        return move


DEFAULT_MOVES = MoveRegistry.from_data(MOVE_DATA)
