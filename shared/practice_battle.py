"""Minimal one-on-one battle used by the walkthrough's practice fight.

Only what the practice fight needs: energy, damage, block and a scripted
enemy. Moves come from the move registry.
"""

from __future__ import annotations
import random
from dataclasses import dataclass, field
from shared.constants import HAND_SIZE, STARTING_ENERGY
from shared.moves import DEFAULT_MOVES, MoveRegistry

STARTER_DECKS: dict[str, list[str]] = {
    "bulbasaur": ["tackle", "tackle", "vine_whip", "giga_drain", "defend", "defend", "growl"],
    "charmander": ["scratch", "scratch", "ember", "take_down", "defend", "defend", "growl"],
    "squirtle": ["tackle", "tackle", "water_gun", "withdraw", "defend", "defend", "growl"],
    "pikachu": ["tackle", "thunder_shock", "thunder_shock", "double_kick", "defend", "defend", "growl"],
}

STARTER_HP = {"bulbasaur": 45, "charmander": 39, "squirtle": 44, "pikachu": 35}
ENEMY_ID = "magikarp"
ENEMY_HP = 40
ENEMY_TACKLE_DAMAGE = 4


@dataclass
class Combatant:
    pokemon_id: str
    max_hp: int
    hp: int = -1
    block: int = 0

    def __post_init__(self):
        if self.hp < 0:
            self.hp = self.max_hp

    @property
    def fainted(self) -> bool:
        return self.hp <= 0

    def take_damage(self, amount: int) -> int:
        absorbed = min(self.block, amount)
        self.block -= absorbed
        dealt = min(self.hp, amount - absorbed)
        self.hp -= dealt
        return dealt

    def heal(self, amount: int):
        self.hp = min(self.max_hp, self.hp + amount)


@dataclass
class PracticeBattle:
    player: Combatant
    enemy: Combatant
    draw_pile: list[str] = field(default_factory=list)
    hand: list[str] = field(default_factory=list)
    discard: list[str] = field(default_factory=list)
    energy: int = STARTING_ENERGY
    turn: int = 1
    player_turn: bool = True
    log: list[str] = field(default_factory=list)
    registry: MoveRegistry = DEFAULT_MOVES
    rng: random.Random = field(default_factory=random.Random)

    @staticmethod
    def start(starter_id: str, rng: random.Random | None = None) -> PracticeBattle:
        battle = PracticeBattle(
            player=Combatant(starter_id, STARTER_HP.get(starter_id, 40)),
            enemy=Combatant(ENEMY_ID, ENEMY_HP),
            draw_pile=list(STARTER_DECKS.get(starter_id, STARTER_DECKS["bulbasaur"])),
            rng=rng or random.Random(),
        )
        battle.rng.shuffle(battle.draw_pile)
        battle.draw_hand()
        return battle

    @property
    def over(self) -> bool:
        return self.player.fainted or self.enemy.fainted

    @property
    def won(self) -> bool:
        return self.enemy.fainted and not self.player.fainted

    def draw_hand(self):
        while len(self.hand) < HAND_SIZE:
            if not self.draw_pile:
                if not self.discard:
                    break
                self.draw_pile, self.discard = self.discard, []
                self.rng.shuffle(self.draw_pile)
            self.hand.append(self.draw_pile.pop())

    def can_play(self, hand_idx: int) -> bool:
        if not self.player_turn or self.over or not 0 <= hand_idx < len(self.hand):
            return False
        return self.registry.lookup(self.hand[hand_idx]).cost <= self.energy

    def play_card(self, hand_idx: int) -> str | None:
        """Play the card at hand_idx. Returns its move id, or None if it can't be played."""
        if not self.can_play(hand_idx):
            return None
        move_id = self.hand.pop(hand_idx)
        move = self.registry.lookup(move_id)
        self.energy -= move.cost
        for effect in move.effects:
            self._apply(effect.type, effect.amount)
        self.discard.append(move_id)
        self.log.append(f"{self.player.pokemon_id} used {move.name}")
        return move_id

    def _apply(self, effect_type: str, amount: int):
        if effect_type == "damage":
            self.enemy.take_damage(amount)
        elif effect_type == "multi_hit":
            for _ in range(2):
                self.enemy.take_damage(amount)
        elif effect_type == "recoil":
            self.enemy.take_damage(amount)
            self.player.take_damage(amount // 4)
        elif effect_type == "self_ko":
            self.enemy.take_damage(amount)
            self.player.hp = 0
        elif effect_type == "heal_on_hit":
            dealt = self.enemy.take_damage(amount)
            self.player.heal(dealt // 2)
        elif effect_type == "block":
            self.player.block += amount
        elif effect_type == "heal":
            self.player.heal(amount)

    def end_turn(self) -> bool:
        if not self.player_turn or self.over:
            return False
        self.discard.extend(self.hand)
        self.hand = []
        self.player_turn = False
        return True

    def run_enemy_turn(self) -> bool:
        """Magikarp alternates a weak Tackle with Splash.

        Returns False when it is not the enemy's turn or the battle is over.
        """
        if self.player_turn or self.over:
            return False
        if self.turn % 2 == 1:
            self.player.take_damage(ENEMY_TACKLE_DAMAGE)
            self.log.append(f"{self.enemy.pokemon_id} used Tackle")
        else:
            self.log.append(f"{self.enemy.pokemon_id} used Splash. Nothing happened!")
        self.turn += 1
        self.player.block = 0
        self.energy = STARTING_ENERGY
        self.player_turn = True
        self.draw_hand()
        return True
