"""Step catalog for the first-time player practice battle (starter vs. a wild Magikarp)."""

from shared.constants import AdvanceCondition, HighlightTarget, Zone
from shared.models import Step

TUTORIAL_STEPS: list[Step] = [
    Step(
        id=1,
        highlight=HighlightTarget.BATTLEFIELD,
        text=lambda starter: (
            f"Welcome to Pokespire! This is your {starter}, and that's a wild Magikarp. "
            "Knock it out by reducing its HP to 0!"
        ),
        advance_condition=AdvanceCondition.MANUAL,
        zone=Zone.TOP,
    ),
    Step(
        id=2,
        highlight=HighlightTarget.HAND,
        text=lambda _: (
            "These are your cards, your moves for this turn. "
            "You'll draw a fresh hand every turn."
        ),
        advance_condition=AdvanceCondition.MANUAL,
        zone=Zone.BOTTOM,
    ),
    Step(
        id=3,
        highlight=HighlightTarget.ENERGY,
        text=lambda _: (
            "Each card costs Energy to play. You start each turn with 3 Energy. "
            "See the number on each card? That's its cost."
        ),
        advance_condition=AdvanceCondition.MANUAL,
        zone=Zone.BOTTOM,
    ),
    Step(
        id=4,
        highlight=HighlightTarget.ATTACK_CARDS,
        text=lambda _: "Try attacking! Click a card to select it, then click the Magikarp to use it.",
        advance_condition=AdvanceCondition.PLAY_ATTACK,
        zone=Zone.BOTTOM,
        allow_interaction=True,
    ),
    Step(
        id=5,
        highlight=None,
        text=lambda _: "Nice hit! You still have Energy. Play more cards if you want.",
        advance_condition=AdvanceCondition.PLAY_ANY_CARD,
        zone=Zone.BOTTOM,
        allow_interaction=True,
    ),
    Step(
        id=6,
        highlight=HighlightTarget.DEFEND_CARDS,
        text=lambda _: (
            "Tip: Defend gives you Block, which absorbs incoming damage before your HP. Try it!"
        ),
        advance_condition=AdvanceCondition.PLAY_DEFEND,
        zone=Zone.BOTTOM,
        allow_skip=True,
        allow_interaction=True,
    ),
    Step(
        id=7,
        highlight=HighlightTarget.END_TURN,
        text=lambda _: "When you're out of Energy or done playing, click End Turn.",
        advance_condition=AdvanceCondition.END_TURN,
        zone=Zone.BOTTOM,
        allow_interaction=True,
    ),
    Step(
        id=8,
        highlight=None,
        text=lambda _: "Now the Magikarp attacks! Watch your HP.",
        advance_condition=AdvanceCondition.ENEMY_TURN_DONE,
        zone=Zone.BOTTOM,
        allow_interaction=True,
    ),
    Step(
        id=9,
        highlight=HighlightTarget.TURN_ORDER,
        text=lambda _: "This bar shows turn order. Faster Pokemon go first each round.",
        advance_condition=AdvanceCondition.MANUAL,
        zone=Zone.TOP,
    ),
    Step(
        id=10,
        highlight=None,
        text=lambda _: "You've got the basics! Finish this fight on your own. Good luck!",
        advance_condition=AdvanceCondition.MANUAL,
        zone=Zone.BOTTOM,
    ),
]

# Kanto starters offered for the practice battle
TUTORIAL_STARTER_IDS = ("bulbasaur", "charmander", "squirtle", "pikachu")

TUTORIAL_STARTER_NAMES = {
    "bulbasaur": "Bulbasaur",
    "charmander": "Charmander",
    "squirtle": "Squirtle",
    "pikachu": "Pikachu",
}
