"""Constants shared by the walkthrough core and the pygame client."""

from enum import Enum

# Display
SCREEN_WIDTH = 1280
SCREEN_HEIGHT = 800
FPS = 60
TITLE = "Pokespire"

# Battle rules used by the practice battle
STARTING_ENERGY = 3
HAND_SIZE = 5

# Move ids
DEFEND_MOVE_ID = "defend"
# Variant-tagged copies of a move (e.g. "tackle__parental") share the base definition
MOVE_VARIANT_SUFFIXES = ("__parental",)

# Effect kinds that make a move count as an attack
ATTACK_EFFECT_TYPES = frozenset({
    "damage",
    "multi_hit",
    "recoil",
    "self_ko",
    "heal_on_hit",
})

# Tutorial panel (HUD) geometry
HUD_PANEL_WIDTH = 260
HUD_PANEL_PADDING = 16
HUD_TOP_ZONE_Y = 100          # top zone: centered horizontally, this far from the top
HUD_BOTTOM_ZONE_RIGHT = 80    # bottom zone: this far from the right edge
HUD_BOTTOM_ZONE_BOTTOM = 165  # ...and this far from the bottom edge

# Settings file keys
SETTINGS_TUTORIAL_COMPLETE = "tutorial_complete"


class AdvanceCondition(str, Enum):
    MANUAL = "manual"                    # click "Got it"
    PLAY_ATTACK = "play_attack"          # play any damage-dealing card
    PLAY_ANY_CARD = "play_any_card"      # play any card at all
    PLAY_DEFEND = "play_defend"          # play Defend
    END_TURN = "end_turn"                # click End Turn
    ENEMY_TURN_DONE = "enemy_turn_done"  # enemy turn completes


class HighlightTarget(str, Enum):
    BATTLEFIELD = "battlefield"      # player + enemy sprites
    HAND = "hand"
    ENERGY = "energy"
    ATTACK_CARDS = "attack_cards"    # attack cards in hand
    DEFEND_CARDS = "defend_cards"    # defend cards in hand
    END_TURN = "end_turn"
    TURN_ORDER = "turn_order"


# Element ids the host registers for targets whose element id differs from the target name
HIGHLIGHT_ELEMENT_IDS = {
    HighlightTarget.ATTACK_CARDS: "tutorial-card-attack",
    HighlightTarget.DEFEND_CARDS: "tutorial-card-defend",
}


class Zone(str, Enum):
    TOP = "top"        # upper-middle
    BOTTOM = "bottom"  # lower-right


class ActionKind(str, Enum):
    ATTACK = "attack"
    DEFEND = "defend"
    OTHER = "other"
