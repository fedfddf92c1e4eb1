"""Central color palette for the Pokespire client UI."""

BG_SCREEN        = (12, 14, 22)      # battle screen fill
BG_PANEL         = (24, 28, 40)      # hud/panel fill
BG_PANEL_DARK    = (16, 18, 28, 230) # walkthrough panel (alpha)
BG_ELEVATED      = (40, 44, 60)      # secondary buttons
BG_CARD          = (52, 58, 80)      # card face
BG_CARD_ATTACK   = (110, 52, 52)     # attack card face
BG_CARD_DEFEND   = (50, 80, 120)     # defend card face

BORDER_PANEL     = (60, 66, 90)      # panel separators/borders
BORDER_MEDIUM    = (90, 96, 120)     # secondary button border

TEXT_PRIMARY     = (225, 228, 240)   # primary readable text
TEXT_SECONDARY   = (170, 175, 195)   # secondary button label
TEXT_DIM         = (120, 124, 140)   # hint text
TEXT_ON_ACCENT   = (12, 14, 22)      # text on accent buttons

ACCENT           = (250, 204, 21)    # primary button fill
TEAL             = (56, 189, 248)    # walkthrough border, connector, highlight glow

HP_BAR           = (80, 200, 100)
HP_BAR_BG        = (60, 30, 30)
BLOCK_TEXT       = (120, 170, 255)
