"""Small drawing helpers shared by the client scenes."""

from __future__ import annotations
import pygame
import client.theme as theme


class Button:
    def __init__(self, rect: pygame.Rect, text: str, color=(80, 80, 120),
                 text_color=(255, 255, 255), hover_color=(100, 100, 150)):
        self.rect = rect
        self.text = text
        self.color = color
        self.text_color = text_color
        self.hover_color = hover_color
        self.hovered = False
        self.enabled = True

    def draw(self, surface: pygame.Surface, font: pygame.font.Font):
        color = self.hover_color if self.hovered else self.color
        if not self.enabled:
            color = (60, 60, 60)
        pygame.draw.rect(surface, color, self.rect, border_radius=6)
        pygame.draw.rect(surface, (200, 200, 200), self.rect, 1, border_radius=6)
        text_surf = font.render(self.text, True, self.text_color if self.enabled else (120, 120, 120))
        surface.blit(text_surf, text_surf.get_rect(center=self.rect.center))

    def update(self, mouse_pos):
        self.hovered = self.rect.collidepoint(mouse_pos)

    def clicked(self, mouse_pos) -> bool:
        return self.enabled and self.rect.collidepoint(mouse_pos)


def draw_hp_bar(surface: pygame.Surface, font: pygame.font.Font,
                rect: pygame.Rect, hp: int, max_hp: int, block: int = 0):
    """HP bar with a numeric label and, when non-zero, the current block."""
    pygame.draw.rect(surface, theme.HP_BAR_BG, rect, border_radius=3)
    if max_hp > 0 and hp > 0:
        fill = pygame.Rect(rect.x, rect.y, int(rect.w * hp / max_hp), rect.h)
        pygame.draw.rect(surface, theme.HP_BAR, fill, border_radius=3)
    label = font.render(f"{hp}/{max_hp}", True, theme.TEXT_PRIMARY)
    surface.blit(label, (rect.x, rect.bottom + 2))
    if block:
        blk = font.render(f"Block {block}", True, theme.BLOCK_TEXT)
        surface.blit(blk, (rect.right - blk.get_width(), rect.bottom + 2))
