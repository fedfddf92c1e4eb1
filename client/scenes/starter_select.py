"""Starter picker for the practice battle, with an option to skip it."""

import pygame
from shared.constants import SCREEN_WIDTH, SCREEN_HEIGHT
from shared.tutorial_steps import TUTORIAL_STARTER_IDS, TUTORIAL_STARTER_NAMES
from client.renderer.font_cache import get_font
from client.renderer.ui_renderer import Button
from client.tutorial_persistence import is_tutorial_complete, set_tutorial_complete
import client.theme as theme


class StarterSelectScene:
    def __init__(self, app):
        self.app = app
        self.font = get_font(16)
        self.title_font = get_font(32, bold=True)
        self.small_font = get_font(14)

        btn_w, btn_h, gap = 180, 48, 20
        total_w = len(TUTORIAL_STARTER_IDS) * btn_w + (len(TUTORIAL_STARTER_IDS) - 1) * gap
        x = SCREEN_WIDTH // 2 - total_w // 2
        self.starter_buttons: list[tuple[str, Button]] = []
        for starter_id in TUTORIAL_STARTER_IDS:
            rect = pygame.Rect(x, SCREEN_HEIGHT // 2 - btn_h // 2, btn_w, btn_h)
            self.starter_buttons.append((starter_id, Button(rect, TUTORIAL_STARTER_NAMES[starter_id])))
            x += btn_w + gap
        self.skip_button = Button(
            pygame.Rect(SCREEN_WIDTH // 2 - 90, SCREEN_HEIGHT // 2 + 90, 180, 40),
            "Skip Tutorial", (60, 60, 75),
        )
        self.already_complete = False

    def on_enter(self):
        self.already_complete = is_tutorial_complete()

    def handle_event(self, event):
        if event.type == pygame.MOUSEMOTION:
            for _, button in self.starter_buttons:
                button.update(event.pos)
            self.skip_button.update(event.pos)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            for starter_id, button in self.starter_buttons:
                if button.clicked(event.pos):
                    self.app.start_battle(starter_id)
                    return
            if self.skip_button.clicked(event.pos):
                set_tutorial_complete()
                self.app.running = False

    def update(self, dt):
        pass

    def render(self, screen: pygame.Surface):
        screen.fill(theme.BG_SCREEN)
        title = self.title_font.render("Choose your partner", True, theme.TEXT_PRIMARY)
        screen.blit(title, (SCREEN_WIDTH // 2 - title.get_width() // 2, 180))
        sub = self.small_font.render(
            "A short practice battle against a wild Magikarp teaches the basics.",
            True, theme.TEXT_DIM,
        )
        screen.blit(sub, (SCREEN_WIDTH // 2 - sub.get_width() // 2, 230))
        for _, button in self.starter_buttons:
            button.draw(screen, self.font)
        self.skip_button.draw(screen, self.font)
        if self.already_complete:
            done = self.small_font.render("Tutorial already completed.", True, theme.TEXT_DIM)
            screen.blit(done, (SCREEN_WIDTH // 2 - done.get_width() // 2, SCREEN_HEIGHT - 60))
