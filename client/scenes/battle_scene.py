"""Practice battle scene with the guided walkthrough overlaid on top."""

from __future__ import annotations
import pygame
from shared.action_classifier import classify_action
from shared.constants import SCREEN_WIDTH, SCREEN_HEIGHT, ActionKind, HighlightTarget
from shared.practice_battle import PracticeBattle
from shared.step_sequencer import StepSequencer
from shared.tutorial_steps import TUTORIAL_STEPS, TUTORIAL_STARTER_NAMES
from client.frame_scheduler import FrameScheduler
from client.renderer.font_cache import get_font
from client.renderer.ui_renderer import Button, draw_hp_bar
from client.target_resolver import TargetResolver, element_id_for
from client.tutorial_overlay import TutorialOverlay
from client.tutorial_persistence import set_tutorial_complete
from client.ui_registry import UIRegistry
import client.theme as theme

_CARD_W = 110
_CARD_H = 150
_CARD_GAP = 10
_HAND_X = 330
_HAND_Y = 600
_ENEMY_TURN_DELAY = 1.2


class BattleScene:
    def __init__(self, app, starter_id: str):
        self.app = app
        self.font = get_font(16)
        self.small_font = get_font(14)
        self.title_font = get_font(22, bold=True)

        self.battle = PracticeBattle.start(starter_id)
        self.starter_name = TUTORIAL_STARTER_NAMES.get(starter_id, starter_id.title())
        self.selected_idx: int | None = None
        self._enemy_timer: float | None = None

        self.player_rect = pygame.Rect(260, 260, 180, 180)
        self.enemy_rect = pygame.Rect(840, 190, 180, 180)
        self.energy_rect = pygame.Rect(200, 620, 90, 90)
        self.turn_order_rect = pygame.Rect(SCREEN_WIDTH // 2 - 200, 16, 400, 40)
        self.end_turn_button = Button(
            pygame.Rect(SCREEN_WIDTH - 200, SCREEN_HEIGHT - 150, 140, 48),
            "End Turn", (70, 90, 70), hover_color=(90, 120, 90),
        )

        self.ui_registry = UIRegistry()
        self.scheduler = FrameScheduler()
        self.sequencer = StepSequencer(TUTORIAL_STEPS, self.starter_name,
                                       on_complete=self._on_tutorial_complete)
        self.overlay = TutorialOverlay(
            self.sequencer, TargetResolver(self.ui_registry), self.scheduler,
            get_font(15), (SCREEN_WIDTH, SCREEN_HEIGHT),
        )

    def _on_tutorial_complete(self):
        set_tutorial_complete()

    def leave(self):
        self.overlay.close()

    # ------------------------------------------------------------------ #
    # Layout
    # ------------------------------------------------------------------ #

    def _card_rect(self, idx: int) -> pygame.Rect:
        x = _HAND_X + idx * (_CARD_W + _CARD_GAP)
        y = _HAND_Y - (16 if idx == self.selected_idx else 0)
        return pygame.Rect(x, y, _CARD_W, _CARD_H)

    def _element_rects(self) -> dict[str, pygame.Rect]:
        rects = {
            element_id_for(HighlightTarget.BATTLEFIELD): self.player_rect.union(self.enemy_rect),
            element_id_for(HighlightTarget.ENERGY): self.energy_rect,
            element_id_for(HighlightTarget.END_TURN): self.end_turn_button.rect,
            element_id_for(HighlightTarget.TURN_ORDER): self.turn_order_rect,
        }
        card_rects = [self._card_rect(i) for i in range(len(self.battle.hand))]
        if card_rects:
            rects[element_id_for(HighlightTarget.HAND)] = card_rects[0].unionall(card_rects[1:])
        for i, move_id in enumerate(self.battle.hand):
            kind = classify_action(move_id, self.battle.registry)
            if kind == ActionKind.ATTACK:
                rects.setdefault(element_id_for(HighlightTarget.ATTACK_CARDS), card_rects[i])
            elif kind == ActionKind.DEFEND:
                rects.setdefault(element_id_for(HighlightTarget.DEFEND_CARDS), card_rects[i])
        return rects

    # ------------------------------------------------------------------ #
    # Events
    # ------------------------------------------------------------------ #

    def handle_event(self, event):
        if event.type == pygame.MOUSEMOTION:
            self.end_turn_button.update(event.pos)
        elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
            if self.battle.over:
                self.leave()
                self.app.set_scene("starter_select")
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.overlay.handle_click(event.pos):
                return
            self._handle_battle_click(event.pos)

    def _handle_battle_click(self, pos):
        battle = self.battle
        if not battle.player_turn or battle.over:
            return
        if self.end_turn_button.clicked(pos):
            self.selected_idx = None
            if battle.end_turn():
                self.sequencer.notify_turn_ended()
                self._enemy_timer = _ENEMY_TURN_DELAY
            return
        for i in range(len(battle.hand)):
            if self._card_rect(i).collidepoint(pos):
                if i == self.selected_idx:
                    self._play_selected()
                elif battle.can_play(i):
                    self.selected_idx = i
                return
        if self.selected_idx is not None and self.enemy_rect.collidepoint(pos):
            self._play_selected()
        else:
            self.selected_idx = None

    def _play_selected(self):
        move_id = self.battle.play_card(self.selected_idx)
        self.selected_idx = None
        if move_id:
            self.sequencer.notify_card_played(move_id)

    def update(self, dt):
        self.scheduler.run_pending()

        if self._enemy_timer is not None:
            self._enemy_timer -= dt
            if self._enemy_timer <= 0:
                self._enemy_timer = None
                if self.battle.run_enemy_turn():
                    self.sequencer.notify_enemy_turn_done()

        self.ui_registry.sync(self._element_rects())
        self.overlay.sync()

    # ------------------------------------------------------------------ #
    # Rendering
    # ------------------------------------------------------------------ #

    def render(self, screen: pygame.Surface):
        screen.fill(theme.BG_SCREEN)
        battle = self.battle

        self._draw_turn_order(screen)
        for rect, combatant, label in (
            (self.player_rect, battle.player, self.starter_name),
            (self.enemy_rect, battle.enemy, "Magikarp"),
        ):
            pygame.draw.ellipse(screen, theme.BG_PANEL, rect)
            pygame.draw.ellipse(screen, theme.BORDER_PANEL, rect, 2)
            name = self.title_font.render(label, True, theme.TEXT_PRIMARY)
            screen.blit(name, (rect.centerx - name.get_width() // 2, rect.y - 30))
            draw_hp_bar(screen, self.small_font,
                        pygame.Rect(rect.x, rect.bottom + 10, rect.w, 10),
                        combatant.hp, combatant.max_hp, combatant.block)

        pygame.draw.rect(screen, theme.BG_PANEL, self.energy_rect, border_radius=45)
        pygame.draw.rect(screen, theme.ACCENT, self.energy_rect, 2, border_radius=45)
        energy = self.title_font.render(str(battle.energy), True, theme.ACCENT)
        screen.blit(energy, energy.get_rect(center=self.energy_rect.center))

        for i, move_id in enumerate(battle.hand):
            self._draw_card(screen, i, move_id)

        self.end_turn_button.enabled = battle.player_turn and not battle.over
        self.end_turn_button.draw(screen, self.font)

        if battle.log:
            last = self.small_font.render(battle.log[-1], True, theme.TEXT_DIM)
            screen.blit(last, (20, SCREEN_HEIGHT - 24))
        if battle.over:
            msg = "Victory!" if battle.won else "Defeated..."
            text = self.title_font.render(f"{msg}  (Escape to continue)", True, theme.TEXT_PRIMARY)
            screen.blit(text, (SCREEN_WIDTH // 2 - text.get_width() // 2, 480))

        self.overlay.render(screen)

    def _draw_turn_order(self, screen: pygame.Surface):
        rect = self.turn_order_rect
        pygame.draw.rect(screen, theme.BG_PANEL, rect, border_radius=6)
        order = [self.starter_name, "Magikarp"]
        if not self.battle.player_turn:
            order.reverse()
        text = self.font.render("  >  ".join(order), True, theme.TEXT_SECONDARY)
        screen.blit(text, text.get_rect(center=rect.center))

    def _draw_card(self, screen: pygame.Surface, idx: int, move_id: str):
        rect = self._card_rect(idx)
        move = self.battle.registry.lookup(move_id)
        kind = classify_action(move_id, self.battle.registry)
        face = {
            ActionKind.ATTACK: theme.BG_CARD_ATTACK,
            ActionKind.DEFEND: theme.BG_CARD_DEFEND,
        }.get(kind, theme.BG_CARD)
        pygame.draw.rect(screen, face, rect, border_radius=8)
        border = theme.ACCENT if idx == self.selected_idx else theme.BORDER_MEDIUM
        pygame.draw.rect(screen, border, rect, 2, border_radius=8)
        name = self.small_font.render(move.name, True, theme.TEXT_PRIMARY)
        screen.blit(name, (rect.x + 8, rect.y + 30))
        cost = self.font.render(str(move.cost), True, theme.ACCENT)
        screen.blit(cost, (rect.x + 8, rect.y + 6))
