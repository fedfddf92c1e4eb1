"""Walkthrough overlay: instruction panel, highlight glow and connector line."""

from __future__ import annotations

import math
import time
from dataclasses import dataclass, field

import pygame

import client.theme as theme
from shared.constants import (
    HUD_BOTTOM_ZONE_BOTTOM, HUD_BOTTOM_ZONE_RIGHT, HUD_PANEL_PADDING, HUD_PANEL_WIDTH,
    HUD_TOP_ZONE_Y, HighlightTarget, Zone,
)
from shared.step_sequencer import StepSequencer
from client.connector import Point, compute_connector
from client.frame_scheduler import FrameScheduler
from client.target_resolver import PanelTracker, Subscription, TargetResolver

_UNBOUND = object()


@dataclass
class PanelLayout:
    rect: pygame.Rect
    lines: list[str] = field(default_factory=list)
    got_it_rect: pygame.Rect | None = None
    skip_rect: pygame.Rect | None = None


class TutorialOverlay:
    """Presentation side of the walkthrough.

    Call sync() once per frame after the scene has published its element
    rects, then render(). The overlay keeps the last seen panel and target
    rects and recomputes the connector whenever either changes.
    """

    _BTN_H = 28
    _BTN_GAP = 8
    _GOT_IT_W = 84
    _SKIP_W = 64
    _LINE_GAP = 4
    _CONNECTOR_W = 2
    _DOT_RADIUS = 5

    def __init__(self, sequencer: StepSequencer, resolver: TargetResolver,
                 scheduler: FrameScheduler, font: pygame.font.Font,
                 screen_size: tuple[int, int]):
        self.sequencer = sequencer
        self.resolver = resolver
        self.font = font
        self.screen_size = screen_size

        self._panel = PanelTracker(scheduler, self._recompute)
        self._subscription: Subscription | None = None
        self._bound_target = _UNBOUND
        self._bound_step: int | None = None
        self._layout: PanelLayout | None = None
        self._closed = False

        self.target_rect: pygame.Rect | None = None
        self.connector: list[Point] | None = None

    # ------------------------------------------------------------------ #
    # Binding
    # ------------------------------------------------------------------ #

    @property
    def panel_rect(self) -> pygame.Rect | None:
        return self._panel.rect

    @property
    def closed(self) -> bool:
        return self._closed

    def sync(self):
        """Follow the sequencer: rebind on step/target change, tear down when done."""
        if self._closed:
            return
        if not self.sequencer.is_active:
            self.close()
            return

        step_idx = self.sequencer.current_step_index
        if step_idx != self._bound_step:
            self._bound_step = step_idx
            self._layout = self._build_layout()
            self._panel.mount(lambda: self._layout.rect)

        target = self.sequencer.highlight_target
        if target is not self._bound_target:
            self._bind_target(target)

    def _bind_target(self, target: HighlightTarget | None):
        # Old rect must not survive into the new step
        self.target_rect = None
        self.resolver.unsubscribe(self._subscription)
        self._subscription = None
        self._bound_target = target
        if target is not None:
            self._subscription = self.resolver.subscribe(target, self._on_target_changed)
            self.target_rect = self.resolver.resolve(target)
        self._recompute()

    def _on_target_changed(self):
        if self._bound_target is None or self._bound_target is _UNBOUND:
            return
        self.target_rect = self.resolver.resolve(self._bound_target)
        self._recompute()

    def _recompute(self):
        if (self._bound_target is not None and self._bound_target is not _UNBOUND
                and self.target_rect is not None and self._panel.rect is not None):
            self.connector = compute_connector(self._panel.rect, self.target_rect)
        else:
            self.connector = None

    def close(self):
        """Release every subscription and the pending panel reading."""
        if self._closed:
            return
        self._closed = True
        self.resolver.unsubscribe(self._subscription)
        self._subscription = None
        self.resolver.close()
        self._panel.unmount()
        self._bound_target = None
        self.target_rect = None
        self.connector = None
        self._layout = None

    # ------------------------------------------------------------------ #
    # Layout
    # ------------------------------------------------------------------ #

    def _build_layout(self) -> PanelLayout:
        seq = self.sequencer
        pad = HUD_PANEL_PADDING
        pw = HUD_PANEL_WIDTH
        lines = self._wrap_text(seq.step_text, self.font, pw - pad * 2)
        line_h = self.font.get_linesize() + self._LINE_GAP
        show_got_it = not seq.allow_interaction
        show_skip = seq.can_skip

        ph = pad * 2 + len(lines) * line_h
        if show_got_it or show_skip:
            ph += self._BTN_GAP + self._BTN_H

        screen_w, screen_h = self.screen_size
        if seq.zone == Zone.TOP:
            px = screen_w // 2 - pw // 2
            py = HUD_TOP_ZONE_Y
        else:
            px = screen_w - HUD_BOTTOM_ZONE_RIGHT - pw
            py = screen_h - HUD_BOTTOM_ZONE_BOTTOM - ph
        layout = PanelLayout(rect=pygame.Rect(px, py, pw, ph), lines=lines)

        # Buttons are right-aligned: [Skip] [Got it]
        btn_y = py + ph - pad - self._BTN_H
        btn_right = px + pw - pad
        if show_got_it:
            layout.got_it_rect = pygame.Rect(btn_right - self._GOT_IT_W, btn_y,
                                             self._GOT_IT_W, self._BTN_H)
            btn_right = layout.got_it_rect.left - self._BTN_GAP
        if show_skip:
            layout.skip_rect = pygame.Rect(btn_right - self._SKIP_W, btn_y,
                                           self._SKIP_W, self._BTN_H)
        return layout

    # ------------------------------------------------------------------ #
    # Input handling
    # ------------------------------------------------------------------ #

    def handle_click(self, pos) -> bool:
        """Return True when the click was consumed by the walkthrough."""
        if self.sequencer.current_step_index != self._bound_step:
            # Step moved since the last frame; hit-test the current layout
            self.sync()
        if self._closed or self._layout is None or not self.sequencer.is_active:
            return False
        layout = self._layout
        if layout.got_it_rect and layout.got_it_rect.collidepoint(pos):
            if not self.sequencer.allow_interaction:
                self.sequencer.advance()
            return True
        if layout.skip_rect and layout.skip_rect.collidepoint(pos):
            if self.sequencer.can_skip:
                self.sequencer.skip()
            return True
        if layout.rect.collidepoint(pos):
            return True
        # Acknowledgment steps are modal
        return not self.sequencer.allow_interaction

    # ------------------------------------------------------------------ #
    # Rendering
    # ------------------------------------------------------------------ #

    def render(self, screen: pygame.Surface):
        if self._closed or self._layout is None:
            return
        if self.target_rect is not None:
            self._draw_glow_rect(screen, self.target_rect)
        if self.connector:
            pygame.draw.lines(screen, theme.TEAL, False, self.connector, self._CONNECTOR_W)
            pygame.draw.circle(screen, theme.TEAL, self.connector[-1], self._DOT_RADIUS)
        self._draw_panel(screen, self._layout)

    def _draw_glow_rect(self, screen: pygame.Surface, rect: pygame.Rect):
        alpha = int(150 + 80 * math.sin(time.monotonic() * 3.0))
        surf = pygame.Surface((rect.w + 8, rect.h + 8), pygame.SRCALPHA)
        pygame.draw.rect(surf, (*theme.TEAL, alpha),
                         pygame.Rect(0, 0, rect.w + 8, rect.h + 8), 2, border_radius=6)
        screen.blit(surf, (rect.x - 4, rect.y - 4))

    def _draw_panel(self, screen: pygame.Surface, layout: PanelLayout):
        rect = layout.rect
        pad = HUD_PANEL_PADDING
        overlay = pygame.Surface(rect.size, pygame.SRCALPHA)
        overlay.fill(theme.BG_PANEL_DARK)
        screen.blit(overlay, rect.topleft)
        pygame.draw.rect(screen, theme.TEAL, rect, 2, border_radius=10)

        y = rect.y + pad
        line_h = self.font.get_linesize() + self._LINE_GAP
        for line in layout.lines:
            surf = self.font.render(line, True, theme.TEXT_PRIMARY)
            screen.blit(surf, (rect.x + pad, y))
            y += line_h

        if layout.skip_rect:
            pygame.draw.rect(screen, theme.BG_ELEVATED, layout.skip_rect, border_radius=6)
            pygame.draw.rect(screen, theme.BORDER_MEDIUM, layout.skip_rect, 1, border_radius=6)
            self._draw_label(screen, "Skip", layout.skip_rect, theme.TEXT_SECONDARY)
        if layout.got_it_rect:
            pygame.draw.rect(screen, theme.ACCENT, layout.got_it_rect, border_radius=6)
            self._draw_label(screen, "Got it", layout.got_it_rect, theme.TEXT_ON_ACCENT)

    def _draw_label(self, screen: pygame.Surface, text: str,
                    rect: pygame.Rect, color: tuple):
        lbl = self.font.render(text, True, color)
        screen.blit(lbl, (rect.centerx - lbl.get_width() // 2,
                          rect.centery - lbl.get_height() // 2))

    # ------------------------------------------------------------------ #
    # Text wrapping
    # ------------------------------------------------------------------ #

    @staticmethod
    def _wrap_text(text: str, font: pygame.font.Font, max_w: int) -> list[str]:
        result = []
        for para in text.split("\n"):
            if not para.strip():
                result.append("")
                continue
            line = ""
            for word in para.split(" "):
                candidate = (line + " " + word).strip()
                if font.size(candidate)[0] <= max_w:
                    line = candidate
                else:
                    if line:
                        result.append(line)
                    line = word
            if line:
                result.append(line)
        return result
