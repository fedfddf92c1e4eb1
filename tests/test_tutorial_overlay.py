"""Tests for the walkthrough overlay's binding, connector and click handling."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pygame
import pytest

from shared.constants import AdvanceCondition, HighlightTarget, Zone
from shared.models import Step
from shared.step_sequencer import StepSequencer
from client.frame_scheduler import FrameScheduler
from client.target_resolver import TargetResolver
from client.tutorial_overlay import TutorialOverlay
from client.ui_registry import UIRegistry

SCREEN = (1280, 800)
END_TURN_RECT = pygame.Rect(1080, 700, 140, 48)   # below the bottom-zone panel
HAND_RECT = pygame.Rect(100, 600, 500, 150)       # left of the bottom-zone panel


def make_steps():
    return [
        Step(1, HighlightTarget.END_TURN, lambda s: f"Hello {s}",
             AdvanceCondition.MANUAL, Zone.BOTTOM),
        Step(2, HighlightTarget.HAND, lambda s: "Play an attack.",
             AdvanceCondition.PLAY_ATTACK, Zone.BOTTOM, allow_interaction=True),
        Step(3, None, lambda s: "Skip me if you like.",
             AdvanceCondition.PLAY_DEFEND, Zone.TOP, allow_skip=True, allow_interaction=True),
        Step(4, HighlightTarget.TURN_ORDER, lambda s: "Done.",
             AdvanceCondition.MANUAL, Zone.TOP),
    ]


@pytest.fixture(scope="module")
def font():
    pygame.font.init()
    return pygame.font.Font(None, 15)


@pytest.fixture
def setup(font):
    registry = UIRegistry()
    registry.sync({"end_turn": END_TURN_RECT, "hand": HAND_RECT})
    scheduler = FrameScheduler()
    completed = []
    seq = StepSequencer(make_steps(), "Pikachu", on_complete=lambda: completed.append(True))
    overlay = TutorialOverlay(seq, TargetResolver(registry), scheduler, font, SCREEN)
    return overlay, seq, registry, scheduler, completed


class TestBinding:
    def test_target_resolved_on_first_sync(self, setup):
        overlay, _, registry, _, _ = setup
        overlay.sync()
        assert overlay.target_rect == END_TURN_RECT
        assert registry.listener_count == 2

    def test_connector_waits_for_panel_measurement(self, setup):
        overlay, _, _, scheduler, _ = setup
        overlay.sync()
        assert overlay.panel_rect is None
        assert overlay.connector is None
        scheduler.run_pending()
        panel = overlay.panel_rect
        assert panel is not None
        assert panel.right == SCREEN[0] - 80
        assert panel.bottom == SCREEN[1] - 165
        assert overlay.connector[0] == (panel.centerx, panel.bottom)
        assert overlay.connector[-1] == (END_TURN_RECT.centerx, END_TURN_RECT.top)

    def test_target_move_recomputes_connector(self, setup):
        overlay, _, registry, scheduler, _ = setup
        overlay.sync()
        scheduler.run_pending()
        moved = END_TURN_RECT.move(-20, 30)
        registry.publish("end_turn", moved)
        assert overlay.target_rect == moved
        assert overlay.connector[-1] == (moved.centerx, moved.top)

    def test_target_disappearing_drops_connector(self, setup):
        overlay, _, registry, scheduler, _ = setup
        overlay.sync()
        scheduler.run_pending()
        registry.withdraw("end_turn")
        assert overlay.target_rect is None
        assert overlay.connector is None

    def test_step_change_rebinds_target(self, setup):
        overlay, seq, registry, scheduler, _ = setup
        overlay.sync()
        scheduler.run_pending()
        seq.advance()
        overlay.sync()
        assert overlay.target_rect == HAND_RECT
        assert registry.listener_count == 2
        # old target no longer reaches the overlay
        registry.publish("end_turn", pygame.Rect(0, 0, 1, 1))
        assert overlay.target_rect == HAND_RECT
        # new panel measured one tick later, target is to its left
        assert overlay.connector is None
        scheduler.run_pending()
        panel = overlay.panel_rect
        assert overlay.connector[0] == (panel.left, panel.centery)

    def test_no_highlight_means_no_subscription(self, setup):
        overlay, seq, registry, scheduler, _ = setup
        seq.advance()
        seq.advance()
        overlay.sync()
        scheduler.run_pending()
        assert overlay.target_rect is None
        assert overlay.connector is None
        assert registry.listener_count == 0

    def test_completion_tears_down(self, setup):
        overlay, seq, registry, scheduler, completed = setup
        overlay.sync()
        for _ in range(4):
            seq.advance()
        overlay.sync()
        assert overlay.closed is True
        assert completed == [True]
        assert registry.listener_count == 0
        assert scheduler.pending_count == 0
        assert overlay.connector is None

    def test_close_stops_notifications(self, setup):
        overlay, _, registry, scheduler, _ = setup
        overlay.sync()
        overlay.close()
        scheduler.run_pending()
        registry.publish("end_turn", pygame.Rect(5, 5, 5, 5))
        registry.scroll()
        assert overlay.target_rect is None
        assert overlay.panel_rect is None
        assert registry.listener_count == 0
        overlay.sync()
        assert overlay.closed is True


class TestClicks:
    def _got_it_pos(self, overlay):
        return overlay._layout.got_it_rect.center

    def test_got_it_advances(self, setup):
        overlay, seq, _, _, _ = setup
        overlay.sync()
        assert overlay.handle_click(self._got_it_pos(overlay)) is True
        assert seq.current_index == 1

    def test_double_click_in_one_frame_does_not_skip_gated_step(self, setup):
        overlay, seq, _, _, _ = setup
        overlay.sync()
        pos = self._got_it_pos(overlay)
        assert overlay.handle_click(pos) is True
        # no sync() in between: both clicks land before the next frame
        overlay.handle_click(pos)
        assert seq.current_index == 1
        assert seq.current_step.advance_condition == AdvanceCondition.PLAY_ATTACK
        assert overlay._layout.got_it_rect is None

    def test_got_it_ignored_on_interactive_step(self, setup):
        overlay, seq, _, _, _ = setup
        overlay.sync()
        got_it = overlay._layout.got_it_rect
        seq.advance()
        overlay._bound_step = seq.current_step_index
        overlay.handle_click(got_it.center)
        assert seq.current_index == 1

    def test_modal_step_swallows_outside_clicks(self, setup):
        overlay, seq, _, _, _ = setup
        overlay.sync()
        assert overlay.handle_click((5, 5)) is True
        assert seq.current_index == 0

    def test_interactive_step_passes_clicks_through(self, setup):
        overlay, seq, _, _, _ = setup
        seq.advance()
        overlay.sync()
        assert overlay._layout.got_it_rect is None
        assert overlay.handle_click((5, 5)) is False
        assert overlay.handle_click(overlay._layout.rect.center) is True
        assert seq.current_index == 1

    def test_skip_button(self, setup):
        overlay, seq, _, _, _ = setup
        seq.advance()
        seq.advance()
        overlay.sync()
        skip_rect = overlay._layout.skip_rect
        assert skip_rect is not None
        assert overlay.handle_click(skip_rect.center) is True
        assert seq.current_index == 3

    def test_clicks_ignored_after_close(self, setup):
        overlay, _, _, _, _ = setup
        overlay.sync()
        overlay.close()
        assert overlay.handle_click((5, 5)) is False
