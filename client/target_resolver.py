"""Screen rects for walkthrough highlight targets and for the walkthrough panel."""

from __future__ import annotations
from typing import Callable
import pygame
from shared.constants import HIGHLIGHT_ELEMENT_IDS, HighlightTarget
from client.frame_scheduler import FrameScheduler, ScheduledCall
from client.ui_registry import UIRegistry


def element_id_for(target: HighlightTarget) -> str:
    """Element id the host publishes for a highlight target."""
    return HIGHLIGHT_ELEMENT_IDS.get(target, target.value)


class Subscription:
    """Handle returned by TargetResolver.subscribe(). unsubscribe() is idempotent."""

    def __init__(self, target: HighlightTarget, release: Callable[[], None]):
        self.target = target
        self._release: Callable[[], None] | None = release

    @property
    def active(self) -> bool:
        return self._release is not None

    def unsubscribe(self):
        release, self._release = self._release, None
        if release is not None:
            release()


class TargetResolver:
    """Resolves highlight targets to rects and reports when those rects move."""

    def __init__(self, registry: UIRegistry):
        self._registry = registry
        self._subscriptions: list[Subscription] = []

    def resolve(self, target: HighlightTarget) -> pygame.Rect | None:
        """Current rect of the target's element, or None if it is not on screen."""
        handle = self._registry.find_element(element_id_for(target))
        if handle is None:
            return None
        return self._registry.bounding_box(handle)

    def subscribe(self, target: HighlightTarget,
                  on_change: Callable[[], None]) -> Subscription:
        """Call on_change when the target's element changes or the view scrolls."""
        element_id = element_id_for(target)

        # One wrapper per subscription so identical callbacks stay separable
        def listener():
            on_change()

        self._registry.add_layout_listener(element_id, listener)
        self._registry.add_scroll_listener(listener)

        def release():
            self._registry.remove_layout_listener(element_id, listener)
            self._registry.remove_scroll_listener(listener)
            self._subscriptions.remove(subscription)

        subscription = Subscription(target, release)
        self._subscriptions.append(subscription)
        return subscription

    def unsubscribe(self, subscription: Subscription | None):
        if subscription is not None:
            subscription.unsubscribe()

    def close(self):
        """Drop every live subscription."""
        for subscription in list(self._subscriptions):
            subscription.unsubscribe()

    @property
    def subscription_count(self) -> int:
        return len(self._subscriptions)


class PanelTracker:
    """Tracks the walkthrough panel's own rect.

    The first reading after mount() is taken one frame later, once the
    surrounding layout has settled. The panel only moves when it is
    re-mounted for a new step.
    """

    def __init__(self, scheduler: FrameScheduler, on_change: Callable[[], None]):
        self._scheduler = scheduler
        self._on_change = on_change
        self._measure: Callable[[], pygame.Rect] | None = None
        self._pending: ScheduledCall | None = None
        self.rect: pygame.Rect | None = None

    def mount(self, measure: Callable[[], pygame.Rect]):
        """(Re)mount the panel; any previous reading is discarded."""
        self.unmount()
        self._measure = measure
        self._pending = self._scheduler.call_next_tick(self._first_reading)

    def unmount(self):
        if self._pending is not None:
            self._pending.cancel()
            self._pending = None
        self._measure = None
        if self.rect is not None:
            self.rect = None
            self._on_change()

    def _first_reading(self):
        self._pending = None
        rect = pygame.Rect(self._measure())
        if rect != self.rect:
            self.rect = rect
            self._on_change()
