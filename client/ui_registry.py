"""Registry of on-screen element rects published by the host scene each frame.

Scenes draw their widgets and then publish the rect of every element the
walkthrough may point at, keyed by element id. Listeners keyed by element id
are told when that element's rect changes, appears or disappears; scroll
listeners are told whenever the host reports a viewport scroll.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Callable
import pygame

Listener = Callable[[], None]


@dataclass(frozen=True)
class ElementHandle:
    element_id: str


class UIRegistry:
    def __init__(self):
        self._rects: dict[str, pygame.Rect] = {}
        self._layout_listeners: dict[str, list[Listener]] = {}
        self._scroll_listeners: list[Listener] = []

    # ------------------------------------------------------------------ #
    # Host side
    # ------------------------------------------------------------------ #

    def publish(self, element_id: str, rect: pygame.Rect):
        old = self._rects.get(element_id)
        if old is not None and old == rect:
            return
        self._rects[element_id] = pygame.Rect(rect)
        self._fire_layout(element_id)

    def withdraw(self, element_id: str):
        if self._rects.pop(element_id, None) is not None:
            self._fire_layout(element_id)

    def sync(self, rects: dict[str, pygame.Rect]):
        """Replace the published set: publish everything given, withdraw the rest."""
        for element_id in [k for k in self._rects if k not in rects]:
            self.withdraw(element_id)
        for element_id, rect in rects.items():
            self.publish(element_id, rect)

    def scroll(self):
        for listener in list(self._scroll_listeners):
            listener()

    # ------------------------------------------------------------------ #
    # Consumer side
    # ------------------------------------------------------------------ #

    def find_element(self, element_id: str) -> ElementHandle | None:
        if element_id in self._rects:
            return ElementHandle(element_id)
        return None

    def bounding_box(self, handle: ElementHandle) -> pygame.Rect:
        """Current rect of a found element. Raises KeyError once it is withdrawn."""
        return pygame.Rect(self._rects[handle.element_id])

    def add_layout_listener(self, element_id: str, listener: Listener):
        self._layout_listeners.setdefault(element_id, []).append(listener)

    def remove_layout_listener(self, element_id: str, listener: Listener):
        listeners = self._layout_listeners.get(element_id, [])
        if listener in listeners:
            listeners.remove(listener)
        if not listeners:
            self._layout_listeners.pop(element_id, None)

    def add_scroll_listener(self, listener: Listener):
        self._scroll_listeners.append(listener)

    def remove_scroll_listener(self, listener: Listener):
        if listener in self._scroll_listeners:
            self._scroll_listeners.remove(listener)

    @property
    def listener_count(self) -> int:
        return (sum(len(v) for v in self._layout_listeners.values())
                + len(self._scroll_listeners))

    def _fire_layout(self, element_id: str):
        for listener in list(self._layout_listeners.get(element_id, [])):
            listener()
