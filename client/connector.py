"""L-shaped connector from the walkthrough panel to the highlighted element."""

from __future__ import annotations
import pygame

Point = tuple[int, int]


def compute_connector(panel: pygame.Rect,
                      target: pygame.Rect) -> list[Point] | None:
    """Return [start, corner, end] for a one-bend path, or None.

    The side of the panel the path leaves from is picked in the order
    right, below, left, above: the first direction in which the target lies
    entirely beyond the panel's edge wins. Overlapping or edge-touching
    rects get no connector.
    """
    if target.left > panel.right:
        return [
            (panel.right, panel.centery),
            (target.left, panel.centery),
            (target.left, target.centery),
        ]
    if target.top > panel.bottom:
        return [
            (panel.centerx, panel.bottom),
            (panel.centerx, target.top),
            (target.centerx, target.top),
        ]
    if target.right < panel.left:
        return [
            (panel.left, panel.centery),
            (target.right, panel.centery),
            (target.right, target.centery),
        ]
    if target.bottom < panel.top:
        return [
            (panel.centerx, panel.top),
            (panel.centerx, target.bottom),
            (target.centerx, target.bottom),
        ]
    return None
