"""Shared font factory with module-level cache."""

from __future__ import annotations
import pygame

_cache: dict[tuple[str | None, int, bool], pygame.font.Font] = {}


def get_font(size: int, bold: bool = False, name: str | None = "consolas") -> pygame.font.Font:
    """SysFont by name, or pygame's bundled default font when name is None."""
    key = (name, size, bold)
    if key not in _cache:
        if name is None:
            font = pygame.font.Font(None, size)
            font.set_bold(bold)
        else:
            font = pygame.font.SysFont(name, size, bold=bold)
        _cache[key] = font
    return _cache[key]
