"""Settings persistence: settings.json next to the executable (or project root)."""

import os
import sys
import json

DEFAULT_SETTINGS = {
    "fullscreen": False,
    "tutorial_complete": False,
}


def settings_path() -> str:
    if getattr(sys, 'frozen', False):
        base = os.path.dirname(sys.executable)
    else:
        # Two levels up from client/settings.py -> project root
        base = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
    return os.path.join(base, 'settings.json')


def load_settings(path: str | None = None) -> dict:
    path = path or settings_path()
    settings = dict(DEFAULT_SETTINGS)
    try:
        with open(path, 'r', encoding='utf-8') as f:
            settings.update(json.load(f))
    except (OSError, ValueError):
        pass
    return settings


def save_settings(data: dict, path: str | None = None) -> None:
    path = path or settings_path()
    os.makedirs(os.path.dirname(path), exist_ok=True)
    with open(path, 'w', encoding='utf-8') as f:
        json.dump(data, f, indent=2)


def update_settings(changes: dict, path: str | None = None) -> dict:
    """Merge changes into the stored settings and write them back."""
    settings = load_settings(path)
    settings.update(changes)
    save_settings(settings, path)
    return settings
