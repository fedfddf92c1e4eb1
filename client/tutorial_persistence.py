"""Remembers whether the player has finished (or skipped) the practice battle."""

from shared.constants import SETTINGS_TUTORIAL_COMPLETE
from client.settings import load_settings, update_settings


def is_tutorial_complete(path: str | None = None) -> bool:
    return load_settings(path).get(SETTINGS_TUTORIAL_COMPLETE) is True


def set_tutorial_complete(path: str | None = None) -> None:
    try:
        update_settings({SETTINGS_TUTORIAL_COMPLETE: True}, path)
    except OSError as e:
        print(f"[settings] WARNING: Failed to save tutorial completion: {e}")


def reset_tutorial(path: str | None = None) -> None:
    try:
        update_settings({SETTINGS_TUTORIAL_COMPLETE: False}, path)
    except OSError as e:
        print(f"[settings] WARNING: Failed to reset tutorial: {e}")
