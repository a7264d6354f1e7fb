"""Listening history entry and platform kinds."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Platform(Enum):
    """The platform a song was played on."""

    DESKTOP = "desktop"
    MOBILE = "mobile"

    def __str__(self) -> str:
        return self.value


def is_valid_platform(text: Optional[str]) -> bool:
    """Return True if *text* names a platform, ignoring case."""
    if text is None:
        return False
    return text.lower() in {p.value for p in Platform}


def platform_from_string(text: Optional[str]) -> Platform:
    """Convert *text* to a :class:`Platform`, ignoring case."""
    if text is None:
        raise ValueError("invalid platform: None")
    try:
        return Platform(text.lower())
    except ValueError:
        raise ValueError(f"unknown platform: {text}") from None


@dataclass
class History:
    """One play of a song by a user."""

    id: int
    user_id: int
    music_id: int
    timestamp: str
    duration: str
    platform: Platform