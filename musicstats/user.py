"""User entity and subscription kinds."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class SubscriptionType(Enum):
    """The kind of subscription a user holds."""

    NORMAL = "normal"
    PREMIUM = "premium"

    def __str__(self) -> str:
        return self.value


def subscription_from_string(text: Optional[str]) -> SubscriptionType:
    """Convert *text* to a :class:`SubscriptionType`; the match is case-sensitive."""
    try:
        return SubscriptionType(text)
    except ValueError:
        raise ValueError(f"invalid subscription: {text}") from None


@dataclass
class User:
    """A registered user and the songs they liked."""

    username: str
    email: str
    first_name: str
    last_name: str
    birth_date: str
    country: str
    subscription_type: SubscriptionType = SubscriptionType.NORMAL
    liked_musics: tuple[int, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        self.liked_musics = tuple(self.liked_musics)

    @property
    def num_liked_musics(self) -> int:
        return len(self.liked_musics)