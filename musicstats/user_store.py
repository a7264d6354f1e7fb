"""Lookup table of users and likes gathered by age."""

from __future__ import annotations

from typing import Iterator, Optional

from musicstats.user import User
from musicstats.user_likes import LikesInput, UserLikes


class UserStore:
    """Users keyed by username, and liked-genre totals keyed by age."""

    def __init__(self) -> None:
        self._users: dict[str, User] = {}
        self._likes_by_age: dict[int, UserLikes] = {}

    def add(self, user: User) -> None:
        """Store *user*, replacing any user with the same username."""
        self._users[user.username] = user

    def remove(self, username: str) -> None:
        """Drop the user named *username*; unknown names are ignored."""
        self._users.pop(username, None)

    def get(self, username: str) -> Optional[User]:
        """Return the user named *username*, or None."""
        return self._users.get(username)

    def __contains__(self, username: object) -> bool:
        return username in self._users

    def __iter__(self) -> Iterator[User]:
        return iter(self._users.values())

    def __len__(self) -> int:
        return len(self._users)

    def add_likes(self, likes: LikesInput, age: int) -> UserLikes:
        """Add genre like counts to the totals for *age* and return them."""
        entry = self._likes_by_age.get(age)
        if entry is None:
            entry = UserLikes(age, likes)
            self._likes_by_age[age] = entry
        else:
            entry.merge(likes)
        return entry

    def likes_for_age(self, age: int) -> Optional[UserLikes]:
        """Return the like totals for *age*, or None."""
        return self._likes_by_age.get(age)

    def all_likes(self) -> list[UserLikes]:
        """Return every age's like totals, in the order the ages were first seen."""
        return list(self._likes_by_age.values())