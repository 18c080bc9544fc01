from __future__ import annotations

from typing import List, Optional, Tuple

from user_management.domain.user import User

from .base import IRepository


class InMemoryUserRepository(IRepository):
    """List-backed user storage kept in insertion order.

    The repository does no locking of its own; the owning service serializes
    every call.
    """

    def __init__(self) -> None:
        self._users: List[User] = []

    def add(self, data: User) -> None:  # type: ignore[override]
        self._users.append(data)

    def get(self, object_id: int) -> Optional[User]:  # type: ignore[override]
        return next((user for user in self._users if user.id == object_id), None)

    def delete(self, data: User) -> None:  # type: ignore[override]
        self._users.remove(data)

    def count(self) -> int:
        return len(self._users)

    def max_id(self) -> int:
        return max((user.id for user in self._users), default=0)

    def fetch_page(self, *, page: int, size: int) -> Tuple[List[User], int]:
        total = len(self._users)
        start = (page - 1) * size
        items = self._users[start : start + size]
        return items, total

    def find_by_email(self, email: str, exclude_id: Optional[int] = None) -> Optional[User]:
        needle = email.lower()
        for user in self._users:
            if exclude_id is not None and user.id == exclude_id:
                continue
            if user.email.lower() == needle:
                return user
        return None
