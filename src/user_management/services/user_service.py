from __future__ import annotations

import copy
import math
import threading
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Iterator, List, Optional

from user_management.adapters.repository import InMemoryUserRepository
from user_management.domain.user import User

SEED_USERS = (
    ("John Doe", 30, "john.doe@example.com"),
    ("Jane Smith", 25, "jane.smith@example.com"),
    ("Bob Johnson", 35, "bob.johnson@example.com"),
)


@dataclass(frozen=True)
class UsersPage:
    page: int
    page_size: int
    total_users: int
    users: List[User] = field(default_factory=list)

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_users / self.page_size)


class UserService:
    """In-memory user store.

    Every public method runs under the instance lock, so readers never see a
    half-applied write and concurrent creates never share an id. Users handed
    back to callers are copies; the repository keeps the only live instances.

    ``create_user`` and ``update_user`` trust their input. Field validation and
    the duplicate email check belong to the caller, which should wrap the check
    and the write in ``atomic()``.
    """

    def __init__(self, seed: bool = True) -> None:
        self._lock = threading.RLock()
        self._repository = InMemoryUserRepository()
        if seed:
            for name, age, email in SEED_USERS:
                self.create_user(name=name, age=age, email=email)

    @contextmanager
    def atomic(self) -> Iterator["UserService"]:
        with self._lock:
            yield self

    def count(self) -> int:
        with self._lock:
            return self._repository.count()

    def get_all_users(self, page: int, page_size: int) -> UsersPage:
        with self._lock:
            users, total = self._repository.fetch_page(page=page, size=page_size)
            return UsersPage(
                page=page,
                page_size=page_size,
                total_users=total,
                users=[copy.copy(user) for user in users],
            )

    def get_user_by_id(self, user_id: int) -> Optional[User]:
        with self._lock:
            user = self._repository.get(user_id)
            return copy.copy(user) if user is not None else None

    def create_user(self, name: str, age: int, email: str) -> User:
        with self._lock:
            # max + 1 on every call: deleting the highest id frees it for reuse
            user = User.register(id=self._repository.max_id() + 1, name=name, age=age, email=email)
            self._repository.add(user)
            return copy.copy(user)

    def update_user(self, user_id: int, name: str, age: int, email: str) -> Optional[User]:
        with self._lock:
            user = self._repository.get(user_id)
            if user is None:
                return None
            user.update(name=name, age=age, email=email)
            return copy.copy(user)

    def delete_user(self, user_id: int) -> bool:
        with self._lock:
            user = self._repository.get(user_id)
            if user is None:
                return False
            self._repository.delete(user)
            return True

    def email_exists(self, email: str, exclude_id: Optional[int] = None) -> bool:
        with self._lock:
            return self._repository.find_by_email(email, exclude_id=exclude_id) is not None
