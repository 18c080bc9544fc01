from __future__ import annotations

from .base import IDomain


class User(IDomain):
    def __init__(self, id: int, name: str, age: int, email: str) -> None:
        self.id = id
        self.name = name
        self.age = age
        self.email = email

    @classmethod
    def register(cls, id: int, name: str, age: int, email: str) -> "User":
        user = cls(id=id, name=name, age=age, email=email)
        user.update(name=name, age=age, email=email)
        return user

    def update(self, name: str, age: int, email: str) -> None:
        self.name = name.strip()
        self.age = age
        self.email = email.strip().lower()
