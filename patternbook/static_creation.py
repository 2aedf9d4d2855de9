"""Static creation method: alternative constructors as class methods."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class User:
    name: str
    surname: str

    @classmethod
    def load(cls, user_id: int) -> User:
        """Load a user by id; raise LookupError for an unknown id."""
        if user_id == 42:
            return cls("John", "Smith")
        raise LookupError(f"no user with id {user_id}")


def demo() -> None:
    alice = User("Alice", "Fisher")
    john = User.load(42)
    print(f"{alice.name} {alice.surname}")
    print(f"{john.name} {john.surname}")