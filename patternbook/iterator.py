"""Iterator pattern: sequential traversal of a user collection."""

from __future__ import annotations


class UserCollection:
    """A fixed collection of user names."""

    def __init__(self) -> None:
        self._users = ("Alice", "Bob", "Carl")

    def __iter__(self) -> UserIterator:
        return UserIterator(self)


class UserIterator:
    """Walks a UserCollection without exposing its storage."""

    def __init__(self, collection: UserCollection) -> None:
        self._collection = collection
        self._index = 0

    def __iter__(self) -> UserIterator:
        return self

    def __next__(self) -> str:
        users = self._collection._users
        if self._index >= len(users):
            raise StopIteration
        user = users[self._index]
        self._index += 1
        return user


def demo() -> None:
    """Show a built-in iterator and the custom one."""
    print("Iterators are widely used in the standard library: ", end="")
    print(" ".join(str(e) for e in (1, 2, 3)), end=" ")
    print("\n\nLet's test our own iterator.\n")

    users = UserCollection()
    iterator = iter(users)
    for label in ("1nd", "2nd", "3rd", "4th"):
        print(f"{label} element: {next(iterator, None)!r}")

    print("\nAll elements in user collection: ", end="")
    print(" ".join(users), end=" ")
    print()