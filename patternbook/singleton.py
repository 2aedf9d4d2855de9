"""Singleton: a single shared, lock-protected list, and explicit state passing."""

from __future__ import annotations

import threading

_U32_MAX = 2**32 - 1

_calls: list[int] = []
_lock = threading.Lock()


def do_a_call() -> None:
    """Record one call in the shared list."""
    with _lock:
        _calls.append(1)


def call_count() -> int:
    """How many calls the shared list holds."""
    with _lock:
        return len(_calls)


def change(global_state: int) -> int:
    """Return the state increased by one; overflowing 32 bits is an error."""
    if global_state >= _U32_MAX:
        raise OverflowError("state overflows 32 bits")
    return global_state + 1


def demo() -> None:
    do_a_call()
    do_a_call()
    do_a_call()
    print(f"Called {call_count()} times")

    state = change(0)
    print(f"Final state: {state}")