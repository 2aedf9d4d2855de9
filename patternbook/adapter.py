"""Adapter pattern: making an incompatible object fit a target interface."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Target(ABC):
    @abstractmethod
    def request(self) -> str:
        """Return the request text."""


class OrdinaryTarget(Target):
    def request(self) -> str:
        return "Ordinary request."


class SpecificTarget:
    """An object with an incompatible interface."""

    def specific_request(self) -> str:
        return ".tseuqer cificepS"


class TargetAdapter(Target):
    """Presents a SpecificTarget as a Target."""

    def __init__(self, adaptee: SpecificTarget) -> None:
        self.adaptee = adaptee

    def request(self) -> str:
        return self.adaptee.specific_request()[::-1]


def call(target: Target) -> None:
    """Client code that works with Targets only."""
    print(f"'{target.request()}'")


def demo() -> None:
    print("A compatible target can be directly called: ", end="")
    call(OrdinaryTarget())

    adaptee = SpecificTarget()
    print(f"Adaptee is incompatible with client: '{adaptee.specific_request()}'")

    print("But with adapter client can call its method: ", end="")
    call(TargetAdapter(adaptee))