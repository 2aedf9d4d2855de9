"""Template method pattern: a fixed algorithm with overridable steps."""

from __future__ import annotations

from abc import ABC, abstractmethod
from types import MappingProxyType
from typing import ClassVar, Mapping


def _say(text: str) -> str:
    print(text)
    return text


class TemplateMethod(ABC):
    """Defines the skeleton; subclasses supply the required steps.

    Every step prints its line and returns it.
    """

    owner: ClassVar[str] = "TemplateMethod"
    hook_messages: ClassVar[Mapping[str, str]] = MappingProxyType({})

    def template_method(self) -> list[str]:
        """Run every step in order and return the lines produced."""
        steps = [
            self.base_operation1(),
            self.required_operations1(),
            self.base_operation2(),
            self.hook1(),
            self.required_operations2(),
            self.base_operation3(),
            self.hook2(),
        ]
        return [line for line in steps if line is not None]

    def base_operation1(self) -> str:
        return _say(f"{self.owner} says: I am doing the bulk of the work")

    def base_operation2(self) -> str:
        return _say(f"{self.owner} says: But I let subclasses override some operations")

    def base_operation3(self) -> str:
        return _say(f"{self.owner} says: But I am doing the bulk of the work anyway")

    def _run_hook(self, name: str) -> str | None:
        message = self.hook_messages.get(name)
        if message is None:
            return None
        return _say(message)

    def hook1(self) -> str | None:
        """Optional extension point; outputs a line only if one is configured."""
        return self._run_hook("hook1")

    def hook2(self) -> str | None:
        """Optional extension point; outputs a line only if one is configured."""
        return self._run_hook("hook2")

    @abstractmethod
    def required_operations1(self) -> str:
        """First step every subclass must provide."""

    @abstractmethod
    def required_operations2(self) -> str:
        """Second step every subclass must provide."""


class ConcreteClass1(TemplateMethod):
    name: ClassVar[str] = "ConcreteStruct1"

    def required_operations1(self) -> str:
        return _say(f"{self.name} says: Implemented Operation1")

    def required_operations2(self) -> str:
        return _say(f"{self.name} says: Implemented Operation2")


class ConcreteClass2(TemplateMethod):
    name: ClassVar[str] = "ConcreteStruct2"

    def required_operations1(self) -> str:
        return _say(f"{self.name} says: Implemented Operation1")

    def required_operations2(self) -> str:
        return _say(f"{self.name} says: Implemented Operation2")


def client_code(concrete: TemplateMethod) -> list[str]:
    """Run the algorithm on any implementation."""
    return concrete.template_method()


def demo() -> None:
    print("Same client code can work with different concrete implementations:")
    client_code(ConcreteClass1())
    print()

    print("Same client code can work with different concrete implementations:")
    client_code(ConcreteClass1())