"""Strategy pattern: a navigator with interchangeable route builders."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable

RouteBuilder = Callable[[str, str], str]


class RouteStrategy(ABC):
    """Builds a route description between two places."""

    @abstractmethod
    def build_route(self, origin: str, destination: str) -> str:
        """Return a description of the route."""

    def __call__(self, origin: str, destination: str) -> str:
        return self.build_route(origin, destination)


class WalkingStrategy(RouteStrategy):
    def build_route(self, origin: str, destination: str) -> str:
        return walking_strategy(origin, destination)


class PublicTransportStrategy(RouteStrategy):
    def build_route(self, origin: str, destination: str) -> str:
        return public_transport_strategy(origin, destination)


def walking_strategy(origin: str, destination: str) -> str:
    return f"Walking route from {origin} to {destination}: 4 km, 30 min"


def public_transport_strategy(origin: str, destination: str) -> str:
    return f"Public transport route from {origin} to {destination}: 3 km, 5 min"


class Navigator:
    """Routes with whatever strategy it was given."""

    def __init__(self, route_strategy: RouteBuilder) -> None:
        self.route_strategy = route_strategy

    def route(self, origin: str, destination: str) -> str:
        """Print and return the route built by the strategy."""
        text = self.route_strategy(origin, destination)
        print(text)
        return text


def demo() -> None:
    """Route with class strategies, function strategies and a lambda."""
    strategies: list[RouteBuilder] = [
        WalkingStrategy(),
        PublicTransportStrategy(),
        walking_strategy,
        public_transport_strategy,
        lambda origin, destination: f"Specific route from {origin} to {destination}",
    ]
    for strategy in strategies:
        navigator = Navigator(strategy)
        navigator.route("Home", "Club")
        navigator.route("Club", "Work")