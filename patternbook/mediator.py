"""Mediator pattern: a train station coordinating trains on one platform."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections import deque


class Mediator(ABC):
    """Receives notifications from trains."""

    @abstractmethod
    def notify_about_arrival(self, train_name: str) -> bool:
        """Return True if the train may take the platform now."""

    @abstractmethod
    def notify_about_departure(self, train_name: str) -> None:
        """Record that a train has left."""


class Train:
    """A train that talks to a mediator instead of other trains."""

    kind = "Train"

    def __init__(self, name: str) -> None:
        self.name = name

    def arrive(self, mediator: Mediator) -> None:
        if not mediator.notify_about_arrival(self.name):
            print(f"{self.kind} {self.name}: Arrival blocked, waiting")
            return
        print(f"{self.kind} {self.name}: Arrived")

    def depart(self, mediator: Mediator) -> None:
        print(f"{self.kind} {self.name}: Leaving")
        mediator.notify_about_departure(self.name)


class PassengerTrain(Train):
    kind = "Passenger train"


class FreightTrain(Train):
    kind = "Freight train"


class TrainStation(Mediator):
    """A station with a single platform and a waiting queue."""

    def __init__(self) -> None:
        self.trains: dict[str, Train] = {}
        self.train_queue: deque[str] = deque()
        self.train_on_platform: str | None = None

    def notify_about_arrival(self, train_name: str) -> bool:
        if self.train_on_platform is not None:
            self.train_queue.append(train_name)
            return False
        self.train_on_platform = train_name
        return True

    def notify_about_departure(self, train_name: str) -> None:
        if self.train_on_platform != train_name:
            return
        self.train_on_platform = None
        if self.train_queue:
            next_name = self.train_queue.popleft()
            next_train = self.trains.pop(next_name)
            next_train.arrive(self)
            self.trains[next_name] = next_train
            self.train_on_platform = next_name

    def accept(self, train: Train) -> None:
        """Take a train into the station."""
        if train.name in self.trains:
            print(f"{train.name} has already arrived")
            return
        train.arrive(self)
        self.trains[train.name] = train

    def depart(self, name: str) -> None:
        """Send the named train away."""
        train = self.trains.pop(name, None)
        if train is None:
            print(f"'{name}' is not on the station!")
            return
        train.depart(self)


def demo() -> None:
    """Accept two trains and depart them, plus one unknown train."""
    station = TrainStation()
    station.accept(PassengerTrain("Train 1"))
    station.accept(FreightTrain("Train 2"))
    station.depart("Train 1")
    station.depart("Train 2")
    station.depart("Train 3")