"""Builder pattern: assembling cars and car manuals step by step."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum

DEFAULT_FUEL = 5.0
DEFAULT_ROUTE = "221b, Baker Street, London  to Scotland Yard, 8-10 Broadway, London"


class BuildError(Exception):
    """A required part was not set before building."""


class CarType(Enum):
    CITY_CAR = "CityCar"
    SPORTS_CAR = "SportsCar"
    SUV = "Suv"

    def __str__(self) -> str:
        return self.value


class Transmission(Enum):
    SINGLE_SPEED = "SingleSpeed"
    MANUAL = "Manual"
    AUTOMATIC = "Automatic"
    SEMI_AUTOMATIC = "SemiAutomatic"

    def __str__(self) -> str:
        return self.value


def _format_number(value: float) -> str:
    """Format a float the short way: whole numbers without a fraction."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    if float(value).is_integer():
        return str(int(value))
    return format(Decimal(repr(float(value))), "f")


class Engine:
    """An engine that counts mileage while it runs."""

    def __init__(self, volume: float, mileage: float) -> None:
        self.volume = volume
        self.mileage = mileage
        self.started = False

    def on(self) -> None:
        self.started = True

    def off(self) -> None:
        self.started = False

    def go(self, mileage: float) -> None:
        """Add mileage if the engine is running."""
        if self.started:
            self.mileage += mileage
        else:
            print("Cannot go(), you must start engine first!")


@dataclass
class GpsNavigator:
    """A navigator holding a route."""

    route: str = DEFAULT_ROUTE


@dataclass
class Car:
    """A built car."""

    car_type: CarType
    seats: int
    engine: Engine
    transmission: Transmission
    gps_navigator: GpsNavigator | None = None
    fuel: float = DEFAULT_FUEL


@dataclass
class Manual:
    """A manual describing a car."""

    car_type: CarType
    seats: int
    engine: Engine
    transmission: Transmission
    gps_navigator: GpsNavigator | None = None

    def __str__(self) -> str:
        gps = "Functional" if self.gps_navigator is not None else "N/A"
        lines = [
            f"Type of car: {self.car_type}",
            f"Count of seats: {self.seats}",
            f"Engine: volume - {_format_number(self.engine.volume)}; "
            f"mileage - {_format_number(self.engine.mileage)}",
            f"Transmission: {self.transmission}",
            f"GPS Navigator: {gps}",
        ]
        return "".join(line + "\n" for line in lines)


class Builder(ABC):
    """Collects the parts of a car; build() assembles the product."""

    def __init__(self) -> None:
        self.car_type: CarType | None = None
        self.seats: int | None = None
        self.engine: Engine | None = None
        self.transmission: Transmission | None = None
        self.gps_navigator: GpsNavigator | None = None

    def set_car_type(self, car_type: CarType) -> None:
        self.car_type = car_type

    def set_seats(self, seats: int) -> None:
        self.seats = seats

    def set_engine(self, engine: Engine) -> None:
        self.engine = engine

    def set_transmission(self, transmission: Transmission) -> None:
        self.transmission = transmission

    def set_gps_navigator(self, gps_navigator: GpsNavigator) -> None:
        self.gps_navigator = gps_navigator

    def _required(self) -> tuple[CarType, int, Engine, Transmission]:
        if self.car_type is None:
            raise BuildError("Please, set a car type")
        if self.seats is None:
            raise BuildError("Please, set a number of seats")
        if self.engine is None:
            raise BuildError("Please, set an engine configuration")
        if self.transmission is None:
            raise BuildError("Please, set up transmission")
        return self.car_type, self.seats, self.engine, self.transmission

    @abstractmethod
    def build(self):
        """Assemble the product; raise BuildError if a part is missing."""


class CarBuilder(Builder):
    """Builds an actual car."""

    def build(self) -> Car:
        car_type, seats, engine, transmission = self._required()
        return Car(car_type, seats, engine, transmission, self.gps_navigator, DEFAULT_FUEL)


class CarManualBuilder(Builder):
    """Builds a car manual instead of a car."""

    def build(self) -> Manual:
        car_type, seats, engine, transmission = self._required()
        return Manual(car_type, seats, engine, transmission, self.gps_navigator)


def construct_sports_car(builder: Builder) -> None:
    builder.set_car_type(CarType.SPORTS_CAR)
    builder.set_seats(2)
    builder.set_engine(Engine(3.0, 0.0))
    builder.set_transmission(Transmission.SEMI_AUTOMATIC)
    builder.set_gps_navigator(GpsNavigator())


def construct_city_car(builder: Builder) -> None:
    builder.set_car_type(CarType.CITY_CAR)
    builder.set_seats(2)
    builder.set_engine(Engine(1.2, 0.0))
    builder.set_transmission(Transmission.AUTOMATIC)
    builder.set_gps_navigator(GpsNavigator())


def construct_suv(builder: Builder) -> None:
    builder.set_car_type(CarType.SUV)
    builder.set_seats(4)
    builder.set_engine(Engine(2.5, 0.0))
    builder.set_transmission(Transmission.MANUAL)
    builder.set_gps_navigator(GpsNavigator())


def demo() -> None:
    """Build a sports car and a city car manual."""
    car_builder = CarBuilder()
    construct_sports_car(car_builder)
    car = car_builder.build()
    print(f"Car built: {car.car_type}\n")

    manual_builder = CarManualBuilder()
    construct_city_car(manual_builder)
    manual = manual_builder.build()
    print(f"Car manual built:\n{manual}")