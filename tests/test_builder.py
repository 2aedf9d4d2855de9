import pytest

from patternbook.builder import (
    DEFAULT_FUEL,
    BuildError,
    CarBuilder,
    CarManualBuilder,
    CarType,
    Engine,
    GpsNavigator,
    Transmission,
    construct_city_car,
    construct_sports_car,
    construct_suv,
    demo,
)


def test_sports_car():
    builder = CarBuilder()
    construct_sports_car(builder)
    car = builder.build()
    assert car.car_type is CarType.SPORTS_CAR
    assert car.seats == 2
    assert car.engine.volume == 3.0
    assert car.engine.mileage == 0.0
    assert car.transmission is Transmission.SEMI_AUTOMATIC
    assert car.fuel == DEFAULT_FUEL
    assert car.gps_navigator == GpsNavigator()


def test_suv():
    builder = CarBuilder()
    construct_suv(builder)
    car = builder.build()
    assert car.car_type is CarType.SUV
    assert car.seats == 4
    assert car.engine.volume == 2.5
    assert car.transmission is Transmission.MANUAL


def test_fuel_can_change():
    builder = CarBuilder()
    construct_city_car(builder)
    car = builder.build()
    car.fuel = 1.5
    assert car.fuel == 1.5


def test_city_car_manual_text():
    builder = CarManualBuilder()
    construct_city_car(builder)
    manual = builder.build()
    assert str(manual) == (
        "Type of car: CityCar\n"
        "Count of seats: 2\n"
        "Engine: volume - 1.2; mileage - 0\n"
        "Transmission: Automatic\n"
        "GPS Navigator: Functional\n"
    )


def test_manual_without_navigator():
    builder = CarManualBuilder()
    builder.set_car_type(CarType.SUV)
    builder.set_seats(4)
    builder.set_engine(Engine(2.5, 0.0))
    builder.set_transmission(Transmission.MANUAL)
    text = str(builder.build())
    assert text.endswith("GPS Navigator: N/A\n")
    assert "Type of car: Suv\n" in text


def test_missing_car_type():
    builder = CarBuilder()
    builder.set_seats(2)
    with pytest.raises(BuildError, match="Please, set a car type"):
        builder.build()


def test_missing_seats():
    builder = CarManualBuilder()
    builder.set_car_type(CarType.CITY_CAR)
    with pytest.raises(BuildError, match="Please, set a number of seats"):
        builder.build()


def test_missing_engine_and_transmission():
    builder = CarBuilder()
    builder.set_car_type(CarType.CITY_CAR)
    builder.set_seats(2)
    with pytest.raises(BuildError, match="Please, set an engine configuration"):
        builder.build()
    builder.set_engine(Engine(1.2, 0.0))
    with pytest.raises(BuildError, match="Please, set up transmission"):
        builder.build()


def test_engine_go_requires_start(capsys):
    engine = Engine(1.0, 10.0)
    engine.go(5.0)
    assert engine.mileage == 10.0
    assert capsys.readouterr().out == "Cannot go(), you must start engine first!\n"


def test_engine_go_when_started():
    engine = Engine(1.0, 10.0)
    engine.on()
    assert engine.started is True
    before = engine.mileage
    engine.go(5.0)
    assert engine.mileage > before
    engine.off()
    assert engine.started is False
    after = engine.mileage
    engine.go(5.0)
    assert engine.mileage == after


def test_demo_output(capsys):
    demo()
    out = capsys.readouterr().out
    assert out.startswith("Car built: SportsCar\n\n")
    assert "Car manual built:\nType of car: CityCar\n" in out