"""Chain of responsibility: hospital departments handling a patient in turn."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass
class Patient:
    """A patient passing through hospital departments."""

    name: str = ""
    registration_done: bool = False
    doctor_check_up_done: bool = False
    medicine_done: bool = False
    payment_done: bool = False


class Department(ABC):
    """One link of the chain: handles a patient, then passes them on."""

    def __init__(self, next_department: Department | None = None) -> None:
        self.next_department = next_department

    def execute(self, patient: Patient) -> None:
        """Handle the patient here and in every following department."""
        department: Department | None = self
        while department is not None:
            department.handle(patient)
            department = department.next_department

    @abstractmethod
    def handle(self, patient: Patient) -> None:
        """Do this department's part of the work."""


class Reception(Department):
    def handle(self, patient: Patient) -> None:
        if patient.registration_done:
            print("Patient registration is already done")
        else:
            print(f"Reception registering a patient {patient.name}")
            patient.registration_done = True


class Doctor(Department):
    def handle(self, patient: Patient) -> None:
        if patient.doctor_check_up_done:
            print("A doctor checkup is already done")
        else:
            print(f"Doctor checking a patient {patient.name}")
            patient.doctor_check_up_done = True


class Medical(Department):
    def handle(self, patient: Patient) -> None:
        if patient.medicine_done:
            print("Medicine is already given to a patient")
        else:
            print(f"Medical giving medicine to a patient {patient.name}")
            patient.medicine_done = True


class Cashier(Department):
    def handle(self, patient: Patient) -> None:
        if patient.payment_done:
            print("Payment done")
        else:
            print(f"Cashier getting money from a patient {patient.name}")
            patient.payment_done = True


def demo() -> None:
    """Run a patient through Reception -> Doctor -> Medical -> Cashier twice."""
    reception = Reception(Doctor(Medical(Cashier())))
    patient = Patient(name="John")

    reception.execute(patient)
    print("\nThe patient has been already handled:\n")
    reception.execute(patient)