"""Machine records: types, breakdown categories and the text formats."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TypeVar

_E = TypeVar("_E", bound=Enum)


class MachineType(Enum):
    """Kinds of machine kept in the fleet, in menu order."""

    TRACTOR = "Tractor"
    EXCAVATOR = "Excavator"
    ROLLER = "Roller"
    CRANE = "Crane"
    MIXER = "Mixer"

    def __str__(self) -> str:
        return self.value


class Breakdowns(Enum):
    """How often a machine has broken down, in menu order."""

    NEVER = "Never"
    LESS_THAN_THREE = "Less than three times"
    LESS_THAN_FIVE = "Less than five times"
    MORE_THAN_FIVE = "More than five times"

    def __str__(self) -> str:
        return self.value


def _from_choice(enum_cls: type[_E], choice: int) -> _E:
    members = list(enum_cls)
    if isinstance(choice, bool) or not isinstance(choice, int) or not 1 <= choice <= len(members):
        raise ValueError(f"choice must be between 1 and {len(members)}, got {choice!r}")
    return members[choice - 1]


def machine_type_from_choice(choice: int) -> MachineType:
    """Return the machine type for a menu choice from 1 to 5."""
    return _from_choice(MachineType, choice)


def breakdowns_from_choice(choice: int) -> Breakdowns:
    """Return the breakdown category for a menu choice from 1 to 4."""
    return _from_choice(Breakdowns, choice)


def is_valid_email(email: str) -> bool:
    """An owner e-mail must contain '@' and end with '.com'."""
    return "@" in email and email.endswith(".com")


_TEXT_FIELDS = (
    "chassis_num",
    "make",
    "model",
    "owner_name",
    "owner_email",
    "owner_phone",
)


@dataclass
class Machine:
    """One machine in the fleet."""

    chassis_num: str
    make: str
    model: str
    year: int
    cost: float
    current_value: float
    mileage: int
    next_service: int
    owner_name: str
    owner_email: str
    owner_phone: str
    machine_type: MachineType
    breakdowns: Breakdowns

    def __post_init__(self) -> None:
        for name in _TEXT_FIELDS:
            value = getattr(self, name)
            if not isinstance(value, str) or not value or any(ch.isspace() for ch in value):
                raise ValueError(f"{name} must be a single non-empty word, got {value!r}")
        self.machine_type = MachineType(self.machine_type)
        self.breakdowns = Breakdowns(self.breakdowns)


def format_details(machine: Machine) -> str:
    """Return the human-readable description of a machine, one field per line."""
    rows = [
        ("Chassis Number is", machine.chassis_num),
        ("Machine Make is", machine.make),
        ("Machine Model is", machine.model),
        ("Machine Year is", str(machine.year)),
        ("Machine Cost is", f"{machine.cost:.2f}"),
        ("Machine Current Value is", f"{machine.current_value:.2f}"),
        ("Machine Mileage is", str(machine.mileage)),
        ("Machine Next Service is", str(machine.next_service)),
        ("Machine Owner Name is", machine.owner_name),
        ("Machine Owner Email is", machine.owner_email),
        ("Machine Owner Phone is", machine.owner_phone),
        ("Machine Type is", machine.machine_type.value),
        ("Machine Breakdowns are", machine.breakdowns.value),
    ]
    return "\n".join(f"{label} : {value}" for label, value in rows)


def format_record(machine: Machine) -> str:
    """Return the one-line, space-separated record stored in the fleet file."""
    return " ".join(
        (
            machine.chassis_num,
            machine.make,
            machine.model,
            str(machine.year),
            f"{machine.cost:.2f}",
            f"{machine.current_value:.2f}",
            str(machine.mileage),
            str(machine.next_service),
            machine.owner_name,
            machine.owner_email,
            machine.owner_phone,
            machine.machine_type.value,
            machine.breakdowns.value,
        )
    )


def parse_record(line: str) -> Machine:
    """Parse a record written by format_record; raise ValueError if malformed."""
    parts = line.split(maxsplit=12)
    if len(parts) != 13:
        raise ValueError(f"malformed record: {line!r}")
    (
        chassis_num,
        make,
        model,
        year,
        cost,
        current_value,
        mileage,
        next_service,
        owner_name,
        owner_email,
        owner_phone,
        machine_type,
        breakdowns,
    ) = parts
    try:
        return Machine(
            chassis_num=chassis_num,
            make=make,
            model=model,
            year=int(year),
            cost=float(cost),
            current_value=float(current_value),
            mileage=int(mileage),
            next_service=int(next_service),
            owner_name=owner_name,
            owner_email=owner_email,
            owner_phone=owner_phone,
            machine_type=MachineType(machine_type),
            breakdowns=Breakdowns(" ".join(breakdowns.split())),
        )
    except ValueError as err:
        raise ValueError(f"malformed record: {line!r}") from err