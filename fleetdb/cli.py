"""The interactive fleet management menu."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from collections.abc import Callable
from typing import TextIO, TypeVar

from .auth import authenticate, is_admin, load_users
from .database import FleetDatabase, MachineNotFoundError, format_statistics
from .models import (
    Breakdowns,
    Machine,
    MachineType,
    breakdowns_from_choice,
    format_details,
    is_valid_email,
    machine_type_from_choice,
)

FLEET_FILE = "fleet.txt"
LOGIN_FILE = "login.txt"
RULE = "-" * 50
NO_MACHINES = "No machines in the database."
INVALID_EMAIL = "Invalid email. Must contain '@' and end with '.com'"
INVALID_CHOICE = "Invalid choice, try again"

MENU = "\n".join(
    [
        RULE,
        "Welcome to Machinery Management Ltd. fleet manamgement system",
        "Please enter the corresponding number:",
        "1) Add machine ",
        "2) Display all machines to screen",
        "3) Display machines details (Admin Access)",
        "4) Update a machine's details (Admin Access)",
        "5) Delete machine",
        "6) Generate statistics",
        "7) Print all machine details into a report file",
        "-1) Exit",
        RULE,
    ]
)

_T = TypeVar("_T")


def _to_int(token: str) -> int | None:
    try:
        return int(token)
    except ValueError:
        return None


class _Console:
    """Reads whitespace-separated words from input and writes prompts and messages."""

    def __init__(self, stdin: TextIO, stdout: TextIO) -> None:
        self._in = stdin
        self._out = stdout
        self._pending: deque[str] = deque()

    def say(self, text: str = "") -> None:
        self._out.write(text + "\n")

    def prompt(self, text: str) -> None:
        self._out.write(text)
        self._out.flush()

    def _next_word(self) -> str:
        while not self._pending:
            line = self._in.readline()
            if not line:
                raise EOFError
            self._pending.extend(line.split())
        return self._pending.popleft()

    def word(self, prompt: str) -> str:
        self.prompt(prompt)
        return self._next_word()

    def integer(self, prompt: str) -> int:
        while True:
            value = _to_int(self.word(prompt))
            if value is not None:
                return value

    def number(self, prompt: str) -> float:
        while True:
            try:
                return float(self.word(prompt))
            except ValueError:
                continue

    def choose(self, heading: str, prompt: str, convert: Callable[[int], _T]) -> _T:
        while True:
            self.say(heading)
            value = _to_int(self.word(prompt))
            try:
                return convert(value)  # type: ignore[arg-type]
            except ValueError:
                self.say(INVALID_CHOICE)


def _ask_machine(console: _Console, chassis_num: str, verb: str) -> Machine:
    make = console.word(f"{verb} the machines make: \t\t")
    model = console.word(f"{verb} the machines model: \t\t")
    year = console.integer(f"{verb} the machines year: \t\t")
    cost = console.number(f"{verb} the machines cost: \t\t")
    current_value = console.number(f"{verb} the machines current value: \t")
    mileage = console.integer(f"{verb} the machines mileage: \t\t")
    next_service = console.integer(f"{verb} the machines next service: \t")
    owner_name = console.word(f"{verb} the machines owner name: \t\t")
    while True:
        owner_email = console.word("Please enter the machine's owner email: \t")
        if is_valid_email(owner_email):
            break
        console.say(INVALID_EMAIL)
    owner_phone = console.word(f"{verb} the machines owner phone: \t\t")
    machine_type: MachineType = console.choose(
        "Select the machine type : 1) Tractor 2) Excavator 3) Roller 4) Crane 5) Mixer",
        "Enter choice (1-5): ",
        machine_type_from_choice,
    )
    breakdowns: Breakdowns = console.choose(
        "Please enter the machines breakdowns: \n1) Never 2) Less than three times "
        "3) Less than five times 4) More than five times",
        "Enter choice (1-4): ",
        breakdowns_from_choice,
    )
    return Machine(
        chassis_num=chassis_num,
        make=make,
        model=model,
        year=year,
        cost=cost,
        current_value=current_value,
        mileage=mileage,
        next_service=next_service,
        owner_name=owner_name,
        owner_email=owner_email,
        owner_phone=owner_phone,
        machine_type=machine_type,
        breakdowns=breakdowns,
    )


def _add(database: FleetDatabase, console: _Console) -> None:
    chassis_num = console.word("Please enter the machines chassis number: \t")
    if chassis_num in database:
        console.say("Chassis number is already in database.")
        return
    database.add(_ask_machine(console, chassis_num, "Please enter"))
    console.say("New machine added to the database.")


def _display_all(database: FleetDatabase, console: _Console) -> None:
    if not len(database):
        console.say(NO_MACHINES)
        return
    for machine in database:
        console.say(RULE)
        console.say(format_details(machine))
        console.say(RULE)


def _display_details(database: FleetDatabase, console: _Console) -> None:
    if not len(database):
        console.say(NO_MACHINES)
        return
    chassis_num = console.word("Please enter the machines chassis number: \t")
    try:
        machine = database.get(chassis_num)
    except MachineNotFoundError:
        console.say(f"Machine with chassis number '{chassis_num}' not found.")
        return
    console.say("-------------------Machine Details----------------")
    console.say(format_details(machine))
    console.say(RULE)


def _update(database: FleetDatabase, console: _Console) -> None:
    if not len(database):
        console.say(NO_MACHINES)
        return
    chassis_num = console.word("Please enter the machines chassis number: \t")
    if chassis_num not in database:
        console.say(f"Machine with chassis number {chassis_num} not found.")
        return
    console.say("Machine found. Update its details.")
    database.replace(_ask_machine(console, chassis_num, "Enter"))
    console.say("Machine details updated successfully.")


def _delete(database: FleetDatabase, console: _Console) -> None:
    if not len(database):
        console.say(NO_MACHINES)
        return
    chassis_num = console.word("Enter the chassis number to delete: ")
    try:
        database.delete(chassis_num)
    except MachineNotFoundError:
        console.say(f"Machine with chassis number {chassis_num} not found.")
        return
    console.say(f"Machine with chassis number {chassis_num} deleted successfully.")


def _statistics(database: FleetDatabase, console: _Console) -> None:
    if not len(database):
        console.say(NO_MACHINES)
        return
    console.say(format_statistics(database.statistics()))


def _report(database: FleetDatabase, console: _Console) -> None:
    try:
        database.save(FLEET_FILE)
    except OSError:
        console.say("Error opening file.")


_Action = Callable[[FleetDatabase, _Console], None]

_ACTIONS: dict[int, tuple[str, _Action, bool]] = {
    1: ("You selected add machine.", _add, False),
    2: ("You selected display all machines.", _display_all, False),
    3: ("You selected display machine details.", _display_details, True),
    4: ("You selected update a machines details.", _update, True),
    5: ("You selected delete a machine.", _delete, False),
    6: ("You selected generate machine statistics.", _statistics, False),
    7: ("You selected print machine details to report.", _report, False),
}


def _session(database: FleetDatabase, username: str | None, console: _Console) -> None:
    try:
        while True:
            console.say(MENU)
            choice = _to_int(console.word("Enter Choice: "))
            console.say()
            if choice == -1:
                console.say("Saving on exit...")
                _report(database, console)
                return
            action = _ACTIONS.get(choice) if choice is not None else None
            if action is None:
                console.say("Invalid choice please try again.")
                continue
            message, handler, admin_only = action
            if admin_only and not is_admin(username):
                console.say("Access denied. Admin only.")
                continue
            console.say(message + "\n")
            handler(database, console)
    except EOFError:
        return


def run_session(
    database: FleetDatabase, username: str | None, stdin: TextIO, stdout: TextIO
) -> None:
    """Run the menu loop until the user exits or input ends.

    Choosing exit writes the fleet file; running out of input does not.
    """
    _session(database, username, _Console(stdin, stdout))


def _login(console: _Console) -> tuple[bool, str | None]:
    try:
        users = load_users(LOGIN_FILE)
    except OSError:
        console.say("Error opening file.")
        return True, None
    username = console.word("Please enter your username: ")
    answer = console.word("Please enter your password: ")
    user = authenticate(users, username, answer)
    if user is None:
        console.say("Login failed. Invalid details.")
        return False, None
    console.say("Login successful.")
    return True, user.username


def main(argv: list[str] | None = None) -> int:
    """Sign in, load the fleet file and run the menu."""
    parser = argparse.ArgumentParser(
        prog="fleetdb", description="Manage a fleet of machines from an interactive menu."
    )
    parser.parse_args(argv)
    console = _Console(sys.stdin, sys.stdout)
    try:
        allowed, username = _login(console)
    except EOFError:
        allowed, username = False, None
    if not allowed:
        console.say("Login failed.")
        return 1
    database = FleetDatabase()
    try:
        database.load(FLEET_FILE)
    except OSError:
        console.say("No existing fleet data found.")
    else:
        console.say(f"Fleet data loaded from {FLEET_FILE}")
    _session(database, username, console)
    return 0