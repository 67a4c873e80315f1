"""The in-memory fleet database and its file storage."""

from __future__ import annotations

import os
from collections.abc import Iterable, Iterator

from .models import Breakdowns, Machine, MachineType, format_record, parse_record

EMPTY_REPORT = "No machines in database"

Statistics = dict[MachineType, dict[Breakdowns, int]]


class DuplicateChassisError(ValueError):
    """Raised when a chassis number is already in the database."""

    def __init__(self, chassis_num: str) -> None:
        super().__init__(f"Chassis number {chassis_num!r} is already in database.")
        self.chassis_num = chassis_num


class MachineNotFoundError(LookupError):
    """Raised when no machine has the requested chassis number."""

    def __init__(self, chassis_num: str) -> None:
        super().__init__(f"Machine with chassis number {chassis_num!r} not found.")
        self.chassis_num = chassis_num


class FleetDatabase:
    """An ordered collection of machines keyed by chassis number."""

    def __init__(self, machines: Iterable[Machine] = ()) -> None:
        self._machines: list[Machine] = []
        for machine in machines:
            self.add(machine)

    def __iter__(self) -> Iterator[Machine]:
        return iter(list(self._machines))

    def __len__(self) -> int:
        return len(self._machines)

    def __contains__(self, chassis_num: object) -> bool:
        return any(m.chassis_num == chassis_num for m in self._machines)

    def _index(self, chassis_num: str) -> int:
        for index, machine in enumerate(self._machines):
            if machine.chassis_num == chassis_num:
                return index
        raise MachineNotFoundError(chassis_num)

    def add(self, machine: Machine) -> None:
        """Insert a machine before the first one whose chassis number is not smaller."""
        if machine.chassis_num in self:
            raise DuplicateChassisError(machine.chassis_num)
        position = next(
            (
                index
                for index, current in enumerate(self._machines)
                if not machine.chassis_num > current.chassis_num
            ),
            len(self._machines),
        )
        self._machines.insert(position, machine)

    def get(self, chassis_num: str) -> Machine:
        """Return the machine with this chassis number."""
        return self._machines[self._index(chassis_num)]

    def replace(self, machine: Machine) -> None:
        """Replace the stored details of the machine with the same chassis number."""
        self._machines[self._index(machine.chassis_num)] = machine

    def delete(self, chassis_num: str) -> Machine:
        """Remove and return the machine with this chassis number."""
        return self._machines.pop(self._index(chassis_num))

    def statistics(self) -> Statistics:
        """Count machines by type and breakdown category."""
        counts: Statistics = {t: {b: 0 for b in Breakdowns} for t in MachineType}
        for machine in self._machines:
            counts[machine.machine_type][machine.breakdowns] += 1
        return counts

    def save(self, path: str | os.PathLike[str]) -> None:
        """Write every machine to a report file, one record per line."""
        with open(path, "w", encoding="utf-8") as handle:
            if not self._machines:
                handle.write(EMPTY_REPORT + "\n")
                return
            for machine in self._machines:
                handle.write(format_record(machine) + "\n")

    def load(self, path: str | os.PathLike[str]) -> int:
        """Append records from a file in their stored order, stopping at the first bad one.

        Returns the number of machines read.
        """
        loaded = 0
        with open(path, encoding="utf-8") as handle:
            for line in handle:
                if not line.strip():
                    continue
                try:
                    machine = parse_record(line)
                except ValueError:
                    break
                self._machines.append(machine)
                loaded += 1
        return loaded


def format_statistics(stats: Statistics) -> str:
    """Render breakdown counts and percentages for every machine type."""
    rule = "-" * 50
    lines = ["-------------------Machine Stats------------------"]
    for machine_type in MachineType:
        counts = stats.get(machine_type, {})
        total = sum(counts.values())
        lines.append(f"Machine Type: {machine_type.value}")
        for breakdown in Breakdowns:
            count = counts.get(breakdown, 0)
            percent = count / total * 100 if total else 0.0
            lines.append(
                f"Breakdown Type: {breakdown.value} - Count: {count} - Percentage: {percent:.2f}%"
            )
        lines.append(rule)
    return "\n".join(lines)