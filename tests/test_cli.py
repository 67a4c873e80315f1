import io
import sys

import pytest

from fleetdb.cli import main, run_session
from fleetdb.database import FleetDatabase, format_statistics
from fleetdb.models import Breakdowns, Machine, MachineType, format_details, format_record


@pytest.fixture(autouse=True)
def _in_tmp(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)


def _machine(chassis="CH-TEST-001"):
    return Machine(
        chassis_num=chassis,
        make="Acme",
        model="Loader",
        year=2020,
        cost=1000.5,
        current_value=800.25,
        mileage=1200,
        next_service=1500,
        owner_name="Jane",
        owner_email="jane@example.com",
        owner_phone="ext-12",
        machine_type=MachineType.CRANE,
        breakdowns=Breakdowns.NEVER,
    )


def _answers(chassis):
    return f"{chassis} Acme Loader 2020 1000.50 800.25 1200 1500 Jane jane@example.com ext-12 2 1\n"


def _run(database, username, text):
    out = io.StringIO()
    run_session(database, username, io.StringIO(text), out)
    return out.getvalue()


def test_add_machine_and_save_on_exit(tmp_path):
    db = FleetDatabase()
    output = _run(db, "clerk", "1\n" + _answers("CH-TEST-001") + "-1\n")
    assert "New machine added to the database." in output
    machine = db.get("CH-TEST-001")
    assert machine.machine_type is MachineType.EXCAVATOR
    assert machine.breakdowns is Breakdowns.NEVER
    assert machine.cost == 1000.5
    assert (tmp_path / "fleet.txt").read_text() == format_record(machine) + "\n"


def test_added_machines_are_ordered():
    db = FleetDatabase()
    _run(db, "clerk", "1\n" + _answers("CH-B") + "1\n" + _answers("CH-A") + "-1\n")
    assert [m.chassis_num for m in db] == ["CH-A", "CH-B"]


def test_duplicate_chassis_rejected():
    db = FleetDatabase([_machine()])
    output = _run(db, "clerk", "1\nCH-TEST-001\n-1\n")
    assert "Chassis number is already in database." in output
    assert len(db) == 1


def test_invalid_email_and_choice_reprompt():
    db = FleetDatabase()
    script = (
        "1\nCH-X Acme Loader 2020 1 1 1 1 Jane bad-address jane@example.com ext-12 9 4 0 3\n-1\n"
    )
    output = _run(db, "clerk", script)
    assert "Invalid email. Must contain '@' and end with '.com'" in output
    machine = db.get("CH-X")
    assert machine.owner_email == "jane@example.com"
    assert machine.machine_type is MachineType.CRANE
    assert machine.breakdowns is Breakdowns.LESS_THAN_FIVE


def test_display_all_and_empty():
    assert "No machines in the database." in _run(FleetDatabase(), "clerk", "2\n-1\n")
    machine = _machine()
    output = _run(FleetDatabase([machine]), "clerk", "2\n-1\n")
    assert format_details(machine) in output


def test_non_admin_denied_details_and_update():
    db = FleetDatabase([_machine()])
    output = _run(db, "clerk", "3\n4\n-1\n")
    assert output.count("Access denied. Admin only.") == 2


def test_admin_display_details_found_and_missing():
    machine = _machine()
    output = _run(FleetDatabase([machine]), "admin1", "3\nCH-TEST-001\n3\nCH-NONE\n-1\n")
    assert format_details(machine) in output
    assert "Machine with chassis number 'CH-NONE' not found." in output


def test_admin_update_replaces_details():
    db = FleetDatabase([_machine()])
    script = "4\nCH-TEST-001 Other Digger 2001 5 4 3 2 Bob bob@example.com ext-9 5 4\n-1\n"
    output = _run(db, "admin1", script)
    assert "Machine details updated successfully." in output
    updated = db.get("CH-TEST-001")
    assert updated.make == "Other"
    assert updated.machine_type is MachineType.MIXER
    assert updated.breakdowns is Breakdowns.MORE_THAN_FIVE


def test_delete_found_and_missing():
    db = FleetDatabase([_machine()])
    output = _run(db, "clerk", "5\nCH-NONE\n5\nCH-TEST-001\n-1\n")
    assert "Machine with chassis number CH-NONE not found." in output
    assert "Machine with chassis number CH-TEST-001 deleted successfully." in output
    assert len(db) == 0


def test_statistics_printed():
    db = FleetDatabase([_machine("CH-1"), _machine("CH-2")])
    output = _run(db, "clerk", "6\n-1\n")
    assert format_statistics(db.statistics()) in output


def test_invalid_menu_choice():
    output = _run(FleetDatabase(), "clerk", "42\nabc\n-1\n")
    assert output.count("Invalid choice please try again.") == 2


def test_end_of_input_does_not_save(tmp_path):
    machine = _machine()
    db = FleetDatabase([machine])
    output = _run(db, "clerk", "2\n")
    assert format_details(machine) in output
    assert len(db) == 1
    assert not (tmp_path / "fleet.txt").exists()


def test_report_option_writes_file(tmp_path):
    machine = _machine()
    _run(FleetDatabase([machine]), "clerk", "7\n")
    assert (tmp_path / "fleet.txt").read_text() == format_record(machine) + "\n"


def _main(monkeypatch, text):
    out = io.StringIO()
    monkeypatch.setattr(sys, "stdin", io.StringIO(text))
    monkeypatch.setattr(sys, "stdout", out)
    return main([]), out.getvalue()


def test_main_login_failure(tmp_path, monkeypatch):
    (tmp_path / "login.txt").write_text("admin1 password\n")
    code, output = _main(monkeypatch, "admin1 wrong\n")
    assert code == 1
    assert "Login failed." in output


def test_main_loads_fleet_and_admin_views(tmp_path, monkeypatch):
    machine = _machine()
    (tmp_path / "login.txt").write_text("admin1 password\n")
    (tmp_path / "fleet.txt").write_text(format_record(machine) + "\n")
    code, output = _main(monkeypatch, "admin1 password\n3\nCH-TEST-001\n-1\n")
    assert code == 0
    assert "Fleet data loaded from fleet.txt" in output
    assert format_details(machine) in output


def test_main_without_login_file_is_not_admin(tmp_path, monkeypatch):
    code, output = _main(monkeypatch, "3\n-1\n")
    assert code == 0
    assert "Error opening file." in output
    assert "No existing fleet data found." in output
    assert "Access denied. Admin only." in output