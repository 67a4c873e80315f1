# fleetdb

fleetdb is a small console database for a fleet of machinery: tractors,
excavators, rollers, cranes and mixers. Each machine has these fields:

- chassis number
- make and model
- year
- cost and current value
- mileage and next service
- owner name, e-mail and phone
- type
- breakdown history

Machines are kept in chassis-number order. Chassis numbers must be unique.

## Installing

```
pip install .
```

## Running

```
fleetdb
```

The command takes no options apart from `--help`. It works with two files in
the current directory.

**`login.txt`** holds the user list. Only the first three lines are read. Each
line holds a user name and a password separated by whitespace. Lines without
both fields are ignored.

- You are asked for a user name and password. If they match no user, the
  program prints `Login failed.` and exits with status 1.
- If `login.txt` cannot be opened, the program prints `Error opening file.`
  and carries on without a signed-in user. Without a signed-in user, the admin
  options are refused.

**`fleet.txt`** holds the saved fleet. After login it is loaded if it exists.
Records are read in file order, and reading stops at the first line that is
not a valid record.

After loading, the program shows a menu:

```
1) Add machine
2) Display all machines to screen
3) Display machines details (Admin Access)
4) Update a machine's details (Admin Access)
5) Delete machine
6) Generate statistics
7) Print all machine details into a report file
-1) Exit
```

- Options 3 and 4 are open only to the user `admin1`.
- Option 6 shows, for each machine type, how many machines fall into each
  breakdown category and what percentage that is.
- Option 7 writes the fleet to `fleet.txt`.
- Choosing `-1` also writes the fleet to `fleet.txt` and then exits.
- If input ends before you choose `-1`, the session stops without saving.

In `fleet.txt`, each machine takes one line, with its fields separated by
single spaces. An empty fleet is written as the line
`No machines in database`.

When you add or update a machine:

- An owner's e-mail address must contain `@` and end with `.com`, for example
  `owner@example.com`. You are asked again until it does.
- The type is chosen from 1 to 5 and the breakdown category from 1 to 4.
- Text fields are single words.

## Using it from Python

```python
from fleetdb.models import Machine, MachineType, Breakdowns, format_details
from fleetdb.database import FleetDatabase, format_statistics

db = FleetDatabase()
db.add(Machine(
    chassis_num="CH-0001", make="Acme", model="T100", year=2020,
    cost=50000.0, current_value=42000.0, mileage=1200, next_service=2000,
    owner_name="Pat", owner_email="pat@example.com", owner_phone="unlisted",
    machine_type=MachineType.TRACTOR, breakdowns=Breakdowns.NEVER,
))
print(format_details(db.get("CH-0001")))
print(format_statistics(db.statistics()))
db.save("fleet.txt")

other = FleetDatabase()
other.load("fleet.txt")  # returns the number of machines read
```

### `fleetdb.models`

- `Machine` is a dataclass. Its text fields must be single non-empty words;
  otherwise it raises `ValueError`.
- `machine_type_from_choice` and `breakdowns_from_choice` map menu numbers to
  `MachineType` and `Breakdowns`.
- `is_valid_email` checks the e-mail rule above.
- `format_record` and `parse_record` convert a machine to and from its line in
  the fleet file.

### `fleetdb.database`

- `FleetDatabase` supports `len()`, iteration, and `in` with a chassis number.
- `add` raises `DuplicateChassisError` when the chassis number is already
  present.
- `get`, `replace` and `delete` raise `MachineNotFoundError` when the chassis
  number is missing.

### `fleetdb.auth`

- `load_users` reads a login file.
- `authenticate` returns the matching `User` or `None`.
- `is_admin` tells whether a user name is the admin account.

### `fleetdb.cli`

- `run_session(database, username, stdin, stdout)` runs the menu over any pair
  of text streams.
- `main` is the `fleetdb` command.

## What it does not do

- Passwords in `login.txt` are stored and compared as plain text. There is no
  way to add or change users from the program.
- The file names `login.txt` and `fleet.txt` are fixed.
- Only one session at a time works on the fleet file, and it is written only
  when you choose option 7 or exit with `-1`.