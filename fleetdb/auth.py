"""User accounts read from the login file, and the admin check."""

from __future__ import annotations

import os
from collections.abc import Iterable
from dataclasses import dataclass
from itertools import islice

MAX_USERS = 3
ADMIN_USERNAME = "admin1"


@dataclass(frozen=True)
class User:
    """A user allowed to sign in."""

    username: str
    password: str


def load_users(path: str | os.PathLike[str]) -> list[User]:
    """Read up to three users, one "username password" pair per line.

    Lines without both fields are skipped. Raises OSError if the file
    cannot be opened.
    """
    users = []
    with open(path, encoding="utf-8") as handle:
        for line in islice(handle, MAX_USERS):
            fields = line.split()
            if len(fields) >= 2:
                users.append(User(fields[0], fields[1]))
    return users


def authenticate(users: Iterable[User], username: str, password: str) -> User | None:
    """Return the user whose name and password both match, or None."""
    return next(
        (user for user in users if user.username == username and user.password == password),
        None,
    )


def is_admin(username: str | None) -> bool:
    """Only the admin account may view or update a machine's details."""
    return username == ADMIN_USERNAME