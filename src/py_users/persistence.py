"""Fixture files — save and load a whole directory as JSON.

Building the same set of users and groups in every test module gets
old fast.  A fixture file describes a directory once::

    {
      "current_uid": 1000,
      "users": [{"uid": 1000, "name": "bobbins", "primary_group": 100,
                 "home_dir": "/home/bobbins", "shell": "/bin/bash"}],
      "groups": [{"gid": 100, "name": "funkyppl", "members": ["bobbins"]}]
    }

- ``dump_users(users, path)`` — write a directory to a file.
- ``load_users(path)`` — build a ``MockUsers`` from a file.
"""

import json
from pathlib import Path

from py_users.logging import Logger
from py_users.mock import MockUsers


class FixtureError(ValueError):
    """Raised when a fixture file is not a valid directory description."""


def dump_users(users: MockUsers, path: Path) -> None:
    """Save a directory to a JSON file.

    Args:
        users: The directory to save.
        path: The file path to write to.

    """
    path.write_text(json.dumps(users.to_dict(), indent=2))


def load_users(path: Path, *, logger: Logger | None = None) -> MockUsers:
    """Load a directory from a JSON file.

    Args:
        path: The file path to read from.
        logger: Optional audit log attached to the new directory.

    Returns:
        A populated MockUsers instance.

    Raises:
        FileNotFoundError: If the path does not exist.
        json.JSONDecodeError: If the file is not JSON.
        FixtureError: If the JSON does not describe a directory.

    """
    data = json.loads(path.read_text())
    try:
        return MockUsers.from_dict(data, logger=logger)
    except KeyError as e:
        msg = f"{path}: missing field {e}"
        raise FixtureError(msg) from e
    except TypeError as e:
        msg = f"{path}: malformed fixture ({e})"
        raise FixtureError(msg) from e
