"""In-memory users and groups for testing identity-dependent code.

Re-exports public symbols so callers can write::

    from py_users import MockUsers, User, Group, Users

The web view is NOT re-exported here because it needs Flask.  Import
it directly from ``py_users.web.app``.
"""

from py_users.logging import LogEntry, Logger, LogLevel
from py_users.mock import MockUsers
from py_users.persistence import FixtureError, dump_users, load_users
from py_users.users import Group, User, Users

__all__ = [
    "FixtureError",
    "Group",
    "LogEntry",
    "LogLevel",
    "Logger",
    "MockUsers",
    "User",
    "Users",
    "dump_users",
    "load_users",
]
