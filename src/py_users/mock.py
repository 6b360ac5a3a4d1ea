"""Mock users and groups — an in-memory identity directory for tests.

When you're testing code that asks "who am I?" or "who owns uid 1000?",
you don't want to rely on the machine running the tests having any
particular accounts.  It's much better to have a custom set of users
that are *guaranteed* to be there.

``MockUsers`` needs only one thing up front: the uid of the current
user.  Everything else is added with ``add_user`` and ``add_group``::

    users = MockUsers.with_current_uid(1000)
    users.add_user(User(uid=1000, name="bobbins", primary_group=100,
                        home_dir="/home/bobbins", shell="/bin/bash"))
    users.add_group(Group(gid=100, name="funkyppl", members=["other_person"]))

Because ``MockUsers`` satisfies the ``Users`` protocol, any function
written against ``Users`` accepts it unchanged.

Two quirks are kept on purpose:

- **One number for everything.**  The current uid is also used as the
  current gid, and "effective" answers are always the same as
  "current" ones.  ``get_current_groupname()`` therefore looks up the
  *group* table by the current *uid*.
- **Name lookups are a scan.**  If two users (or two groups) share a
  name, which one a name lookup returns is not guaranteed.  Don't
  write tests that depend on it.
"""

from __future__ import annotations

from typing import Any

from py_users.logging import Logger, LogLevel
from py_users.users import Group, User, require_int


class MockUsers:
    """A users directory you can add your own users and groups to.

    Entries are never removed.  Adding an entry whose uid/gid is already
    present replaces it and hands the old one back.
    """

    def __init__(self, current_uid: int, *, logger: Logger | None = None) -> None:
        """Create an empty directory.

        Args:
            current_uid: The identity reported by every current/effective
                query.  Need not exist in either table.
            logger: Optional audit log for insertions.

        """
        self._users: dict[int, User] = {}
        self._groups: dict[int, Group] = {}
        self._uid = current_uid
        self._logger = logger

    @classmethod
    def with_current_uid(cls, current_uid: int, *, logger: Logger | None = None) -> MockUsers:
        """Create a new, empty mock users object."""
        return cls(current_uid, logger=logger)

    @property
    def current_uid(self) -> int:
        """Return the identity this directory was created with."""
        return self._uid

    # -- Mutation -----------------------------------------------------------

    def add_user(self, user: User) -> User | None:
        """Add a user to the users table.

        Returns:
            The user previously stored under the same uid, or None.

        """
        previous = self._users.get(user.uid)
        self._users[user.uid] = user
        self._audit("users", user.uid, user.name, replaced=previous is not None)
        return previous

    def add_group(self, group: Group) -> Group | None:
        """Add a group to the groups table.

        Returns:
            The group previously stored under the same gid, or None.

        """
        previous = self._groups.get(group.gid)
        self._groups[group.gid] = group
        self._audit("groups", group.gid, group.name, replaced=previous is not None)
        return previous

    def _audit(self, table: str, key: int, name: str, *, replaced: bool) -> None:
        if self._logger is None:
            return
        if replaced:
            self._logger.log(LogLevel.WARNING, f"replaced {key} with '{name}'", table=table, key=key)
        else:
            self._logger.log(LogLevel.INFO, f"added {key} '{name}'", table=table, key=key)

    # -- Lookups ------------------------------------------------------------

    def get_user_by_uid(self, uid: int) -> User | None:
        """Look up a user by uid."""
        return self._users.get(uid)

    def get_user_by_name(self, name: str) -> User | None:
        """Look up a user by exact, case-sensitive name.

        If several users share the name, any one of them may be returned.
        """
        return next((u for u in self._users.values() if u.name == name), None)

    def get_group_by_gid(self, gid: int) -> Group | None:
        """Look up a group by gid."""
        return self._groups.get(gid)

    def get_group_by_name(self, name: str) -> Group | None:
        """Look up a group by exact, case-sensitive name.

        If several groups share the name, any one of them may be returned.
        """
        return next((g for g in self._groups.values() if g.name == name), None)

    def list_users(self) -> list[User]:
        """Return all users in the table."""
        return list(self._users.values())

    def list_groups(self) -> list[Group]:
        """Return all groups in the table."""
        return list(self._groups.values())

    # -- Current and effective identity ---------------------------------------

    def get_current_uid(self) -> int:
        """Return the uid given at construction."""
        return self._uid

    def get_current_username(self) -> str | None:
        """Return the name of the user whose uid is the current uid."""
        user = self._users.get(self._uid)
        return user.name if user is not None else None

    def get_current_gid(self) -> int:
        """Return the current gid, which is the current uid."""
        return self._uid

    def get_current_groupname(self) -> str | None:
        """Return the name of the group whose gid is the current uid."""
        group = self._groups.get(self._uid)
        return group.name if group is not None else None

    def get_effective_uid(self) -> int:
        """Same as ``get_current_uid``."""
        return self.get_current_uid()

    def get_effective_username(self) -> str | None:
        """Same as ``get_current_username``."""
        return self.get_current_username()

    def get_effective_gid(self) -> int:
        """Same as ``get_current_gid``."""
        return self.get_current_gid()

    def get_effective_groupname(self) -> str | None:
        """Same as ``get_current_groupname``."""
        return self.get_current_groupname()

    # -- Serialization --------------------------------------------------------

    def to_dict(self) -> dict[str, Any]:
        """Serialize the whole directory to a JSON-compatible dict."""
        return {
            "current_uid": self._uid,
            "users": [u.to_dict() for u in self._users.values()],
            "groups": [g.to_dict() for g in self._groups.values()],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any], *, logger: Logger | None = None) -> MockUsers:
        """Reconstruct a directory from a dict produced by ``to_dict``.

        Records are added in order, so a later duplicate uid/gid wins.
        Missing ``users`` or ``groups`` keys mean empty tables.

        Raises:
            KeyError: If ``current_uid`` or a record field is missing.
            TypeError: If a value has the wrong type.

        """
        users = cls(require_int(data, "current_uid"), logger=logger)
        for entry in data.get("users", []):
            users.add_user(User.from_dict(entry))
        for entry in data.get("groups", []):
            users.add_group(Group.from_dict(entry))
        return users

    def __repr__(self) -> str:
        """Return a readable representation."""
        return (
            f"MockUsers(current_uid={self._uid}, "
            f"users={len(self._users)}, groups={len(self._groups)})"
        )
