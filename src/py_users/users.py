"""Users and groups — the identity records and the directory interface.

Every Unix system answers the same handful of identity questions: who
owns uid 1000?  What is the uid of ``fred``?  Who am I running as?
This module provides the vocabulary for those questions:

**User** — one line of ``/etc/passwd``: a numeric ``uid``, a ``name``,
    a ``primary_group`` gid, a ``home_dir`` and a login ``shell``.

**Group** — one line of ``/etc/group``: a numeric ``gid``, a ``name``
    and the ordered names of its ``members``.

**Users** (Protocol) — the capability interface every identity
    directory implements.  Write application code against ``Users``
    and pass in either the in-memory ``MockUsers`` or an OS-backed
    directory; the calling code does not change.

Records do not reference each other: a user's ``primary_group`` need
not exist in any group table, and a group's ``members`` need not name
real users.  Just like a hand-edited ``/etc/group``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable


def require_int(data: dict[str, Any], key: str) -> int:
    """Return ``data[key]``, which must be an int (bools rejected).

    Raises:
        KeyError: If *key* is missing.
        TypeError: If the value is not an int.

    """
    value = data[key]
    if isinstance(value, bool) or not isinstance(value, int):
        msg = f"'{key}' must be an integer, not {value!r}"
        raise TypeError(msg)
    return value


def require_str(data: dict[str, Any], key: str) -> str:
    """Return ``data[key]``, which must be a string.

    Raises:
        KeyError: If *key* is missing.
        TypeError: If the value is not a string.

    """
    value = data[key]
    if not isinstance(value, str):
        msg = f"'{key}' must be a string, not {value!r}"
        raise TypeError(msg)
    return value


@dataclass(frozen=True)
class User:
    """A user account.

    Frozen so a record handed out by a directory can never be mutated
    behind the directory's back.  Re-adding a user with the same uid
    replaces the whole record.
    """

    uid: int
    name: str
    primary_group: int
    home_dir: str
    shell: str

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-compatible dict."""
        return {
            "uid": self.uid,
            "name": self.name,
            "primary_group": self.primary_group,
            "home_dir": self.home_dir,
            "shell": self.shell,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> User:
        """Reconstruct a user from a dict produced by ``to_dict``.

        Raises:
            KeyError: If a field is missing.
            TypeError: If a field has the wrong type.

        """
        return cls(
            uid=require_int(data, "uid"),
            name=require_str(data, "name"),
            primary_group=require_int(data, "primary_group"),
            home_dir=require_str(data, "home_dir"),
            shell=require_str(data, "shell"),
        )


@dataclass(frozen=True)
class Group:
    """A group with an ordered list of member account names.

    ``members`` is stored as a tuple; a list passed in is converted so
    the record stays immutable and hashable.
    """

    gid: int
    name: str
    members: tuple[str, ...] = field(default=())

    def __post_init__(self) -> None:
        """Normalise ``members`` to a tuple."""
        object.__setattr__(self, "members", tuple(self.members))

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-compatible dict."""
        return {"gid": self.gid, "name": self.name, "members": list(self.members)}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Group:
        """Reconstruct a group from a dict produced by ``to_dict``.

        A missing ``members`` key means an empty group.

        Raises:
            KeyError: If ``gid`` or ``name`` is missing.
            TypeError: If a field has the wrong type.

        """
        members = data.get("members", [])
        if not isinstance(members, list) or not all(isinstance(m, str) for m in members):
            msg = f"'members' must be a list of strings, not {members!r}"
            raise TypeError(msg)
        return cls(gid=require_int(data, "gid"), name=require_str(data, "name"), members=tuple(members))


@runtime_checkable
class Users(Protocol):
    """Interface that every identity directory must satisfy.

    Lookups return ``None`` for "no such entry" and never raise.
    """

    def get_user_by_uid(self, uid: int) -> User | None:
        """Return the user with this uid, if any."""
        ...  # pragma: no cover

    def get_user_by_name(self, name: str) -> User | None:
        """Return a user with exactly this name, if any."""
        ...  # pragma: no cover

    def get_group_by_gid(self, gid: int) -> Group | None:
        """Return the group with this gid, if any."""
        ...  # pragma: no cover

    def get_group_by_name(self, name: str) -> Group | None:
        """Return a group with exactly this name, if any."""
        ...  # pragma: no cover

    def get_current_uid(self) -> int:
        """Return the uid of the current user."""
        ...  # pragma: no cover

    def get_current_username(self) -> str | None:
        """Return the name of the current user, if known."""
        ...  # pragma: no cover

    def get_current_gid(self) -> int:
        """Return the gid of the current group."""
        ...  # pragma: no cover

    def get_current_groupname(self) -> str | None:
        """Return the name of the current group, if known."""
        ...  # pragma: no cover

    def get_effective_uid(self) -> int:
        """Return the effective uid."""
        ...  # pragma: no cover

    def get_effective_username(self) -> str | None:
        """Return the name of the effective user, if known."""
        ...  # pragma: no cover

    def get_effective_gid(self) -> int:
        """Return the effective gid."""
        ...  # pragma: no cover

    def get_effective_groupname(self) -> str | None:
        """Return the name of the effective group, if known."""
        ...  # pragma: no cover
