"""Read-only web view of an identity directory.

This package provides a Flask application that serves a ``MockUsers``
directory as JSON, so a service under test that resolves identities
over HTTP can be pointed at a fixture instead of a real directory.
It is an **optional** extra — install with::

    pip install py-users[web]

The ``create_app`` factory in ``app.py`` serves:

- ``GET /api/users`` and ``GET /api/users/<uid>`` — user records.
- ``GET /api/groups`` and ``GET /api/groups/<gid>`` — group records.
- ``GET /api/current`` and ``GET /api/effective`` — who "I" am.
"""
