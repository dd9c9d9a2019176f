"""Integration test configuration.

Integration tests need a running PostgreSQL at the configured database URL.
They are skipped when it cannot be reached.
"""

import socket

import pytest
from sqlalchemy.engine import make_url

from catalog.config import Settings


def _database_reachable() -> bool:
    url = make_url(Settings().database_url)
    try:
        with socket.create_connection((url.host or "localhost", url.port or 5432), 1):
            return True
    except OSError:
        return False


_REACHABLE = _database_reachable()


@pytest.fixture(autouse=True)
def _require_database():
    if not _REACHABLE:
        pytest.skip("PostgreSQL is not reachable")
