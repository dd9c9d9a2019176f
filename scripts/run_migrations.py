#!/usr/bin/env python3
"""Apply catalog schema migrations, reporting failures to Logfire.

Usage:
    python scripts/run_migrations.py            # upgrade to head
    python scripts/run_migrations.py 3c1d9e7a   # upgrade to a given revision
"""

import sys
import logfire
from alembic import command
from alembic.config import Config

from catalog.config import Settings
from catalog.util.observability import configure_logfire


def main(argv: list[str]) -> int:
    """Upgrade the catalog database to the requested revision."""
    settings = Settings()
    configure_logfire(settings)

    target = argv[0] if argv else "head"

    with logfire.span("catalog.migrations", target=target):
        try:
            command.upgrade(Config("alembic.ini"), target)
        except Exception as e:
            logfire.error(
                "Catalog migration failed",
                target=target,
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            # The app must not start against a half-migrated schema
            raise

        logfire.info("Catalog schema up to date", target=target)
        return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
