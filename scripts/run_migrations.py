#!/usr/bin/env python3
"""Apply Alembic migrations, reporting failures to Logfire.

Usage:
    python scripts/run_migrations.py            # upgrade to head
    python scripts/run_migrations.py 3f1c2a9d7b40
"""

import sys

import logfire
from alembic import command
from alembic.config import Config

from quill.config import Settings
from quill.util.observability import configure_logfire


def main(argv: list[str]) -> int:
    """Upgrade the database to ``argv[0]`` (default ``head``)."""
    settings = Settings()
    configure_logfire(settings)

    target = argv[0] if argv else "head"
    try:
        with logfire.span("migrations.upgrade", target=target):
            command.upgrade(Config("alembic.ini"), target)
        logfire.info("Database migrated", target=target)
        return 0

    except Exception as e:
        logfire.error(
            "Database migration failed",
            target=target,
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        # Re-raise so the deployment stops before the API starts on a stale schema
        raise


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
