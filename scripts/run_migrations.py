#!/usr/bin/env python3
"""Upgrade the database schema to the latest Alembic revision.

Run before starting the API; a failed upgrade exits non-zero so the API
never starts against a partial schema.
"""

import sys

import logfire
from alembic import command
from alembic.config import Config

from oer.config import Settings
from oer.util.observability import configure_logfire


def main(revision: str = "head") -> int:
    settings = Settings()
    configure_logfire(settings)

    # migrations/env.py takes the URL from Settings, not from alembic.ini
    config = Config("alembic.ini")

    with logfire.span("migrations.upgrade", revision=revision):
        try:
            command.upgrade(config, revision)
        except Exception:
            logfire.exception("Database migration failed", revision=revision)
            raise

    logfire.info("Database migrations applied", revision=revision)
    return 0


if __name__ == "__main__":
    sys.exit(main(*sys.argv[1:2]))
