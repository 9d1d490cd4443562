#!/usr/bin/env python3
"""Apply Alembic migrations, reporting failures to logfire.

Usage: scripts/run_migrations.py [revision]
"""

import sys

import logfire
from alembic import command
from alembic.config import Config

from quotevote.config import Settings
from quotevote.util.observability import configure_logfire


def main(revision: str = "head") -> int:
    configure_logfire(Settings())

    with logfire.span("migrations.upgrade", revision=revision):
        try:
            command.upgrade(Config("alembic.ini"), revision)
        except Exception as e:
            logfire.exception("Migration to {revision} failed", revision=revision)
            # A half-migrated schema must stop the deploy
            raise SystemExit(1) from e

    logfire.info("Schema is at {revision}", revision=revision)
    return 0


if __name__ == "__main__":
    sys.exit(main(*sys.argv[1:2]))
