#!/usr/bin/env python3
"""Create the database schema with Logfire error tracking."""

import asyncio
import sys

import logfire

from shiki.config import Settings
from shiki.persistence.database import create_engine, create_schema
from shiki.util.observability import configure_logfire


async def _run(settings: Settings) -> None:
    engine = create_engine(settings)
    try:
        await create_schema(engine)
    finally:
        await engine.dispose()


def main() -> int:
    """Create tables and log any errors to Logfire."""
    settings = Settings()

    configure_logfire(settings)

    try:
        logfire.info("Creating database schema")
        asyncio.run(_run(settings))
        logfire.info("Database schema ready")
        return 0

    except Exception as e:
        logfire.error(
            "Schema creation failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        # Re-raise so the container fails and doesn't start with broken schema
        raise


if __name__ == "__main__":
    sys.exit(main())
