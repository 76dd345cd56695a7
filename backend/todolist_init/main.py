#!/usr/bin/env python3
"""
Todolist Database Bootstrap

Creates the application user and the todos collection in the todolist
database of a freshly started MongoDB server. Intended to run once, at
first startup of the deployment.

Usage:
    python -m todolist_init

Environment Variables:
    MONGO_URI: MongoDB connection string with administrative credentials
    APP_USER: Username of the application user (required)
    APP_PASSWORD: Password of the application user (required)
    BOOTSTRAP_SKIP_EXISTING: Skip the user/collection if present (default: false)
    LOG_LEVEL: Logging level (default: INFO)
"""
import asyncio
import logging

from todolist_init.config import Settings, get_settings
from todolist_init.database.connections import get_mongo_client, close_connections
from todolist_init.database.databases import todolist_db
from todolist_init.database.provisioning import bootstrap
from todolist_init.models.report import BootstrapReport

logger = logging.getLogger("todolist_init")


def setup_logging(level: str) -> None:
    """Configure root logging for the bootstrap process."""
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s | %(levelname)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


async def main(settings: Settings) -> BootstrapReport:
    """
    Run the bootstrap against the configured server.

    Failures are logged and re-raised unchanged; the connection is
    closed either way.
    """
    try:
        client = await get_mongo_client()
        report = await bootstrap(
            client,
            settings.credentials(),
            skip_existing=settings.bootstrap_skip_existing,
        )
    except Exception as e:
        logger.error(f"Bootstrap of '{todolist_db.DB_NAME}' failed: {e}")
        raise
    finally:
        await close_connections()

    logger.info(
        f"✓ Bootstrap of '{report.db_name}' complete "
        f"(user created: {report.user_created}, "
        f"collections created: {report.collections_created or 'none'})"
    )
    return report


def run() -> None:
    """Console script entry point."""
    settings = get_settings()
    setup_logging(settings.log_level)

    logger.info("=" * 60)
    logger.info("Todolist Database Bootstrap")
    for key, value in todolist_db.DB_MANIFEST.items():
        logger.info(f"{key}: {value}")
    logger.info(f"Skip existing: {settings.bootstrap_skip_existing}")
    logger.info("=" * 60)

    asyncio.run(main(settings))


if __name__ == "__main__":
    run()
