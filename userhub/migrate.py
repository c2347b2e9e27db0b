"""Schema migration runner: ``userhub-migrate {up|down|version}``.

``up`` applies every pending revision, ``down`` rolls all of them back and
``version`` prints the current revision.  Exits non-zero on failure, and
from ``version`` when no revision has been applied yet.
"""
import argparse
import asyncio
import logging
import sys
from pathlib import Path

from alembic import command
from alembic.config import Config
from alembic.runtime.migration import MigrationContext
from sqlalchemy.ext.asyncio import create_async_engine

from userhub.config import Settings, settings as default_settings
from userhub.log import configure_logging

logger = logging.getLogger(__name__)

SCRIPT_LOCATION = Path(__file__).resolve().parent / "alembic"


def build_alembic_config(cfg: Settings) -> Config:
    alembic_cfg = Config()
    alembic_cfg.set_main_option("script_location", str(SCRIPT_LOCATION))
    # Passed as an attribute rather than an ini option so that passwords
    # containing '%' need no configparser escaping.
    alembic_cfg.attributes["database_url"] = cfg.database_url
    return alembic_cfg


def _current_revision(connection) -> str | None:
    return MigrationContext.configure(connection).get_current_revision()


async def read_current_revision(database_url: str) -> str | None:
    """Return the revision stamped in ``alembic_version``, or ``None``."""
    engine = create_async_engine(database_url)
    try:
        async with engine.connect() as conn:
            return await conn.run_sync(_current_revision)
    finally:
        await engine.dispose()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="userhub-migrate",
        description="Apply or roll back the userhub database schema.",
    )
    parser.add_argument("command", choices=("up", "down", "version"))
    return parser


def main(argv: list[str] | None = None, cfg: Settings | None = None) -> int:
    args = build_parser().parse_args(argv)
    cfg = cfg or default_settings
    configure_logging(cfg.LOG_LEVEL)
    alembic_cfg = build_alembic_config(cfg)

    try:
        if args.command == "up":
            command.upgrade(alembic_cfg, "head")
            print("Migrations applied successfully")
        elif args.command == "down":
            command.downgrade(alembic_cfg, "base")
            print("Migrations rolled back successfully")
        else:
            revision = asyncio.run(read_current_revision(cfg.database_url))
            if revision is None:
                logger.error("No migration has been applied")
                return 1
            # alembic stamps the revision inside the migration transaction,
            # so there is no dirty state to report.
            print(f"Version: {revision}, Dirty: false")
    except Exception as exc:
        logger.error("Migration command %r failed: %s", args.command, exc)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
