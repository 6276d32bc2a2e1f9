"""
Command line entry point.

    python -m petclinic serve [--host HOST] [--port PORT]
    python -m petclinic migrate [--revision REV] [--sql]
    python -m petclinic seed
"""

import argparse
import asyncio
import logging
import sys
from typing import List, Optional

from .database import MigrationManager, SessionManager, create_engine, seed_sample_data
from .exceptions import PetClinicException
from .utils import AppSettings, ConfigError

logger = logging.getLogger("petclinic")


async def seed(settings: AppSettings) -> bool:
    """Create the schema if needed and load the sample data."""
    manager = SessionManager(create_engine(settings.database_url, echo=settings.echo))
    try:
        await manager.create_schema()
        async with manager.get_transaction() as session:
            return await seed_sample_data(session)
    finally:
        await manager.close()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="petclinic", description="Veterinary clinic records application"
    )
    commands = parser.add_subparsers(dest="command", required=True)

    serve = commands.add_parser("serve", help="Run the web application")
    serve.add_argument("--host", default="0.0.0.0", help="Bind address")
    serve.add_argument("--port", type=int, default=8080, help="Bind port")

    migrate = commands.add_parser("migrate", help="Upgrade the database schema")
    migrate.add_argument(
        "--revision", default="head", help="Target revision (default: head)"
    )
    migrate.add_argument(
        "--sql", action="store_true", help="Print the SQL instead of running it"
    )

    commands.add_parser("seed", help="Load the sample data into an empty database")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        settings = AppSettings.from_environment()
    except ConfigError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2

    if args.command == "serve":
        from .web import main as serve

        serve(host=args.host, port=args.port)
        return 0

    settings.configure_logging()
    try:
        if args.command == "migrate":
            MigrationManager(database_url=settings.database_url).upgrade_database(
                args.revision, sql=args.sql
            )
        elif args.command == "seed":
            inserted = asyncio.run(seed(settings))
            logger.info("Sample data loaded" if inserted else "Database not empty")
    except PetClinicException as e:
        e.log_error(logger)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
