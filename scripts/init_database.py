#!/usr/bin/env python
"""
Database initialization script for the movie catalog.

Creates the schema and optionally inserts a handful of sample movies.

Usage:
    # Create tables if missing
    python scripts/init_database.py

    # Drop everything, recreate and seed sample movies
    python scripts/init_database.py --reset --seed
"""

import sys
import logging
import argparse
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from movie_catalog.api.config import get_database_url
from movie_catalog.database import init_database, seed_sample_movies, verify_schema
from movie_catalog.utils.logging_config import configure_script_logging

logger = logging.getLogger(__name__)


def main():
    """Main entry point for database initialization."""

    parser = argparse.ArgumentParser(
        description="Initialize the movie catalog database",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Create tables only
  python scripts/init_database.py

  # Start from scratch with sample data
  python scripts/init_database.py --reset --seed
        """
    )

    parser.add_argument(
        '--reset',
        action='store_true',
        help='Drop and recreate database tables (WARNING: deletes all data)'
    )
    parser.add_argument(
        '--seed',
        action='store_true',
        help='Insert sample movies that are not stored yet'
    )
    parser.add_argument(
        '--database-url',
        type=str,
        default=None,
        help='SQLAlchemy database URL (default: DATABASE_URL or data/catalog.db)'
    )
    parser.add_argument(
        '--debug',
        action='store_true',
        help='Enable debug logging'
    )

    args = parser.parse_args()
    configure_script_logging(debug=args.debug)

    db_manager = init_database(database_url=args.database_url or get_database_url(), reset=args.reset)

    if not verify_schema(db_manager):
        logger.error("Database initialization failed")
        return 1

    if args.seed:
        seed_sample_movies(db_manager)

    logger.info("Database initialization successful")
    return 0


if __name__ == "__main__":
    sys.exit(main())
