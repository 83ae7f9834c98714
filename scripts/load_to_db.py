#!/usr/bin/env python3
import argparse
import os

from pokemons_api.config import Settings
from pokemons_api.db.loader import load_json_to_db
from pokemons_api.logging_config import configure_logging


def main(argv=None):
    parser = argparse.ArgumentParser(description="Load pokemons from a JSON file into the database")
    parser.add_argument(
        "path",
        nargs="?",
        default=os.path.join(os.path.dirname(__file__), "pokemon_data.json"),
        help="JSON array of pokemon objects",
    )
    parser.add_argument("--database-url", default=None, help="overrides DATABASE_URL / DB_* settings")
    args = parser.parse_args(argv)

    settings = Settings.from_env()
    logger = configure_logging(settings.log_level)

    if not os.path.exists(args.path):
        logger.error("File not found: %s", args.path)
        return 1

    load_json_to_db(args.path, args.database_url or settings.sqlalchemy_url)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
