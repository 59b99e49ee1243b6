import argparse
import asyncio
import logging
import sys
from pathlib import Path

from .config import SeedConfig
from .errors import SeedingError
from .pipeline import seed_database

logger = logging.getLogger("hr_assistant.seeding")


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Seed the HR database with synthetic employee records.")
    parser.add_argument(
        "--reset", action="store_true", help="Delete all documents in the employees collection first"
    )
    parser.add_argument(
        "--ensure-index", action="store_true", help="Create the vector search index if it is missing"
    )
    parser.add_argument(
        "--output-dir", type=Path, default=None, help="Write a JSON seed contract to this directory"
    )
    return parser.parse_args(argv)


def main(argv=None) -> int:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    args = parse_args(argv)

    try:
        config = SeedConfig.from_env(
            reset_collection=args.reset,
            ensure_index=args.ensure_index,
            output_dir=args.output_dir,
        )
        asyncio.run(seed_database(config))
    except SeedingError as e:
        logger.error(f"Error seeding the database: {e}", exc_info=True)
        return 1
    except Exception as e:
        logger.error(f"Unexpected error seeding the database: {e}", exc_info=True)
        return 1

    logger.info("Successfully seeded the database with synthetic employee data.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
