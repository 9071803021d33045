"""
Populate the commerce API with grocery products and orders.

Usage:
    python scripts/seed_database.py

Requires the backend API to be running at API_BASE_URL.
"""
import logging
import sys

from app.constants.catalog import BASIC_CATALOG
from app.core.config import settings
from app.services.seeding import SeedApiClient, SeedingError, seed_basic

logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)


def main() -> int:
    logger.info("Starting database seeding...")
    try:
        report = seed_basic(SeedApiClient(), BASIC_CATALOG)
    except SeedingError as e:
        logger.error(str(e))
        return 1
    logger.info("Database seeding completed")
    for line in report.summary_lines():
        logger.info(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
