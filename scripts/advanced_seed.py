"""
Advanced seeding: categorized catalog, probabilistic order outcomes,
retries with backoff and a detailed final report.
"""
import logging
from datetime import datetime

import click

from app.constants.catalog import ADVANCED_CATALOG
from app.core.config import settings
from app.services.seeding import (
    ADVANCED_SCENARIOS,
    SeedApiClient,
    SeedingError,
    quick_scenarios,
    seed_advanced,
)

logger = logging.getLogger(__name__)


@click.command()
@click.option("--quick", is_flag=True, help="Create fewer orders for faster seeding.")
@click.option("--products-only", is_flag=True, help="Only create products, skip orders.")
@click.option("--verbose", is_flag=True, help="Show detailed progress information.")
@click.option("--retries", default=3, show_default=True, type=int,
              help="Attempts per API call.")
def main(quick: bool, products_only: bool, verbose: bool, retries: int) -> None:
    """Seed the commerce API with products and realistic orders."""
    logging.basicConfig(level=logging.DEBUG if verbose else settings.log_level)
    logger.info(f"Seeding started at {datetime.now():%Y-%m-%d %H:%M:%S}")

    scenarios = quick_scenarios(ADVANCED_SCENARIOS) if quick else ADVANCED_SCENARIOS
    client = SeedApiClient(retries=retries)
    try:
        report = seed_advanced(client, ADVANCED_CATALOG, scenarios=scenarios,
                               products_only=products_only)
    except SeedingError as e:
        raise click.ClickException(str(e))

    logger.info("Seeding completed successfully")
    for line in report.summary_lines():
        click.echo(line)


if __name__ == "__main__":
    main()
