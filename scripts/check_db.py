"""Utility script to validate the configured database connection."""

import asyncio
import logging

from inventory.core.config import get_settings
from inventory.services.connectivity import run_connectivity_check


def main() -> None:
    """Read one product with its group and report whether the database answered."""

    settings = get_settings()
    logging.basicConfig(level=settings.log_level.upper())
    asyncio.run(run_connectivity_check(settings))


if __name__ == "__main__":
    main()
