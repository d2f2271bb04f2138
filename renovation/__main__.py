"""Print the renovation report for the bundled sample house.

Run with ``python -m renovation``. Settings come from ``RENOVATION_*``
environment variables, optionally loaded from a ``.env`` file in the
current directory.
"""

from __future__ import annotations

import logging
import sys

from dotenv import load_dotenv

from renovation.config import load_settings
from renovation.exceptions import RenovationError
from renovation.factory import build_sample_house
from renovation.report import create_report, render_report

logger = logging.getLogger(__name__)


def main() -> int:
    load_dotenv()
    settings = load_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        house = build_sample_house(settings)
    except RenovationError:
        logger.exception("Could not build the sample house")
        return 1

    sys.stdout.write(render_report(create_report(house, settings)))
    return 0


if __name__ == "__main__":
    sys.exit(main())
