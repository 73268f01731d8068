"""Application entry point."""

from __future__ import annotations

import logging
import os
import sys

LOG_LEVEL_ENV = "CHESSPGN_LOG_LEVEL"


def configure_logging() -> None:
    """Install a root handler at the level named by ``CHESSPGN_LOG_LEVEL``."""
    level_name = os.environ.get(LOG_LEVEL_ENV, "WARNING").upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main() -> None:
    """Launch the chesspgn desktop application."""
    from chesspgn.ui.bootstrap import run_application

    configure_logging()
    sys.exit(run_application())


if __name__ == "__main__":
    main()
