"""Root logger setup for the command line."""

from __future__ import annotations

import logging
from typing import Final

# Clock time only; a CLI run never spans days. The logger name shows which layer spoke.
LOG_FORMAT: Final[str] = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
DATE_FORMAT: Final[str] = "%H:%M:%S"


def configure_logging(*, level: int = logging.INFO, force: bool = False) -> None:
    """Attach a single stderr handler using :data:`LOG_FORMAT` to the root logger.

    Library modules only create loggers; the CLI calls this once at start-up, passing DEBUG
    for ``--verbose``. Without ``force`` an already configured root logger (e.g. under
    pytest) is left alone.
    """

    logging.basicConfig(level=level, format=LOG_FORMAT, datefmt=DATE_FORMAT, force=force)
