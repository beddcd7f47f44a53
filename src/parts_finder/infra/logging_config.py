from __future__ import annotations

import logging

from parts_finder.infra.config import log_level

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str | None = None) -> None:
    """Configure root logging once; later calls only adjust the level."""
    resolved = level or log_level()
    root = logging.getLogger()

    if not root.handlers:
        logging.basicConfig(format=LOG_FORMAT)

    root.setLevel(resolved)
