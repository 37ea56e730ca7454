from __future__ import annotations

import logging
from dataclasses import dataclass

LOGGER_NAME = "selector_builder"


@dataclass(frozen=True)
class BuilderConfig:
    log_level: str = "WARNING"
    log_format: str = "%(levelname)s %(name)s: %(message)s"

    def configure_logging(self) -> None:
        """Set the package log level, installing a root handler if none exists."""
        level = getattr(logging, self.log_level.upper(), None)
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {self.log_level!r}")
        logging.basicConfig(format=self.log_format)
        logging.getLogger(LOGGER_NAME).setLevel(level)
