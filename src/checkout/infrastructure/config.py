"""Runtime settings, read from the environment.

CHECKOUT_CATALOG_FILE
    Optional path to a JSON product catalog.  When unset the built-in
    sample catalog is used.
CHECKOUT_LOG_LEVEL
    Logging level name for the CLI (default WARNING).
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

from checkout.domain.exceptions import ValidationError

CATALOG_FILE_ENV = "CHECKOUT_CATALOG_FILE"
LOG_LEVEL_ENV = "CHECKOUT_LOG_LEVEL"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class Settings:

    catalog_file: Path | None = None
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if self.log_level not in LOG_LEVELS:
            raise ValidationError(
                f"Unknown log level {self.log_level!r} "
                f"(expected one of {', '.join(LOG_LEVELS)})"
            )

    @staticmethod
    def from_env(
        environ: Mapping[str, str] | None = None,
        log_level: str | None = None,
    ) -> Settings:
        """Read settings from *environ*; an explicit *log_level* wins over the env."""
        env = os.environ if environ is None else environ
        catalog_file = env.get(CATALOG_FILE_ENV, "").strip()
        if log_level is None:
            log_level = env.get(LOG_LEVEL_ENV, "WARNING")
        return Settings(
            catalog_file=Path(catalog_file) if catalog_file else None,
            log_level=log_level.strip().upper() or "WARNING",
        )


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
