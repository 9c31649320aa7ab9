# tablemap/config.py
#
# Environment-driven defaults. Values are read once at import time into the
# module constants below; load_settings() re-reads the environment for
# callers (the CLI, tests) that need a fresh snapshot. Explicit keyword
# arguments passed to the codec always take precedence over these.

import logging
import os
from dataclasses import dataclass

logger = logging.getLogger(__name__)

_TRUTHY = {"1", "true", "yes", "on"}


def _env_flag(name, default=False):
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in _TRUTHY


@dataclass(frozen=True)
class Settings:
    delimiter: str = ";"
    encoding: str = "utf-8"
    strict_rows: bool = False
    log_level: str = "WARNING"


def load_settings(strict=True) -> Settings:
    """
    Builds a Settings object from the current environment.

    Args:
        strict: When true, an invalid TABLEMAP_DELIMITER raises ValueError;
            otherwise it is logged and the default ';' is used.
    """
    delimiter = os.getenv("TABLEMAP_DELIMITER") or ";"
    if len(delimiter) != 1:
        if strict:
            raise ValueError(f"TABLEMAP_DELIMITER must be a single character, got {delimiter!r}")
        logger.warning("Ignoring TABLEMAP_DELIMITER=%r: must be a single character; using ';'", delimiter)
        delimiter = ";"
    return Settings(
        delimiter=delimiter,
        encoding=os.getenv("TABLEMAP_ENCODING") or "utf-8",
        strict_rows=_env_flag("TABLEMAP_STRICT_ROWS"),
        log_level=(os.getenv("TABLEMAP_LOG_LEVEL") or "WARNING").upper(),
    )


# The import-time read never raises; the CLI re-reads strictly.
settings = load_settings(strict=False)

DELIMITER = settings.delimiter
ENCODING = settings.encoding
STRICT_ROWS = settings.strict_rows
