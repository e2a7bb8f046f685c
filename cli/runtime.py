"""Runtime boot helpers for the prompt library CLI.

Updates:
  v0.1.1 - 2026-10-14 - Apply the configured log level once settings are loaded.
  v0.1.0 - 2026-10-11 - Extract logging configuration helpers.
"""

from __future__ import annotations

import logging
import logging.config
from pathlib import Path

DEFAULT_LOGGING_CONFIG = Path("config/logging.conf")


def setup_logging(logging_conf_path: Path | None) -> None:
    """Configure logging using *logging_conf_path* when available."""
    path = logging_conf_path or DEFAULT_LOGGING_CONFIG
    if path.exists():
        try:
            logging.config.fileConfig(path, disable_existing_loggers=False)
            return
        except Exception as exc:  # pragma: no cover - configuration fallback
            logging.basicConfig(
                level=logging.INFO,
                format="%(asctime)s %(levelname)s %(name)s: %(message)s",
            )
            logging.getLogger("prompt_library.main").warning(
                "Ignoring unusable logging config %s: %s", path, exc
            )
            return
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def apply_log_level(level_name: str) -> None:
    """Set the prompt library logger hierarchy to *level_name*."""
    logging.getLogger("prompt_library").setLevel(level_name.upper())
