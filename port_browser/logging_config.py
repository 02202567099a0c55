from __future__ import annotations

import logging
import os
from typing import Optional, Union

from pythonjsonlogger import jsonlogger

PLAIN_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
JSON_FIELDS = "%(asctime)s %(levelname)s %(name)s %(message)s"


def _resolve_level(level: Optional[Union[int, str]]) -> int:
    if level is None:
        level = os.getenv("PORT_BROWSER_LOG_LEVEL", "INFO")
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def configure_logging(
        level: Optional[Union[int, str]] = None,
        force_format: Optional[str] = None,
) -> None:
    """
    Configure the root logger for the port browser.

    Format selection order:
        1) force_format argument ("json" or "plain") if provided
        2) env var PORT_BROWSER_LOG_FORMAT
        3) default = "json"

    Level comes from the argument, else PORT_BROWSER_LOG_LEVEL, else INFO.
    Fields passed through ``extra=`` show up as JSON keys.
    """
    format_mode = (force_format or os.getenv("PORT_BROWSER_LOG_FORMAT", "json")).lower()

    root = logging.getLogger()
    root.setLevel(_resolve_level(level))

    handler = logging.StreamHandler()
    if format_mode == "plain":
        handler.setFormatter(logging.Formatter(PLAIN_FORMAT))
    else:
        handler.setFormatter(
            jsonlogger.JsonFormatter(JSON_FIELDS, rename_fields={"levelname": "level"})
        )

    # Replace any existing handlers to avoid duplicate logs
    root.handlers.clear()
    root.addHandler(handler)
