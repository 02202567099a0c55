from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

DEFAULT_DATA_URL = (
    "https://raw.githubusercontent.com/marchah/sea-ports/refs/heads/master/lib/ports.json"
)
DEFAULT_TIMEOUT = 30.0
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8051


@dataclass(frozen=True)
class AppSettings:
    """
    Parsed global.json (plus environment overrides).

    - data_url: where the ports JSON object is fetched from
    - data_path: local JSON file used instead of data_url when set
    - request_timeout: seconds before the one-shot fetch gives up
    - host, port, debug: where and how the Dash server listens
    """
    ui_title: str = "Ports Data"
    subtitle: str = "Search, filter and browse sea ports"
    data_url: str = DEFAULT_DATA_URL
    data_path: Optional[Path] = None
    request_timeout: float = DEFAULT_TIMEOUT
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    debug: bool = False
