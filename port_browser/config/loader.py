from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from port_browser.config.model import (
    DEFAULT_DATA_URL,
    DEFAULT_HOST,
    DEFAULT_PORT,
    DEFAULT_TIMEOUT,
    AppSettings,
)
from port_browser.core.exceptions import ConfigError

logger = logging.getLogger(__name__)

ENV_DATA_URL = "PORT_BROWSER_DATA_URL"
ENV_DATA_PATH = "PORT_BROWSER_DATA_PATH"
ENV_TIMEOUT = "PORT_BROWSER_TIMEOUT"
ENV_HOST = "PORT_BROWSER_HOST"
ENV_PORT = "PORT"
ENV_DEBUG = "DEBUG"


def _read_global_json(root: Path) -> Dict[str, Any]:
    global_path = root / "global.json"
    if not global_path.is_file():
        logger.warning(f"global.json not found at: {global_path}, using defaults")
        return {}

    try:
        with global_path.open() as f:
            raw = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigError(f"Could not read {global_path}: {e}") from e

    if not isinstance(raw, dict):
        raise ConfigError(f"{global_path} must contain a JSON object")
    return raw


def _parse_timeout(value: Any) -> float:
    try:
        timeout = float(value)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"request_timeout must be a number, got {value!r}") from e
    if timeout <= 0:
        raise ConfigError(f"request_timeout must be positive, got {timeout}")
    return timeout


def _parse_port(value: Any) -> int:
    try:
        port = int(value)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"port must be an integer, got {value!r}") from e
    if not 0 < port < 65536:
        raise ConfigError(f"port out of range: {port}")
    return port


def _parse_flag(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in ("1", "true", "yes", "on")
    return bool(value)


def load_app_settings(
        root: Path | str,
        environ: Optional[Mapping[str, str]] = None,
) -> AppSettings:
    """
    Load settings from <root>/global.json, then apply environment overrides.

    A relative data_path is resolved against the config root.
    """
    root = Path(root)
    env = os.environ if environ is None else environ
    logger.info("Loading global config", extra={"config_root": str(root)})

    raw = _read_global_json(root)

    data_url = env.get(ENV_DATA_URL) or raw.get("data_url") or DEFAULT_DATA_URL

    data_path_raw = env.get(ENV_DATA_PATH) or raw.get("data_path")
    data_path = Path(data_path_raw) if data_path_raw else None
    if data_path and not data_path.is_absolute():
        data_path = (root / data_path).resolve()

    timeout = _parse_timeout(env.get(ENV_TIMEOUT) or raw.get("request_timeout", DEFAULT_TIMEOUT))
    port = _parse_port(env.get(ENV_PORT) or raw.get("port", DEFAULT_PORT))
    debug = _parse_flag(env.get(ENV_DEBUG) or raw.get("debug", False))

    defaults = AppSettings()
    return AppSettings(
        ui_title=raw.get("ui_title", defaults.ui_title),
        subtitle=raw.get("subtitle", defaults.subtitle),
        data_url=data_url,
        data_path=data_path,
        request_timeout=timeout,
        host=env.get(ENV_HOST) or raw.get("host", DEFAULT_HOST),
        port=port,
        debug=debug,
    )
