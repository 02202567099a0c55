"""
Port data source

Fetches the ports JSON object exactly once and turns its values into the
record collection. Failures are logged and degrade to an empty collection.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Optional

import requests

from port_browser.config.model import DEFAULT_DATA_URL, DEFAULT_TIMEOUT, AppSettings
from port_browser.core.exceptions import DataSourceError
from port_browser.core.records import RecordCollection, records_from_payload

logger = logging.getLogger(__name__)


def _to_records(payload: Any, origin: str) -> RecordCollection:
    if not isinstance(payload, dict):
        raise DataSourceError(f"Expected a JSON object of ports from {origin}")

    records, skipped = records_from_payload(payload)
    if skipped:
        logger.warning(
            "Skipped %d non-object entries from %s", skipped, origin,
        )
    return records


class PortSource:
    """One-shot HTTP source for the ports collection."""

    def __init__(
            self,
            url: str = DEFAULT_DATA_URL,
            timeout: float = DEFAULT_TIMEOUT,
            session: Optional[requests.Session] = None,
    ):
        self.url = url
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({"Accept": "application/json"})

    def fetch(self) -> RecordCollection:
        """GET the JSON object and return its values. Not retried."""
        try:
            resp = self.session.get(self.url, timeout=self.timeout)
            resp.raise_for_status()
            payload = resp.json()
        except (requests.RequestException, ValueError) as e:
            raise DataSourceError(f"Failed to fetch ports from {self.url}: {e}") from e
        return _to_records(payload, self.url)


def load_local(path: Path) -> RecordCollection:
    try:
        with Path(path).open(encoding="utf-8") as f:
            payload = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise DataSourceError(f"Failed to read ports from {path}: {e}") from e
    return _to_records(payload, str(path))


def load_records(
        settings: AppSettings,
        source: Optional[PortSource] = None,
) -> RecordCollection:
    """
    Load the record collection for the app.

    Uses settings.data_path when set, otherwise fetches settings.data_url.
    Any failure is reported once and yields an empty collection.
    """
    origin = str(settings.data_path) if settings.data_path else settings.data_url
    logger.info("Loading port records", extra={"origin": origin})

    try:
        if settings.data_path:
            records = load_local(settings.data_path)
        else:
            source = source or PortSource(settings.data_url, settings.request_timeout)
            records = source.fetch()
    except DataSourceError:
        logger.exception("Error fetching ports data")
        return ()

    logger.info("Loaded port records", extra={"origin": origin, "n_records": len(records)})
    return records
