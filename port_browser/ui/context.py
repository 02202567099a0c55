from __future__ import annotations

from dataclasses import dataclass

from port_browser.config.model import AppSettings
from port_browser.core.records import RecordCollection


@dataclass
class AppContext:
    """
    Holds shared, read-only state for the Dash app: settings and the record
    collection loaded at start-up. This is passed into layout + callback
    registration functions instead of using module-level globals.
    """
    settings: AppSettings
    records: RecordCollection = ()
