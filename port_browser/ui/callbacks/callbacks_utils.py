from __future__ import annotations
import logging
from typing import Optional

from port_browser.core.view_state import ViewState

logger = logging.getLogger(__name__)

def try_parse_view_state(data: object) -> Optional[ViewState]:
    if not isinstance(data, dict):
        return None
    try:
        return ViewState.from_dict(data)
    except Exception:
        logger.exception("Invalid view-state: %r", data)
        return None


def view_state_or_default(data: object) -> ViewState:
    return try_parse_view_state(data) or ViewState()
