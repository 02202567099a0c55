from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import dash_bootstrap_components as dbc
from dash import Dash

from port_browser.config.loader import load_app_settings
from port_browser.config.model import AppSettings
from port_browser.core.records import RecordCollection
from port_browser.services.port_source import load_records
from port_browser.ui.context import AppContext
from port_browser.ui.layout.build_layout import build_layout
from port_browser.ui.callbacks.callbacks_state import register_state_callbacks
from port_browser.ui.callbacks.callbacks_render import register_render_callbacks
from port_browser.ui.callbacks.callbacks_popups import register_popup_callbacks

logger = logging.getLogger(__name__)


def create_dash_app(
        config_root: Path | str = Path("config"),
        records: Optional[RecordCollection] = None,
        settings: Optional[AppSettings] = None,
) -> Dash:
    # 1) Load Config (unless the launcher already did)
    if settings is None:
        settings = load_app_settings(Path(config_root))

    # 2) One-shot fetch of the ports collection (empty on failure)
    if records is None:
        records = load_records(settings)

    # 3) App Context
    ctx = AppContext(settings=settings, records=tuple(records))

    app = Dash(
        __name__,
        external_stylesheets=[dbc.themes.FLATLY],
    )
    app.title = settings.ui_title

    app.layout = build_layout(ctx)

    # Register callbacks
    register_state_callbacks(app, ctx)
    register_render_callbacks(app, ctx)
    register_popup_callbacks(app, ctx)

    logger.info("Dash app created", extra={"n_records": len(ctx.records)})
    return app
