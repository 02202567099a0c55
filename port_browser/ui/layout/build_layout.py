from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dcc

from port_browser.core.popups import PopupState
from port_browser.core.view_state import ViewState
from port_browser.ui.context import AppContext
from port_browser.ui.layout.build_controls import build_controls
from port_browser.ui.layout.build_navbar import build_navbar
from port_browser.ui.layout.build_pagination import build_pagination
from port_browser.ui.layout.build_table import build_table_panel
from port_browser.ui.ids import IDs


def build_layout(ctx: AppContext) -> dbc.Container:
    initial_state = ViewState()

    return dbc.Container(
        fluid=True,
        className="pb-root",
        children=[
            build_navbar(ctx.settings),

            # Per-browser UI state; the record collection stays server-side
            dcc.Store(id=IDs.Store.VIEW_STATE, data=initial_state.to_dict()),
            dcc.Store(id=IDs.Store.POPUP_STATE, data=PopupState().to_dict()),

            dbc.Row(
                dbc.Col(
                    [
                        build_controls(initial_state),
                        build_table_panel(),
                        build_pagination(),
                    ],
                    className="mt-3",
                ),
            ),
        ],
    )
