from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Dict, Sequence

import dash
from dash import Input, Output

from port_browser.core.columns import FILTERABLE_COLUMNS
from port_browser.core.records import PortRecord
from port_browser.core.view_model import build_table_view
from port_browser.core.view_state import ViewState
from port_browser.ui.callbacks.callbacks_utils import view_state_or_default
from port_browser.ui.helpers import filter_dropdown_options, status_text
from port_browser.ui.ids import IDs, filter_reset_id, filter_select_id
from port_browser.ui.layout.build_controls import HIDDEN
from port_browser.ui.layout.build_pagination import render_page_buttons
from port_browser.ui.layout.build_table import render_table

if TYPE_CHECKING:
    from port_browser.ui.context import AppContext

logger = logging.getLogger(__name__)


def render_outputs(records: Sequence[PortRecord], state: ViewState) -> Dict[str, Any]:
    """Everything the page shows for one ViewState, keyed like the callback outputs."""
    view = build_table_view(records, state)
    return dict(
        table=render_table(view),
        page_buttons=render_page_buttons(view),
        prev_disabled=not view.has_previous,
        next_disabled=not view.has_next,
        status=status_text(view),
        options={
            c: filter_dropdown_options(view.filter_options.get(c, []), state.filters.get(c))
            for c in FILTERABLE_COLUMNS
        },
        reset_styles={
            c: {} if state.filters.get(c) else HIDDEN
            for c in FILTERABLE_COLUMNS
        },
    )


def register_render_callbacks(app: dash.Dash, ctx: AppContext) -> None:
    # ---------------------------------------------------------
    # ViewState -> table, pagination, filter options
    # ---------------------------------------------------------
    @app.callback(
        output=dict(
            table=Output(IDs.Control.PORTS_TABLE, "children"),
            page_buttons=Output(IDs.Control.PAGE_BUTTONS, "children"),
            prev_disabled=Output(IDs.Control.PREV_PAGE_BTN, "disabled"),
            next_disabled=Output(IDs.Control.NEXT_PAGE_BTN, "disabled"),
            status=Output(IDs.Control.STATUS_BAR, "children"),
            options={c: Output(filter_select_id(c), "options") for c in FILTERABLE_COLUMNS},
            reset_styles={c: Output(filter_reset_id(c), "style") for c in FILTERABLE_COLUMNS},
        ),
        inputs=dict(view_data=Input(IDs.Store.VIEW_STATE, "data")),
    )
    def update_view_from_state(view_data: dict[str, Any] | None):
        state = view_state_or_default(view_data)
        return render_outputs(ctx.records, state)
