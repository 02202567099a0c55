from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import dash
from dash import ALL, Input, Output, State, exceptions

from port_browser.core.popups import PopupState
from port_browser.ui.ids import IDs
from port_browser.ui.layout.build_controls import popup_styles

if TYPE_CHECKING:
    from port_browser.ui.context import AppContext

logger = logging.getLogger(__name__)

PAGING_CONTROLS = (IDs.Control.PREV_PAGE_BTN, IDs.Control.NEXT_PAGE_BTN)


def apply_popup_event(popups: PopupState, triggered_id: Any, triggered_value: Any = None) -> PopupState:
    if triggered_id == IDs.Control.COLUMN_SELECTOR_BTN:
        return popups.toggle_column_selector()
    if triggered_id == IDs.Control.FILTER_POPUP_BTN:
        return popups.toggle_filter_popup()
    if triggered_id == IDs.Control.POPUP_BACKDROP:
        # Click landed outside every open popup
        return popups.dismiss_all()
    if triggered_id in PAGING_CONTROLS:
        return popups.dismiss_all()
    if isinstance(triggered_id, dict) and triggered_id.get("type") == IDs.Pattern.PAGE_BUTTON:
        # Re-rendered page buttons fire with n_clicks None/0; only real clicks dismiss
        return popups.dismiss_all() if triggered_value else popups
    return popups


def register_popup_callbacks(app: dash.Dash, ctx: AppContext) -> None:
    @app.callback(
        Output(IDs.Store.POPUP_STATE, "data"),
        Output(IDs.Control.POPUP_BACKDROP, "style"),
        Output(IDs.Control.COLUMN_SELECTOR_POPUP, "style"),
        Output(IDs.Control.FILTER_POPUP, "style"),
        Input(IDs.Control.COLUMN_SELECTOR_BTN, "n_clicks"),
        Input(IDs.Control.FILTER_POPUP_BTN, "n_clicks"),
        Input(IDs.Control.POPUP_BACKDROP, "n_clicks"),
        Input(IDs.Control.PREV_PAGE_BTN, "n_clicks"),
        Input(IDs.Control.NEXT_PAGE_BTN, "n_clicks"),
        Input({"type": IDs.Pattern.PAGE_BUTTON, "index": ALL}, "n_clicks"),
        State(IDs.Store.POPUP_STATE, "data"),
        prevent_initial_call=True,
    )
    def update_popups(_columns, _filters, _backdrop, _prev, _next, _pages, popup_data):
        current = PopupState.from_dict(popup_data)
        triggered = dash.ctx.triggered[0] if dash.ctx.triggered else {}
        popups = apply_popup_event(current, dash.ctx.triggered_id, triggered.get("value"))
        if popups == current and not popups.any_open:
            raise exceptions.PreventUpdate
        backdrop, columns, filters = popup_styles(popups)
        return popups.to_dict(), backdrop, columns, filters
