from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dcc, html

from port_browser.core.columns import DISPLAY_COLUMNS, FILTERABLE_COLUMNS
from port_browser.core.popups import PopupState
from port_browser.core.view_state import ViewState
from port_browser.ui.ids import IDs, filter_reset_id, filter_select_id, filter_wrapper_id

HIDDEN = {"display": "none"}

BACKDROP_STYLE = {
    "position": "fixed",
    "top": 0,
    "left": 0,
    "width": "100vw",
    "height": "100vh",
    "zIndex": 1000,
    "background": "transparent",
}

# Controls that stay clickable while a popup is open
ABOVE_BACKDROP_STYLE = {"position": "relative", "zIndex": 1001}

POPUP_STYLE = {
    "position": "absolute",
    "zIndex": 1002,
    "minWidth": "260px",
}


def popup_styles(popups: PopupState) -> tuple[dict, dict, dict]:
    """Styles for (backdrop, column selector, filter popup)."""
    backdrop = BACKDROP_STYLE if popups.any_open else HIDDEN
    columns = POPUP_STYLE if popups.column_selector else HIDDEN
    filters = POPUP_STYLE if popups.filter_popup else HIDDEN
    return backdrop, columns, filters


def _build_filter_row(column: str) -> html.Div:
    return html.Div(
        [
            html.Label(column, className="form-label mb-1"),
            html.Div(
                id=filter_wrapper_id(column),
                n_clicks=0,
                children=dcc.Dropdown(
                    id=filter_select_id(column),
                    options=[],
                    placeholder="All",
                    clearable=True,
                ),
            ),
            dbc.Button(
                "Reset",
                id=filter_reset_id(column),
                n_clicks=0,
                size="sm",
                color="link",
                style=HIDDEN,
                className="px-0",
            ),
        ],
        className="mb-2",
    )


def build_controls(state: ViewState) -> html.Div:
    backdrop, column_style, filter_style = popup_styles(PopupState())

    return html.Div(
        [
            html.Div(
                id=IDs.Control.POPUP_BACKDROP,
                n_clicks=0,
                style=backdrop,
            ),
            dbc.Row(
                [
                    dbc.Col(
                        dbc.Input(
                            id=IDs.Control.SEARCH_INPUT,
                            type="text",
                            placeholder="Search...",
                            value=state.search_term,
                            debounce=False,
                        ),
                        md=6,
                    ),
                    dbc.Col(
                        [
                            dbc.Button(
                                "Select Columns",
                                id=IDs.Control.COLUMN_SELECTOR_BTN,
                                n_clicks=0,
                                color="secondary",
                                className="me-2",
                            ),
                            dbc.Button(
                                "Apply Filters",
                                id=IDs.Control.FILTER_POPUP_BTN,
                                n_clicks=0,
                                color="secondary",
                            ),
                        ],
                        md="auto",
                    ),
                ],
                className="g-2 align-items-center",
                style=ABOVE_BACKDROP_STYLE,
            ),
            dbc.Card(
                [
                    dbc.CardHeader("Select Columns", className="fw-semibold"),
                    dbc.CardBody(
                        dbc.Checklist(
                            id=IDs.Control.COLUMN_CHECKLIST,
                            options=[{"label": f" {c}", "value": c} for c in DISPLAY_COLUMNS],
                            value=list(state.visible_columns),
                        )
                    ),
                ],
                id=IDs.Control.COLUMN_SELECTOR_POPUP,
                style=column_style,
                className="shadow pb-popup",
            ),
            dbc.Card(
                [
                    dbc.CardHeader("Apply Filters", className="fw-semibold"),
                    dbc.CardBody([_build_filter_row(c) for c in FILTERABLE_COLUMNS]),
                ],
                id=IDs.Control.FILTER_POPUP,
                style=filter_style,
                className="shadow pb-popup",
            ),
        ],
        className="pb-controls position-relative mb-3",
    )
