from __future__ import annotations

from typing import List

import dash_bootstrap_components as dbc
from dash import html

from port_browser.core.view_model import TableView
from port_browser.ui.ids import IDs, page_button_id
from port_browser.ui.layout.build_controls import ABOVE_BACKDROP_STYLE


def render_page_buttons(view: TableView) -> List[dbc.Button]:
    return [
        dbc.Button(
            str(page),
            id=page_button_id(page),
            n_clicks=0,
            size="sm",
            color="primary",
            outline=page != view.current_page,
            active=page == view.current_page,
            className="me-1",
        )
        for page in view.page_window
    ]


def build_pagination() -> html.Div:
    return html.Div(
        [
            dbc.Button(
                "Previous",
                id=IDs.Control.PREV_PAGE_BTN,
                n_clicks=0,
                size="sm",
                color="secondary",
                className="me-2",
            ),
            html.Div(id=IDs.Control.PAGE_BUTTONS, className="d-inline-flex"),
            dbc.Button(
                "Next",
                id=IDs.Control.NEXT_PAGE_BTN,
                n_clicks=0,
                size="sm",
                color="secondary",
                className="ms-1",
            ),
        ],
        className="d-flex justify-content-center align-items-center mt-3 pb-pagination",
        style=ABOVE_BACKDROP_STYLE,
    )
