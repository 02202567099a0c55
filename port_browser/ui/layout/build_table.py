from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import html

from port_browser.core.view_model import TableView
from port_browser.ui.helpers import column_label
from port_browser.ui.ids import IDs


def render_table(view: TableView) -> dbc.Table:
    header = html.Thead(html.Tr([html.Th(column_label(c)) for c in view.columns]))
    body = html.Tbody(
        [html.Tr([html.Td(cell) for cell in row]) for row in view.cells()]
    )
    return dbc.Table(
        [header, body],
        bordered=False,
        hover=True,
        striped=True,
        size="sm",
        className="pb-ports-table",
    )


def build_table_panel() -> dbc.Card:
    return dbc.Card(
        [
            dbc.CardHeader(
                html.Div(
                    [
                        html.Strong("Ports"),
                        html.Small(id=IDs.Control.STATUS_BAR, className="text-muted ms-auto"),
                    ],
                    className="d-flex align-items-center",
                ),
                className="p-2",
            ),
            dbc.CardBody(
                html.Div(id=IDs.Control.PORTS_TABLE, style={"overflowX": "auto"}),
            ),
        ],
        className="pb-maincard",
    )
