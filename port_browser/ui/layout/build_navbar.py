from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import html

from port_browser.config.model import AppSettings


def build_navbar(settings: AppSettings) -> dbc.Navbar:
    return dbc.Navbar(
        dbc.Container(
            fluid=True,
            children=[
                html.Div(
                    [
                        html.H2(settings.ui_title, className="mb-0"),
                        html.Small(
                            settings.subtitle,
                            className="text-muted",
                            id="navbar-subtitle",
                        ),
                    ],
                    className="d-flex flex-column justify-content-center",
                ),
            ],
        ),
        dark=False,
        className="shadow-sm pb-navbar",
    )
