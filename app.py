"""
Launcher for the port browser.

`python app.py` runs the Dash dev server on the configured host/port;
WSGI servers can import `server` instead.
"""
import os

from port_browser.config.loader import load_app_settings
from port_browser.logging_config import configure_logging
from port_browser.ui.dash_app import create_dash_app

configure_logging()

settings = load_app_settings(os.getenv("PORT_BROWSER_CONFIG", "config"))
app = create_dash_app(settings=settings)
server = app.server


if __name__ == "__main__":
    app.run(host=settings.host, port=settings.port, debug=settings.debug)
