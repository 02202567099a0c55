from port_browser.config.loader import load_app_settings
from port_browser.config.model import AppSettings

__all__ = ["AppSettings", "load_app_settings"]
