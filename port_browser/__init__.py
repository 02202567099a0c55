"""
Top-level package for the port browser.

This package exposes the core architecture (data-view engine, services, UI adapters).
Most code should import from submodules such as:
    port_browser.core
    port_browser.services
    port_browser.ui
"""

__all__: list[str] = []
