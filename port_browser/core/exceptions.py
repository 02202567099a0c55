class PortBrowserError(Exception):
    """Base exception for all port_browser errors"""
    pass

class ConfigError(PortBrowserError):
    """Invalid or unreadable global.json"""
    pass

class DataSourceError(PortBrowserError):
    """
    The port data source could not be fetched or did not contain
    a JSON object of port records
    """
    pass

class UnknownColumnError(PortBrowserError, KeyError):
    """Column name is not part of the fixed display vocabulary"""
    pass
