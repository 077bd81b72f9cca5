"""
Client configuration.

Settings come from environment variables; ClientConfig is the frozen
value a Client is built from.
"""

from .settings import ClientConfig, Settings, configure_logging, get_settings

__all__ = ["ClientConfig", "Settings", "configure_logging", "get_settings"]
