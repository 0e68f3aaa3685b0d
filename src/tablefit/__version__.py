"""Version information for tablefit."""

__version__ = "0.1.0"
