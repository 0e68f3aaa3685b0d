"""tablefit - adaptive terminal tables."""

from tablefit.__version__ import __version__

__all__ = ["__version__"]
