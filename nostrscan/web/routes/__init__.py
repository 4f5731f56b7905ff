"""Route modules for the nostrscan web API."""

from . import extract

__all__ = ["extract"]
