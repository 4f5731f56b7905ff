"""Nostr content reference scanner - typed references from free-form note text."""

try:
    from importlib.metadata import version

    __version__ = version("nostrscan")
except Exception:
    __version__ = "0.0.0-dev"
