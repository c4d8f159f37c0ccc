from __future__ import annotations


class ConfigurationError(ValueError):
    """Raised when a board is built from a malformed layout or void set."""
