"""
Default configuration for the masked-multivalue library.

Every setting the library consumes is declared here. Projects override any of
them through the ``MASKED_MULTIVALUE`` dict in their Django settings.
"""

from __future__ import annotations

from typing import Any

LIBRARY_VERSION = "0.1.0"
LIBRARY_NAME = "masked-multivalue"

# Name of the Django setting holding project overrides
SETTINGS_NAME = "MASKED_MULTIVALUE"

MASKED_KEY_MATCH_MODES = ("contains", "exact")


# --------------------------------------------------------------------------- #
# Library-wide defaults
# --------------------------------------------------------------------------- #
LIBRARY_DEFAULTS: dict[str, Any] = {
    # Field-name terms whose submitted values are never rendered
    "masked_keys": [
        "password",
        "passwd",
        "secret",
        "token",
        "api_key",
        "apikey",
        "authorization",
        "credential",
        "client_secret",
    ],
    "masked_key_match": "contains",
    "request_logging": {
        "enabled": False,
        "methods": ["POST", "PUT", "PATCH", "DELETE"],
        "log_level": "DEBUG",
        "include_query_params": False,
        "request_attribute": "masked_data",
    },
}


__all__ = [
    "LIBRARY_VERSION",
    "LIBRARY_NAME",
    "SETTINGS_NAME",
    "MASKED_KEY_MATCH_MODES",
    "LIBRARY_DEFAULTS",
]
