"""
Configuration management for masked-multivalue.

This module provides a settings proxy that resolves settings from the Django
``MASKED_MULTIVALUE`` setting first and the library defaults second.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from django.conf import settings
from django.core.signals import setting_changed
from django.dispatch import receiver

from .defaults import LIBRARY_DEFAULTS, MASKED_KEY_MATCH_MODES, SETTINGS_NAME

logger = logging.getLogger(__name__)

_MISSING = object()


class SettingsProxy:
    """
    Proxy for accessing masked-multivalue settings with hierarchical resolution.

    Settings are resolved in the following order:
    1. Global Django settings (MASKED_MULTIVALUE)
    2. Library defaults (LIBRARY_DEFAULTS)
    """

    def __init__(self):
        self._cache: dict[str, Any] = {}

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a setting value with hierarchical resolution and caching.

        Args:
            key: Setting key to retrieve (dot notation for nested access)
            default: Default value if setting is not found

        Returns:
            The setting value from the highest priority source
        """
        if key in self._cache:
            return self._cache[key]

        value = self._get_django_setting(key)
        if value is _MISSING:
            value = self._get_nested_value(LIBRARY_DEFAULTS, key)
        if value is _MISSING:
            return default

        self._cache[key] = value
        return value

    def _get_django_setting(self, key: str) -> Any:
        django_settings = getattr(settings, SETTINGS_NAME, None) or {}
        return self._get_nested_value(django_settings, key)

    def _get_nested_value(self, data: dict[str, Any], key: str) -> Any:
        """
        Get nested value from dictionary using dot notation.

        Args:
            data: Dictionary to search in
            key: Key to retrieve (supports dot notation for nested access)

        Returns:
            The value or _MISSING if not found
        """
        if not isinstance(data, dict):
            return _MISSING

        current = data
        for k in key.split("."):
            if not isinstance(current, dict) or k not in current:
                return _MISSING
            current = current[k]

        return current

    def clear_cache(self) -> None:
        """
        Clear the settings cache.
        """
        self._cache.clear()

    def validate(self) -> dict[str, Any]:
        """
        Validate current settings configuration.

        Returns:
            Dictionary with validation results
        """
        validation_results = {"valid": True, "errors": [], "warnings": []}

        def error(message: str) -> None:
            validation_results["errors"].append(message)
            validation_results["valid"] = False

        overrides = getattr(settings, SETTINGS_NAME, None)
        if overrides is not None and not isinstance(overrides, dict):
            error(f"{SETTINGS_NAME} must be a dict")
            return validation_results

        masked_keys = self.get("masked_keys")
        if not isinstance(masked_keys, (list, tuple, set, frozenset)):
            error("Setting 'masked_keys' must be a list of field names")
        elif not masked_keys:
            validation_results["warnings"].append(
                "Setting 'masked_keys' is empty; no request field will be masked"
            )

        match = self.get("masked_key_match")
        if match not in MASKED_KEY_MATCH_MODES:
            error(
                f"Setting 'masked_key_match' must be one of "
                f"{', '.join(MASKED_KEY_MATCH_MODES)}, got {match!r}"
            )

        methods = self.get("request_logging.methods")
        if not isinstance(methods, (list, tuple, set, frozenset)):
            error("Setting 'request_logging.methods' must be a list of HTTP methods")

        log_level = self.get("request_logging.log_level")
        if not isinstance(logging.getLevelName(str(log_level).upper()), int):
            error(f"Setting 'request_logging.log_level' is not a logging level: {log_level!r}")

        attribute = self.get("request_logging.request_attribute")
        if not isinstance(attribute, str) or not attribute.isidentifier():
            error(
                "Setting 'request_logging.request_attribute' must be a valid "
                f"attribute name, got {attribute!r}"
            )

        return validation_results


# Global settings proxy instance
settings_proxy = SettingsProxy()


def get_settings_proxy() -> SettingsProxy:
    return settings_proxy


def get_setting(key: str, default: Any = None) -> Any:
    """
    Get a setting value using the hierarchical settings system.

    Args:
        key: Setting key to retrieve
        default: Default value if setting is not found

    Returns:
        The setting value from the highest priority source
    """
    return settings_proxy.get(key, default)


@receiver(setting_changed)
def _clear_cache_on_setting_changed(sender, setting: Optional[str] = None, **kwargs) -> None:
    if setting == SETTINGS_NAME:
        logger.debug("%s changed, clearing settings cache", SETTINGS_NAME)
        settings_proxy.clear_cache()


__all__ = [
    "SettingsProxy",
    "settings_proxy",
    "get_settings_proxy",
    "get_setting",
]
