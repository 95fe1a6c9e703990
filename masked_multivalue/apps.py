"""
Django app configuration for the masked-multivalue library.
"""

import logging

from django.apps import AppConfig
from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

logger = logging.getLogger(__name__)


class MaskedMultiValueConfig(AppConfig):
    """Django app configuration for masked-multivalue."""

    name = "masked_multivalue"
    verbose_name = "Masked Multi-Value"
    label = "masked_multivalue"

    def ready(self):
        """Validate library settings once Django has loaded."""
        from .config_proxy import get_settings_proxy

        results = get_settings_proxy().validate()
        for warning in results["warnings"]:
            logger.warning(warning)

        if results["valid"]:
            logger.info("masked-multivalue configuration validated")
            return

        for error in results["errors"]:
            logger.error(error)
        if getattr(settings, "DEBUG", False):
            raise ImproperlyConfigured("; ".join(results["errors"]))
