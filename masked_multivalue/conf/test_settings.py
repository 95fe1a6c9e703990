"""
Minimal Django settings for running the masked-multivalue test suite.
"""

import os

SECRET_KEY = os.environ.get(
    "DJANGO_SECRET_KEY", "django-insecure-masked-multivalue-tests"
)

DEBUG = False

ALLOWED_HOSTS = ["testserver", "localhost", "127.0.0.1"]

INSTALLED_APPS = [
    "django.contrib.contenttypes",
    "django.contrib.auth",
    "masked_multivalue",
]

MIDDLEWARE = [
    "django.middleware.common.CommonMiddleware",
    "masked_multivalue.middleware.RequestDataLoggingMiddleware",
]

ROOT_URLCONF = "masked_multivalue.conf.test_urls"

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

USE_TZ = True

MASKED_MULTIVALUE = {
    "request_logging": {
        "enabled": True,
    },
}

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "handlers": {
        "console": {"class": "logging.StreamHandler"},
    },
    "loggers": {
        "masked_multivalue": {
            "handlers": ["console"],
            "level": "DEBUG",
            "propagate": True,
        },
    },
}
