"""Django settings for the statements project.

Only the template engine and the statements app are wired up; there is no
database, cache or URL configuration.
"""

import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = os.environ.get("DJANGO_SECRET_KEY", "statements-insecure-dev-key")

DEBUG = os.environ.get("DJANGO_DEBUG", "false").lower() == "true"

INSTALLED_APPS = [
    "rest_framework",
    "statements.apps.StatementsConfig",
]

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {},
    },
]

DATABASES = {}

USE_TZ = True

# Statement logging: "console" or "json".
STATEMENTS_LOG_FORMAT = os.environ.get("STATEMENTS_LOG_FORMAT", "console")
STATEMENTS_LOG_LEVEL = os.environ.get("STATEMENTS_LOG_LEVEL", "INFO")
