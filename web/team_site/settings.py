# FILE: web/team_site/settings.py
# DATE: 2026-10-12
# CHANGE: static team site; no database, no auth; site meta + placeholder image config + file logging

"""
Django settings for team_site project.
"""

import os
from pathlib import Path

# --- BASE DIR ---

BASE_DIR = Path(__file__).resolve().parent.parent

# --- SECURITY ---

SECRET_KEY = os.environ.get(
    "DJANGO_SECRET_KEY",
    "django-insecure-q7#n1v@0k!t4z2m^c8w$e5r(j6x)a9s+u3y_b-h=lpgdf0oi",
)

DEBUG = os.environ.get("DJANGO_DEBUG", "1") == "1"

ALLOWED_HOSTS = [
    "localhost",
    "127.0.0.1",
]


# --- APPLICATIONS ---

INSTALLED_APPS = [
    "django.contrib.staticfiles",

    "public",
]


# --- MIDDLEWARE ---

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
]

ROOT_URLCONF = "team_site.urls"


# --- TEMPLATES ---

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [
            BASE_DIR / "templates",
        ],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.request",
                "public.context_processors.site_context",
            ],
        },
    },
]

WSGI_APPLICATION = "team_site.wsgi.application"


# --- DATABASE ---

# no persistence: pages are rendered from static literals
DATABASES = {}


# --- I18N / TIMEZONE ---

LANGUAGE_CODE = "en"

TIME_ZONE = "Asia/Manila"

USE_I18N = True
USE_TZ = True


# --- STATIC FILES ---

STATIC_URL = "/static/"
STATIC_ROOT = BASE_DIR / "staticfiles"


# --- SITE ---

SITE_META = {
    "title": "Our Team",
    "description": "Meet our team and visit our branches in Parañaque City and Lucena City.",
}

# {width}, {height}, {text} — text is url-encoded before formatting
PLACEHOLDER_IMAGE_URL = "https://via.placeholder.com/{width}x{height}?text={text}"

FALLBACK_HERO_IMAGE = "fallback-image.png"
FALLBACK_BRANCH_IMAGE = "fallback-branch.png"

# server-side HEAD check of placeholder images; off by default
PLACEHOLDER_PROBE = os.environ.get("PLACEHOLDER_PROBE", "0") == "1"
PLACEHOLDER_PROBE_TIMEOUT = float(os.environ.get("PLACEHOLDER_PROBE_TIMEOUT", "1.5"))


# --- LOGGING ---

SITE_LOG_ROOT = Path(os.environ.get("SITE_LOG_ROOT", BASE_DIR / "logs"))

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "plain": {"format": "%(levelname)s %(name)s: %(message)s"},
    },
    "handlers": {
        "site_file": {
            "class": "team_site.logs.HostFilePrintHandler",
            "log_file": "site.log",
            "formatter": "plain",
        },
    },
    "loggers": {
        "public": {
            "handlers": ["site_file"],
            "level": "INFO",
            "propagate": True,
        },
    },
}

