# FILE: web/public/context_processors.py
# DATE: 2026-10-12
# PURPOSE: header menu + document meta for every template

from django.conf import settings

from .menu import SITE_MENU

_DEFAULT_META = {
    "title": "Our Team",
    "description": "",
}


def site_meta():
    meta = dict(_DEFAULT_META)
    meta.update(getattr(settings, "SITE_META", {}) or {})
    return meta


def site_context(request):
    return {
        "site_menu": [dict(item) for item in SITE_MENU],
        "site_meta": site_meta(),
    }
