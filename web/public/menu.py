# FILE: web/public/menu.py
# DATE: 2026-10-12
# PURPOSE: single source of truth for the site header navigation (order, i18n, urls, aria labels)

from django.utils.translation import gettext_lazy as _

SITE_MENU = (
    {
        "label": _("Home"),
        "url": "/",
        "aria_label": _("Go to Home page"),
    },
    {
        "label": _("About"),
        "url": "/about",
        "aria_label": _("Go to About page"),
    },
    {
        "label": _("Branches"),
        "url": "/branches",
        "aria_label": _("Go to Branches page"),
    },
    {
        "label": _("Contact"),
        "url": "/contact",
        "aria_label": _("Go to Contact page"),
    },
)
