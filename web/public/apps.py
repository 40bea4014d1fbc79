# FILE: web/public/apps.py
# PURPOSE: public site app (home page, header, branch cards)

from django.apps import AppConfig


class PublicConfig(AppConfig):
    name = "public"
