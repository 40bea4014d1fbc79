# FILE: web/team_site/urls.py
# DATE: 2026-10-12
# CHANGE: public site only; /about, /branches, /contact are nav targets without pages yet

from django.conf import settings
from django.contrib.staticfiles.urls import staticfiles_urlpatterns
from django.urls import include, path

urlpatterns = [
    path("", include("public.urls")),
]

if settings.DEBUG:
    urlpatterns += staticfiles_urlpatterns()
