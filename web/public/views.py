# FILE: web/public/views.py
# DATE: 2026-10-14
# PURPOSE: home view — renders public/index.html (hero + branch cards)

from django.shortcuts import render

from .pages import compose_home
from .probe import settle_images


def home_context(probe=None):
    page = compose_home()
    settle_images(page.images(), enabled=probe)
    return {"page": page}


def home(request):
    return render(request, "public/index.html", home_context())
