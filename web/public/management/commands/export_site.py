# FILE: web/public/management/commands/export_site.py
# DATE: 2026-10-19
# PURPOSE: render the home page to <out_dir>/index.html and copy css + fallback images to <out_dir>/static/.
#          STATIC_URL links in the page are rewritten to "static/..." so the export works from any folder or from disk.

from __future__ import annotations

import logging
import re
import shutil
from pathlib import Path

from django.conf import settings
from django.contrib.staticfiles import finders
from django.core.management.base import BaseCommand, CommandError
from django.http import HttpRequest
from django.template.loader import render_to_string

from public.views import home_context

logger = logging.getLogger(__name__)

_EXPORT_STATIC_DIR = "static"


def _static_assets() -> list[str]:
    return [
        "css/site.css",
        getattr(settings, "FALLBACK_HERO_IMAGE", "fallback-image.png"),
        getattr(settings, "FALLBACK_BRANCH_IMAGE", "fallback-branch.png"),
    ]


def _home_request() -> HttpRequest:
    request = HttpRequest()
    request.method = "GET"
    request.path = "/"
    return request


def _relative_static(html: str, static_url: str) -> str:
    # href="/static/x" | src="/static/x" | data-fallback="/static/x" -> "static/x"
    attr_re = re.compile(
        r"""\b(?P<attr>href|src|data-fallback)\s*=\s*(?P<q>["'])""" + re.escape(static_url)
    )
    return attr_re.sub(lambda m: f"{m.group('attr')}={m.group('q')}{_EXPORT_STATIC_DIR}/", html)


class Command(BaseCommand):
    help = "Export the home page as static HTML (index.html + static/)."

    def add_arguments(self, parser):
        parser.add_argument("out_dir", help="Target directory, created if missing.")
        parser.add_argument(
            "--probe",
            action="store_true",
            help="Check placeholder images first and bake in fallbacks for unreachable ones.",
        )

    def handle(self, *args, **options):
        out_dir = Path(options["out_dir"])
        if out_dir.exists() and not out_dir.is_dir():
            raise CommandError(f"{out_dir} exists and is not a directory")

        assets = []
        for name in _static_assets():
            src = finders.find(name)
            if not src:
                raise CommandError(f"static asset not found: {name}")
            assets.append((name, Path(src)))

        probe = True if options["probe"] else None
        html = render_to_string("public/index.html", home_context(probe=probe), request=_home_request())
        html = _relative_static(html, settings.STATIC_URL)

        out_dir.mkdir(parents=True, exist_ok=True)
        index_path = out_dir / "index.html"
        index_path.write_text(html, encoding="utf-8")
        written = [index_path]

        for name, src in assets:
            dst = out_dir / _EXPORT_STATIC_DIR / name
            dst.parent.mkdir(parents=True, exist_ok=True)
            shutil.copyfile(src, dst)
            written.append(dst)

        for path in written:
            self.stdout.write(str(path))
        logger.info("exported %s file(s) to %s", len(written), out_dir)
