# FILE: web/team_site/wsgi.py
# DATE: 2026-10-12
# PURPOSE: WSGI entrypoint for the team site.

from __future__ import annotations

import os
import sys
from pathlib import Path

from django.core.wsgi import get_wsgi_application


WEB_DIR = Path(__file__).resolve().parent.parent

if str(WEB_DIR) not in sys.path:
    sys.path.append(str(WEB_DIR))

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "team_site.settings")

application = get_wsgi_application()
