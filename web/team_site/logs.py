"""
FILE: web/team_site/logs.py
DATE: 2026-10-19
SUMMARY: logging.Handler for Django LOGGING: prints each record and appends it, timestamped, to SITE_LOG_ROOT/<log_file>.
"""

from __future__ import annotations

from datetime import datetime, timezone
import logging
from pathlib import Path

from django.conf import settings


def _log_path(log_file: str) -> Path:
    name = Path(log_file or "").name
    if not name:
        raise ValueError("log_file is required")
    return Path(getattr(settings, "SITE_LOG_ROOT", Path("logs"))) / name


class HostFilePrintHandler(logging.Handler):
    def __init__(self, log_file: str):
        super().__init__()
        self.log_file = log_file

    def emit(self, record: logging.LogRecord) -> None:
        try:
            message = self.format(record)
            print(message, flush=True)
            path = _log_path(self.log_file)
            path.parent.mkdir(parents=True, exist_ok=True)
            with path.open("a", encoding="utf-8") as f:
                f.write(f"{datetime.now(timezone.utc).isoformat()}\t{message}\n")
        except Exception:
            self.handleError(record)
