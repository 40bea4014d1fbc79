# FILE: web/public/probe.py
# DATE: 2026-10-19
# PURPOSE: optional server-side check of placeholder images (HEAD via httpx).
#          An unreachable image is switched to its fallback before the page is rendered.

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Optional

import httpx
from django.conf import settings

from .images import ImageWithFallback

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _Cfg:
    enabled: bool
    timeout: float


def _cfg() -> _Cfg:
    return _Cfg(
        enabled=bool(getattr(settings, "PLACEHOLDER_PROBE", False)),
        timeout=float(getattr(settings, "PLACEHOLDER_PROBE_TIMEOUT", 1.5)),
    )


def _make_client(timeout: float) -> httpx.Client:
    return httpx.Client(timeout=timeout, follow_redirects=True)


def is_reachable(client: httpx.Client, url: str) -> bool:
    try:
        resp = client.head(url)
        if resp.status_code == 405:
            # HEAD not allowed: ask for the first byte instead
            resp = client.get(url, headers={"Range": "bytes=0-0"})
    except httpx.HTTPError as exc:
        logger.warning("placeholder image unreachable: %s (%s)", url, exc.__class__.__name__)
        return False

    if resp.status_code >= 400:
        logger.warning("placeholder image failed: %s -> HTTP %s", url, resp.status_code)
        return False

    return True


def settle_images(images: Iterable[ImageWithFallback], enabled: Optional[bool] = None) -> int:
    """
    Probe every image still on its primary source; failed ones get on_error().
    Returns how many images were switched. Does nothing unless enabled
    (explicit argument, else PLACEHOLDER_PROBE).
    """
    cfg = _cfg()
    if not (cfg.enabled if enabled is None else enabled):
        return 0

    switched = 0
    with _make_client(cfg.timeout) as client:
        for image in images:
            if image.failed:
                continue
            if not is_reachable(client, image.src):
                image.on_error()
                switched += 1

    if switched:
        logger.info("placeholder probe: %s image(s) on fallback", switched)
    return switched
