# FILE: web/public/images.py
# DATE: 2026-10-12
# PURPOSE: remote placeholder image with a local fallback; one-way switch primary -> fallback

from __future__ import annotations

from dataclasses import dataclass
from urllib.parse import quote_plus

from django.conf import settings
from django.templatetags.static import static


@dataclass(frozen=True)
class _Cfg:
    placeholder_url: str
    hero_fallback: str
    branch_fallback: str


def _cfg() -> _Cfg:
    return _Cfg(
        placeholder_url=str(
            getattr(
                settings,
                "PLACEHOLDER_IMAGE_URL",
                "https://via.placeholder.com/{width}x{height}?text={text}",
            )
        ),
        hero_fallback=str(getattr(settings, "FALLBACK_HERO_IMAGE", "fallback-image.png")),
        branch_fallback=str(getattr(settings, "FALLBACK_BRANCH_IMAGE", "fallback-branch.png")),
    )


@dataclass
class ImageWithFallback:
    """
    Display source for one <img>.

    Starts on `src`. The first on_error() moves it to `fallback` for good;
    later calls change nothing. The primary is never retried and a failing
    fallback is left as is.
    """

    src: str
    fallback: str
    alt: str = ""
    failed: bool = False

    @property
    def current(self) -> str:
        return self.fallback if self.failed else self.src

    def on_error(self) -> str:
        self.failed = True
        return self.current


def placeholder_url(text: str, width: int = 600, height: int = 400) -> str:
    return _cfg().placeholder_url.format(width=width, height=height, text=quote_plus(text))


def hero_image(title: str) -> ImageWithFallback:
    cfg = _cfg()
    return ImageWithFallback(
        src=placeholder_url(title, width=1200, height=500),
        fallback=static(cfg.hero_fallback),
        alt=title,
    )


def branch_image(name: str) -> ImageWithFallback:
    cfg = _cfg()
    return ImageWithFallback(
        src=placeholder_url(name),
        fallback=static(cfg.branch_fallback),
        alt=name,
    )
