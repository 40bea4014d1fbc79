# FILE: web/public/pages.py
# DATE: 2026-10-12
# PURPOSE: home page composition: hero block, then one card per branch in declaration order

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from django.utils.translation import gettext_lazy as _

from .branches import BRANCHES, BranchCardView, BranchRecord, branch_card
from .images import ImageWithFallback, hero_image

HERO_TITLE = _("Welcome to Our Team")
HERO_TEXT = _(
    "We are a small team working out of two branches. "
    "Get to know the people and the places behind our work."
)


@dataclass
class Hero:
    title: str
    text: str
    image: ImageWithFallback


@dataclass
class HomePage:
    hero: Hero
    cards: list[BranchCardView] = field(default_factory=list)

    def images(self) -> list[ImageWithFallback]:
        return [self.hero.image] + [c.image for c in self.cards]


def compose_home(branches: Iterable[BranchRecord] = BRANCHES) -> HomePage:
    title = str(HERO_TITLE)
    hero = Hero(title=title, text=str(HERO_TEXT), image=hero_image(title))
    return HomePage(hero=hero, cards=[branch_card(b) for b in branches])
