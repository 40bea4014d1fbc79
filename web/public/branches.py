# FILE: web/public/branches.py
# DATE: 2026-10-12
# PURPOSE: branch records shown on the home page + branch card rendering

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from django.template.loader import render_to_string

from .images import ImageWithFallback, branch_image


@dataclass(frozen=True)
class BranchRecord:
    name: str
    description: str


# declaration order = display order
BRANCHES: tuple[BranchRecord, ...] = (
    BranchRecord(
        name="Parañaque City",
        description=(
            "Our main office near the bay, home to the core team "
            "and the place where most projects start."
        ),
    ),
    BranchRecord(
        name="Lucena City",
        description=(
            "Our southern branch serving clients across Quezon Province "
            "with the same people and the same standards."
        ),
    ),
)


@dataclass
class BranchCardView:
    record: BranchRecord
    image: ImageWithFallback

    @property
    def name(self) -> str:
        return self.record.name

    @property
    def description(self) -> str:
        return self.record.description


def branch_card(record: BranchRecord) -> BranchCardView:
    return BranchCardView(record=record, image=branch_image(record.name))


def render_branch_card(record: BranchRecord, image: Optional[ImageWithFallback] = None) -> str:
    """Render one card as HTML. Name and description go out as given, empty or not."""
    card = branch_card(record) if image is None else BranchCardView(record=record, image=image)
    return render_to_string("public/_branch_card.html", {"card": card})
