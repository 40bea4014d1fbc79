"""Tests for branch records and card rendering.

Invariants:
    - rendering is deterministic for the same record
    - name and description are rendered as given, empty values included
    - the card image is keyed on the branch name
"""

import re

from public.branches import BRANCHES, BranchRecord, render_branch_card
from public.images import ImageWithFallback


def _title(html):
    return re.search(r'class="branch-card__title">(.*?)</h3>', html).group(1)


def _text(html):
    return re.search(r'class="branch-card__text">(.*?)</p>', html).group(1)


def test_default_branches_in_declaration_order():
    assert [b.name for b in BRANCHES] == ["Parañaque City", "Lucena City"]
    assert all(b.description for b in BRANCHES)


def test_card_shows_name_and_description():
    html = render_branch_card(BranchRecord("Lucena City", "Southern branch."))
    assert _title(html) == "Lucena City"
    assert _text(html) == "Southern branch."


def test_card_rendering_is_deterministic():
    record = BranchRecord("Parañaque City", "Main office.")
    assert render_branch_card(record) == render_branch_card(record)


def test_empty_values_are_rendered_empty():
    html = render_branch_card(BranchRecord("", ""))
    assert _title(html) == ""
    assert _text(html) == ""


def test_values_are_not_trimmed():
    html = render_branch_card(BranchRecord("  Lucena City ", "x"))
    assert _title(html) == "  Lucena City "


def test_card_image_points_at_placeholder_with_fallback():
    html = render_branch_card(BranchRecord("Lucena City", "x"))
    assert 'src="https://via.placeholder.com/600x400?text=Lucena+City"' in html
    assert 'data-fallback="/static/fallback-branch.png"' in html
    assert "this.onerror=null" in html


def test_failed_image_renders_fallback_without_handler():
    image = ImageWithFallback(src="https://img.example/x.png", fallback="/static/fallback-branch.png")
    image.on_error()
    html = render_branch_card(BranchRecord("Lucena City", "x"), image=image)
    assert 'src="/static/fallback-branch.png"' in html
    assert "onerror" not in html
