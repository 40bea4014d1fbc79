"""Tests for the home page and the root layout.

Invariants:
    - hero first, then one card per branch in declaration order
    - the layout renders inner content exactly once, after the header
    - document title and description come from SITE_META
"""

import re

from django.template import engines
from django.test import Client, RequestFactory, override_settings

from public.branches import BranchRecord
from public.pages import compose_home


def _titles(html):
    return re.findall(r'class="branch-card__title">(.*?)</h3>', html)


def test_compose_keeps_declaration_order():
    records = [BranchRecord("Zeta", "z"), BranchRecord("Alpha", "a"), BranchRecord("Mid", "m")]
    page = compose_home(records)
    assert [c.name for c in page.cards] == ["Zeta", "Alpha", "Mid"]
    assert len(page.images()) == 4
    assert page.images()[0] is page.hero.image


def test_compose_without_branches_has_only_hero():
    page = compose_home([])
    assert page.cards == []
    assert page.hero.title


def test_home_page_renders():
    resp = Client().get("/")
    assert resp.status_code == 200
    html = resp.content.decode("utf-8")
    assert _titles(html) == ["Parañaque City", "Lucena City"]
    assert html.index('class="hero"') < html.index('class="branches"')
    assert html.count('class="site-header"') == 1


@override_settings(SITE_META={"title": "Team Site", "description": "Two branches, one team."})
def test_document_metadata():
    html = Client().get("/").content.decode("utf-8")
    assert "<title>Team Site</title>" in html
    assert '<meta name="description" content="Two branches, one team.">' in html
    assert '<meta property="og:title" content="Team Site">' in html


def test_nav_targets_without_pages_are_not_routed():
    assert Client().get("/about").status_code == 404


def test_layout_renders_content_exactly_once():
    marker = '<p class="layout-marker">inner content</p>'
    tpl = engines["django"].from_string(
        '{% extends "base.html" %}{% block content %}' + marker + "{% endblock %}"
    )
    html = tpl.render({}, RequestFactory().get("/"))
    assert html.count(marker) == 1
    assert html.index('class="site-header"') < html.index(marker)


def test_layout_with_empty_content():
    tpl = engines["django"].from_string('{% extends "base.html" %}')
    html = tpl.render({}, RequestFactory().get("/"))
    assert html.count('class="site-header"') == 1
    assert '<main class="site-main">' in html
