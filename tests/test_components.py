"""Tests for the component renderers and the page shell."""

import re
from html.parser import HTMLParser

import pytest

from figma_export import CATEGORIES
from figma_export.components import (
    RENDERERS,
    render_buttons,
    render_cards,
    render_category,
    render_forms,
    render_navigation,
    render_page,
    render_typography,
)
from figma_export.templates import wrap_page
from figma_export.tokens import apply_overrides


class _TagCounter(HTMLParser):
    def __init__(self):
        super().__init__()
        self.counts = {}
        self.title = ""
        self._in_title = False

    def handle_starttag(self, tag, attrs):
        self.counts[tag] = self.counts.get(tag, 0) + 1
        self._in_title = tag == "title"

    def handle_endtag(self, tag):
        if tag == "title":
            self._in_title = False

    def handle_data(self, data):
        if self._in_title:
            self.title += data


def _parse(page: str) -> _TagCounter:
    parser = _TagCounter()
    parser.feed(page)
    parser.close()
    return parser


# ── Page shell ───────────────────────────────────────────────────────


class TestWrapPage:
    def test_document_structure(self, tokens):
        page = wrap_page("<p>x</p>", "buttons", tokens)
        assert page.startswith("<!DOCTYPE html>")
        assert page.endswith("</html>")
        assert '<html lang="uk">' in page
        assert '<meta charset="UTF-8">' in page
        assert 'name="viewport"' in page

    def test_title_and_heading(self, tokens):
        page = wrap_page("", "forms", tokens)
        assert "<title>forms</title>" in page
        assert ">FORMS - WordPress Components</h1>" in page

    def test_body_uses_tokens(self, tokens):
        page = wrap_page("", "cards", tokens)
        assert f"font-family: {tokens.typography.font_family['base']};" in page
        assert "line-height: 1.5;" in page
        assert "color: #343a40;" in page

    def test_showcase_classes(self, tokens):
        page = wrap_page("", "cards", tokens)
        for cls in ("component-showcase", "component-group", "component-title", "component-items"):
            assert f".{cls}" in page

    def test_fragment_embedded(self, tokens):
        page = wrap_page('<div id="marker"></div>', "cards", tokens)
        assert '<div class="component-showcase">\n    <div id="marker"></div>' in page


# ── Category fragments ───────────────────────────────────────────────


class TestButtons:
    def test_variants(self, tokens):
        html = render_buttons(tokens)
        for label in ("Primary Button", "Large Button", "Small Button",
                      "Secondary", "Success", "Danger", "Warning", "Info",
                      "Primary Outline", "Secondary Outline"):
            assert f">{label}</button>" in html
        assert html.count("<button") == 10

    def test_warning_uses_dark_text(self, tokens):
        html = render_buttons(tokens)
        assert "background-color: #ffc107;\n      color: #343a40;" in html

    def test_outline_buttons_are_transparent(self, tokens):
        html = render_buttons(tokens)
        assert "border: 1px solid #007bff;" in html
        assert html.count("background-color: transparent;") == 2


class TestForms:
    def test_fields(self, tokens):
        html = render_forms(tokens)
        assert 'type="text"' in html
        assert 'type="email"' in html
        assert "<textarea" in html
        assert "resize: vertical;" in html
        assert html.count("<option>") == 3
        assert 'type="checkbox"' in html
        assert html.count('type="radio"') == 2

    def test_radius_from_tokens(self, tokens):
        html = render_forms(tokens)
        assert html.count("border-radius: 0.25rem;") == 4


class TestTypography:
    def test_heading_scale(self, tokens):
        html = render_typography(tokens)
        for level, size in enumerate(("2.5rem", "2rem", "1.75rem", "1.5rem", "1.25rem", "1rem"), 1):
            assert (
                f'<h{level} style="font-size: {size}; font-weight: 700; '
                f'line-height: 1.25;">Heading {level}</h{level}>'
            ) in html

    def test_small_text_is_secondary(self, tokens):
        html = render_typography(tokens)
        assert "font-size: 0.875rem; line-height: 1.5; color: #6c757d;" in html


class TestCards:
    def test_two_cards(self, tokens):
        html = render_cards(tokens)
        assert "Card Title" in html
        assert "Simple Card" in html
        assert html.count(f"box-shadow: {tokens.shadows['sm']};") == 2

    def test_gradient(self, tokens):
        html = render_cards(tokens)
        assert "linear-gradient(135deg, #007bff 0%, #17a2b8 100%)" in html


class TestNavigation:
    def test_navbar(self, tokens):
        html = render_navigation(tokens)
        assert "background: #343a40;" in html
        for label in ("Logo", "Home", "About", "Services", "Contact"):
            assert f">{label}</a>" in html

    def test_breadcrumbs(self, tokens):
        html = render_navigation(tokens)
        assert "background: #f8f9fa;" in html
        assert html.count(">/</span>") == 2
        assert "Current Page</span>" in html


# ── Dispatch and full pages ──────────────────────────────────────────


class TestRenderCategory:
    def test_renderers_cover_categories(self):
        assert tuple(RENDERERS) == CATEGORIES

    def test_unknown_category(self, tokens):
        with pytest.raises(KeyError):
            render_category("tables", tokens)

    def test_overrides_flow_into_markup(self, tokens):
        custom = apply_overrides(tokens, {"colors": {"primary": "#123456"}})
        assert "#123456" in render_category("buttons", custom)
        assert "#007bff" not in render_category("buttons", custom)

    def test_missing_token_fails_loudly(self, tokens):
        broken = type(tokens)(
            colors={k: v for k, v in tokens.colors.items() if k != "dark"},
            typography=tokens.typography,
            spacing=tokens.spacing,
            border_radius=tokens.border_radius,
            shadows=tokens.shadows,
        )
        with pytest.raises(KeyError):
            render_category("navigation", broken)


@pytest.mark.parametrize("category", CATEGORIES)
class TestPages:
    def test_single_root_and_title(self, tokens, category):
        parsed = _parse(render_page(category, tokens))
        assert parsed.counts["html"] == 1
        assert parsed.counts["title"] == 1
        assert parsed.title == category

    def test_no_scripts_or_network_refs(self, tokens, category):
        page = render_page(category, tokens)
        assert "<script" not in page.lower()
        assert not re.search(r"https?://", page)
        assert "<link" not in page

    def test_deterministic(self, tokens, category):
        assert render_page(category, tokens) == render_page(category, tokens)

    def test_literal_values_not_css_vars(self, tokens, category):
        assert "var(--" not in render_page(category, tokens)
