"""Tests for resume layout and HTML rendering."""

from types import SimpleNamespace

from job_vault.resume.html import render_resume_html
from job_vault.resume.layout import build_layout, split_paragraphs, typography_for


def _resume(**overrides):
    values = dict(
        name="Backend Resume",
        description="Platform work",
        font_family="roboto",
        font_size="lg",
        line_spacing="relaxed",
        margin_size="sm",
    )
    values.update(overrides)
    return SimpleNamespace(**values)


def _section(title, order_index, content="", type="custom"):
    return SimpleNamespace(id=f"id-{title}", type=type, title=title, content=content, order_index=order_index)


def test_typography_maps_each_style_choice():
    typography = typography_for("roboto", "lg", "relaxed", "sm")
    assert typography.font_family.startswith("Roboto")
    assert typography.font_family.endswith("sans-serif")
    assert typography.font_size == "18px"
    assert typography.line_height == "1.625"
    assert typography.padding == "1rem"


def test_typography_defaults_for_unknown_values():
    typography = typography_for("comic-sans", "xl", "double", "huge")
    assert typography.font_family.startswith("Inter")
    assert typography.font_size == "16px"
    assert typography.line_height == "1.5"
    assert typography.padding == "1.5rem"


def test_split_paragraphs():
    assert split_paragraphs("") == []
    assert split_paragraphs(None) == []
    assert split_paragraphs("one\ntwo\r\nthree") == ["one", "two", "three"]


def test_layout_orders_sections_by_order_index():
    sections = [_section("Skills", 2), _section("Summary", 0), _section("Experience", 1)]

    layout = build_layout(_resume(), sections)

    assert [s.title for s in layout.sections] == ["Summary", "Experience", "Skills"]
    assert layout.title == "Backend Resume"
    assert layout.typography.font_size == "18px"


def test_html_renders_sections_in_order():
    sections = [_section("Second", 1, "b"), _section("First", 0, "a")]

    html = render_resume_html(build_layout(_resume(), sections))

    assert html.index("First") < html.index("Second")
    assert "font-size: 18px" in html


def test_html_escapes_user_content():
    sections = [_section("Notes", 0, "<script>alert(1)</script>")]

    html = render_resume_html(build_layout(_resume(name="A & B"), sections))

    assert "<script>alert(1)</script>" not in html
    assert "&lt;script&gt;" in html
    assert "A &amp; B" in html
