"""
Resume layout shared by the on-screen preview and the PDF export.

The four style choices on a resume are small closed enums; each maps to one
concrete CSS value here. Unknown values fall back to the defaults.
"""

from collections.abc import Sequence

from pydantic import BaseModel

from job_vault.resume.ordering import sort_by_order

FONT_FAMILIES = {
    "inter": "Inter, system-ui, -apple-system, 'Segoe UI', sans-serif",
    "roboto": "Roboto, 'Helvetica Neue', Arial, sans-serif",
    "open-sans": "'Open Sans', 'Helvetica Neue', Arial, sans-serif",
    "lato": "Lato, 'Helvetica Neue', Arial, sans-serif",
    "montserrat": "Montserrat, 'Trebuchet MS', Arial, sans-serif",
}
FONT_SIZES = {"sm": "14px", "base": "16px", "lg": "18px"}
LINE_SPACINGS = {"tight": "1.25", "normal": "1.5", "relaxed": "1.625"}
MARGIN_SIZES = {"sm": "1rem", "md": "1.5rem", "lg": "2rem"}

DEFAULT_FONT_FAMILY = "inter"
DEFAULT_FONT_SIZE = "base"
DEFAULT_LINE_SPACING = "normal"
DEFAULT_MARGIN_SIZE = "md"


class Typography(BaseModel):
    font_family: str
    font_size: str
    line_height: str
    padding: str


class SectionLayout(BaseModel):
    id: str | None = None
    type: str
    title: str
    order_index: int
    paragraphs: list[str]


class ResumeLayout(BaseModel):
    title: str
    description: str
    typography: Typography
    sections: list[SectionLayout]


def typography_for(font_family: str, font_size: str, line_spacing: str, margin_size: str) -> Typography:
    return Typography(
        font_family=FONT_FAMILIES.get(font_family, FONT_FAMILIES[DEFAULT_FONT_FAMILY]),
        font_size=FONT_SIZES.get(font_size, FONT_SIZES[DEFAULT_FONT_SIZE]),
        line_height=LINE_SPACINGS.get(line_spacing, LINE_SPACINGS[DEFAULT_LINE_SPACING]),
        padding=MARGIN_SIZES.get(margin_size, MARGIN_SIZES[DEFAULT_MARGIN_SIZE]),
    )


def split_paragraphs(content: str | None) -> list[str]:
    if not content:
        return []
    return content.replace("\r\n", "\n").split("\n")


def build_layout(resume, sections: Sequence) -> ResumeLayout:
    """Map a resume's style fields and its sections to a layout description.

    ``resume`` and each section may be ORM rows or anything exposing the same
    attributes. Sections are always laid out by ``order_index``.
    """
    return ResumeLayout(
        title=resume.name,
        description=resume.description or "",
        typography=typography_for(
            resume.font_family, resume.font_size, resume.line_spacing, resume.margin_size
        ),
        sections=[
            SectionLayout(
                id=getattr(section, "id", None),
                type=section.type,
                title=section.title,
                order_index=section.order_index,
                paragraphs=split_paragraphs(section.content),
            )
            for section in sort_by_order(sections)
        ],
    )
