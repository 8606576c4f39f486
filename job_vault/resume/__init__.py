"""
Resume assembly, preview layout and PDF export.

- ordering: drag-and-drop section reordering
- layout: typography mapping and section layout shared by preview and export
- html: Jinja2 rendering of a layout
- export: headless-browser PDF rasterization
- sample: the fixed sample resume
"""

from job_vault.resume.html import render_resume_html
from job_vault.resume.layout import ResumeLayout, build_layout
from job_vault.resume.ordering import move, reorder, sort_by_order

__all__ = ["ResumeLayout", "build_layout", "move", "render_resume_html", "reorder", "sort_by_order"]
