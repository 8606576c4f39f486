"""Render a resume layout to a self-contained HTML document."""

from jinja2 import Environment, select_autoescape

from job_vault.resume.layout import ResumeLayout

# Typography values come from fixed maps in layout.py, so they are marked safe
# inside <style>; all resume text is autoescaped.
RESUME_TEMPLATE = """<!DOCTYPE html>
<html>
  <head>
    <meta charset="utf-8">
    <title>{{ layout.title }}</title>
    <style>
      body {
        font-family: {{ layout.typography.font_family|safe }};
        font-size: {{ layout.typography.font_size|safe }};
        line-height: {{ layout.typography.line_height|safe }};
        margin: 0;
        padding: {{ layout.typography.padding|safe }};
        color: #1a1a1a;
      }
      h1 {
        font-size: 2em;
        font-weight: bold;
        text-align: center;
        margin-bottom: 0.5em;
      }
      .description {
        text-align: center;
        color: #666;
        margin-bottom: 2em;
      }
      .section {
        margin-bottom: 1.5em;
      }
      .section h2 {
        font-size: 1.5em;
        font-weight: 600;
        border-bottom: 1px solid #ddd;
        padding-bottom: 0.25em;
        margin-bottom: 0.75em;
      }
      p {
        margin: 0 0 0.5em 0;
      }
    </style>
  </head>
  <body>
    <h1>{{ layout.title }}</h1>
    {% if layout.description %}<p class="description">{{ layout.description }}</p>{% endif %}
    {% for section in layout.sections %}
    <div class="section" data-section-type="{{ section.type }}">
      <h2>{{ section.title }}</h2>
      {% for paragraph in section.paragraphs %}<p>{{ paragraph }}</p>{% endfor %}
    </div>
    {% endfor %}
  </body>
</html>
"""

_env = Environment(autoescape=select_autoescape(["html", "xml"]))
_template = _env.from_string(RESUME_TEMPLATE)


def render_resume_html(layout: ResumeLayout) -> str:
    """Render the layout; the document references no external resources."""
    return _template.render(layout=layout)
