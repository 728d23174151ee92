"""Pure rendering functions: query results -> strings.

All renderers follow the same pattern:
  - Input: ``QueryResult`` objects from ``analysis.queries``
  - Output: str (plain text lines or an HTML fragment)
  - No side effects, no I/O

Used by cli.py, which decides where the output goes.

Public API:
  - text: render_lines
  - report: build_report_html

Adding a renderer
-----------------
1. Create ``renderers/{name}.py`` with a build function::

       from hourly_weather.renderers import render_template

       def build_mywidget_html(result: QueryResult) -> str:
           rows = [...]
           return render_template("mywidget.html.j2", rows=rows)

2. Create a Jinja2 template in ``templates/{name}.html.j2``.
   Templates produce HTML fragments (no <html>/<body> tags).

3. Add tests: call your build function with sample results and assert
   the returned HTML contains expected content.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import jinja2

# Shared Jinja2 environment for all renderers
_TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"
_jinja_env = jinja2.Environment(
    loader=jinja2.FileSystemLoader(str(_TEMPLATE_DIR)),
    autoescape=True,
    trim_blocks=True,
    lstrip_blocks=True,
)


def render_template(template_name: str, **kwargs: Any) -> str:
    """Render a Jinja2 template by name."""
    return _jinja_env.get_template(template_name).render(**kwargs)
