"""
Rendering Context

Responsibilities:
- Manages the Jinja2 templates of the site (folio/contexts/rendering/templates/)
- Renders the Data Store into the index page
- Checks the rendered markup against the Data Store

Owns: HTML templates, page rendering, output structure checks
Never: Modifies the Data Store
"""

from folio.contexts.rendering.exceptions import RenderMismatchError, SiteRenderError
from folio.contexts.rendering.output_checks import RenderDiagnostics, check_rendered_page
from folio.contexts.rendering.renderer import render_page
from folio.contexts.rendering.template_registry import TemplateRegistry

__all__ = [
    "RenderDiagnostics",
    "RenderMismatchError",
    "SiteRenderError",
    "TemplateRegistry",
    "check_rendered_page",
    "render_page",
]
