"""
Page Renderer

Renders the Data Store into the single HTML page of the site. Rendering is
pure: the same SiteDocument always yields the same markup.
"""

from jinja2 import TemplateError

from folio.contexts.data.site_data_structure import SiteDocument
from folio.contexts.rendering.exceptions import SiteRenderError
from folio.contexts.rendering.logger import _log_debug
from folio.contexts.rendering.template_registry import TemplateRegistry

INDEX_TEMPLATE = "index"


def render_page(
    document: SiteDocument,
    registry: TemplateRegistry = None,
    template_name: str = INDEX_TEMPLATE,
) -> str:
    """
    Render a SiteDocument to HTML.

    Args:
        document: Validated Data Store
        registry: Template registry (defaults to the packaged templates)
        template_name: Template to render (default: 'index')

    Returns:
        Complete HTML document

    Raises:
        SiteRenderError: If the template fails to load or render
    """
    registry = registry or TemplateRegistry()
    _log_debug(f"Rendering template '{template_name}' for {document.site.title}")

    try:
        template = registry.get_template(template_name)
        return template.render(**document.to_context())
    except TemplateError as e:
        raise SiteRenderError(
            f"Failed to render '{template_name}'",
            template_path=registry.get_template_path(template_name),
            original_error=e,
        ) from e
