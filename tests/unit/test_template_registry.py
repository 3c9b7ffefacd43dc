"""Unit tests for TemplateRegistry class."""

from pathlib import Path

import pytest
from jinja2 import TemplateNotFound, UndefinedError

from folio.contexts.data import SiteDocument
from folio.contexts.rendering.template_registry import TemplateRegistry


@pytest.mark.unit
def test_template_registry_init():
    """Test TemplateRegistry initialization."""
    registry = TemplateRegistry()
    assert registry.templates_path.exists()
    assert registry._cache == {}


@pytest.mark.unit
def test_get_template_index():
    """Test loading the index template."""
    registry = TemplateRegistry()
    template = registry.get_template("index")

    assert template is not None
    assert "index" in registry._cache


@pytest.mark.unit
def test_template_caching():
    """Test that templates are cached after first load."""
    registry = TemplateRegistry()

    template1 = registry.get_template("index")
    assert registry.is_cached("index")

    # Second load should return same object from cache
    template2 = registry.get_template("index")
    assert template1 is template2


@pytest.mark.unit
def test_get_template_not_found():
    """Test error handling for missing template."""
    registry = TemplateRegistry()

    with pytest.raises(TemplateNotFound) as exc_info:
        registry.get_template("nonexistent")
    assert "nonexistent.html.jinja" in str(exc_info.value)


@pytest.mark.unit
def test_get_template_path():
    """Test getting template file path."""
    registry = TemplateRegistry()
    path = registry.get_template_path("index")

    assert isinstance(path, Path)
    assert path.name == "index.html.jinja"
    assert path.exists()


@pytest.mark.unit
def test_clear_cache():
    """Test cache clearing."""
    registry = TemplateRegistry()

    registry.get_template("index")
    assert len(registry._cache) == 1

    registry.clear_cache()
    assert len(registry._cache) == 0


@pytest.mark.unit
def test_custom_templates_path(tmp_path):
    (tmp_path / "plain.html.jinja").write_text("<p>{{ site.title }}</p>", encoding="utf-8")
    registry = TemplateRegistry(templates_path=tmp_path)

    assert registry.get_template("plain").render(site={"title": "Hi"}) == "<p>Hi</p>"


@pytest.mark.unit
def test_autoescape(jane_doe_data):
    """Data is escaped, so markup in the Data Store cannot inject HTML."""
    jane_doe_data["jobs"][0]["company"] = "<script>alert(1)</script>"
    document = SiteDocument.from_dict(jane_doe_data)

    html = TemplateRegistry().get_template("index").render(**document.to_context())

    assert "<script>alert(1)</script>" not in html
    assert "&lt;script&gt;" in html


@pytest.mark.unit
def test_strict_undefined():
    """A variable missing from the template scope is an error, not an empty string."""
    template = TemplateRegistry().get_template("index")
    with pytest.raises(UndefinedError):
        template.render()
