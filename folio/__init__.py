"""
FOLIO - personal résumé/portfolio site builder

Renders a single JSON document (job history, wins, skills, contact links)
into a static HTML page.

Architecture:
- Data Context: Data Store model, loading and schema validation
- Rendering Context: Jinja2 templates, page rendering, output checks
- Building Context: Build configuration, orchestration, passthrough copy
"""

__version__ = "0.1.0"
