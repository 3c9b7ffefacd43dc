"""
Building Context

Responsibilities:
- Loads build configuration (OmegaConf YAML + dotlist overrides)
- Orchestrates load -> validate -> render -> check -> write
- Copies passthrough assets (CMS admin folder, CNAME, profile photo)

Owns: Build configuration, output directory, build logs
Never: Decides page content
"""

from folio.contexts.building.config import BuildConfig, load_build_config
from folio.contexts.building.site_builder import (
    BuildResult,
    BuiltPage,
    build_site,
    render_pages,
)

__all__ = [
    "BuildConfig",
    "BuildResult",
    "BuiltPage",
    "build_site",
    "load_build_config",
    "render_pages",
]
