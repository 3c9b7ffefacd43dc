"""Shared fixtures: site data documents loaded fresh for every test."""

import json
from pathlib import Path

import pytest

FIXTURES_PATH = Path(__file__).parent / "fixtures"
PROJECT_ROOT = Path(__file__).parent.parent
SITE_DATA_PATH = PROJECT_ROOT / "_data" / "site.json"


@pytest.fixture
def jane_doe_data() -> dict:
    """Minimal valid document: one entry per section."""
    return json.loads((FIXTURES_PATH / "jane_doe.json").read_text(encoding="utf-8"))


@pytest.fixture
def site_data_path() -> Path:
    return SITE_DATA_PATH


@pytest.fixture
def site_data(site_data_path) -> dict:
    """The shipped Data Store (every skill category, external and local links)."""
    return json.loads(site_data_path.read_text(encoding="utf-8"))


@pytest.fixture
def site_project(tmp_path, site_data) -> Path:
    """A project directory laid out like the site root, with a build config."""
    (tmp_path / "_data").mkdir()
    (tmp_path / "_data" / "site.json").write_text(json.dumps(site_data), encoding="utf-8")

    (tmp_path / "admin").mkdir()
    (tmp_path / "admin" / "index.html").write_text("<html></html>", encoding="utf-8")
    (tmp_path / "admin" / "config.yml").write_text("backend:\n  name: github\n", encoding="utf-8")
    (tmp_path / "CNAME").write_text("example.dev\n", encoding="utf-8")
    (tmp_path / "me.jpg").write_bytes(b"\xff\xd8\xff\xe0")

    (tmp_path / "site_config.yaml").write_text(
        "output_dir: _site\n"
        "data_file: _data/site.json\n"
        "passthrough: [admin, CNAME, me.jpg, AGENTS.md]\n"
        "ignores: [AGENTS.md]\n"
        "logs_dir: logs\n",
        encoding="utf-8",
    )
    return tmp_path
