"""Unit tests for build configuration loading."""

from pathlib import Path

import pytest
from omegaconf.errors import ConfigKeyError

from folio.contexts.building.config import BuildConfig, load_build_config


@pytest.fixture
def config_file(tmp_path) -> Path:
    path = tmp_path / "site_config.yaml"
    path.write_text("output_dir: public\n", encoding="utf-8")
    return path


@pytest.mark.unit
def test_defaults_match_site_layout():
    config = BuildConfig()
    assert config.input_dir == "."
    assert config.output_dir == "_site"
    assert config.data_file == "_data/site.json"
    assert config.passthrough == ["admin", "CNAME", "me.jpg"]
    assert config.ignores == ["AGENTS.md"]


@pytest.mark.unit
def test_load_merges_file_over_defaults(config_file, tmp_path):
    config = load_build_config(config_file)

    assert config.output_dir == "public"
    assert config.data_file == "_data/site.json"
    assert Path(config.root) == tmp_path.resolve()


@pytest.mark.unit
def test_paths_resolve_against_config_directory(config_file, tmp_path):
    config = load_build_config(config_file)

    assert config.output_path == tmp_path.resolve() / "public"
    assert config.data_path == tmp_path.resolve() / "_data" / "site.json"
    assert config.input_path == tmp_path.resolve() / "."


@pytest.mark.unit
def test_absolute_paths_kept(config_file, tmp_path):
    target = tmp_path / "elsewhere"
    config = load_build_config(config_file, [f"output_dir={target}"])
    assert config.output_path == target


@pytest.mark.unit
def test_dotlist_overrides(config_file):
    config = load_build_config(config_file, ["output_dir=dist", "passthrough=[admin]"])
    assert config.output_dir == "dist"
    assert config.passthrough == ["admin"]


@pytest.mark.unit
def test_unknown_key_rejected(tmp_path):
    path = tmp_path / "site_config.yaml"
    path.write_text("outptu_dir: typo\n", encoding="utf-8")

    with pytest.raises(ConfigKeyError):
        load_build_config(path)


@pytest.mark.unit
def test_explicit_missing_config_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_build_config(tmp_path / "nope.yaml")


@pytest.mark.unit
@pytest.mark.parametrize(
    "entry, ignored",
    [("AGENTS.md", True), ("admin", False), ("CNAME", False)],
)
def test_is_ignored(entry, ignored):
    assert BuildConfig().is_ignored(entry) is ignored


@pytest.mark.unit
def test_ignore_patterns_are_globs():
    config = BuildConfig(ignores=["*.md"])
    assert config.is_ignored("README.md")
    assert not config.is_ignored("me.jpg")


@pytest.mark.unit
def test_console_level_from_file_and_override(tmp_path):
    path = tmp_path / "site_config.yaml"
    path.write_text("console_level: WARNING\n", encoding="utf-8")

    assert BuildConfig().console_level == "INFO"
    assert load_build_config(path).console_level == "WARNING"
    assert load_build_config(path, ["console_level=DEBUG"]).console_level == "DEBUG"
