"""Unit tests for build session log sinks."""

import pytest
from loguru import logger

from folio.contexts.building.config import BuildConfig
from folio.contexts.building.logger import setup_building_logger
from folio.utils.logger import provenance_lines, setup_logger


@pytest.fixture(autouse=True)
def reset_sinks():
    yield
    logger.remove()


@pytest.mark.unit
def test_file_sink_records_debug_and_provenance(tmp_path):
    log_file = setup_logger("build", tmp_path / "session", provenance={"Data file": "site.json"})
    logger.debug("rendered 1 page")

    assert log_file == tmp_path / "session" / "build.log"
    text = log_file.read_text(encoding="utf-8")
    assert "Data file: site.json" in text
    assert "rendered 1 page" in text


@pytest.mark.unit
def test_console_level_filters_stdout(tmp_path, capsys):
    setup_logger("build", tmp_path, console_level="warning")
    logger.info("quiet")
    logger.warning("loud")

    out = capsys.readouterr().out
    assert "quiet" not in out
    assert "loud" in out


@pytest.mark.unit
def test_unknown_console_level_rejected(tmp_path):
    with pytest.raises(ValueError):
        setup_logger("build", tmp_path, console_level="chatty")


@pytest.mark.unit
def test_provenance_lines_framed_by_rules():
    lines = provenance_lines({"Output directory": "_site"})

    assert lines[0] == lines[-1] == "=" * 80
    assert "Output directory: _site" in lines
    assert any(line.startswith("Python: ") for line in lines)


@pytest.mark.unit
def test_building_logger_uses_config(tmp_path, capsys):
    config = BuildConfig(root=str(tmp_path), console_level="DEBUG", passthrough=["CNAME"])
    log_file = setup_building_logger(tmp_path / "logs", config)
    logger.debug("detail")

    assert "detail" in capsys.readouterr().out
    text = log_file.read_text(encoding="utf-8")
    assert f"Data file: {tmp_path / '_data' / 'site.json'}" in text
    assert "Passthrough: CNAME" in text
