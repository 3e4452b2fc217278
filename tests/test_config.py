# tests/test_config.py

from __future__ import annotations

import pytest

from gedcom_core.config import CONFIG_PATH, config_path, load_config
from gedcom_core.logging import get_logger, list_active_loggers


def test_project_config_exists() -> None:
    assert CONFIG_PATH.is_file()
    cfg = load_config(CONFIG_PATH)
    assert cfg.parser["skip_bad_lines"] is False
    assert cfg.logging["file"] == "gedcom_core.log"


def test_load_config_from_custom_file(tmp_path) -> None:
    path = tmp_path / "custom.yml"
    path.write_text("debug: true\nparser:\n  unresolved_fatal: true\n", encoding="utf-8")

    cfg = load_config(path)
    assert cfg.debug is True
    assert cfg.parser == {"unresolved_fatal": True}
    assert cfg.logging == {}


def test_missing_config_raises(tmp_path) -> None:
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "absent.yml")


def test_config_path_env_override(tmp_path, monkeypatch) -> None:
    target = tmp_path / "env.yml"
    monkeypatch.setenv("GEDCOM_CORE_CONFIG", str(target))
    assert config_path() == target

    monkeypatch.delenv("GEDCOM_CORE_CONFIG")
    assert config_path() == CONFIG_PATH


def test_module_loggers_live_under_base_logger() -> None:
    log = get_logger("tokenizer")
    assert log.name == "gedcom_core.tokenizer"
    assert "gedcom_core.tokenizer" in list_active_loggers()
