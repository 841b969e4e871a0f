import logging
from dataclasses import fields
from pathlib import Path

import pytest

from mdrepair.config import RepairConfig
from mdrepair.settings import build_config, load_settings, resolve_log_level


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for f in fields(RepairConfig):
        monkeypatch.delenv(f"MDREPAIR_{f.name.upper()}", raising=False)


def write(path, text):
    path.write_text(text, encoding="utf-8")
    return path


def test_local_file_overrides_base(tmp_path):
    base = write(tmp_path / "settings.yaml", "conversion:\n  pattern: '*.md'\n  log_level: INFO\n")
    write(tmp_path / "settings.local.yaml", "conversion:\n  log_level: DEBUG\n")
    settings = load_settings(str(base))
    assert settings["conversion"] == {"pattern": "*.md", "log_level": "DEBUG"}


def test_env_overrides_files(tmp_path, monkeypatch):
    base = write(tmp_path / "settings.yaml", "conversion:\n  parser: ''\n  warn_on_underrun: true\n")
    monkeypatch.setenv("MDREPAIR_PARSER", "markdown:markdown")
    monkeypatch.setenv("MDREPAIR_WARN_ON_UNDERRUN", "no")
    cfg = build_config(load_settings(str(base)))
    assert cfg.parser == "markdown:markdown"
    assert cfg.warn_on_underrun is False


def test_empty_file_gives_defaults(tmp_path):
    base = write(tmp_path / "settings.yaml", "")
    assert build_config(load_settings(str(base))) == RepairConfig()


def test_missing_base_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_settings(str(tmp_path / "nope.yaml"))


def test_unknown_key_rejected():
    with pytest.raises(ValueError, match="bogus"):
        build_config({"conversion": {"bogus": 1}})


def test_shipped_settings_load():
    cfg = build_config(load_settings(str(Path(__file__).resolve().parent.parent / "config" / "settings.yaml")))
    assert cfg.pattern == "**/*.md"
    assert cfg.output_suffix == ".html"


def test_blank_log_level_falls_back_to_info(tmp_path):
    base = write(tmp_path / "settings.yaml", "conversion:\n  log_level:\n")
    cfg = build_config(load_settings(str(base)))
    assert cfg.log_level is None
    assert resolve_log_level(cfg.log_level) == logging.INFO
    assert resolve_log_level("debug") == logging.DEBUG
    assert resolve_log_level("nonsense") == logging.INFO
