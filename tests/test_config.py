import os
from pathlib import Path

from yocto import config


def test_paths_from_env_defaults():
    assert config.paths_from_env("YOCTO_UNSET_VAR", ["a.yoc"]) == [Path("a.yoc")]


def test_paths_from_env_splits_on_pathsep(monkeypatch):
    monkeypatch.setenv("YOCTO_PRELUDE_PATH", os.pathsep.join(["one.yoc", " ", "two.yoc"]))
    assert config.paths_from_env("YOCTO_PRELUDE_PATH", []) == [Path("one.yoc"), Path("two.yoc")]


def test_prelude_files_skip_missing(tmp_path, monkeypatch):
    present = tmp_path / "present.yoc"
    present.write_text("")
    missing = tmp_path / "missing.yoc"
    monkeypatch.setenv("YOCTO_PRELUDE_PATH", os.pathsep.join([str(present), str(missing)]))
    assert config.get_prelude_files() == [present]


def test_prelude_files_default_empty():
    assert config.get_prelude_files() == []


def test_log_level(monkeypatch):
    assert config.get_log_level() == "WARNING"
    monkeypatch.setenv("YOCTO_LOG_LEVEL", "debug")
    assert config.get_log_level() == "DEBUG"


def test_prompt(monkeypatch):
    assert config.get_prompt() == "> "
    monkeypatch.setenv("YOCTO_PROMPT", "$ ")
    assert config.get_prompt() == "$ "


def test_unknown_log_level_falls_back(monkeypatch):
    monkeypatch.setenv("YOCTO_LOG_LEVEL", "loud")
    assert config.get_log_level() == "WARNING"
    monkeypatch.setenv("YOCTO_LOG_LEVEL", "")
    assert config.get_log_level() == "WARNING"
    monkeypatch.setenv("YOCTO_LOG_LEVEL", " info ")
    assert config.get_log_level() == "INFO"
