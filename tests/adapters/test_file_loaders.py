"""Structured configuration files: formats, sections, and failures."""

from __future__ import annotations

from pathlib import Path

import pytest

from lib_pretty_log.adapters.file_loaders import structured
from lib_pretty_log.adapters.file_loaders.structured import (
    JSONFileLoader,
    TOMLFileLoader,
    YAMLFileLoader,
    loader_for,
)
from lib_pretty_log.domain.errors import InvalidFormat, NotFound


def _write(tmp_path: Path, name: str, content: str) -> str:
    target = tmp_path / name
    target.write_text(content, encoding="utf-8")
    return str(target)


def test_toml_section_is_selected(tmp_path: Path) -> None:
    path = _write(
        tmp_path,
        "app.toml",
        '[service]\nport = 8080\n\n[pretty_log]\nlevel = "warn"\nmethod_count = 1\ntag = "SHOP"\n',
    )
    assert TOMLFileLoader().load(path) == {"level": "warn", "method_count": 1, "tag": "SHOP"}


def test_json_without_section_is_used_whole(tmp_path: Path) -> None:
    path = _write(tmp_path, "log.json", '{"show_thread_info": false, "method_count": 0}')
    assert JSONFileLoader().load(path) == {"show_thread_info": False, "method_count": 0}


@pytest.mark.skipif(structured.yaml is None, reason="PyYAML not installed")
def test_yaml_section(tmp_path: Path) -> None:
    path = _write(tmp_path, "log.yaml", "pretty_log:\n  level: error\n  show_thread_info: no\n")
    assert YAMLFileLoader().load(path) == {"level": "error", "show_thread_info": False}


@pytest.mark.skipif(structured.yaml is None, reason="PyYAML not installed")
def test_empty_yaml_means_no_settings(tmp_path: Path) -> None:
    assert YAMLFileLoader().load(_write(tmp_path, "empty.yml", "")) == {}


def test_missing_file_raises_not_found(tmp_path: Path) -> None:
    with pytest.raises(NotFound):
        TOMLFileLoader().load(str(tmp_path / "absent.toml"))


@pytest.mark.parametrize(
    ("name", "content", "loader"),
    [
        ("bad.toml", "level = ", TOMLFileLoader()),
        ("bad.json", "{level", JSONFileLoader()),
        ("list.json", "[1, 2]", JSONFileLoader()),
        ("section.json", '{"pretty_log": 3}', JSONFileLoader()),
    ],
)
def test_malformed_files_raise_invalid_format(tmp_path: Path, name: str, content: str, loader: object) -> None:
    path = _write(tmp_path, name, content)
    with pytest.raises(InvalidFormat):
        loader.load(path)  # type: ignore[attr-defined]


@pytest.mark.skipif(structured.yaml is None, reason="PyYAML not installed")
def test_malformed_yaml_raises_invalid_format(tmp_path: Path) -> None:
    with pytest.raises(InvalidFormat):
        YAMLFileLoader().load(_write(tmp_path, "bad.yaml", "pretty_log: [1, 2\n"))


def test_yaml_without_pyyaml_raises_not_found(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(structured, "yaml", None)
    with pytest.raises(NotFound, match="PyYAML"):
        YAMLFileLoader().load(_write(tmp_path, "log.yaml", "level: info\n"))


@pytest.mark.parametrize(
    ("name", "expected"),
    [("a.toml", TOMLFileLoader), ("a.JSON", JSONFileLoader), ("a.yaml", YAMLFileLoader), ("a.yml", YAMLFileLoader)],
)
def test_loader_for_matches_suffix(name: str, expected: type) -> None:
    assert isinstance(loader_for(name), expected)


@pytest.mark.parametrize("name", ["settings.ini", "settings"])
def test_loader_for_rejects_unknown_suffix(name: str) -> None:
    with pytest.raises(InvalidFormat):
        loader_for(name)
