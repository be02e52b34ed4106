"""Structured configuration file loaders.

Purpose
-------
Read printer settings from a TOML, JSON, or YAML file so applications can
keep logging configuration next to the rest of their settings. Adapters are
small wrappers around ``tomllib``/``json``/``yaml.safe_load`` so error
handling and observability live in one place.

Contents
--------
* :data:`SECTION` – table/key holding printer settings inside a larger file.
* :class:`BaseFileLoader` – shared helpers for reading files and validating
  mapping outputs.
* :class:`TOMLFileLoader` / :class:`JSONFileLoader` / :class:`YAMLFileLoader`.
* :func:`loader_for` – picks a loader from the file suffix.

System Role
-----------
Invoked by :func:`lib_pretty_log.core.configure` before environment
variables are applied.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Final, Mapping

try:  # Python >= 3.11
    import tomllib
except ModuleNotFoundError:  # pragma: no cover - fallback for <3.11
    import tomli as tomllib  # type: ignore[assignment]

from ...domain.errors import InvalidFormat, NotFound
from ...observability import log_debug, log_error

try:
    import yaml  # type: ignore[import-not-found]
except ModuleNotFoundError:  # pragma: no cover - optional dependency
    yaml = None  # type: ignore[assignment]

SECTION: Final[str] = "pretty_log"


class BaseFileLoader:
    """Common utilities shared by the structured file loaders."""

    def load(self, path: str) -> Mapping[str, object]:
        """Return the printer settings found in *path*."""

        raise NotImplementedError

    def _read(self, path: str) -> bytes:
        """Read *path* as bytes, raising :class:`NotFound` when the file is missing."""

        file_path = Path(path)
        if not file_path.is_file():
            raise NotFound(f"Configuration file not found: {path}")
        payload = file_path.read_bytes()
        log_debug("config_file_read", kind="file", path=path, size=len(payload))
        return payload

    @staticmethod
    def _settings_section(data: object, *, path: str) -> Mapping[str, object]:
        """Return the ``pretty_log`` section of *data*, or *data* itself.

        Examples
        --------
        >>> BaseFileLoader._settings_section({"pretty_log": {"level": "info"}}, path="demo")
        {'level': 'info'}
        >>> BaseFileLoader._settings_section({"method_count": 1}, path="demo")
        {'method_count': 1}
        >>> BaseFileLoader._settings_section(42, path="demo")
        Traceback (most recent call last):
        ...
        lib_pretty_log.domain.errors.InvalidFormat: File demo did not produce a mapping
        """

        if not isinstance(data, Mapping):
            raise InvalidFormat(f"File {path} did not produce a mapping")
        section = data.get(SECTION, data)
        if not isinstance(section, Mapping):
            raise InvalidFormat(f"Section {SECTION!r} in {path} is not a mapping")
        return section


class TOMLFileLoader(BaseFileLoader):
    """Load TOML documents using the standard library parser."""

    def load(self, path: str) -> Mapping[str, object]:
        try:
            text = self._read(path).decode("utf-8")
            data = tomllib.loads(text)
        except (tomllib.TOMLDecodeError, UnicodeDecodeError) as exc:  # type: ignore[attr-defined]
            log_error("config_file_invalid", kind="file", path=path, format="toml", error=str(exc))
            raise InvalidFormat(f"Invalid TOML in {path}: {exc}") from exc
        result = self._settings_section(data, path=path)
        log_debug("config_file_loaded", kind="file", path=path, format="toml")
        return result


class JSONFileLoader(BaseFileLoader):
    """Load JSON documents."""

    def load(self, path: str) -> Mapping[str, object]:
        try:
            data = json.loads(self._read(path))
        except json.JSONDecodeError as exc:
            log_error("config_file_invalid", kind="file", path=path, format="json", error=str(exc))
            raise InvalidFormat(f"Invalid JSON in {path}: {exc}") from exc
        result = self._settings_section(data, path=path)
        log_debug("config_file_loaded", kind="file", path=path, format="json")
        return result


class YAMLFileLoader(BaseFileLoader):
    """Load YAML documents when PyYAML is available.

    Raises
    ------
    NotFound
        When PyYAML is not installed.
    """

    def load(self, path: str) -> Mapping[str, object]:
        if yaml is None:
            raise NotFound("PyYAML is required for YAML configuration support")
        try:
            data = yaml.safe_load(self._read(path))  # type: ignore[operator]
        except yaml.YAMLError as exc:  # type: ignore[attr-defined]
            log_error("config_file_invalid", kind="file", path=path, format="yaml", error=str(exc))
            raise InvalidFormat(f"Invalid YAML in {path}: {exc}") from exc
        if data is None:
            data = {}
        result = self._settings_section(data, path=path)
        log_debug("config_file_loaded", kind="file", path=path, format="yaml")
        return result


_LOADERS: Final[Mapping[str, BaseFileLoader]] = {
    ".toml": TOMLFileLoader(),
    ".json": JSONFileLoader(),
    ".yaml": YAMLFileLoader(),
    ".yml": YAMLFileLoader(),
}


def loader_for(path: str) -> BaseFileLoader:
    """Return the loader matching the suffix of *path*.

    Raises
    ------
    InvalidFormat
        For suffixes other than ``.toml``, ``.json``, ``.yaml`` and ``.yml``.
    """

    suffix = Path(path).suffix.lower()
    try:
        return _LOADERS[suffix]
    except KeyError:
        raise InvalidFormat(f"Unsupported configuration format {suffix!r} for {path}") from None
