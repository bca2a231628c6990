"""Persistent user settings: default toolchain, host triple and overrides."""

from __future__ import annotations

import copy
import os
import tomllib
from collections.abc import Callable, Iterator, Mapping
from contextlib import contextmanager
from dataclasses import dataclass, field
from pathlib import Path

import tomli_w

from chainup.errors import (
    ExpectedTypeError,
    ParsingSettingsError,
    ReadingFileError,
    ToolchainError,
    UnknownMetadataVersionError,
    WritingFileError,
)
from chainup.notifications import Notification, NotificationKind

SUPPORTED_METADATA_VERSIONS: tuple[str, ...] = ("2", "12")
DEFAULT_METADATA_VERSION = "12"

NotifyHandler = Callable[[Notification], None]


def _take(table: dict, key: str, path: str):
    try:
        return table.pop(key)
    except KeyError:
        raise ToolchainError(f"missing key: '{path}{key}'") from None


def _get_string(table: dict, key: str, path: str) -> str:
    value = _take(table, key, path)
    if not isinstance(value, str):
        raise ExpectedTypeError("string", path + key)
    return value


def _get_opt_string(table: dict, key: str, path: str) -> str | None:
    if key not in table:
        return None
    return _get_string(table, key, path)


def _get_table(table: dict, key: str, path: str) -> dict:
    if key not in table:
        return {}
    value = table.pop(key)
    if not isinstance(value, dict):
        raise ExpectedTypeError("table", path + key)
    return value


def _path_to_key(path: str | os.PathLike) -> str:
    candidate = Path(path)
    if candidate.exists():
        return str(candidate.resolve())
    return os.fspath(path)


@dataclass
class Settings:
    """The contents of the settings file."""

    version: str = DEFAULT_METADATA_VERSION
    default_host_triple: str | None = None
    default_toolchain: str | None = None
    overrides: dict[str, str] = field(default_factory=dict)

    def remove_override(self, path, notify_handler: NotifyHandler) -> bool:
        """Drop the override for ``path``; report whether one existed."""
        return self.overrides.pop(_path_to_key(path), None) is not None

    def add_override(self, path, toolchain: str, notify_handler: NotifyHandler) -> None:
        """Make ``toolchain`` the override for the directory ``path``."""
        key = _path_to_key(path)
        notify_handler(
            Notification(NotificationKind.SET_OVERRIDE_TOOLCHAIN, path, toolchain)
        )
        self.overrides[key] = toolchain

    def dir_override(self, dir, notify_handler: NotifyHandler) -> str | None:
        """The toolchain overriding ``dir``, if any."""
        return self.overrides.get(_path_to_key(dir))

    @classmethod
    def parse(cls, data: str) -> Settings:
        """Parse settings from TOML text."""
        try:
            table = tomllib.loads(data)
        except tomllib.TOMLDecodeError as error:
            raise ParsingSettingsError(error) from error
        return cls.from_toml(table, "")

    def stringify(self) -> str:
        """Render the settings as TOML text."""
        return tomli_w.dumps(self.to_toml())

    @classmethod
    def from_toml(cls, table: Mapping, path: str) -> Settings:
        """Build settings from a parsed TOML table."""
        table = dict(table)
        version = _get_string(table, "version", path)
        if version not in SUPPORTED_METADATA_VERSIONS:
            raise UnknownMetadataVersionError(version)
        default_host_triple = _get_opt_string(table, "default_host_triple", path)
        default_toolchain = _get_opt_string(table, "default_toolchain", path)
        overrides = {
            key: value
            for key, value in _get_table(table, "overrides", path).items()
            if isinstance(value, str)
        }
        return cls(version, default_host_triple, default_toolchain, overrides)

    def to_toml(self) -> dict:
        """Convert the settings to a TOML table with sorted keys."""
        result: dict = {"version": self.version}
        if self.default_host_triple is not None:
            result["default_host_triple"] = self.default_host_triple
        if self.default_toolchain is not None:
            result["default_toolchain"] = self.default_toolchain
        result["overrides"] = dict(sorted(self.overrides.items()))
        return dict(sorted(result.items()))


class SettingsFile:
    """A settings file on disk, loaded lazily and cached."""

    def __init__(self, path: str | os.PathLike):
        self.path = Path(path)
        self._cache: Settings | None = None

    def _write(self) -> None:
        assert self._cache is not None
        try:
            self.path.write_text(self._cache.stringify(), encoding="utf-8")
        except OSError as error:
            raise WritingFileError("settings", self.path) from error

    def _load(self) -> Settings:
        if self._cache is None:
            if self.path.is_file():
                try:
                    content = self.path.read_text(encoding="utf-8")
                except OSError as error:
                    raise ReadingFileError("settings", self.path) from error
                self._cache = Settings.parse(content)
            else:
                self._cache = Settings()
                self._write()
        return self._cache

    def read(self) -> Settings:
        """A copy of the current settings, creating the file if it is missing."""
        return copy.deepcopy(self._load())

    @contextmanager
    def edit(self) -> Iterator[Settings]:
        """Yield the settings for changing; they are saved when the block succeeds."""
        settings = self._load()
        yield settings
        self._write()