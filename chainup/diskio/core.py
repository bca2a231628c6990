"""Disk operations performed while unpacking, and the executor interface."""

from __future__ import annotations

import os
import time
from abc import ABC, abstractmethod
from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum, auto
from pathlib import Path

_DEFAULT_FILE_MODE = 0o666


class Kind(Enum):
    """What an item does on disk."""

    DIRECTORY = auto()
    FILE = auto()


@dataclass
class Item:
    """One disk operation together with its timing and outcome."""

    full_path: Path
    kind: Kind
    mode: int
    content: bytes | None = None
    start: float = 0.0
    finish: float = 0.0
    size: int | None = None
    error: OSError | None = None

    @classmethod
    def make_dir(cls, full_path: str | os.PathLike, mode: int) -> Item:
        """An operation that creates the directory ``full_path``."""
        return cls(Path(full_path), Kind.DIRECTORY, mode)

    @classmethod
    def write_file(
        cls, full_path: str | os.PathLike, content: bytes, mode: int
    ) -> Item:
        """An operation that writes ``content`` to ``full_path``."""
        data = bytes(content)
        return cls(Path(full_path), Kind.FILE, mode, content=data, size=len(data))

    @property
    def ok(self) -> bool:
        """Whether the operation completed without error."""
        return self.error is None


class Executor(ABC):
    """Carries out disk operations, possibly in the background."""

    def execute(self, item: Item) -> Iterator[Item]:
        """Start ``item``.

        Previously queued items may have to complete before this one is
        accepted, so the returned iterator must be consumed.
        """
        item.start = time.perf_counter()
        return self.dispatch(item)

    @abstractmethod
    def dispatch(self, item: Item) -> Iterator[Item]:
        """Hand ``item`` over for execution; called by :meth:`execute`."""

    @abstractmethod
    def join(self) -> Iterator[Item]:
        """Finish all pending operations and iterate over them."""

    @abstractmethod
    def completed(self) -> Iterator[Item]:
        """Iterate over operations that have already completed."""


def perform(item: Item) -> None:
    """Carry out ``item`` in the calling thread, recording the outcome on it."""
    try:
        if item.kind is Kind.DIRECTORY:
            create_dir(item.full_path)
        else:
            write_file(item.full_path, item.content or b"", item.mode)
    except OSError as error:
        item.error = error
    else:
        item.error = None
    item.finish = time.perf_counter()


def write_file(path: str | os.PathLike, contents: bytes, mode: int) -> None:
    """Create or truncate ``path`` and write ``contents`` to it."""
    permissions = mode if os.name == "posix" else _DEFAULT_FILE_MODE
    flags = os.O_WRONLY | os.O_CREAT | os.O_TRUNC | getattr(os, "O_BINARY", 0)
    fd = os.open(path, flags, permissions)
    with os.fdopen(fd, "wb") as handle:
        handle.write(contents)


def create_dir(path: str | os.PathLike) -> None:
    """Create the single directory ``path``; its parent must exist."""
    os.mkdir(path)