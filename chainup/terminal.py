"""Terminal output that degrades quietly on dumb terminals and non-ttys."""

from __future__ import annotations

import functools
import os
import sys
from contextlib import suppress
from dataclasses import dataclass
from enum import Enum, IntEnum, auto
from typing import TextIO


class Color(IntEnum):
    BLACK = 0
    RED = 1
    GREEN = 2
    YELLOW = 3
    BLUE = 4
    MAGENTA = 5
    CYAN = 6
    WHITE = 7
    BRIGHT_BLACK = 8
    BRIGHT_RED = 9
    BRIGHT_GREEN = 10
    BRIGHT_YELLOW = 11
    BRIGHT_BLUE = 12
    BRIGHT_MAGENTA = 13
    BRIGHT_CYAN = 14
    BRIGHT_WHITE = 15


class Attr(Enum):
    BOLD = auto()
    DIM = auto()
    ITALIC = auto()
    UNDERLINE = auto()
    BLINK = auto()
    STANDOUT = auto()
    REVERSE = auto()
    SECURE = auto()


_ATTR_CODES = {
    Attr.BOLD: "\x1b[1m",
    Attr.DIM: "\x1b[2m",
    Attr.ITALIC: "\x1b[3m",
    Attr.UNDERLINE: "\x1b[4m",
    Attr.BLINK: "\x1b[5m",
    Attr.STANDOUT: "\x1b[7m",
    Attr.REVERSE: "\x1b[7m",
    Attr.SECURE: "\x1b[8m",
}


class _Unsupported(Exception):
    pass


class _NotSupported(_Unsupported):
    pass


class _ColorOutOfRange(_Unsupported):
    pass


@dataclass(frozen=True)
class _Capabilities:
    colors: int = 0
    attrs: frozenset = frozenset()
    reset: str | None = None
    cursor_up: str | None = None
    delete_line: str | None = None
    carriage_return: str | None = None


def _capabilities_for(term_name: str | None) -> _Capabilities:
    if not term_name:
        return _Capabilities()
    if term_name == "dumb":
        return _Capabilities(carriage_return="\r")
    colors = 256 if "256color" in term_name else 8
    return _Capabilities(
        colors=colors,
        attrs=frozenset(Attr),
        reset="\x1b[0m",
        cursor_up="\x1b[A",
        delete_line="\x1b[K",
        carriage_return="\r",
    )


@functools.cache
def _env_capabilities() -> _Capabilities:
    return _capabilities_for(os.environ.get("TERM"))


class _Terminal:
    """Raw terminal driver; raises when a capability is missing."""

    def __init__(self, stream: TextIO, caps: _Capabilities):
        self.stream = stream
        self.caps = caps

    def _emit(self, sequence: str | None) -> None:
        if sequence is None:
            raise _NotSupported
        self.stream.write(sequence)

    def _fit(self, color: int) -> int:
        value = int(color)
        if value >= self.caps.colors and 8 <= value < 16:
            value -= 8
        if value >= self.caps.colors:
            raise _ColorOutOfRange
        return value

    @staticmethod
    def _color_code(value: int, normal: int, bright: int, extended: int) -> str:
        if value < 8:
            return f"\x1b[{normal}{value}m"
        if value < 16:
            return f"\x1b[{bright}{value - 8}m"
        return f"\x1b[{extended};5;{value}m"

    def fg(self, color: int) -> None:
        self._emit(self._color_code(self._fit(color), 3, 9, 38))

    def bg(self, color: int) -> None:
        self._emit(self._color_code(self._fit(color), 4, 10, 48))

    def attr(self, attr: Attr) -> None:
        self._emit(_ATTR_CODES[attr] if attr in self.caps.attrs else None)

    def supports_attr(self, attr: Attr) -> bool:
        return attr in self.caps.attrs

    def reset(self) -> None:
        self._emit(self.caps.reset)

    def supports_reset(self) -> bool:
        return self.caps.reset is not None

    def supports_color(self) -> bool:
        return self.caps.colors > 0 and self.supports_reset()

    def cursor_up(self) -> None:
        self._emit(self.caps.cursor_up)

    def delete_line(self) -> None:
        self._emit(self.caps.delete_line)

    def carriage_return(self) -> None:
        self._emit(self.caps.carriage_return)


class AutomationFriendlyTerminal:
    """Skips terminal control on non-ttys and ignores unsupported features.

    ``term_name`` selects the terminal type; by default it comes from ``TERM``.
    """

    def __init__(self, stream: TextIO, term_name: str | None = None):
        caps = _env_capabilities() if term_name is None else _capabilities_for(term_name)
        self.stream = stream
        self._term = _Terminal(stream, caps)

    def _isatty(self) -> bool:
        try:
            return bool(self.stream.isatty())
        except (AttributeError, ValueError):
            return False

    def fg(self, color: int) -> None:
        if self._isatty():
            with suppress(_Unsupported):
                self._term.fg(color)

    def bg(self, color: int) -> None:
        if self._isatty():
            with suppress(_Unsupported):
                self._term.bg(color)

    def attr(self, attr: Attr) -> None:
        if not self._isatty():
            return
        try:
            self._term.attr(attr)
        except Exception as error:
            if attr is not Attr.BOLD:
                if isinstance(error, _Unsupported):
                    return
                raise
            with suppress(_Unsupported):
                self._term.fg(Color.BRIGHT_WHITE)

    def supports_attr(self, attr: Attr) -> bool:
        return self._term.supports_attr(attr)

    def reset(self) -> None:
        if self._isatty():
            with suppress(_Unsupported):
                self._term.reset()

    def supports_reset(self) -> bool:
        return self._term.supports_reset()

    def supports_color(self) -> bool:
        return self._term.supports_color()

    def cursor_up(self) -> None:
        if self._isatty():
            with suppress(_Unsupported):
                self._term.cursor_up()

    def delete_line(self) -> None:
        with suppress(_Unsupported):
            self._term.delete_line()

    def carriage_return(self) -> None:
        with suppress(_Unsupported):
            self._term.carriage_return()

    def write(self, data: str) -> int:
        return self.stream.write(data)

    def flush(self) -> None:
        self.stream.flush()


def stdout() -> AutomationFriendlyTerminal:
    """A terminal writing to standard output."""
    return AutomationFriendlyTerminal(sys.stdout)


def stderr() -> AutomationFriendlyTerminal:
    """A terminal writing to standard error."""
    return AutomationFriendlyTerminal(sys.stderr)