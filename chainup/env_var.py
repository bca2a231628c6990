"""Helpers that adjust the environment given to child processes."""

import os
import re
import sys
from collections.abc import Iterable, MutableMapping

RUST_RECURSION_COUNT_MAX = 5

_INTEGER = re.compile(r"[+-]?[0-9]+")
_I32_MIN, _I32_MAX = -(2**31), 2**31 - 1


def _current_parts(name: str) -> list[str]:
    value = os.environ.get(name)
    return [] if value is None else value.split(os.pathsep)


def _store(name: str, parts: Iterable, env: MutableMapping[str, str]) -> None:
    texts = [os.fspath(part) for part in parts]
    for text in texts:
        if os.pathsep in text or (sys.platform == "win32" and '"' in text):
            return
    env[name] = os.pathsep.join(texts)


def append_path(name: str, value: Iterable, env: MutableMapping[str, str]) -> None:
    """Set ``name`` in ``env`` to the process's value followed by ``value``."""
    _store(name, [*_current_parts(name), *value], env)


def prepend_path(name: str, value: Iterable, env: MutableMapping[str, str]) -> None:
    """Set ``name`` in ``env`` to ``value`` followed by the process's value."""
    _store(name, [*value, *_current_parts(name)], env)


def inc(name: str, env: MutableMapping[str, str]) -> None:
    """Set ``name`` in ``env`` to one more than its integer value in the process."""
    old = 0
    raw = os.environ.get(name)
    if raw is not None and _INTEGER.fullmatch(raw):
        parsed = int(raw)
        if _I32_MIN <= parsed <= _I32_MAX:
            old = parsed
    env[name] = str(old + 1)