import os
from pathlib import Path

import pytest

from chainup.env_var import append_path, inc, prepend_path

NAME = "CHAINUP_TEST_VARIABLE"


def test_prepend_to_existing(monkeypatch):
    monkeypatch.setenv(NAME, os.pathsep.join(["a", "b"]))
    env = {}
    prepend_path(NAME, [Path("x")], env)
    assert env[NAME].split(os.pathsep) == ["x", "a", "b"]


def test_prepend_when_unset(monkeypatch):
    monkeypatch.delenv(NAME, raising=False)
    env = {}
    prepend_path(NAME, [Path("x"), "y"], env)
    assert env[NAME] == os.pathsep.join(["x", "y"])


def test_append_to_existing(monkeypatch):
    monkeypatch.setenv(NAME, os.pathsep.join(["a", "b"]))
    env = {}
    append_path(NAME, [Path("x")], env)
    assert env[NAME].split(os.pathsep) == ["a", "b", "x"]


def test_append_when_unset(monkeypatch):
    monkeypatch.delenv(NAME, raising=False)
    env = {}
    append_path(NAME, ["x", "y"], env)
    assert env[NAME] == os.pathsep.join(["x", "y"])


def test_empty_value_when_unset(monkeypatch):
    monkeypatch.delenv(NAME, raising=False)
    env = {}
    prepend_path(NAME, [], env)
    assert env == {NAME: ""}


@pytest.mark.parametrize("function", [append_path, prepend_path])
def test_separator_in_value_leaves_env_untouched(monkeypatch, function):
    monkeypatch.delenv(NAME, raising=False)
    env = {}
    function(NAME, ["a" + os.pathsep + "b"], env)
    assert env == {}


def test_process_environment_is_not_changed(monkeypatch):
    monkeypatch.setenv(NAME, "a")
    env = {}
    prepend_path(NAME, ["x"], env)
    inc(NAME, env)
    assert os.environ[NAME] == "a"


@pytest.mark.parametrize("old", ["4", "-3", "+7"])
def test_inc_of_integer(monkeypatch, old):
    monkeypatch.setenv(NAME, old)
    env = {}
    inc(NAME, env)
    assert int(env[NAME]) == int(old) + 1


@pytest.mark.parametrize("old", [None, "junk", " 4", "1.5"])
def test_inc_of_missing_or_invalid(monkeypatch, old):
    if old is None:
        monkeypatch.delenv(NAME, raising=False)
    else:
        monkeypatch.setenv(NAME, old)
    env = {}
    inc(NAME, env)
    assert env[NAME] == "1"