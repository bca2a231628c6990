import pytest

from chainup.diskio.core import Item
from chainup.diskio.factory import get_executor
from chainup.diskio.immediate import ImmediateUnpacker
from chainup.diskio.threaded import Threaded


def test_disabled_selects_immediate(monkeypatch, tmp_path):
    monkeypatch.setenv("RUSTUP_IO_THREADS", "disabled")
    executor = get_executor(None)
    assert isinstance(executor, ImmediateUnpacker)
    item = Item.make_dir(tmp_path / "d", 0o755)
    assert list(executor.execute(item)) == [item]


def test_number_sets_thread_count(monkeypatch):
    monkeypatch.setenv("RUSTUP_IO_THREADS", "3")
    executor = get_executor(None)
    try:
        assert isinstance(executor, Threaded)
        assert executor.thread_count == 3
    finally:
        executor.close()


def test_garbage_falls_back_to_default_pool(monkeypatch):
    monkeypatch.setenv("RUSTUP_IO_THREADS", "lots")
    executor = get_executor(None)
    try:
        assert isinstance(executor, Threaded)
        assert executor.thread_count >= 1
    finally:
        executor.close()


def test_unset_uses_threaded(monkeypatch, tmp_path):
    monkeypatch.delenv("RUSTUP_IO_THREADS", raising=False)
    events = []
    executor = get_executor(lambda event, value: events.append(event))
    try:
        assert isinstance(executor, Threaded)
        list(executor.execute(Item.make_dir(tmp_path / "x", 0o755)))
        list(executor.join())
        assert len(events) >= 5
    finally:
        executor.close()
    assert (tmp_path / "x").is_dir()


def test_zero_threads_is_an_error(monkeypatch):
    monkeypatch.setenv("RUSTUP_IO_THREADS", "0")
    with pytest.raises(ValueError):
        get_executor(None)