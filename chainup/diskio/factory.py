"""Choosing the disk IO executor."""

from __future__ import annotations

import os
import re

from chainup.diskio.core import Executor
from chainup.diskio.immediate import ImmediateUnpacker
from chainup.diskio.threaded import ProgressHandler, Threaded

_THREAD_COUNT = re.compile(r"\+?[0-9]+")


def get_executor(notify_handler: ProgressHandler | None = None) -> Executor:
    """Return the executor selected by ``RUSTUP_IO_THREADS``.

    ``disabled`` selects the in-thread executor, a number sets the size of
    the thread pool, and anything else uses the default pool.
    """
    setting = os.environ.get("RUSTUP_IO_THREADS")
    if setting == "disabled":
        return ImmediateUnpacker()
    if setting is not None and _THREAD_COUNT.fullmatch(setting):
        return Threaded(notify_handler, int(setting))
    return Threaded(notify_handler)