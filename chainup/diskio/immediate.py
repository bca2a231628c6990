"""Executor that performs every operation at once in the calling thread.

Useful for diagnosing problems with the threaded executor.
"""

from __future__ import annotations

from collections.abc import Iterator

from chainup.diskio.core import Executor, Item, perform


class ImmediateUnpacker(Executor):
    """Performs each operation as soon as it is dispatched."""

    def dispatch(self, item: Item) -> Iterator[Item]:
        perform(item)
        return iter((item,))

    def join(self) -> Iterator[Item]:
        return iter(())

    def completed(self) -> Iterator[Item]:
        return iter(())