"""Executor that spreads disk operations over a pool of worker threads.

Per-file syscall latency (network filesystems, virus scanners) would make
unpacking tens of thousands of files very slow if done one at a time.
"""

from __future__ import annotations

import os
import queue
import threading
import time
from collections.abc import Callable, Iterator
from enum import Enum, auto

from chainup.diskio.core import Executor, Item, perform

# Queued jobs allowed before dispatching waits for completions; keeps the
# number of open files and buffered data bounded.
_QUEUE_THRESHOLD = 5
_POLL_INTERVAL = 0.1
_WRAPAROUND_LIMIT = 32767
_SENTINEL = object()


class ProgressEvent(Enum):
    """Progress reports sent to the handler while waiting in :meth:`Threaded.join`."""

    DOWNLOAD_FINISHED = auto()
    PUSH_UNITS = auto()
    CONTENT_LENGTH_RECEIVED = auto()
    DATA_RECEIVED = auto()
    POP_UNITS = auto()


ProgressHandler = Callable[[ProgressEvent, object], None]


class Threaded(Executor):
    """Runs operations on ``thread_count`` worker threads (default: CPU count)."""

    def __init__(
        self,
        notify_handler: ProgressHandler | None = None,
        thread_count: int | None = None,
    ):
        if thread_count is None:
            thread_count = os.cpu_count() or 1
        if thread_count < 1:
            raise ValueError("thread count must be at least 1")
        self.thread_count = thread_count
        self._notify = notify_handler
        self._jobs: queue.Queue = queue.Queue()
        self._results: queue.Queue = queue.Queue()
        self._pending = 0
        self._lock = threading.Lock()
        self._closed = False
        self._workers = [
            threading.Thread(target=self._work, name="CloseHandle", daemon=True)
            for _ in range(thread_count)
        ]
        for worker in self._workers:
            worker.start()

    def __enter__(self) -> Threaded:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _work(self) -> None:
        while True:
            item = self._jobs.get()
            try:
                if item is None:
                    return
                perform(item)
                with self._lock:
                    self._pending -= 1
                self._results.put(item)
            finally:
                self._jobs.task_done()

    def _pending_count(self) -> int:
        with self._lock:
            return self._pending

    def _submit(self, item: Item) -> None:
        with self._lock:
            self._pending += 1
        self._jobs.put(item)

    def _report(self, event: ProgressEvent, value=None) -> None:
        if self._notify is not None:
            self._notify(event, value)

    def _submit_when_ready(self, item: Item) -> Iterator[Item]:
        while self._jobs.qsize() >= _QUEUE_THRESHOLD:
            task = self._results.get()
            if task is _SENTINEL:
                continue
            yield task
        self._submit(item)

    def dispatch(self, item: Item) -> Iterator[Item]:
        """Yield completed items until there is room, then submit ``item``."""
        return self._submit_when_ready(item)

    def _until_sentinel(self) -> Iterator[Item]:
        while True:
            task = self._results.get()
            if task is _SENTINEL:
                return
            yield task

    def join(self) -> Iterator[Item]:
        """Wait for every submitted operation, then iterate over the remaining results."""
        previous = self._pending_count()
        self._report(ProgressEvent.DOWNLOAD_FINISHED)
        self._report(ProgressEvent.PUSH_UNITS, "iops")
        self._report(ProgressEvent.CONTENT_LENGTH_RECEIVED, previous)
        if previous > 50:
            print(f"{previous} deferred IO operations")
        if previous >= _WRAPAROUND_LIMIT:
            raise RuntimeError(f"implausible number of pending operations: {previous}")
        buffer = bytes(previous)
        current = previous
        while current != 0:
            time.sleep(_POLL_INTERVAL)
            previous, current = current, self._pending_count()
            self._report(ProgressEvent.DATA_RECEIVED, buffer[: previous - current])
        self._jobs.join()
        self._report(ProgressEvent.DOWNLOAD_FINISHED)
        self._report(ProgressEvent.POP_UNITS)
        self._results.put(_SENTINEL)
        return self._until_sentinel()

    def _ready(self) -> Iterator[Item]:
        while True:
            try:
                task = self._results.get_nowait()
            except queue.Empty:
                return
            if task is not _SENTINEL:
                yield task

    def completed(self) -> Iterator[Item]:
        """Iterate over results that are ready, without waiting."""
        return self._ready()

    def close(self) -> None:
        """Finish pending work, discard its results and stop the workers."""
        if self._closed:
            return
        for _ in self.join():
            pass
        self._closed = True
        for _ in self._workers:
            self._jobs.put(None)
        for worker in self._workers:
            worker.join()