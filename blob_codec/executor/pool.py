"""Dedicated worker threads for blob encoding and KZG commitment.

Encoding a sidecar is CPU-bound and the commitment step recurses deeper than a
default thread stack allows, so it runs on a small fixed pool of long-lived
threads started with an enlarged stack. Async callers await the job without
blocking their event loop.
"""

from __future__ import annotations

import asyncio
import logging
import queue
import threading
from concurrent.futures import Future
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, ParamSpec, TypeVar

from blob_codec.config import CodecConfig
from blob_codec.errors import BlobError, ThreadPanicked

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger(__name__)

P = ParamSpec("P")
T = TypeVar("T")

# threading.stack_size() is process-wide; hold this while starting workers
_stack_size_lock = threading.Lock()


@dataclass
class _WorkItem:
    future: Future[Any]
    fn: Callable[..., Any]
    args: tuple[Any, ...] = ()
    kwargs: dict[str, Any] = field(default_factory=dict)

    def run(self) -> None:
        # False if the caller cancelled before a worker picked the job up
        if not self.future.set_running_or_notify_cancel():
            return

        try:
            result = self.fn(*self.args, **self.kwargs)
        except BlobError as e:
            self.future.set_exception(e)
        except BaseException as e:
            logger.warning(
                "job %s panicked on %s",
                getattr(self.fn, "__qualname__", repr(self.fn)),
                threading.current_thread().name,
                exc_info=True,
            )
            panic = ThreadPanicked(e)
            panic.__cause__ = e
            self.future.set_exception(panic)
        else:
            self.future.set_result(result)


class BlobWorkerPool:
    """Fixed-size pool of worker threads with a configurable stack size.

    Jobs are served FIFO; when every worker is busy new jobs wait in the queue.
    A job that started always runs to completion, even if its caller stops
    waiting. Errors derived from :class:`BlobError` reach the caller unchanged,
    anything else raised by a job is reported as :class:`ThreadPanicked` and the
    worker moves on to the next job.
    """

    def __init__(self, config: CodecConfig | None = None) -> None:
        self.config = config or CodecConfig()
        self._queue: queue.SimpleQueue[_WorkItem | None] = queue.SimpleQueue()
        self._threads: list[threading.Thread] = []
        self._shutdown = False
        self._shutdown_lock = threading.Lock()
        self._start_workers()

    def _start_workers(self) -> None:
        with _stack_size_lock:
            previous = threading.stack_size(self.config.thread_stack_size)
            try:
                for i in range(self.config.worker_count):
                    thread = threading.Thread(
                        target=self._worker,
                        name=f"{self.config.thread_name_prefix}-{i}",
                        daemon=True,
                    )
                    thread.start()
                    self._threads.append(thread)
            finally:
                threading.stack_size(previous)

        logger.debug(
            "started %d blob workers with %d byte stacks",
            len(self._threads),
            self.config.thread_stack_size,
        )

    def _worker(self) -> None:
        while True:
            item = self._queue.get()
            if item is None:
                return
            item.run()
            del item

    @property
    def worker_count(self) -> int:
        return len(self._threads)

    @property
    def pending(self) -> int:
        """Jobs waiting for a free worker."""
        return self._queue.qsize()

    def submit(self, fn: Callable[P, T], /, *args: P.args, **kwargs: P.kwargs) -> Future[T]:
        with self._shutdown_lock:
            if self._shutdown:
                raise RuntimeError("cannot submit to a pool that has been shut down")
            future: Future[T] = Future()
            self._queue.put(_WorkItem(future, fn, args, kwargs))
        return future

    async def run(self, fn: Callable[P, T], /, *args: P.args, **kwargs: P.kwargs) -> T:
        """Run ``fn`` on a worker and resume the calling task with its result."""
        return await asyncio.wrap_future(self.submit(fn, *args, **kwargs))

    def shutdown(self, wait: bool = True) -> None:
        with self._shutdown_lock:
            if self._shutdown:
                return
            self._shutdown = True
            for _ in self._threads:
                self._queue.put(None)

        if wait:
            for thread in self._threads:
                thread.join()

    def __enter__(self) -> BlobWorkerPool:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.shutdown()


_default_pool: BlobWorkerPool | None = None
_default_pool_lock = threading.Lock()


def get_default_pool() -> BlobWorkerPool:
    """Process-wide pool, created on first use and never shut down."""
    global _default_pool
    with _default_pool_lock:
        if _default_pool is None:
            _default_pool = BlobWorkerPool()
        return _default_pool
