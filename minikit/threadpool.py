"""A blocking task queue and a fixed-size pool of worker threads."""

from __future__ import annotations

import logging
import queue
import threading
from collections.abc import Callable
from types import TracebackType

log = logging.getLogger(__name__)

Task = Callable[[], object]


class TaskQueue:
    """Thread-safe FIFO of tasks; ``poll`` blocks until one is available."""

    def __init__(self) -> None:
        self._tasks: queue.SimpleQueue[Task] = queue.SimpleQueue()

    def push(self, task: Task) -> None:
        """Add a task and wake one waiting consumer."""
        self._tasks.put(task)

    def poll(self) -> Task:
        """Remove and return the oldest task, waiting if the queue is empty."""
        return self._tasks.get()

    def __len__(self) -> int:
        return self._tasks.qsize()


def _stop() -> None:
    """Marker task that tells a worker to exit."""


class ThreadPool:
    """Runs submitted tasks on a fixed number of worker threads."""

    def __init__(self, thread_count: int) -> None:
        if thread_count < 1:
            raise ValueError("thread_count must be at least 1")
        self._queue = TaskQueue()
        self._stopped = False
        self._lock = threading.Lock()
        self._workers = [
            threading.Thread(target=self._work, name=f"pool-worker-{n}", daemon=True)
            for n in range(thread_count)
        ]
        for worker in self._workers:
            worker.start()

    def _work(self) -> None:
        while True:
            task = self._queue.poll()
            if task is _stop:
                return
            try:
                task()
            except Exception:
                log.exception("Task raised an exception")

    def submit(self, task: Task) -> None:
        """Queue ``task`` to run on a worker thread."""
        with self._lock:
            if self._stopped:
                raise RuntimeError("cannot submit to a pool that has been shut down")
            self._queue.push(task)

    def shutdown(self) -> None:
        """Run every queued task, then stop and join the workers."""
        with self._lock:
            if self._stopped:
                return
            self._stopped = True
            for _ in self._workers:
                self._queue.push(_stop)
        for worker in self._workers:
            worker.join()

    def __enter__(self) -> ThreadPool:
        return self

    def __exit__(
        self,
        *args: type[BaseException] | BaseException | TracebackType | None,
    ) -> None:
        self.shutdown()