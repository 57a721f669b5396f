"""A fixed-size pool of worker threads fed from a shared task queue."""

from __future__ import annotations

import logging
import threading
from collections import deque
from typing import Callable

logger = logging.getLogger(__name__)

Task = Callable[[], object]


class ThreadPool:
    """Run submitted callables on ``num_threads`` worker threads.

    On shutdown the workers finish every task already queued before exiting.
    """

    def __init__(self, num_threads: int) -> None:
        if num_threads < 1:
            raise ValueError("num_threads must be at least 1")
        self._tasks: deque[Task] = deque()
        self._cv = threading.Condition()
        self._stop = False
        self._workers = [
            threading.Thread(target=self._work, name=f"pool-worker-{idx}", daemon=True)
            for idx in range(num_threads)
        ]
        for worker in self._workers:
            worker.start()

    def _fetch(self) -> Task | None:
        with self._cv:
            self._cv.wait_for(lambda: self._stop or bool(self._tasks))
            if not self._tasks:
                return None
            return self._tasks.popleft()

    def _work(self) -> None:
        while (task := self._fetch()) is not None:
            try:
                task()
            except Exception:
                logger.exception("task %r raised", task)

    def enqueue(self, task: Task) -> None:
        """Queue ``task`` for execution; raise ``RuntimeError`` after shutdown."""
        with self._cv:
            if self._stop:
                raise RuntimeError("thread pool has been shut down")
            self._tasks.append(task)
            self._cv.notify()

    def shutdown(self) -> None:
        """Stop accepting tasks, let queued tasks finish and join every worker."""
        with self._cv:
            self._stop = True
            self._cv.notify_all()
        current = threading.current_thread()
        for worker in self._workers:
            if worker is not current:
                worker.join()

    def __enter__(self) -> ThreadPool:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.shutdown()