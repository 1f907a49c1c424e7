"""
Handler dispatch

Loggers schedule handler invocations through a dispatcher instead of calling
handlers directly. Jobs run in the order they were submitted.
"""

from __future__ import annotations

import atexit
import queue
import threading
from typing import TYPE_CHECKING, Dict, Optional

if TYPE_CHECKING:
    from logged.core.log_record import LogRecord
    from logged.handlers.base_handler import BaseHandler


_STOP = object()


class SyncDispatcher:
    """
    Run handlers immediately in the calling thread.

    Handler exceptions propagate to the logging call.
    """

    def __init__(self):
        self._metrics = {"scheduled": 0, "processed": 0, "dropped": 0, "failed": 0}
        self._metrics_lock = threading.Lock()

    def _count(self, key: str) -> None:
        with self._metrics_lock:
            self._metrics[key] += 1

    def submit(self, handler: "BaseHandler", record: "LogRecord") -> None:
        self._count("scheduled")
        try:
            handler.handle(record)
        except Exception:
            self._count("failed")
            raise
        self._count("processed")

    def flush(self) -> None:
        pass

    def shutdown(self) -> None:
        pass

    def get_metrics(self) -> Dict[str, int]:
        """Get dispatch metrics."""
        with self._metrics_lock:
            return self._metrics.copy()


class AsyncDispatcher(SyncDispatcher):
    """
    Run handlers on a single background worker thread.

    The worker starts on the first submitted job. A full queue drops the job.
    After shutdown, jobs are delivered synchronously.
    """

    def __init__(self, queue_size: int = 10000, name: str = "logged"):
        super().__init__()
        self._queue: queue.Queue = queue.Queue(maxsize=queue_size)
        self._name = name
        self._worker_thread: Optional[threading.Thread] = None
        self._start_lock = threading.Lock()
        self._running = False
        self._closed = False

        atexit.register(self.shutdown)

    def _start_worker(self):
        """Start async worker thread."""
        with self._start_lock:
            if self._running:
                return
            self._running = True
            self._worker_thread = threading.Thread(
                target=self._process_queue,
                name=f"{self._name}-dispatch",
                daemon=True
            )
            self._worker_thread.start()

    def _process_queue(self):
        """Run queued handler jobs (worker thread)."""
        while True:
            job = self._queue.get()
            try:
                if job is _STOP:
                    break
                handler, record = job
                try:
                    handler.handle(record)
                    self._count("processed")
                except Exception as e:
                    self._count("failed")
                    print(f"Handler error: {e}")
            finally:
                # Always mark task as done to prevent queue.join() deadlock
                self._queue.task_done()

    def submit(self, handler: "BaseHandler", record: "LogRecord") -> None:
        if self._closed:
            super().submit(handler, record)
            return
        if not self._running:
            self._start_worker()
        try:
            self._queue.put_nowait((handler, record))
            self._count("scheduled")
        except queue.Full:
            self._count("dropped")

    def flush(self) -> None:
        """Wait until every scheduled job has run."""
        if self._running:
            self._queue.join()

    def shutdown(self) -> None:
        """Drain the queue and stop the worker."""
        if self._closed:
            return
        self._closed = True
        atexit.unregister(self.shutdown)
        if self._running:
            self._queue.put(_STOP)
            self._worker_thread.join(timeout=5.0)
            self._running = False
