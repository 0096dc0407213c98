"""A worker whose run step can execute inline or on its own thread."""

from __future__ import annotations

import threading


class Worker:
    """Base class for jobs; subclasses override :meth:`handle_run`."""

    def __init__(self) -> None:
        self.running = False
        self._thread: threading.Thread | None = None
        self._condition = threading.Condition()

    def start(self) -> None:
        """Run the job in the calling thread."""
        self.handle_run()

    def start_async(self) -> None:
        """Run the job on a new thread."""
        self._thread = threading.Thread(target=self._run, daemon=True)
        self._thread.start()

    def _run(self) -> None:
        self.running = True
        try:
            self.handle_run()
        finally:
            self.running = False

    def wait(self) -> None:
        """Block until an asynchronously started job has finished."""
        if self._thread is not None:
            self._thread.join()

    def wait_on_notify(self) -> None:
        """Block until another thread calls :meth:`notify`."""
        with self._condition:
            self._condition.wait()

    def notify(self) -> None:
        """Wake one thread blocked in :meth:`wait_on_notify`."""
        with self._condition:
            self._condition.notify()

    def stop(self) -> None:
        """Ask the job to stop; the default does nothing."""

    def handle_run(self) -> None:
        """The job itself; the default does nothing."""