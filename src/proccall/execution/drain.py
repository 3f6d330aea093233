"""Pipe draining helpers used by the execution engine."""

from __future__ import annotations

import threading
from typing import IO


def read_to_end(stream: IO[bytes]) -> bytes:
    """Read ``stream`` to end-of-file and close it."""

    try:
        return stream.read()
    finally:
        stream.close()


class DrainWorker:
    """Drains one pipe on a background thread.

    The worker never raises on its own thread; whatever the read raised is
    handed back by ``result`` so the caller can classify it.
    """

    def __init__(self, stream: IO[bytes], name: str) -> None:
        """Initialize the worker.

        Args:
            stream: Readable pipe to drain.
            name: Thread name, used in diagnostics.
        """

        self._stream = stream
        self._data: bytes | None = None
        self._error: Exception | None = None
        self._thread = threading.Thread(target=self._run, name=name, daemon=True)

    def start(self) -> DrainWorker:
        self._thread.start()
        return self

    def wait(self) -> None:
        """Block until the pipe has been read to end-of-file."""

        self._thread.join()

    def result(self) -> bytes:
        """Wait for the drain to finish.

        Returns:
            Everything read from the pipe.

        Raises:
            Exception: Whatever the read raised on the worker thread.
        """

        self.wait()
        if self._error is not None:
            raise self._error
        return self._data if self._data is not None else b""

    def _run(self) -> None:
        try:
            self._data = read_to_end(self._stream)
        except Exception as exc:  # handed to the joining thread
            self._error = exc
