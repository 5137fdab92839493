"""Background worker that executes directory loads off the UI thread."""

from __future__ import annotations

import threading
from collections.abc import Callable
from pathlib import Path
from queue import Empty, Queue

from loguru import logger

from ..browser.engine import LoadRequest, LoadResult
from ..listing import list_subdirectories


class DirectoryLoadScheduler:
    """Single-worker, latest-request-wins load scheduler.

    Requests that have not started yet collapse to the newest one; a load
    already running still completes and its result is queued. Deciding
    whether a result is stale is left to the consumer.
    """

    def __init__(self, list_directory: Callable[[Path, bool], list[str]] = list_subdirectories) -> None:
        self._list_directory = list_directory
        self._lock = threading.Lock()
        self._pending: LoadRequest | None = None
        self._running = False
        self._results: Queue[LoadResult] = Queue()

    def _run_request(self, request: LoadRequest) -> LoadResult:
        try:
            names = self._list_directory(request.path, request.show_hidden)
        except OSError as exc:
            return LoadResult(request=request, error=exc)
        except Exception as exc:
            logger.exception("Unexpected error listing {}", request.path)
            return LoadResult(request=request, error=exc)
        return LoadResult(request=request, entries=tuple(names))

    def _worker(self) -> None:
        while True:
            with self._lock:
                request = self._pending
                self._pending = None
                if request is None:
                    self._running = False
                    return
            self._results.put(self._run_request(request))

    def schedule(self, request: LoadRequest) -> None:
        """Queue ``request``, replacing any load that has not started yet."""
        with self._lock:
            if self._pending is not None:
                logger.debug("Load #{} superseded before it started", self._pending.generation)
            self._pending = request
            if self._running:
                return
            self._running = True

        worker = threading.Thread(
            target=self._worker,
            name="dirjump-directory-load",
            daemon=True,
        )
        worker.start()

    def drain_results(self) -> list[LoadResult]:
        """Drain all completed loads without blocking."""
        out: list[LoadResult] = []
        while True:
            try:
                out.append(self._results.get_nowait())
            except Empty:
                break
        return out


__all__ = ["DirectoryLoadScheduler"]
