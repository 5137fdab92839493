"""Tests for the background directory-load scheduler."""

from __future__ import annotations

import threading
import time
import unittest
from pathlib import Path

from dirjump.browser.engine import LoadRequest
from dirjump.runtime.loader import DirectoryLoadScheduler


def _wait_for_results(
    scheduler: DirectoryLoadScheduler,
    *,
    expected_count: int,
    timeout_seconds: float = 1.0,
) -> list:
    deadline = time.monotonic() + timeout_seconds
    out: list = []
    while time.monotonic() < deadline:
        out.extend(scheduler.drain_results())
        if len(out) >= expected_count:
            break
        time.sleep(0.01)
    return out


def _request(generation: int, name: str = "dir") -> LoadRequest:
    return LoadRequest(generation=generation, path=Path("/tmp") / name)


class DirectoryLoadSchedulerTests(unittest.TestCase):
    def test_schedule_lists_directory_in_background(self) -> None:
        calls: list[tuple[Path, bool]] = []

        def list_directory(path: Path, show_hidden: bool) -> list[str]:
            calls.append((path, show_hidden))
            self.assertNotEqual(threading.current_thread(), threading.main_thread())
            return ["a", "b"]

        scheduler = DirectoryLoadScheduler(list_directory=list_directory)
        scheduler.schedule(LoadRequest(generation=1, path=Path("/tmp/x"), show_hidden=True))

        results = _wait_for_results(scheduler, expected_count=1)
        self.assertEqual(calls, [(Path("/tmp/x"), True)])
        self.assertEqual(len(results), 1)
        self.assertTrue(results[0].ok)
        self.assertEqual(results[0].entries, ("a", "b"))
        self.assertEqual(results[0].request.generation, 1)

    def test_listing_errors_become_failed_results(self) -> None:
        def list_directory(path: Path, _show_hidden: bool) -> list[str]:
            raise PermissionError(13, "Permission denied", str(path))

        scheduler = DirectoryLoadScheduler(list_directory=list_directory)
        scheduler.schedule(_request(4))

        results = _wait_for_results(scheduler, expected_count=1)
        self.assertEqual(len(results), 1)
        self.assertFalse(results[0].ok)
        self.assertIsInstance(results[0].error, PermissionError)

    def test_unexpected_errors_do_not_stall_worker(self) -> None:
        def list_directory(path: Path, _show_hidden: bool) -> list[str]:
            if path.name == "bad":
                raise RuntimeError("boom")
            return []

        scheduler = DirectoryLoadScheduler(list_directory=list_directory)
        scheduler.schedule(_request(1, "bad"))
        first = _wait_for_results(scheduler, expected_count=1)
        scheduler.schedule(_request(2, "good"))
        second = _wait_for_results(scheduler, expected_count=1)

        self.assertIsInstance(first[0].error, RuntimeError)
        self.assertTrue(second[0].ok)

    def test_pending_requests_collapse_to_latest(self) -> None:
        calls: list[int] = []
        first_started = threading.Event()
        allow_first_finish = threading.Event()

        def list_directory(path: Path, _show_hidden: bool) -> list[str]:
            generation = int(path.name)
            if generation == 1:
                first_started.set()
                allow_first_finish.wait(timeout=1.0)
            calls.append(generation)
            return []

        scheduler = DirectoryLoadScheduler(list_directory=list_directory)
        scheduler.schedule(_request(1, "1"))
        self.assertTrue(first_started.wait(timeout=1.0))
        scheduler.schedule(_request(2, "2"))
        scheduler.schedule(_request(3, "3"))
        allow_first_finish.set()

        results = _wait_for_results(scheduler, expected_count=2)
        self.assertEqual([result.request.generation for result in results], [1, 3])
        self.assertListEqual(calls, [1, 3])


if __name__ == "__main__":
    unittest.main()
