"""Tests for the polling file watcher."""

import os

from valcss.watcher import FileWatcher


def _touch(path, offset_ns: int) -> None:
    stat = path.stat()
    os.utime(path, ns=(stat.st_atime_ns, stat.st_mtime_ns + offset_ns))


class TestCheck:
    def test_no_changes(self, tmp_path) -> None:
        page = tmp_path / "a.html"
        page.write_text("x")
        assert FileWatcher([page]).check() == []

    def test_detects_modification_once(self, tmp_path) -> None:
        page = tmp_path / "a.html"
        page.write_text("x")
        watcher = FileWatcher([page])
        _touch(page, 1_000_000_000)
        assert watcher.check() == [str(page)]
        assert watcher.check() == []

    def test_detects_deletion(self, tmp_path) -> None:
        page = tmp_path / "a.html"
        page.write_text("x")
        watcher = FileWatcher([page])
        page.unlink()
        assert watcher.check() == [str(page)]


class TestRun:
    def test_calls_back_on_change(self, tmp_path) -> None:
        page = tmp_path / "a.html"
        page.write_text("x")
        watcher = FileWatcher([page])
        calls = []
        sleeps = []

        def fake_sleep(seconds: float) -> None:
            sleeps.append(seconds)
            if len(sleeps) == 2:
                _touch(page, 1_000_000_000)

        watcher.run(calls.append, interval=0.1, max_cycles=3, sleep=fake_sleep)
        assert sleeps == [0.1, 0.1, 0.1]
        assert calls == [[str(page)]]
