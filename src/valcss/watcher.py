"""Polling file watcher used by ``valcss build --watch``."""

from __future__ import annotations

import logging
import time
from collections.abc import Iterable
from pathlib import Path
from typing import Callable

logger = logging.getLogger(__name__)


def _mtime(path: str) -> int | None:
    try:
        return Path(path).stat().st_mtime_ns
    except OSError:
        return None


class FileWatcher:
    """Detect modification of a fixed set of files by polling mtimes."""

    def __init__(self, paths: Iterable[str | Path]) -> None:
        self.paths = [str(p) for p in paths]
        self._mtimes = {p: _mtime(p) for p in self.paths}

    def check(self) -> list[str]:
        """Return the paths whose mtime changed since the last check."""
        changed: list[str] = []
        for path in self.paths:
            current = _mtime(path)
            if current != self._mtimes[path]:
                self._mtimes[path] = current
                changed.append(path)
        return changed

    def run(
        self,
        on_change: Callable[[list[str]], None],
        interval: float = 0.5,
        max_cycles: int | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        """Poll every *interval* seconds, calling *on_change* with changed paths.

        Runs until interrupted, or for *max_cycles* polls when given.
        """
        cycles = 0
        while max_cycles is None or cycles < max_cycles:
            sleep(interval)
            cycles += 1
            changed = self.check()
            if changed:
                for path in changed:
                    logger.info("File changed: %s", path)
                on_change(changed)
