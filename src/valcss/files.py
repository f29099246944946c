"""Input file resolution and comment stripping."""

from __future__ import annotations

import glob
import logging
import re
from collections.abc import Iterable
from pathlib import Path

logger = logging.getLogger(__name__)

_HTML_COMMENT_RE = re.compile(r"<!--[\s\S]*?-->")
_BLOCK_COMMENT_RE = re.compile(r"/\*[\s\S]*?\*/")
_LINE_COMMENT_RE = re.compile(r"//.*")


def strip_comments(content: str) -> str:
    """Remove HTML, block and line comments from *content*."""
    content = _HTML_COMMENT_RE.sub("", content)
    content = _BLOCK_COMMENT_RE.sub("", content)
    return _LINE_COMMENT_RE.sub("", content)


def resolve_files(patterns: Iterable[str], root: str | Path | None = None) -> list[str]:
    """Expand glob *patterns* into existing files, first occurrence first."""
    patterns = list(patterns)
    seen: dict[str, None] = {}
    for pattern in patterns:
        for match in sorted(glob.glob(pattern, root_dir=root, recursive=True)):
            full = Path(root, match) if root is not None else Path(match)
            if full.is_file():
                seen.setdefault(str(full), None)
    logger.debug("Resolved %d file(s) from %s", len(seen), patterns)
    return list(seen)


def read_documents(paths: Iterable[str | Path]) -> list[str]:
    """Read each file as UTF-8 with comments stripped."""
    return [strip_comments(Path(p).read_text(encoding="utf-8")) for p in paths]
