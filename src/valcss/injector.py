"""Write generated CSS and wire it into HTML targets."""

from __future__ import annotations

import logging
import os
import re
from collections.abc import Iterable
from pathlib import Path

from valcss import __version__

logger = logging.getLogger(__name__)

_HEAD_CLOSE_RE = re.compile(r"</head>", re.IGNORECASE)
_INLINE_BLOCK_RE = re.compile(r"<style data-valcss>[\s\S]*?</style>")


def header_comment() -> str:
    return f"/* Generated by valcss {__version__}. Do not edit by hand. */\n"


def write_css(output_path: str | Path, css: str) -> Path:
    """Write *css* to *output_path*, creating parent directories."""
    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(css, encoding="utf-8")
    logger.info("CSS written to %s", path)
    return path


def _insert_before_head_close(html: str, snippet: str) -> str:
    return _HEAD_CLOSE_RE.sub(lambda _: f"{snippet}\n</head>", html, count=1)


def stylesheet_href(html_file: str | Path, output_path: str | Path) -> str:
    """Path to *output_path* relative to the directory of *html_file*."""
    relative = os.path.relpath(Path(output_path).resolve(), Path(html_file).resolve().parent)
    return Path(relative).as_posix()


def inject_css(
    css: str,
    output_path: str | Path,
    mode: str = "link",
    targets: Iterable[str | Path] = (),
) -> list[Path]:
    """Inline *css* into, or link it from, each HTML target.

    ``inline`` adds (or refreshes) a ``<style data-valcss>`` block before
    ``</head>``; ``link`` writes the stylesheet to *output_path* and adds a
    ``<link>`` tag.  Targets that already contain the snippet are left alone;
    missing targets are skipped.
    Returns the targets that were modified.
    """
    if mode == "link":
        write_css(output_path, header_comment() + css)

    modified: list[Path] = []
    for target in targets:
        html_file = Path(target)
        if not html_file.is_file():
            logger.warning("Target HTML file not found: %s", html_file)
            continue

        html = html_file.read_text(encoding="utf-8")
        if mode == "inline":
            snippet = f"<style data-valcss>\n{css}\n</style>"
        else:
            href = stylesheet_href(html_file, output_path)
            snippet = f'<link rel="stylesheet" href="{href}">'
        if snippet in html:
            continue

        if mode == "inline" and _INLINE_BLOCK_RE.search(html):
            updated = _INLINE_BLOCK_RE.sub(lambda _: snippet, html, count=1)
        elif _HEAD_CLOSE_RE.search(html):
            updated = _insert_before_head_close(html, snippet)
        else:
            logger.warning("No </head> in %s; nothing injected", html_file)
            continue

        html_file.write_text(updated, encoding="utf-8")
        logger.info("Injected %s stylesheet into %s", mode, html_file)
        modified.append(html_file)
    return modified
