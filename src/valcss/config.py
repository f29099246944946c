"""Configuration discovery, loading and structural validation."""

from __future__ import annotations

import importlib.util
import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from valcss.errors import ConfigError
from valcss.plugins import Plugin

logger = logging.getLogger(__name__)

CONFIG_CANDIDATES = ("valcss.config.py", "valcss.config.json")
DEFAULT_OUTPUT = "valcss-main.css"
INJECT_MODES = frozenset({"inline", "link"})

DEFAULT_CONFIG_TEMPLATE = '''\
# valcss.config.py
config = {
    "files": ["index.html", "src/**/*.html"],
    "output": "valcss-main.css",
    "inject": {
        "mode": "link",  # "inline" or "link"
        "targets": ["index.html"],
    },
}
'''


@dataclass(frozen=True)
class InjectConfig:
    mode: str = "link"
    targets: tuple[str, ...] = ()


@dataclass(frozen=True)
class ValcssConfig:
    files: tuple[str, ...]
    output: str = DEFAULT_OUTPUT
    inject: InjectConfig | None = None
    breakpoints: Mapping[str, object] = field(default_factory=dict)
    plugins: tuple[Plugin, ...] = ()
    path: str | None = None


def find_config(root: str | Path = ".") -> Path | None:
    """Return the first config candidate present in *root*."""
    for name in CONFIG_CANDIDATES:
        candidate = Path(root) / name
        if candidate.is_file():
            return candidate
    return None


def _load_python(path: Path) -> Any:
    spec = importlib.util.spec_from_file_location("valcss_user_config", path)
    if spec is None or spec.loader is None:
        raise ConfigError(f"Cannot load config module at {path}", path=str(path))
    module = importlib.util.module_from_spec(spec)
    try:
        spec.loader.exec_module(module)
    except Exception as exc:
        raise ConfigError(f"Failed to load config at {path}: {exc}", path=str(path)) from exc
    if not hasattr(module, "config"):
        raise ConfigError(f"{path} must define a 'config' dict", path=str(path))
    return module.config


def _load_json(path: Path) -> Any:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise ConfigError(f"Failed to load config at {path}: {exc}", path=str(path)) from exc


def _string_list(raw: object, name: str, path: str | None) -> tuple[str, ...]:
    if not isinstance(raw, (list, tuple)) or not all(isinstance(v, str) for v in raw):
        raise ConfigError(f"'{name}' must be a list of strings.", path=path)
    return tuple(raw)


def _parse_inject(raw: object, path: str | None) -> InjectConfig | None:
    if raw is None:
        return None
    if not isinstance(raw, Mapping):
        raise ConfigError("'inject' must be an object with 'mode' and 'targets'.", path=path)
    mode = raw.get("mode") or "link"
    if mode not in INJECT_MODES:
        raise ConfigError(
            f"'inject.mode' must be one of {sorted(INJECT_MODES)}, got {mode!r}.", path=path
        )
    targets = _string_list(raw.get("targets", []), "inject.targets", path)
    return InjectConfig(mode=mode, targets=targets)


def parse_config(raw: object, path: str | None = None) -> ValcssConfig:
    """Validate a raw config dict and build a :class:`ValcssConfig`.

    Raises :class:`ConfigError` for any structural problem.  Individual
    breakpoint values are checked later, when the breakpoint table is built.
    """
    if not isinstance(raw, Mapping):
        raise ConfigError("Config must be an object.", path=path)

    files = raw.get("files")
    if not files:
        raise ConfigError("'files' array missing or invalid in config.", path=path)
    files = _string_list(files, "files", path)

    output = raw.get("output") or DEFAULT_OUTPUT
    if not isinstance(output, str):
        raise ConfigError("'output' must be a path string.", path=path)

    breakpoints = raw.get("breakpoints") or {}
    if not isinstance(breakpoints, Mapping):
        raise ConfigError("'breakpoints' must map names to pixel widths.", path=path)

    plugins = raw.get("plugins") or []
    if not isinstance(plugins, (list, tuple)):
        raise ConfigError("'plugins' must be a list of callables.", path=path)
    for index, plugin in enumerate(plugins):
        if not callable(plugin):
            raise ConfigError(f"Plugin #{index} is not callable: {plugin!r}", path=path)

    return ValcssConfig(
        files=files,
        output=output,
        inject=_parse_inject(raw.get("inject"), path),
        breakpoints=dict(breakpoints),
        plugins=tuple(plugins),
        path=path,
    )


def load_config(path: str | Path | None = None, root: str | Path = ".") -> ValcssConfig:
    """Load the config at *path*, or discover one in *root*."""
    config_path = Path(path) if path is not None else find_config(root)
    if config_path is None:
        raise ConfigError(
            "valcss.config.py or valcss.config.json not found.\n\n"
            "Run 'valcss init' to create a default config."
        )
    if not config_path.is_file():
        raise ConfigError(f"Config file not found: {config_path}", path=str(config_path))

    if config_path.suffix == ".json":
        raw = _load_json(config_path)
    else:
        raw = _load_python(config_path)
    config = parse_config(raw, path=str(config_path))
    logger.info("Loaded config from %s", config_path)
    return config


def write_default_config(root: str | Path = ".") -> Path:
    """Create ``valcss.config.py`` in *root*; refuses to overwrite."""
    target = Path(root) / CONFIG_CANDIDATES[0]
    if target.exists():
        raise ConfigError(f"{target.name} already exists.", path=str(target))
    target.write_text(DEFAULT_CONFIG_TEMPLATE, encoding="utf-8")
    return target
