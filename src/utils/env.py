"""
Environment loading helpers.

Settings are read from environment variables, after loading ``.env.local``
and ``.env`` from the working directory if present. Values already in the
environment are never overridden.

Variables:
- PDF_COMPARE_LOG_LEVEL: logging level name used by the command line (default WARNING)
- PDF_COMPARE_RENDER_ZOOM: page render scale, 1.0 = 72dpi (default 2.0)
- PDF_COMPARE_STRICT_RENDER: fail instead of skipping pages that cannot be encoded (default false)
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from dotenv import load_dotenv

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off", ""}


@dataclass(frozen=True)
class Settings:
    log_level: str = "WARNING"
    render_zoom: float = 2.0
    strict_render: bool = False


def load_env_files(root: Optional[Path] = None) -> None:
    """Load .env.local then .env from ``root`` (default: cwd)."""
    root = root or Path.cwd()
    for fname in (".env.local", ".env"):
        fpath = root / fname
        if fpath.exists():
            load_dotenv(dotenv_path=str(fpath), override=False)


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ValueError(f"{name} must be a boolean, got {raw!r}")


def _parse_level(raw: str) -> str:
    name = raw.strip().upper()
    if not isinstance(logging.getLevelName(name), int):
        raise ValueError(f"PDF_COMPARE_LOG_LEVEL is not a logging level: {raw!r}")
    return name


def _parse_zoom(raw: str) -> float:
    try:
        zoom = float(raw)
    except ValueError:
        raise ValueError(f"PDF_COMPARE_RENDER_ZOOM must be a number, got {raw!r}") from None
    if zoom <= 0:
        raise ValueError(f"PDF_COMPARE_RENDER_ZOOM must be positive, got {zoom}")
    return zoom


def settings_from_mapping(env: Mapping[str, str]) -> Settings:
    """Build Settings from a mapping of environment variables."""
    defaults = Settings()
    level = env.get("PDF_COMPARE_LOG_LEVEL")
    zoom = env.get("PDF_COMPARE_RENDER_ZOOM")
    strict = env.get("PDF_COMPARE_STRICT_RENDER")
    return Settings(
        log_level=_parse_level(level) if level else defaults.log_level,
        render_zoom=_parse_zoom(zoom) if zoom else defaults.render_zoom,
        strict_render=_parse_bool("PDF_COMPARE_STRICT_RENDER", strict) if strict is not None else defaults.strict_render,
    )


def load_settings(root: Optional[Path] = None) -> Settings:
    """Return Settings, attempting to load .env files first."""
    load_env_files(root)
    return settings_from_mapping(os.environ)
