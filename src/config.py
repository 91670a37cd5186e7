"""Load ranking settings and env configuration."""
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

from src.log import get_logger

log = get_logger(__name__)

load_dotenv()

CONFIG_DIR: Path = Path(__file__).resolve().parent.parent / "config"
SETTINGS_PATH: Path = CONFIG_DIR / "settings.yaml"

TEXT_MIME = "text/plain"
PDF_MIME = "application/pdf"

DEFAULT_MAX_BATCH_FILES = 20
DEFAULT_DECODE_WORKERS = 4


@dataclass(frozen=True)
class Settings:
    max_batch_files: int = DEFAULT_MAX_BATCH_FILES
    decode_workers: int = DEFAULT_DECODE_WORKERS
    accepted_types: tuple[str, ...] = (TEXT_MIME, PDF_MIME)


def get_env(key: str, default: str = "") -> str:
    return os.environ.get(key, default).strip()


def _positive_int(name: str, value: Any) -> int:
    try:
        n = int(value)
    except (TypeError, ValueError):
        raise ValueError(f"{name} must be an integer, got {value!r}") from None
    if n < 1:
        raise ValueError(f"{name} must be at least 1, got {n}")
    return n


def load_settings(path: Path | None = None) -> Settings:
    """Read settings.yaml (if present) and apply RANKER_* env overrides."""
    path = path or SETTINGS_PATH
    data: dict[str, Any] = {}
    if path.exists():
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    else:
        log.debug("No settings file at %s, using defaults", path)

    max_files = get_env("RANKER_MAX_BATCH_FILES") or data.get("max_batch_files", DEFAULT_MAX_BATCH_FILES)
    workers = get_env("RANKER_DECODE_WORKERS") or data.get("decode_workers", DEFAULT_DECODE_WORKERS)
    accepted = data.get("accepted_types", [TEXT_MIME, PDF_MIME]) or []
    if isinstance(accepted, str):
        accepted = [accepted]

    accepted_types = tuple(t.strip().lower() for t in accepted if t and t.strip())
    if not accepted_types:
        raise ValueError("accepted_types must list at least one MIME type")

    return Settings(
        max_batch_files=_positive_int("max_batch_files", max_files),
        decode_workers=_positive_int("decode_workers", workers),
        accepted_types=accepted_types,
    )
