"""Runtime settings, read from the environment (and an optional ``.env``)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ROOT_DIR = Path(__file__).resolve().parents[3]

DEFAULT_PORT = 3000


def _get_env(*keys: str, default: str | None = None) -> str | None:
    for k in keys:
        v = os.getenv(k)
        if v is not None and str(v).strip() != "":
            return v.strip()
    return default


def _get_int(*keys: str, default: int) -> int:
    v = _get_env(*keys)
    if v is None:
        return default
    try:
        return int(v)
    except ValueError as exc:
        raise ValueError(f"{keys[0]} must be an integer, got {v!r}") from exc


def _get_float(*keys: str, default: float) -> float:
    v = _get_env(*keys)
    if v is None:
        return default
    try:
        return float(v)
    except ValueError as exc:
        raise ValueError(f"{keys[0]} must be a number, got {v!r}") from exc


@dataclass(frozen=True)
class Settings:
    host: str
    port: int
    store_url: str
    request_timeout: float
    notification_seconds: float
    log_level: str


def load_settings(env_file: Path | None = None) -> Settings:
    load_dotenv(dotenv_path=env_file or ROOT_DIR / ".env")

    port = _get_int("PORT", default=DEFAULT_PORT)
    return Settings(
        host=_get_env("HOST", default="0.0.0.0") or "0.0.0.0",
        port=port,
        store_url=_get_env("STORE_URL", default=f"http://localhost:{port}") or "",
        request_timeout=_get_float("REQUEST_TIMEOUT", default=5.0),
        notification_seconds=_get_float("NOTIFICATION_SECONDS", default=2.0),
        log_level=(_get_env("LOG_LEVEL", default="INFO") or "INFO").upper(),
    )
