# utils/config.py
from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()


def _get_env(*keys: str, default: str | None = None) -> str | None:
    for k in keys:
        v = os.getenv(k)
        if v is not None and str(v).strip() != "":
            return v.strip()
    return default


def _get_int(*keys: str, default: int | None = None) -> int | None:
    v = _get_env(*keys, default=None)
    if v is None:
        return default
    return int(v)


@dataclass(frozen=True)
class Settings:
    log_dir: str
    log_level: str
    currency: str
    decimals: int


def load_settings() -> Settings:
    # Re-read the environment; tests call this after monkeypatching.
    decimals = _get_int("CARTSHOP_DECIMALS", default=2)
    if decimals is None or decimals < 0:
        raise ValueError("CARTSHOP_DECIMALS must be >= 0")
    return Settings(
        log_dir=_get_env("CARTSHOP_LOG_DIR", default="data/logs") or "data/logs",
        log_level=(_get_env("CARTSHOP_LOG_LEVEL", default="INFO") or "INFO").upper(),
        currency=_get_env("CARTSHOP_CURRENCY", default="$") or "$",
        decimals=decimals,
    )


settings = load_settings()
