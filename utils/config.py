"""
Runtime settings, read from the environment.

- DNA_LOG_LEVEL        -> log level for the CLI and the API (default INFO)
- MAX_SEQUENCE_LENGTH  -> largest sequence the API accepts (default 1,000,000)
- MAX_LCS_CELLS        -> largest len(a) * len(b) the dispatchers will align
- CORS_ALLOW_ORIGINS   -> comma separated origins for the API (default *)
"""
import logging
import os
from typing import List


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def log_level() -> int:
    name = os.getenv("DNA_LOG_LEVEL", "INFO").upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def max_sequence_length() -> int:
    return _int_env("MAX_SEQUENCE_LENGTH", 1_000_000)


def max_lcs_cells() -> int:
    return _int_env("MAX_LCS_CELLS", 250_000_000)


def cors_allow_origins() -> List[str]:
    raw = os.getenv("CORS_ALLOW_ORIGINS", "*")
    return [o.strip() for o in raw.split(",") if o.strip()] or ["*"]


def configure_logging() -> None:
    logging.basicConfig(
        level=log_level(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
