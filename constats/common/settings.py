"""Environment-driven settings for the constats driver."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from constats.common.constants import DEFAULT_SAMPLE_SIZE, PROJECT_ROOT


@dataclass(frozen=True)
class Settings:
    """Runtime defaults; command-line flags take precedence."""

    log_level: str = "WARNING"               # CONSTATS_LOG_LEVEL
    sample_size: int = DEFAULT_SAMPLE_SIZE   # CONSTATS_SAMPLE_SIZE
    seed: int | None = None                  # CONSTATS_SEED


def load_dotenv(env_path: Path | None = None) -> None:
    """Load variables from a .env file into os.environ (no overwrite)."""
    if env_path is None:
        env_path = PROJECT_ROOT / ".env"
    if not env_path.is_file():
        return
    with open(env_path) as f:
        for line in f:
            line = line.strip()
            if not line or line.startswith("#") or "=" not in line:
                continue
            key, _, value = line.partition("=")
            key = key.strip()
            value = value.strip().strip("\"'")
            os.environ.setdefault(key, value)


def _env_int(name: str, default: int | None) -> int | None:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def load_settings() -> Settings:
    """Build :class:`Settings` from the current environment."""
    return Settings(
        log_level=os.environ.get("CONSTATS_LOG_LEVEL", "WARNING").strip() or "WARNING",
        sample_size=_env_int("CONSTATS_SAMPLE_SIZE", DEFAULT_SAMPLE_SIZE),
        seed=_env_int("CONSTATS_SEED", None),
    )
