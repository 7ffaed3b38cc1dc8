# settings come from the environment, a local .env file fills in anything unset

from __future__ import annotations
import os
from dataclasses import dataclass
from typing import Mapping
from dotenv import load_dotenv
from .errors import ConfigError

EMPTY_POLICIES = ("nan", "raise")
DEFAULT_PRECISION = 2
MAX_PRECISION = 17  # enough digits to round-trip any double

@dataclass(frozen=True)
class Settings:
    empty_policy: str = "nan"
    precision: int = DEFAULT_PRECISION

def load_settings(env: Mapping[str, str] | None = None) -> Settings:
    if env is None:
        # override=False keeps values already exported by the shell
        load_dotenv(override=False)
        env = os.environ

    policy = (env.get("SEQAVG_EMPTY_POLICY") or "nan").strip().lower()
    if policy not in EMPTY_POLICIES:
        raise ConfigError(f"SEQAVG_EMPTY_POLICY must be one of {EMPTY_POLICIES} (got {policy!r})")

    raw_precision = env.get("SEQAVG_PRECISION")
    if raw_precision is None or raw_precision.strip() == "":
        precision = DEFAULT_PRECISION
    else:
        try:
            precision = int(raw_precision)
        except ValueError as exc:
            raise ConfigError(f"SEQAVG_PRECISION must be an integer (got {raw_precision!r})") from exc
        if not (0 <= precision <= MAX_PRECISION):
            raise ConfigError(f"SEQAVG_PRECISION must be between 0 and {MAX_PRECISION} (got {precision})")

    return Settings(empty_policy=policy, precision=precision)
