"""Environment-driven settings for the ledger front ends."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping, Optional, Tuple

DEFAULT_DATA_DIR = Path("data")
DEV_ENVIRONMENTS = frozenset({"dev", "development"})


@dataclass(frozen=True)
class Settings:
    data_dir: Path = DEFAULT_DATA_DIR
    env: str = "prod"
    allowed_origins: Tuple[str, ...] = field(default_factory=tuple)
    log_level: str = "INFO"
    log_file: Optional[Path] = None

    @property
    def is_dev(self) -> bool:
        return self.env in DEV_ENVIRONMENTS

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if environ is None else environ
        origins = env.get("LEDGER_ALLOWED_ORIGINS", "")
        log_file = env.get("LEDGER_LOG_FILE")
        return cls(
            data_dir=Path(env.get("LEDGER_DATA_DIR") or DEFAULT_DATA_DIR),
            env=(env.get("LEDGER_ENV") or "prod").strip().lower(),
            allowed_origins=tuple(
                origin.strip() for origin in origins.split(",") if origin.strip()
            ),
            log_level=(env.get("LEDGER_LOG_LEVEL") or "INFO").strip().upper(),
            log_file=Path(log_file) if log_file else None,
        )
