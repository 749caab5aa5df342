"""Runtime configuration read from the environment."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

# When installed in editable mode the project root is the repo root.
DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"

STORAGE_BACKENDS = ("json", "memory")


@dataclass(frozen=True)
class Settings:

    data_dir: Path = DEFAULT_DATA_DIR
    storage: str = "json"
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if self.storage not in STORAGE_BACKENDS:
            raise ValueError(
                f"Unknown storage backend {self.storage!r}; "
                f"expected one of {', '.join(STORAGE_BACKENDS)}"
            )

    @staticmethod
    def from_env() -> Settings:
        return Settings(
            data_dir=Path(os.getenv("STOREFRONT_DATA_DIR", str(DEFAULT_DATA_DIR))),
            storage=os.getenv("STOREFRONT_STORAGE", "json").lower(),
            log_level=os.getenv("STOREFRONT_LOG_LEVEL", "WARNING").upper(),
        )


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
