"""Runtime settings, read once when the CLI starts."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from pizzapos.infrastructure.backend.http_backend import DEFAULT_TIMEOUT


@dataclass(frozen=True)
class Settings:
    """Where the backend lives and how to print.

    ``backend_url`` being unset is what puts the register in fallback
    mode.
    """

    backend_url: str | None = None
    timeout: float = DEFAULT_TIMEOUT
    receipt_dir: Path | None = None
    verbose: bool = False

    @property
    def connected(self) -> bool:
        return bool(self.backend_url and self.backend_url.strip())

    @property
    def log_level(self) -> int:
        return logging.DEBUG if self.verbose else logging.WARNING
