"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from dataclasses import dataclass
from typing import AsyncIterator

from pizzapos.application.load_data import LoadDataHandler
from pizzapos.application.mode_selector import ModeSelector
from pizzapos.application.state import PosState
from pizzapos.domain.repository.receipt_printer import ReceiptPrinter
from pizzapos.infrastructure.backend.http_backend import HttpPosBackend
from pizzapos.infrastructure.backend.memory_backend import InMemoryPosBackend
from pizzapos.infrastructure.config import Settings
from pizzapos.infrastructure.printing.receipt_printers import (
    ConsoleReceiptPrinter,
    SpoolDirReceiptPrinter,
)


@dataclass
class Session:
    selector: ModeSelector
    state: PosState
    printer: ReceiptPrinter


def mode_selector(settings: Settings) -> ModeSelector:
    remote = None
    if settings.connected:
        remote = HttpPosBackend(settings.backend_url, timeout=settings.timeout)  # type: ignore[arg-type]
    return ModeSelector(remote=remote, fallback_factory=InMemoryPosBackend.with_sample_data)


def receipt_printer(settings: Settings) -> ReceiptPrinter:
    if settings.receipt_dir is not None:
        return SpoolDirReceiptPrinter(settings.receipt_dir)
    return ConsoleReceiptPrinter()


@asynccontextmanager
async def open_session(settings: Settings) -> AsyncIterator[Session]:
    """Pick the mode, load catalog and history, and close the backend after."""
    selector = mode_selector(settings)
    state = PosState()
    try:
        await LoadDataHandler(selector, state).handle()
        yield Session(selector=selector, state=state, printer=receipt_printer(settings))
    finally:
        await selector.aclose()
