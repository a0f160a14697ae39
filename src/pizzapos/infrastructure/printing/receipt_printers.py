"""Receipt printer implementations."""

from __future__ import annotations

import logging
from pathlib import Path

import click

from pizzapos.domain.exceptions import PrintError
from pizzapos.domain.repository.receipt_printer import ReceiptPrinter

logger = logging.getLogger(__name__)


class ConsoleReceiptPrinter(ReceiptPrinter):
    """Echoes the ticket to the terminal."""

    def print_receipt(self, ticket_text: str, job_name: str | None = None) -> None:
        click.echo(ticket_text, nl=False)


class SpoolDirReceiptPrinter(ReceiptPrinter):
    """Drops each ticket as a text file into a spool directory.

    A print daemon watching the directory does the actual printing.
    """

    def __init__(self, spool_dir: Path) -> None:
        self._spool_dir = spool_dir

    def print_receipt(self, ticket_text: str, job_name: str | None = None) -> None:
        target = self._spool_dir / f"{job_name or 'PizzaPOS_Receipt'}.txt"
        try:
            self._spool_dir.mkdir(parents=True, exist_ok=True)
            target.write_text(ticket_text, encoding="utf-8")
        except OSError as exc:
            raise PrintError(f"Failed to print receipt: {exc}") from exc
        logger.info("Receipt spooled to %s", target)
