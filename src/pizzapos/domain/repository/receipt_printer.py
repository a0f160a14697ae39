"""Abstract receipt printer."""

from __future__ import annotations

from abc import ABC, abstractmethod


class ReceiptPrinter(ABC):

    @abstractmethod
    def print_receipt(self, ticket_text: str, job_name: str | None = None) -> None:
        """Print a ticket. Raises PrintError on failure."""
