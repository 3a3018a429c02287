"""Keyed storage for invoices."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Protocol

from loguru import logger

from .domain.models import Invoice


class InvoiceStore(Protocol):
    """What the payment processor needs from invoice storage."""

    def get(self, reference: str) -> Invoice | None: ...

    def save(self, invoice: Invoice) -> None: ...


class InMemoryInvoiceStore:
    """Dictionary-backed store scoped to whoever creates it.

    With ``fallback_to_last`` a lookup miss returns the most recently
    added or saved invoice instead of ``None``.
    """

    def __init__(self, invoices: list[Invoice] | None = None, *, fallback_to_last: bool = False) -> None:
        self._invoices: dict[str, Invoice] = {}
        self._last: Invoice | None = None
        self.fallback_to_last = fallback_to_last
        for invoice in invoices or []:
            self.add(invoice)

    def get(self, reference: str) -> Invoice | None:
        invoice = self._invoices.get(reference) if reference and reference.strip() else None
        if invoice is None and self.fallback_to_last:
            logger.debug("No invoice {!r}, falling back to last stored invoice", reference)
            return self._last
        return invoice

    def save(self, invoice: Invoice | None) -> None:
        if invoice is None:
            return
        if invoice.reference and invoice.reference.strip():
            self._invoices[invoice.reference] = invoice
        self._last = invoice
        logger.debug("Saved invoice {}", invoice.reference)

    def add(self, invoice: Invoice | None) -> None:
        """Seed the store; same semantics as :meth:`save`."""
        self.save(invoice)

    def __contains__(self, reference: object) -> bool:
        return reference in self._invoices

    def __len__(self) -> int:
        return len(self._invoices)

    def __iter__(self) -> Iterator[Invoice]:
        return iter(list(self._invoices.values()))
