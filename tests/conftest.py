# ruff: noqa: S101
from collections.abc import Iterator
from decimal import Decimal

import pytest
from loguru import logger

from invoicepay.domain.models import Invoice, InvoiceType, Payment
from invoicepay.processor import PaymentProcessor
from invoicepay.store import InMemoryInvoiceStore


class RecordingStore(InMemoryInvoiceStore):
    """In-memory store that counts ``save`` calls made after seeding."""

    def __init__(self) -> None:
        super().__init__()
        self.saved: list[str] = []

    def save(self, invoice: Invoice | None) -> None:
        super().save(invoice)
        if invoice is not None:
            self.saved.append(invoice.reference)


@pytest.fixture(autouse=True)
def _quiet_loguru() -> Iterator[None]:
    logger.remove()
    yield
    logger.remove()


@pytest.fixture
def log_messages() -> Iterator[list[str]]:
    messages: list[str] = []
    handler_id = logger.add(lambda m: messages.append(m.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)


@pytest.fixture
def store() -> RecordingStore:
    return RecordingStore()


@pytest.fixture
def processor(store: RecordingStore) -> PaymentProcessor:
    return PaymentProcessor(store)


@pytest.fixture
def seed(store: RecordingStore):
    """Add an invoice to the store without counting it as a save."""

    def _seed(
        reference: str,
        amount: str,
        *,
        amount_paid: str = "0",
        tax_amount: str = "0",
        type: InvoiceType = InvoiceType.STANDARD,
        payments: tuple[str, ...] = (),
    ) -> Invoice:
        invoice = Invoice(
            reference=reference,
            amount=Decimal(amount),
            amount_paid=Decimal(amount_paid),
            tax_amount=Decimal(tax_amount),
            type=type,
            payments=[Payment(reference, Decimal(p)) for p in payments],
        )
        store.add(invoice)
        store.saved.clear()
        return invoice

    return _seed
