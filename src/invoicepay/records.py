"""JSON file format for invoices used by the command line tool."""

from __future__ import annotations

from decimal import Decimal
from pathlib import Path
from typing import Annotated

from pydantic import AfterValidator, BaseModel, Field, TypeAdapter, field_serializer

from .domain.models import Invoice, InvoiceType, Payment


class PaymentRecord(BaseModel):
    reference: str = ""
    amount: Decimal = Decimal("0")

    @field_serializer("amount")
    def serialize_amount(self, value: Decimal) -> str:
        return str(value)


class InvoiceRecord(BaseModel):
    """Serialized form of :class:`Invoice`; amounts are written as strings."""

    reference: str
    amount: Decimal = Field(ge=0)
    amount_paid: Decimal = Decimal("0")
    tax_amount: Decimal = Decimal("0")
    type: InvoiceType = InvoiceType.STANDARD
    payments: list[PaymentRecord] = Field(default_factory=list)

    @field_serializer("amount", "amount_paid", "tax_amount")
    def serialize_amounts(self, value: Decimal) -> str:
        return str(value)

    def to_invoice(self) -> Invoice:
        return Invoice(
            reference=self.reference,
            amount=self.amount,
            amount_paid=self.amount_paid,
            tax_amount=self.tax_amount,
            type=self.type,
            payments=[Payment(reference=p.reference, amount=p.amount) for p in self.payments],
        )

    @classmethod
    def from_invoice(cls, invoice: Invoice) -> InvoiceRecord:
        return cls(
            reference=invoice.reference,
            amount=invoice.amount,
            amount_paid=invoice.amount_paid,
            tax_amount=invoice.tax_amount,
            type=invoice.type,
            payments=[PaymentRecord(reference=p.reference, amount=p.amount) for p in invoice.payments],
        )


def _check_references(records: list[InvoiceRecord]) -> list[InvoiceRecord]:
    seen: set[str] = set()
    for record in records:
        if not record.reference.strip():
            raise ValueError("invoice reference must not be blank")
        if record.reference in seen:
            raise ValueError(f"duplicate invoice reference {record.reference!r}")
        seen.add(record.reference)
    return records


# Every record must be addressable by reference, otherwise rewriting the file would drop it.
_records = TypeAdapter(Annotated[list[InvoiceRecord], AfterValidator(_check_references)])


def load_invoices(path: Path) -> list[Invoice]:
    """Read invoices from a JSON array; raises ``pydantic.ValidationError`` on bad data."""
    records = _records.validate_json(path.read_bytes())
    return [record.to_invoice() for record in records]


def dump_invoices(path: Path, invoices: list[Invoice]) -> None:
    records = [InvoiceRecord.from_invoice(invoice) for invoice in invoices]
    path.write_bytes(_records.dump_json(records, indent=2))
