"""Invoice and payment records shared by the store and the processor."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum

Amount = Decimal | int | float | str


def to_decimal(value: Amount) -> Decimal:
    """Coerce ``value`` to ``Decimal`` without picking up binary float noise."""

    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(str(value))
    return Decimal(value)


class InvoiceType(Enum):
    """Tax jurisdiction of an invoice."""

    STANDARD = "standard"
    COMMERCIAL = "commercial"


@dataclass(frozen=True)
class Payment:
    """A tendered amount targeting the invoice with the same reference."""

    reference: str
    amount: Decimal = Decimal("0")

    def __post_init__(self) -> None:
        object.__setattr__(self, "amount", to_decimal(self.amount))


@dataclass
class Invoice:
    """An amount owed together with the payments and tax recorded against it.

    ``amount_paid`` is tracked as its own field and is also derivable from
    ``payments``; the processor keeps the two in step.
    """

    reference: str
    amount: Decimal
    amount_paid: Decimal = Decimal("0")
    tax_amount: Decimal = Decimal("0")
    type: InvoiceType = InvoiceType.STANDARD
    payments: list[Payment] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.amount = to_decimal(self.amount)
        self.amount_paid = to_decimal(self.amount_paid)
        self.tax_amount = to_decimal(self.tax_amount)
        if self.payments is None:
            self.payments = []
        if self.amount < 0:
            raise ValueError(f"Invoice amount must be non-negative, got {self.amount}")

    @property
    def has_payments(self) -> bool:
        return bool(self.payments)

    @property
    def total_paid(self) -> Decimal:
        """Sum of the recorded payment amounts."""
        return sum((p.amount for p in self.payments), Decimal("0"))

    @property
    def remaining(self) -> Decimal:
        """Balance still owed according to ``amount_paid``."""
        return self.amount - self.amount_paid
