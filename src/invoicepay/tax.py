"""Tax accrued on invoice payments."""

from decimal import Decimal

from .domain.models import InvoiceType

COMMERCIAL_TAX_RATE = Decimal("0.14")


def updated_tax(
    invoice_type: InvoiceType,
    prior_tax: Decimal,
    payment_amount: Decimal,
    *,
    has_existing_payments: bool,
    rate: Decimal = COMMERCIAL_TAX_RATE,
) -> Decimal:
    """Return the invoice tax after applying one payment.

    Tax is incremented per payment and never recomputed from the total paid,
    so rounding does not drift across partial payments. Prior tax only
    carries over when the invoice already had payments.
    """

    existing = prior_tax if has_existing_payments else Decimal("0")
    if invoice_type is InvoiceType.COMMERCIAL:
        return existing + payment_amount * rate
    return existing
