# ruff: noqa: S101
from dataclasses import FrozenInstanceError
from decimal import Decimal

import pytest

from invoicepay.domain.models import Invoice, InvoiceType, Payment
from invoicepay.domain.outcomes import PaymentOutcome
from invoicepay.tax import updated_tax


def test_amounts_are_coerced_to_decimal() -> None:
    invoice = Invoice(reference="A", amount=100, amount_paid="70", tax_amount=9.8)

    assert invoice.amount == Decimal("100")
    assert invoice.amount_paid == Decimal("70")
    assert invoice.tax_amount == Decimal("9.8")
    assert Payment("A", 0.1).amount == Decimal("0.1")


def test_negative_invoice_amount_rejected() -> None:
    with pytest.raises(ValueError):
        Invoice(reference="A", amount=Decimal("-1"))


def test_missing_payment_list_becomes_empty() -> None:
    invoice = Invoice(reference="A", amount=Decimal("5"), payments=None)  # type: ignore[arg-type]

    assert invoice.payments == []
    assert not invoice.has_payments
    assert invoice.total_paid == 0


def test_derived_totals() -> None:
    invoice = Invoice(
        reference="A",
        amount=Decimal("10"),
        amount_paid=Decimal("6"),
        payments=[Payment("A", Decimal("2")), Payment("A", Decimal("4"))],
    )

    assert invoice.has_payments
    assert invoice.total_paid == Decimal("6")
    assert invoice.remaining == Decimal("4")


def test_payment_is_immutable() -> None:
    payment = Payment("A", Decimal("1"))
    with pytest.raises(FrozenInstanceError):
        payment.amount = Decimal("2")  # type: ignore[misc]


def test_outcome_messages() -> None:
    assert len(PaymentOutcome) == 8
    assert {o for o in PaymentOutcome if o.is_rejection} == {
        PaymentOutcome.ALREADY_FULLY_PAID,
        PaymentOutcome.EXCEEDS_PARTIAL_REMAINING,
        PaymentOutcome.EXCEEDS_INVOICE_AMOUNT,
    }
    assert PaymentOutcome.for_payment(has_existing_payments=False, is_full_payment=False).value == (
        "invoice is now partially paid"
    )
    assert PaymentOutcome.for_payment(has_existing_payments=False, is_full_payment=True).value == (
        "invoice is now fully paid"
    )
    assert PaymentOutcome.for_payment(has_existing_payments=True, is_full_payment=False).value == (
        "another partial payment received, still not fully paid"
    )
    assert PaymentOutcome.for_payment(has_existing_payments=True, is_full_payment=True).value == (
        "final partial payment received, invoice is now fully paid"
    )


@pytest.mark.parametrize(
    ("invoice_type", "prior", "has_existing", "expected"),
    [
        (InvoiceType.COMMERCIAL, "7.0", True, "11.2"),
        (InvoiceType.COMMERCIAL, "7.0", False, "4.2"),
        (InvoiceType.STANDARD, "7.0", True, "7.0"),
        (InvoiceType.STANDARD, "7.0", False, "0"),
    ],
)
def test_updated_tax(invoice_type, prior, has_existing, expected) -> None:
    tax = updated_tax(invoice_type, Decimal(prior), Decimal("30"), has_existing_payments=has_existing)

    assert tax == Decimal(expected)


def test_accepted_outcomes() -> None:
    assert {o for o in PaymentOutcome if o.is_accepted} == {
        PaymentOutcome.PARTIALLY_PAID,
        PaymentOutcome.FULLY_PAID,
        PaymentOutcome.ANOTHER_PARTIAL_PAYMENT,
        PaymentOutcome.FINAL_PARTIAL_PAYMENT,
    }
