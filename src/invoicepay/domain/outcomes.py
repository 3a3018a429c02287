"""Messages returned by the payment processor."""

from enum import Enum


class PaymentOutcome(str, Enum):
    """Every result ``PaymentProcessor.process`` can return."""

    NO_PAYMENT_NEEDED = "no payment needed"

    # Rejections: the invoice is left untouched.
    ALREADY_FULLY_PAID = "invoice was already fully paid"
    EXCEEDS_PARTIAL_REMAINING = "the payment is greater than the partial amount remaining"
    EXCEEDS_INVOICE_AMOUNT = "the payment is greater than the invoice amount"

    # Accepted payments.
    PARTIALLY_PAID = "invoice is now partially paid"
    FULLY_PAID = "invoice is now fully paid"
    ANOTHER_PARTIAL_PAYMENT = "another partial payment received, still not fully paid"
    FINAL_PARTIAL_PAYMENT = "final partial payment received, invoice is now fully paid"

    @property
    def is_accepted(self) -> bool:
        """True when the payment was recorded against the invoice."""
        return self is not PaymentOutcome.NO_PAYMENT_NEEDED and not self.is_rejection

    @property
    def is_rejection(self) -> bool:
        return self in _REJECTIONS

    @classmethod
    def for_payment(cls, *, has_existing_payments: bool, is_full_payment: bool) -> "PaymentOutcome":
        """Pick the acceptance message for a payment that was applied."""

        if has_existing_payments:
            return cls.FINAL_PARTIAL_PAYMENT if is_full_payment else cls.ANOTHER_PARTIAL_PAYMENT
        return cls.FULLY_PAID if is_full_payment else cls.PARTIALLY_PAID


_REJECTIONS = frozenset(
    {
        PaymentOutcome.ALREADY_FULLY_PAID,
        PaymentOutcome.EXCEEDS_PARTIAL_REMAINING,
        PaymentOutcome.EXCEEDS_INVOICE_AMOUNT,
    }
)
