"""Errors raised when a payment cannot be evaluated at all."""


class PaymentProcessingError(Exception):
    """Base class for failures that abort payment processing."""


class InvoiceNotFoundError(PaymentProcessingError, LookupError):
    """No invoice matches the payment's reference."""

    def __init__(self, reference: str | None = None) -> None:
        super().__init__("There is no invoice matching this payment")
        self.reference = reference


class InvalidInvoiceStateError(PaymentProcessingError):
    """The stored invoice contradicts itself (zero amount with payments)."""

    def __init__(self, reference: str | None = None) -> None:
        super().__init__(
            "The invoice is in an invalid state, it has an amount of 0 and it has payments."
        )
        self.reference = reference
