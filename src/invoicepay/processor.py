"""Apply payments to stored invoices."""

from __future__ import annotations

from decimal import Decimal

from loguru import logger
from opentelemetry import trace

from .domain.errors import InvalidInvoiceStateError, InvoiceNotFoundError
from .domain.models import Invoice, Payment
from .domain.outcomes import PaymentOutcome
from .store import InvoiceStore
from .tax import COMMERCIAL_TAX_RATE, updated_tax

tracer = trace.get_tracer(__name__)


class PaymentProcessor:
    """Validates a payment against its invoice and records it when accepted.

    Rejected payments leave the invoice untouched and are never saved.
    Calls against the same reference must not run concurrently.
    """

    def __init__(self, store: InvoiceStore, *, tax_rate: Decimal = COMMERCIAL_TAX_RATE) -> None:
        self.store = store
        self.tax_rate = tax_rate

    def process(self, payment: Payment) -> str:
        """Apply ``payment`` and return the outcome message.

        Raises:
            InvoiceNotFoundError: nothing in the store matches the reference.
            InvalidInvoiceStateError: the invoice has a zero amount but
                already carries payments.
        """

        with tracer.start_as_current_span("invoice.process_payment") as span:
            span.set_attribute("invoice.reference", payment.reference or "")
            span.set_attribute("payment.amount", str(payment.amount))
            outcome = self._process(payment)
            span.set_attribute("payment.outcome", outcome.value)
        return outcome.value

    def _process(self, payment: Payment) -> PaymentOutcome:
        invoice = self._resolve(payment)

        if invoice.amount == 0:
            logger.info("Invoice {} has nothing to pay", invoice.reference)
            return PaymentOutcome.NO_PAYMENT_NEEDED

        has_existing = invoice.has_payments
        rejection = self._rejection(invoice, payment, has_existing)
        if rejection is not None:
            logger.warning(
                "Rejected payment of {} for invoice {}: {}",
                payment.amount,
                invoice.reference,
                rejection.value,
            )
            return rejection

        outcome = self._apply(invoice, payment, has_existing)
        self.store.save(invoice)
        logger.info(
            "Invoice {}: {} (paid {} of {}, tax {})",
            invoice.reference,
            outcome.value,
            invoice.amount_paid,
            invoice.amount,
            invoice.tax_amount,
        )
        return outcome

    def _resolve(self, payment: Payment) -> Invoice:
        invoice = self.store.get(payment.reference)
        if invoice is None:
            logger.error("No invoice found for payment reference {!r}", payment.reference)
            raise InvoiceNotFoundError(payment.reference)
        if invoice.amount == 0 and invoice.has_payments:
            logger.error("Invoice {} has a zero amount but carries payments", invoice.reference)
            raise InvalidInvoiceStateError(invoice.reference)
        return invoice

    def _rejection(self, invoice: Invoice, payment: Payment, has_existing: bool) -> PaymentOutcome | None:
        if has_existing:
            # Guarded by the payment sum, not the payment count: zero-value
            # payments do not make an invoice "partially paid".
            total_paid = invoice.total_paid
            if total_paid != 0 and total_paid == invoice.amount:
                return PaymentOutcome.ALREADY_FULLY_PAID
            if total_paid != 0 and payment.amount > invoice.remaining:
                return PaymentOutcome.EXCEEDS_PARTIAL_REMAINING
        elif payment.amount > invoice.amount:
            return PaymentOutcome.EXCEEDS_INVOICE_AMOUNT
        return None

    def _apply(self, invoice: Invoice, payment: Payment, has_existing: bool) -> PaymentOutcome:
        if has_existing:
            is_full = payment.amount == invoice.remaining
            invoice.amount_paid += payment.amount
        else:
            is_full = payment.amount == invoice.amount
            invoice.amount_paid = payment.amount

        invoice.tax_amount = updated_tax(
            invoice.type,
            invoice.tax_amount,
            payment.amount,
            has_existing_payments=has_existing,
            rate=self.tax_rate,
        )
        invoice.payments.append(payment)
        return PaymentOutcome.for_payment(has_existing_payments=has_existing, is_full_payment=is_full)
