"""Demo run of the payment processor over a few seeded invoices."""

from decimal import Decimal

from loguru import logger

from invoicepay.domain.models import Invoice, InvoiceType, Payment
from invoicepay.logging_setup import setup_logging
from invoicepay.processor import PaymentProcessor
from invoicepay.settings import get_settings
from invoicepay.store import InMemoryInvoiceStore


def main() -> None:
    """Pay off a commercial invoice in two instalments and try an overpayment."""

    settings = get_settings()
    setup_logging(settings.log_level)

    store = InMemoryInvoiceStore(
        [
            Invoice(reference="INV-100", amount=Decimal("100"), type=InvoiceType.COMMERCIAL),
            Invoice(reference="INV-200", amount=Decimal("40")),
        ]
    )
    processor = PaymentProcessor(store, tax_rate=settings.commercial_tax_rate)

    for payment in (
        Payment("INV-100", Decimal("70")),
        Payment("INV-100", Decimal("30")),
        Payment("INV-200", Decimal("50")),
    ):
        logger.info("{} {}: {}", payment.reference, payment.amount, processor.process(payment))

    invoice = store.get("INV-100")
    logger.info("Final state: {}", invoice)


if __name__ == "__main__":
    main()
