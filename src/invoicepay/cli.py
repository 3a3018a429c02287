"""Command line entry point: apply a payment to invoices kept in a JSON file."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from pathlib import Path

import typer
from dotenv import load_dotenv
from loguru import logger
from pydantic import ValidationError

from .domain.errors import PaymentProcessingError
from .domain.models import Invoice, Payment
from .domain.outcomes import PaymentOutcome
from .logging_setup import setup_logging
from .otel import setup_otel
from .processor import PaymentProcessor
from .records import dump_invoices, load_invoices
from .settings import get_settings
from .store import InMemoryInvoiceStore

app = typer.Typer(help="Apply payments to invoices.", no_args_is_help=True)

InvoicesOption = typer.Option(..., "--invoices", "-i", exists=True, dir_okay=False, help="JSON file with invoices.")


@app.callback()
def init() -> None:
    load_dotenv()
    settings = get_settings()
    setup_logging(settings.log_level)
    setup_otel(settings)


def _parse_amount(raw: str) -> Decimal:
    try:
        value = Decimal(raw)
    except InvalidOperation:
        raise typer.BadParameter(f"not a decimal amount: {raw!r}") from None
    if not value.is_finite():
        raise typer.BadParameter(f"amount must be a finite number: {raw!r}")
    return value


def _load(path: Path) -> list[Invoice]:
    try:
        return load_invoices(path)
    except ValidationError as exc:
        typer.echo(f"error: invalid invoices file {path}:\n{exc}", err=True)
        raise typer.Exit(code=1) from exc


@app.command()
def pay(
    reference: str = typer.Argument(..., help="Invoice reference."),
    amount: str = typer.Argument(..., help="Payment amount, e.g. 12.50."),
    invoices: Path = InvoicesOption,
) -> None:
    """Apply a payment and print the outcome."""

    settings = get_settings()
    loaded = _load(invoices)
    store = InMemoryInvoiceStore(loaded, fallback_to_last=settings.store_fallback_to_last)
    processor = PaymentProcessor(store, tax_rate=settings.commercial_tax_rate)
    payment = Payment(reference=reference, amount=_parse_amount(amount))
    try:
        message = processor.process(payment)
    except PaymentProcessingError as exc:
        typer.echo(f"error: {exc}", err=True)
        raise typer.Exit(code=1) from exc

    if PaymentOutcome(message).is_accepted:
        dump_invoices(invoices, loaded)
        logger.debug("Wrote {} invoices to {}", len(loaded), invoices)
    typer.echo(message)


@app.command()
def show(
    reference: str = typer.Argument(..., help="Invoice reference."),
    invoices: Path = InvoicesOption,
) -> None:
    """Print the totals of one invoice."""

    store = InMemoryInvoiceStore(_load(invoices))
    invoice = store.get(reference)
    if invoice is None:
        typer.echo(f"error: no invoice {reference!r}", err=True)
        raise typer.Exit(code=1)
    typer.echo(
        f"{invoice.reference} [{invoice.type.value}] amount={invoice.amount} "
        f"paid={invoice.amount_paid} tax={invoice.tax_amount} payments={len(invoice.payments)}"
    )


if __name__ == "__main__":
    app()
