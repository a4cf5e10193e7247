"""Mini README: Entry point CLI for Spendwise.

This script exposes a Typer CLI that starts the FastAPI ledger service and
offers offline commands (add, remove, summary, export) against the same
JSON store. Settings come from ``SPENDWISE_*`` environment variables unless a
store path is passed explicitly.
"""

from __future__ import annotations

from datetime import date
from pathlib import Path
from typing import Optional

import typer
import uvicorn

from spendwise.configuration import get_settings
from spendwise.export import CsvExporter
from spendwise.finance import (
    InvalidTransactionError,
    TransactionType,
    build_transaction,
    category_shares,
    next_transaction_id,
    remove_by_text,
    summarise,
)
from spendwise.logging_utils import configure_root_logger
from spendwise.storage import TransactionStore

cli = typer.Typer(help="Record expenses and income and review where the money goes.")


def _open_store(store_path: Optional[Path]) -> TransactionStore:
    settings = get_settings()
    configure_root_logger(settings.log_level)
    return TransactionStore(store_path or settings.storage_path, key=settings.storage_key)


@cli.command()
def run(
    host: str = typer.Option(None, help="Host interface to bind."),
    port: int = typer.Option(None, help="Port to listen on."),
    production: bool = typer.Option(
        False, help="Disable auto-reload; implied when SPENDWISE_ENVIRONMENT=production."
    ),
) -> None:
    """Start the FastAPI application using uvicorn."""

    settings = get_settings()
    effective_host = host or settings.interface_host
    effective_port = port or settings.interface_port
    configure_root_logger(settings.log_level)

    # Browsers cannot open the 0.0.0.0 wildcard, so point at loopback instead.
    browser_host = "127.0.0.1" if effective_host in {"0.0.0.0", "::"} else effective_host
    typer.echo(
        f"Starting Spendwise on {effective_host}:{effective_port} "
        f"using {settings.storage_path}.\n"
        f"Open http://{browser_host}:{effective_port}/docs to explore the API."
    )
    uvicorn.run(
        "spendwise.interface.web_app:create_application",
        host=effective_host,
        port=effective_port,
        factory=True,
        reload=not (production or settings.is_production),
    )


@cli.command()
def add(
    amount: str = typer.Argument(..., help="Amount as a positive number."),
    category: str = typer.Argument(..., help="Category label, e.g. Food or Salary."),
    transaction_type: str = typer.Option("expense", "--type", "-t", help="expense or income."),
    on: str = typer.Option(None, "--date", "-d", help="ISO date; defaults to today."),
    description: str = typer.Option("", "--description", "-m", help="Free-form note."),
    store_path: Optional[Path] = typer.Option(None, "--store", help="Override the store file."),
) -> None:
    """Record a transaction and save the ledger."""

    store = _open_store(store_path)
    ledger = store.load()
    try:
        transaction = build_transaction(
            next_transaction_id(ledger),
            occurred_on=on or date.today(),
            category=category,
            amount=amount,
            description=description,
            transaction_type=transaction_type,
        )
    except InvalidTransactionError as error:
        typer.echo(f"Invalid {error.field}: {error}", err=True)
        raise typer.Exit(code=1) from error
    ledger.add(transaction)
    store.save(ledger)
    typer.echo(
        f"Recorded {transaction.transaction_type.value} {transaction.transaction_id}: "
        f"{transaction.amount:.2f} in {transaction.category}"
    )


@cli.command()
def remove(
    transaction_id: str = typer.Argument(..., help="Identifier to delete."),
    store_path: Optional[Path] = typer.Option(None, "--store", help="Override the store file."),
) -> None:
    """Delete a transaction; unknown ids leave the ledger unchanged."""

    store = _open_store(store_path)
    ledger = store.load()
    removed = remove_by_text(ledger, transaction_id)
    if removed:
        store.save(ledger)
    typer.echo(f"Removed {removed} transaction(s); {len(ledger)} remaining.")


@cli.command()
def summary(
    limit: int = typer.Option(None, min=1, help="Number of top categories to show."),
    store_path: Optional[Path] = typer.Option(None, "--store", help="Override the store file."),
) -> None:
    """Print totals, ratios, top categories and monthly trend."""

    store = _open_store(store_path)
    ledger = store.load()
    stats = summarise(ledger)
    effective_limit = limit or get_settings().top_categories_limit

    typer.echo(f"Income:   {stats.total_income:.2f}")
    typer.echo(f"Expenses: {stats.total_expense:.2f}")
    typer.echo(f"Balance:  {stats.balance:.2f}")
    typer.echo(f"Savings rate: {stats.savings_rate:.1f}%")
    typer.echo(f"Expense to income: {stats.expense_to_income_ratio:.1f}%")
    typer.echo(f"Transactions: {stats.transaction_count}")
    typer.echo(f"Daily average expense: {stats.daily_average_expense:.2f}")

    shares = {share.category: share for share in category_shares(ledger, TransactionType.EXPENSE)}
    if shares:
        typer.echo("Top expense categories:")
        for category, amount in ledger.top_categories(TransactionType.EXPENSE, effective_limit):
            typer.echo(f"  {category}: {amount:.2f} ({shares[category].percentage:.1f}%)")

    months = ledger.monthly_data()
    if months:
        typer.echo("Monthly:")
        for key in sorted(months):
            bucket = months[key]
            typer.echo(f"  {key}: income {bucket['income']:.2f} expense {bucket['expense']:.2f}")


@cli.command()
def export(
    destination: Path = typer.Argument(None, help="CSV file to write."),
    store_path: Optional[Path] = typer.Option(None, "--store", help="Override the store file."),
) -> None:
    """Write every transaction, newest first, to a CSV file."""

    store = _open_store(store_path)
    ledger = store.load()
    settings = get_settings()
    target = destination or settings.data_directory / (settings.export_filename or "expenses.csv")
    CsvExporter().export(ledger.list_transactions(), target)
    typer.echo(f"Exported {len(ledger)} transactions to {target}")


if __name__ == "__main__":
    cli()
