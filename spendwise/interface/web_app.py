"""Mini README: FastAPI service exposing the Spendwise ledger.

Structure:
    * create_application - application factory wiring routes to one ledger.
    * _resolve_type - maps type path and query values to TransactionType.

Each application instance owns a single ledger loaded from the transaction
store at startup; every add or delete is written straight back to the store.
Dashboard, history, breakdown, ranking, monthly trend and CSV routes all read
aggregates computed fresh from the ledger.
"""

from __future__ import annotations

from typing import Optional

from fastapi import FastAPI, Form, HTTPException, Query, Response
from fastapi.responses import JSONResponse

from ..configuration import get_settings
from ..export import CsvExporter
from ..finance import (
    InvalidTransactionError,
    TransactionType,
    build_transaction,
    category_shares,
    next_transaction_id,
    remove_by_text,
    summarise,
)
from ..finance.ledger import parse_date
from ..logging_utils import get_logger
from ..storage import StorageError, TransactionStore

LOGGER = get_logger(__name__)


def _resolve_type(value: str) -> TransactionType:
    """Translate a path or query value into a transaction type or fail with 400."""

    try:
        return TransactionType.from_str(value)
    except ValueError as error:
        raise HTTPException(status_code=400, detail=str(error)) from error


def create_application(store: Optional[TransactionStore] = None) -> FastAPI:
    """Create the FastAPI application bound to one persisted ledger."""

    settings = get_settings()
    app = FastAPI(title="Spendwise Ledger", version="0.1.0")
    store = store or TransactionStore(settings.storage_path, key=settings.storage_key)
    ledger = store.load()
    exporter = CsvExporter()
    LOGGER.info("Serving ledger from %s with %s transactions", store.path, len(ledger))

    def persist() -> None:
        try:
            store.save(ledger)
        except (OSError, StorageError) as error:
            LOGGER.error("Failed to persist ledger to %s: %s", store.path, error)
            raise HTTPException(status_code=500, detail="Could not save transactions") from error

    @app.get("/")
    async def dashboard() -> JSONResponse:
        """Return headline statistics and both category breakdowns."""

        summary = summarise(ledger)
        return JSONResponse(
            {
                "summary": summary.as_dict(),
                "expense_breakdown": [
                    share.as_dict() for share in category_shares(ledger, TransactionType.EXPENSE)
                ],
                "income_breakdown": [
                    share.as_dict() for share in category_shares(ledger, TransactionType.INCOME)
                ],
            }
        )

    @app.get("/transactions")
    async def list_transactions(
        type_filter: str = Query("all", alias="type"),
        category: str = Query("all"),
    ) -> JSONResponse:
        """Return the filtered history, newest first."""

        transaction_type = None if type_filter == "all" else _resolve_type(type_filter)
        transactions = ledger.list_transactions(transaction_type, category)
        LOGGER.debug(
            "Listing %s transactions (type=%s category=%s)", len(transactions), type_filter, category
        )
        return JSONResponse(
            {
                "transactions": [transaction.as_record() for transaction in transactions],
                "categories": ledger.categories(transaction_type),
            }
        )

    @app.get("/transactions/range")
    async def transactions_in_range(start: str = Query(...), end: str = Query(...)) -> JSONResponse:
        """Return transactions dated between ``start`` and ``end`` inclusive."""

        try:
            start_date, end_date = parse_date(start), parse_date(end)
        except ValueError as error:
            raise HTTPException(status_code=400, detail=f"Invalid date range: {error}") from error
        transactions = ledger.transactions_in_range(start_date, end_date)
        return JSONResponse({"transactions": [transaction.as_record() for transaction in transactions]})

    @app.post("/transactions", status_code=201)
    async def add_transaction(
        date: str = Form(...),
        category: str = Form(...),
        amount: str = Form(...),
        description: str = Form(""),
        type_field: str = Form("expense", alias="type"),
    ) -> JSONResponse:
        """Validate form input, record the transaction and persist the ledger."""

        try:
            transaction = build_transaction(
                next_transaction_id(ledger),
                occurred_on=date,
                category=category,
                amount=amount,
                description=description,
                transaction_type=type_field,
            )
        except InvalidTransactionError as error:
            LOGGER.warning("Rejected transaction input (%s): %s", error.field, error)
            raise HTTPException(status_code=400, detail={"field": error.field, "message": str(error)}) from error
        ledger.add(transaction)
        persist()
        return JSONResponse(transaction.as_record(), status_code=201)

    @app.delete("/transactions/{transaction_id}")
    async def delete_transaction(transaction_id: str) -> JSONResponse:
        """Delete matching transactions; unknown ids succeed without changes."""

        removed = remove_by_text(ledger, transaction_id)
        if removed:
            persist()
        return JSONResponse({"removed": removed, "remaining": len(ledger)})

    @app.get("/breakdown/{transaction_type}")
    async def breakdown(transaction_type: str) -> JSONResponse:
        kind = _resolve_type(transaction_type)
        return JSONResponse(
            {
                "type": kind.value,
                "total": ledger.total_by_type(kind),
                "categories": [share.as_dict() for share in category_shares(ledger, kind)],
            }
        )

    @app.get("/top-categories/{transaction_type}")
    async def top_categories(
        transaction_type: str,
        limit: Optional[int] = Query(None, ge=1),
    ) -> JSONResponse:
        """Return the highest grossing categories for the type."""

        kind = _resolve_type(transaction_type)
        effective_limit = limit or settings.top_categories_limit
        ranked = ledger.top_categories(kind, effective_limit)
        return JSONResponse(
            {
                "type": kind.value,
                "limit": effective_limit,
                "categories": [[category, amount] for category, amount in ranked],
            }
        )

    @app.get("/monthly")
    async def monthly() -> JSONResponse:
        """Return income and expense totals per month, oldest month first."""

        months = ledger.monthly_data()
        return JSONResponse({"months": {key: months[key] for key in sorted(months)}})

    @app.get("/daily-average/{transaction_type}")
    async def daily_average(transaction_type: str) -> JSONResponse:
        kind = _resolve_type(transaction_type)
        return JSONResponse({"type": kind.value, "daily_average": ledger.daily_average(kind)})

    @app.get("/export.csv")
    async def export_csv() -> Response:
        """Download every transaction as CSV, newest first."""

        content = exporter.render(ledger.list_transactions())
        filename = settings.export_filename or "expenses.csv"
        LOGGER.info("Serving CSV export with %s transactions", len(ledger))
        return Response(
            content=content,
            media_type="text/csv",
            headers={"Content-Disposition": f'attachment; filename="{filename}"'},
        )

    return app
