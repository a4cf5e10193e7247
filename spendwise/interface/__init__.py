"""Mini README: Interactive interfaces (web/CLI) for Spendwise.

Exports the FastAPI application factory serving the ledger dashboard. The
Typer CLI in ``main_tracker.py`` launches it and offers offline commands.
"""

from .web_app import create_application

__all__ = ["create_application"]
