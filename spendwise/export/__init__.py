"""Mini README: Export helpers producing downloadable transaction tables."""

from .csv_exporter import CSV_HEADER, CsvExporter

__all__ = ["CSV_HEADER", "CsvExporter"]
