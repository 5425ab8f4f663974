"""Ingestion of POS sales exports into SalesRecord values."""

from pos_insights.ingest.loader import LoadReport, load_records, records_from_frame

__all__ = ["LoadReport", "load_records", "records_from_frame"]
