"""Data models for records, tables and fragments."""

from .financial_record import FinancialRecord
from .table_models import (
    BatchResult,
    RecordFailure,
    TableFragment,
    TableModel,
)

__all__ = [
    "FinancialRecord",
    "TableModel",
    "TableFragment",
    "RecordFailure",
    "BatchResult",
]
