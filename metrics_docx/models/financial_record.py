"""Per-company financial record model."""

import logging
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from metrics_docx.exceptions import MalformedRecordError, MissingIdentityError

logger = logging.getLogger(__name__)

COMPANY_NAME_FIELD = "company_name"
FISCAL_YEARS_FIELD = "fiscal_years"


def coerce_value_sequence(value: Any) -> Optional[List[str]]:
    """
    Best-effort conversion of a JSON value to a list of cell strings.

    Args:
        value: Raw JSON value

    Returns:
        List of strings, or None when the value is not a list of scalars
    """
    if not isinstance(value, list):
        return None

    cells = []
    for item in value:
        if item is None:
            cells.append("")
        elif isinstance(item, str):
            cells.append(item)
        elif isinstance(item, (int, float)):
            cells.append(str(item))
        else:
            return None
    return cells


def coerce_company_name(value: Any) -> Optional[str]:
    if value is None or isinstance(value, (dict, list)):
        return None
    return str(value)


class FinancialRecord(BaseModel):
    """One company's metrics across fiscal years."""

    company_name: str = Field(..., description="Entity name shown in the table header")
    fiscal_years: List[str] = Field(default_factory=list, description="Column headers, in input order")
    metrics: Dict[str, List[str]] = Field(
        default_factory=dict, description="Metric name to values aligned with fiscal_years"
    )

    @classmethod
    def from_json(cls, item: Any, index: Optional[int] = None) -> "FinancialRecord":
        """
        Build a record from one element of the input array.

        Missing or malformed fiscal_years and metric fields default to an
        empty sequence.

        Args:
            item: Parsed JSON value
            index: Position of the item in the input array

        Returns:
            FinancialRecord

        Raises:
            MalformedRecordError: item is not a JSON object
            MissingIdentityError: company_name is absent or not a scalar
        """
        if not isinstance(item, dict):
            raise MalformedRecordError(
                f"Data item is not an object (got {type(item).__name__})",
                index=index,
            )

        company_name = coerce_company_name(item.get(COMPANY_NAME_FIELD))
        if company_name is None:
            raise MissingIdentityError(
                f"Record has no usable '{COMPANY_NAME_FIELD}'",
                index=index,
                context={"fields": list(item.keys())},
            )

        fiscal_years = coerce_value_sequence(item.get(FISCAL_YEARS_FIELD))
        if fiscal_years is None:
            if FISCAL_YEARS_FIELD in item:
                logger.debug("Ignoring malformed %s for %s", FISCAL_YEARS_FIELD, company_name)
            fiscal_years = []

        metrics: Dict[str, List[str]] = {}
        for name, raw in item.items():
            if name in (COMPANY_NAME_FIELD, FISCAL_YEARS_FIELD):
                continue
            values = coerce_value_sequence(raw)
            if values is None:
                logger.debug("Ignoring malformed metric %r for %s", name, company_name)
                continue
            metrics[name] = values

        return cls(company_name=company_name, fiscal_years=fiscal_years, metrics=metrics)

    def metric_values(self, name: str) -> List[str]:
        """Values for one metric, or an empty list when absent."""
        return self.metrics.get(name, [])
