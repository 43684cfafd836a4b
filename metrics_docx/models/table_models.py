"""Table, fragment and batch result models."""

from dataclasses import dataclass, field
from typing import List, Tuple

import pandas as pd
from docx.oxml.ns import qn
from docx.oxml.table import CT_Tbl
from pydantic import BaseModel, ConfigDict, Field


def _cell_text(tc) -> str:
    return "".join(t.text or "" for t in tc.iter(qn("w:t")))


@dataclass
class TableModel:
    """
    A built ``<w:tbl>`` element and the company it describes.

    Row 0 is the company header, row 1 the column headers, every following
    row one metric. Appending the element to a document body moves it there.
    """

    company_name: str
    element: CT_Tbl

    def grid(self) -> List[List[str]]:
        """Text of every cell, row by row."""
        return [
            [_cell_text(tc) for tc in tr.iterchildren(qn("w:tc"))]
            for tr in self.element.iterchildren(qn("w:tr"))
        ]

    @property
    def header_text(self) -> str:
        return self.grid()[0][0]

    @property
    def column_headers(self) -> List[str]:
        return self.grid()[1]

    @property
    def fiscal_years(self) -> List[str]:
        return self.column_headers[1:]

    def metric_rows(self) -> List[Tuple[str, List[str]]]:
        """(label, values) for every metric row, in row order."""
        return [(row[0], row[1:]) for row in self.grid()[2:]]

    def to_frame(self) -> pd.DataFrame:
        """
        Metric rows as a DataFrame.

        Returns:
            DataFrame with a label column followed by one column per fiscal year
        """
        return pd.DataFrame(self.grid()[2:], columns=self.column_headers)


class TableFragment(BaseModel):
    """Namespace-free markup of one table, ready for embedding."""

    model_config = ConfigDict(frozen=True)

    company_name: str = Field(..., description="Company the table describes")
    xml: str = Field(..., description="Canonical <w:tbl> markup")


class RecordFailure(BaseModel):
    """One input record that could not be turned into a table."""

    model_config = ConfigDict(frozen=True)

    index: int = Field(..., description="Position of the record in the input array")
    kind: str = Field(..., description="MalformedRecord, MissingIdentity or InvalidContent")
    message: str = Field(..., description="Human-readable reason")


@dataclass
class BatchResult:
    """Tables built from a payload plus the records that were skipped."""

    tables: List[TableModel] = field(default_factory=list)
    failures: List[RecordFailure] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.tables) + len(self.failures)
