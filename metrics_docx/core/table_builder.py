"""Builds one Word table per financial record."""

from typing import Any, Iterable, Optional, Sequence

from docx.oxml import OxmlElement
from docx.oxml.ns import qn

from metrics_docx.config import LABEL_COLUMN_HEADER, METRIC_SCHEDULE, TABLE_WIDTH_PCT
from metrics_docx.models import FinancialRecord, TableModel


class TableBuilder:
    """
    Maps a FinancialRecord onto a fixed table layout.

    The table has a company header row, a column-header row
    ("Financial Metrics" followed by the fiscal years) and one row per
    scheduled metric. Every metric row has exactly one value cell per
    fiscal year; missing values are empty cells.
    """

    def __init__(
        self,
        metric_schedule: Sequence[str] = METRIC_SCHEDULE,
        table_width_pct: int = TABLE_WIDTH_PCT,
    ):
        self.metric_schedule = tuple(metric_schedule)
        self.table_width_pct = table_width_pct

    @staticmethod
    def _text_cell(text: str):
        tc = OxmlElement("w:tc")
        p = OxmlElement("w:p")
        r = OxmlElement("w:r")
        t = OxmlElement("w:t")
        t.text = text
        if text != text.strip():
            t.set(qn("xml:space"), "preserve")
        r.append(t)
        p.append(r)
        tc.append(p)
        return tc

    def _row(self, texts: Iterable[str]):
        tr = OxmlElement("w:tr")
        for text in texts:
            tr.append(self._text_cell(text))
        return tr

    def _table_properties(self):
        tblPr = OxmlElement("w:tblPr")
        tblW = OxmlElement("w:tblW")
        tblW.set(qn("w:w"), str(self.table_width_pct))
        tblW.set(qn("w:type"), "pct")
        tblPr.append(tblW)
        return tblPr

    @staticmethod
    def _table_grid(column_count: int):
        tblGrid = OxmlElement("w:tblGrid")
        for _ in range(column_count):
            tblGrid.append(OxmlElement("w:gridCol"))
        return tblGrid

    def _header_row(self, company_name: str, column_count: int):
        tr = OxmlElement("w:tr")
        tc = self._text_cell(company_name)

        tcPr = OxmlElement("w:tcPr")
        tcW = OxmlElement("w:tcW")
        tcW.set(qn("w:w"), "0")
        tcW.set(qn("w:type"), "auto")
        tcPr.append(tcW)
        if column_count > 1:
            gridSpan = OxmlElement("w:gridSpan")
            gridSpan.set(qn("w:val"), str(column_count))
            tcPr.append(gridSpan)
        tc.insert(0, tcPr)

        tr.append(tc)
        return tr

    def build(self, record: FinancialRecord) -> TableModel:
        """
        Build the table for one record.

        Args:
            record: Coerced financial record

        Returns:
            TableModel owning a detached <w:tbl> element
        """
        fiscal_years = record.fiscal_years
        column_count = len(fiscal_years) + 1

        tbl = OxmlElement("w:tbl")
        tbl.append(self._table_properties())
        tbl.append(self._table_grid(column_count))
        tbl.append(self._header_row(record.company_name, column_count))
        tbl.append(self._row([LABEL_COLUMN_HEADER, *fiscal_years]))

        for metric in self.metric_schedule:
            values = record.metric_values(metric)
            cells = [values[i] if i < len(values) else "" for i in range(len(fiscal_years))]
            tbl.append(self._row([metric, *cells]))

        return TableModel(company_name=record.company_name, element=tbl)

    def build_from_json(self, item: Any, index: Optional[int] = None) -> TableModel:
        """
        Coerce one raw JSON item and build its table.

        Raises:
            MalformedRecordError: item is not a JSON object
            MissingIdentityError: item has no usable company_name
        """
        return self.build(FinancialRecord.from_json(item, index=index))
