"""Tests for record coercion and table building."""

import pytest
from docx.oxml.ns import qn

from metrics_docx.config import METRIC_SCHEDULE
from metrics_docx.core.table_builder import TableBuilder
from metrics_docx.exceptions import MalformedRecordError, MissingIdentityError
from metrics_docx.models import FinancialRecord


ACME = {
    "company_name": "Acme",
    "fiscal_years": ["2023", "2024"],
    "Revenue": ["100", "120"],
}


class TestFinancialRecord:
    """Tests for best-effort record coercion."""

    def test_from_json_reads_fields(self):
        """Known fields are read and metrics keep their values."""
        record = FinancialRecord.from_json(ACME)
        assert record.company_name == "Acme"
        assert record.fiscal_years == ["2023", "2024"]
        assert record.metric_values("Revenue") == ["100", "120"]
        assert record.metric_values("Net Profit") == []

    def test_not_an_object_is_malformed(self):
        """Array elements that are not objects are rejected."""
        with pytest.raises(MalformedRecordError) as excinfo:
            FinancialRecord.from_json(["Acme"], index=3)
        assert excinfo.value.index == 3
        assert excinfo.value.kind == "MalformedRecord"

    @pytest.mark.parametrize("item", [{"fiscal_years": ["2023"]}, {"company_name": None}, {"company_name": {}}])
    def test_missing_company_name(self, item):
        """company_name must be present and scalar."""
        with pytest.raises(MissingIdentityError):
            FinancialRecord.from_json(item)

    def test_numeric_company_name_is_converted(self):
        """Scalar company names are converted to strings."""
        assert FinancialRecord.from_json({"company_name": 42}).company_name == "42"

    def test_malformed_fields_default_to_empty(self):
        """Non-list or nested values are treated as absent."""
        record = FinancialRecord.from_json(
            {
                "company_name": "Acme",
                "fiscal_years": "2023",
                "Revenue": {"2023": "100"},
                "Net Profit": [["1"]],
            }
        )
        assert record.fiscal_years == []
        assert record.metric_values("Revenue") == []
        assert record.metric_values("Net Profit") == []

    def test_boolean_scalars_are_stringified(self):
        """Booleans are rendered like other scalars in names and value lists."""
        record = FinancialRecord.from_json(
            {"company_name": True, "fiscal_years": ["2023", "2024"], "Revenue": ["100", True]}
        )
        assert record.company_name == "True"
        assert record.metric_values("Revenue") == ["100", "True"]

    def test_scalar_items_are_stringified(self):
        """Numbers become strings and nulls become empty cells."""
        record = FinancialRecord.from_json(
            {"company_name": "Acme", "fiscal_years": [2023, 2024], "Revenue": [100, None]}
        )
        assert record.fiscal_years == ["2023", "2024"]
        assert record.metric_values("Revenue") == ["100", ""]


class TestTableBuilder:
    """Tests for the fixed table layout."""

    @pytest.fixture
    def builder(self):
        """Create builder instance."""
        return TableBuilder()

    def test_acme_layout(self, builder):
        """Header, column headers and metric rows follow the schedule."""
        grid = builder.build_from_json(ACME).grid()

        assert grid[0] == ["Acme"]
        assert grid[1] == ["Financial Metrics", "2023", "2024"]
        assert grid[2] == ["Revenue", "100", "120"]
        assert len(grid) == 2 + len(METRIC_SCHEDULE)
        for name, row in zip(METRIC_SCHEDULE[1:], grid[3:]):
            assert row == [name, "", ""]

    def test_every_metric_row_has_label_plus_year_cells(self, builder):
        """Data rows always have N+1 cells, whatever the value lengths."""
        table = builder.build_from_json(
            {
                "company_name": "Globex",
                "fiscal_years": ["2021", "2022", "2023"],
                "Revenue": ["1"],
                "Net Profit": ["1", "2", "3", "4"],
                "Other Income": [],
            }
        )
        for label, values in table.metric_rows():
            assert len(values) == 3

        rows = dict(table.metric_rows())
        assert rows["Revenue"] == ["1", "", ""]
        assert rows["Net Profit"] == ["1", "2", "3"]
        assert rows["Other Income"] == ["", "", ""]

    def test_fiscal_years_kept_in_input_order(self, builder):
        """Years are neither sorted nor de-duplicated."""
        table = builder.build_from_json(
            {"company_name": "Initech", "fiscal_years": ["2024", "2022", "2024"]}
        )
        assert table.fiscal_years == ["2024", "2022", "2024"]

    def test_no_fiscal_years_gives_label_column_only(self, builder):
        """Without fiscal years only the label column remains."""
        table = builder.build_from_json({"company_name": "Hooli", "Revenue": ["5"]})
        grid = table.grid()
        assert grid[1] == ["Financial Metrics"]
        assert all(len(row) == 1 for row in grid[2:])

    def test_table_width_is_full(self, builder):
        """The table declares a 100% width."""
        table = builder.build_from_json(ACME)
        tblW = table.element.find(qn("w:tblPr")).find(qn("w:tblW"))
        assert tblW.get(qn("w:w")) == "5000"
        assert tblW.get(qn("w:type")) == "pct"

    def test_header_spans_all_columns(self, builder):
        """The company header cell spans the label and year columns."""
        table = builder.build_from_json(ACME)
        first_row = table.element.find(qn("w:tr"))
        grid_span = first_row.find(qn("w:tc")).find(qn("w:tcPr")).find(qn("w:gridSpan"))
        assert grid_span.get(qn("w:val")) == "3"
        assert len(table.element.find(qn("w:tblGrid"))) == 3

    def test_custom_schedule(self):
        """The metric schedule is configuration."""
        builder = TableBuilder(metric_schedule=["Net Profit", "Revenue"])
        table = builder.build_from_json(ACME)
        assert [label for label, _ in table.metric_rows()] == ["Net Profit", "Revenue"]

    def test_to_frame(self, builder):
        """Metric rows convert to a DataFrame with one column per year."""
        frame = builder.build_from_json(ACME).to_frame()
        assert list(frame.columns) == ["Financial Metrics", "2023", "2024"]
        assert len(frame) == len(METRIC_SCHEDULE)
        assert frame.iloc[0].tolist() == ["Revenue", "100", "120"]
