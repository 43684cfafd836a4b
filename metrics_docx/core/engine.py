"""Batch generation of Word tables from metric payloads."""

import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Callable, Dict, Iterable, List, Optional

import pandas as pd

from metrics_docx.config import GeneratorConfig
from metrics_docx.core.canonicalizer import table_to_fragment
from metrics_docx.core.table_builder import TableBuilder
from metrics_docx.exceptions import RecordError
from metrics_docx.models import BatchResult, FinancialRecord, RecordFailure, TableFragment
from metrics_docx.parsers import PayloadParser
from metrics_docx.storage import DocxStore, utc_now

logger = logging.getLogger(__name__)


class DocxGenerator:
    """
    Turns a JSON array of company records into a Word document or into
    embeddable table fragments.

    Each record is built on its own; a record that cannot be built is
    reported and skipped, never aborting the batch.
    """

    def __init__(
        self,
        config: Optional[GeneratorConfig] = None,
        store: Optional[DocxStore] = None,
        clock: Callable[[], datetime] = utc_now,
    ):
        """
        Initialize the generator.

        Args:
            config: Schedule, width and output settings
            store: Document store (default: built from config and clock)
            clock: UTC time source used for output file names
        """
        self.config = config or GeneratorConfig()
        self.builder = TableBuilder(
            metric_schedule=self.config.metric_schedule,
            table_width_pct=self.config.table_width_pct,
        )
        self.store = store or DocxStore.from_config(self.config, clock=clock)

    def build_tables(self, items: Iterable[Any]) -> BatchResult:
        """
        Build one table per item, collecting failures instead of raising.

        Args:
            items: Raw JSON values from the payload array

        Returns:
            BatchResult with tables in input order and one failure per skipped item
        """
        result = BatchResult()
        for index, item in enumerate(items):
            try:
                result.tables.append(self.builder.build_from_json(item, index=index))
            except RecordError as exc:
                result.failures.append(RecordFailure(index=index, kind=exc.kind, message=str(exc)))
            except ValueError as exc:
                # lxml rejects text XML cannot carry, e.g. control characters
                result.failures.append(
                    RecordFailure(index=index, kind="InvalidContent", message=str(exc))
                )
        return result

    def generate_and_save_docx_file(self, json_string: str) -> Path:
        """
        Build every table into one document and write it to the output directory.

        Args:
            json_string: Text holding a JSON array of records

        Returns:
            Path of the written document

        Raises:
            InvalidPayloadError: input is not a JSON array
            OSError: document cannot be written
        """
        items = PayloadParser(json_string).get_all_items()
        result = self.build_tables(items)

        for failure in result.failures:
            logger.warning(
                "Skipping record %d (%s): %s", failure.index, failure.kind, failure.message
            )

        document = self.store.new_document()
        for table in result.tables:
            self.store.append_table(document, table)

        path = self.store.save(document)
        logger.info(
            "Wrote %d of %d tables to %s", len(result.tables), result.total, path
        )
        return path

    def generate_table_xmls(self, json_string: str) -> List[TableFragment]:
        """
        Build canonical table markup for every record that can be built.

        Args:
            json_string: Text holding a JSON array of records

        Returns:
            One TableFragment per successful record, in input order

        Raises:
            InvalidPayloadError: input is not a JSON array
        """
        items = PayloadParser(json_string).get_all_items()
        result = self.build_tables(items)
        if result.failures:
            logger.debug("Skipped %d records without fragments", len(result.failures))
        return [table_to_fragment(table) for table in result.tables]

    def get_metric_coverage(self, item: Any) -> Dict[str, object]:
        """
        Return how many scheduled metric rows of one record carry a value.

        Raises:
            MalformedRecordError: item is not a JSON object
            MissingIdentityError: item has no usable company_name
        """
        record = FinancialRecord.from_json(item)
        table = self.builder.build(record)

        rows = table.metric_rows()
        missing = [label for label, values in rows if not any(values)]
        rows_total = len(rows)
        rows_with_values = rows_total - len(missing)
        return {
            "company_name": record.company_name,
            "rows_total": rows_total,
            "rows_with_values": rows_with_values,
            "rows_missing_values": len(missing),
            "coverage_ratio": (rows_with_values / rows_total) if rows_total else 0.0,
            "missing_metrics": missing,
        }

    def tables_to_frame(self, json_string: str) -> pd.DataFrame:
        """
        Flatten every buildable table into one long-format DataFrame.

        Returns:
            DataFrame with company_name, metric, fiscal_year and value columns
        """
        items = PayloadParser(json_string).get_all_items()
        result = self.build_tables(items)

        rows = []
        for table in result.tables:
            fiscal_years = table.fiscal_years
            for metric, values in table.metric_rows():
                for fiscal_year, value in zip(fiscal_years, values):
                    rows.append(
                        {
                            "company_name": table.company_name,
                            "metric": metric,
                            "fiscal_year": fiscal_year,
                            "value": value,
                        }
                    )
        return pd.DataFrame(rows, columns=["company_name", "metric", "fiscal_year", "value"])
