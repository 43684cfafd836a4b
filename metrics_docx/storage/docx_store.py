"""Word document assembly and persistence for generated tables."""

from __future__ import annotations

import io
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Callable

from docx import Document
from docx.document import Document as DocxDocument
from docx.oxml.ns import qn

from metrics_docx.config import DEFAULT_OUTPUT_DIRNAME, GeneratorConfig
from metrics_docx.models import TableModel

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def insert_table_element(document: DocxDocument, tbl) -> None:
    """Place a <w:tbl> at the end of the body, ahead of the trailing <w:sectPr>."""
    body = document.element.body
    sectPr = body.find(qn("w:sectPr"))
    if sectPr is not None:
        sectPr.addprevious(tbl)
    else:
        body.append(tbl)


class DocxStore:
    """Creates output documents and writes them under a timestamped name."""

    def __init__(
        self,
        output_dir: Path | None = None,
        clock: Callable[[], datetime] = utc_now,
        filename_prefix: str = "file-",
        timestamp_format: str = "%Y%m%d%H%M%S",
        extension: str = ".docx",
    ):
        self._output_dir = Path(output_dir) if output_dir is not None else None
        self.clock = clock
        self.filename_prefix = filename_prefix
        self.timestamp_format = timestamp_format
        self.extension = extension

    @classmethod
    def from_config(
        cls, config: GeneratorConfig, clock: Callable[[], datetime] = utc_now
    ) -> "DocxStore":
        return cls(
            output_dir=config.output_dir,
            clock=clock,
            filename_prefix=config.filename_prefix,
            timestamp_format=config.timestamp_format,
            extension=config.extension,
        )

    @property
    def output_dir(self) -> Path:
        """Configured directory, or <cwd>/result resolved at call time."""
        if self._output_dir is not None:
            return self._output_dir
        return Path.cwd() / DEFAULT_OUTPUT_DIRNAME

    def next_output_path(self) -> Path:
        """
        Path for the next document, named from the clock in UTC.

        A counter suffix is appended when a file with the timestamp name
        already exists, so runs within the same second keep separate files.
        """
        stamp = self.clock().astimezone(timezone.utc).strftime(self.timestamp_format)
        stem = f"{self.filename_prefix}{stamp}"
        path = self.output_dir / f"{stem}{self.extension}"
        counter = 1
        while path.exists():
            path = self.output_dir / f"{stem}-{counter}{self.extension}"
            counter += 1
        return path

    @staticmethod
    def new_document() -> DocxDocument:
        return Document()

    @staticmethod
    def append_table(document: DocxDocument, table: TableModel) -> None:
        """Move the table into the document body and follow it with a blank paragraph."""
        insert_table_element(document, table.element)
        document.add_paragraph()

    def save(self, document: DocxDocument) -> Path:
        """
        Serialize the document and write it in one call.

        Returns:
            Path of the written file

        Raises:
            OSError: output directory or file cannot be written
        """
        self.output_dir.mkdir(parents=True, exist_ok=True)
        path = self.next_output_path()

        buffer = io.BytesIO()
        document.save(buffer)
        path.write_bytes(buffer.getvalue())

        logger.info("Saved %s", path)
        return path
