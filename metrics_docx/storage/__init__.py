"""Output document persistence."""

from .docx_store import DocxStore, insert_table_element, utc_now

__all__ = [
    "DocxStore",
    "insert_table_element",
    "utc_now",
]
