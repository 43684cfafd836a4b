"""Core table building, canonicalization and batch generation."""

from .canonicalizer import canonicalize_markup, table_to_fragment, table_to_xml
from .engine import DocxGenerator
from .table_builder import TableBuilder

__all__ = [
    "DocxGenerator",
    "TableBuilder",
    "canonicalize_markup",
    "table_to_fragment",
    "table_to_xml",
]
