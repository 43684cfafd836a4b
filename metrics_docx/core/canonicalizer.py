"""Canonical, embeddable markup for built tables."""

import re

from lxml import etree

from metrics_docx.models import TableFragment, TableModel

INTER_TAG_WHITESPACE = re.compile(r">\s+<")
TAG = re.compile(r"<[^<>]+>")
NAMESPACE_DECLARATION = re.compile(r"""\s+xmlns(?::[\w.-]+)?\s*=\s*(?:"[^"]*"|'[^']*')""")


def serialize_table(table: TableModel) -> str:
    """Serialize the <w:tbl> element without indentation or declaration."""
    return etree.tostring(table.element, encoding="unicode", pretty_print=False)


def _strip_namespace_declarations(match: re.Match) -> str:
    return NAMESPACE_DECLARATION.sub("", match.group(0))


def canonicalize_markup(markup: str) -> str:
    """
    Normalize serialized table markup for embedding in a host document.

    Whitespace between adjacent tags is removed and every default or
    prefixed namespace declaration is dropped from every tag. Text content
    is left untouched. Applying this twice gives the same string.

    Args:
        markup: Serialized XML

    Returns:
        Single-line markup without namespace declarations
    """
    markup = INTER_TAG_WHITESPACE.sub("><", markup)
    markup = TAG.sub(_strip_namespace_declarations, markup)
    return markup.strip()


def table_to_xml(table: TableModel) -> str:
    return canonicalize_markup(serialize_table(table))


def table_to_fragment(table: TableModel) -> TableFragment:
    return TableFragment(company_name=table.company_name, xml=table_to_xml(table))
