"""Parsers for metric payloads."""

from .payload_parser import PayloadParser

__all__ = [
    "PayloadParser",
]
