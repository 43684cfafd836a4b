"""Parser for JSON metric payloads."""

import json
from pathlib import Path
from typing import Any, List

from metrics_docx.exceptions import InvalidPayloadError


class PayloadParser:
    """
    Parses a JSON array of per-company metric records.

    Items are kept as raw JSON values; turning them into records is left to
    the table builder so that one bad item never hides the others.
    """

    def __init__(self, json_string: str):
        """
        Initialize parser with the payload text.

        Args:
            json_string: Text holding a JSON array

        Raises:
            InvalidPayloadError: text is not valid JSON or not an array
        """
        self.json_string = json_string
        self.items: List[Any] = []
        self._parse()

    @classmethod
    def from_file(cls, file_path: Path) -> "PayloadParser":
        return cls(Path(file_path).read_text(encoding="utf-8"))

    def _parse(self):
        try:
            data = json.loads(self.json_string, parse_int=str)
        except (TypeError, ValueError) as exc:
            raise InvalidPayloadError(f"Payload is not valid JSON: {exc}") from exc

        if not isinstance(data, list):
            raise InvalidPayloadError(
                f"Payload must be a JSON array, got {type(data).__name__}",
                context={"type": type(data).__name__},
            )
        self.items = data

    def get_all_items(self) -> List[Any]:
        """
        Get all array elements.

        Returns:
            Copy of the parsed items, in input order
        """
        return list(self.items)

    def get_company_names(self) -> List[str]:
        """
        Get the company_name of every object item that has one.

        Returns:
            Company names, in input order
        """
        return [
            str(item["company_name"])
            for item in self.items
            if isinstance(item, dict) and item.get("company_name") is not None
        ]

    def __len__(self) -> int:
        return len(self.items)
