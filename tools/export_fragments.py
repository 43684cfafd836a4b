"""Export canonical table markup fragments for embedding in other documents."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from metrics_docx.config import configure_logging
from metrics_docx.core.engine import DocxGenerator


def main() -> int:
    parser = argparse.ArgumentParser(description="Export <w:tbl> fragments from a JSON metrics payload.")
    parser.add_argument("--input", required=True, help="Path to a JSON array of company records")
    parser.add_argument(
        "--out",
        default=None,
        help="Output JSON path (default: print to stdout)",
    )
    parser.add_argument("--log-level", default="WARNING", help="Logging level (DEBUG, INFO, WARNING)")
    args = parser.parse_args()

    configure_logging(args.log_level)

    payload = Path(args.input).read_text(encoding="utf-8")
    fragments = DocxGenerator().generate_table_xmls(payload)
    text = json.dumps([fragment.model_dump() for fragment in fragments], indent=2)

    if args.out:
        out_path = Path(args.out)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(text, encoding="utf-8")
        print(f"Exported {len(fragments)} fragments to {out_path}")
    else:
        print(text)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
