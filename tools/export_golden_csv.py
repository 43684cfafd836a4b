"""Export one company's built table to a CSV for golden regression approval."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from metrics_docx.core.engine import DocxGenerator
from metrics_docx.parsers import PayloadParser


def main() -> int:
    parser = argparse.ArgumentParser(description="Export a built metrics table to golden CSV.")
    parser.add_argument("--input", required=True, help="Path to a JSON array of company records")
    parser.add_argument("--company", required=True, help="company_name of the record to export")
    parser.add_argument(
        "--out",
        default=None,
        help="Output CSV path (default: golden/<company>.csv)",
    )
    args = parser.parse_args()

    payload = PayloadParser.from_file(Path(args.input))
    result = DocxGenerator().build_tables(payload.get_all_items())
    matches = [table for table in result.tables if table.company_name == args.company]
    if not matches:
        known = ", ".join(payload.get_company_names()) or "none"
        raise SystemExit(f"No table built for {args.company!r} (companies in payload: {known})")

    safe_name = "".join(ch if ch.isalnum() else "_" for ch in args.company)
    out_path = Path(args.out) if args.out else Path("golden") / f"{safe_name}.csv"
    out_path.parent.mkdir(parents=True, exist_ok=True)

    table = matches[0].to_frame()
    table.to_csv(out_path, index=False)
    print(f"Exported {len(table)} rows to {out_path}")
    print("Now compare this CSV to the source figures manually before approving it as a golden file.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
