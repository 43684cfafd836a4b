"""Generate one Word document with a metrics table per company."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from metrics_docx.config import GeneratorConfig, configure_logging
from metrics_docx.core.engine import DocxGenerator


def main() -> int:
    parser = argparse.ArgumentParser(description="Render a JSON metrics payload as a Word document.")
    parser.add_argument("--input", required=True, help="Path to a JSON array of company records")
    parser.add_argument(
        "--out-dir",
        default=None,
        help="Output directory (default: ./result)",
    )
    parser.add_argument("--log-level", default="INFO", help="Logging level (DEBUG, INFO, WARNING)")
    args = parser.parse_args()

    config = GeneratorConfig(
        output_dir=Path(args.out_dir) if args.out_dir else None,
        log_level=args.log_level,
    )
    configure_logging(config.log_level)

    payload = Path(args.input).read_text(encoding="utf-8")
    path = DocxGenerator(config).generate_and_save_docx_file(payload)
    print(f"Document written to {path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
