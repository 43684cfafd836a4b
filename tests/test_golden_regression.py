"""Golden regression checks for repeatable table layouts.

How to use:
1. List payloads and companies to verify in `golden/manifest.json`.
2. Export approved tables with `tools/export_golden_csv.py` into `golden/`.
3. Run `pytest tests/test_golden_regression.py -v`.

The test skips automatically when no manifest exists.
"""

from __future__ import annotations

import json
from pathlib import Path

import pandas as pd
import pytest

from metrics_docx.core.engine import DocxGenerator
from metrics_docx.parsers import PayloadParser


PROJECT_ROOT = Path(__file__).resolve().parents[1]
GOLDEN_DIR = PROJECT_ROOT / "golden"
MANIFEST_PATH = GOLDEN_DIR / "manifest.json"


def _normalize(df: pd.DataFrame) -> pd.DataFrame:
    view = df.copy()
    view.columns = [str(c).strip() for c in view.columns]
    for col in view.columns:
        view[col] = view[col].fillna("").astype(str).str.strip()
    return view.reset_index(drop=True)


@pytest.mark.skipif(not MANIFEST_PATH.exists(), reason="No golden manifest configured yet.")
def test_golden_metric_tables():
    manifest = json.loads(MANIFEST_PATH.read_text(encoding="utf-8"))
    generator = DocxGenerator()

    cases = manifest.get("cases", [])
    assert cases, "Golden manifest exists but has no cases."

    failures: list[str] = []

    for case in cases:
        company = case["company_name"]
        csv_path = PROJECT_ROOT / case["expected_csv"]
        assert csv_path.exists(), f"Missing golden file: {csv_path}"

        payload = PayloadParser.from_file(PROJECT_ROOT / case["input_json"])
        result = generator.build_tables(payload.get_all_items())
        matches = [t for t in result.tables if t.company_name == company]
        if not matches:
            failures.append(f"{company}: no table built")
            continue

        actual = _normalize(matches[0].to_frame())
        expected = _normalize(pd.read_csv(csv_path, dtype=str, keep_default_na=False))

        if list(actual.columns) != list(expected.columns):
            failures.append(
                f"{company}: column mismatch actual={list(actual.columns)} expected={list(expected.columns)}"
            )
            continue

        if len(actual) != len(expected):
            failures.append(
                f"{company}: row count mismatch actual={len(actual)} expected={len(expected)}"
            )
            continue

        unequal = actual.ne(expected)
        if unequal.any().any():
            idx = int(unequal.any(axis=1).idxmax())
            diff_cols = [c for c in actual.columns if bool(unequal.loc[idx, c])]
            failures.append(
                f"{company}: first mismatch at row={idx} cols={diff_cols} "
                f"actual={actual.loc[idx, diff_cols].to_dict()} "
                f"expected={expected.loc[idx, diff_cols].to_dict()}"
            )

    assert not failures, "Golden regression mismatches:\n" + "\n".join(failures)
