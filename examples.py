"""Example usage of the financial metrics Word table generator."""

import json
from pathlib import Path

from metrics_docx.config import GeneratorConfig
from metrics_docx.core.engine import DocxGenerator


def main():
    payload_path = Path(__file__).parent / 'golden' / 'sample_payload.json'
    payload = payload_path.read_text(encoding='utf-8')
    generator = DocxGenerator(GeneratorConfig(output_dir=Path(__file__).parent / 'result'))

    print("=" * 60)
    print("Financial Metrics Word Tables - Examples")
    print("=" * 60)

    # Example 1: Build tables and inspect skipped records
    print("\n[Example 1] Build one table per record")
    print("-" * 60)
    result = generator.build_tables(json.loads(payload))
    print(f"Built {len(result.tables)} of {result.total} tables")
    for failure in result.failures:
        print(f"Skipped record {failure.index} ({failure.kind}): {failure.message}")

    # Example 2: Metric rows of the first table
    print("\n[Example 2] Metric rows for the first company")
    print("-" * 60)
    if result.tables:
        print(result.tables[0].header_text)
        print(result.tables[0].to_frame().to_string(index=False))

    # Example 3: Coverage of scheduled metrics
    print("\n[Example 3] Metric coverage for Globex")
    print("-" * 60)
    coverage = generator.get_metric_coverage(json.loads(payload)[2])
    print(f"Rows with values: {coverage['rows_with_values']} / {coverage['rows_total']}")
    print(f"Missing metrics: {', '.join(coverage['missing_metrics'])}")

    # Example 4: Embeddable fragments
    print("\n[Example 4] Canonical <w:tbl> fragments")
    print("-" * 60)
    for fragment in generator.generate_table_xmls(payload):
        print(f"{fragment.company_name}: {len(fragment.xml)} characters")
        print(f"  {fragment.xml[:80]}...")

    # Example 5: Long-format DataFrame
    print("\n[Example 5] All values as one DataFrame")
    print("-" * 60)
    frame = generator.tables_to_frame(payload)
    print(frame.head(10).to_string(index=False))

    # Example 6: Full document
    print("\n[Example 6] Write the Word document")
    print("-" * 60)
    path = generator.generate_and_save_docx_file(payload)
    print(f"Document written to {path}")

    print("\n" + "=" * 60)
    print("Examples completed!")
    print("=" * 60)


if __name__ == "__main__":
    main()
