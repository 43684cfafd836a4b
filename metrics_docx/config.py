"""Generator configuration: metric schedule, table width, output naming."""

import logging
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, Field


# Row order of every generated table
METRIC_SCHEDULE = (
    "Revenue",
    "% Revenue Growth",
    "Cost of Goods Sold/Service %",
    "Gross Profit Margin %",
    "SG&A%",
    "Depreciation + Amortization",
    "Operating Margin %",
    "EBITDA (excl. Other Income)",
    "EBITDA % Change Y/Y",
    "EBITDA Margin %",
    "Other Income",
    "Interest Expense",
    "Net Profit",
    "Net % Change Y/Y",
    "Net Profit Margin %",
)

# OOXML pct widths are in fiftieths of a percent: 5000 == 100%
TABLE_WIDTH_PCT = 5000

LABEL_COLUMN_HEADER = "Financial Metrics"
DEFAULT_OUTPUT_DIRNAME = "result"
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


class GeneratorConfig(BaseModel):
    """Settings shared by the table builder and the document store."""

    metric_schedule: List[str] = Field(
        default_factory=lambda: list(METRIC_SCHEDULE),
        description="Metric row labels, in row order",
    )
    table_width_pct: int = Field(TABLE_WIDTH_PCT, description="Table width in fiftieths of a percent")
    output_dir: Optional[Path] = Field(None, description="Output directory (default: <cwd>/result)")
    filename_prefix: str = Field("file-", description="Prefix of generated document names")
    timestamp_format: str = Field("%Y%m%d%H%M%S", description="strftime format of the UTC timestamp")
    extension: str = Field(".docx", description="Generated document extension")
    log_level: str = Field("INFO", description="Level used by the command-line tools")


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging for command-line entry points."""
    logging.basicConfig(level=getattr(logging, level.upper(), logging.INFO), format=LOG_FORMAT)
