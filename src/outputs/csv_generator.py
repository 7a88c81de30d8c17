"""
CSV generator for the CVE report.

Writes one row per CRITICAL/HIGH finding with a fixed header, suitable
for spreadsheets and downstream tooling.
"""

import csv
import logging
from pathlib import Path
from typing import Optional

from constants import REPORT_COLUMNS
from core.exceptions import OutputException
from core.models import CveResult
from outputs.base import OutputGenerator

logger = logging.getLogger(__name__)


class CSVGenerator(OutputGenerator):
    """CVE report generator (CSV format)."""

    def supports_format(self) -> str:
        """Return format identifier."""
        return "csv"

    def generate(
        self,
        results: list[CveResult],
        output_path: Optional[Path] = None,
    ) -> None:
        """
        Generate CVE report (CSV).

        Args:
            results: Report rows
            output_path: Output file path

        Raises:
            OutputException: If no path is given or the file cannot be written
        """
        if output_path is None:
            raise OutputException("csv", "No output path given")

        logger.info(f"Generating CSV report: {output_path}")

        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            with open(output_path, "w", newline="", encoding="utf-8") as f:
                writer = csv.writer(f)
                writer.writerow(REPORT_COLUMNS)
                for result in results:
                    row = result.to_list()
                    # Empty cell for a missing EPSS score
                    writer.writerow(["" if value is None else value for value in row])
        except OSError as e:
            raise OutputException("csv", str(e)) from e

        logger.info(f"CSV report generated: {output_path} ({len(results)} rows)")
