"""
XLSX generator for the CVE report.

Generates a single-sheet Excel workbook listing every CRITICAL/HIGH
finding, with severity highlighting and filters on the header row.
"""

import logging
from pathlib import Path
from typing import Optional

import xlsxwriter
from xlsxwriter.exceptions import XlsxWriterException

from constants import REPORT_COLUMNS
from core.exceptions import OutputException
from core.models import CveResult
from outputs.base import OutputGenerator
from outputs.xlsx_formats import OutputFormatter

logger = logging.getLogger(__name__)

SHEET_NAME = "cve-report"

COLUMN_HEADERS = {
    "cve_id": "CVE ID",
    "digest": "Digest",
    "repo_name": "Repository",
    "severity": "Severity",
    "epss_score": "EPSS",
    "summary": "Summary",
}

SUMMARY_COLUMN_WIDTH = 100


class XLSXGenerator(OutputGenerator):
    """CVE report generator (XLSX format)."""

    def supports_format(self) -> str:
        """Return format identifier."""
        return "xlsx"

    def generate(
        self,
        results: list[CveResult],
        output_path: Optional[Path] = None,
    ) -> None:
        """
        Generate CVE report (XLSX).

        Args:
            results: Report rows
            output_path: Output file path

        Raises:
            OutputException: If no path is given or the workbook cannot be written
        """
        if output_path is None:
            raise OutputException("xlsx", "No output path given")

        logger.info(f"Generating XLSX report: {output_path}")

        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            with xlsxwriter.Workbook(str(output_path)) as workbook:
                worksheet = workbook.add_worksheet(SHEET_NAME)
                formatter = OutputFormatter(workbook)

                self._write_rows(worksheet, formatter, results)

                worksheet.autofit()
                worksheet.set_column(
                    REPORT_COLUMNS.index("summary"),
                    REPORT_COLUMNS.index("summary"),
                    SUMMARY_COLUMN_WIDTH,
                )
        except (OSError, XlsxWriterException) as e:
            raise OutputException("xlsx", str(e)) from e

        logger.info(f"XLSX report generated: {output_path} ({len(results)} rows)")

    def _write_rows(
        self,
        worksheet: xlsxwriter.worksheet.Worksheet,
        formatter: OutputFormatter,
        results: list[CveResult],
    ) -> None:
        """Write header plus one row per result."""
        worksheet.write_row(
            0, 0, [COLUMN_HEADERS[c] for c in REPORT_COLUMNS], formatter.get("header_blue")
        )
        worksheet.freeze_panes(1, 0)

        for row, result in enumerate(results, start=1):
            for col, column in enumerate(REPORT_COLUMNS):
                value = getattr(result, column)
                if column == "severity":
                    worksheet.write_string(row, col, value, formatter.for_severity(value))
                elif column == "epss_score":
                    if value is None:
                        worksheet.write_blank(row, col, None, formatter.get("body_epss"))
                    else:
                        worksheet.write_number(row, col, value, formatter.get("body_epss"))
                elif column == "summary":
                    worksheet.write_string(row, col, value, formatter.get("body_wrap"))
                else:
                    worksheet.write_string(row, col, value, formatter.get("body_white"))

        worksheet.autofilter(0, 0, max(len(results), 1), len(REPORT_COLUMNS) - 1)
