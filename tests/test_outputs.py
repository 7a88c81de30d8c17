"""Tests for report sinks."""

import csv
import io
import zipfile

import pytest
from unittest.mock import patch
from xlsxwriter.exceptions import XlsxWriterException

from core.exceptions import OutputException
from outputs.console_generator import ConsoleGenerator
from outputs.csv_generator import CSVGenerator
from outputs.xlsx_generator import XLSXGenerator


class TestConsoleGenerator:
    """Tests for ConsoleGenerator."""

    def test_one_line_per_result(self, sample_results):
        """Test that every row is printed in order."""
        stream = io.StringIO()

        ConsoleGenerator(stream).generate(sample_results)

        lines = stream.getvalue().splitlines()
        assert len(lines) == 2
        assert "CVE-2021-44228" in lines[0]
        assert "acme/web@sha256:def" in lines[1]
        assert "n/a" in lines[1]

    def test_empty(self):
        """Test that no rows prints nothing."""
        stream = io.StringIO()
        ConsoleGenerator(stream).generate([])
        assert stream.getvalue() == ""


class TestCSVGenerator:
    """Tests for CSVGenerator."""

    def test_header_and_rows(self, sample_results, tmp_path):
        """Test CSV content."""
        output = tmp_path / "out" / "cve_report.csv"

        CSVGenerator().generate(sample_results, output)

        with open(output, newline="", encoding="utf-8") as f:
            rows = list(csv.reader(f))
        assert rows[0] == ["cve_id", "digest", "repo_name", "severity", "epss_score", "summary"]
        assert rows[1] == [
            "CVE-2021-44228", "sha256:abc", "acme/api", "CRITICAL", "0.97",
            "Log4Shell remote code execution",
        ]
        # Missing EPSS is an empty cell
        assert rows[2][4] == ""

    def test_requires_path(self, sample_results):
        """Test that a path is mandatory."""
        with pytest.raises(OutputException):
            CSVGenerator().generate(sample_results)

    def test_unwritable_path(self, sample_results, tmp_path):
        """Test that write failures become OutputException."""
        blocker = tmp_path / "file"
        blocker.write_text("x")

        with pytest.raises(OutputException) as exc_info:
            CSVGenerator().generate(sample_results, blocker / "cve_report.csv")

        assert exc_info.value.format_type == "csv"


class TestXLSXGenerator:
    """Tests for XLSXGenerator."""

    def test_writes_workbook(self, sample_results, tmp_path):
        """Test that a valid workbook is produced."""
        output = tmp_path / "cve_report.xlsx"

        XLSXGenerator().generate(sample_results, output)

        assert output.exists()
        with zipfile.ZipFile(output) as archive:
            shared = archive.read("xl/sharedStrings.xml").decode("utf-8")
            workbook = archive.read("xl/workbook.xml").decode("utf-8")
        assert "CVE-2021-44228" in shared
        assert 'name="cve-report"' in workbook

    def test_empty_report(self, tmp_path):
        """Test that an empty report still produces a workbook."""
        output = tmp_path / "cve_report.xlsx"

        XLSXGenerator().generate([], output)

        assert output.exists()

    def test_requires_path(self, sample_results):
        """Test that a path is mandatory."""
        with pytest.raises(OutputException):
            XLSXGenerator().generate(sample_results)

    def test_workbook_closed_when_writing_fails(self, sample_results, tmp_path):
        """Test that a failure mid-write still closes the workbook."""
        output = tmp_path / "cve_report.xlsx"

        with patch.object(XLSXGenerator, "_write_rows", side_effect=XlsxWriterException("bad cell")):
            with pytest.raises(OutputException, match="bad cell"):
                XLSXGenerator().generate(sample_results, output)

        # Closing is what writes the file
        assert output.exists()

    def test_supports_format(self):
        """Test format identifiers."""
        assert XLSXGenerator().supports_format() == "xlsx"
        assert CSVGenerator().supports_format() == "csv"
        assert ConsoleGenerator().supports_format() == "console"
