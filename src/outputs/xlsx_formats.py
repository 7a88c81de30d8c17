"""
XLSX format definitions and factory.

Provides centralized format management for the CVE report workbook.
"""

import xlsxwriter


class OutputFormatter:
    """Factory for creating consistent XLSX cell formats."""

    # Base format properties shared by all formats
    BASE_FORMAT = {
        "border": 1,
        "font_name": "Arial",
        "font_size": 10,
        "align": "left",
        "valign": "vcenter",
    }

    COLORS = {
        "blue": "#4285f4",
        "critical": "#F4CCCC",
        "high": "#FCE5CD",
        "white": "#FFFFFF",
    }

    NUM_FORMATS = {
        "epss": "0.0000",
    }

    SEVERITY_FORMATS = {
        "CRITICAL": "body_critical",
        "HIGH": "body_high",
    }

    def __init__(self, workbook: xlsxwriter.Workbook):
        """
        Initialize formatter with workbook.

        Args:
            workbook: XlsxWriter workbook instance
        """
        self.workbook = workbook
        self.formats = self._create_all_formats()

    def _create_format(
        self,
        bg_color: str = None,
        font_color: str = "black",
        bold: bool = False,
        num_format: str = None,
        text_wrap: bool = False,
    ) -> xlsxwriter.format.Format:
        """Create a format with base properties plus overrides."""
        format_dict = self.BASE_FORMAT.copy()

        if bg_color:
            format_dict["bg_color"] = bg_color
        if font_color != "black":
            format_dict["font_color"] = font_color
        if bold:
            format_dict["bold"] = True
        if num_format:
            format_dict["num_format"] = num_format
        if text_wrap:
            format_dict["text_wrap"] = True

        return self.workbook.add_format(format_dict)

    def _create_all_formats(self) -> dict:
        """Create all required formats using the factory method."""
        return {
            "header_blue": self._create_format(
                bg_color=self.COLORS["blue"],
                font_color="white",
                bold=True,
            ),
            "body_white": self._create_format(),
            "body_wrap": self._create_format(text_wrap=True),
            "body_epss": self._create_format(
                num_format=self.NUM_FORMATS["epss"],
            ),
            "body_critical": self._create_format(
                bg_color=self.COLORS["critical"],
                bold=True,
            ),
            "body_high": self._create_format(
                bg_color=self.COLORS["high"],
            ),
        }

    def get(self, format_name: str) -> xlsxwriter.format.Format:
        """
        Get a format by name.

        Raises:
            KeyError: If format name doesn't exist
        """
        return self.formats[format_name]

    def for_severity(self, severity: str) -> xlsxwriter.format.Format:
        """Get the cell format for a severity value."""
        return self.get(self.SEVERITY_FORMATS.get(severity, "body_white"))
