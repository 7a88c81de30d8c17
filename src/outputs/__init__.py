"""Report sinks for the CVE report."""

from outputs.base import OutputGenerator
from outputs.console_generator import ConsoleGenerator
from outputs.csv_generator import CSVGenerator
from outputs.xlsx_generator import XLSXGenerator

__all__ = [
    "OutputGenerator",
    "ConsoleGenerator",
    "CSVGenerator",
    "XLSXGenerator",
]
