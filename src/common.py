"""
Common constants shared across the Scout CVE report.
"""

from outputs.console_generator import ConsoleGenerator
from outputs.csv_generator import CSVGenerator
from outputs.xlsx_generator import XLSXGenerator

# Output configuration for all report types
OUTPUT_CONFIGS = {
    "console": {
        "description": "CVE list (console)",
        "generator": ConsoleGenerator,
        "file_suffix": None,
    },
    "csv": {
        "description": "CVE report (CSV)",
        "generator": CSVGenerator,
        "file_suffix": "cve_report.csv",
    },
    "xlsx": {
        "description": "CVE report (XLSX)",
        "generator": XLSXGenerator,
        "file_suffix": "cve_report.xlsx",
    },
}
