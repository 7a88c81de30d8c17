"""Utility modules for formatting and logging."""

from utils.formatting import format_cve_line, format_epss, truncate_summary
from utils.logging_helpers import log_error_section, log_info_header, setup_logging

__all__ = [
    "format_cve_line",
    "format_epss",
    "truncate_summary",
    "log_error_section",
    "log_info_header",
    "setup_logging",
]
