"""
Formatting utilities for report output.

Provides common formatting functions for EPSS scores, advisory summaries,
and console report lines.
"""

from typing import Optional

from constants import SUMMARY_PREVIEW_LENGTH
from core.models import CveResult


def format_epss(score: Optional[float]) -> str:
    """
    Format an EPSS probability as a percentage.

    Args:
        score: EPSS probability in [0, 1], or None

    Returns:
        Percentage string, or "n/a" when no score is known

    Examples:
        >>> format_epss(0.97412)
        '97.41%'
        >>> format_epss(0.0004)
        '0.04%'
        >>> format_epss(None)
        'n/a'
    """
    if score is None:
        return "n/a"
    return f"{score * 100:.2f}%"


def truncate_summary(summary: str, max_length: int = SUMMARY_PREVIEW_LENGTH) -> str:
    """
    Collapse whitespace and shorten a summary for single-line display.

    Examples:
        >>> truncate_summary("short text")
        'short text'
        >>> truncate_summary("a  b\\n c")
        'a b c'
        >>> truncate_summary("abcdefghij", max_length=8)
        'abcde...'
    """
    text = " ".join(summary.split())
    if len(text) <= max_length:
        return text
    return text[: max_length - 3] + "..."


def format_cve_line(result: CveResult) -> str:
    """
    Format one report row for the console.

    Examples:
        >>> format_cve_line(CveResult("CVE-1", "sha256:abc", "x", "HIGH", 0.5, "Bad"))
        'HIGH      CVE-1  x@sha256:abc  EPSS 50.00%  Bad'
    """
    return (
        f"{result.severity:<9} {result.cve_id}  {result.repo_name}@{result.digest}  "
        f"EPSS {format_epss(result.epss_score)}  {truncate_summary(result.summary)}"
    )


def format_severity_counts(counts: dict[str, int]) -> str:
    """
    Format per-severity counts for a summary log line.

    Examples:
        >>> format_severity_counts({"CRITICAL": 2, "HIGH": 5})
        'CRITICAL: 2, HIGH: 5'
        >>> format_severity_counts({})
        'none'
    """
    if not counts:
        return "none"
    return ", ".join(f"{severity}: {count}" for severity, count in counts.items())
