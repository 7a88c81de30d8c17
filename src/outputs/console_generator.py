"""
Console report sink: one line per finding on a text stream.
"""

import sys
from pathlib import Path
from typing import Optional, TextIO

from core.models import CveResult
from outputs.base import OutputGenerator
from utils.formatting import format_cve_line


class ConsoleGenerator(OutputGenerator):
    """Prints report rows to stdout (or any text stream)."""

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream

    def supports_format(self) -> str:
        """Return format identifier."""
        return "console"

    def generate(
        self,
        results: list[CveResult],
        output_path: Optional[Path] = None,
    ) -> None:
        """Print each row; output_path is ignored."""
        stream = self.stream or sys.stdout
        for result in results:
            print(format_cve_line(result), file=stream)
        stream.flush()
