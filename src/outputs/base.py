"""
Base output generator interface.

Defines the contract that all report sinks must implement.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

from core.models import CveResult


class OutputGenerator(ABC):
    """
    Abstract base class for report generators.

    All report sinks (console, CSV, XLSX) must implement this interface.
    """

    @abstractmethod
    def generate(
        self,
        results: list[CveResult],
        output_path: Optional[Path] = None,
    ) -> None:
        """
        Write the report rows.

        Args:
            results: Report rows, already filtered and ordered
            output_path: Where to write the output file (unused by stream sinks)
        """
        pass

    @abstractmethod
    def supports_format(self) -> str:
        """
        Return the format this generator supports.

        Returns:
            Format identifier (e.g., "csv", "xlsx")
        """
        pass
