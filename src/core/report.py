"""
Assembles the flat CVE report from Scout image and vulnerability data.
"""

import logging
from collections import Counter
from typing import Optional

from core.config import ScoutConfig
from core.exceptions import NoDataException
from core.models import CveResult, Severity
from integrations.scout_api import ScoutAPI

logger = logging.getLogger(__name__)


class ReportAssembler:
    """
    Walks images -> packages -> vulnerabilities and keeps CRITICAL/HIGH findings.

    Any API failure aborts the whole run; no partial report is produced.
    """

    def __init__(self, api: ScoutAPI):
        """
        Initialize the assembler.

        Args:
            api: Scout API used for image and vulnerability lookups
        """
        self.api = api

    def generate_report_data(self) -> list[CveResult]:
        """
        Build the report rows.

        Rows keep API order (image, then package, then vulnerability) and
        are neither sorted nor de-duplicated.

        Returns:
            Report rows

        Raises:
            NoDataException: If the organization has no images
        """
        images = self.api.stream_images()

        if not images:
            raise NoDataException("No images found for org/stream.")

        logger.info(f"Found {len(images)} images.")

        results: list[CveResult] = []
        for image in images:
            logger.info(f"Getting vulnerabilities for image {image}")
            for package in self.api.image_vulnerabilities(image.digest):
                for vulnerability in package.vulnerabilities:
                    if Severity.is_reportable(vulnerability.severity):
                        results.append(CveResult.from_finding(image, vulnerability))

        return results


def generate_report_data(config: ScoutConfig, api: Optional[ScoutAPI] = None) -> list[CveResult]:
    """Assemble report rows for the configured organization."""
    return ReportAssembler(api or ScoutAPI(config)).generate_report_data()


def summarize(results: list[CveResult]) -> dict[str, int]:
    """Count report rows per severity, in display order."""
    counts = Counter(result.severity for result in results)
    return {
        level: counts[level]
        for level in Severity.ordered_levels()
        if counts[level]
    }
