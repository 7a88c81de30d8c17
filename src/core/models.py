"""
Domain models for the Scout CVE report.

This module defines the core data structures used throughout the application.
All models are immutable (frozen dataclasses) to prevent accidental mutation.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

from constants import REPORT_COLUMNS, REPORTABLE_SEVERITIES


class Severity(str, Enum):
    """CVSS severity strings as returned by the Scout API."""

    CRITICAL = "CRITICAL"
    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"
    UNSPECIFIED = "UNSPECIFIED"

    @classmethod
    def ordered_levels(cls) -> list[str]:
        """Return severity levels in display order."""
        return [level.value for level in cls]

    @classmethod
    def is_reportable(cls, severity: Optional[str]) -> bool:
        """
        Check whether a raw severity string belongs in the report.

        Only exact, case-sensitive CRITICAL and HIGH pass.
        """
        return severity in REPORTABLE_SEVERITIES


@dataclass(frozen=True)
class Image:
    """
    An image in the organization's stream.

    Attributes:
        digest: Image digest (sha256:...)
        repo_name: Repository the image belongs to
    """

    digest: str
    repo_name: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Image":
        """Create from a streamImages item."""
        repository = data.get("repository") or {}
        return cls(
            digest=data.get("digest") or "",
            repo_name=repository.get("repoName") or "",
        )

    def __str__(self) -> str:
        return f"{self.repo_name}@{self.digest}"


@dataclass(frozen=True)
class Vulnerability:
    """
    A single vulnerability reported against a package.

    Attributes:
        source_id: Advisory identifier (usually a CVE ID)
        description: Advisory text
        severity: Raw cvss.severity string, empty when absent
        epss_score: EPSS probability, None when the API has no score
    """

    source_id: str
    description: str
    severity: str
    epss_score: Optional[float] = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Vulnerability":
        """Create from an entry of a package's vulnerabilities list."""
        cvss = data.get("cvss") or {}
        epss = data.get("epss") or {}
        score = epss.get("score")
        return cls(
            source_id=data.get("sourceId") or "",
            description=data.get("description") or "",
            severity=cvss.get("severity") or "",
            epss_score=float(score) if score is not None else None,
        )


@dataclass(frozen=True)
class VulnerabilityPackage:
    """
    Vulnerabilities found in one package of an image.

    Attributes:
        purl: Package URL of the affected dependency
        vulnerabilities: Findings in API order
    """

    purl: str = ""
    vulnerabilities: tuple[Vulnerability, ...] = field(default_factory=tuple)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "VulnerabilityPackage":
        """Create from an imageVulnerabilitiesByDigest.vulnerabilities entry."""
        return cls(
            purl=data.get("purl") or "",
            vulnerabilities=tuple(
                Vulnerability.from_dict(v) for v in data.get("vulnerabilities") or []
            ),
        )


@dataclass(frozen=True)
class CveResult:
    """
    One report row: a CRITICAL or HIGH vulnerability found in an image.

    Attributes:
        cve_id: Advisory identifier
        digest: Digest of the affected image
        repo_name: Repository of the affected image
        severity: CRITICAL or HIGH
        epss_score: EPSS probability (optional)
        summary: Advisory description
    """

    cve_id: str
    digest: str
    repo_name: str
    severity: str
    epss_score: Optional[float]
    summary: str

    @classmethod
    def from_finding(cls, image: Image, vulnerability: Vulnerability) -> "CveResult":
        """Combine an image with one of its vulnerabilities."""
        return cls(
            cve_id=vulnerability.source_id,
            digest=image.digest,
            repo_name=image.repo_name,
            severity=vulnerability.severity,
            epss_score=vulnerability.epss_score,
            summary=vulnerability.description,
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary keyed by report column, in column order."""
        return {column: getattr(self, column) for column in REPORT_COLUMNS}

    def to_list(self) -> list[Any]:
        """Convert to ordered list for tabular output."""
        return [getattr(self, column) for column in REPORT_COLUMNS]
