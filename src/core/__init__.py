"""Core business logic for assembling the CVE report."""

from core.config import ScoutConfig
from core.models import (
    CveResult,
    Image,
    Severity,
    Vulnerability,
    VulnerabilityPackage,
)

__all__ = [
    "ScoutConfig",
    "CveResult",
    "Image",
    "Severity",
    "Vulnerability",
    "VulnerabilityPackage",
]
