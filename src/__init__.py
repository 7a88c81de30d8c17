"""
Scout CVE Report

Lists the images of a Docker organization through the Docker Scout API
and reports the CRITICAL and HIGH vulnerabilities found in them.
"""

__version__ = "1.0.0"

from core.models import (
    CveResult,
    Image,
    Vulnerability,
    VulnerabilityPackage,
)

__all__ = [
    "CveResult",
    "Image",
    "Vulnerability",
    "VulnerabilityPackage",
]
