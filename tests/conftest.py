"""
Pytest fixtures and configuration for Scout CVE report tests.

Provides shared fixtures and test utilities across the test suite.
"""

import pytest
from unittest.mock import MagicMock

from core.config import ScoutConfig
from core.models import CveResult, Image


def make_response(status_code=200, payload=None):
    """Build a fake requests.Response."""
    response = MagicMock()
    response.status_code = status_code
    response.json.return_value = payload if payload is not None else {}
    return response


def stream_images_payload(items, total_count):
    """streamImages response body."""
    return {
        "data": {
            "streamImages": {
                "items": items,
                "paging": {"totalCount": total_count},
            }
        }
    }


def image_items(start, count):
    """streamImages items with digests sha256:<n>."""
    return [
        {"digest": f"sha256:{n}", "repository": {"repoName": f"repo-{n}"}}
        for n in range(start, start + count)
    ]


def vulnerabilities_payload(packages):
    """imageVulnerabilitiesByDigest response body."""
    return {"data": {"imageVulnerabilitiesByDigest": {"vulnerabilities": packages}}}


def vuln(source_id, severity, description="", epss=None):
    """A raw vulnerability entry as returned by the API."""
    entry = {"sourceId": source_id, "description": description, "cvss": {"severity": severity}}
    if epss is not None:
        entry["epss"] = {"score": epss}
    return entry


@pytest.fixture
def config():
    """Fully populated configuration."""
    return ScoutConfig(organization="acme", token="test_token")


@pytest.fixture
def sample_image():
    """Sample image."""
    return Image(digest="sha256:abc", repo_name="x")


@pytest.fixture
def sample_results():
    """Sample report rows."""
    return [
        CveResult(
            cve_id="CVE-2021-44228",
            digest="sha256:abc",
            repo_name="acme/api",
            severity="CRITICAL",
            epss_score=0.97,
            summary="Log4Shell remote code execution",
        ),
        CveResult(
            cve_id="CVE-2023-0001",
            digest="sha256:def",
            repo_name="acme/web",
            severity="HIGH",
            epss_score=None,
            summary="Buffer overflow",
        ),
    ]
