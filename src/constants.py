"""
Centralized configuration constants for the Scout CVE report.

This module provides a single source of truth for configuration values
that are used across multiple modules, making them easier to update
and maintain.
"""

# ============================================================================
# Docker Scout API
# ============================================================================

SCOUT_GRAPHQL_URL = "https://api.scout.docker.com/v1/graphql"
"""Docker Scout GraphQL endpoint (all queries are POSTed here)."""

PAGE_SIZE = 25
"""Number of images requested per streamImages page."""

STREAM_IMAGES_QUERY = "stream-images"
"""Template name of the paginated list-images-for-org query."""

IMAGE_VULNERABILITIES_QUERY = "image-vulnerabilities"
"""Template name of the vulnerabilities-for-digest query."""

# ============================================================================
# Timeouts (in seconds)
# ============================================================================

API_REQUEST_TIMEOUT = 30
"""Timeout for GraphQL API requests (30 seconds)."""

# ============================================================================
# Environment Variables
# ============================================================================

ORG_ENV_VAR = "DOCKER_ORG"
"""Organization whose images are reported on."""

TOKEN_ENV_VAR = "DOCKER_TOKEN"
"""Bearer token for the Scout API."""

API_URL_ENV_VAR = "SCOUT_API_URL"
"""Optional override of the GraphQL endpoint."""

TIMEOUT_ENV_VAR = "SCOUT_TIMEOUT"
"""Optional override of the request timeout (seconds)."""

# ============================================================================
# Report Filtering
# ============================================================================

REPORTABLE_SEVERITIES = frozenset({"CRITICAL", "HIGH"})
"""
Severities that make it into the report.

Matching is exact and case sensitive against the cvss.severity string
returned by the API.
"""

REPORT_COLUMNS = (
    "cve_id",
    "digest",
    "repo_name",
    "severity",
    "epss_score",
    "summary",
)
"""Column order for tabular report outputs."""

# ============================================================================
# Output
# ============================================================================

DEFAULT_OUTPUT_TYPE = "console"
"""Output produced when no --output flag is given."""

SUMMARY_PREVIEW_LENGTH = 80
"""Maximum summary length shown on console lines."""
