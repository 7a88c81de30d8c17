"""
Exception hierarchy for the Scout CVE report.

Provides a standardized exception hierarchy so callers can branch on the
kind of failure without inspecting messages. All exceptions inherit from
ScoutReportException.
"""

from typing import Optional


class ScoutReportException(Exception):
    """Base exception for all Scout CVE report errors."""
    pass


class ConfigurationException(ScoutReportException):
    """Configuration is invalid or missing."""

    def __init__(self, message: str, setting: Optional[str] = None):
        """
        Initialize configuration exception.

        Args:
            message: What is wrong with the configuration
            setting: Name of the offending setting (optional)
        """
        self.setting = setting
        super().__init__(message)


class ScoutAPIException(ScoutReportException):
    """Docker Scout API call failed."""
    pass


class AuthenticationException(ScoutAPIException):
    """The API rejected the bearer token (HTTP 401)."""

    def __init__(self, message: str = "401 status running GraphQL request. Is your DOCKER_TOKEN valid / expired?"):
        self.status_code = 401
        super().__init__(message)


class GraphQLRequestException(ScoutAPIException):
    """GraphQL request failed with a non-200 status or never got a response."""

    def __init__(self, status_code: Optional[int], reason: Optional[str] = None):
        """
        Initialize request exception.

        Args:
            status_code: HTTP status code, None when no response was received
            reason: Additional detail (optional)
        """
        self.status_code = status_code
        self.reason = reason
        if status_code is None:
            message = f"Failed to run GraphQL request: {reason}"
        else:
            message = f"Failed to run GraphQL request. Response code [{status_code}]"
            if reason:
                message = f"{message}: {reason}"
        super().__init__(message)


class NoDataException(ScoutReportException):
    """The run produced no images to report on."""
    pass


class OutputException(ScoutReportException):
    """Output generation failed."""

    def __init__(self, format_type: str, reason: str):
        """
        Initialize output exception.

        Args:
            format_type: Output format (csv, xlsx, etc.)
            reason: Reason for failure
        """
        self.format_type = format_type
        self.reason = reason
        super().__init__(f"Failed to generate {format_type} output: {reason}")


__all__ = [
    "ScoutReportException",
    "ConfigurationException",
    "ScoutAPIException",
    "AuthenticationException",
    "GraphQLRequestException",
    "NoDataException",
    "OutputException",
]
