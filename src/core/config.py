"""
Runtime configuration for the Scout CVE report.

A single ScoutConfig is built at startup and handed to every component
that talks to the API, instead of each one reading the environment.
"""

import os
from dataclasses import dataclass, replace
from typing import Mapping, Optional

from constants import (
    API_REQUEST_TIMEOUT,
    API_URL_ENV_VAR,
    ORG_ENV_VAR,
    SCOUT_GRAPHQL_URL,
    TIMEOUT_ENV_VAR,
    TOKEN_ENV_VAR,
)
from core.exceptions import ConfigurationException


@dataclass(frozen=True)
class ScoutConfig:
    """
    Settings for one report run.

    Attributes:
        organization: Docker organization whose images are reported on
        token: Bearer token for the Scout API
        api_url: GraphQL endpoint
        timeout: Per-request timeout in seconds
    """

    organization: Optional[str] = None
    token: Optional[str] = None
    api_url: str = SCOUT_GRAPHQL_URL
    timeout: float = API_REQUEST_TIMEOUT

    def __repr__(self) -> str:
        token = "***" if self.token else None
        return (
            f"ScoutConfig(organization={self.organization!r}, token={token!r}, "
            f"api_url={self.api_url!r}, timeout={self.timeout!r})"
        )

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ScoutConfig":
        """
        Build configuration from environment variables.

        Missing organization or token is not an error here; components
        check for the values they need before making any request.

        Args:
            environ: Mapping to read from (defaults to os.environ)

        Returns:
            Populated configuration

        Raises:
            ConfigurationException: If SCOUT_TIMEOUT is not a positive number
        """
        if environ is None:
            environ = os.environ

        timeout = API_REQUEST_TIMEOUT
        raw_timeout = (environ.get(TIMEOUT_ENV_VAR) or "").strip()
        if raw_timeout:
            try:
                timeout = float(raw_timeout)
            except ValueError:
                raise ConfigurationException(
                    f"{TIMEOUT_ENV_VAR} must be a number of seconds, got {raw_timeout!r}",
                    TIMEOUT_ENV_VAR,
                )
            if timeout <= 0:
                raise ConfigurationException(
                    f"{TIMEOUT_ENV_VAR} must be positive, got {raw_timeout!r}",
                    TIMEOUT_ENV_VAR,
                )

        return cls(
            organization=_non_empty(environ.get(ORG_ENV_VAR)),
            token=_non_empty(environ.get(TOKEN_ENV_VAR)),
            api_url=_non_empty(environ.get(API_URL_ENV_VAR)) or SCOUT_GRAPHQL_URL,
            timeout=timeout,
        )

    def with_organization(self, organization: Optional[str]) -> "ScoutConfig":
        """Return a copy with the organization overridden (no-op for empty values)."""
        organization = _non_empty(organization)
        if organization is None:
            return self
        return replace(self, organization=organization)

    def require_organization(self) -> str:
        """Return the organization or raise ConfigurationException."""
        if not self.organization:
            raise ConfigurationException(
                f"{ORG_ENV_VAR} environment variable not set.", ORG_ENV_VAR
            )
        return self.organization

    def require_token(self) -> str:
        """Return the API token or raise ConfigurationException."""
        if not self.token:
            raise ConfigurationException(
                f"{TOKEN_ENV_VAR} environment variable not set.", TOKEN_ENV_VAR
            )
        return self.token


def _non_empty(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


__all__ = ["ScoutConfig"]
