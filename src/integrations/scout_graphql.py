"""
Docker Scout GraphQL client.

Sends named, file-backed queries to the Scout GraphQL endpoint and
translates HTTP failures into the report's exception taxonomy.
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Any, Optional

import requests

from core.config import ScoutConfig
from core.exceptions import (
    AuthenticationException,
    ConfigurationException,
    GraphQLRequestException,
)

logger = logging.getLogger(__name__)

QUERIES_DIR = Path(__file__).parent / "queries"


@lru_cache(maxsize=None)
def load_query(query_name: str) -> str:
    """
    Load a GraphQL query template by name.

    Args:
        query_name: Template name without the .graphql suffix

    Returns:
        Query text

    Raises:
        ConfigurationException: If no template with that name exists
    """
    query_path = QUERIES_DIR / f"{query_name}.graphql"
    if not query_path.is_file():
        raise ConfigurationException(f"Unknown GraphQL query template: {query_name}")
    return query_path.read_text(encoding="utf-8")


class ScoutGraphQLClient:
    """
    Client for the Docker Scout GraphQL API.

    Every call is a single synchronous POST; there are no retries.
    """

    def __init__(self, config: ScoutConfig):
        """
        Initialize GraphQL client.

        Args:
            config: Run configuration (token, endpoint, timeout)
        """
        self.config = config

    def execute(self, query_name: str, variables: Optional[dict[str, Any]] = None) -> dict:
        """
        Run a named query and return the parsed response body.

        Args:
            query_name: Template name under integrations/queries
            variables: GraphQL variables

        Returns:
            Parsed JSON response, unmodified

        Raises:
            ConfigurationException: If no token is configured
            AuthenticationException: On HTTP 401
            GraphQLRequestException: On any other non-200 status or transport failure
        """
        token = self.config.require_token()
        body = {"query": load_query(query_name), "variables": variables or {}}

        logger.debug(f"POST {self.config.api_url} query={query_name} variables={variables}")

        try:
            response = requests.post(
                self.config.api_url,
                json=body,
                headers={
                    "Authorization": f"Bearer {token}",
                    "Content-Type": "application/json",
                },
                timeout=self.config.timeout,
            )
        except requests.Timeout as e:
            raise GraphQLRequestException(
                None, f"request timed out after {self.config.timeout}s"
            ) from e
        except requests.RequestException as e:
            raise GraphQLRequestException(None, str(e)) from e

        if response.status_code != 200:
            if response.status_code == 401:
                raise AuthenticationException()
            raise GraphQLRequestException(response.status_code)

        try:
            body = response.json()
        except ValueError as e:
            raise GraphQLRequestException(200, "response body is not valid JSON") from e

        if not isinstance(body, dict):
            raise GraphQLRequestException(200, "response body is not a JSON object")
        return body
