"""Integrations with external services."""

from integrations.scout_graphql import ScoutGraphQLClient, load_query
from integrations.scout_api import ScoutAPI

__all__ = [
    "ScoutGraphQLClient",
    "ScoutAPI",
    "load_query",
]
