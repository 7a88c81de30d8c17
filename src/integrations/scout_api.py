"""
Docker Scout API operations used by the CVE report.

Provides image enumeration for an organization (hiding page boundaries)
and per-digest vulnerability lookups.
"""

import logging
import math
from typing import Any, Optional

from constants import IMAGE_VULNERABILITIES_QUERY, PAGE_SIZE, STREAM_IMAGES_QUERY
from core.config import ScoutConfig
from core.exceptions import GraphQLRequestException
from core.models import Image, VulnerabilityPackage
from integrations.scout_graphql import ScoutGraphQLClient

logger = logging.getLogger(__name__)


class ScoutAPI:
    """
    High level Scout queries built on ScoutGraphQLClient.

    Requests are issued strictly one after another.
    """

    def __init__(self, config: ScoutConfig, client: Optional[ScoutGraphQLClient] = None):
        """
        Initialize Scout API.

        Args:
            config: Run configuration (organization is read from here)
            client: GraphQL client (defaults to one built from config)
        """
        self.config = config
        self.client = client or ScoutGraphQLClient(config)

    def stream_images(self) -> list[Image]:
        """
        Enumerate every image in the organization's stream.

        Page 1 reports the total count; remaining pages are then requested
        in order. The total from page 1 is trusted for the whole run.

        Returns:
            All images, in page order

        Raises:
            ConfigurationException: If no organization is configured
            GraphQLRequestException: If any page comes back without items
        """
        organization = self.config.require_organization()
        variables = {"organization": organization, "pageSize": PAGE_SIZE}

        logger.info("Requesting streamImages page 1")
        stream = self._stream_images_page(variables)
        total_count = (stream.get("paging") or {}).get("totalCount") or 0
        images = [Image.from_dict(item) for item in stream["items"]]

        pages = math.ceil(total_count / PAGE_SIZE)

        if len(images) < total_count:
            for page in range(2, pages + 1):
                logger.info(f"Requesting streamImages page {page} / {pages}")
                stream = self._stream_images_page({**variables, "page": page})
                images.extend(Image.from_dict(item) for item in stream["items"])

        logger.debug(f"streamImages returned {len(images)} of {total_count} images")
        return images

    def image_vulnerabilities(self, digest: str) -> list[VulnerabilityPackage]:
        """
        Fetch the vulnerable packages of one image.

        Args:
            digest: Image digest

        Returns:
            Packages with their vulnerabilities, in API order

        Raises:
            ConfigurationException: If no organization is configured
        """
        organization = self.config.require_organization()
        response = self.client.execute(
            IMAGE_VULNERABILITIES_QUERY,
            {"organization": organization, "digest": digest},
        )
        self._log_graphql_errors(IMAGE_VULNERABILITIES_QUERY, response)

        by_digest = (response.get("data") or {}).get("imageVulnerabilitiesByDigest") or {}
        return [
            VulnerabilityPackage.from_dict(package)
            for package in by_digest.get("vulnerabilities") or []
        ]

    def _stream_images_page(self, variables: dict[str, Any]) -> dict:
        """
        Request one streamImages page and return its streamImages node.

        Raises:
            GraphQLRequestException: If the page carries no items list
        """
        response = self.client.execute(STREAM_IMAGES_QUERY, variables)
        self._log_graphql_errors(STREAM_IMAGES_QUERY, response)

        stream = (response.get("data") or {}).get("streamImages")
        if not isinstance(stream, dict) or not isinstance(stream.get("items"), list):
            reason = "streamImages missing from response"
            errors = self._graphql_error_messages(response)
            if errors:
                reason = f"{reason}: {'; '.join(errors)}"
            raise GraphQLRequestException(200, reason)
        return stream

    @staticmethod
    def _graphql_error_messages(response: dict) -> list[str]:
        """Messages of the GraphQL-level errors in a response body."""
        return [
            str(error.get("message") if isinstance(error, dict) else error)
            for error in response.get("errors") or []
        ]

    @classmethod
    def _log_graphql_errors(cls, query_name: str, response: dict) -> None:
        """Warn about GraphQL-level errors returned alongside a 200."""
        for message in cls._graphql_error_messages(response):
            logger.warning(f"GraphQL error in {query_name}: {message}")
