"""Tests for run configuration."""

import pytest

from constants import API_REQUEST_TIMEOUT, SCOUT_GRAPHQL_URL
from core.config import ScoutConfig
from core.exceptions import ConfigurationException


class TestFromEnv:
    """Tests for ScoutConfig.from_env."""

    def test_reads_org_and_token(self):
        """Test that organization and token come from the environment."""
        config = ScoutConfig.from_env({"DOCKER_ORG": "acme", "DOCKER_TOKEN": "secret"})
        assert config.organization == "acme"
        assert config.token == "secret"
        assert config.api_url == SCOUT_GRAPHQL_URL
        assert config.timeout == API_REQUEST_TIMEOUT

    def test_missing_values_are_none(self):
        """Test that missing settings do not fail at construction time."""
        config = ScoutConfig.from_env({})
        assert config.organization is None
        assert config.token is None

    def test_empty_strings_treated_as_unset(self):
        """Test that blank values count as missing."""
        config = ScoutConfig.from_env({"DOCKER_ORG": "  ", "DOCKER_TOKEN": ""})
        assert config.organization is None
        assert config.token is None

    def test_overrides(self):
        """Test endpoint and timeout overrides."""
        config = ScoutConfig.from_env({
            "SCOUT_API_URL": "http://localhost:8080/graphql",
            "SCOUT_TIMEOUT": "5",
        })
        assert config.api_url == "http://localhost:8080/graphql"
        assert config.timeout == 5.0

    @pytest.mark.parametrize("value", ["soon", "0", "-3"])
    def test_invalid_timeout(self, value):
        """Test that a bad timeout is a configuration error."""
        with pytest.raises(ConfigurationException) as exc_info:
            ScoutConfig.from_env({"SCOUT_TIMEOUT": value})
        assert exc_info.value.setting == "SCOUT_TIMEOUT"


class TestRequire:
    """Tests for require_* accessors."""

    def test_require_organization(self, config):
        """Test that a configured organization is returned."""
        assert config.require_organization() == "acme"

    def test_require_organization_missing(self):
        """Test that a missing organization raises."""
        with pytest.raises(ConfigurationException, match="DOCKER_ORG"):
            ScoutConfig(token="t").require_organization()

    def test_require_token_missing(self):
        """Test that a missing token raises."""
        with pytest.raises(ConfigurationException, match="DOCKER_TOKEN"):
            ScoutConfig(organization="acme").require_token()

    def test_with_organization(self, config):
        """Test organization override and blank no-op."""
        assert config.with_organization("other").organization == "other"
        assert config.with_organization("").organization == "acme"
        assert config.with_organization(None) is config

    def test_repr_hides_token(self, config):
        """Test that the token never appears in repr."""
        assert "test_token" not in repr(config)
