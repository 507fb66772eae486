"""
Unit tests for RegistrationConfig.

Tests environment variable handling and validation.
"""

import pytest

from di_collection.config import RegistrationConfig
from di_collection.constants import ENV_COLLECTION_NAME, ENV_STRICT_SELF_REGISTRATION
from di_collection.exceptions import ConfigurationError


class TestRegistrationConfigDefaults:
    """Tests for default values."""

    def test_defaults(self):
        """Test defaults when nothing is configured."""
        config = RegistrationConfig()

        assert config.collection_name == "default"
        assert config.strict_self_registration is False

    def test_direct_parameters_win(self, monkeypatch):
        """Test that direct parameters override the environment."""
        monkeypatch.setenv(ENV_COLLECTION_NAME, "from-env")
        monkeypatch.setenv(ENV_STRICT_SELF_REGISTRATION, "true")

        config = RegistrationConfig(collection_name="direct", strict_self_registration=False)

        assert config.collection_name == "direct"
        assert config.strict_self_registration is False


class TestRegistrationConfigEnvironment:
    """Tests for environment variable parsing."""

    def test_collection_name_from_env(self, monkeypatch):
        """Test DI_COLLECTION_NAME is read."""
        monkeypatch.setenv(ENV_COLLECTION_NAME, "worker")

        assert RegistrationConfig().collection_name == "worker"

    @pytest.mark.parametrize("value", ["1", "true", "TRUE", "yes", " on "])
    def test_truthy_strict_values(self, monkeypatch, value):
        """Test accepted truthy spellings for strict mode."""
        monkeypatch.setenv(ENV_STRICT_SELF_REGISTRATION, value)

        assert RegistrationConfig().strict_self_registration is True

    @pytest.mark.parametrize("value", ["0", "false", "no", "", "maybe"])
    def test_other_strict_values(self, monkeypatch, value):
        """Test that anything else disables strict mode."""
        monkeypatch.setenv(ENV_STRICT_SELF_REGISTRATION, value)

        assert RegistrationConfig().strict_self_registration is False


class TestRegistrationConfigValidation:
    """Tests for validate()."""

    def test_valid_config(self):
        """Test that the default config validates."""
        RegistrationConfig().validate()

    def test_empty_collection_name(self):
        """Test that an empty collection name is rejected."""
        config = RegistrationConfig(collection_name="")

        with pytest.raises(ConfigurationError) as exc_info:
            config.validate()

        assert exc_info.value.config_key == "collection_name"

    def test_non_bool_strict_flag(self):
        """Test that strict_self_registration must be a bool."""
        config = RegistrationConfig(strict_self_registration="yes")

        with pytest.raises(ConfigurationError) as exc_info:
            config.validate()

        assert exc_info.value.config_key == "strict_self_registration"

    def test_repr(self):
        """Test repr shows both settings."""
        text = repr(RegistrationConfig(collection_name="api", strict_self_registration=True))

        assert "api" in text
        assert "True" in text
