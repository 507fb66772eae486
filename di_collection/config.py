"""
Configuration management for DI_COLLECTION.

Values come from direct parameters first, then environment variables,
then the defaults in constants.py.
"""

import os

from .constants import (
    DEFAULT_COLLECTION_NAME,
    DEFAULT_STRICT_SELF_REGISTRATION,
    ENV_COLLECTION_NAME,
    ENV_STRICT_SELF_REGISTRATION,
    TRUTHY_VALUES,
)
from .exceptions import ConfigurationError


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in TRUTHY_VALUES


class RegistrationConfig:
    """
    Service collection configuration.

    Example:
        # Using environment variables
        config = RegistrationConfig()
        services = ServiceCollection(config=config)

        # Or using direct parameters
        services = ServiceCollection(
            config=RegistrationConfig(collection_name="api", strict_self_registration=True)
        )
    """

    def __init__(
        self,
        collection_name: str | None = None,
        strict_self_registration: bool | None = None,
    ):
        """
        Initialize configuration.

        Args:
            collection_name: Name attached to log records (defaults to
                DI_COLLECTION_NAME env var, then "default")
            strict_self_registration: Reject self-registration of abstract
                classes and protocols (defaults to DI_STRICT_SELF_REGISTRATION)
        """
        if collection_name is None:
            collection_name = os.getenv(ENV_COLLECTION_NAME, DEFAULT_COLLECTION_NAME)
        self.collection_name = collection_name

        if strict_self_registration is None:
            strict_self_registration = _env_flag(
                ENV_STRICT_SELF_REGISTRATION, DEFAULT_STRICT_SELF_REGISTRATION
            )
        self.strict_self_registration = strict_self_registration

    def validate(self) -> None:
        """
        Validate configuration values.

        Raises:
            ConfigurationError: If a value is missing or invalid
        """
        if not isinstance(self.collection_name, str) or not self.collection_name.strip():
            raise ConfigurationError(
                "collection_name must be a non-empty string "
                f"(set {ENV_COLLECTION_NAME} environment variable or pass directly)",
                config_key="collection_name",
                config_value=self.collection_name,
            )

        if not isinstance(self.strict_self_registration, bool):
            raise ConfigurationError(
                "strict_self_registration must be a bool, got "
                f"{type(self.strict_self_registration).__name__}",
                config_key="strict_self_registration",
                config_value=self.strict_self_registration,
            )

    def __repr__(self) -> str:
        return (
            f"RegistrationConfig(collection_name={self.collection_name!r}, "
            f"strict_self_registration={self.strict_self_registration!r})"
        )
