"""
Custom exceptions for DI_COLLECTION.

Argument errors also derive from ValueError so callers that only know
the builtin hierarchy can still catch them.
"""

from typing import Any, Dict, Optional


class DICollectionError(Exception):
    """
    Base exception for DI collection errors.

    Attributes:
        message: Error message
        context: Optional dictionary with additional context (service_type,
                 collection_name, etc.)
    """

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None) -> None:
        """
        Initialize the exception.

        Args:
            message: Error message
            context: Optional dictionary with additional context information
        """
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        """Return formatted error message with context if available."""
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} (context: {context_str})"
        return self.message


class ArgumentError(DICollectionError, ValueError):
    """
    Raised when an argument passed to a registration operation is invalid.

    Attributes:
        message: Error message
        param_name: Name of the offending parameter
        context: Additional context information
    """

    def __init__(
        self,
        message: str,
        param_name: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        context = context or {}
        if param_name:
            context["param_name"] = param_name
        super().__init__(message, context=context)
        self.param_name = param_name


class ArgumentNullError(ArgumentError):
    """Raised when a required argument is None."""

    def __init__(self, param_name: str, context: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(
            f"Value cannot be None: '{param_name}'",
            param_name=param_name,
            context=context,
        )


class InvalidDescriptorError(ArgumentError):
    """
    Raised when descriptor inputs are present but structurally unusable.

    Examples are a lifetime that is not a ServiceLifetime, an implementation
    type that is not a class, or both an implementation type and a factory.
    """


class ImplementationTypeRequiredError(ArgumentError):
    """
    Raised by multi-registration when the descriptor has no implementation type.

    Factory and instance descriptors cannot be compared by implementation
    type, so they are rejected for this operation.
    """

    def __init__(self, param_name: str = "descriptor") -> None:
        super().__init__(
            "Implementation type cannot be None for a multi-registration. "
            "ServiceDescriptor must have implementation_type set to a non-null value.",
            param_name=param_name,
        )


class CollectionReadOnlyError(DICollectionError):
    """
    Raised when a collection is mutated after make_read_only() was called.

    Attributes:
        message: Error message
        collection_name: Name of the frozen collection (if available)
    """

    def __init__(
        self,
        message: str = "The service collection cannot be modified because it is read-only.",
        collection_name: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        context = context or {}
        if collection_name:
            context["collection_name"] = collection_name
        super().__init__(message, context=context)
        self.collection_name = collection_name


class ConfigurationError(DICollectionError):
    """
    Raised when configuration is invalid or missing.

    Attributes:
        message: Error message
        config_key: Configuration key that caused the error (if available)
        config_value: Configuration value that caused the error (if available)
        context: Additional context information
    """

    def __init__(
        self,
        message: str,
        config_key: Optional[str] = None,
        config_value: Optional[Any] = None,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        """
        Initialize the configuration error.

        Args:
            message: Error message
            config_key: Configuration key that caused the error (if available)
            config_value: Configuration value that caused the error (if available)
            context: Additional context information
        """
        context = context or {}
        if config_key:
            context["config_key"] = config_key
        if config_value is not None:
            context["config_value"] = config_value
        super().__init__(message, context=context)
        self.config_key = config_key
        self.config_value = config_value
