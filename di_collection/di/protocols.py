"""
Protocol definitions for the external service provider.

The provider that turns a finished collection into live objects is not
part of this package. Factories registered on a collection receive an
object satisfying ServiceProvider.
"""

from collections.abc import Callable
from typing import Any, Protocol, runtime_checkable

__all__ = [
    "ServiceProvider",
    "ServiceFactory",
]


@runtime_checkable
class ServiceProvider(Protocol):
    """Protocol for the object handed to implementation factories."""

    def get_service(self, service_type: Any) -> Any | None:
        """Return an instance for service_type, or None if it is not registered."""
        ...


ServiceFactory = Callable[[ServiceProvider], Any]
