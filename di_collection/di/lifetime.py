"""
Service Lifetimes for Dependency Injection

Defines how long a resolved instance is reused:
- SINGLETON: Created once, shared for the provider's lifetime
- SCOPED: Created once per logical scope
- TRANSIENT: Created fresh on every request
"""

from enum import Enum


class ServiceLifetime(Enum):
    """
    Service lifetimes.

    SINGLETON: One instance for the lifetime of the built provider.
               Use for: configuration, connection pools, caches.

    SCOPED: One instance per scope opened by the provider.
            Use for: unit of work, request context, user session.

    TRANSIENT: New instance created every time it's requested.
               Use for: stateless services, utilities.
    """

    SINGLETON = "singleton"
    SCOPED = "scoped"
    TRANSIENT = "transient"
