"""
DI_COLLECTION Dependency Injection Module

Registration surface of a DI container: an ordered collection of service
descriptors plus helpers to add, conditionally add, multi-register and
replace them. Service lifetimes:
- SINGLETON: One instance for the provider's lifetime
- SCOPED: One instance per scope
- TRANSIENT: New instance on every request

Usage:
    from di_collection.di import ServiceCollection, ServiceDescriptor

    services = ServiceCollection()
    services.add_singleton(Settings)
    services.add_scoped(IUnitOfWork, SqlUnitOfWork)
    services.try_add_multi_registration(ServiceDescriptor.transient(IHandler, AuditHandler))
    services.make_read_only()
"""

from .collection import ServiceCollection
from .descriptor import (
    FactoryImplementation,
    Implementation,
    InstanceImplementation,
    ServiceDescriptor,
    TypeImplementation,
)
from .lifetime import ServiceLifetime
from .protocols import ServiceFactory, ServiceProvider
from .registration import (
    add,
    add_instance,
    add_range,
    add_scoped,
    add_singleton,
    add_transient,
    remove_all,
    replace,
    try_add,
    try_add_multi_registration,
    try_add_range,
    try_add_scoped,
    try_add_singleton,
    try_add_transient,
)

__all__ = [
    "ServiceCollection",
    "ServiceDescriptor",
    "ServiceLifetime",
    "ServiceProvider",
    "ServiceFactory",
    "Implementation",
    "TypeImplementation",
    "FactoryImplementation",
    "InstanceImplementation",
    # Registration helpers
    "add",
    "add_range",
    "try_add",
    "try_add_range",
    "try_add_transient",
    "try_add_scoped",
    "try_add_singleton",
    "try_add_multi_registration",
    "add_transient",
    "add_scoped",
    "add_singleton",
    "add_instance",
    "replace",
    "remove_all",
]
