"""
Registration helpers for service collections.

Stateless functions that build descriptors and add, conditionally add,
or replace them in a collection. Every function validates all of its
arguments before touching the collection, so a failed call leaves the
collection unchanged.

Usage:
    from di_collection.di import registration as reg

    services = ServiceCollection()
    reg.add_singleton(services, Settings)
    reg.add_scoped(services, IRepository, SqlRepository)
    reg.try_add_transient(services, IMailer, SmtpMailer)  # no-op if IMailer exists
    reg.try_add_multi_registration(services, ServiceDescriptor.transient(IHandler, AuditHandler))
    reg.replace(services, ServiceDescriptor.singleton(IClock, FrozenClock))
"""

import inspect
from collections.abc import Iterable, MutableSequence
from typing import Any

from ..constants import (
    OPERATION_ADD,
    OPERATION_REMOVE_ALL,
    OPERATION_REPLACE,
    OPERATION_TRY_ADD,
    OPERATION_TRY_ADD_MULTI,
)
from ..exceptions import ArgumentNullError, ImplementationTypeRequiredError, InvalidDescriptorError
from ..observability.logging import get_logger, log_operation
from .descriptor import ServiceDescriptor, ensure_descriptor, type_name
from .lifetime import ServiceLifetime
from .protocols import ServiceFactory

logger = get_logger(__name__)

ServiceDescriptors = MutableSequence[ServiceDescriptor]

__all__ = [
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


# ============================================================================
# INTERNAL HELPERS
# ============================================================================


def _require_collection(collection: Any) -> ServiceDescriptors:
    if collection is None:
        raise ArgumentNullError("collection")
    return collection


def _require_descriptors(
    descriptors: Iterable[ServiceDescriptor] | None,
) -> list[ServiceDescriptor]:
    if descriptors is None:
        raise ArgumentNullError("descriptors")
    return [ensure_descriptor(d, "descriptors") for d in descriptors]


def _collection_name(collection: ServiceDescriptors) -> str | None:
    config = getattr(collection, "config", None)
    return getattr(config, "collection_name", None)


def _strict_self_registration(collection: ServiceDescriptors) -> bool:
    config = getattr(collection, "config", None)
    return bool(getattr(config, "strict_self_registration", False))


def _log(
    collection: ServiceDescriptors,
    operation: str,
    descriptor: ServiceDescriptor,
    success: bool = True,
) -> None:
    log_operation(
        logger,
        operation,
        success=success,
        collection_name=_collection_name(collection),
        service_type=type_name(descriptor.service_type),
        lifetime=descriptor.lifetime.value,
    )


def _build(
    collection: ServiceDescriptors,
    service_type: Any,
    lifetime: ServiceLifetime,
    implementation_type: type | None,
    factory: ServiceFactory | None,
) -> ServiceDescriptor:
    if (
        implementation_type is None
        and factory is None
        and service_type is not None
        and _strict_self_registration(collection)
    ):
        _require_concrete(service_type)
    return ServiceDescriptor.for_lifetime(service_type, lifetime, implementation_type, factory)


def _require_concrete(service_type: Any) -> None:
    if not isinstance(service_type, type):
        raise InvalidDescriptorError(
            f"Cannot self-register {service_type!r}: it is not a class",
            param_name="service_type",
        )
    if getattr(service_type, "_is_protocol", False) or inspect.isabstract(service_type):
        raise InvalidDescriptorError(
            f"Cannot self-register {type_name(service_type)}: "
            "abstract classes and protocols cannot be instantiated",
            param_name="service_type",
            context={"service_type": type_name(service_type)},
        )


# ============================================================================
# APPEND
# ============================================================================


def add(collection: ServiceDescriptors, descriptor: ServiceDescriptor) -> ServiceDescriptors:
    """
    Append descriptor to collection without any duplicate check.

    Returns:
        The same collection, for chaining
    """
    _require_collection(collection)
    ensure_descriptor(descriptor)
    collection.append(descriptor)
    _log(collection, OPERATION_ADD, descriptor)
    return collection


def add_range(
    collection: ServiceDescriptors, descriptors: Iterable[ServiceDescriptor]
) -> ServiceDescriptors:
    """
    Append every descriptor in iteration order.

    The whole sequence is validated first; a None entry means nothing is
    appended.
    """
    _require_collection(collection)
    for descriptor in _require_descriptors(descriptors):
        collection.append(descriptor)
        _log(collection, OPERATION_ADD, descriptor)
    return collection


# ============================================================================
# CONDITIONAL APPEND
# ============================================================================


def try_add(collection: ServiceDescriptors, descriptor: ServiceDescriptor) -> bool:
    """
    Append descriptor unless its service type is already registered.

    Any existing descriptor with the same service type blocks the add,
    whatever its lifetime or implementation.

    Returns:
        True if descriptor was appended, otherwise False
    """
    _require_collection(collection)
    ensure_descriptor(descriptor)
    if any(d.service_type == descriptor.service_type for d in collection):
        _log(collection, OPERATION_TRY_ADD, descriptor, success=False)
        return False

    collection.append(descriptor)
    _log(collection, OPERATION_TRY_ADD, descriptor)
    return True


def try_add_range(
    collection: ServiceDescriptors, descriptors: Iterable[ServiceDescriptor]
) -> bool:
    """
    Apply try_add to each descriptor in order.

    Each check sees the collection as left by the previous one, so an
    earlier descriptor in the same call blocks later ones with the same
    service type.

    Returns:
        True if at least one descriptor was appended
    """
    _require_collection(collection)
    added = False
    for descriptor in _require_descriptors(descriptors):
        if try_add(collection, descriptor):
            added = True
    return added


def try_add_transient(
    collection: ServiceDescriptors,
    service_type: Any,
    implementation_type: type | None = None,
    *,
    factory: ServiceFactory | None = None,
) -> bool:
    _require_collection(collection)
    descriptor = _build(
        collection, service_type, ServiceLifetime.TRANSIENT, implementation_type, factory
    )
    return try_add(collection, descriptor)


def try_add_scoped(
    collection: ServiceDescriptors,
    service_type: Any,
    implementation_type: type | None = None,
    *,
    factory: ServiceFactory | None = None,
) -> bool:
    _require_collection(collection)
    descriptor = _build(
        collection, service_type, ServiceLifetime.SCOPED, implementation_type, factory
    )
    return try_add(collection, descriptor)


def try_add_singleton(
    collection: ServiceDescriptors,
    service_type: Any,
    implementation_type: type | None = None,
    *,
    factory: ServiceFactory | None = None,
) -> bool:
    _require_collection(collection)
    descriptor = _build(
        collection, service_type, ServiceLifetime.SINGLETON, implementation_type, factory
    )
    return try_add(collection, descriptor)


# ============================================================================
# MULTI-REGISTRATION
# ============================================================================


def try_add_multi_registration(
    collection: ServiceDescriptors, descriptor: ServiceDescriptor
) -> bool:
    """
    Append descriptor unless the same (service type, implementation type)
    pair is already registered.

    Use this for service types that are resolved as a set, such as event
    handlers. Several implementations of one service type can coexist, but
    registering the same implementation twice is a no-op.

    Existing factory and instance registrations have no implementation type
    to compare, so they never block the add.

    Args:
        collection: The collection to add to
        descriptor: A descriptor with implementation_type set

    Returns:
        True if descriptor was appended, otherwise False

    Raises:
        ImplementationTypeRequiredError: If descriptor was built from a
            factory or an instance
    """
    _require_collection(collection)
    ensure_descriptor(descriptor)
    # Factories and instances cannot be compared, so only a type registration is accepted.
    if descriptor.implementation_type is None:
        raise ImplementationTypeRequiredError("descriptor")

    if any(
        d.service_type == descriptor.service_type
        and d.implementation_type == descriptor.implementation_type
        for d in collection
    ):
        _log(collection, OPERATION_TRY_ADD_MULTI, descriptor, success=False)
        return False

    collection.append(descriptor)
    _log(collection, OPERATION_TRY_ADD_MULTI, descriptor)
    return True


# ============================================================================
# UNCONDITIONAL CONVENIENCE
# ============================================================================


def add_transient(
    collection: ServiceDescriptors,
    service_type: Any,
    implementation_type: type | None = None,
    *,
    factory: ServiceFactory | None = None,
) -> ServiceDescriptors:
    """
    Register a transient service.

    Example:
        add_transient(services, IMailer, SmtpMailer)
        add_transient(services, SmtpMailer)
        add_transient(services, IMailer, factory=lambda sp: SmtpMailer(host))
    """
    _require_collection(collection)
    descriptor = _build(
        collection, service_type, ServiceLifetime.TRANSIENT, implementation_type, factory
    )
    return add(collection, descriptor)


def add_scoped(
    collection: ServiceDescriptors,
    service_type: Any,
    implementation_type: type | None = None,
    *,
    factory: ServiceFactory | None = None,
) -> ServiceDescriptors:
    _require_collection(collection)
    descriptor = _build(
        collection, service_type, ServiceLifetime.SCOPED, implementation_type, factory
    )
    return add(collection, descriptor)


def add_singleton(
    collection: ServiceDescriptors,
    service_type: Any,
    implementation_type: type | None = None,
    *,
    factory: ServiceFactory | None = None,
) -> ServiceDescriptors:
    _require_collection(collection)
    descriptor = _build(
        collection, service_type, ServiceLifetime.SINGLETON, implementation_type, factory
    )
    return add(collection, descriptor)


def add_instance(
    collection: ServiceDescriptors, service_type: Any, instance: Any
) -> ServiceDescriptors:
    """Register a pre-built instance as a singleton."""
    _require_collection(collection)
    return add(collection, ServiceDescriptor.from_instance(service_type, instance))


# ============================================================================
# REPLACE / REMOVE
# ============================================================================


def replace(collection: ServiceDescriptors, descriptor: ServiceDescriptor) -> ServiceDescriptors:
    """
    Remove the first descriptor with the same service type, then append
    descriptor at the end.

    Later descriptors with that service type stay where they are. Without a
    match this is a plain append.
    """
    _require_collection(collection)
    ensure_descriptor(descriptor)
    for index, existing in enumerate(collection):
        if existing.service_type == descriptor.service_type:
            del collection[index]
            break

    collection.append(descriptor)
    _log(collection, OPERATION_REPLACE, descriptor)
    return collection


def remove_all(collection: ServiceDescriptors, service_type: Any) -> ServiceDescriptors:
    """Remove every descriptor registered for service_type."""
    _require_collection(collection)
    if service_type is None:
        raise ArgumentNullError("service_type")

    indexes = [i for i, d in enumerate(collection) if d.service_type == service_type]
    for index in reversed(indexes):
        del collection[index]

    log_operation(
        logger,
        OPERATION_REMOVE_ALL,
        success=bool(indexes),
        collection_name=_collection_name(collection),
        service_type=type_name(service_type),
        removed=len(indexes),
    )
    return collection
