"""
Service Descriptors for Dependency Injection

A descriptor binds a service type to one implementation strategy and a
lifetime. The strategy is a tagged variant: a concrete type to
instantiate, a factory that receives the service provider, or a
pre-built instance.
"""

from dataclasses import dataclass
from typing import Any, Union

from ..exceptions import ArgumentNullError, InvalidDescriptorError
from .lifetime import ServiceLifetime
from .protocols import ServiceFactory


@dataclass(frozen=True)
class TypeImplementation:
    """Instantiate implementation_type when the service is requested."""

    implementation_type: type


@dataclass(frozen=True)
class FactoryImplementation:
    """Call factory(provider) when the service is requested."""

    factory: ServiceFactory


@dataclass(frozen=True, eq=False)
class InstanceImplementation:
    """Always hand out the same pre-built instance."""

    instance: Any


Implementation = Union[TypeImplementation, FactoryImplementation, InstanceImplementation]


def type_name(obj: Any) -> str:
    """Readable name for a service key used in messages and log records."""
    return getattr(obj, "__qualname__", None) or repr(obj)


def ensure_descriptor(value: Any, param_name: str = "descriptor") -> "ServiceDescriptor":
    """Return value if it is a ServiceDescriptor, otherwise raise an argument error."""
    if value is None:
        raise ArgumentNullError(param_name)
    if not isinstance(value, ServiceDescriptor):
        raise InvalidDescriptorError(
            f"Expected a ServiceDescriptor, got {type(value).__name__}",
            param_name=param_name,
        )
    return value


@dataclass(frozen=True, eq=False)
class ServiceDescriptor:
    """
    Immutable record describing one service registration.

    Descriptors compare by identity: two registrations with the same
    fields are still two entries in a collection.

    Usage:
        ServiceDescriptor.transient(IRepository, SqlRepository)
        ServiceDescriptor.singleton(Settings)  # self-registration
        ServiceDescriptor.scoped(UnitOfWork, factory=lambda sp: UnitOfWork(...))
        ServiceDescriptor.instance(Config, config)
    """

    service_type: Any
    implementation: Implementation
    lifetime: ServiceLifetime

    def __post_init__(self) -> None:
        if self.service_type is None:
            raise ArgumentNullError("service_type")
        if self.implementation is None:
            raise ArgumentNullError("implementation")
        if not isinstance(
            self.implementation,
            (TypeImplementation, FactoryImplementation, InstanceImplementation),
        ):
            raise InvalidDescriptorError(
                f"Unsupported implementation strategy: {type(self.implementation).__name__}",
                param_name="implementation",
            )
        if not isinstance(self.lifetime, ServiceLifetime):
            raise InvalidDescriptorError(
                f"lifetime must be a ServiceLifetime, got {self.lifetime!r}",
                param_name="lifetime",
            )
        if (
            isinstance(self.implementation, InstanceImplementation)
            and self.lifetime is not ServiceLifetime.SINGLETON
        ):
            raise InvalidDescriptorError(
                "Instance registrations are always singletons",
                param_name="lifetime",
                context={"lifetime": self.lifetime.value},
            )

    # ------------------------------------------------------------------
    # Active implementation accessors
    # ------------------------------------------------------------------

    @property
    def implementation_type(self) -> type | None:
        if isinstance(self.implementation, TypeImplementation):
            return self.implementation.implementation_type
        return None

    @property
    def implementation_factory(self) -> ServiceFactory | None:
        if isinstance(self.implementation, FactoryImplementation):
            return self.implementation.factory
        return None

    @property
    def implementation_instance(self) -> Any | None:
        if isinstance(self.implementation, InstanceImplementation):
            return self.implementation.instance
        return None

    # ------------------------------------------------------------------
    # Constructors
    # ------------------------------------------------------------------

    @classmethod
    def describe(
        cls,
        service_type: Any,
        implementation_type: type,
        lifetime: ServiceLifetime,
    ) -> "ServiceDescriptor":
        """
        Create a type-based descriptor.

        Args:
            service_type: The contract key being registered
            implementation_type: Concrete class to instantiate
            lifetime: Service lifetime

        Raises:
            ArgumentNullError: If service_type or implementation_type is None
            InvalidDescriptorError: If implementation_type is not a class
        """
        if service_type is None:
            raise ArgumentNullError("service_type")
        if implementation_type is None:
            raise ArgumentNullError("implementation_type")
        if not isinstance(implementation_type, type):
            raise InvalidDescriptorError(
                f"implementation_type must be a class, got {implementation_type!r}",
                param_name="implementation_type",
            )
        return cls(service_type, TypeImplementation(implementation_type), lifetime)

    @classmethod
    def from_factory(
        cls,
        service_type: Any,
        factory: ServiceFactory,
        lifetime: ServiceLifetime,
    ) -> "ServiceDescriptor":
        """
        Create a factory-based descriptor.

        The factory is stored as-is and is called by the provider with
        itself as the only argument.
        """
        if service_type is None:
            raise ArgumentNullError("service_type")
        if factory is None:
            raise ArgumentNullError("factory")
        if not callable(factory):
            raise InvalidDescriptorError(
                f"factory must be callable, got {type(factory).__name__}",
                param_name="factory",
            )
        return cls(service_type, FactoryImplementation(factory), lifetime)

    @classmethod
    def from_instance(cls, service_type: Any, instance: Any) -> "ServiceDescriptor":
        """Create a singleton descriptor around a pre-built instance."""
        if service_type is None:
            raise ArgumentNullError("service_type")
        if instance is None:
            raise ArgumentNullError("instance")
        return cls(service_type, InstanceImplementation(instance), ServiceLifetime.SINGLETON)

    instance = from_instance

    @classmethod
    def for_lifetime(
        cls,
        service_type: Any,
        lifetime: ServiceLifetime,
        implementation_type: type | None = None,
        factory: ServiceFactory | None = None,
    ) -> "ServiceDescriptor":
        """
        Create a type or factory descriptor for the given lifetime.

        With neither implementation_type nor factory the service type
        registers itself as its implementation.
        """
        if service_type is None:
            raise ArgumentNullError("service_type")
        if implementation_type is not None and factory is not None:
            raise InvalidDescriptorError(
                "Pass either implementation_type or factory, not both",
                param_name="factory",
                context={"service_type": type_name(service_type)},
            )
        if factory is not None:
            return cls.from_factory(service_type, factory, lifetime)
        if implementation_type is None:
            implementation_type = service_type
        return cls.describe(service_type, implementation_type, lifetime)

    @classmethod
    def transient(
        cls,
        service_type: Any,
        implementation_type: type | None = None,
        *,
        factory: ServiceFactory | None = None,
    ) -> "ServiceDescriptor":
        return cls.for_lifetime(
            service_type, ServiceLifetime.TRANSIENT, implementation_type, factory
        )

    @classmethod
    def scoped(
        cls,
        service_type: Any,
        implementation_type: type | None = None,
        *,
        factory: ServiceFactory | None = None,
    ) -> "ServiceDescriptor":
        return cls.for_lifetime(
            service_type, ServiceLifetime.SCOPED, implementation_type, factory
        )

    @classmethod
    def singleton(
        cls,
        service_type: Any,
        implementation_type: type | None = None,
        *,
        factory: ServiceFactory | None = None,
    ) -> "ServiceDescriptor":
        return cls.for_lifetime(
            service_type, ServiceLifetime.SINGLETON, implementation_type, factory
        )

    def __repr__(self) -> str:
        if isinstance(self.implementation, TypeImplementation):
            impl = f"implementation_type={type_name(self.implementation.implementation_type)}"
        elif isinstance(self.implementation, FactoryImplementation):
            impl = f"implementation_factory={type_name(self.implementation.factory)}"
        else:
            impl = f"implementation_instance={type(self.implementation.instance).__name__}"
        return (
            f"ServiceDescriptor(service_type={type_name(self.service_type)}, "
            f"{impl}, lifetime={self.lifetime.value})"
        )
