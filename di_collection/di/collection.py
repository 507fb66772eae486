"""
Service Collection

An ordered, mutable list of service descriptors built during application
composition and then handed to an external service provider.
"""

from collections.abc import Iterable, Iterator, MutableSequence
from typing import Any, overload

from ..config import RegistrationConfig
from ..constants import OPERATION_MAKE_READ_ONLY
from ..exceptions import CollectionReadOnlyError
from ..observability.logging import get_logger, log_operation
from .descriptor import ServiceDescriptor, ensure_descriptor
from .protocols import ServiceFactory

logger = get_logger(__name__)


class ServiceCollection(MutableSequence[ServiceDescriptor]):
    """
    Ordered collection of service descriptors.

    Insertion order is preserved and several descriptors may share a
    service type. The fluent helpers return the collection so
    registrations can be chained.

    Usage:
        services = (
            ServiceCollection()
            .add_singleton(Settings)
            .add_scoped(IUnitOfWork, SqlUnitOfWork)
            .add_instance(Clock, SystemClock())
        )
        services.try_add_transient(IMailer, SmtpMailer)
        services.make_read_only()
    """

    def __init__(
        self,
        descriptors: Iterable[ServiceDescriptor] | None = None,
        config: RegistrationConfig | None = None,
    ):
        self.config = config or RegistrationConfig()
        self.config.validate()
        self._descriptors: list[ServiceDescriptor] = []
        self._read_only = False
        if descriptors is not None:
            for descriptor in descriptors:
                self.append(descriptor)

    # ------------------------------------------------------------------
    # MutableSequence contract
    # ------------------------------------------------------------------

    @overload
    def __getitem__(self, index: int) -> ServiceDescriptor: ...

    @overload
    def __getitem__(self, index: slice) -> list[ServiceDescriptor]: ...

    def __getitem__(self, index):
        return self._descriptors[index]

    def __setitem__(self, index, value) -> None:
        self._check_read_only()
        if isinstance(index, slice):
            values = [ensure_descriptor(item, "value") for item in value]
            self._descriptors[index] = values
        else:
            self._descriptors[index] = ensure_descriptor(value, "value")

    def __delitem__(self, index) -> None:
        self._check_read_only()
        del self._descriptors[index]

    def __len__(self) -> int:
        return len(self._descriptors)

    def __iter__(self) -> Iterator[ServiceDescriptor]:
        return iter(self._descriptors)

    def insert(self, index: int, value: ServiceDescriptor) -> None:
        self._check_read_only()
        self._descriptors.insert(index, ensure_descriptor(value))

    def index(self, value: Any, start: int = 0, stop: int | None = None) -> int:
        """Position of value, compared by identity like every other lookup."""
        start, stop, _ = slice(start, stop).indices(len(self._descriptors))
        for i in range(start, stop):
            if self._descriptors[i] is value:
                return i
        raise ValueError(f"{value!r} is not in the service collection")

    def __contains__(self, value: object) -> bool:
        return any(descriptor is value for descriptor in self._descriptors)

    def __repr__(self) -> str:
        return f"ServiceCollection({self._descriptors!r})"

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def is_registered(self, service_type: Any) -> bool:
        """Check if any descriptor is registered for service_type."""
        return any(d.service_type == service_type for d in self._descriptors)

    def descriptors_for(self, service_type: Any) -> list[ServiceDescriptor]:
        """All descriptors registered for service_type, in insertion order."""
        return [d for d in self._descriptors if d.service_type == service_type]

    # ------------------------------------------------------------------
    # Read-only state
    # ------------------------------------------------------------------

    @property
    def is_read_only(self) -> bool:
        return self._read_only

    def make_read_only(self) -> "ServiceCollection":
        """
        Freeze the collection.

        Called once composition is finished; every later mutation raises
        CollectionReadOnlyError.
        """
        if not self._read_only:
            self._read_only = True
            log_operation(
                logger,
                OPERATION_MAKE_READ_ONLY,
                collection_name=self.config.collection_name,
                descriptor_count=len(self._descriptors),
            )
        return self

    def _check_read_only(self) -> None:
        if self._read_only:
            raise CollectionReadOnlyError(collection_name=self.config.collection_name)

    # ------------------------------------------------------------------
    # Fluent registration helpers
    # ------------------------------------------------------------------

    def add(self, descriptor: ServiceDescriptor) -> "ServiceCollection":
        from .registration import add

        return add(self, descriptor)

    def add_range(self, descriptors: Iterable[ServiceDescriptor]) -> "ServiceCollection":
        from .registration import add_range

        return add_range(self, descriptors)

    def try_add(self, descriptor: ServiceDescriptor) -> bool:
        from .registration import try_add

        return try_add(self, descriptor)

    def try_add_range(self, descriptors: Iterable[ServiceDescriptor]) -> bool:
        from .registration import try_add_range

        return try_add_range(self, descriptors)

    def try_add_multi_registration(self, descriptor: ServiceDescriptor) -> bool:
        from .registration import try_add_multi_registration

        return try_add_multi_registration(self, descriptor)

    def add_transient(
        self,
        service_type: Any,
        implementation_type: type | None = None,
        *,
        factory: ServiceFactory | None = None,
    ) -> "ServiceCollection":
        from .registration import add_transient

        return add_transient(self, service_type, implementation_type, factory=factory)

    def add_scoped(
        self,
        service_type: Any,
        implementation_type: type | None = None,
        *,
        factory: ServiceFactory | None = None,
    ) -> "ServiceCollection":
        from .registration import add_scoped

        return add_scoped(self, service_type, implementation_type, factory=factory)

    def add_singleton(
        self,
        service_type: Any,
        implementation_type: type | None = None,
        *,
        factory: ServiceFactory | None = None,
    ) -> "ServiceCollection":
        from .registration import add_singleton

        return add_singleton(self, service_type, implementation_type, factory=factory)

    def add_instance(self, service_type: Any, instance: Any) -> "ServiceCollection":
        from .registration import add_instance

        return add_instance(self, service_type, instance)

    def try_add_transient(
        self,
        service_type: Any,
        implementation_type: type | None = None,
        *,
        factory: ServiceFactory | None = None,
    ) -> bool:
        from .registration import try_add_transient

        return try_add_transient(self, service_type, implementation_type, factory=factory)

    def try_add_scoped(
        self,
        service_type: Any,
        implementation_type: type | None = None,
        *,
        factory: ServiceFactory | None = None,
    ) -> bool:
        from .registration import try_add_scoped

        return try_add_scoped(self, service_type, implementation_type, factory=factory)

    def try_add_singleton(
        self,
        service_type: Any,
        implementation_type: type | None = None,
        *,
        factory: ServiceFactory | None = None,
    ) -> bool:
        from .registration import try_add_singleton

        return try_add_singleton(self, service_type, implementation_type, factory=factory)

    def replace(self, descriptor: ServiceDescriptor) -> "ServiceCollection":
        from .registration import replace

        return replace(self, descriptor)

    def remove_all(self, service_type: Any) -> "ServiceCollection":
        from .registration import remove_all

        return remove_all(self, service_type)


__all__ = ["ServiceCollection"]
