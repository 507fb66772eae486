"""
Fake services shared by the unit tests.
"""

from abc import ABC, abstractmethod
from typing import Any, Protocol


class IFakeService(ABC):
    @abstractmethod
    def ping(self) -> str: ...


class FakeService(IFakeService):
    def ping(self) -> str:
        return "pong"


class AlternateFakeService(IFakeService):
    def ping(self) -> str:
        return "alternate"


class IFakeMultipleService:
    """Plain base class; resolved as a set of handlers."""


class FakeOneMultipleService(IFakeMultipleService):
    pass


class FakeTwoMultipleService(IFakeMultipleService):
    pass


class IFakeOuterService:
    pass


class FakeOuterService(IFakeOuterService):
    pass


class IFakeProtocol(Protocol):
    def run(self) -> None: ...


class FakeServiceProvider:
    """Minimal provider passed to factories in tests."""

    def __init__(self, services: dict[Any, Any] | None = None):
        self._services = services or {}

    def get_service(self, service_type: Any) -> Any | None:
        return self._services.get(service_type)


def fake_factory(provider) -> FakeService:
    return FakeService()
