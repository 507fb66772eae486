"""
DI_COLLECTION - Service Collection

Registration surface for dependency injection: build an ordered list of
service descriptors during composition, then hand it to a service
provider.
"""

# Configuration
from .config import RegistrationConfig
# Core registration surface
from .di import (ServiceCollection, ServiceDescriptor, ServiceLifetime,
                 ServiceProvider)
# Errors
from .exceptions import (ArgumentError, ArgumentNullError,
                         CollectionReadOnlyError, ConfigurationError,
                         DICollectionError, ImplementationTypeRequiredError,
                         InvalidDescriptorError)

__version__ = "0.1.0"

__all__ = [
    # Core
    "ServiceCollection",
    "ServiceDescriptor",
    "ServiceLifetime",
    "ServiceProvider",
    # Configuration
    "RegistrationConfig",
    # Errors
    "DICollectionError",
    "ArgumentError",
    "ArgumentNullError",
    "InvalidDescriptorError",
    "ImplementationTypeRequiredError",
    "CollectionReadOnlyError",
    "ConfigurationError",
]
