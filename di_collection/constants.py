"""
Constants for DI_COLLECTION.

Environment variable names and defaults shared by configuration and
logging.
"""

from typing import Final

# ============================================================================
# CONFIGURATION CONSTANTS
# ============================================================================

ENV_COLLECTION_NAME: Final[str] = "DI_COLLECTION_NAME"
"""Environment variable holding the collection name used in log context."""

ENV_STRICT_SELF_REGISTRATION: Final[str] = "DI_STRICT_SELF_REGISTRATION"
"""Environment variable enabling the concrete-class check on self-registration."""

DEFAULT_COLLECTION_NAME: Final[str] = "default"
"""Collection name used when none is configured."""

DEFAULT_STRICT_SELF_REGISTRATION: Final[bool] = False
"""Abstract self-registrations are accepted unless strict mode is enabled."""

TRUTHY_VALUES: Final[frozenset[str]] = frozenset({"1", "true", "yes", "on"})
"""Case-insensitive strings treated as True for boolean environment variables."""

# ============================================================================
# LOGGING CONSTANTS
# ============================================================================

OPERATION_ADD: Final[str] = "add"
OPERATION_TRY_ADD: Final[str] = "try_add"
OPERATION_TRY_ADD_MULTI: Final[str] = "try_add_multi_registration"
OPERATION_REPLACE: Final[str] = "replace"
OPERATION_REMOVE_ALL: Final[str] = "remove_all"
OPERATION_MAKE_READ_ONLY: Final[str] = "make_read_only"
