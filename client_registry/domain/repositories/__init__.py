"""Domain repository interfaces.

All abstractions are defined here with abc.ABC and @abstractmethod.
Concrete implementations live in client_registry/infrastructure/persistence/
and are wired at the application boundary.

Import from this package rather than individual modules to avoid coupling
callers to specific repository module paths.
"""

from .base import (
    Adder,
    Checker,
    Finder,
    LogicalDeleter,
    PermanentlyDeleter,
    Repository,
    Updater,
)
from .clients import ClientRepository

__all__ = [
    "Adder",
    "Updater",
    "LogicalDeleter",
    "PermanentlyDeleter",
    "Finder",
    "Checker",
    "Repository",
    "ClientRepository",
]
