"""Platform interfaces following Black Box Design principles."""
from typing import Protocol

from ..resolver import NavigationTarget


class HandlerRegistry(Protocol):
    """Protocol for the registry of installed screen handlers."""

    def can_resolve(self, target: NavigationTarget) -> bool:
        """
        Check whether some installed handler claims the target.

        Args:
            target: Navigation target to look up

        Returns:
            True if a handler would accept it (no side effects)
        """
        ...


class Platform(HandlerRegistry, Protocol):
    """Protocol for a host platform the resolver can drive."""

    @property
    def platform_version(self) -> int:
        ...

    @property
    def package_name(self) -> str:
        ...

    def launch(self, target: NavigationTarget) -> None:
        """
        Open the target.

        Raises:
            Exception: If no handler can actually show it
        """
        ...


class ActivityNotFoundError(RuntimeError):
    """No installed component can handle a navigation target."""
