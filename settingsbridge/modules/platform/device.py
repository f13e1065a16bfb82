"""
Simulated device for Settings Bridge.

Stands in for the host operating system: a registry of settings actions
that some installed handler claims, a launch action that shows a screen or
raises, a platform version and the calling application's package name.

Broken actions model OEM skins where a handler is registered for an action
but the screen behind it cannot actually be started.
"""

import logging
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any, Dict, Iterable, List, Optional

from ..resolver import NavigationTarget
from .interfaces import ActivityNotFoundError

logger = logging.getLogger("settingsbridge.platform")


@dataclass
class LaunchRecord:
    """One screen shown by the device."""

    target: NavigationTarget
    launched_at: str

    def to_dict(self) -> Dict[str, Any]:
        return {"target": self.target.to_dict(), "launched_at": self.launched_at}


class SimulatedDevice:
    """In-process host platform with a configurable handler registry."""

    def __init__(
        self,
        sdk_int: int,
        package_name: str,
        installed_actions: Iterable[str] = (),
        broken_actions: Iterable[str] = (),
    ):
        """
        Initialize simulated device.

        Args:
            sdk_int: Platform version ordinal
            package_name: Identity of the calling application
            installed_actions: Actions some handler claims and can show
            broken_actions: Actions some handler claims but fails to show
        """
        self._sdk_int = sdk_int
        self._package_name = package_name
        self.installed_actions = set(installed_actions)
        self.broken_actions = set(broken_actions)
        self._history: List[LaunchRecord] = []

    @property
    def platform_version(self) -> int:
        return self._sdk_int

    @property
    def package_name(self) -> str:
        return self._package_name

    def can_resolve(self, target: NavigationTarget) -> bool:
        return target.action in self.installed_actions or target.action in self.broken_actions

    def launch(self, target: NavigationTarget) -> None:
        """
        Show the target's screen.

        Raises:
            ActivityNotFoundError: If no working handler exists for the action
        """
        if target.action in self.broken_actions or target.action not in self.installed_actions:
            raise ActivityNotFoundError(
                f"No Activity found to handle Intent {target.describe()}"
            )

        self._history.append(
            LaunchRecord(target=target, launched_at=datetime.now(UTC).isoformat())
        )
        logger.info(f"Launched {target.action} for {target.data or 'no subject'}")

    @property
    def launches(self) -> List[LaunchRecord]:
        return list(self._history)

    @property
    def last_launch(self) -> Optional[LaunchRecord]:
        return self._history[-1] if self._history else None

    def clear_launches(self) -> int:
        """
        Forget the launch history.

        Returns:
            Number of records removed
        """
        removed = len(self._history)
        self._history.clear()
        return removed

    def describe(self) -> Dict[str, Any]:
        return {
            "platformVersion": self.platform_version,
            "packageName": self.package_name,
            "installedActions": sorted(self.installed_actions),
            "brokenActions": sorted(self.broken_actions),
        }
