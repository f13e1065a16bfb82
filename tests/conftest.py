"""
Shared pytest fixtures for Settings Bridge tests.

This module provides common fixtures including:
- ScriptedPlatform: Host platform double with per-action resolve/launch behaviour
- Simulated device and method channel builders
- FastAPI test client utilities
"""

import os
import sys
from dataclasses import dataclass, field
from typing import Dict, List, Optional

import pytest

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from settingsbridge.modules.platform import ActivityNotFoundError, SimulatedDevice
from settingsbridge.modules.resolver import (
    STANDARD_ACTIONS,
    EnvironmentFacts,
    NavigationTarget,
)

PACKAGE = "com.example.viewer"


# =============================================================================
# Platform Scripting Infrastructure
# =============================================================================


@dataclass
class ActionScript:
    """How the scripted platform treats one action."""
    resolvable: bool = False
    launch_error: Optional[Exception] = None


@dataclass
class ScriptedPlatform:
    """
    Host platform double that records every query and launch attempt.

    Unscripted actions do not resolve, and launching them raises
    ActivityNotFoundError.

    Usage:
        def test_vendor_screen(scripted_platform):
            scripted_platform.script("android.settings.APP_PERMISSION_SETTINGS")

            outcome = IntentResolver(scripted_platform).resolve_app_permissions(
                scripted_platform.facts()
            )

            assert scripted_platform.launched_actions == [
                "android.settings.APP_PERMISSION_SETTINGS"
            ]
    """
    platform_version: int = 30
    package_name: str = PACKAGE
    scripts: Dict[str, ActionScript] = field(default_factory=dict)
    resolve_queries: List[NavigationTarget] = field(default_factory=list)
    launch_attempts: List[NavigationTarget] = field(default_factory=list)
    launched: List[NavigationTarget] = field(default_factory=list)

    def script(
        self,
        action: str,
        resolvable: bool = True,
        launch_error: Optional[Exception] = None,
    ) -> "ScriptedPlatform":
        """Register behaviour for an action; returns self for chaining."""
        self.scripts[action] = ActionScript(resolvable=resolvable, launch_error=launch_error)
        return self

    def can_resolve(self, target: NavigationTarget) -> bool:
        self.resolve_queries.append(target)
        script = self.scripts.get(target.action)
        return bool(script and script.resolvable)

    def launch(self, target: NavigationTarget) -> None:
        self.launch_attempts.append(target)
        script = self.scripts.get(target.action)
        if script is None:
            raise ActivityNotFoundError(
                f"No Activity found to handle Intent {target.describe()}"
            )
        if script.launch_error is not None:
            raise script.launch_error
        self.launched.append(target)

    def facts(self) -> EnvironmentFacts:
        return EnvironmentFacts(
            platform_version=self.platform_version,
            package_name=self.package_name,
            can_resolve=self.can_resolve,
        )

    @property
    def attempted_actions(self) -> List[str]:
        return [target.action for target in self.launch_attempts]

    @property
    def launched_actions(self) -> List[str]:
        return [target.action for target in self.launched]

    @property
    def queried_actions(self) -> List[str]:
        return [target.action for target in self.resolve_queries]


@pytest.fixture
def scripted_platform():
    """Scripted platform on version 30 with nothing installed."""
    return ScriptedPlatform()


@pytest.fixture
def legacy_platform():
    """Scripted platform on version 29 with nothing installed."""
    return ScriptedPlatform(platform_version=29)


# =============================================================================
# Simulated Device Fixtures
# =============================================================================


@pytest.fixture
def device():
    """Simulated device with every standard settings screen installed."""
    return SimulatedDevice(
        sdk_int=30,
        package_name=PACKAGE,
        installed_actions=STANDARD_ACTIONS,
    )


@pytest.fixture
def bridge_env(monkeypatch):
    """
    Configure the device through environment variables.

    Returns a setter taking keyword overrides, e.g.
    bridge_env(PLATFORM_SDK_INT="29").
    """
    defaults = {
        "PLATFORM_SDK_INT": "30",
        "APP_PACKAGE_NAME": PACKAGE,
        "INSTALLED_SETTINGS_ACTIONS": ",".join(STANDARD_ACTIONS),
        "BROKEN_SETTINGS_ACTIONS": "",
    }

    def apply(**overrides: str) -> Dict[str, str]:
        values = {**defaults, **overrides}
        for key, value in values.items():
            monkeypatch.setenv(key, value)
        return values

    apply()
    return apply
