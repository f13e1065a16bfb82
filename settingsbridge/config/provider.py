"""Configuration provider following Black Box Design principles."""
import os
from dataclasses import dataclass, field
from typing import List, Protocol

from ..modules.resolver import STANDARD_ACTIONS


@dataclass
class DeviceConfig:
    """Simulated device configuration."""
    sdk_int: int
    package_name: str
    installed_actions: List[str] = field(default_factory=lambda: list(STANDARD_ACTIONS))
    broken_actions: List[str] = field(default_factory=list)


class ConfigProvider(Protocol):
    """Protocol for configuration providers."""

    def get_device_config(self) -> DeviceConfig:
        """Get device configuration."""
        ...


def _split_list(value: str) -> List[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


class EnvConfigProvider:
    """Environment-based configuration provider."""

    def get_device_config(self) -> DeviceConfig:
        """Get device configuration from environment variables."""
        sdk_env = os.getenv("PLATFORM_SDK_INT", "30")
        try:
            sdk_int = int(sdk_env)
        except ValueError:
            raise ValueError(f"PLATFORM_SDK_INT must be an integer, got {sdk_env!r}")

        package_name = os.getenv("APP_PACKAGE_NAME", "cloud.nexiotech.pdfseva").strip()
        if not package_name:
            raise ValueError("APP_PACKAGE_NAME must not be empty")

        installed_env = os.getenv("INSTALLED_SETTINGS_ACTIONS")
        installed = (
            _split_list(installed_env) if installed_env is not None else list(STANDARD_ACTIONS)
        )

        return DeviceConfig(
            sdk_int=sdk_int,
            package_name=package_name,
            installed_actions=installed,
            broken_actions=_split_list(os.getenv("BROKEN_SETTINGS_ACTIONS", "")),
        )
