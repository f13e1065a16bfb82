"""
Platform Factory following Black Box Design principles.

This factory:
- Reads device configuration from a provider
- Returns the platform the bridge drives (hiding the simulation)
"""

import logging

from ...config.provider import ConfigProvider
from .device import SimulatedDevice

logger = logging.getLogger(__name__)


class PlatformFactory:
    """Composition root for the host platform."""

    @staticmethod
    def build(config_provider: ConfigProvider) -> SimulatedDevice:
        """
        Build the simulated device.

        Args:
            config_provider: Configuration provider

        Returns:
            SimulatedDevice configured from the provider
        """
        device_config = config_provider.get_device_config()

        overlap = set(device_config.broken_actions) & set(device_config.installed_actions)
        if overlap:
            logger.warning(
                f"Actions listed as both installed and broken will fail on launch: "
                f"{', '.join(sorted(overlap))}"
            )

        logger.info(
            f"Building simulated device (sdk {device_config.sdk_int}, "
            f"package {device_config.package_name}, "
            f"{len(device_config.installed_actions)} installed actions)"
        )
        return SimulatedDevice(
            sdk_int=device_config.sdk_int,
            package_name=device_config.package_name,
            installed_actions=device_config.installed_actions,
            broken_actions=device_config.broken_actions,
        )
