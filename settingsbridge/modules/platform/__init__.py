"""
Platform Module - Black Box Interface

Purpose: Host collaborators the resolver depends on
Interface: can_resolve(), launch(), PlatformFactory.build()
Hidden: Handler registry contents, launch history

The simulated device can be swapped for any object satisfying the Platform protocol.
"""

from .device import LaunchRecord, SimulatedDevice
from .factory import PlatformFactory
from .interfaces import ActivityNotFoundError, HandlerRegistry, Platform

__all__ = [
    "ActivityNotFoundError",
    "HandlerRegistry",
    "LaunchRecord",
    "Platform",
    "PlatformFactory",
    "SimulatedDevice",
]
