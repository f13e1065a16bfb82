"""
Settings Bridge - Platform Settings Navigation

Opens the right system settings screen for a host application's request,
walking a fixed chain of candidate screens with a guaranteed fallback.

Architecture:
- Each module is self-contained with clear interfaces
- Modules are completely replaceable
- No module knows the internals of another
- All communication through defined interfaces

Modules:
- resolver: Capability to navigation target resolution
- platform: Handler registry and launch action (simulated device)
- bridge: Method channel replies
- api: HTTP transport models
- config: Application configuration
"""

__version__ = "1.0.0"
