"""
Method channel for Settings Bridge.

Receives named method calls from the host application and answers each one
with exactly one reply: success, error (code, message, details) or
not-implemented. Nothing raised while resolving escapes to the caller.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, Optional

from ..platform import Platform
from ..resolver import (
    Capability,
    EnvironmentFacts,
    Failed,
    IntentResolver,
    Outcome,
    error_message,
)

logger = logging.getLogger("settingsbridge.bridge")

CHANNEL_NAME = "all_files_access"

METHOD_OPEN_ALL_FILES = "openAllFiles"
METHOD_OPEN_APP_PERMISSIONS = "openAppPermissions"

OPEN_ALL_FILES_FAILED = "OPEN_ALL_FILES_FAILED"
OPEN_APP_PERMS_FAILED = "OPEN_APP_PERMS_FAILED"


class ReplyStatus(str, Enum):
    """Kind of reply sent back over the channel."""

    SUCCESS = "success"
    ERROR = "error"
    NOT_IMPLEMENTED = "notImplemented"


@dataclass(frozen=True)
class MethodCall:
    """A named call from the host; arguments are accepted and ignored."""

    method: str
    arguments: Any = None


@dataclass(frozen=True)
class MethodReply:
    """Exactly one of these is produced per call."""

    status: ReplyStatus
    result: Any = None
    error_code: Optional[str] = None
    error_message: Optional[str] = None
    error_details: Any = None

    @classmethod
    def success(cls, result: Any) -> "MethodReply":
        return cls(status=ReplyStatus.SUCCESS, result=result)

    @classmethod
    def error(cls, code: str, message: Optional[str], details: Any = None) -> "MethodReply":
        return cls(
            status=ReplyStatus.ERROR,
            error_code=code,
            error_message=message,
            error_details=details,
        )

    @classmethod
    def not_implemented(cls) -> "MethodReply":
        return cls(status=ReplyStatus.NOT_IMPLEMENTED)

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"status": self.status.value}
        if self.status is ReplyStatus.SUCCESS:
            data["result"] = self.result
        elif self.status is ReplyStatus.ERROR:
            data["error"] = {
                "code": self.error_code,
                "message": self.error_message,
                "details": self.error_details,
            }
        return data


@dataclass(frozen=True)
class _Operation:
    capability: Capability
    error_code: str


OPERATIONS: Dict[str, _Operation] = {
    METHOD_OPEN_ALL_FILES: _Operation(Capability.ALL_FILES_ACCESS, OPEN_ALL_FILES_FAILED),
    METHOD_OPEN_APP_PERMISSIONS: _Operation(Capability.APP_PERMISSIONS, OPEN_APP_PERMS_FAILED),
}


class MethodChannel:
    """
    Dispatches method calls on one named channel.

    Builds a fresh resolver and fresh environment facts for every call, so
    nothing carries over between requests.
    """

    def __init__(
        self,
        platform: Platform,
        name: str = CHANNEL_NAME,
        resolver_factory: Callable[[Platform], IntentResolver] = IntentResolver,
    ):
        """
        Initialize method channel.

        Args:
            platform: Host platform supplying facts and the launch action
            name: Channel name the host addresses
            resolver_factory: Builds a resolver around the platform's launcher
        """
        self.platform = platform
        self.name = name
        self._resolver_factory = resolver_factory

    def handle(self, call: MethodCall) -> MethodReply:
        """
        Answer one method call.

        Args:
            call: Method name (and ignored arguments)

        Returns:
            MethodReply - never raises
        """
        operation = OPERATIONS.get(call.method)
        if operation is None:
            logger.info(f"Method {call.method!r} not implemented on channel {self.name}")
            return MethodReply.not_implemented()

        try:
            outcome = self._resolve(operation.capability)
        except Exception as e:
            logger.error(f"{call.method} raised during resolution: {e}")
            return MethodReply.error(operation.error_code, error_message(e))

        if isinstance(outcome, Failed):
            logger.error(f"{call.method} failed: {outcome.reason}")
            return MethodReply.error(operation.error_code, outcome.reason)

        logger.info(f"{call.method} opened {outcome.target.action}")
        return MethodReply.success(True)

    def invoke(self, method: str, arguments: Any = None) -> MethodReply:
        """Convenience wrapper around handle()."""
        return self.handle(MethodCall(method=method, arguments=arguments))

    def _resolve(self, capability: Capability) -> Outcome:
        resolver = self._resolver_factory(self.platform)
        facts = EnvironmentFacts(
            platform_version=self.platform.platform_version,
            package_name=self.platform.package_name,
            can_resolve=self.platform.can_resolve,
        )
        return resolver.resolve(capability, facts)
