"""
Bridge Module - Black Box Interface

Purpose: Answer host method calls on the settings channel
Interface: MethodChannel.handle(), MethodChannel.invoke()
Hidden: Method-to-capability table, outcome-to-reply mapping

Every call gets exactly one reply; unknown methods are "not implemented".
"""

from .channel import (
    CHANNEL_NAME,
    METHOD_OPEN_ALL_FILES,
    METHOD_OPEN_APP_PERMISSIONS,
    OPEN_ALL_FILES_FAILED,
    OPEN_APP_PERMS_FAILED,
    MethodCall,
    MethodChannel,
    MethodReply,
    ReplyStatus,
)

__all__ = [
    "CHANNEL_NAME",
    "METHOD_OPEN_ALL_FILES",
    "METHOD_OPEN_APP_PERMISSIONS",
    "OPEN_ALL_FILES_FAILED",
    "OPEN_APP_PERMS_FAILED",
    "MethodCall",
    "MethodChannel",
    "MethodReply",
    "ReplyStatus",
]
