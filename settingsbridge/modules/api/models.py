"""
Settings Bridge HTTP data models.

These models define the JSON carried between the host application and the
method channel over HTTP.
"""

from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

# Enums


class CallStatus(str, Enum):
    """Kind of reply a method call produced."""

    SUCCESS = "success"
    ERROR = "error"
    NOT_IMPLEMENTED = "notImplemented"


# Request Models (API Input)


class MethodCallRequest(BaseModel):
    """A method call addressed to a channel."""

    method: str = Field(..., description="Method name, e.g. openAllFiles (matched exactly)")
    arguments: Optional[Any] = Field(None, description="Call arguments (ignored by settings methods)")


# Response Models (API Output)


class ChannelError(BaseModel):
    """Error half of a method reply."""

    code: str = Field(..., description="Error code, e.g. OPEN_ALL_FILES_FAILED")
    message: Optional[str] = Field(None, description="Underlying error text")
    details: Optional[Any] = Field(None, description="Extra error details")


class MethodCallResponse(BaseModel):
    """Reply to a method call."""

    channel: str = Field(..., description="Channel that handled the call")
    method: str = Field(..., description="Method that was called")
    status: CallStatus
    result: Optional[Any] = None
    error: Optional[ChannelError] = None


class NavigationTargetModel(BaseModel):
    """Serialized navigation target."""

    action: str
    data: Optional[str] = None
    extras: Dict[str, str] = Field(default_factory=dict)
    flags: int = 0


class LaunchRecordModel(BaseModel):
    """One screen shown by the device."""

    target: NavigationTargetModel
    launched_at: str


class LaunchHistoryResponse(BaseModel):
    """Launch history of the simulated device."""

    count: int
    launches: List[LaunchRecordModel] = Field(default_factory=list)
