"""Log API schemas (``/api/v2/log/*``)"""

from enum import IntEnum

from pydantic import BaseModel, ConfigDict, Field


class GetLog(BaseModel):
    """Filter for the main log"""

    normal: bool = True
    info: bool = True
    warning: bool = True
    critical: bool = True
    # Exclude messages with id <= last_known_id
    last_known_id: int = -1


class LogType(IntEnum):
    NORMAL = 1
    INFO = 2
    WARNING = 4
    CRITICAL = 8


class LogEntry(BaseModel):
    """A single main log message"""

    model_config = ConfigDict(populate_by_name=True)

    id: int
    message: str
    # Milliseconds since epoch
    timestamp: int
    kind: LogType = Field(alias='type')


class GetPeerLog(BaseModel):
    """Filter for the peer log"""

    last_known_id: int = -1


class LogPeerEntry(BaseModel):
    """A peer connection attempt and whether it was blocked"""

    id: int
    ip: str
    timestamp: int
    blocked: bool
    reason: str
