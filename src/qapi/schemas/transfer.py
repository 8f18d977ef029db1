"""Transfer API schemas (``/api/v2/transfer/*``)"""

from enum import IntEnum, StrEnum

from pydantic import BaseModel


class ConnectionStatus(StrEnum):
    CONNECTED = 'connected'
    FIREWALLED = 'firewalled'
    DISCONNECTED = 'disconnected'


class AltSpeedState(IntEnum):
    DISABLED = 0
    ENABLED = 1


class TransferInfo(BaseModel):
    """Global transfer info, as shown in the status bar"""

    dl_info_speed: int
    dl_info_data: int
    up_info_speed: int
    up_info_data: int
    dl_rate_limit: int
    up_rate_limit: int
    dht_nodes: int
    connection_status: ConnectionStatus
    # Only present in sync/maindata server_state
    queueing: bool | None = None
    use_alt_speed_limits: bool | None = None
    refresh_interval: int | None = None
