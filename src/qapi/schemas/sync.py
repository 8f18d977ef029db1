"""Sync API schemas (``/api/v2/sync/*``)"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .transfer import ConnectionStatus


class GetMainData(BaseModel):
    # Response id of the last reply; 0 asks for a full update
    rid: int = 0


class Category(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str
    save_path: str = Field(alias='savePath')


class ServerState(BaseModel):
    """Global transfer state; partial updates carry only the changed fields"""

    dl_info_speed: int | None = None
    dl_info_data: int | None = None
    up_info_speed: int | None = None
    up_info_data: int | None = None
    dl_rate_limit: int | None = None
    up_rate_limit: int | None = None
    dht_nodes: int | None = None
    connection_status: ConnectionStatus | None = None
    queueing: bool | None = None
    use_alt_speed_limits: bool | None = None
    refresh_interval: int | None = None
    free_space_on_disk: int | None = None
    alltime_dl: int | None = None
    alltime_ul: int | None = None
    global_ratio: str | None = None
    total_peer_connections: int | None = None


class MainData(BaseModel):
    """Changes since the request with the given rid.

    ``torrents`` maps a hash to the changed fields of that torrent only, so values
    are plain dicts; apply them with ``Torrent.model_copy(update=...)``.
    """

    rid: int
    full_update: bool = False
    torrents: dict[str, dict[str, Any]] = Field(default_factory=dict)
    torrents_removed: list[str] = Field(default_factory=list)
    categories: dict[str, Category] = Field(default_factory=dict)
    categories_removed: list[str] = Field(default_factory=list)
    tags: list[str] = Field(default_factory=list)
    tags_removed: list[str] = Field(default_factory=list)
    server_state: ServerState | None = None


class GetTorrentPeers(BaseModel):
    hash: str
    rid: int = 0


class Peer(BaseModel):
    """A connected peer; partial updates carry only the changed fields"""

    client: str | None = None
    connection: str | None = None
    country: str | None = None
    country_code: str | None = None
    dl_speed: int | None = None
    downloaded: int | None = None
    files: str | None = None
    flags: str | None = None
    flags_desc: str | None = None
    ip: str | None = None
    port: int | None = None
    progress: float | None = None
    relevance: float | None = None
    up_speed: int | None = None
    uploaded: int | None = None


class TorrentPeers(BaseModel):
    """Peers of one torrent keyed by ``ip:port``"""

    rid: int
    full_update: bool = False
    show_flags: bool | None = None
    peers: dict[str, Peer] = Field(default_factory=dict)
    peers_removed: list[str] = Field(default_factory=list)
