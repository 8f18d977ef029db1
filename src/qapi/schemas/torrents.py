"""Torrent management API schemas (``/api/v2/torrents/*``)"""

from enum import IntEnum, StrEnum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class TorrentState(StrEnum):
    """Torrent state as reported in ``Torrent.state``"""

    ERROR = 'error'
    MISSING_FILES = 'missingFiles'
    UPLOADING = 'uploading'
    PAUSED_UP = 'pausedUP'
    STOPPED_UP = 'stoppedUP'
    QUEUED_UP = 'queuedUP'
    STALLED_UP = 'stalledUP'
    CHECKING_UP = 'checkingUP'
    FORCED_UP = 'forcedUP'
    ALLOCATING = 'allocating'
    DOWNLOADING = 'downloading'
    META_DL = 'metaDL'
    FORCED_META_DL = 'forcedMetaDL'
    PAUSED_DL = 'pausedDL'
    STOPPED_DL = 'stoppedDL'
    QUEUED_DL = 'queuedDL'
    STALLED_DL = 'stalledDL'
    CHECKING_DL = 'checkingDL'
    FORCED_DL = 'forcedDL'
    CHECKING_RESUME_DATA = 'checkingResumeData'
    MOVING = 'moving'
    UNKNOWN = 'unknown'


class TorrentFilter(StrEnum):
    ALL = 'all'
    DOWNLOADING = 'downloading'
    SEEDING = 'seeding'
    COMPLETED = 'completed'
    PAUSED = 'paused'
    ACTIVE = 'active'
    INACTIVE = 'inactive'
    RESUMED = 'resumed'
    STALLED = 'stalled'
    STALLED_UPLOADING = 'stalled_uploading'
    STALLED_DOWNLOADING = 'stalled_downloading'
    ERRORED = 'errored'


class GetTorrentList(BaseModel):
    """Filters for ``torrents/info``; unset filters are not sent"""

    filter: TorrentFilter | None = None
    category: str | None = None
    tag: str | None = None
    sort: str | None = None
    reverse: bool | None = None
    limit: int | None = None
    offset: int | None = None
    # Pipe separated, e.g. "h1|h2"
    hashes: str | None = None


class Torrent(BaseModel):
    """Entry of the torrent list"""

    added_on: int
    amount_left: int
    auto_tmm: bool
    availability: float | None = None
    category: str
    completed: int
    completion_on: int
    dl_limit: int
    dlspeed: int
    downloaded: int
    downloaded_session: int
    eta: int
    f_l_piece_prio: bool
    force_start: bool
    hash: str | None = None
    last_activity: int
    magnet_uri: str
    max_ratio: float
    max_seeding_time: int
    name: str
    num_complete: int
    num_incomplete: int
    num_leechs: int
    num_seeds: int
    # -1 if queuing is disabled or torrent is in seed mode
    priority: int
    progress: float
    ratio: float
    ratio_limit: float
    save_path: str
    seeding_time_limit: int
    seen_complete: int
    seq_dl: bool
    size: int
    state: TorrentState
    super_seeding: bool
    # Comma separated
    tags: str
    time_active: int
    total_size: int
    tracker: str
    up_limit: int
    uploaded: int
    uploaded_session: int
    upspeed: int

    @field_validator('state', mode='before')
    @classmethod
    def parse_state(cls, v: str) -> str:
        """States added by newer servers are reported as unknown"""
        if v not in TorrentState._value2member_map_:
            return TorrentState.UNKNOWN
        return v


class TorrentProperties(BaseModel):
    """Generic properties of one torrent"""

    save_path: str
    creation_date: int
    piece_size: int
    comment: str
    total_wasted: int
    total_uploaded: int
    total_uploaded_session: int
    total_downloaded: int
    total_downloaded_session: int
    up_limit: int
    dl_limit: int
    time_elapsed: int
    seeding_time: int
    nb_connections: int
    nb_connections_limit: int
    share_ratio: float
    addition_date: int
    completion_date: int
    created_by: str
    dl_speed_avg: int
    dl_speed: int
    eta: int
    last_seen: int
    peers: int
    peers_total: int
    pieces_have: int
    pieces_num: int
    reannounce: int
    seeds: int
    seeds_total: int
    total_size: int
    up_speed_avg: int
    up_speed: int


class TrackerStatus(IntEnum):
    DISABLED = 0
    NOT_CONTACTED = 1
    WORKING = 2
    UPDATING = 3
    NOT_WORKING = 4


class Tracker(BaseModel):
    url: str
    status: TrackerStatus
    # -1 for the DHT, PeX and LSD pseudo trackers
    tier: int
    num_peers: int
    num_seeds: int
    num_leeches: int
    num_downloaded: int
    msg: str

    @field_validator('tier', mode='before')
    @classmethod
    def parse_tier(cls, v: int | str) -> int | str:
        """Older servers report an empty tier for pseudo trackers"""
        if v == '':
            return -1
        return v


class WebSeed(BaseModel):
    url: str


class FilePriority(IntEnum):
    DO_NOT_DOWNLOAD = 0
    NORMAL = 1
    HIGH = 6
    MAXIMAL = 7


class TorrentFile(BaseModel):
    """A file inside a torrent"""

    index: int | None = None
    name: str
    size: int
    progress: float
    priority: FilePriority
    is_seed: bool | None = None
    piece_range: list[int]
    availability: float


class PieceState(IntEnum):
    NOT_DOWNLOADED = 0
    DOWNLOADING = 1
    DOWNLOADED = 2


class AddTorrent(BaseModel):
    """Arguments of ``torrents/add``; unset fields are not sent"""

    model_config = ConfigDict(populate_by_name=True)

    # URLs separated with newlines
    urls: str
    savepath: str | None = None
    cookie: str | None = None
    category: str | None = None
    # Comma separated
    tags: str | None = None
    skip_checking: bool | None = None
    paused: bool | None = None
    root_folder: bool | None = None
    rename: str | None = None
    up_limit: int | None = Field(default=None, alias='upLimit')
    dl_limit: int | None = Field(default=None, alias='dlLimit')
    ratio_limit: float | None = Field(default=None, alias='ratioLimit')
    seeding_time_limit: int | None = Field(default=None, alias='seedingTimeLimit')
    auto_tmm: bool | None = Field(default=None, alias='autoTMM')
    sequential_download: bool | None = Field(default=None, alias='sequentialDownload')
    first_last_piece_prio: bool | None = Field(default=None, alias='firstLastPiecePrio')
