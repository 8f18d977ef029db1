"""Typed request and response models of the qBittorrent Web API"""

from .app import (
    BittorrentProtocol,
    BuildInfo,
    DyndnsService,
    Encryption,
    MaxRatioAction,
    Preferences,
    ProxyType,
    ScanDirTarget,
    SchedulerDays,
    UploadChokingAlgorithm,
    UploadSlotsBehavior,
    UtpTcpMixedMode,
)
from .log import GetLog, GetPeerLog, LogEntry, LogPeerEntry, LogType
from .sync import Category, GetMainData, GetTorrentPeers, MainData, Peer, ServerState, TorrentPeers
from .torrents import (
    AddTorrent,
    FilePriority,
    GetTorrentList,
    PieceState,
    Torrent,
    TorrentFile,
    TorrentFilter,
    TorrentProperties,
    TorrentState,
    Tracker,
    TrackerStatus,
    WebSeed,
)
from .transfer import AltSpeedState, ConnectionStatus, TransferInfo

__all__ = [
    'AddTorrent',
    'AltSpeedState',
    'BittorrentProtocol',
    'BuildInfo',
    'Category',
    'ConnectionStatus',
    'DyndnsService',
    'Encryption',
    'FilePriority',
    'GetLog',
    'GetMainData',
    'GetPeerLog',
    'GetTorrentList',
    'GetTorrentPeers',
    'LogEntry',
    'LogPeerEntry',
    'LogType',
    'MainData',
    'MaxRatioAction',
    'Peer',
    'PieceState',
    'Preferences',
    'ProxyType',
    'ScanDirTarget',
    'SchedulerDays',
    'ServerState',
    'Torrent',
    'TorrentFile',
    'TorrentFilter',
    'TorrentPeers',
    'TorrentProperties',
    'TorrentState',
    'Tracker',
    'TrackerStatus',
    'TransferInfo',
    'UploadChokingAlgorithm',
    'UploadSlotsBehavior',
    'UtpTcpMixedMode',
    'WebSeed',
]
