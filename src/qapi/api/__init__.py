"""Remote operations grouped the way the Web API groups them"""

from .app import AppAPI
from .auth import AuthAPI
from .base import ApiBase, Session
from .log import LogAPI
from .sync import SyncAPI
from .torrents import TorrentsAPI
from .transfer import TransferAPI

__all__ = [
    'ApiBase',
    'AppAPI',
    'AuthAPI',
    'LogAPI',
    'Session',
    'SyncAPI',
    'TorrentsAPI',
    'TransferAPI',
]
