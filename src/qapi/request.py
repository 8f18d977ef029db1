"""Request model: remote operations and their arguments"""

import json
from dataclasses import dataclass
from enum import StrEnum
from typing import Any
from urllib.parse import urlencode

from pydantic import BaseModel


class Method(StrEnum):
    """Remote operation, valued by its path under ``/api/v2/``"""

    LOGIN = 'auth/login'
    LOGOUT = 'auth/logout'
    VERSION = 'app/version'
    WEBAPI_VERSION = 'app/webapiVersion'
    BUILD_INFO = 'app/buildInfo'
    SHUTDOWN = 'app/shutdown'
    PREFERENCES = 'app/preferences'
    SET_PREFERENCES = 'app/setPreferences'
    DEFAULT_SAVE_PATH = 'app/defaultSavePath'
    MAIN = 'log/main'
    PEERS = 'log/peers'
    MAIN_DATA = 'sync/maindata'
    TORRENT_PEERS = 'sync/torrentPeers'
    TRANSFER_INFO = 'transfer/info'
    SPEED_LIMITS_MODE = 'transfer/speedLimitsMode'
    TOGGLE_SPEED_LIMITS_MODE = 'transfer/toggleSpeedLimitsMode'
    DOWNLOAD_LIMIT = 'transfer/downloadLimit'
    SET_DOWNLOAD_LIMIT = 'transfer/setDownloadLimit'
    UPLOAD_LIMIT = 'transfer/uploadLimit'
    SET_UPLOAD_LIMIT = 'transfer/setUploadLimit'
    BAN_PEERS = 'transfer/banPeers'
    TORRENTS_INFO = 'torrents/info'
    PROPERTIES = 'torrents/properties'
    TRACKERS = 'torrents/trackers'
    WEBSEEDS = 'torrents/webseeds'
    FILES = 'torrents/files'
    PIECE_STATES = 'torrents/pieceStates'
    PIECE_HASHES = 'torrents/pieceHashes'
    PAUSE = 'torrents/pause'
    RESUME = 'torrents/resume'
    DELETE = 'torrents/delete'
    RECHECK = 'torrents/recheck'
    REANNOUNCE = 'torrents/reannounce'
    ADD = 'torrents/add'


@dataclass(frozen=True)
class JsonArguments:
    """Arguments sent as a JSON document"""

    value: BaseModel | dict[str, Any] | list[Any]

    def encode(self) -> bytes:
        value = self.value
        if isinstance(value, BaseModel):
            # Unset optional fields must not reach the server as null
            value = value.model_dump(mode='json', by_alias=True, exclude_none=True)
        return json.dumps(value, separators=(',', ':'), ensure_ascii=False).encode('utf-8')


@dataclass(frozen=True)
class FormArguments:
    """Arguments already encoded as ``key=value&...``"""

    value: str

    def encode(self) -> bytes:
        return self.value.encode('utf-8')


Arguments = JsonArguments | FormArguments


@dataclass(frozen=True)
class ApiRequest:
    """A single call of a remote operation"""

    method: Method
    arguments: Arguments | None = None

    def body(self) -> bytes:
        if self.arguments is None:
            return b''
        return self.arguments.encode()


def form(**fields: Any) -> FormArguments:
    """Encode keyword fields as form arguments, skipping ``None`` values"""
    pairs = {}
    for key, value in fields.items():
        if value is None:
            continue
        if isinstance(value, bool):
            value = str(value).lower()
        pairs[key] = value
    return FormArguments(urlencode(pairs, safe='|:'))
