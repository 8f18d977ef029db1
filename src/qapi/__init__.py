"""Async client for the qBittorrent Web API"""

from .client import Client
from .errors import (
    Banned,
    DecodeError,
    Forbidden,
    NoSetCookie,
    NoSID,
    NoTorrentHash,
    QapiError,
    UrlError,
    WrongStatusCode,
)
from .request import ApiRequest, FormArguments, JsonArguments, Method

__all__ = [
    'ApiRequest',
    'Banned',
    'Client',
    'DecodeError',
    'Forbidden',
    'FormArguments',
    'JsonArguments',
    'Method',
    'NoSID',
    'NoSetCookie',
    'NoTorrentHash',
    'QapiError',
    'UrlError',
    'WrongStatusCode',
]
