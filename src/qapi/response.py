"""Status code policies and body decoders"""

from typing import Any, TypeVar

import httpx
from pydantic import TypeAdapter, ValidationError

from .errors import DecodeError, Forbidden, NoTorrentHash, WrongStatusCode

T = TypeVar('T')

_adapters: dict[Any, TypeAdapter[Any]] = {}


def check_default_status(response: httpx.Response) -> None:
    """Accept 200 only"""
    match response.status_code:
        case 200:
            return
        case 403:
            raise Forbidden()
        case status:
            raise WrongStatusCode(status)


def check_hash_status(response: httpx.Response) -> None:
    """Accept 200, map 404 to an unknown torrent hash"""
    if response.status_code == 404:
        raise NoTorrentHash()
    check_default_status(response)


def text(response: httpx.Response) -> str:
    """Body as a strict UTF-8 string"""
    try:
        return response.content.decode('utf-8')
    except UnicodeDecodeError as e:
        raise DecodeError(f'Error convert bytes to string: {e}') from e


def integer(response: httpx.Response) -> int:
    """Body as a plain-text integer"""
    body = text(response)
    try:
        return int(body.strip())
    except ValueError as e:
        raise DecodeError(f'Error convert string to int: {body!r}') from e


def parse(response: httpx.Response, type_: type[T]) -> T:
    """Body as JSON validated against ``type_``"""
    adapter = _adapters.get(type_)
    if adapter is None:
        adapter = _adapters[type_] = TypeAdapter(type_)
    try:
        result: T = adapter.validate_json(response.content)
    except ValidationError as e:
        raise DecodeError(f'Error decode {type_} from response: {e}') from e
    return result
