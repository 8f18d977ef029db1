"""Torrent management API (``/api/v2/torrents/*``).

Operations scoped to a single torrent answer 404 for an unknown hash, which is
raised as ``NoTorrentHash``. Operations taking several hashes accept a list or
the string ``'all'``.
"""

from collections.abc import Iterable

from qapi.request import ApiRequest, JsonArguments, Method, form
from qapi.response import check_default_status, check_hash_status, parse, text
from qapi.schemas import (
    AddTorrent,
    GetTorrentList,
    PieceState,
    Torrent,
    TorrentFile,
    TorrentProperties,
    Tracker,
    WebSeed,
)

from .base import ApiBase


def join_hashes(hashes: str | Iterable[str]) -> str:
    """Pipe separated hash list as the API expects it"""
    if isinstance(hashes, str):
        return hashes
    return '|'.join(hashes)


class TorrentsAPI(ApiBase):
    async def get_torrent_list(self, values: GetTorrentList | None = None) -> list[Torrent]:
        request = ApiRequest(Method.TORRENTS_INFO, JsonArguments(values or GetTorrentList()))
        response = await self.send_request(request)
        check_default_status(response)
        return parse(response, list[Torrent])

    async def get_torrent_properties(self, torrent_hash: str) -> TorrentProperties:
        response = await self.send_request(ApiRequest(Method.PROPERTIES, form(hash=torrent_hash)))
        check_hash_status(response)
        return parse(response, TorrentProperties)

    async def get_torrent_trackers(self, torrent_hash: str) -> list[Tracker]:
        response = await self.send_request(ApiRequest(Method.TRACKERS, form(hash=torrent_hash)))
        check_hash_status(response)
        return parse(response, list[Tracker])

    async def get_torrent_webseeds(self, torrent_hash: str) -> list[WebSeed]:
        response = await self.send_request(ApiRequest(Method.WEBSEEDS, form(hash=torrent_hash)))
        check_hash_status(response)
        return parse(response, list[WebSeed])

    async def get_torrent_contents(self, torrent_hash: str, indexes: Iterable[int] | None = None) -> list[TorrentFile]:
        """Files of a torrent, optionally only those at ``indexes``"""
        joined = '|'.join(str(i) for i in indexes or ()) or None
        response = await self.send_request(ApiRequest(Method.FILES, form(hash=torrent_hash, indexes=joined)))
        check_hash_status(response)
        return parse(response, list[TorrentFile])

    async def get_torrent_piece_states(self, torrent_hash: str) -> list[PieceState]:
        response = await self.send_request(ApiRequest(Method.PIECE_STATES, form(hash=torrent_hash)))
        check_hash_status(response)
        return parse(response, list[PieceState])

    async def get_torrent_piece_hashes(self, torrent_hash: str) -> list[str]:
        response = await self.send_request(ApiRequest(Method.PIECE_HASHES, form(hash=torrent_hash)))
        check_hash_status(response)
        return parse(response, list[str])

    async def pause_torrents(self, hashes: str | Iterable[str]) -> None:
        response = await self.send_request(ApiRequest(Method.PAUSE, form(hashes=join_hashes(hashes))))
        check_default_status(response)

    async def resume_torrents(self, hashes: str | Iterable[str]) -> None:
        response = await self.send_request(ApiRequest(Method.RESUME, form(hashes=join_hashes(hashes))))
        check_default_status(response)

    async def delete_torrents(self, hashes: str | Iterable[str], delete_files: bool = False) -> None:
        """Remove torrents, and their downloaded data if ``delete_files``"""
        request = ApiRequest(Method.DELETE, form(hashes=join_hashes(hashes), deleteFiles=delete_files))
        response = await self.send_request(request)
        check_default_status(response)

    async def recheck_torrents(self, hashes: str | Iterable[str]) -> None:
        response = await self.send_request(ApiRequest(Method.RECHECK, form(hashes=join_hashes(hashes))))
        check_default_status(response)

    async def reannounce_torrents(self, hashes: str | Iterable[str]) -> None:
        response = await self.send_request(ApiRequest(Method.REANNOUNCE, form(hashes=join_hashes(hashes))))
        check_default_status(response)

    async def add_torrent(self, values: AddTorrent) -> str:
        """Add torrents by URL or magnet link. Returns the server reply, ``Ok.`` or ``Fails.``"""
        arguments = form(**values.model_dump(by_alias=True, exclude_none=True))
        response = await self.send_request(ApiRequest(Method.ADD, arguments))
        check_default_status(response)
        return text(response)
