"""Sync API (``/api/v2/sync/*``): changes since the last request.

Pass the ``rid`` of the previous reply to get a delta. If it does not match the
last reply the server sends everything and sets ``full_update``.
"""

from qapi.request import ApiRequest, JsonArguments, Method
from qapi.response import check_default_status, check_hash_status, parse
from qapi.schemas import GetMainData, GetTorrentPeers, MainData, TorrentPeers

from .base import ApiBase


class SyncAPI(ApiBase):
    async def get_main_data(self, values: GetMainData | None = None) -> MainData:
        request = ApiRequest(Method.MAIN_DATA, JsonArguments(values or GetMainData()))
        response = await self.send_request(request)
        check_default_status(response)
        return parse(response, MainData)

    async def get_peers_data(self, values: GetTorrentPeers) -> TorrentPeers:
        """Peers of one torrent. Raises NoTorrentHash for an unknown hash."""
        request = ApiRequest(Method.TORRENT_PEERS, JsonArguments(values))
        response = await self.send_request(request)
        check_hash_status(response)
        return parse(response, TorrentPeers)
