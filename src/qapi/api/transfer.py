"""Transfer API (``/api/v2/transfer/*``)"""

from collections.abc import Iterable

from qapi.request import ApiRequest, Method, form
from qapi.response import check_default_status, integer, parse, text
from qapi.schemas import AltSpeedState, TransferInfo

from .base import ApiBase


class TransferAPI(ApiBase):
    async def get_transfer_info(self) -> TransferInfo:
        response = await self.send_request(ApiRequest(Method.TRANSFER_INFO))
        check_default_status(response)
        return parse(response, TransferInfo)

    async def get_alt_speed_state(self) -> AltSpeedState:
        """Whether alternative speed limits are on"""
        response = await self.send_request(ApiRequest(Method.SPEED_LIMITS_MODE))
        check_default_status(response)
        return parse(response, AltSpeedState)

    async def toggle_alt_speed(self) -> None:
        response = await self.send_request(ApiRequest(Method.TOGGLE_SPEED_LIMITS_MODE))
        check_default_status(response)

    async def get_download_limit(self) -> int:
        """Global download limit in bytes/s, 0 when unlimited"""
        response = await self.send_request(ApiRequest(Method.DOWNLOAD_LIMIT))
        check_default_status(response)
        return integer(response)

    async def set_download_limit(self, limit: int) -> None:
        response = await self.send_request(ApiRequest(Method.SET_DOWNLOAD_LIMIT, form(limit=limit)))
        check_default_status(response)

    async def get_upload_limit(self) -> int:
        """Global upload limit in bytes/s, 0 when unlimited"""
        response = await self.send_request(ApiRequest(Method.UPLOAD_LIMIT))
        check_default_status(response)
        return integer(response)

    async def set_upload_limit(self, limit: int) -> None:
        response = await self.send_request(ApiRequest(Method.SET_UPLOAD_LIMIT, form(limit=limit)))
        check_default_status(response)

    async def ban_peers(self, peers: str | Iterable[str]) -> str:
        """Ban peers given as ``host:port``, several joined with ``|``"""
        if not isinstance(peers, str):
            peers = '|'.join(peers)
        response = await self.send_request(ApiRequest(Method.BAN_PEERS, form(peers=peers)))
        check_default_status(response)
        return text(response)
