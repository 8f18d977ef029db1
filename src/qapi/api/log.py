"""Log API (``/api/v2/log/*``)"""

from qapi.request import ApiRequest, JsonArguments, Method
from qapi.response import check_default_status, parse
from qapi.schemas import GetLog, GetPeerLog, LogEntry, LogPeerEntry

from .base import ApiBase


class LogAPI(ApiBase):
    async def get_log(self, values: GetLog | None = None) -> list[LogEntry]:
        """Main log entries, all message types by default"""
        request = ApiRequest(Method.MAIN, JsonArguments(values or GetLog()))
        response = await self.send_request(request)
        check_default_status(response)
        return parse(response, list[LogEntry])

    async def get_peer_log(self, values: GetPeerLog | None = None) -> list[LogPeerEntry]:
        request = ApiRequest(Method.PEERS, JsonArguments(values or GetPeerLog()))
        response = await self.send_request(request)
        check_default_status(response)
        return parse(response, list[LogPeerEntry])
