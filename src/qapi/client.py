"""qBittorrent Web API client"""

import asyncio
import logging
from types import TracebackType

import httpx

from .api import AppAPI, AuthAPI, LogAPI, Session, SyncAPI, TorrentsAPI, TransferAPI
from .config import settings
from .errors import NoSetCookie, NoSID, UrlError
from .request import ApiRequest, Method

log = logging.getLogger(f'{settings.log_prefix}.client')


def build_api_url(uri: str) -> httpx.URL:
    """Resolve ``api/v2/`` against the Web UI address"""
    try:
        url = httpx.URL(uri)
    except httpx.InvalidURL as e:
        raise UrlError(f'Error in parse URL {uri!r}: {e}') from e
    if url.scheme not in ('http', 'https') or not url.host:
        raise UrlError(f'Error in parse URL {uri!r}: expected an absolute http(s) URL')
    return url.join('api/v2/')


def session_cookie(response: httpx.Response) -> str:
    """``SID=...`` pair from the set-cookie header of a login response"""
    set_cookie = response.headers.get('set-cookie')
    if set_cookie is None:
        raise NoSetCookie()
    cookie = set_cookie.split(';', 1)[0].strip()
    if not cookie or '=' not in cookie:
        raise NoSID(set_cookie)
    return cookie


class Client(AuthAPI, AppAPI, LogAPI, SyncAPI, TransferAPI, TorrentsAPI):
    """qBittorrent client using httpx.

    Every operation is a single POST. The session cookie is owned by the client
    and sent explicitly, the cookie jar of the underlying httpx client is never
    used. Requests are serialized, so one instance may be shared between tasks.
    """

    def __init__(self, uri: str, http_client: httpx.AsyncClient | None = None):
        self.session = Session(api_url=build_api_url(uri))
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(timeout=settings.timeout)
        self._lock = asyncio.Lock()

    @property
    def api_url(self) -> httpx.URL:
        return self.session.api_url

    async def send_request(self, request: ApiRequest) -> httpx.Response:
        """Send a request and return the raw response.

        A 200 answer to a login stores the session cookie. A 403 answer to anything
        else means the session is gone, so the cookie is dropped.
        """
        url = self.session.api_url.join(request.method.value)
        async with self._lock:
            headers = {
                'Cache-Control': 'no-cache',
                'Pragma': 'no-cache',
                'Cookie': self.session.cookie,
                'Content-Type': 'application/x-www-form-urlencoded; charset=utf-8',
                'Origin': self.session.origin,
            }
            http_request = httpx.Request(
                'POST',
                url,
                headers=headers,
                content=request.body(),
                extensions={'timeout': self._client.timeout.as_dict()},
            )
            response = await self._client.send(http_request)
            log.debug('%s -> %s', request.method.value, response.status_code)

            if request.method is Method.LOGIN:
                if response.status_code == 200:
                    self.session.cookie = session_cookie(response)
            elif response.status_code == 403 and self.session.cookie:
                log.debug('Session rejected, dropping cookie')
                self.session.cookie = ''

        return response

    async def aclose(self) -> None:
        """Close the HTTP client if this instance created it"""
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> 'Client':
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()
