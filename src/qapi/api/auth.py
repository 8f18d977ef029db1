"""Authentication API (``/api/v2/auth/*``).

qBittorrent uses cookie based authentication: a successful login answers with
``Set-Cookie: SID=...; path=/`` and that ``SID=...`` pair must accompany every
later request. Five failed logins in a row get the caller's IP banned for a
while, and the server answers 403 until the ban expires.
"""

from qapi.errors import Banned, WrongStatusCode
from qapi.request import ApiRequest, Method, form
from qapi.response import check_default_status

from .base import ApiBase


class AuthAPI(ApiBase):
    async def login(self, username: str, password: str) -> None:
        """Log in and keep the session cookie.

        Raises:
            Banned: the IP is banned for too many failed login attempts
            NoSetCookie: the server accepted the request but sent no cookie
            NoSID: the cookie has no session id
            WrongStatusCode: any other status
        """
        request = ApiRequest(Method.LOGIN, form(username=username, password=password))
        response = await self.send_request(request)
        match response.status_code:
            case 200:
                return
            case 403:
                raise Banned()
            case status:
                raise WrongStatusCode(status)

    async def logout(self) -> None:
        """Log out. The local session is dropped even if the call fails."""
        try:
            response = await self.send_request(ApiRequest(Method.LOGOUT))
        finally:
            self.session.cookie = ''
        check_default_status(response)
