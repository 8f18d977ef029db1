"""Exceptions raised by the qBittorrent Web API client"""


class QapiError(Exception):
    """Base exception for client errors"""


class UrlError(QapiError):
    """Error in parse URL"""


class NoSetCookie(QapiError):
    """Login response has no set-cookie header"""

    def __init__(self) -> None:
        super().__init__('Response no contains set-cookie header')


class NoSID(QapiError):
    """The set-cookie header of the login response carries no session id"""

    def __init__(self, header: str = '') -> None:
        self.header = header
        super().__init__(f'Header set-cookie no contains SID: {header!r}')


class Banned(QapiError):
    """Login was refused with 403"""

    def __init__(self) -> None:
        super().__init__("User's IP is banned for too many failed login attempts")


class WrongStatusCode(QapiError):
    """Response came back with a status the operation does not expect"""

    def __init__(self, status_code: int) -> None:
        self.status_code = status_code
        super().__init__(f'Wrong response status code: {status_code}')


class Forbidden(WrongStatusCode):
    """Server rejected a request that needs an authenticated session.

    The client drops its session cookie before raising this; call ``login`` again.
    """

    def __init__(self) -> None:
        super().__init__(403)


class NoTorrentHash(QapiError):
    """Torrent hash was not found (404 on a hash scoped operation)"""

    def __init__(self) -> None:
        super().__init__('Torrent hash was not found')


class DecodeError(QapiError):
    """Response body could not be decoded into the expected type"""
