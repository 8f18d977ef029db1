"""Interface shared by the API groups mixed into the client"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

import httpx

from qapi.request import ApiRequest


@dataclass
class Session:
    """Where the API lives and the cookie identifying the current login"""

    api_url: httpx.URL
    cookie: str = ''

    @property
    def authenticated(self) -> bool:
        return bool(self.cookie)

    @property
    def origin(self) -> str:
        return f'{self.api_url.scheme}://{self.api_url.netloc.decode("ascii")}'


class ApiBase(ABC):
    """Base class for API groups; the client supplies the session and the dispatcher"""

    session: Session

    @abstractmethod
    async def send_request(self, request: ApiRequest) -> httpx.Response:
        """Send a request and return the raw response"""
