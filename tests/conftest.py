"""Pytest configuration and shared fixtures"""

from collections.abc import AsyncGenerator, Callable
from typing import Any

import httpx
import pytest
import pytest_asyncio
from faker import Faker

from qapi.client import Client
from qapi.config import Settings

fake = Faker()

BASE_URL = 'http://localhost:8080'

Handler = Callable[[httpx.Request], httpx.Response]


class FakeServer:
    """Stand-in for the Web UI: answers by API path and records what was sent"""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.routes: dict[str, Handler] = {}

    def route(
        self,
        path: str,
        status_code: int = 200,
        *,
        json: Any = None,
        text: str | None = None,
        content: bytes | None = None,
        headers: dict[str, str] | None = None,
    ) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(status_code, json=json, text=text, content=content, headers=headers)

        self.routes[path] = handler

    def fail(self, path: str, error: Exception) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise error

        self.routes[path] = handler

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path.removeprefix('/api/v2/')
        handler = self.routes.get(path)
        if handler is None:
            return httpx.Response(404, text='Not Found')
        return handler(request)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def server() -> FakeServer:
    return FakeServer()


@pytest_asyncio.fixture
async def client(server: FakeServer) -> AsyncGenerator[Client]:
    """Client talking to the fake server"""
    async with httpx.AsyncClient(transport=httpx.MockTransport(server)) as http_client:
        yield Client(BASE_URL, http_client=http_client)


@pytest_asyncio.fixture
async def logged_in(client: Client, server: FakeServer) -> Client:
    """Client with an established session"""
    server.route('auth/login', text='Ok.', headers={'set-cookie': 'SID=abc123; path=/'})
    await client.login('admin', 'adminadmin')
    return client


@pytest.fixture
def test_settings() -> Settings:
    """Create test settings"""
    return Settings(
        target=BASE_URL,
        username='admin',
        password='adminadmin',
        timeout=5,
        log_level='DEBUG',
    )


@pytest.fixture
def torrent_hash() -> str:
    return fake.sha1()


@pytest.fixture
def sample_torrent(torrent_hash: str) -> dict[str, Any]:
    """Sample torrents/info entry"""
    return {
        'added_on': 1700000000,
        'amount_left': 0,
        'auto_tmm': False,
        'availability': -1,
        'category': 'games',
        'completed': 2048,
        'completion_on': 1700000600,
        'dl_limit': -1,
        'dlspeed': 0,
        'downloaded': 2048,
        'downloaded_session': 0,
        'eta': 8640000,
        'f_l_piece_prio': False,
        'force_start': False,
        'hash': torrent_hash,
        'last_activity': 1700000600,
        'magnet_uri': f'magnet:?xt=urn:btih:{torrent_hash}',
        'max_ratio': -1,
        'max_seeding_time': -1,
        'name': 'Test Movie (2023) 1080p',
        'num_complete': 42,
        'num_incomplete': 10,
        'num_leechs': 0,
        'num_seeds': 0,
        'priority': 0,
        'progress': 1,
        'ratio': 0.5,
        'ratio_limit': -2,
        'save_path': '/downloads/',
        'seeding_time_limit': -2,
        'seen_complete': 1700000600,
        'seq_dl': False,
        'size': 2048,
        'state': 'pausedUP',
        'super_seeding': False,
        'tags': '',
        'time_active': 600,
        'total_size': 2048,
        'tracker': 'udp://opentor.net:6969',
        'up_limit': -1,
        'uploaded': 1024,
        'uploaded_session': 0,
        'upspeed': 0,
        'content_path': '/downloads/Test Movie (2023) 1080p',
    }


@pytest.fixture
def sample_properties() -> dict[str, Any]:
    """Sample torrents/properties reply"""
    return {
        'save_path': '/downloads/',
        'creation_date': 1699990000,
        'piece_size': 16384,
        'comment': '',
        'total_wasted': 0,
        'total_uploaded': 1024,
        'total_uploaded_session': 0,
        'total_downloaded': 2048,
        'total_downloaded_session': 0,
        'up_limit': -1,
        'dl_limit': -1,
        'time_elapsed': 600,
        'seeding_time': 0,
        'nb_connections': 0,
        'nb_connections_limit': 100,
        'share_ratio': 0.5,
        'addition_date': 1700000000,
        'completion_date': 1700000600,
        'created_by': 'qBittorrent v4.5.0',
        'dl_speed_avg': 3,
        'dl_speed': 0,
        'eta': 8640000,
        'last_seen': 1700000600,
        'peers': 0,
        'peers_total': 10,
        'pieces_have': 1,
        'pieces_num': 1,
        'reannounce': 0,
        'seeds': 0,
        'seeds_total': 42,
        'total_size': 2048,
        'up_speed_avg': 1,
        'up_speed': 0,
    }
