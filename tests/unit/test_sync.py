"""Unit tests for the sync API"""

import json

import pytest

from qapi.errors import NoTorrentHash, WrongStatusCode
from qapi.schemas import ConnectionStatus, GetMainData, GetTorrentPeers


@pytest.mark.asyncio
async def test_get_main_data_full(logged_in, server, sample_torrent, torrent_hash):
    server.route(
        'sync/maindata',
        json={
            'rid': 1,
            'full_update': True,
            'torrents': {torrent_hash: sample_torrent},
            'categories': {'games': {'name': 'games', 'savePath': '/downloads/games'}},
            'tags': ['new'],
            'server_state': {'connection_status': 'firewalled', 'dl_info_speed': 0, 'use_alt_speed_limits': False},
        },
    )

    data = await logged_in.get_main_data()

    assert data.rid == 1
    assert data.full_update
    assert data.torrents[torrent_hash]['name'] == sample_torrent['name']
    assert data.categories['games'].save_path == '/downloads/games'
    assert data.server_state is not None
    assert data.server_state.connection_status is ConnectionStatus.FIREWALLED
    assert json.loads(server.last.content) == {'rid': 0}


@pytest.mark.asyncio
async def test_get_main_data_delta(logged_in, server, torrent_hash):
    server.route('sync/maindata', json={'rid': 15, 'torrents': {torrent_hash: {'state': 'pausedUP'}}})

    data = await logged_in.get_main_data(GetMainData(rid=14))

    assert not data.full_update
    assert data.torrents == {torrent_hash: {'state': 'pausedUP'}}
    assert data.torrents_removed == []
    assert json.loads(server.last.content) == {'rid': 14}


@pytest.mark.asyncio
async def test_get_peers_data(logged_in, server, torrent_hash):
    server.route(
        'sync/torrentPeers',
        json={
            'rid': 3,
            'full_update': True,
            'show_flags': True,
            'peers': {'10.0.0.5:6881': {'client': 'qBittorrent 4.5.0', 'ip': '10.0.0.5', 'port': 6881, 'progress': 1}},
        },
    )

    data = await logged_in.get_peers_data(GetTorrentPeers(hash=torrent_hash))

    assert data.peers['10.0.0.5:6881'].port == 6881
    assert server.last.url.path == '/api/v2/sync/torrentPeers'
    assert json.loads(server.last.content) == {'hash': torrent_hash, 'rid': 0}


@pytest.mark.asyncio
async def test_get_peers_data_unknown_hash(logged_in, server, torrent_hash):
    server.route('sync/torrentPeers', 404, text='Torrent not found')

    with pytest.raises(NoTorrentHash):
        await logged_in.get_peers_data(GetTorrentPeers(hash=torrent_hash))


@pytest.mark.asyncio
async def test_get_main_data_404_is_wrong_status(logged_in, server):
    server.route('sync/maindata', 404)

    with pytest.raises(WrongStatusCode):
        await logged_in.get_main_data()
