"""Unit tests for the application API"""

import json

import pytest

from qapi.errors import DecodeError, WrongStatusCode
from qapi.schemas import BuildInfo, Encryption, MaxRatioAction, Preferences, ScanDirTarget, SchedulerDays


@pytest.mark.asyncio
async def test_get_version(logged_in, server):
    server.route('app/version', text='v4.5.0')

    assert await logged_in.get_version() == 'v4.5.0'
    assert server.last.url.path == '/api/v2/app/version'


@pytest.mark.asyncio
async def test_get_version_is_repeatable(logged_in, server):
    server.route('app/version', text='v4.5.0')

    assert await logged_in.get_version() == await logged_in.get_version()


@pytest.mark.asyncio
async def test_get_api_version(logged_in, server):
    server.route('app/webapiVersion', text='2.8.19')

    assert await logged_in.get_api_version() == '2.8.19'


@pytest.mark.asyncio
async def test_get_version_wrong_status(logged_in, server):
    server.route('app/version', 500, text='Internal Server Error')

    with pytest.raises(WrongStatusCode):
        await logged_in.get_version()


@pytest.mark.asyncio
async def test_non_hash_operation_treats_404_as_wrong_status(logged_in, server):
    server.route('app/version', 404)

    with pytest.raises(WrongStatusCode) as exc_info:
        await logged_in.get_version()

    assert exc_info.value.status_code == 404


@pytest.mark.asyncio
async def test_get_build_info(logged_in, server):
    server.route(
        'app/buildInfo',
        json={'qt': '6.4.2', 'libtorrent': '2.0.9.0', 'boost': '1.82.0', 'openssl': '3.1.1', 'bitness': 64, 'zlib': '1.3'},
    )

    info = await logged_in.get_build_info()

    assert info == BuildInfo(qt='6.4.2', libtorrent='2.0.9.0', boost='1.82.0', openssl='3.1.1', bitness=64)


@pytest.mark.asyncio
async def test_get_build_info_bad_body(logged_in, server):
    server.route('app/buildInfo', text='<html>')

    with pytest.raises(DecodeError):
        await logged_in.get_build_info()


@pytest.mark.asyncio
async def test_shutdown(logged_in, server):
    server.route('app/shutdown')

    assert await logged_in.shutdown() is None
    assert server.last.url.path == '/api/v2/app/shutdown'


@pytest.mark.asyncio
async def test_get_preferences(logged_in, server):
    server.route(
        'app/preferences',
        json={
            'locale': 'en_GB',
            'save_path': '/downloads/',
            'scan_dirs': {'/watch': 0, '/other': '/downloads/other'},
            'max_ratio_act': 1,
            'scheduler_days': 2,
            'encryption': 1,
            'banned_IPs': '10.0.0.1',
            'some_future_option': True,
        },
    )

    prefs = await logged_in.get_preferences()

    assert prefs.locale == 'en_GB'
    assert prefs.scan_dirs == {'/watch': ScanDirTarget.MONITORED_FOLDER, '/other': '/downloads/other'}
    assert prefs.max_ratio_act is MaxRatioAction.REMOVE
    assert prefs.scheduler_days is SchedulerDays.EVERY_WEEKEND
    assert prefs.encryption is Encryption.FORCE_ON
    assert prefs.banned_ips == '10.0.0.1'
    assert prefs.dht is None


@pytest.mark.asyncio
async def test_set_preferences_sends_only_set_fields(logged_in, server):
    server.route('app/setPreferences')

    await logged_in.set_preferences(Preferences(save_path='/data'))

    assert json.loads(server.last.content) == {'save_path': '/data'}


@pytest.mark.asyncio
async def test_set_preferences_encodes_enums_and_aliases(logged_in, server):
    server.route('app/setPreferences')

    await logged_in.set_preferences(Preferences(encryption=Encryption.FORCE_OFF, banned_ips='10.0.0.2', dht=False))

    assert json.loads(server.last.content) == {'encryption': 2, 'banned_IPs': '10.0.0.2', 'dht': False}


@pytest.mark.asyncio
async def test_get_default_save_path(logged_in, server):
    server.route('app/defaultSavePath', text='/downloads/')

    assert await logged_in.get_default_save_path() == '/downloads/'
