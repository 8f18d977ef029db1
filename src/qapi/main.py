"""Command line entry point for qapi"""

import argparse
import asyncio
import json
import logging
import sys
from typing import Any

import httpx
from pydantic import BaseModel

from qapi.client import Client
from qapi.config import settings
from qapi.errors import QapiError
from qapi.schemas import AddTorrent

log = logging.getLogger(__name__)


def to_jsonable(value: Any) -> Any:
    """Convert models and lists of models into plain JSON values"""
    if isinstance(value, BaseModel):
        return value.model_dump(mode='json', exclude_none=True)
    if isinstance(value, list):
        return [to_jsonable(item) for item in value]
    return value


async def run_command(client: Client, args: argparse.Namespace) -> Any:
    """Run a single command against a logged in client"""
    if args.command == 'version':
        return {'version': await client.get_version(), 'api_version': await client.get_api_version()}
    if args.command == 'build-info':
        return await client.get_build_info()
    if args.command == 'transfer':
        return await client.get_transfer_info()
    if args.command == 'list':
        return await client.get_torrent_list()
    if args.command == 'add':
        return await client.add_torrent(AddTorrent(urls=args.url, category=args.category))
    raise ValueError(f'Unknown command: {args.command}')


async def run(args: argparse.Namespace) -> Any:
    async with Client(args.target) as client:
        await client.login(args.username, args.password)
        log.info('Logged in to %s', client.api_url)
        try:
            return await run_command(client, args)
        finally:
            await client.logout()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='qBittorrent Web API client')
    parser.add_argument('--target', default=settings.target, help='Web UI base URL')
    parser.add_argument('--username', default=settings.username, help='Web UI username')
    parser.add_argument('--password', default=settings.password, help='Web UI password')

    commands = parser.add_subparsers(dest='command', required=True)
    commands.add_parser('version', help='Show application and Web API versions')
    commands.add_parser('build-info', help='Show library versions of the server build')
    commands.add_parser('transfer', help='Show global transfer info')
    commands.add_parser('list', help='List torrents')
    add = commands.add_parser('add', help='Add a torrent by URL or magnet link')
    add.add_argument('url', help='Torrent URL or magnet link')
    add.add_argument('--category', default=None, help='Category to put the torrent in')
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the application"""
    logging.basicConfig(level=settings.log_level, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    args = build_parser().parse_args(argv)

    try:
        result = asyncio.run(run(args))
    except (QapiError, httpx.HTTPError) as e:
        log.error('%s failed: %s', args.command, e)
        return 1

    print(json.dumps(to_jsonable(result), indent=2, ensure_ascii=False))
    return 0


if __name__ == '__main__':
    sys.exit(main())
