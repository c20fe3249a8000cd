import asyncio

import aiohttp

from bot import setup_custom_dns


def test_setup_custom_dns_returns_resolver_session():
    async def run():
        session = await setup_custom_dns()
        try:
            assert isinstance(session, aiohttp.ClientSession)
            assert isinstance(session.connector, aiohttp.TCPConnector)
            assert not session.closed
        finally:
            await session.close()
        return session.closed

    assert asyncio.run(run()) is True
