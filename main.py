import asyncio
from bot import client, tree, setup_custom_dns
from core.updater import MetadataUpdater
from events import setup_all_events
from commands import setup_all_commands
import config


async def main():
    """
    エントリー関数
    メタデータが用意できなければ起動しない
    """
    session = await setup_custom_dns()
    updater = MetadataUpdater.from_config(session=session)
    try:
        await updater.bootstrap()
        setup_all_events(client, updater)
        await setup_all_commands(tree, client, updater)
        await client.start(config.TOKEN)
    finally:
        await updater.stop()
        await session.close()


if __name__ == "__main__":
    asyncio.run(main())
