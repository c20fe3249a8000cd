"""
on_ready イベントハンドラ
"""

import discord

from core.updater import MetadataUpdater


def setup_ready_event(client: discord.Client, updater: MetadataUpdater):
    """
    on_ready イベントを登録

    Args:
        client: Discord Client インスタンス
        updater: メタデータ管理
    """

    @client.event
    async def on_ready():
        print("絵文字キッチンBot起動しました")

        updater.start()

        count = len(updater.store.list_supported()) if updater.store.is_loaded else 0
        await client.change_presence(
            activity=discord.CustomActivity(name=f"対応絵文字:{count}種類")
        )
        print("Bot準備完了")
