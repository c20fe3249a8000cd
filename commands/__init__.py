"""
コマンド登録モジュール
"""

from discord import Client, app_commands

from core.updater import MetadataUpdater

from .emoji import setup_emoji_commands

__all__ = [
    "setup_emoji_commands",
    "setup_all_commands",
]


async def setup_all_commands(
    tree: app_commands.CommandTree, client: Client, updater: MetadataUpdater
):
    """
    すべてのコマンドを登録

    Args:
        tree: Discord CommandTree インスタンス
        client: Discord Client インスタンス
        updater: メタデータ管理
    """
    await setup_emoji_commands(tree, client, updater)
