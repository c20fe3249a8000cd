"""
Discordイベントハンドラ
"""

from .ready import setup_ready_event

__all__ = [
    "setup_ready_event",
]


def setup_all_events(client, updater):
    """
    すべてのイベントハンドラを登録

    Args:
        client: Discord Client インスタンス
        updater: メタデータ管理
    """
    setup_ready_event(client, updater)
