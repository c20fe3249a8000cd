"""
絵文字キッチンBot インスタンス管理
Discord Botのクライアントとコマンドツリーを管理
"""

import discord
from discord import app_commands
from aiohttp import AsyncResolver, ClientSession, TCPConnector

intents = discord.Intents.default()
client = discord.Client(intents=intents)
tree = app_commands.CommandTree(client)

PUBLIC_DNS = ["8.8.8.8", "8.8.4.4"]


async def setup_custom_dns() -> ClientSession:
    """
    カスタムDNSリゾルバ付きのHTTPセッションを作る非同期関数
    Google Public DNSを使用してDNS解決を行う(aiodns)
    メタデータの取得に使う。閉じるのは呼び出し側

    Returns:
        ClientSession: リゾルバ設定済みのセッション
    """
    resolver = AsyncResolver(nameservers=PUBLIC_DNS)
    connector = TCPConnector(resolver=resolver)
    session = ClientSession(connector=connector)
    print("カスタムDNS設定を適用しました。")
    return session
