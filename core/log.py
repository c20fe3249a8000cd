"""
ログ記録機能
"""

import traceback
from datetime import datetime

import discord

from config import debug
from core.errors import (
    FetchTimeoutError,
    HttpStatusError,
    MetadataError,
    MetadataLoadError,
    NotLoadedError,
    StorageError,
)


def insert_command_log(ctx: discord.Interaction, command: str, result: str) -> None:
    """
    コマンド実行ログを1行出力

    Args:
        ctx (discord.Interaction): コマンドのコンテキスト
        command (str): コマンド名
        result (str): 実行結果
    """
    try:
        u = getattr(ctx, "user", None) or getattr(ctx, "author", None)
        uid = int(getattr(u, "id", 0) or 0)
        uname = getattr(u, "display_name", None) or getattr(u, "name", None) or str(u)

        g = getattr(ctx, "guild", None)
        gid = int(getattr(g, "id", 0) or 0) if g else 0
        gname = getattr(g, "name", "") if g else ""
        channel = getattr(ctx, "channel", None)
        channel_id = int(getattr(channel, "id", 0) or 0) if channel else 0

        now = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        print(
            f"[commandlog] {now} user={uname}({uid}) server={gname}({gid}) "
            f"channel={channel_id} command={command} result={result}"
        )
    except Exception as e:
        if debug:
            print(f"commandlog出力エラー: {e}")


def get_user_message(error: Exception) -> str:
    """
    例外からユーザー向けメッセージを決める

    Args:
        error: 発生した例外

    Returns:
        str: ユーザーに表示するメッセージ
    """
    if isinstance(error, NotLoadedError):
        return "絵文字データがまだ読み込まれていません。しばらく待ってから再度お試しください。"
    if isinstance(error, FetchTimeoutError):
        return "メタデータの取得がタイムアウトしました。ネットワークかタイムアウト設定を確認してください。"
    if isinstance(error, HttpStatusError):
        return f"メタデータサーバーの応答が異常です (Status: {error.status})"
    if isinstance(error, StorageError):
        return "データファイルの読み書きに失敗しました。"
    if isinstance(error, MetadataLoadError):
        return "メタデータの読み込みに失敗しました。"
    if isinstance(error, MetadataError):
        return f"処理に失敗しました: {error}"
    return "エラーが発生しました。しばらく待ってから再度お試しください。"


async def handle_command_error(
    ctx: discord.Interaction,
    command: str,
    error: Exception,
    user_message: str | None = None,
) -> None:
    """
    コマンド実行時のエラーを統一的に処理する

    Args:
        ctx: Discord Interaction コンテキスト
        command: コマンド名
        error: 発生した例外
        user_message: ユーザーに表示するカスタムメッセージ（Noneの場合はデフォルト）
    """
    if debug:
        print(f"コマンドエラー ({command}): {error}")
        traceback.print_exception(type(error), error, error.__traceback__)

    error_type = type(error).__name__
    insert_command_log(ctx, command, f"ERROR:{error_type}:{str(error)[:100]}")

    if user_message is None:
        user_message = get_user_message(error)

    try:
        if not ctx.response.is_done():
            await ctx.response.send_message(user_message, ephemeral=True)
        else:
            await ctx.followup.send(user_message, ephemeral=True)
    except Exception as send_error:
        if debug:
            print(f"エラーメッセージ送信失敗: {send_error}")


def get_error_summary(error: Exception) -> str:
    """
    エラーの概要を取得する（ログ用）

    Args:
        error: 例外オブジェクト

    Returns:
        str: エラーの概要（最大200文字）
    """
    error_type = type(error).__name__
    error_msg = str(error)
    summary = f"{error_type}: {error_msg}"
    return summary[:200]
