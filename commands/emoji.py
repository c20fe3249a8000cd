"""
絵文字キッチンのコマンド
/emoji mix, /emoji update, /emoji partners, /emoji status
"""

import discord
from discord import app_commands

from config import PARTNER_DISPLAY_LIMIT, debug
from core.kitchen import list_partners, mix_emojis, refresh_message, status_message
from core.log import handle_command_error, insert_command_log
from core.updater import MetadataUpdater


async def setup_emoji_commands(
    tree: app_commands.CommandTree, client: discord.Client, updater: MetadataUpdater
):
    """
    絵文字コマンドを登録

    Args:
        tree: Discord CommandTree インスタンス
        client: Discord Client インスタンス (未使用だが統一のため)
        updater: メタデータ管理
    """
    emoji_group = app_commands.Group(name="emoji", description="絵文字キッチン")

    @emoji_group.command(name="mix", description="2つの絵文字を合成します")
    @app_commands.describe(emojis="区切りなしの絵文字2つ（例: 😂🐶）")
    @app_commands.allowed_installs(guilds=True, users=True)
    async def emoji_mix(ctx: discord.Interaction, emojis: str):
        try:
            result = mix_emojis(updater.store, emojis)
            if not result.found:
                await ctx.response.send_message(result.message, ephemeral=True)
                insert_command_log(ctx, "/emoji mix", f"NG:{emojis}")
                return

            embed = discord.Embed(title=result.message, color=discord.Color.blue())
            embed.set_image(url=result.image_url)
            await ctx.response.send_message(embed=embed)
            insert_command_log(ctx, "/emoji mix", f"OK:{emojis}")
        except Exception as e:
            await handle_command_error(ctx, "/emoji mix", e)

    @emoji_group.command(name="update", description="絵文字メタデータを手動で更新します")
    @app_commands.allowed_installs(guilds=True, users=True)
    async def emoji_update(ctx: discord.Interaction):
        print(f"emoji updateコマンドが実行されました: {ctx.user.name} ({ctx.user.id})")
        try:
            await ctx.response.defer(ephemeral=True)
            updated = await updater.manual_refresh()
            await ctx.followup.send(refresh_message(updated), ephemeral=True)
            insert_command_log(ctx, "/emoji update", "UPDATED" if updated else "UNCHANGED")
        except Exception as e:
            await handle_command_error(ctx, "/emoji update", e)

    @emoji_group.command(name="partners", description="組み合わせ可能な絵文字を表示します")
    @app_commands.describe(emoji="絵文字1つ")
    @app_commands.allowed_installs(guilds=True, users=True)
    async def emoji_partners(ctx: discord.Interaction, emoji: str):
        try:
            message, partners = list_partners(
                updater.store, emoji, limit=PARTNER_DISPLAY_LIMIT
            )
            if partners:
                message = f"{message}\n{''.join(partners)}"
            await ctx.response.send_message(message, ephemeral=True)
            insert_command_log(ctx, "/emoji partners", f"OK:{len(partners)}")
        except Exception as e:
            await handle_command_error(ctx, "/emoji partners", e)

    @emoji_group.command(name="status", description="絵文字メタデータの状態を表示します")
    @app_commands.allowed_installs(guilds=True, users=True)
    async def emoji_status(ctx: discord.Interaction):
        try:
            await ctx.response.send_message(
                status_message(updater.status()), ephemeral=True
            )
            insert_command_log(ctx, "/emoji status", "OK")
            if debug:
                print(f"/emoji status 実行: user={ctx.user.id}")
        except Exception as e:
            await handle_command_error(ctx, "/emoji status", e)

    tree.add_command(emoji_group)
