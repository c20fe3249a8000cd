"""
絵文字キッチンBot Configファイル
"""

import os

from dotenv import load_dotenv

load_dotenv()

TRUE_STRINGS = {"1", "true", "yes", "on"}


def env_bool(name: str, default: bool) -> bool:
    """
    環境変数を真偽値として読む

    Args:
        name (str): 環境変数名
        default (bool): 未設定時の値

    Returns:
        bool: 1/true/yes/on のときTrue
    """
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in TRUE_STRINGS


def env_int(name: str, default: int, minimum: int | None = None) -> int:
    """
    環境変数を整数として読む。数値でなければ default、下限未満は下限に丸める

    Args:
        name (str): 環境変数名
        default (int): 未設定・不正値時の値
        minimum (int | None, optional): 下限

    Returns:
        int: 設定値
    """
    raw = os.getenv(name)
    try:
        value = int(raw) if raw is not None and raw.strip() != "" else default
    except ValueError:
        print(f"設定値が数値ではありません: {name}={raw!r}、{default}を使います")
        value = default
    if minimum is not None and value < minimum:
        print(f"設定値が下限未満です: {name}={value}、{minimum}に切り上げます")
        value = minimum
    return value


TOKEN = os.getenv("token")

debug = env_bool("DEBUG", True)

# 自動更新の有無
AUTO_UPDATE = env_bool("EMOJI_AUTO_UPDATE", True)

# 更新間隔(秒)
UPDATE_INTERVAL = env_int("EMOJI_UPDATE_INTERVAL", 86400, minimum=3600)

# メタデータの取得元(ミラー可)
METADATA_URL = os.getenv(
    "EMOJI_METADATA_URL",
    "https://raw.githubusercontent.com/xsalazar/emoji-kitchen-backend/main/app/metadata.json",
)

# リクエストのタイムアウト(ミリ秒)
TIMEOUT = env_int("EMOJI_TIMEOUT", 30000, minimum=1000)

DATA_DIR = os.getenv(
    "EMOJI_DATA_DIR", os.path.join(os.path.dirname(__file__), "data", "emojis")
)

METADATA_FILENAME = "metadata.json"
METADATA_CACHE_FILENAME = "metadata.cache.json"

# /emoji partners で表示する最大件数
PARTNER_DISPLAY_LIMIT = 100
