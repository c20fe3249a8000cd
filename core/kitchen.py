"""
絵文字キッチン
2つの絵文字から合成画像を探す
"""

from dataclasses import dataclass
from datetime import datetime

from core.metadata import Combination, MetadataStore, select_combination
from utils.emoji import get_emoji_codepoint, split_emoji_input, to_printable_emoji

USAGE_EMPTY = "絵文字を2つ入力してください"
USAGE_COUNT = "絵文字をちょうど2つ入力してください（例: 😂🐶）"
USAGE_SINGLE = "絵文字を1つ入力してください"


@dataclass(frozen=True)
class MixResult:
    """合成結果。image_url が None ならメッセージをそのまま返す"""

    message: str
    image_url: str | None = None
    combination: Combination | None = None

    @property
    def found(self) -> bool:
        return self.image_url is not None


def mix_emojis(store: MetadataStore, text: str) -> MixResult:
    """
    2つの絵文字の組み合わせ画像を探す

    Args:
        store (MetadataStore): 読み込み済みメタデータ
        text (str): ユーザー入力（区切りなしの絵文字2つ）

    Returns:
        MixResult: 見つかれば image_url 付き

    Raises:
        NotLoadedError: メタデータ未読み込み
    """
    raw = (text or "").strip()
    if not raw:
        return MixResult(USAGE_EMPTY)
    chars = split_emoji_input(raw)
    if len(chars) != 2:
        return MixResult(USAGE_COUNT)

    first, second = chars
    entry = store.lookup(get_emoji_codepoint(first))
    combinations = entry.get_combinations(get_emoji_codepoint(second)) if entry else []
    combo = select_combination(combinations)
    if combo is None or not combo.g_static_url:
        return MixResult(f"{first} と {second} の組み合わせが見つかりません")
    return MixResult(f"{first} + {second}", image_url=combo.g_static_url, combination=combo)


def refresh_message(updated: bool) -> str:
    return "メタデータを更新しました" if updated else "メタデータに変更はありません"


def list_partners(store: MetadataStore, text: str, limit: int = 100) -> tuple[str, list[str]]:
    """
    指定した絵文字と組み合わせ可能な絵文字の一覧

    Args:
        store (MetadataStore): 読み込み済みメタデータ
        text (str): 絵文字1つ
        limit (int): 最大件数

    Returns:
        tuple[str, list[str]]: (メッセージ, 相手の絵文字リスト)
    """
    chars = split_emoji_input((text or "").strip())
    if len(chars) != 1:
        return USAGE_SINGLE, []
    emoji = chars[0]
    entry = store.lookup(get_emoji_codepoint(emoji))
    partners = entry.partners() if entry else []
    if not partners:
        return f"{emoji} と組み合わせられる絵文字はありません", []
    printable = [to_printable_emoji(cp) for cp in partners[:limit]]
    message = f"{emoji} と組み合わせられる絵文字: {len(partners)}種類"
    if len(partners) > limit:
        message += f"（先頭{limit}件を表示）"
    return message, printable


def _format_time(ts: float | None) -> str:
    if ts is None:
        return "-"
    return datetime.fromtimestamp(ts).strftime("%Y/%m/%d %H:%M:%S")


def status_message(status: dict) -> str:
    """MetadataUpdater.status() を表示用の文字列にする"""
    if not status.get("loaded"):
        return "メタデータは未読み込みです"
    lines = [
        f"対応絵文字数: {status.get('supported_count', 0)}",
        f"読み込み日時: {_format_time(status.get('loaded_at'))}",
    ]
    if status.get("auto_update"):
        lines.append(f"自動更新: ON ({status.get('update_interval')}秒ごと)")
    else:
        lines.append("自動更新: OFF")
    outcome = status.get("last_outcome")
    if outcome is not None:
        line = f"前回の更新: {outcome.status} ({_format_time(outcome.at)})"
        if outcome.error:
            line += f" {outcome.error}"
        lines.append(line)
    return "\n".join(lines)
