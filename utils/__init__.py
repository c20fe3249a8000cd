"""
ユーティリティモジュール
キャッシュ管理と絵文字処理機能を提供
"""

from .cache import (
    ensure_dir,
    load_json_cache,
    save_json_cache,
    write_bytes_atomic,
)

from .emoji import (
    split_emoji_input,
    get_emoji_codepoint,
    to_printable_emoji,
)

__all__ = [
    "ensure_dir",
    "load_json_cache",
    "save_json_cache",
    "write_bytes_atomic",
    "split_emoji_input",
    "get_emoji_codepoint",
    "to_printable_emoji",
]
