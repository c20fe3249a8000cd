"""
コアロジック
メタデータの取得・保持、絵文字の合成、ログ記録
"""

from .errors import (
    MetadataError,
    NotLoadedError,
    MetadataLoadError,
    StorageError,
    MetadataFetchError,
    FetchTimeoutError,
    HttpStatusError,
)

from .log import (
    insert_command_log,
    handle_command_error,
)

from .metadata import (
    Combination,
    EmojiEntry,
    MetadataDocument,
    MetadataStore,
    select_combination,
)

from .downloader import FetchResult, MetadataDownloader
from .updater import MetadataUpdater, RefreshOutcome

from .kitchen import (
    MixResult,
    mix_emojis,
    refresh_message,
    list_partners,
    status_message,
)

__all__ = [
    "MetadataError",
    "NotLoadedError",
    "MetadataLoadError",
    "StorageError",
    "MetadataFetchError",
    "FetchTimeoutError",
    "HttpStatusError",
    "insert_command_log",
    "handle_command_error",
    "Combination",
    "EmojiEntry",
    "MetadataDocument",
    "MetadataStore",
    "select_combination",
    "FetchResult",
    "MetadataDownloader",
    "MetadataUpdater",
    "RefreshOutcome",
    "MixResult",
    "mix_emojis",
    "refresh_message",
    "list_partners",
    "status_message",
]
