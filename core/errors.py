"""
絵文字メタデータ関連の例外
"""


class MetadataError(RuntimeError):
    """メタデータ処理の基底例外"""


class NotLoadedError(MetadataError):
    """メタデータが一度も読み込まれていない状態で参照された"""

    def __init__(self, message: str = "メタデータが読み込まれていません"):
        super().__init__(message)


class MetadataLoadError(MetadataError):
    """metadata.json の取得失敗・解析失敗"""


class StorageError(MetadataError):
    """データディレクトリ・ファイルの読み書き失敗"""


class MetadataFetchError(MetadataError):
    """メタデータのダウンロード失敗"""


class FetchTimeoutError(MetadataFetchError):
    """リクエストがタイムアウトした"""


class HttpStatusError(MetadataFetchError):
    """304以外の非2xx応答"""

    def __init__(self, status: int, reason: str | None = None):
        self.status = status
        self.reason = reason or ""
        super().__init__(f"サーバー応答異常: {status} {self.reason}".rstrip())
