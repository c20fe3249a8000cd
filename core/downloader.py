"""
メタデータのダウンロード
ETag / Last-Modified による条件付き取得と、ディスクへの保存
"""

import asyncio
import enum
import os

import aiohttp

from config import METADATA_CACHE_FILENAME, METADATA_FILENAME, debug
from core.errors import (
    FetchTimeoutError,
    HttpStatusError,
    MetadataFetchError,
    StorageError,
)
from core.metadata import MetadataDocument
from utils.cache import ensure_dir, load_json_cache, save_json_cache, write_bytes_atomic


class FetchResult(enum.Enum):
    UPDATED = "updated"
    NOT_MODIFIED = "not_modified"


def build_conditional_headers(cache_meta: dict) -> dict[str, str]:
    """
    前回のキャッシュ情報から条件付きリクエストのヘッダーを作る

    Args:
        cache_meta (dict): {"etag": ..., "lastModified": ...}

    Returns:
        dict[str, str]: リクエストヘッダー
    """
    headers = {}
    etag = cache_meta.get("etag")
    last_modified = cache_meta.get("lastModified")
    if isinstance(etag, str) and etag:
        headers["If-None-Match"] = etag
    if isinstance(last_modified, str) and last_modified:
        headers["If-Modified-Since"] = last_modified
    return headers


class MetadataDownloader:
    """
    metadata.json とキャッシュ情報ファイル(metadata.cache.json)を管理する
    """

    def __init__(
        self,
        data_dir: str,
        metadata_url: str,
        timeout: int,
        session: aiohttp.ClientSession | None = None,
    ):
        self.data_dir = data_dir
        self.metadata_url = metadata_url
        self.timeout = timeout
        self._session = session
        # 直近の UPDATED で保存したドキュメント(解析済み)
        self.fetched_document: MetadataDocument | None = None

    @property
    def metadata_path(self) -> str:
        return os.path.join(self.data_dir, METADATA_FILENAME)

    @property
    def cache_path(self) -> str:
        return os.path.join(self.data_dir, METADATA_CACHE_FILENAME)

    def has_metadata(self) -> bool:
        return os.path.isfile(self.metadata_path)

    async def download(self) -> FetchResult:
        """
        メタデータを条件付きで取得し、変更があれば保存する

        Returns:
            FetchResult: UPDATED なら metadata.json が書き換わった

        Raises:
            FetchTimeoutError: タイムアウト
            HttpStatusError: 304以外の非2xx応答
            MetadataFetchError: その他の通信エラー
            StorageError: ファイル・ディレクトリの読み書き失敗
            MetadataLoadError: 応答がメタデータとして解析できない(ファイルは変更しない)
        """
        try:
            ensure_dir(self.data_dir)
        except OSError as e:
            raise StorageError(f"データディレクトリを作成できません: {e}") from e

        # 本体が無いときのキャッシュ情報は信用しない
        if self.has_metadata():
            cache_meta = load_json_cache(self.cache_path, {})
        else:
            cache_meta = {}
        headers = build_conditional_headers(cache_meta)
        timeout = aiohttp.ClientTimeout(total=self.timeout / 1000)

        try:
            if self._session is not None:
                status, reason, body, new_meta = await self._fetch(
                    self._session, headers, timeout
                )
            else:
                async with aiohttp.ClientSession() as session:
                    status, reason, body, new_meta = await self._fetch(
                        session, headers, timeout
                    )
        except asyncio.TimeoutError as e:
            print("メタデータ取得がタイムアウトしました。ネットワークかタイムアウト設定を確認してください")
            raise FetchTimeoutError(
                f"ダウンロードがタイムアウトしました ({self.timeout}ms)"
            ) from e
        except aiohttp.ClientError as e:
            print(f"メタデータのダウンロードに失敗しました: {e}")
            raise MetadataFetchError(f"ダウンロードに失敗しました: {e}") from e

        if status == 304:
            print("メタデータに変更はありません。今回の更新はスキップします")
            return FetchResult.NOT_MODIFIED

        if not 200 <= status < 300:
            print(f"HTTPエラー [{status}]: {reason}")
            raise HttpStatusError(status, reason)

        if not body:
            print("サーバーの応答が空でした。既存のメタデータをそのまま使います")
            return FetchResult.NOT_MODIFIED

        # 解析できない応答は保存しない
        document = await asyncio.to_thread(MetadataDocument.from_bytes, body)

        try:
            # 本体を先に書く。キャッシュ情報だけ新しい状態にはしない
            write_bytes_atomic(self.metadata_path, body)
            save_json_cache(self.cache_path, new_meta)
        except OSError as e:
            raise StorageError(f"メタデータを保存できません: {e}") from e

        if debug:
            print(f"メタデータを保存しました: {len(body)} bytes, {new_meta}")
        self.fetched_document = document
        print("メタデータのダウンロードに成功しました")
        return FetchResult.UPDATED

    async def _fetch(self, session, headers: dict, timeout: aiohttp.ClientTimeout):
        async with session.get(
            self.metadata_url, headers=headers, timeout=timeout
        ) as response:
            if response.status == 304 or not 200 <= response.status < 300:
                return response.status, response.reason, b"", {}
            body = await response.read()
            new_meta = {}
            etag = response.headers.get("ETag")
            last_modified = response.headers.get("Last-Modified")
            if etag:
                new_meta["etag"] = etag
            if last_modified:
                new_meta["lastModified"] = last_modified
            return response.status, response.reason, body, new_meta
