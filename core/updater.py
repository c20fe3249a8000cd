"""
メタデータの起動時読み込みと定期更新
"""

import asyncio
import time
from dataclasses import dataclass

import aiohttp

import config
from config import debug
from core.downloader import FetchResult, MetadataDownloader
from core.errors import MetadataLoadError, StorageError
from core.log import get_error_summary
from core.metadata import MetadataDocument, MetadataStore


@dataclass(frozen=True)
class RefreshOutcome:
    """定期更新1回分の結果。status は updated / unchanged / failed"""

    status: str
    at: float
    error: str | None = None


class MetadataUpdater:
    """
    メタデータの読み込み・更新をまとめて管理する
    ストアはこのインスタンスが持ち、コマンド側には store を渡す
    """

    def __init__(
        self,
        data_dir: str,
        metadata_url: str,
        timeout: int,
        auto_update: bool = True,
        update_interval: int = 86400,
        session: aiohttp.ClientSession | None = None,
    ):
        self.store = MetadataStore()
        self.downloader = MetadataDownloader(
            data_dir, metadata_url, timeout, session=session
        )
        self.auto_update = auto_update
        self.update_interval = update_interval
        self.last_outcome: RefreshOutcome | None = None
        self._lock = asyncio.Lock()
        self._task: asyncio.Task | None = None

    @classmethod
    def from_config(
        cls, session: aiohttp.ClientSession | None = None
    ) -> "MetadataUpdater":
        return cls(
            config.DATA_DIR,
            config.METADATA_URL,
            config.TIMEOUT,
            auto_update=config.AUTO_UPDATE,
            update_interval=config.UPDATE_INTERVAL,
            session=session,
        )

    async def bootstrap(self) -> None:
        """
        起動時の読み込み
        ファイルが無ければダウンロードしてから読み込む。失敗時は例外をそのまま投げる

        Raises:
            MetadataLoadError: ファイルが用意できなかった・解析できなかった
        """
        if not self.downloader.has_metadata():
            print("メタデータファイルが存在しないため、ダウンロードします")
            result = await self.downloader.download()
            if result is not FetchResult.UPDATED:
                raise MetadataLoadError("メタデータファイルのダウンロードに失敗しました")
            print("メタデータファイルのダウンロードが完了しました")
        await self.reload()

    async def reload(self) -> None:
        """metadata.json を読み直してストアを差し替える"""
        path = self.downloader.metadata_path
        try:
            raw = await asyncio.to_thread(_read_bytes, path)
        except OSError as e:
            raise StorageError(f"メタデータを読み込めません: {e}") from e
        document = await asyncio.to_thread(MetadataDocument.from_bytes, raw)
        self.store.load(document)
        print(f"メタデータの読み込み完了: {len(document.known_supported_emoji)}種類")

    async def refresh(self) -> FetchResult:
        """
        条件付きで取得し、更新があればストアを読み直す
        同時に呼ばれても書き込みは1つずつ行う
        """
        async with self._lock:
            result = await self.downloader.download()
            if result is FetchResult.UPDATED:
                document = self.downloader.fetched_document
                if document is None:
                    await self.reload()
                else:
                    self.store.load(document)
                    print(f"メタデータの読み込み完了: {len(document.known_supported_emoji)}種類")
            return result

    async def manual_refresh(self) -> bool:
        """
        手動更新。更新があれば True
        """
        result = await self.refresh()
        self.last_outcome = RefreshOutcome(
            "updated" if result is FetchResult.UPDATED else "unchanged", time.time()
        )
        return result is FetchResult.UPDATED

    async def tick(self) -> RefreshOutcome:
        """定期更新1回分。例外は記録して握りつぶす"""
        try:
            result = await self.refresh()
            status = "updated" if result is FetchResult.UPDATED else "unchanged"
            outcome = RefreshOutcome(status, time.time())
        except Exception as e:
            print(f"定期更新に失敗しました: {e}")
            outcome = RefreshOutcome("failed", time.time(), get_error_summary(e))
        self.last_outcome = outcome
        if debug:
            print(f"定期更新結果: {outcome.status}")
        return outcome

    def start(self) -> None:
        """定期更新タスクを開始する。無効設定か起動済みなら何もしない"""
        if not self.auto_update:
            return
        if self._task is not None and not self._task.done():
            return
        self._task = asyncio.create_task(self._run())
        print(f"メタデータの定期更新を開始しました: {self.update_interval}秒ごと")

    async def stop(self) -> None:
        task = self._task
        self._task = None
        if task is None or task.done():
            return
        task.cancel()
        try:
            await task
        except asyncio.CancelledError:
            pass

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    async def _run(self) -> None:
        while True:
            await asyncio.sleep(self.update_interval)
            await self.tick()

    def status(self) -> dict:
        """状態表示用の情報"""
        loaded = self.store.is_loaded
        return {
            "loaded": loaded,
            "supported_count": len(self.store.list_supported()) if loaded else 0,
            "loaded_at": self.store.loaded_at,
            "auto_update": self.auto_update,
            "update_interval": self.update_interval,
            "last_outcome": self.last_outcome,
        }


def _read_bytes(path: str) -> bytes:
    with open(path, "rb") as f:
        return f.read()
