"""
絵文字キッチンのメタデータ
metadata.json の解析と、読み込み済みメタデータの保持
"""

import json
import time
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping

from core.errors import MetadataLoadError, NotLoadedError


@dataclass(frozen=True)
class Combination:
    """2つの絵文字を合成した画像1件"""

    g_static_url: str
    is_latest: bool = False
    extra: Mapping[str, Any] = field(
        default_factory=lambda: MappingProxyType({}), hash=False
    )

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "Combination":
        extra = {k: v for k, v in raw.items() if k not in ("gStaticUrl", "isLatest")}
        return cls(
            g_static_url=str(raw.get("gStaticUrl") or ""),
            is_latest=bool(raw.get("isLatest")),
            extra=MappingProxyType(extra),
        )


@dataclass(frozen=True)
class EmojiEntry:
    """ベース絵文字1つ分の組み合わせ一覧"""

    codepoint: str
    combinations: Mapping[str, list]

    def get_combinations(self, partner_codepoint: str) -> list[Combination]:
        raw_list = self.combinations.get(partner_codepoint) or []
        return [Combination.from_dict(c) for c in raw_list if isinstance(c, dict)]

    def partners(self) -> list[str]:
        return [cp for cp, combos in self.combinations.items() if combos]


@dataclass(frozen=True)
class MetadataDocument:
    """
    metadata.json 全体
    読み込み後は変更しない。更新時は丸ごと差し替える
    """

    known_supported_emoji: tuple[str, ...]
    data: Mapping[str, dict]

    @classmethod
    def from_dict(cls, payload) -> "MetadataDocument":
        """
        JSONオブジェクトからドキュメントを作る

        Args:
            payload: json.loads 済みのデータ

        Returns:
            MetadataDocument

        Raises:
            MetadataLoadError: 構造が想定と違う場合
        """
        if not isinstance(payload, dict):
            raise MetadataLoadError("メタデータのルートがオブジェクトではありません")
        supported = payload.get("knownSupportedEmoji") or []
        data = payload.get("data") or {}
        if not isinstance(supported, list) or not isinstance(data, dict):
            raise MetadataLoadError("knownSupportedEmoji または data の形式が不正です")
        return cls(
            known_supported_emoji=tuple(str(cp) for cp in supported),
            data=MappingProxyType(data),
        )

    @classmethod
    def from_bytes(cls, raw: bytes) -> "MetadataDocument":
        try:
            payload = json.loads(raw)
        except (UnicodeDecodeError, ValueError) as e:
            raise MetadataLoadError(f"メタデータの解析に失敗しました: {e}") from e
        return cls.from_dict(payload)

    def entry(self, codepoint: str) -> EmojiEntry | None:
        raw = self.data.get(codepoint)
        if not isinstance(raw, dict):
            return None
        combinations = raw.get("combinations")
        if not isinstance(combinations, dict):
            combinations = {}
        return EmojiEntry(codepoint=codepoint, combinations=combinations)


def select_combination(combinations: list[Combination]) -> Combination | None:
    """
    最新の組み合わせを選ぶ。isLatest が無ければ先頭、空なら None

    Args:
        combinations (list[Combination]): 組み合わせ一覧

    Returns:
        Combination | None
    """
    for combo in combinations:
        if combo.is_latest:
            return combo
    return combinations[0] if combinations else None


class MetadataStore:
    """
    読み込み済みメタデータの保持
    load は参照の差し替えのみで、読み取り側が更新途中の状態を見ることはない
    """

    def __init__(self):
        self._document: MetadataDocument | None = None
        self.loaded_at: float | None = None

    @property
    def is_loaded(self) -> bool:
        return self._document is not None

    @property
    def document(self) -> MetadataDocument:
        doc = self._document
        if doc is None:
            raise NotLoadedError()
        return doc

    def load(self, document: MetadataDocument) -> None:
        self._document = document
        self.loaded_at = time.time()

    def lookup(self, codepoint: str) -> EmojiEntry | None:
        return self.document.entry(codepoint)

    def list_supported(self) -> tuple[str, ...]:
        return self.document.known_supported_emoji
