import json

import pytest

from core.errors import MetadataLoadError, NotLoadedError
from core.metadata import (
    Combination,
    MetadataDocument,
    MetadataStore,
    select_combination,
)


def test_store_fails_closed_before_load():
    store = MetadataStore()
    assert not store.is_loaded
    with pytest.raises(NotLoadedError):
        store.lookup("1f602")
    with pytest.raises(NotLoadedError):
        store.list_supported()


def test_store_lookup_and_supported(sample_metadata):
    store = MetadataStore()
    store.load(MetadataDocument.from_dict(sample_metadata))

    assert store.is_loaded
    assert store.loaded_at is not None
    assert store.list_supported() == ("1f602", "1f436", "1f600", "2764-fe0f")

    entry = store.lookup("1f602")
    assert entry is not None
    combos = entry.get_combinations("1f436")
    assert [c.is_latest for c in combos] == [False, True]
    assert combos[0].extra["alt"] == "joy-dog"
    assert "gStaticUrl" not in combos[0].extra
    assert entry.get_combinations("1f999") == []
    assert entry.partners() == ["1f436", "1f600"]

    assert store.lookup("1f999") is None


def test_load_swaps_whole_document(sample_metadata):
    store = MetadataStore()
    store.load(MetadataDocument.from_dict(sample_metadata))
    store.load(MetadataDocument.from_dict({"knownSupportedEmoji": ["1f600"], "data": {}}))

    assert store.list_supported() == ("1f600",)
    assert store.lookup("1f602") is None


def test_loading_same_content_twice_is_idempotent(sample_bytes):
    store = MetadataStore()
    store.load(MetadataDocument.from_bytes(sample_bytes))
    first = (store.list_supported(), store.lookup("1f602").get_combinations("1f436"))
    store.load(MetadataDocument.from_bytes(sample_bytes))
    second = (store.list_supported(), store.lookup("1f602").get_combinations("1f436"))
    assert first == second


def test_document_rejects_invalid_payloads():
    with pytest.raises(MetadataLoadError):
        MetadataDocument.from_bytes(b"not json")
    with pytest.raises(MetadataLoadError):
        MetadataDocument.from_bytes(json.dumps([1, 2, 3]).encode())
    with pytest.raises(MetadataLoadError):
        MetadataDocument.from_dict({"knownSupportedEmoji": "1f600", "data": {}})


def test_document_tolerates_missing_sections():
    doc = MetadataDocument.from_dict({})
    assert doc.known_supported_emoji == ()
    assert doc.entry("1f600") is None

    doc = MetadataDocument.from_dict({"data": {"1f600": {"combinations": None}}})
    assert doc.entry("1f600").get_combinations("1f602") == []


def test_document_data_is_read_only(sample_metadata):
    doc = MetadataDocument.from_dict(sample_metadata)
    with pytest.raises(TypeError):
        doc.data["1f600"] = {}


def test_select_combination_prefers_latest():
    combos = [
        Combination("https://example.com/a.png", False),
        Combination("https://example.com/b.png", True),
        Combination("https://example.com/c.png", True),
    ]
    assert select_combination(combos).g_static_url == "https://example.com/b.png"


def test_select_combination_falls_back_to_first():
    combos = [
        Combination("https://example.com/a.png", False),
        Combination("https://example.com/b.png", False),
    ]
    assert select_combination(combos).g_static_url == "https://example.com/a.png"
    assert select_combination([]) is None


def test_combination_is_hashable_and_read_only():
    combo = Combination.from_dict(
        {"gStaticUrl": "https://example.com/a.png", "isLatest": True, "alt": "a"}
    )
    same = Combination.from_dict(
        {"gStaticUrl": "https://example.com/a.png", "isLatest": True, "alt": "a"}
    )
    assert hash(combo) == hash(same)
    assert {combo, same} == {combo}
    with pytest.raises(TypeError):
        combo.extra["alt"] = "b"
    assert hash(Combination("https://example.com/b.png"))
