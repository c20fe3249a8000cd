import json

import pytest
from multidict import CIMultiDict

SAMPLE_METADATA = {
    "knownSupportedEmoji": ["1f602", "1f436", "1f600", "2764-fe0f"],
    "data": {
        "1f602": {
            "alt": "face_with_tears_of_joy",
            "combinations": {
                "1f436": [
                    {
                        "gStaticUrl": "https://www.gstatic.com/android/keyboard/emojikitchen/20201001/u1f602/u1f602_u1f436.png",
                        "alt": "joy-dog",
                        "isLatest": False,
                        "date": "20201001",
                    },
                    {
                        "gStaticUrl": "https://www.gstatic.com/android/keyboard/emojikitchen/20230301/u1f602/u1f602_u1f436.png",
                        "alt": "joy-dog",
                        "isLatest": True,
                        "date": "20230301",
                    },
                ],
                "1f600": [
                    {
                        "gStaticUrl": "https://www.gstatic.com/android/keyboard/emojikitchen/20201001/u1f600/u1f600_u1f602.png",
                        "isLatest": False,
                    },
                    {
                        "gStaticUrl": "https://www.gstatic.com/android/keyboard/emojikitchen/20211115/u1f600/u1f600_u1f602.png",
                        "isLatest": False,
                    },
                ],
                "2764-fe0f": [],
            },
        },
        "1f436": {
            "combinations": {
                "1f602": [
                    {
                        "gStaticUrl": "https://www.gstatic.com/android/keyboard/emojikitchen/20230301/u1f602/u1f602_u1f436.png",
                        "isLatest": True,
                    }
                ]
            }
        },
    },
}


class FakeResponse:
    def __init__(self, status=200, body=b"", headers=None, reason="OK"):
        self.status = status
        self.reason = reason
        self.headers = CIMultiDict(headers or {})
        self._body = body

    async def read(self):
        return self._body

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        return False


class FakeSession:
    """
    aiohttp.ClientSession の代わり
    responses には FakeResponse か、投げたい例外を順番に入れる
    """

    def __init__(self, *responses):
        self.responses = list(responses)
        self.requests = []

    def get(self, url, headers=None, timeout=None):
        self.requests.append({"url": url, "headers": dict(headers or {}), "timeout": timeout})
        item = self.responses.pop(0)
        if isinstance(item, BaseException):
            raise item
        return item


class ConditionalServer(FakeSession):
    """ETag を見て 304 を返すサーバー"""

    def __init__(self, body, etag='"v1"', last_modified="Wed, 01 Mar 2023 00:00:00 GMT"):
        super().__init__()
        self.body = body
        self.etag = etag
        self.last_modified = last_modified

    def get(self, url, headers=None, timeout=None):
        headers = dict(headers or {})
        self.requests.append({"url": url, "headers": headers, "timeout": timeout})
        if headers.get("If-None-Match") == self.etag:
            return FakeResponse(304, reason="Not Modified")
        return FakeResponse(
            200,
            self.body,
            {"ETag": self.etag, "Last-Modified": self.last_modified},
        )


@pytest.fixture
def sample_metadata():
    return json.loads(json.dumps(SAMPLE_METADATA))


@pytest.fixture
def sample_bytes():
    return json.dumps(SAMPLE_METADATA).encode("utf-8")
