"""
キャッシュ管理
JSONキャッシュファイルとメタデータファイルの読み書き
"""

import json
import os
import tempfile

from config import debug

FILE_MODE = 0o644


def ensure_dir(path: str) -> None:
    """ディレクトリを作成する(既存なら何もしない)"""
    os.makedirs(path, exist_ok=True)


def load_json_cache(path: str, default):
    """
    JSONキャッシュの読み込み
    ファイルが無い・壊れている・型が違う場合は default を返す

    Args:
        path (str): ファイルパス
        default: 読み込み失敗時のデフォルト値

    Returns:
        読み込んだデータ、または default
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except Exception as e:
        if debug and os.path.exists(path):
            print(f"cache読込失敗: {path}: {e}")
        return default
    if data is None:
        return default
    if default is not None and not isinstance(data, type(default)):
        return default
    return data


def write_bytes_atomic(path: str, data: bytes) -> None:
    """
    同じディレクトリの一時ファイルに書いてから置き換える
    失敗時は一時ファイルを消して OSError を投げ直す

    Args:
        path (str): 書き込み先
        data (bytes): 内容
    """
    directory = os.path.dirname(os.path.abspath(path))
    fd, tmp = tempfile.mkstemp(
        dir=directory, prefix=".tmp_", suffix=os.path.basename(path)
    )
    try:
        with open(fd, "wb") as f:
            f.write(data)
            f.flush()
            os.fsync(f.fileno())
        os.chmod(tmp, FILE_MODE)
        os.replace(tmp, path)
    except BaseException:
        try:
            os.unlink(tmp)
        except FileNotFoundError:
            pass
        raise


def save_json_cache(path: str, data) -> None:
    """
    JSONキャッシュの保存

    Args:
        path (str): ファイルパス
        data: 保存するデータ
    """
    write_bytes_atomic(path, json.dumps(data, ensure_ascii=False).encode("utf-8"))
