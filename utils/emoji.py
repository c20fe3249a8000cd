"""
絵文字処理
絵文字とコードポイント文字列の相互変換
"""

HIGH_SURROGATE = range(0xD800, 0xDC00)
LOW_SURROGATE = range(0xDC00, 0xE000)


def _iter_scalars(s: str):
    """
    文字列をUnicodeスカラー値単位で走査する
    正しく対になったサロゲート(surrogatepassで復号した文字列など)は1つにまとめる

    Args:
        s (str): 入力文字列

    Yields:
        int: スカラー値
    """
    i = 0
    length = len(s)
    while i < length:
        code = ord(s[i])
        if code in HIGH_SURROGATE and i + 1 < length:
            low = ord(s[i + 1])
            if low in LOW_SURROGATE:
                yield 0x10000 + ((code - 0xD800) << 10) + (low - 0xDC00)
                i += 2
                continue
        yield code
        i += 1


def split_emoji_input(text: str) -> list[str]:
    """
    入力文字列を1スカラーずつの文字リストに分割する

    Args:
        text (str): 入力文字列

    Returns:
        list[str]: 文字のリスト
    """
    return [chr(code) for code in _iter_scalars(text or "")]


def get_emoji_codepoint(emoji: str) -> str:
    """
    絵文字をコードポイント文字列に変換する
    複数のスカラーを含む場合はハイフンで連結する

    Args:
        emoji (str): 絵文字（例: "😀"）

    Returns:
        str: 小文字16進のコードポイント文字列（例: "1f600"）
    """
    return "-".join(format(code, "x") for code in _iter_scalars(emoji or ""))


def to_printable_emoji(emoji_codepoint: str) -> str:
    """
    コードポイント文字列を絵文字に戻す

    Args:
        emoji_codepoint (str): コードポイント文字列（例: "1f469-200d-1f52c"）

    Returns:
        str: 絵文字文字列
    """
    return "".join(
        chr(int(part, 16)) for part in (emoji_codepoint or "").split("-") if part
    )
