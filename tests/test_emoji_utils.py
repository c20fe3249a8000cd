from utils.emoji import get_emoji_codepoint, split_emoji_input, to_printable_emoji

GRINNING = "\U0001F600"
GRINNING_SURROGATES = chr(0xD83D) + chr(0xDE00)
JOY = "\U0001F602"
DOG = "\U0001F436"
RED_HEART = "❤️"
SCIENTIST = "\U0001F469‍\U0001F52C"


def test_codepoint_of_astral_emoji_is_single_segment():
    assert get_emoji_codepoint(GRINNING) == "1f600"


def test_codepoint_collapses_surrogate_pair():
    assert len(GRINNING_SURROGATES) == 2
    assert get_emoji_codepoint(GRINNING_SURROGATES) == "1f600"
    assert get_emoji_codepoint(GRINNING_SURROGATES) == get_emoji_codepoint(GRINNING)


def test_codepoint_is_lowercase_hex():
    assert get_emoji_codepoint("❤") == "2764"
    assert get_emoji_codepoint("A") == "41"
    assert get_emoji_codepoint("\U0001F9E1") == "1f9e1"


def test_codepoint_joins_multiple_scalars():
    assert get_emoji_codepoint(RED_HEART) == "2764-fe0f"
    assert get_emoji_codepoint(SCIENTIST) == "1f469-200d-1f52c"


def test_codepoint_keeps_lone_surrogate():
    assert get_emoji_codepoint("\ud83d") == "d83d"
    assert get_emoji_codepoint("\ude00\ud83d") == "de00-d83d"


def test_codepoint_of_empty_input():
    assert get_emoji_codepoint("") == ""
    assert get_emoji_codepoint(None) == ""


def test_split_emoji_input_counts_scalars():
    assert split_emoji_input(JOY + DOG) == [JOY, DOG]
    assert split_emoji_input("😂🐶") == [JOY, DOG]
    assert split_emoji_input(RED_HEART) == ["❤", "️"]
    assert split_emoji_input("") == []


def test_to_printable_emoji():
    assert to_printable_emoji("1f600") == GRINNING
    assert to_printable_emoji("1f469-200d-1f52c") == SCIENTIST
    assert to_printable_emoji(get_emoji_codepoint(RED_HEART)) == RED_HEART
