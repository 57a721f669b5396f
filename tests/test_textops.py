import pytest

from algonotes.textops import (
    concat,
    copy_string,
    reverse_chars,
    reverse_string,
    reverse_words,
    string_length,
)

SAMPLE = "time command in Linux is used to execute a command"


def test_reverse_string_round_trip():
    assert reverse_string(reverse_string(SAMPLE)) == SAMPLE


def test_reverse_string_first_and_last():
    result = reverse_string(SAMPLE)
    assert result[0] == SAMPLE[-1]
    assert result[-1] == SAMPLE[0]
    assert len(result) == len(SAMPLE)


def test_reverse_string_empty():
    assert reverse_string("") == ""


def test_reverse_chars_in_place():
    chars = list(SAMPLE)
    result = reverse_chars(chars)
    assert result is chars
    assert "".join(chars) == reverse_string(SAMPLE)


@pytest.mark.parametrize("text", ["", "a", "ab", "abc", "abcd"])
def test_reverse_chars_small(text):
    assert "".join(reverse_chars(list(text))) == text[::-1]


def test_reverse_words_example():
    assert reverse_words("The sky is blue") == "blue is sky The"


def test_reverse_words_round_trip():
    text = "  leading\tand trailing\n spaces "
    assert reverse_words(reverse_words(text)) == text


def test_reverse_words_keeps_characters():
    text = "one two  three\tfour"
    assert sorted(reverse_words(text)) == sorted(text)
    assert reverse_words(text).split() == list(reversed(text.split()))


def test_reverse_words_single_word():
    assert reverse_words("Sample") == "Sample"


def test_string_length_plain():
    assert string_length("Sample string") == len("Sample string")


def test_string_length_stops_at_nul():
    assert string_length("abc\0def") == string_length("abc")


def test_copy_string_longer_source():
    assert copy_string("ab", "src str") == "src str"


def test_copy_string_rejects_none():
    with pytest.raises(ValueError):
        copy_string(None, "src str")
    with pytest.raises(ValueError):
        copy_string("dest", None)


def test_concat_example():
    assert concat("dest", "src str") == "destsrc str"


def test_concat_ignores_after_terminator():
    assert concat("dest\0garbage", "src str") == concat("dest", "src str")


def test_concat_length_adds_up():
    result = concat("dest", "src str")
    assert string_length(result) == string_length("dest") + string_length("src str")


def test_concat_rejects_none():
    with pytest.raises(ValueError):
        concat("dest", None)