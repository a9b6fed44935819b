import string

import pytest

from pinyintable.punct import punct_candidates, punct_keys


def test_period_candidates():
    assert punct_candidates(".") == ("。", "·", "‧", "﹒", "．")


def test_empty_key_candidates():
    assert punct_candidates("") == ("·", "，", "。", "「", "」", "、", "：", "；", "？", "！")


def test_backslash_and_quote():
    assert punct_candidates("\\") == ("＼", "↖", "↘", "﹨")
    assert punct_candidates('"') == ("“", "”", "＂")


@pytest.mark.parametrize("ch", list(string.digits + string.ascii_letters))
def test_alphanumerics_map_to_fullwidth_then_self(ch):
    fullwidth, plain = punct_candidates(ch)
    assert plain == ch
    assert fullwidth.isalnum()
    assert fullwidth != ch


def test_digit_zero():
    assert punct_candidates("0") == ("０", "0")


def test_keys_cover_printable_ascii():
    keys = punct_keys()
    assert len(keys) == 95
    assert keys[0] == ""
    expected = {chr(c) for c in range(0x21, 0x7F)}
    assert set(keys[1:]) == expected


def test_keys_sorted():
    keys = punct_keys()
    assert list(keys) == sorted(keys)


def test_every_key_has_candidates():
    for key in punct_keys():
        assert len(punct_candidates(key)) >= 2


def test_unknown_key_raises():
    with pytest.raises(KeyError):
        punct_candidates(" ")
    with pytest.raises(KeyError):
        punct_candidates("ab")