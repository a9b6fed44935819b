"""Full-width and symbol alternatives for ASCII punctuation keys."""

from __future__ import annotations

import string

_SYMBOLS: dict[str, tuple[str, ...]] = {
    "": ("·", "，", "。", "「", "」", "、", "：", "；", "？", "！"),
    "!": ("！", "﹗", "‼", "⁉"),
    '"': ("“", "”", "＂"),
    "#": ("＃", "﹟", "♯"),
    "$": ("＄", "€", "﹩", "￠", "￡", "￥"),
    "%": ("％", "﹪", "‰", "‱", "㏙", "㏗"),
    "&": ("＆", "﹠"),
    "'": ("、", "‘", "’"),
    "(": ("（", "︵", "﹙"),
    ")": ("）", "︶", "﹚"),
    "*": ("＊", "×", "※", "╳", "﹡", "⁎", "⁑", "⁂", "⌘"),
    "+": ("＋", "±", "﹢"),
    ",": ("，", "、", "﹐", "﹑"),
    "-": ("…", "—", "－", "¯", "﹉", "￣", "﹊", "ˍ", "–", "‥"),
    ".": ("。", "·", "‧", "﹒", "．"),
    "/": ("／", "÷", "↗", "↙", "∕"),
    ":": ("：", "︰", "﹕"),
    ";": ("；", "﹔"),
    "<": ("＜", "〈", "《", "︽", "︿", "﹤"),
    "=": ("＝", "≒", "≠", "≡", "≦", "≧", "﹦"),
    ">": ("＞", "〉", "》", "︾", "﹀", "﹥"),
    "?": ("？", "﹖", "⁇", "⁈"),
    "@": ("＠", "⊕", "⊙", "㊣", "﹫", "◉", "◎"),
    "[": ("「", "［", "『", "【", "｢", "︻", "﹁", "﹃"),
    "\\": ("＼", "↖", "↘", "﹨"),
    "]": ("」", "］", "』", "】", "｣", "︼", "﹂", "﹄"),
    "^": ("︿", "〈", "《", "︽", "﹤", "＜"),
    "_": ("＿", "╴", "←", "→"),
    "`": ("‵", "′"),
    "{": ("｛", "︷", "﹛", "〔", "﹝", "︹"),
    "|": ("｜", "↑", "↓", "∣", "∥", "︱", "︳", "︴", "￤"),
    "}": ("｝", "︸", "﹜", "〕", "﹞", "︺"),
    "~": ("～", "﹋", "﹌"),
}

# Offset from an ASCII character to its full-width form.
_FULLWIDTH_OFFSET = 0xFEE0


def _build_table() -> dict[str, tuple[str, ...]]:
    table = dict(_SYMBOLS)
    for ch in string.digits + string.ascii_letters:
        table[ch] = (chr(ord(ch) + _FULLWIDTH_OFFSET), ch)
    return dict(sorted(table.items()))


_TABLE = _build_table()


def punct_candidates(key: str) -> tuple[str, ...]:
    """Alternatives offered for ``key``; raises KeyError for unknown keys."""
    try:
        return _TABLE[key]
    except KeyError:
        raise KeyError(f"no punctuation candidates for {key!r}") from None


def punct_keys() -> tuple[str, ...]:
    """All keys of the table in ascending order."""
    return tuple(_TABLE)