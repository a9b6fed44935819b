"""Key symbols, modifier masks and small text helpers."""

from __future__ import annotations

import enum

MAX_UTF8_LEN = 6
MAX_PHRASE_LEN = 16


class Modifier(enum.IntFlag):
    """Keyboard modifier state bits."""

    NONE = 0
    SHIFT = 1 << 0
    LOCK = 1 << 1
    CONTROL = 1 << 2
    MOD1 = 1 << 3
    MOD2 = 1 << 4
    MOD3 = 1 << 5
    MOD4 = 1 << 6
    MOD5 = 1 << 7
    SUPER = 1 << 26
    HYPER = 1 << 27
    META = 1 << 28
    RELEASE = 1 << 30


class Key(enum.IntEnum):
    """Key symbols handled by the editors."""

    SPACE = 0x020
    COMMA = 0x02C
    MINUS = 0x02D
    PERIOD = 0x02E
    EQUAL = 0x03D
    BACKSPACE = 0xFF08
    RETURN = 0xFF0D
    ESCAPE = 0xFF1B
    UP = 0xFF52
    DOWN = 0xFF54
    PAGE_UP = 0xFF55
    PAGE_DOWN = 0xFF56
    KP_SPACE = 0xFF80
    KP_UP = 0xFF97
    KP_DOWN = 0xFF99
    KP_PAGE_UP = 0xFF9A
    KP_PAGE_DOWN = 0xFF9B
    KP_DELETE = 0xFF9F
    DELETE = 0xFFFF


# Ctrl, Alt, Super, Hyper, Meta
CMSHM_MASK = Modifier.CONTROL | Modifier.MOD1 | Modifier.SUPER | Modifier.HYPER | Modifier.META
# Shift, Ctrl, Alt, Super, Hyper, Meta
SCMSHM_MASK = CMSHM_MASK | Modifier.SHIFT


def cmshm_filter(modifiers: int) -> Modifier:
    """Keep only the Ctrl, Alt, Super, Hyper and Meta bits."""
    return Modifier(int(modifiers) & CMSHM_MASK)


def scmshm_filter(modifiers: int) -> Modifier:
    """Keep only the Shift, Ctrl, Alt, Super, Hyper and Meta bits."""
    return Modifier(int(modifiers) & SCMSHM_MASK)


def cmshm_test(modifiers: int, mask: int) -> bool:
    """True when the Ctrl/Alt/Super/Hyper/Meta bits equal ``mask`` exactly."""
    return cmshm_filter(modifiers) == mask


def scmshm_test(modifiers: int, mask: int) -> bool:
    """True when the Shift/Ctrl/Alt/Super/Hyper/Meta bits equal ``mask`` exactly."""
    return scmshm_filter(modifiers) == mask


def utf8_length(text: str | bytes) -> int:
    """Number of characters in ``text``; bytes are decoded as UTF-8."""
    if isinstance(text, (bytes, bytearray)):
        text = bytes(text).decode("utf-8")
    return len(text)