"""
ydict/codepage.py

Byte -> text decoding for dictionary data.

Two fixed lookup tables:
  - LEGACY_TABLE (256 slots): ASCII below 0x80 (0x7F shown as "~"),
    Windows-1250 above. Slots the code page leaves undefined read as "?".
  - PHONETIC_TABLE (32 slots, bytes 0x80..0x9F): glyph slots of the
    phonetic font (\\f1). Slots we have no mapping for read as "?" so a
    missing symbol stays visible instead of silently vanishing.
"""

LEGACY_CODEPAGE = "cp1250"

PHONETIC_FIRST = 0x80
PHONETIC_LAST = 0x9F

PHONETIC_TABLE = (
    "?", "?", "ɔ", "ʒ", "?", "ʃ", "ɛ", "ʌ",
    "ə", "θ", "ɪ", "ɑ", "?", "ː", "ˈ", "?",
    "ŋ", "?", "?", "?", "?", "?", "?", "ð",
    "æ", "?", "?", "?", "?", "?", "?", "?",
)


def _legacy_slot(b: int) -> str:
    if b == 0x7F:
        return "~"
    if b < 0x80:
        return chr(b)
    try:
        return bytes([b]).decode(LEGACY_CODEPAGE)
    except UnicodeDecodeError:
        return "?"


LEGACY_TABLE = tuple(_legacy_slot(b) for b in range(256))


def decode_byte(b: int, phonetic: bool = False) -> str:
    """Decode one byte; `phonetic` selects the phonetic glyph table for 0x80..0x9F."""
    if phonetic and PHONETIC_FIRST <= b <= PHONETIC_LAST:
        return PHONETIC_TABLE[b - PHONETIC_FIRST]
    return LEGACY_TABLE[b]


def decode_bytes(data: bytes, phonetic: bool = False) -> str:
    return "".join(decode_byte(b, phonetic) for b in data)


def decode_codepoint(n: int) -> str:
    """
    Decode an RTF \\uN parameter. RTF writes code points above 32767 as
    negative signed 16-bit values.
    """
    if n < 0:
        n += 0x10000
    if n < 0 or n > 0x10FFFF or 0xD800 <= n <= 0xDFFF:
        return "?"
    return chr(n)
