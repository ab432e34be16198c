"""
ydict/index_loader.py

Reads the dictionary's .idx file into an ordered word table.

Layout (little-endian):
    offset 0   uint32  magic (IDX_MAGIC)
    offset 8   uint16  number of entries
    offset 16  uint32  offset of the entry table
    table:     [4 reserved bytes][uint32 dat offset][word bytes][0x00]  x count

Entries are kept in file order. The order is NOT guaranteed to be sorted,
see SearchIndex for how lookups cope with that.
"""

import io
import struct
from typing import List, NamedTuple

from ydict.codepage import decode_bytes

IDX_MAGIC = 0x8D4E11D5

COUNT_OFFSET = 8
TABLE_OFFSET_OFFSET = 16
RESERVED_BYTES = 4

_U16 = struct.Struct("<H")
_U32 = struct.Struct("<I")


class WordEntry(NamedTuple):
    word: str          # decoded through the legacy code page
    dat_offset: int    # byte offset of the definition in the .dat file
    raw: bytes = b""   # undecoded word bytes, used for ordering / prefix checks


class IdxDumpStatus(NamedTuple):
    requested: bool = False
    ok: bool = False       # meaningful only if requested
    path: str = ""         # meaningful only if requested


def _read_exact(f: io.BufferedReader, n: int) -> bytes:
    b = f.read(n)
    if len(b) != n:
        raise EOFError(f"Truncated index: wanted {n} bytes, got {len(b)}")
    return b


def _read_u16(f: io.BufferedReader) -> int:
    return _U16.unpack(_read_exact(f, 2))[0]


def _read_u32(f: io.BufferedReader) -> int:
    return _U32.unpack(_read_exact(f, 4))[0]


def _read_cstr(f: io.BufferedReader) -> bytes:
    buf = bytearray()
    while True:
        c = f.read(1)
        if not c:
            raise EOFError("Truncated index: word without NUL terminator")
        if c == b"\x00":
            return bytes(buf)
        buf += c


def parse_word_table(f: io.BufferedReader) -> List[WordEntry]:
    """
    Parse an open binary .idx stream.

    Raises:
        ValueError: magic mismatch
        EOFError:   the header or the table ends early
    """
    magic = _read_u32(f)
    if magic != IDX_MAGIC:
        raise ValueError(f"bad magic 0x{magic:08x}, expected 0x{IDX_MAGIC:08x}")

    f.seek(COUNT_OFFSET)
    count = _read_u16(f)

    f.seek(TABLE_OFFSET_OFFSET)
    table_offset = _read_u32(f)
    f.seek(table_offset)

    words: List[WordEntry] = []
    for _ in range(count):
        _read_exact(f, RESERVED_BYTES)
        dat_offset = _read_u32(f)
        raw = _read_cstr(f)
        words.append(WordEntry(decode_bytes(raw), dat_offset, raw))
    return words


def read_word_table(path: str) -> List[WordEntry]:
    with open(path, "rb") as f:
        words = parse_word_table(f)
    print(f"[IndexLoader] Index loaded: {len(words)} words from {path}")
    return words


def dump_word_table(path: str, words: List[WordEntry]) -> bool:
    """
    Write the table as `index<TAB>dat_offset<TAB>word` lines, handy for
    grepping/diffing collation issues. Returns False if the file can't be written.
    """
    try:
        with open(path, "w", encoding="utf-8", newline="\n") as f:
            for i, e in enumerate(words):
                f.write(f"{i}\t{e.dat_offset}\t{e.word}\n")
    except OSError as e:
        print(f"[IndexLoader] Dump failed: {path} ({e})")
        return False
    print(f"[IndexLoader] Wrote dump: {path}")
    return True
