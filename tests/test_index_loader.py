# tests/test_index_loader.py
import struct
import pytest

from ydict.index_loader import (
    IDX_MAGIC, WordEntry, dump_word_table, read_word_table,
)
from idxfiles import write_idx


def test_reads_entries_in_file_order(tmp_path):
    entries = [(b"zebra", 100), (b"apple", 4), (b"\xbfaba", 7)]
    path = write_idx(tmp_path / "d.idx", entries)

    words = read_word_table(path)
    assert len(words) == 3
    assert [w.word for w in words] == ["zebra", "apple", "żaba"]
    assert [w.dat_offset for w in words] == [100, 4, 7]
    assert words[2].raw == b"\xbfaba"
    assert isinstance(words[0], WordEntry)


def test_empty_dictionary(tmp_path):
    path = write_idx(tmp_path / "d.idx", [])
    assert read_word_table(path) == []


def test_table_offset_is_honoured(tmp_path):
    path = write_idx(tmp_path / "d.idx", [(b"cat", 9)], table_offset=64)
    assert read_word_table(path) == [WordEntry("cat", 9, b"cat")]


def test_bad_magic(tmp_path):
    path = write_idx(tmp_path / "d.idx", [(b"cat", 9)], magic=0x12345678)
    with pytest.raises(ValueError):
        read_word_table(path)


def test_count_larger_than_table(tmp_path):
    path = write_idx(tmp_path / "d.idx", [(b"cat", 9)], count=2)
    with pytest.raises(EOFError):
        read_word_table(path)


def test_word_without_terminator(tmp_path):
    path = tmp_path / "d.idx"
    write_idx(path, [(b"cat", 9)])
    data = path.read_bytes()[:-1]  # drop the NUL
    path.write_bytes(data)
    with pytest.raises(EOFError):
        read_word_table(str(path))


def test_truncated_header(tmp_path):
    path = tmp_path / "d.idx"
    path.write_bytes(struct.pack("<I", IDX_MAGIC) + b"\x00" * 4)
    with pytest.raises(EOFError):
        read_word_table(str(path))


def test_dump_word_table(tmp_path):
    words = [WordEntry("cat", 10, b"cat"), WordEntry("żaba", 20, b"\xbfaba")]
    out = tmp_path / "dump.txt"
    assert dump_word_table(str(out), words)
    lines = out.read_text(encoding="utf-8").splitlines()
    assert lines == ["0\t10\tcat", "1\t20\tżaba"]


def test_dump_failure_is_reported(tmp_path):
    # a directory can't be opened for writing
    assert dump_word_table(str(tmp_path), [WordEntry("cat", 10, b"cat")]) is False
