# tests/test_search.py
import pytest

from ydict.codepage import decode_bytes
from ydict.index_loader import WordEntry
from ydict.search import SearchIndex, to_key


def table(*raws):
    return [WordEntry(r.decode("cp1250"), 100 + i, r) for i, r in enumerate(raws)]


@pytest.fixture
def sorted_index():
    return SearchIndex(table(b"apple", b"apply", b"banana", b"run", b"running", b"rut"))


@pytest.fixture
def unsorted_index():
    # dictionary collation, not byte order
    return SearchIndex(table(b"zebra", b"Run", b"apple", b"\xbfaba", b"run", b"mango"))


def test_find_word_sorted(sorted_index):
    for i, e in enumerate(sorted_index.words):
        assert sorted_index.find_word(e.word) == i


def test_find_word_falls_back_to_linear_scan(unsorted_index):
    for i, e in enumerate(unsorted_index.words):
        assert unsorted_index.find_word(e.word) == i
    assert unsorted_index.find_word("żaba") == 3
    assert unsorted_index.find_word(b"\xbfaba") == 3


def test_find_word_is_exact(unsorted_index):
    assert unsorted_index.find_word("Zebra") == -1
    assert unsorted_index.find_word("zeb") == -1
    assert unsorted_index.find_word("") == -1
    assert unsorted_index.find_word("日本") == -1     # not representable in the code page


def test_find_word_does_not_strip_to(unsorted_index):
    assert unsorted_index.find_word("to run") == -1


def test_suggest_strips_to(unsorted_index):
    assert unsorted_index.suggest("to run", 10) == [1, 4]
    assert unsorted_index.suggest("TO RU", 10) == [1, 4]


def test_suggest_only_to_prefix_is_empty(unsorted_index):
    assert unsorted_index.suggest("to ", 10) == []


def test_suggest_case_insensitive_file_order(unsorted_index):
    assert unsorted_index.suggest("R", 10) == [1, 4]
    assert unsorted_index.suggest("a", 10) == [2]


def test_suggest_limit(sorted_index):
    assert sorted_index.suggest("ru", 2) == [3, 4]
    assert sorted_index.suggest("ru", 0) == []
    assert sorted_index.suggest("", 5) == []


def test_suggest_non_ascii_prefix(unsorted_index):
    assert unsorted_index.suggest("ża", 5) == [3]


def test_lower_bound(sorted_index):
    assert sorted_index.lower_bound("apple") == 0
    assert sorted_index.lower_bound("b") == 2
    assert sorted_index.lower_bound("zzz") == len(sorted_index)


def test_find_first_with_prefix(sorted_index):
    assert sorted_index.find_first_with_prefix("ap") == 0
    assert sorted_index.find_first_with_prefix("run") == 3
    assert sorted_index.find_first_with_prefix("x") == -1
    assert sorted_index.find_first_with_prefix("") == -1


def test_binary_prefix_lookup_can_diverge_on_unsorted_tables():
    idx = SearchIndex(table(b"b", b"a", b"ab"))
    assert idx.suggest("a", 10) == [1, 2]
    assert idx.find_first_with_prefix("a") == -1


def test_to_key():
    assert to_key("ż") == b"\xbf"
    assert to_key(b"raw") == b"raw"
    assert to_key("日") is None


def test_lossy_code_page_bytes_found_by_decoded_word():
    # 0x7F decodes to "~" and 0x81 to "?", neither encodes back to the same byte
    idx = SearchIndex([WordEntry(decode_bytes(r), i, r) for i, r in enumerate([b"caf\x7f", b"x\x81y"])])
    assert [idx.find_word(e.word) for e in idx.words] == [0, 1]
    assert idx.find_word(b"x\x81y") == 1
    assert idx.suggest("caf~", 10) == [0]
    assert idx.suggest("X?", 10) == [1]
