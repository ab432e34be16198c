# tests/conftest.py
import pytest

from ydict.dictionary import Config, Dictionary
from idxfiles import write_dat, write_idx


@pytest.fixture
def make_dictionary(tmp_path):
    """
    Build a dictionary from {word_bytes: markup_bytes} (insertion order = file
    order) and return an initialized Dictionary.
    """
    def _make(entries, dump=False):
        words = list(entries.keys())
        offsets = write_dat(tmp_path / "dict.dat", [entries[w] for w in words])
        write_idx(tmp_path / "dict.idx", list(zip(words, offsets)))
        cfg = Config(
            idx_path=str(tmp_path / "dict.idx"),
            dat_path=str(tmp_path / "dict.dat"),
            idx_dump_path=str(tmp_path / "dump.txt") if dump else "",
        )
        d = Dictionary()
        assert d.init(cfg)
        return d
    return _make
