"""
ydict/dictionary.py

Dictionary: the object front ends talk to.

Typical usage:
    d = Dictionary()
    if d.init(Config(idx_path="data/dict100.idx", dat_path="data/dict100.dat")):
        i = d.find_word("cat")
        print(d.render(i))

Nothing here raises for bad dictionary data: init() returns False, lookups
return -1 / None / [], readers return b"" / "".
"""

from typing import List, Optional

from ydict.index_loader import IdxDumpStatus, WordEntry, dump_word_table, read_word_table
from ydict.markup import render, render_plain, render_pretty
from ydict.paths import DAT_PATH, IDX_DUMP_PATH, IDX_PATH, SUGGEST_LIMIT
from ydict.search import Key, SearchIndex
from ydict.store import DefinitionStore


class Config:
    """
    File locations for one dictionary.
    idx_dump_path: optional debug dump of the word table ("" = no dump).
    """

    def __init__(self, idx_path: str = IDX_PATH, dat_path: str = DAT_PATH,
                 idx_dump_path: str = IDX_DUMP_PATH):
        self.idx_path = idx_path
        self.dat_path = dat_path
        self.idx_dump_path = idx_dump_path


class Dictionary:
    def __init__(self):
        self._reset()

    def _reset(self):
        self.initialized = False
        self.words: List[WordEntry] = []
        self.store: Optional[DefinitionStore] = None
        self.index = SearchIndex(self.words)
        self._idx_dump_status = IdxDumpStatus()

    def init(self, cfg: Config) -> bool:
        """Load the word table. On any failure the instance stays empty."""
        self._reset()

        if not cfg.idx_path or not cfg.dat_path:
            print("[Dictionary] init failed: idx_path and dat_path are required")
            return False

        try:
            # the .dat is only read lazily, but fail early if it isn't there
            with open(cfg.dat_path, "rb"):
                pass
            words = read_word_table(cfg.idx_path)
        except (OSError, EOFError, ValueError) as e:
            print(f"[Dictionary] init failed: {e}")
            return False

        if cfg.idx_dump_path:
            ok = dump_word_table(cfg.idx_dump_path, words)
            self._idx_dump_status = IdxDumpStatus(True, ok, cfg.idx_dump_path)

        self.words = words
        self.store = DefinitionStore(cfg.dat_path)
        self.index = SearchIndex(words)
        self.initialized = True
        return True

    def version(self) -> str:
        if not self.initialized:
            return "ydict - not initialized"
        return f"ydict - idx loaded ({len(self.words)} words)"

    @property
    def idx_dump_status(self) -> IdxDumpStatus:
        return self._idx_dump_status

    def word_count(self) -> int:
        return len(self.words)

    def word_at(self, index: int) -> Optional[WordEntry]:
        if index < 0 or index >= len(self.words):
            return None
        return self.words[index]

    # --- definitions ---

    def read_raw_markup(self, index: int) -> bytes:
        entry = self.word_at(index)
        if not self.initialized or entry is None:
            return b""
        return self.store.read_blob(entry.dat_offset)

    def render_plain(self, index: int) -> str:
        data = self.read_raw_markup(index)
        return render_plain(data) if data else ""

    def render_pretty(self, index: int) -> str:
        data = self.read_raw_markup(index)
        return render_pretty(data) if data else ""

    def render(self, index: int) -> str:
        """Pretty text, falling back to plain text if pretty comes out empty."""
        data = self.read_raw_markup(index)
        return render(data) if data else ""

    def read_plain_text(self, word: Key) -> str:
        i = self.find_word(word)
        if i < 0:
            return ""
        return self.render_plain(i)

    # --- lookup ---

    def find_word(self, word: Key) -> int:
        if not self.initialized:
            return -1
        return self.index.find_word(word)

    def lower_bound(self, key: Key) -> int:
        if not self.initialized:
            return -1
        return self.index.lower_bound(key)

    def find_first_with_prefix(self, prefix: Key) -> int:
        if not self.initialized:
            return -1
        return self.index.find_first_with_prefix(prefix)

    def suggest(self, prefix: Key, limit: int = SUGGEST_LIMIT) -> List[int]:
        if not self.initialized:
            return []
        return self.index.suggest(prefix, limit)
