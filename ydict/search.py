"""
ydict/search.py

Exact and prefix lookup over the word table.

All comparisons run on the raw (undecoded) word bytes, i.e. plain byte
order. The .idx table is *not* reliably sorted that way (the dictionary
uses its own collation), so:

  - find_word() tries a binary search first and always falls back to a
    linear scan before giving up;
  - suggest() scans linearly in file order;
  - lower_bound() / find_first_with_prefix() are pure binary searches and
    can disagree with suggest() on an unsorted table. That is a property of
    the data, callers that need the robust answer use suggest().
"""

import bisect
import string
from typing import List, Optional, Sequence, Union

from ydict.codepage import LEGACY_CODEPAGE
from ydict.index_loader import WordEntry

Key = Union[str, bytes]

_TO_PREFIX = b"to "
_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def to_key(word: Key) -> Optional[bytes]:
    """Encode a lookup string the way words are stored. None if it can't be."""
    if isinstance(word, bytes):
        return word
    try:
        return word.encode(LEGACY_CODEPAGE)
    except UnicodeEncodeError:
        return None


class SearchIndex:
    def __init__(self, words: Sequence[WordEntry]):
        self.words = words
        self._keys: List[bytes] = [e.raw for e in words]

    def __len__(self):
        return len(self._keys)

    def lower_bound(self, key: Key) -> int:
        """First position whose word is >= key, assuming a sorted table. May equal len()."""
        k = to_key(key)
        if k is None:
            return len(self._keys)
        return bisect.bisect_left(self._keys, k)

    def find_word(self, word: Key) -> int:
        k = to_key(word)
        if k:
            # fast path, only valid if the table happens to be byte-sorted
            pos = bisect.bisect_left(self._keys, k)
            if pos < len(self._keys) and self._keys[pos] == k:
                return pos

            # collation differs from byte order: linear scan is the real answer
            for i, w in enumerate(self._keys):
                if w == k:
                    return i

        # 0x7F and undefined code page slots don't survive decode/encode,
        # so a decoded spelling may only match the decoded word
        if isinstance(word, str) and word:
            for i, e in enumerate(self.words):
                if e.word == word:
                    return i
        return -1

    def find_first_with_prefix(self, prefix: Key) -> int:
        k = to_key(prefix)
        if not k:
            return -1
        pos = bisect.bisect_left(self._keys, k)
        if pos >= len(self._keys):
            return -1
        return pos if self._keys[pos].startswith(k) else -1

    def suggest(self, prefix: Key, limit: int = 15) -> List[int]:
        """
        Indices of words starting with `prefix` (ASCII case-insensitive), in
        file order, at most `limit`. A leading "to " is dropped first since
        verbs are indexed without the infinitive marker.

        A word matches on its raw bytes or, for str prefixes, on its decoded
        spelling.
        """
        out: List[int] = []
        if not prefix or limit <= 0:
            return out

        # bytes.lower() only folds ASCII letters
        k = to_key(prefix)
        if k is not None:
            k = k.lower()
            if k.startswith(_TO_PREFIX):
                k = k[len(_TO_PREFIX):]

        text = None
        if isinstance(prefix, str):
            text = prefix.translate(_ASCII_LOWER)
            if text.startswith("to "):
                text = text[3:]

        if not k and not text:
            return out

        n = len(k) if k else 0
        for i, (w, e) in enumerate(zip(self._keys, self.words)):
            if (k and w[:n].lower() == k) or \
               (text and e.word.translate(_ASCII_LOWER).startswith(text)):
                out.append(i)
                if len(out) >= limit:
                    break
        return out
