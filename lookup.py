"""
lookup.py

Command-line lookup / smoke test for a dictionary pair (.idx + .dat).

Without --word/--index it lists the first entries and previews one
definition (raw markup and rendered text), which is a quick way to check a
new data set.

Run examples:
  python lookup.py
  python lookup.py --word abdicate
  python lookup.py --index 24 --mode raw
  python lookup.py --word "to run" --dump-idx data/idx_dump.txt
"""

import argparse
import sys

from ydict.dictionary import Config, Dictionary
from ydict.paths import DAT_PATH, IDX_DUMP_PATH, IDX_PATH, SUGGEST_LIMIT
from ydict.query import clean_query


def show_entry(d, index, mode):
    if mode == "raw":
        data = d.read_raw_markup(index)
        if not data:
            return False
        sys.stdout.buffer.write(data + b"\n")
        sys.stdout.flush()
        return True
    text = d.render_plain(index) if mode == "plain" else d.render(index)
    if not text:
        return False
    print(text)
    return True


def smoke(d, first, probe, preview):
    for i in range(min(first, d.word_count())):
        e = d.word_at(i)
        print(f"  [{i}] datOffset={e.dat_offset} word=\"{e.word}\"")

    data = d.read_raw_markup(probe)
    print(f"\nread_raw_markup({probe}) => {len(data)} bytes")
    if not data:
        print("Markup read failed.")
        return 1
    print("Markup preview:")
    print(data[:preview].decode("latin-1"))

    text = d.render(probe)
    print(f"\nrender({probe}) => {len(text)} chars")
    print(text[:2 * preview])
    return 0


def main(args):
    d = Dictionary()
    ok = d.init(Config(args.idx, args.dat, args.dump_idx))
    print(f"init() => {'OK' if ok else 'FAIL'}")
    print(d.version())
    if not ok:
        return 1

    status = d.idx_dump_status
    if status.requested:
        print(f"idx dump => {status.path} ({'OK' if status.ok else 'FAIL'})")

    if args.index is not None:
        if d.word_at(args.index) is None:
            print(f"No entry #{args.index} (dictionary has {d.word_count()} words)")
            return 1
        return 0 if show_entry(d, args.index, args.mode) else 1

    if args.word:
        word = clean_query(args.word)
        index = d.find_word(word)
        if index < 0:
            print(f"Not found: {word}")
            suggestions = d.suggest(word, args.limit)
            if suggestions:
                print("Did you mean:")
                for i in suggestions:
                    print(f"  {d.word_at(i).word}")
            return 1
        return 0 if show_entry(d, index, args.mode) else 1

    return smoke(d, args.first, args.probe, args.preview)


if __name__ == "__main__":
    ap = argparse.ArgumentParser()
    ap.add_argument("--idx", default=IDX_PATH, help="path to the .idx word table")
    ap.add_argument("--dat", default=DAT_PATH, help="path to the .dat definitions file")
    ap.add_argument("--dump-idx", default=IDX_DUMP_PATH, help="write the loaded word table to this file")
    ap.add_argument("--word", type=str, default=None, help="word to look up")
    ap.add_argument("--index", type=int, default=None, help="entry number to show")
    ap.add_argument("--mode", default="pretty", choices=["pretty", "plain", "raw"], help="output format")
    ap.add_argument("--limit", type=int, default=SUGGEST_LIMIT, help="max suggestions on a miss")
    ap.add_argument("--first", type=int, default=25, help="smoke run: how many words to list")
    ap.add_argument("--probe", type=int, default=24, help="smoke run: entry to preview")
    ap.add_argument("--preview", type=int, default=200, help="smoke run: preview length")
    args = ap.parse_args()
    sys.exit(main(args))
