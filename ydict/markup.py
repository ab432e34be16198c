"""
ydict/markup.py

Renders a definition's markup stream (a small RTF subset) to text.

The stream is tokenized once, left to right, and fed through a stack of
RenderFrames (one per {...} group). Two writers consume the same events:

  - PlainWriter:  structural transliteration. \\par -> "\\n", \\tab -> "\\t",
                  no trimming, no decoration. Hidden blocks are kept, because
                  plain output is the last-resort fallback for blobs that
                  render to nothing in pretty mode.
  - PrettyWriter: line-buffered layout. Lines are trimmed and committed at
                  paragraph breaks, \\saN indents by two spaces, \\cf2 lines get
                  a "- " bullet (except part-of-speech headers), hidden (\\qc)
                  blocks are dropped and runs of blank lines collapse to one.

Supported control words:
    par, line   paragraph break
    pard        reset style bucket and margin (no break)
    tab         horizontal tab
    cfN         style bucket
    saN         margin on/off
    fN          font; f1 is the phonetic font
    qc          hidden block (until the enclosing group closes)
    uN          unicode escape; one fallback byte after it is skipped
Anything else is skipped. Malformed input never raises.
"""

import re
from typing import Iterator, List, Optional, Tuple

from ydict.codepage import decode_byte, decode_codepoint

# token kinds
GROUP_OPEN = "group_open"
GROUP_CLOSE = "group_close"
TEXT = "text"          # value: int byte
HEX = "hex"            # value: int byte from \'hh
CONTROL = "control"    # value: (word, param or None)
NEWLINE = "newline"    # raw LF in the stream

HEADING_STYLE = 2

POS_HEADINGS = frozenset({
    "n", "adj", "adv", "vt", "vi", "prep", "pron",
    "conj", "num", "det", "modal aux vb",
})

_HEX_RE = re.compile(rb"\\'([0-9A-Fa-f]{2})")
_CONTROL_RE = re.compile(rb"\\([A-Za-z]*)(-?[0-9]{0,10}) ?")  # longer numbers spill into text
_ESCAPED = frozenset(b"\\{}")
_LINE_TRIM = " \t\r"


def iter_tokens(data: bytes) -> Iterator[Tuple[str, object]]:
    """Yield (kind, value) tokens for a markup byte stream."""
    n = len(data)
    i = 0
    while i < n:
        ch = data[i]

        if ch == 0x7B:  # {
            yield GROUP_OPEN, None
            i += 1
            continue
        if ch == 0x7D:  # }
            yield GROUP_CLOSE, None
            i += 1
            continue

        if ch != 0x5C:  # not a backslash
            if ch == 0x0A:
                yield NEWLINE, None
            elif ch != 0x0D:
                yield TEXT, ch
            i += 1
            continue

        # control sequence; a lone trailing backslash ends the stream
        if i + 1 >= n:
            break

        nxt = data[i + 1]
        if nxt in _ESCAPED:
            yield TEXT, nxt
            i += 2
            continue

        m = _HEX_RE.match(data, i)
        if m:
            yield HEX, int(m.group(1), 16)
            i = m.end()
            continue

        m = _CONTROL_RE.match(data, i)
        word = m.group(1).decode("ascii")
        digits = m.group(2)
        param: Optional[int] = None
        if digits:
            param = 0 if digits == b"-" else int(digits)
        i = m.end()

        yield CONTROL, (word, param)

        if word == "u" and param is not None and i < n:
            i += 1  # skip the ANSI fallback character


class RenderFrame:
    """Formatting state of one group level."""

    __slots__ = ("style_bucket", "phonetic", "hidden", "margin")

    def __init__(self, style_bucket=0, phonetic=False, hidden=False, margin=False):
        self.style_bucket = style_bucket
        self.phonetic = phonetic
        self.hidden = hidden
        self.margin = margin

    def copy(self) -> "RenderFrame":
        return RenderFrame(self.style_bucket, self.phonetic, self.hidden, self.margin)

    def __eq__(self, other):
        if not isinstance(other, RenderFrame):
            return NotImplemented
        return (self.style_bucket, self.phonetic, self.hidden, self.margin) == \
               (other.style_bucket, other.phonetic, other.hidden, other.margin)

    def __repr__(self):
        return (f"RenderFrame(style_bucket={self.style_bucket}, phonetic={self.phonetic}, "
                f"hidden={self.hidden}, margin={self.margin})")


class RenderStack:
    """
    Group stack. Never empty: the root frame holds the defaults and a '}'
    with nothing open is ignored.
    """

    def __init__(self):
        self._frames: List[RenderFrame] = [RenderFrame()]

    @property
    def top(self) -> RenderFrame:
        return self._frames[-1]

    @property
    def depth(self) -> int:
        return len(self._frames)

    def push(self):
        self._frames.append(self._frames[-1].copy())

    def pop(self):
        if len(self._frames) > 1:
            self._frames.pop()


class PlainWriter:
    def __init__(self):
        self._out: List[str] = []

    def text(self, s: str, frame: RenderFrame):
        self._out.append(s)

    def paragraph(self, frame: RenderFrame):
        self._out.append("\n")

    def finish(self) -> str:
        return "".join(self._out)


class PrettyWriter:
    """
    Assembles committed lines into the final text.

    A line remembers the frame that was active when its first character was
    placed; margin and bullet decoration come from that frame.
    """

    def __init__(self):
        self._out: List[str] = []
        self._nl_run = 0
        self._line: List[str] = []
        self._line_frame: Optional[RenderFrame] = None

    def text(self, s: str, frame: RenderFrame):
        if frame.hidden:
            return
        # indentation comes from \saN, not from source whitespace
        if not self._line and s in _LINE_TRIM:
            return
        if self._line_frame is None:
            self._line_frame = frame.copy()
        self._line.append(s)

    def paragraph(self, frame: RenderFrame):
        if frame.hidden:
            return
        self._commit()
        self._newline()

    def _newline(self):
        if not self._out:
            return
        if self._nl_run >= 2:  # at most one empty line
            return
        self._out.append("\n")
        self._nl_run += 1

    def _commit(self):
        text = "".join(self._line).strip(_LINE_TRIM)
        start = self._line_frame
        self._line = []
        self._line_frame = None
        if not text:
            return

        self._nl_run = 0
        if start.margin:
            self._out.append("  ")
        if start.style_bucket == HEADING_STYLE and not is_pos_heading(text):
            self._out.append("- ")
        self._out.append(text)

    def finish(self) -> str:
        self._commit()
        return "".join(self._out)


def is_pos_heading(text: str) -> bool:
    return text.strip(_LINE_TRIM) in POS_HEADINGS


def _render(data: bytes, writer):
    stack = RenderStack()
    for kind, value in iter_tokens(data):
        frame = stack.top

        if kind == GROUP_OPEN:
            stack.push()
        elif kind == GROUP_CLOSE:
            stack.pop()
        elif kind == TEXT or kind == HEX:
            writer.text(decode_byte(value, frame.phonetic), frame)
        elif kind == NEWLINE:
            writer.paragraph(frame)
        elif kind == CONTROL:
            word, param = value
            if word == "par" or word == "line":
                writer.paragraph(frame)
            elif word == "pard":
                # paragraph defaults; RTF often writes \pard\par, so no break here
                frame.style_bucket = 0
                frame.margin = False
            elif word == "tab":
                writer.text("\t", frame)
            elif word == "qc":
                frame.hidden = True
            elif param is None:
                continue  # the remaining words all need a parameter
            elif word == "cf":
                frame.style_bucket = param
            elif word == "sa":
                frame.margin = param != 0
            elif word == "f":
                frame.phonetic = param == 1
            elif word == "u":
                writer.text(decode_codepoint(param), frame)
    return writer.finish()


def render_plain(data: bytes) -> str:
    return _render(data, PlainWriter())


def render_pretty(data: bytes) -> str:
    return _render(data, PrettyWriter())


def render(data: bytes) -> str:
    """Pretty text, or plain text when the pretty rendering comes out empty."""
    text = render_pretty(data)
    if text:
        return text
    return render_plain(data)
