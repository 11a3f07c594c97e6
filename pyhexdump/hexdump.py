"""
Hexdump of a byte buffer, as text lines or straight to stdout.

    >>> hexdump(b"12345\\0\\r\\n\\t .abcdef")
    |31323334 35000d0a 09202e61 62636465| 12345.... .abcde 00000000
    |66|                                  f                00000010
                                                           00000011

Each line holds up to 16 bytes in groups of 4, the sanitized ASCII text and
the offset of its first byte. The last line gives the total length.
"""
import logging
from itertools import islice
from typing import TextIO

from .memview import ByteView
from .util import batched, sanitize_bytes

logger = logging.getLogger(__name__)

SEGMENT_LENGTH = 4
# CHUNK_LENGTH should be a multiple of SEGMENT_LENGTH
CHUNK_LENGTH = 16

NUM_SEGMENTS_PER_CHUNK = (CHUNK_LENGTH + SEGMENT_LENGTH - 1) // SEGMENT_LENGTH

HEX_FIELD_WIDTH = 2 * CHUNK_LENGTH + NUM_SEGMENTS_PER_CHUNK - 1
OFFSET_WIDTH = 8
# "|" hex "| " ascii " " offset
LINE_WIDTH = 1 + HEX_FIELD_WIDTH + 2 + CHUNK_LENGTH + 1 + OFFSET_WIDTH


def num_chunks(length: int) -> int:
    return (length + CHUNK_LENGTH - 1) // CHUNK_LENGTH


def render_chunk(index: int, chunk) -> str:
    """Format one chunk of at most CHUNK_LENGTH bytes; `index` is the chunk number within the whole input."""
    raw = bytes(chunk)
    assert len(raw) <= CHUNK_LENGTH
    hex_field = " ".join(bytes(segment).hex() for segment in batched(raw, SEGMENT_LENGTH))
    # pad missing bytes and missing segments so short chunks stay aligned
    padding = " " * (HEX_FIELD_WIDTH - len(hex_field))
    ascii_field = sanitize_bytes(raw).ljust(CHUNK_LENGTH)
    return f"|{hex_field}| {padding}{ascii_field} {index * CHUNK_LENGTH:0{OFFSET_WIDTH}x}"


def render_summary(length: int) -> str:
    return f"{' ' * (LINE_WIDTH - OFFSET_WIDTH)}{length:0{OFFSET_WIDTH}x}"


class Hexdump:
    """Lines of a hexdump: one per chunk, then the summary line.

    Lines are rendered only when pulled. They can be pulled from the front
    with next() and from the back with next_back() or reversed(), in any mix;
    every line comes out exactly once. len() is the number of lines left.
    """

    def __init__(self, data) -> None:
        self._remaining = ByteView(data)  # chunks not yet rendered from either end
        self._length = len(self._remaining)
        self._summary_done = False

    def __iter__(self) -> "Hexdump":
        return self

    def __next__(self) -> str:
        if self._remaining:
            end = min(self._remaining.abspos + CHUNK_LENGTH, self._remaining.endpos)
            chunk, self._remaining = self._remaining.split_at_absolute(end)
            return render_chunk(chunk.abspos // CHUNK_LENGTH, chunk.data)
        if not self._summary_done:
            self._summary_done = True
            return render_summary(self._length)
        raise StopIteration

    def next_back(self) -> str:
        if not self._summary_done:
            self._summary_done = True
            return render_summary(self._length)
        if self._remaining:
            start = (self._remaining.endpos - 1) // CHUNK_LENGTH * CHUNK_LENGTH
            self._remaining, chunk = self._remaining.split_at_absolute(start)
            return render_chunk(chunk.abspos // CHUNK_LENGTH, chunk.data)
        raise StopIteration

    def __reversed__(self):
        while True:
            try:
                yield self.next_back()
            except StopIteration:
                return

    @property
    def length(self) -> int:
        """Total number of input bytes"""
        return self._length

    def __len__(self) -> int:
        return num_chunks(len(self._remaining)) + (0 if self._summary_done else 1)

    def __repr__(self) -> str:
        return f"Hexdump(length={self._length}, remaining={len(self)})"


def hexdump_iter(data) -> Hexdump:
    """Creates a hexdump iterator that yields the individual lines."""
    return Hexdump(data)


def hexdump(data, file: TextIO | None = None, maxlines: int | None = None) -> None:
    """Prints a hexdump of data to file (stdout by default), optionally only the first `maxlines` lines."""
    lines = hexdump_iter(data)
    logger.debug(f"Dumping {lines.length} bytes in {len(lines)} lines")
    for line in islice(lines, maxlines):
        print(line, file=file)
