"""Split message bodies into sink-sized pieces.

Purpose
-------
Platform log sinks truncate entries beyond roughly 4 KiB, so bodies are cut
into byte slices of at most :data:`CHUNK_SIZE` before being handed over line
by line.

Contents
    - ``CHUNK_SIZE``: maximum number of UTF-8 bytes per chunk.
    - ``chunk_bytes``: lazy, boundary-unaware byte slicing.
    - ``decode_chunks``: turns the slices back into text without splitting
      characters.
    - ``split_lines``: one entry per line, empty lines included.

System Role
-----------
Used by :class:`lib_pretty_log.application.printer.Printer` for every message
body; header lines bypass chunking.
"""

from __future__ import annotations

import codecs
import re
from typing import Final, Iterable, Iterator

CHUNK_SIZE: Final[int] = 4000
ENCODING: Final[str] = "utf-8"

_LINE_SEPARATOR = re.compile(r"\r\n|\n")


def chunk_bytes(payload: bytes, max_size: int = CHUNK_SIZE) -> Iterator[bytes]:
    """Yield consecutive slices of *payload* no longer than *max_size*.

    Why
    ----
    A payload of ``L`` bytes always yields ``ceil(L / max_size)`` slices (one
    slice for an empty payload); all but the last are exactly *max_size*
    bytes and the slices concatenate back to *payload*.

    Raises
    ------
    ValueError
        When *max_size* is not positive.

    Examples
    --------
    >>> list(chunk_bytes(b"abcdefg", 3))
    [b'abc', b'def', b'g']
    >>> list(chunk_bytes(b"", 3))
    [b'']
    """

    if max_size <= 0:
        raise ValueError(f"max_size must be positive, got {max_size}")
    return _iter_chunks(payload, max_size)


def _iter_chunks(payload: bytes, max_size: int) -> Iterator[bytes]:
    length = len(payload)
    if length <= max_size:
        yield payload
        return
    for start in range(0, length, max_size):
        yield payload[start : start + max_size]


def decode_chunks(chunks: Iterable[bytes]) -> Iterator[str]:
    """Decode consecutive chunks of one payload back into text.

    Why
    ----
    :func:`chunk_bytes` cuts blindly, so a multi-byte character may straddle
    two chunks. An incremental decoder carries the partial bytes over to the
    next chunk instead of corrupting the character.

    Examples
    --------
    >>> list(decode_chunks(chunk_bytes("a€b".encode("utf-8"), 2)))
    ['a', '€', 'b']
    """

    decoder = codecs.getincrementaldecoder(ENCODING)(errors="replace")
    for chunk in chunks:
        yield decoder.decode(chunk)
    tail = decoder.decode(b"", final=True)
    if tail:
        yield tail


def split_lines(text: str) -> list[str]:
    """Split *text* on line separators, keeping empty lines.

    Examples
    --------
    >>> split_lines("a\\n\\nb")
    ['a', '', 'b']
    >>> split_lines("")
    ['']
    """

    return _LINE_SEPARATOR.split(text)
