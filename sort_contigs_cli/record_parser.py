"""
Streaming reader for two-line contig records.

Each record is a header line followed by a sequence line. The header carries
the sort key as its second numeric field, e.g. ``>17 4512 some description``
sorts under 4512.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional

logger = logging.getLogger(__name__)

# ">" read number, one whitespace char, then the contig length (ASCII only)
SORT_KEY_PATTERN = re.compile(r">\d+\s(\d+)", re.ASCII)

DEFAULT_SORT_KEY = 0


@dataclass(frozen=True)
class ContigRecord:
    """One header/sequence pair as it will be written back out."""

    key: int
    text: str
    header: str
    key_found: bool = True

    @property
    def sequence(self) -> str:
        return self.text[len(self.header) + 1:]


def extract_sort_key(header: str) -> Optional[int]:
    """Return the sort key in *header*, or None if it has none.

    Only the start of the header has to match; anything after the key is
    ignored.
    """
    match = SORT_KEY_PATTERN.match(header)
    if match is None:
        return None
    return int(match.group(1))


def parse_records(lines: Iterable[str]) -> Iterator[ContigRecord]:
    """
    Parameters
    ----------
    lines : Iterable[str]
        Raw input lines, with or without their trailing newline. Open files
        with ``newline="\\n"`` so that a lone carriage return is not taken as
        a line break.

    Yields
    ------
    ContigRecord
        One record per pair of non-empty lines, in input order. Carriage
        returns are dropped wherever they occur. A header left without a
        sequence line at the end of the input is not yielded.
    """
    header: str | None = None
    for raw_line in lines:
        line = raw_line.replace("\r", "").rstrip("\n")
        if not line:
            continue
        if header is None:
            header = line
            continue

        key = extract_sort_key(header)
        yield ContigRecord(
            key=DEFAULT_SORT_KEY if key is None else key,
            text=f"{header}\n{line}",
            header=header,
            key_found=key is not None,
        )
        header = None

    if header is not None:
        logger.warning("Dropping header without a sequence line at end of input: %s", header)
