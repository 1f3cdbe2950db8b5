"""
Exceptions raised by the contig sorter.

Every failure the command line reports derives from ``SortContigsError`` so
``main`` can turn them into a message and a non-zero exit status. The
I/O-flavoured ones also derive from ``OSError`` and the argument-flavoured ones
from ``ValueError`` so callers using the library directly can catch them the
usual way.
"""

from __future__ import annotations


class SortContigsError(Exception):
    """Base class for all contig sorter failures."""


class InvalidArgumentsError(SortContigsError, ValueError):
    """A required input or output path was not supplied."""


class SamePathError(SortContigsError, ValueError):
    """The input and output paths point at the same file."""

    def __init__(self, path: str) -> None:
        super().__init__("inputFileName cannot be the same as outputFileName.")
        self.path = path


class InputOpenError(SortContigsError, OSError):
    """The input file could not be opened for reading."""

    def __init__(self, path: str, reason: str = "") -> None:
        super().__init__(f"Could not open file: {path}")
        self.path = path
        self.reason = reason


class OutputOpenError(SortContigsError, OSError):
    """The output file could not be opened for writing."""

    def __init__(self, path: str, reason: str = "") -> None:
        super().__init__(f"Cannot write to file: {path}")
        self.path = path
        self.reason = reason


class OutputWriteError(SortContigsError, OSError):
    """Writing the sorted records failed part way through."""

    def __init__(self, path: str, reason: str = "") -> None:
        super().__init__(f"Failed while writing to file: {path}")
        self.path = path
        self.reason = reason


class OutputVerificationError(SortContigsError, ValueError):
    """The written file is not in ascending key order."""
