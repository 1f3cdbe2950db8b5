"""
Re-reads sorted output to check it, pairing lines exactly as the sorter does.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from sort_contigs_cli.errors import OutputVerificationError
from sort_contigs_cli.record_parser import ContigRecord, parse_records

logger = logging.getLogger(__name__)

# surrogateescape lets bytes that are not valid utf-8 pass through unchanged
FILE_ENCODING = "utf-8"
FILE_ERRORS = "surrogateescape"


def read_records(file_path: str) -> List[ContigRecord]:
    """
    Parameters
    ----------
    file_path : str
        Path to a file of header/sequence line pairs.

    Returns
    -------
    List[ContigRecord]
        Records in file order.
    """
    with open(file_path, "r", encoding=FILE_ENCODING, errors=FILE_ERRORS,
              newline="\n") as handle:
        return list(parse_records(handle))


def check_sorted(file_path: str, expected_records: Optional[int] = None) -> List[int]:
    """Return the sort keys of *file_path* in file order.

    Raises ``OutputVerificationError`` if any key is smaller than the one
    before it, or if *expected_records* is given and the file holds a
    different number of records.
    """
    records = read_records(file_path)
    keys = [record.key for record in records]

    for position in range(1, len(keys)):
        if keys[position] < keys[position - 1]:
            raise OutputVerificationError(
                f"Records in '{file_path}' are out of order: record {position + 1} "
                f"({records[position].header}) has key {keys[position]} after "
                f"key {keys[position - 1]}."
            )

    if expected_records is not None and len(records) != expected_records:
        raise OutputVerificationError(
            f"'{file_path}' holds {len(records)} records, expected {expected_records}."
        )

    logger.debug("Verified %d records in %s are in ascending key order", len(keys), file_path)
    return keys
