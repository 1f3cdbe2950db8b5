# tests/test_fasta_io.py

import pytest

from conftest import EXAMPLE_INPUT, EXAMPLE_OUTPUT
from sort_contigs_cli.errors import OutputVerificationError
from sort_contigs_cli.fasta_io import check_sorted, read_records


def test_read_records_returns_records_in_file_order(write_fasta):
    path = write_fasta("in.fa", EXAMPLE_INPUT)

    records = read_records(str(path))

    assert [r.header for r in records] == [">1 300 descA", ">2 100 descB", ">3 300 descC"]
    assert records[1].sequence == "SEQBBB"


def test_check_sorted_returns_keys(write_fasta):
    path = write_fasta("sorted.fa", EXAMPLE_OUTPUT)
    assert check_sorted(str(path)) == [100, 300, 300]


def test_check_sorted_treats_missing_keys_as_zero(write_fasta):
    path = write_fasta("sorted.fa", ">nokey\nAAA\n>1 5 x\nCCC\n")
    assert check_sorted(str(path)) == [0, 5]


def test_check_sorted_accepts_header_without_marker(write_fasta):
    path = write_fasta("sorted.fa", "noheader\nCCC\n>1 5 a\nAAA\n")
    assert check_sorted(str(path)) == [0, 5]


def test_check_sorted_accepts_sequence_line_starting_with_marker(write_fasta):
    path = write_fasta("sorted.fa", ">1 5 a\n>AAA\n>2 9 b\nCCC\n")
    assert check_sorted(str(path)) == [5, 9]


def test_check_sorted_rejects_decreasing_keys(write_fasta):
    path = write_fasta("unsorted.fa", EXAMPLE_INPUT)

    with pytest.raises(OutputVerificationError, match="record 2"):
        check_sorted(str(path))


def test_check_sorted_rejects_wrong_record_count(write_fasta):
    path = write_fasta("sorted.fa", EXAMPLE_OUTPUT)

    with pytest.raises(OutputVerificationError, match="holds 3 records, expected 4"):
        check_sorted(str(path), expected_records=4)


def test_check_sorted_accepts_empty_file(write_fasta):
    path = write_fasta("empty.fa", "")
    assert check_sorted(str(path), expected_records=0) == []
