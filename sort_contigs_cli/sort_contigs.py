#!/usr/bin/env python3
# sort_contigs uses a binary tree to buffer the two-line records of a fasta
#  file, then writes them to the output file sorted by the contig length
#  given in each header (">read_number contig_length ...").

from __future__ import annotations

import argparse
import logging
import os
import sys
import time
from dataclasses import dataclass
from typing import Iterable, Tuple

from tqdm import tqdm

from sort_contigs_cli.config import SortConfig
from sort_contigs_cli.contig_tree import ContigTree
from sort_contigs_cli.errors import (
    InputOpenError,
    OutputOpenError,
    OutputWriteError,
    SamePathError,
    SortContigsError,
)
from sort_contigs_cli.fasta_io import FILE_ENCODING, FILE_ERRORS, check_sorted
from sort_contigs_cli.logging_utils import setup_logging
from sort_contigs_cli.record_parser import parse_records

logger = logging.getLogger(__name__)


@dataclass
class SortSummary:
    records: int
    distinct_keys: int
    default_keys: int


def report_elapsed_time(start_time):
    '''log the wall-clock time since start_time'''
    elapsed = time.time() - start_time
    minutes, seconds = divmod(elapsed, 60)
    logger.info(f"Elapsed time: {int(minutes)} min {seconds:.2f} sec")


def paths_are_same_file(path1, path2):
    '''True if both paths name the same file, even when spelled differently'''
    if os.path.realpath(path1) == os.path.realpath(path2):
        return True
    if os.path.exists(path1) and os.path.exists(path2):
        return os.path.samefile(path1, path2)
    return False


def open_input(path):
    try:
        return open(path, "r", encoding=FILE_ENCODING, errors=FILE_ERRORS,
                    newline="\n")  # only \n ends a line; \r is stripped later
    except OSError as e:
        raise InputOpenError(path, str(e)) from e


def open_output(path):
    try:
        return open(path, "w", encoding=FILE_ENCODING, errors=FILE_ERRORS)
    except OSError as e:
        raise OutputOpenError(path, str(e)) from e


def load_contig_tree(lines: Iterable[str], warn_on_default_key: bool = True,
                     show_progress: bool = False) -> Tuple[ContigTree, int]:
    '''
    Parse every record in lines into a new ContigTree.

    Returns the tree and the number of records whose header had no sort key
    and were therefore filed under key 0.
    '''
    contig_tree = ContigTree()
    default_keys = 0
    records = tqdm(parse_records(lines), desc="Loading contigs",
                   unit=" contigs", disable=not show_progress)
    for record in records:
        if not record.key_found:
            default_keys += 1
            if warn_on_default_key:
                logger.warning("No contig length found in header, sorting it "
                               "as %d: %s", record.key, record.header)
        contig_tree.insert(record.key, record.text)
    return contig_tree, default_keys


def sort_contig_file(config: SortConfig) -> SortSummary:
    '''
    Read config.input_path, sort its records and write them to
    config.output_path. Both files are opened before anything is read, and
    the output is only written once the whole input is in the tree.
    '''
    config.validate()
    if paths_are_same_file(config.input_path, config.output_path):
        raise SamePathError(config.output_path)

    with open_input(config.input_path) as in_file, \
            open_output(config.output_path) as out_file:
        logger.info(f"Loading binary tree with contigs from file {config.input_path}.")
        contig_tree, default_keys = load_contig_tree(
            in_file,
            warn_on_default_key=config.warn_on_default_key,
            show_progress=config.show_progress,
        )
        logger.info("Done.")
        logger.debug(f"{len(contig_tree)} records under {contig_tree.node_count} "
                     f"keys, tree height {contig_tree.height()}")
        if default_keys:
            logger.warning(f"{default_keys} record(s) had no contig length in "
                           "their header and were sorted as 0.")

        logger.info(f"Outputting contigs from binary tree to file {config.output_path}.")
        try:
            contig_tree.output_in_order(out_file)
            out_file.flush()
        except OSError as e:
            raise OutputWriteError(config.output_path, str(e)) from e
        logger.info("Done.")

    if config.verify_output:
        check_sorted(config.output_path, expected_records=len(contig_tree))
        logger.info(f"Verified {config.output_path} is sorted.")

    return SortSummary(records=len(contig_tree),
                       distinct_keys=contig_tree.node_count,
                       default_keys=default_keys)


def get_sort_contigs_args(parser):
    '''takes an arg parser as an argument and adds args for sort_contigs'''
    parser.add_argument('input_file',
                        help = 'fasta file with one sequence line per record',
                        type = str)
    parser.add_argument('output_file',
                        help = 'where to write the sorted records; must not '
                        'be the input file',
                        type = str)

    group = parser.add_argument_group('Options')
    group.add_argument('--no_default_key_warnings',
                       help = "don't warn about headers that have no contig "
                       "length (they are still sorted as 0)",
                       action = 'store_true', default = False)
    group.add_argument('--progress',
                       help = 'show a progress bar while loading records',
                       action = 'store_true', default = False)
    group.add_argument('--verify_output',
                       help = 're-read the output and check it is sorted',
                       action = 'store_true', default = False)
    group.add_argument('--debug',
                       help = 'verbose logging (same as SORT_CONTIGS_DEBUG=1)',
                       action = 'store_true', default = False)
    return parser


def main(raw_args=None):
    start_time = time.time()

    parser = argparse.ArgumentParser(
        description = 'sort_contigs is a utility to sort fasta files by '
        'contig length',
        epilog = 'Warning: Do not designate the same input and output file '
        'as your data will be lost.')
    get_sort_contigs_args(parser)
    args = parser.parse_args(raw_args)  # exits with status 2 on bad usage

    setup_logging(debug=True if args.debug else None)
    config = SortConfig.from_args(args)

    try:
        summary = sort_contig_file(config)
    except SortContigsError as e:
        logger.error(str(e))
        reason = getattr(e, "reason", "")
        if reason:
            logger.debug(reason)
        return 1

    logger.info(f"Sorted {summary.records} records "
                f"({summary.distinct_keys} distinct lengths).")
    report_elapsed_time(start_time)
    return 0


if __name__ == '__main__':
    sys.exit(main())
