"""pytest configuration to ensure project root is on sys.path.

Allows `import sort_contigs_cli` during test discovery without installing.
"""
import sys
from pathlib import Path

ROOT_DIR = Path(__file__).resolve().parent.parent
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

import pytest

EXAMPLE_INPUT = (
    ">1 300 descA\n"
    "SEQAAA\n"
    ">2 100 descB\n"
    "SEQBBB\n"
    ">3 300 descC\n"
    "SEQCCC\n"
)

EXAMPLE_OUTPUT = (
    ">2 100 descB\n"
    "SEQBBB\n"
    ">1 300 descA\n"
    "SEQAAA\n"
    ">3 300 descC\n"
    "SEQCCC\n"
)


@pytest.fixture
def write_fasta(tmp_path):
    """Return a helper that writes raw bytes-as-text to a file under tmp_path."""
    def _write(name, content):
        path = tmp_path / name
        path.write_bytes(content.encode("utf-8"))
        return path
    return _write


@pytest.fixture
def example_input(write_fasta):
    return write_fasta("contigs.fa", EXAMPLE_INPUT)
