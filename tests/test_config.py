# tests/test_config.py

import pytest

from sort_contigs_cli.config import SortConfig
from sort_contigs_cli.errors import InvalidArgumentsError


def test_default_config_needs_paths():
    with pytest.raises(InvalidArgumentsError, match="input_path"):
        SortConfig().to_cli_args()
    with pytest.raises(InvalidArgumentsError, match="output_path"):
        SortConfig(input_path="in.fa").to_cli_args()


def test_to_cli_args_defaults():
    config = SortConfig(input_path="in.fa", output_path="out.fa")
    assert config.to_cli_args() == ["in.fa", "out.fa"]


def test_to_cli_args_flags():
    config = SortConfig(
        input_path="in.fa",
        output_path="out.fa",
        warn_on_default_key=False,
        show_progress=True,
        verify_output=True,
        debug=True,
    )
    assert config.to_cli_args() == [
        "in.fa",
        "out.fa",
        "--no_default_key_warnings",
        "--progress",
        "--verify_output",
        "--debug",
    ]


def test_command_string_quotes_paths():
    config = SortConfig(input_path="my contigs.fa", output_path="out.fa")
    assert config.get_command_string() == (
        "python -m sort_contigs_cli.sort_contigs 'my contigs.fa' out.fa"
    )
