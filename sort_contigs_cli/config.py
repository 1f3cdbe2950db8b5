"""
Configuration model for a contig sorting run.
"""
from __future__ import annotations

import shlex
from dataclasses import dataclass
from typing import List

from sort_contigs_cli.errors import InvalidArgumentsError


@dataclass
class SortConfig:
    # ─── Files ──────────────────────────────────────────────────────────────────
    input_path: str = ""
    output_path: str = ""

    # ─── Behaviour ──────────────────────────────────────────────────────────────
    warn_on_default_key: bool = True  # log each header that sorts as key 0
    show_progress: bool = False
    verify_output: bool = False
    debug: bool = False

    # ─── Helpers ────────────────────────────────────────────────────────────────
    def _flag(self, switch: bool, name: str) -> List[str]:
        return [name] if switch else []

    @classmethod
    def from_args(cls, args) -> "SortConfig":
        """Build a config from an ``argparse.Namespace`` produced by ``main``."""
        return cls(
            input_path=args.input_file,
            output_path=args.output_file,
            warn_on_default_key=not args.no_default_key_warnings,
            show_progress=args.progress,
            verify_output=args.verify_output,
            debug=args.debug,
        )

    # ─── Public API ─────────────────────────────────────────────────────────────
    def validate(self) -> None:
        if not self.input_path:
            raise InvalidArgumentsError("missing input_path")
        if not self.output_path:
            raise InvalidArgumentsError("missing output_path")

    def to_cli_args(self) -> List[str]:
        """Build a list of CLI arguments that mirrors the current state."""
        self.validate()
        a = [self.input_path, self.output_path]
        a += self._flag(not self.warn_on_default_key, "--no_default_key_warnings")
        a += self._flag(self.show_progress, "--progress")
        a += self._flag(self.verify_output, "--verify_output")
        a += self._flag(self.debug, "--debug")
        return a

    def get_command_string(self) -> str:
        """Return a full shell-ready command with proper quoting."""
        parts = ["python -m sort_contigs_cli.sort_contigs"]
        parts += [shlex.quote(arg) for arg in self.to_cli_args()]
        return " ".join(parts)
