"""Options for the base122 command-line tool."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

COMMANDS = ("encode", "decode", "demo", "stats")


@dataclass(frozen=True)
class CliOptions:
    """Parsed command-line options.

    Attributes:
        command: Subcommand to run (encode, decode, demo, stats)
        text: Inline argument; when None, input comes from ``input_path`` or stdin
        input_path: File to read instead of stdin
        output_path: File to write instead of stdout
        strict: Reject non-canonical input when decoding (``--lenient`` turns it off)
        as_json: Print stats as JSON
        verbose: Enable debug logging
    """

    command: str
    text: Optional[str] = None
    input_path: Optional[Path] = None
    output_path: Optional[Path] = None
    strict: bool = True
    as_json: bool = False
    verbose: bool = False

    def __post_init__(self) -> None:
        """Validate option combinations."""
        if self.command not in COMMANDS:
            raise ValueError(f"Unknown command: {self.command}")

        if self.text is not None and self.input_path is not None:
            raise ValueError("Give either inline text or --input, not both")

        if self.input_path is not None and not self.input_path.exists():
            raise ValueError(f"File not found: {self.input_path}")

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> CliOptions:
        """Build options from an argparse namespace."""
        input_path = getattr(args, "input", None)
        output_path = getattr(args, "output", None)
        return cls(
            command=args.command,
            text=getattr(args, "text", None),
            input_path=Path(input_path) if input_path else None,
            output_path=Path(output_path) if output_path else None,
            strict=not getattr(args, "lenient", False),
            as_json=getattr(args, "json", False),
            verbose=args.verbose,
        )
