"""Paste command: render the clipboard template with new values."""

from argparse import Namespace
from pathlib import Path

from smappet.extension import PASTE_COMMAND
from .common import run_extension_command


def paste_template(args: Namespace) -> int:
    """Render the clipboard template and write it to --output or stdout."""
    answers = [args.values] if args.values is not None else None
    output_path = Path(args.output) if args.output else None
    return run_extension_command(args, PASTE_COMMAND, answers=answers, output_path=output_path)
