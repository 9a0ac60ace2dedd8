"""Copy command: capture a template from a selection."""

from argparse import Namespace
from pathlib import Path

from smappet.extension import COPY_COMMAND
from .common import run_extension_command


def copy_template(args: Namespace) -> int:
    """Tag the selection and store the template in the clipboard file."""
    answers = [args.variables] if args.variables is not None else None
    selection_path = Path(args.input) if args.input else None
    return run_extension_command(args, COPY_COMMAND, answers=answers, selection_path=selection_path)
