"""Scan command: list the variable names a template references."""

import logging
from argparse import Namespace
from pathlib import Path

from smappet.exceptions import SmappetError
from smappet.host import ConsoleHost
from smappet.template import MarkerScanner
from .common import configure_logging, load_config, report_error


logger = logging.getLogger(__name__)


def scan_template(args: Namespace) -> int:
    """
    Print one variable name per line.

    Reads the template from --input if given, otherwise from the clipboard file.
    """
    configure_logging(args)
    workspace = Path.cwd()

    try:
        config = load_config(args, workspace)
        if args.input:
            input_path = Path(args.input)
            if not input_path.is_file():
                logger.error(f"Input file not found: {input_path}")
                return 1
            text = input_path.read_text()
        else:
            host = ConsoleHost(workspace, clipboard_path=Path(args.clipboard) if args.clipboard else None)
            text = host.read_clipboard_text()

        names = MarkerScanner(strict=args.strict or config.strict_markers).scan(text)
    except SmappetError as e:
        return report_error(e)

    for name in names:
        print(name)
    return 0 if names else 1
