"""Shared setup for CLI commands."""

import logging
import sys
from argparse import Namespace
from pathlib import Path
from typing import List, Optional

from smappet.config import ConfigLoader, SmappetConfig
from smappet.exceptions import SmappetError
from smappet.extension import SmappetExtension
from smappet.host import ConsoleHost


logger = logging.getLogger(__name__)


def configure_logging(args: Namespace) -> None:
    """Set up logging to stderr from the shared log flags."""
    log_level = getattr(logging, args.log_level.upper())
    if args.debug:
        log_level = logging.DEBUG
    elif args.quiet:
        log_level = logging.ERROR

    logging.basicConfig(
        level=log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        stream=sys.stderr
    )


def load_config(args: Namespace, workspace: Path) -> SmappetConfig:
    """Load the config named by --config, or one discovered in the workspace."""
    loader = ConfigLoader()
    if args.config:
        return loader.load(Path(args.config))
    return loader.load(loader.discover(workspace))


def report_error(error: SmappetError) -> int:
    """Log a user-facing error and return its exit code."""
    logger.error(str(error))
    print(f"Error: {error}", file=sys.stderr)
    return error.exit_code


def run_extension_command(
    args: Namespace,
    command_id: str,
    answers: Optional[List[str]] = None,
    selection_path: Optional[Path] = None,
    output_path: Optional[Path] = None
) -> int:
    """
    Run one extension command against a console host.

    Returns:
        Exit code: 0 if the command produced output, 1 if it produced nothing,
        or the error's exit code
    """
    configure_logging(args)
    workspace = Path.cwd()

    try:
        config = load_config(args, workspace)
        host = ConsoleHost(
            workspace=workspace,
            answers=answers,
            selection_path=selection_path,
            output_path=output_path,
            clipboard_path=Path(args.clipboard) if args.clipboard else None,
        )

        extension = SmappetExtension(host, config)
        extension.activate()
        try:
            result = extension.execute(command_id)
        finally:
            extension.deactivate()
    except SmappetError as e:
        return report_error(e)

    if result is None:
        logger.info(f"{command_id} produced no output")
        return 1
    return 0
