"""Main CLI entry point for smappet."""

import argparse
import sys
from typing import Optional

from .commands import copy_template, paste_template, scan_template


def add_common_arguments(parser: argparse.ArgumentParser) -> None:
    """Add config, clipboard and logging flags shared by every command."""
    parser.add_argument(
        '--config',
        type=str,
        help='Path to YAML config (default: .smappet.yaml in the current directory)'
    )
    parser.add_argument(
        '--clipboard',
        type=str,
        metavar='FILE',
        help='Clipboard file (default: .smappet/clipboard)'
    )
    parser.add_argument(
        '--debug',
        action='store_true',
        help='Enable debug logging'
    )
    parser.add_argument(
        '--quiet',
        action='store_true',
        help='Suppress non-error output'
    )
    parser.add_argument(
        '--log-level',
        choices=['debug', 'info', 'warn', 'error'],
        default='warn',
        help='Set log level'
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the smappet CLI."""
    parser = argparse.ArgumentParser(
        prog='smappet',
        description='Casing-aware snippet templates'
    )

    subparsers = parser.add_subparsers(dest='command', help='Commands')

    copy_parser = subparsers.add_parser('copy', help='Capture a template from selected text')
    copy_parser.add_argument(
        '--variables',
        type=str,
        metavar='LIST',
        help='Comma separated variable names (prompted if omitted)'
    )
    copy_parser.add_argument(
        '--input',
        type=str,
        metavar='FILE',
        help='File holding the selected text (default: stdin)'
    )
    add_common_arguments(copy_parser)

    paste_parser = subparsers.add_parser('paste', help='Render the clipboard template with new values')
    paste_parser.add_argument(
        '--values',
        type=str,
        metavar='LIST',
        help='Comma separated replacement values (prompted if omitted)'
    )
    paste_parser.add_argument(
        '--output',
        type=str,
        metavar='FILE',
        help='Write rendered text to FILE instead of stdout'
    )
    add_common_arguments(paste_parser)

    scan_parser = subparsers.add_parser('scan', help='List variable names referenced by a template')
    scan_parser.add_argument(
        '--input',
        type=str,
        metavar='FILE',
        help='Template file (default: clipboard file)'
    )
    scan_parser.add_argument(
        '--strict',
        action='store_true',
        help='Reject templates whose marker tags do not pair up'
    )
    add_common_arguments(scan_parser)

    return parser


def main(args: Optional[list] = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    if not parsed_args.command:
        parser.print_help()
        return 1

    if parsed_args.command == 'copy':
        return copy_template(parsed_args)
    elif parsed_args.command == 'paste':
        return paste_template(parsed_args)
    elif parsed_args.command == 'scan':
        return scan_template(parsed_args)
    else:
        parser.print_help()
        return 1


if __name__ == '__main__':
    sys.exit(main())
