"""
Console host used by the command line.

Prompts are answered from pre-seeded values or, on an interactive terminal,
by asking the user. The clipboard is a file in the workspace so that a
template captured by one invocation can be applied by a later one.
"""

import logging
import sys
from pathlib import Path
from typing import List, Optional, TextIO

from .base import Host


logger = logging.getLogger(__name__)


DEFAULT_CLIPBOARD = Path('.smappet') / 'clipboard'


class ConsoleHost(Host):
    """Host reading from files and stdin, writing to files and stdout."""

    def __init__(
        self,
        workspace: Path,
        answers: Optional[List[str]] = None,
        selection_path: Optional[Path] = None,
        output_path: Optional[Path] = None,
        clipboard_path: Optional[Path] = None,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None
    ):
        """
        Initialize the console host.

        Args:
            workspace: Directory the default clipboard file lives under
            answers: Prompt answers consumed in order before asking interactively
            selection_path: File holding the selected text (stdin if omitted and piped)
            output_path: File receiving inserted text (stdout if omitted)
            clipboard_path: Clipboard file override
            stdin: Input stream override
            stdout: Output stream override
        """
        self.workspace = workspace
        self.answers = list(answers or [])
        self.selection_path = selection_path
        self.output_path = output_path
        self.clipboard_path = clipboard_path or (workspace / DEFAULT_CLIPBOARD)
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout

    def _interactive(self) -> bool:
        return hasattr(self.stdin, 'isatty') and self.stdin.isatty()

    def prompt_comma_separated_list(self, prompt: str, placeholder: str) -> Optional[str]:
        if self.answers:
            return self.answers.pop(0)

        if not self._interactive():
            logger.info(f"No answer for prompt '{prompt}' and no terminal; treating as cancelled")
            return None

        try:
            return input(f"{prompt} [{placeholder}]: ")
        except EOFError:
            return None

    def read_selected_text(self) -> Optional[str]:
        if self.selection_path is not None:
            if not self.selection_path.is_file():
                logger.warning(f"Selection file not found: {self.selection_path}")
                return None
            return self.selection_path.read_text()

        if self._interactive():
            logger.info("No selection file given and stdin is a terminal; nothing selected")
            return None
        return self.stdin.read()

    def read_clipboard_text(self) -> str:
        if not self.clipboard_path.is_file():
            logger.debug(f"Clipboard file does not exist yet: {self.clipboard_path}")
            return ""
        return self.clipboard_path.read_text()

    def write_clipboard_text(self, text: str) -> None:
        self.clipboard_path.parent.mkdir(parents=True, exist_ok=True)
        self.clipboard_path.write_text(text)
        logger.info(f"Wrote template to clipboard file: {self.clipboard_path}")

    def insert_text_at_cursor(self, text: str) -> None:
        if self.output_path is not None:
            self.output_path.parent.mkdir(parents=True, exist_ok=True)
            self.output_path.write_text(text)
            logger.info(f"Wrote rendered text to: {self.output_path}")
            return
        self.stdout.write(text)
        self.stdout.flush()
