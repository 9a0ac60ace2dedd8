"""
Host interface.

The hosting environment supplies prompts, the selected text, a clipboard and
an insertion point. Absent values (no selection, cancelled prompt) are
returned as None.
"""

from abc import ABC, abstractmethod
from typing import Optional


class Host(ABC):
    """Boundary between the templating pipelines and the hosting environment."""

    @abstractmethod
    def prompt_comma_separated_list(self, prompt: str, placeholder: str) -> Optional[str]:
        """Ask for a separated list; None means the prompt was cancelled."""

    @abstractmethod
    def read_selected_text(self) -> Optional[str]:
        """Return the current selection, or None if there is none."""

    @abstractmethod
    def read_clipboard_text(self) -> str:
        ...

    @abstractmethod
    def write_clipboard_text(self, text: str) -> None:
        ...

    @abstractmethod
    def insert_text_at_cursor(self, text: str) -> None:
        ...
