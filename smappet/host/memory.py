"""In-memory host for embedding the pipelines in other programs."""

from typing import List, Optional, Sequence, Tuple

from .base import Host


class MemoryHost(Host):
    """
    Host backed by plain attributes.

    Prompt answers are consumed in order; once they run out, prompts behave
    as cancelled. Every prompt and insertion is recorded.
    """

    def __init__(
        self,
        answers: Optional[Sequence[Optional[str]]] = None,
        selection: Optional[str] = None,
        clipboard: str = ""
    ):
        self.answers = list(answers or [])
        self.selection = selection
        self.clipboard = clipboard
        self.prompts: List[Tuple[str, str]] = []
        self.inserted: List[str] = []
        self.clipboard_writes = 0

    def prompt_comma_separated_list(self, prompt: str, placeholder: str) -> Optional[str]:
        self.prompts.append((prompt, placeholder))
        if not self.answers:
            return None
        return self.answers.pop(0)

    def read_selected_text(self) -> Optional[str]:
        return self.selection

    def read_clipboard_text(self) -> str:
        return self.clipboard

    def write_clipboard_text(self, text: str) -> None:
        self.clipboard = text
        self.clipboard_writes += 1

    def insert_text_at_cursor(self, text: str) -> None:
        self.inserted.append(text)
