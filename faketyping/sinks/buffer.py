from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Tuple


@dataclass
class BufferSink:
    """In-memory document with a caret; every sink call is one undoable edit."""

    text: str = ""
    caret: int = 0
    history: List[Tuple[str, int]] = field(default_factory=list)

    def _checkpoint(self) -> None:
        self.history.append((self.text, self.caret))

    async def clear(self) -> None:
        self._checkpoint()
        self.text = ""
        self.caret = 0

    async def insert_at(self, offset: int, char: str) -> None:
        if not 0 <= offset <= len(self.text):
            raise IndexError(f"offset {offset} outside document of {len(self.text)}")
        self._checkpoint()
        self.text = self.text[:offset] + char + self.text[offset:]

    async def move_cursor_to(self, offset: int) -> None:
        self.caret = max(0, min(len(self.text), offset))

    async def replace_all(self, text: str) -> None:
        self._checkpoint()
        self.text = text
        self.caret = min(self.caret, len(text))

    def undo(self) -> bool:
        if not self.history:
            return False
        self.text, self.caret = self.history.pop()
        return True
