from __future__ import annotations
from typing import Protocol, runtime_checkable


@runtime_checkable
class Sink(Protocol):
    """Destination of a replay. Each call is applied as one edit."""

    async def clear(self) -> None: ...

    async def insert_at(self, offset: int, char: str) -> None: ...

    async def move_cursor_to(self, offset: int) -> None: ...

    async def replace_all(self, text: str) -> None: ...
