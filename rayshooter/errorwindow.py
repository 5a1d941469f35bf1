"""A stack of dismissable error messages."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

_MAX_ID = 0xFFFF


@dataclass
class ErrorWindow:
    """One error message and whether its window is still open."""

    error: str
    id: int
    is_open: bool = True


@dataclass
class ErrorWindows:
    """Open error windows, each with an id one above the last one's."""

    windows: list[ErrorWindow] = field(default_factory=list)

    def add_error(self, error: str) -> ErrorWindow:
        """Open a window for ``error`` and return it."""
        next_id = self.windows[-1].id + 1 if self.windows else 0
        if next_id > _MAX_ID:
            raise OverflowError("error window id out of range")
        window = ErrorWindow(error, next_id)
        self.windows.append(window)
        return window

    def close(self, window_id: int) -> None:
        """Mark the window with ``window_id`` as closed."""
        for window in self.windows:
            if window.id == window_id:
                window.is_open = False
                return
        raise KeyError(window_id)

    def remove_closed(self) -> None:
        """Drop windows that have been closed."""
        self.windows = [window for window in self.windows if window.is_open]

    def __iter__(self) -> Iterator[ErrorWindow]:
        return iter(self.windows)

    def __len__(self) -> int:
        return len(self.windows)