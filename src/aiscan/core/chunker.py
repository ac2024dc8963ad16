from __future__ import annotations

import math
from typing import Iterator

from aiscan.errors import InvalidInputError
from aiscan.models.result import Window

# Windows advance by chunk_size / 1.25 so consecutive windows overlap by ~25%
# and a phrase cut at one boundary is still seen whole by the next window.
OVERLAP_DIVISOR = 1.25


def window_step(chunk_size: int) -> int:
    # chunk_size 1 would floor to a zero stride
    return max(1, math.floor(chunk_size / OVERLAP_DIVISOR))


class Windows:
    """Lazy, restartable sequence of overlapping windows over a text."""

    def __init__(self, text: str, chunk_size: int) -> None:
        if isinstance(chunk_size, bool) or not isinstance(chunk_size, int):
            raise InvalidInputError(f"chunk_size must be an integer, got {chunk_size!r}")
        if chunk_size < 1:
            raise InvalidInputError(f"chunk_size must be >= 1, got {chunk_size}")
        self.text = text
        self.chunk_size = chunk_size
        self.step = window_step(chunk_size)

    def __iter__(self) -> Iterator[Window]:
        for start in self.offsets():
            yield Window(
                start=start,
                chunk_size=self.chunk_size,
                content=self.text[start:start + self.chunk_size],
            )

    def __len__(self) -> int:
        length = len(self.text)
        if length == 0:
            return 0
        return max(0, math.ceil((length - self.chunk_size) / self.step)) + 1

    def offsets(self) -> list[int]:
        # The last window is the first one that reaches the end of the text
        return [i * self.step for i in range(len(self))]


def chunk(text: str, chunk_size: int) -> Windows:
    return Windows(text, chunk_size)
