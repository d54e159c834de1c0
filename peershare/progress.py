"""A text progress bar redrawn in place on the console."""

from __future__ import annotations

import struct
import sys
from typing import TextIO


def _f32(value: float) -> float:
    """Round a value to single precision."""
    return struct.unpack("f", struct.pack("f", value))[0]


class Progress:
    """Progress bar over ``total`` steps drawn ``width`` characters wide."""

    def __init__(self, total: int, width: int = 40, *, stream: TextIO | None = None):
        self.total = total
        self.width = width
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def update(self, current: int) -> None:
        """Redraw the bar for step ``current``; nothing is drawn when total is 0."""
        if self.total == 0:
            return
        progress = _f32(_f32(current) / _f32(self.total))
        filled = int(_f32(_f32(self.width) * progress))
        bar = "".join("#" if i < filled else "-" for i in range(self.width))
        percent = int(_f32(progress * 100.0))
        out = self.stream
        out.write(f"[{bar}]Percent :{percent}%\r")
        out.flush()

    def finish(self) -> None:
        """Draw a full bar and move past it."""
        out = self.stream
        out.write(f"[{'#' * self.width}]Percent :100%\n\n")
        out.flush()