"""
Offset to line/column mapping for attribute values.
"""

from __future__ import annotations

from hxattrs.errors import Position


class PositionTracker:
    """
    Derives ``Position`` snapshots from character offsets.

    The tracker remembers the last position it computed and scans forward
    from there, so a scanner that only moves ahead pays for each character
    once. Asking for an offset behind the checkpoint rescans from the start.
    """

    def __init__(self, text: str):
        self.text = text
        self._offset = 0
        self._line = 1
        self._column = 1

    def position_at(self, index: int) -> Position:
        """Return the position of ``index`` (clamped to the input length)."""
        index = max(0, min(index, len(self.text)))
        if index < self._offset:
            self._offset, self._line, self._column = 0, 1, 1

        for ch in self.text[self._offset : index]:
            if ch == "\n":
                self._line += 1
                self._column = 1
            else:
                self._column += 1
        self._offset = index

        return Position(offset=self._offset, line=self._line, column=self._column)
