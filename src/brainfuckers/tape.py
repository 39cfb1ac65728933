from __future__ import annotations

INITIAL_CELLS = 3000


class Tape:
    """
    Unbounded tape of byte cells.

    Cells at positions >= 0 live in ``_right[position]``, cells at negative
    positions live in ``_left[-position - 1]``. Both sides grow on write;
    reading a cell that was never written yields 0.
    """

    def __init__(self, initial_cells: int = INITIAL_CELLS):
        self._right = bytearray(initial_cells)
        self._left = bytearray()
        self.position = 0

    def cell(self, position: int) -> int:
        if position >= 0:
            side, index = self._right, position
        else:
            side, index = self._left, -position - 1
        return side[index] if index < len(side) else 0

    def current(self) -> int:
        return self.cell(self.position)

    def set(self, value: int) -> None:
        if self.position >= 0:
            side, index = self._right, self.position
        else:
            side, index = self._left, -self.position - 1
        if index >= len(side):
            side.extend(bytes(index + 1 - len(side)))
        side[index] = value & 0xFF

    def increment(self) -> None:
        self.set(self.current() + 1)

    def decrement(self) -> None:
        self.set(self.current() - 1)

    def move_right(self) -> None:
        self.position += 1

    def move_left(self) -> None:
        self.position -= 1

    def snapshot(self, start: int, stop: int) -> bytes:
        """Cell values for positions ``start <= p < stop``."""
        return bytes(self.cell(p) for p in range(start, stop))

    def __repr__(self) -> str:
        return f"Tape(position={self.position}, current={self.current()})"
