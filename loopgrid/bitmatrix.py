"""A matrix of bits packed into 32-bit words in row-major order."""

import random

WORD_BITS = 32
WORD_BYTES = WORD_BITS // 8


class BitMatrix:
    """A rows x cols matrix of 0/1 cells, each stored as a single bit."""

    def __init__(self, rows: int, cols: int) -> None:
        self.rows = rows if rows > 0 else 1
        self.cols = cols if cols > 0 else 1
        words = -(-(self.rows * self.cols) // WORD_BITS)
        self._words = [0] * words

    def _locate(self, row: int, col: int) -> tuple[int, int]:
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise IndexError(f"cell ({row}, {col}) is outside a {self.rows}x{self.cols} matrix")
        return divmod(row * self.cols + col, WORD_BITS)

    def set(self, row: int, col: int) -> None:
        """Make the cell 1."""
        word, bit = self._locate(row, col)
        self._words[word] |= 1 << bit

    def reset(self, row: int, col: int) -> None:
        """Make the cell 0."""
        word, bit = self._locate(row, col)
        self._words[word] &= ~(1 << bit)

    def get(self, row: int, col: int) -> int:
        """The cell's value, 0 or 1."""
        word, bit = self._locate(row, col)
        return (self._words[word] >> bit) & 1

    def populate(self, rng: random.Random | None = None) -> None:
        """Set each cell with probability one half; cells already set stay set."""
        rng = rng if rng is not None else random.Random()
        for row in range(self.rows):
            for col in range(self.cols):
                if rng.getrandbits(1):
                    self.set(row, col)

    def storage_bytes(self) -> int:
        """Bytes used by the packed words."""
        return len(self._words) * WORD_BYTES

    def wasted_bits(self) -> int:
        """Bits allocated but not used by any cell."""
        return len(self._words) * WORD_BITS - self.rows * self.cols

    def __str__(self) -> str:
        return "".join(
            "".join(f"{self.get(row, col)}\t" for col in range(self.cols)) + "\n"
            for row in range(self.rows)
        )