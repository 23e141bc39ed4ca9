# simulator/tape.py

from simulator.symbols import DEFAULT_BLANK, WILDCARD, Direction


class Tape:
    """
    One unbounded, bidirectional tape.

    Cells live in a dict keyed by position. Only the contiguous range
    [left, right] is materialized; moving past either bound materializes one
    blank cell there. The cursor always sits inside that range.
    """

    def __init__(self, blank=DEFAULT_BLANK, word=""):
        if blank == WILDCARD:
            raise ValueError("The wildcard cannot be used as a blank symbol.")
        self.blank = blank
        self.cells = {}
        if WILDCARD in word:
            raise ValueError("The wildcard cannot be placed on a tape.")
        if word:
            for i, ch in enumerate(word):
                self.cells[i] = ch
            self.left, self.right = 0, len(word) - 1
        else:
            self.cells[0] = blank
            self.left = self.right = 0
        self.head = 0

    def __len__(self):
        return self.right - self.left + 1

    def read(self):
        return self.cells[self.head]

    def write(self, symbol):
        if symbol == WILDCARD:
            raise ValueError("The wildcard cannot be written to a tape.")
        self.cells[self.head] = symbol

    def move(self, direction: Direction):
        if direction is Direction.STAY:
            return
        target = self.head + direction.offset
        if target < self.left:
            self.cells[target] = self.blank
            self.left = target
        elif target > self.right:
            self.cells[target] = self.blank
            self.right = target
        self.head = target

    def compact(self):
        """Drop blank cells at both ends of the materialized range, never past the cursor."""
        while self.left < self.head and self.cells[self.left] == self.blank:
            del self.cells[self.left]
            self.left += 1
        while self.right > self.head and self.cells[self.right] == self.blank:
            del self.cells[self.right]
            self.right -= 1

    def export_sequence(self):
        """Return [(symbol, index), ...] for every materialized cell, after compaction."""
        self.compact()
        return [(self.cells[i], i) for i in range(self.left, self.right + 1)]

    def export_string(self):
        content = "".join(self.cells[i] for i in range(self.left, self.right + 1))
        return content.strip(self.blank)

    def __repr__(self):
        return f"Tape(head={self.head}, cells={self.export_string()!r})"
