# simulator/symbols.py

from dataclasses import dataclass
from enum import Enum

DEFAULT_BLANK = "_"
WILDCARD = "*"


class Direction(Enum):
    LEFT = "l"
    RIGHT = "r"
    STAY = "*"

    @property
    def offset(self):
        return {"l": -1, "r": 1, "*": 0}[self.value]

    @classmethod
    def from_char(cls, ch):
        """Map a direction character (l, r, *) to a Direction."""
        try:
            return cls(ch)
        except ValueError:
            raise ValueError(f"Unknown direction character: {ch!r}") from None


@dataclass(frozen=True)
class State:
    """A named control state. Two states are equal when their names are."""
    name: str

    def __str__(self):
        return self.name
