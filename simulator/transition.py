# simulator/transition.py

from dataclasses import dataclass
from typing import Tuple

from simulator.symbols import DEFAULT_BLANK, WILDCARD, Direction, State


@dataclass(frozen=True)
class Transition:
    """
    One rule of the transition table:
        trigger_state trigger_symbols -> result_state result_symbols directions

    The three tuples hold one entry per tape.
    """
    trigger_state: State
    trigger_symbols: Tuple[str, ...]
    result_state: State
    result_symbols: Tuple[str, ...]
    directions: Tuple[Direction, ...]

    @property
    def arity(self):
        return len(self.trigger_symbols)

    def matches(self, state, symbols, blank=DEFAULT_BLANK):
        """Check the trigger against a state and the symbols under every cursor."""
        if state != self.trigger_state:
            return False
        if len(symbols) != len(self.trigger_symbols):
            return False
        for expected, current in zip(self.trigger_symbols, symbols):
            if expected == WILDCARD:
                # wildcard reads any symbol except the blank
                if current == blank:
                    return False
            elif expected != current:
                return False
        return True

    def apply(self, tapes):
        """Write and move every tape, then return the state to switch to."""
        for tape, symbol, direction in zip(tapes, self.result_symbols, self.directions):
            if symbol != WILDCARD:
                tape.write(symbol)
            tape.move(direction)
        return self.result_state

    def __str__(self):
        dirs = "".join(d.value for d in self.directions)
        return (f"{self.trigger_state} {''.join(self.trigger_symbols)} "
                f"{''.join(self.result_symbols)} {dirs} {self.result_state}")
