# simulator/turing_machine.py

from dataclasses import dataclass
from enum import Enum
from typing import List, Tuple

from simulator.symbols import DEFAULT_BLANK, State
from simulator.tape import Tape


class StepStatus(Enum):
    APPLIED = "applied"
    HALTED = "halted"


@dataclass(frozen=True)
class TapeView:
    cells: List[Tuple[str, int]]
    head: int


@dataclass(frozen=True)
class Snapshot:
    """Read-only view of a configuration, used for traces."""
    step: int
    state: str
    tapes: List[TapeView]


class TuringMachine:
    def __init__(self, num_tapes, transitions, initial_state, word="", blank=DEFAULT_BLANK, tracer=None):
        if num_tapes < 1:
            raise ValueError(f"A machine needs at least one tape, got {num_tapes}.")
        if isinstance(initial_state, str):
            initial_state = State(initial_state)
        self.num_tapes = num_tapes
        self.transitions = tuple(transitions)
        self.state = initial_state
        self.blank = blank
        self.tapes = [Tape(blank, word)] + [Tape(blank) for _ in range(num_tapes - 1)]
        self.step_count = 0
        self.halted = False
        self.tracer = tracer
        self.trace = []

    def n_step(self):
        return self.step_count

    def symbols(self):
        return tuple(tape.read() for tape in self.tapes)

    def snapshot(self):
        views = [TapeView(tape.export_sequence(), tape.head) for tape in self.tapes]
        return Snapshot(self.step_count, self.state.name, views)

    def find_transition(self, symbols=None):
        """Return the first declared transition matching the current configuration."""
        if symbols is None:
            symbols = self.symbols()
        for transition in self.transitions:
            if transition.matches(self.state, symbols, self.blank):
                return transition
        return None

    def step(self, verbose=False):
        symbols = self.symbols()

        if verbose:
            snapshot = self.snapshot()
            if self.tracer is not None:
                self.tracer(snapshot)
            else:
                self.trace.append(snapshot)

        self.step_count += 1
        transition = self.find_transition(symbols)
        if transition is None:
            self.halted = True
            return StepStatus.HALTED

        self.state = transition.apply(self.tapes)
        return StepStatus.APPLIED

    def output(self):
        """Content of the first tape without surrounding blanks."""
        tape = self.tapes[0]
        tape.compact()
        return tape.export_string()

    def __repr__(self):
        return f"TuringMachine(state={self.state.name}, steps={self.step_count}, tapes={self.num_tapes})"
