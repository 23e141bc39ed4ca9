# description/parser.py
"""
Recursive-descent reader for .tm machine descriptions.

A description is seven sections, each written #TAG=VALUE:

    #Q = {q0,q1}        states
    #S = {0,1}          input alphabet
    #G = {0,1,_}        tape alphabet
    #q0 = q0            initial state
    #B = _              blank symbol
    #F = {q1}           final states
    #N = 1              tape count, always last

Everything after #N is the transition list, one rule per tuple:

    q0 0 1 r q1         state, read symbols, write symbols, directions, next state

Whitespace is free and ';' starts a comment that runs to the end of the line.
"""

import re
from dataclasses import dataclass
from typing import Tuple

from description.checker import check_input
from description.errors import StructuralError, TMSyntaxError
from simulator.symbols import WILDCARD, Direction, State
from simulator.transition import Transition
from simulator.turing_machine import TuringMachine

COMMENT = ";"
IDENTIFIER = re.compile(r"[A-Za-z0-9_]+")
SYMBOL_RUN = re.compile(r"[A-Za-z0-9_*]+")
DIRECTION_CHARS = "lr*"

# tag character after '#' -> section name
SECTIONS = {
    "Q": "states",
    "S": "input_alphabet",
    "G": "tape_alphabet",
    "q": "initial_state",
    "B": "blank",
    "F": "final_states",
}


def section_label(tag):
    return "#q0" if tag == "q" else f"#{tag}"


@dataclass(frozen=True)
class Description:
    states: Tuple[State, ...]
    input_alphabet: Tuple[str, ...]
    tape_alphabet: Tuple[str, ...]
    initial_state: State
    blank: str
    final_states: Tuple[State, ...]
    num_tapes: int
    transitions: Tuple[Transition, ...]

    def is_final(self, state):
        return state in self.final_states

    def build_machine(self, word="", tracer=None):
        """Check word against the input alphabet and load it onto a fresh machine."""
        check_input(self.input_alphabet, word)
        return TuringMachine(
            self.num_tapes,
            self.transitions,
            self.initial_state,
            word=word,
            blank=self.blank,
            tracer=tracer,
        )


class DescriptionParser:
    def __init__(self, text):
        self.text = text
        self.pos = 0
        self.num_tapes = 0

    # === Errors ===
    def location(self):
        consumed = self.text[:self.pos]
        line = consumed.count("\n") + 1
        column = self.pos - (consumed.rfind("\n") + 1) + 1
        return line, column

    def error(self, message, cls=TMSyntaxError):
        line, column = self.location()
        return cls(message, line, column)

    # === Lexing ===
    def at_end(self):
        return self.pos >= len(self.text)

    def skip(self):
        """Skip whitespace and comments."""
        while not self.at_end():
            ch = self.text[self.pos]
            if ch == COMMENT:
                newline = self.text.find("\n", self.pos)
                self.pos = len(self.text) if newline < 0 else newline + 1
            elif ch.isspace():
                self.pos += 1
            else:
                break

    def next_char(self, what):
        if self.at_end():
            raise self.error(f"unexpected end of input, expected {what}")
        ch = self.text[self.pos]
        self.pos += 1
        return ch

    def accept(self, ch):
        self.skip()
        if not self.at_end() and self.text[self.pos] == ch:
            self.pos += 1
            return True
        return False

    def expect(self, ch):
        if not self.accept(ch):
            raise self.error(f"expected '{ch}'")

    def match(self, pattern, what):
        self.skip()
        found = pattern.match(self.text, self.pos)
        if found is None:
            raise self.error(f"expected {what}")
        self.pos = found.end()
        return found.group()

    # === Values ===
    def parse_identifier(self):
        return self.match(IDENTIFIER, "identifier")

    def parse_state(self):
        return State(self.parse_identifier())

    def parse_identifier_list(self):
        self.expect("{")
        items = [self.parse_identifier()]
        while self.accept(","):
            items.append(self.parse_identifier())
        self.expect("}")
        return items

    def parse_alphabet(self):
        symbols = self.parse_identifier_list()
        for symbol in symbols:
            if len(symbol) != 1:
                raise self.error(f"alphabet symbol {symbol!r} must be a single character")
        return tuple(symbols)

    def parse_blank(self):
        self.skip()
        blank = self.next_char("blank symbol")
        if blank == WILDCARD:
            raise self.error("the wildcard cannot be the blank symbol")
        return blank

    def parse_tape_count(self):
        value = self.parse_identifier()
        if not value.isdigit():
            raise self.error(f"expected tape count, got {value!r}")
        count = int(value)
        if count < 1:
            raise self.error("tape count must be at least 1", StructuralError)
        return count

    def parse_symbols(self):
        return tuple(self.match(SYMBOL_RUN, "tape symbols"))

    def parse_directions(self):
        self.skip()
        start = self.pos
        while not self.at_end() and self.text[self.pos] in DIRECTION_CHARS:
            self.pos += 1
        if self.pos == start:
            raise self.error("expected directions")
        return tuple(Direction.from_char(ch) for ch in self.text[start:self.pos])

    # === Transitions ===
    def parse_transition(self):
        trigger_state = self.parse_state()
        trigger_symbols = self.parse_symbols()
        result_symbols = self.parse_symbols()
        directions = self.parse_directions()
        result_state = self.parse_state()
        transition = Transition(trigger_state, trigger_symbols, result_state, result_symbols, directions)

        for field, items in (("read symbols", trigger_symbols),
                             ("write symbols", result_symbols),
                             ("directions", directions)):
            if len(items) != self.num_tapes:
                raise self.error(
                    f"transition '{transition}' has {len(items)} {field} for {self.num_tapes} tape(s)",
                    StructuralError,
                )
        return transition

    def parse_transitions(self):
        transitions = []
        self.skip()
        while not self.at_end():
            transitions.append(self.parse_transition())
            self.skip()
        return tuple(transitions)

    # === Document ===
    def parse_section(self, tag):
        if tag == "q":
            self.expect("0")
        self.expect("=")
        if tag in ("Q", "F"):
            return tuple(State(name) for name in self.parse_identifier_list())
        if tag in ("S", "G"):
            return self.parse_alphabet()
        if tag == "B":
            return self.parse_blank()
        return self.parse_state()

    def parse(self):
        sections = {}
        while True:
            self.skip()
            if self.at_end():
                raise self.error("expected complete .tm file, missing #N section")
            if self.next_char("'#'") != "#":
                self.pos -= 1
                raise self.error("expected '#'")
            tag = self.next_char("section tag")

            if tag == "N":
                if len(sections) != len(SECTIONS):
                    missing = ", ".join(section_label(t) for t, name in SECTIONS.items() if name not in sections)
                    raise self.error(f"expected complete .tm file before #N, missing {missing}")
                self.expect("=")
                self.num_tapes = self.parse_tape_count()
                transitions = self.parse_transitions()
                return Description(num_tapes=self.num_tapes, transitions=transitions, **sections)

            if tag not in SECTIONS:
                raise self.error("expected one of #Q, #S, #G, #q0, #B, #F, #N")
            name = SECTIONS[tag]
            if name in sections:
                raise self.error(f"section {section_label(tag)} declared twice")
            sections[name] = self.parse_section(tag)


def parse_description(text):
    return DescriptionParser(text).parse()


def parse(text, word="", tracer=None):
    """Parse a description and return a machine loaded with word."""
    return parse_description(text).build_machine(word, tracer=tracer)
