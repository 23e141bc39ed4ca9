from simulator.symbols import Direction, State
from simulator.tape import Tape
from simulator.transition import Transition

L, R, S = Direction.LEFT, Direction.RIGHT, Direction.STAY


def make(trigger, read, write, dirs, result):
    return Transition(State(trigger), tuple(read), State(result), tuple(write), tuple(dirs))


def test_literal_match():
    t = make("q0", "0", "1", [R], "q1")
    assert t.matches(State("q0"), ("0",))
    assert not t.matches(State("q0"), ("1",))
    assert not t.matches(State("q1"), ("0",))


def test_wildcard_never_matches_blank():
    t = make("q0", "*", "*", [R], "q0")
    assert not t.matches(State("q0"), ("_",))
    for symbol in "01abc":
        assert t.matches(State("q0"), (symbol,))


def test_wildcard_uses_the_given_blank():
    t = make("q0", "*", "*", [R], "q0")
    assert t.matches(State("q0"), ("_",), blank="B")
    assert not t.matches(State("q0"), ("B",), blank="B")


def test_every_tape_must_match():
    t = make("q0", "0*", "00", [R, R], "q0")
    assert t.matches(State("q0"), ("0", "1"))
    assert not t.matches(State("q0"), ("0", "_"))
    assert not t.matches(State("q0"), ("1", "1"))


def test_apply_writes_moves_and_returns_result_state():
    tapes = [Tape("_", "ab"), Tape("_", "cd")]
    t = make("q0", "ac", "x*", [R, L], "q1")
    assert t.apply(tapes) == State("q1")
    assert tapes[0].export_string() == "xb"
    assert tapes[0].head == 1
    # wildcard output leaves the cell unchanged
    assert tapes[1].export_string() == "cd"
    assert tapes[1].head == -1


def test_str_uses_description_syntax():
    t = make("q0", "0_", "1*", [R, S], "q1")
    assert str(t) == "q0 0_ 1* r* q1"
