from description.parser import parse_description
from tools.description_inspect import find_shadowed, main, print_description

TEXT = """
#Q = {q0,q1}
#S = {0,1}
#G = {0,1,_}
#q0 = q0
#B = _
#F = {q1}
#N = 1
q0 * 1 r q1   ; any non-blank
q0 0 0 r q0   ; never fires, covered by the wildcard
q0 _ _ * q1   ; blank is not covered
q1 0 0 r q1
q1 0 1 r q1   ; duplicate trigger
"""


def test_find_shadowed():
    assert find_shadowed(parse_description(TEXT)) == {1: 0, 4: 3}


def test_literal_does_not_cover_wildcard():
    text = TEXT.split("#N")[0] + "#N = 1\nq0 0 1 r q1\nq0 * 1 r q1\n"
    assert find_shadowed(parse_description(text)) == {}


def test_print_description(capsys):
    print_description(parse_description(TEXT))
    out = capsys.readouterr().out
    assert "Tapes: 1" in out
    assert "shadowed by #0" in out
    assert "2 transition(s) can never fire." in out


def test_main(tmp_path, capsys):
    path = tmp_path / "m.tm"
    path.write_text(TEXT, encoding="utf-8")
    main(["--program", str(path)])
    assert "Final States: {q1}" in capsys.readouterr().out
