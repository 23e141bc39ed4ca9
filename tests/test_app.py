import json
from argparse import Namespace

import pytest

from app import cli_main, detect_programs, run_and_report


def test_detect_programs(config):
    names = [path.name for path in detect_programs(config)]
    assert "palindrome.tm" in names
    assert "flip.tm" in names
    assert names == sorted(names)


def test_detect_programs_missing_directory(config, tmp_path):
    config["programs_directory"] = str(tmp_path / "none")
    assert detect_programs(config) == []


def test_run_and_report(config, capsys):
    flip = next(p for p in detect_programs(config) if p.name == "flip.tm")
    assert run_and_report(str(flip), "0110", config)
    out = capsys.readouterr().out
    assert "Result : 1001" in out
    assert "ACCEPTED" in out


def test_run_and_report_illegal_input(config, palindrome, capsys):
    assert not run_and_report(palindrome, "0x", config)
    assert "Illegal input" in capsys.readouterr().out


def test_cli_main_exits_on_failure(config, tmp_path):
    path = tmp_path / "runtime_config.json"
    path.write_text(json.dumps(config), encoding="utf-8")
    args = Namespace(program=str(tmp_path / "missing.tm"), input="", max_steps=None, verbose=False, config=str(path))
    with pytest.raises(SystemExit) as info:
        cli_main(args)
    assert info.value.code == 1
