from pathlib import Path

import pytest

from config.config_loader import DEFAULT_CONFIG

PROGRAMS = Path(__file__).resolve().parent.parent / "programs"


@pytest.fixture
def config(tmp_path):
    return dict(
        DEFAULT_CONFIG,
        output_directory=str(tmp_path / "logs"),
        results_directory=str(tmp_path / "results"),
        programs_directory=str(PROGRAMS),
    )


@pytest.fixture
def palindrome():
    return str(PROGRAMS / "palindrome.tm")


@pytest.fixture
def write_program(tmp_path):
    def write(text, name="machine.tm"):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return str(path)
    return write
