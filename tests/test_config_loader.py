import json

import pytest

from config.config_loader import (DEFAULT_CONFIG, load_config, load_config_or_defaults, save_config,
                                  validate_config)


def write_config(path, data):
    path.write_text(json.dumps(data), encoding="utf-8")
    return str(path)


def test_load_merges_defaults(tmp_path):
    logs = tmp_path / "logs"
    path = write_config(tmp_path / "runtime_config.json", {"max_steps": 50, "output_directory": str(logs)})
    config = load_config(path)
    assert config["max_steps"] == 50
    assert config["verbose"] is DEFAULT_CONFIG["verbose"]
    assert logs.is_dir()


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(str(tmp_path / "nope.json"))


def test_missing_file_falls_back_to_defaults(tmp_path):
    assert load_config_or_defaults(str(tmp_path / "nope.json")) == DEFAULT_CONFIG


def test_wrong_type_raises(tmp_path):
    path = write_config(tmp_path / "runtime_config.json", {"verbose": "yes", "output_directory": str(tmp_path)})
    with pytest.raises(TypeError):
        load_config(path)


def test_bool_is_not_an_int():
    config = dict(DEFAULT_CONFIG, max_steps=True)
    with pytest.raises(TypeError):
        validate_config(config)


def test_missing_key_raises():
    config = dict(DEFAULT_CONFIG)
    del config["log_runs"]
    with pytest.raises(ValueError):
        validate_config(config)


def test_save_then_load(tmp_path):
    path = str(tmp_path / "cfg" / "runtime_config.json")
    config = dict(DEFAULT_CONFIG, max_steps=7, output_directory=str(tmp_path / "logs"))
    save_config(config, path)
    assert load_config(path) == config
