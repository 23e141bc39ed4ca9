import json

from logger.logger import JSONLogger


def read_lines(path):
    with open(path, "r", encoding="utf-8") as f:
        return [json.loads(line) for line in f]


def test_log_appends_json_lines(tmp_path):
    logger = JSONLogger(str(tmp_path), "tm_")
    logger.log({"input": "0"})
    logger.log_batch([{"input": "1"}, {"input": "01"}])
    assert logger.current_log.endswith(f"tm_{logger.today}.jsonl")
    assert [e["input"] for e in read_lines(logger.current_log)] == ["0", "1", "01"]


def test_log_classified_routes_by_verdict(tmp_path):
    logger = JSONLogger(str(tmp_path), "tm_")
    logger.log_classified({"input": "0", "verdict": "accepted"})
    logger.log_classified({"input": "1", "verdict": "unfinished"})
    assert len(read_lines(logger.current_log)) == 2
    accepted = tmp_path / f"accepted_{logger.today}.jsonl"
    unfinished = tmp_path / f"unfinished_{logger.today}.jsonl"
    assert read_lines(accepted) == [{"input": "0", "verdict": "accepted"}]
    assert read_lines(unfinished) == [{"input": "1", "verdict": "unfinished"}]
    assert not (tmp_path / f"rejected_{logger.today}.jsonl").exists()


def test_from_config(tmp_path):
    logger = JSONLogger.from_config({"output_directory": str(tmp_path / "out"), "log_file_prefix": "run_"})
    assert (tmp_path / "out").is_dir()
    assert logger.log_file_prefix == "run_"
