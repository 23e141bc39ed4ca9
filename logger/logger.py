import json
import os
from datetime import datetime, timezone

class JSONLogger:
    def __init__(self, output_directory="logs/", log_file_prefix="tm_"):
        self.output_directory = output_directory
        self.log_file_prefix = log_file_prefix
        os.makedirs(self.output_directory, exist_ok=True)
        self.today = datetime.now(timezone.utc).strftime("%Y-%m-%d")
        self.current_log = self._get_log_filename()

    @classmethod
    def from_config(cls, config):
        return cls(config["output_directory"], config["log_file_prefix"])

    def _get_log_filename(self):
        filename = f"{self.log_file_prefix}{self.today}.jsonl"  # JSON lines format
        return os.path.join(self.output_directory, filename)

    def _log_to_file(self, filename, entries):
        path = os.path.join(self.output_directory, filename)
        with open(path, "a", encoding="utf-8") as f:
            for entry in entries:
                f.write(json.dumps(entry) + "\n")

    def log(self, entry: dict):
        """Log a single run record to the main log."""
        with open(self.current_log, "a", encoding="utf-8") as f:
            f.write(json.dumps(entry) + "\n")

    def log_batch(self, entries: list):
        """Log a batch of run records to the main log."""
        with open(self.current_log, "a", encoding="utf-8") as f:
            for entry in entries:
                f.write(json.dumps(entry) + "\n")

    def rotate(self):
        """Start a new main log file if the UTC day changed."""
        self.today = datetime.now(timezone.utc).strftime("%Y-%m-%d")
        self.current_log = self._get_log_filename()

    def log_accepted(self, entries: list):
        """Runs that halted in a final state."""
        self._log_to_file(f"accepted_{self.today}.jsonl", entries)

    def log_rejected(self, entries: list):
        """Runs that halted outside the final states."""
        self._log_to_file(f"rejected_{self.today}.jsonl", entries)

    def log_unfinished(self, entries: list):
        """Runs stopped by the step limit."""
        self._log_to_file(f"unfinished_{self.today}.jsonl", entries)

    def log_classified(self, entry: dict):
        """Log a run record to the main log and to the file for its verdict."""
        self.log(entry)
        handler = {
            "accepted": self.log_accepted,
            "rejected": self.log_rejected,
            "unfinished": self.log_unfinished
        }.get(entry.get("verdict"))
        if handler is not None:
            handler([entry])
