import json
import os
from datetime import datetime, timezone

class JSONLogger:
    """Append-only JSON-lines history of conversion runs, one file per UTC day."""

    def __init__(self, output_directory="logs/", log_file_prefix="tapeconv_"):
        self.output_directory = output_directory
        self.log_file_prefix = log_file_prefix
        self.today = datetime.now(timezone.utc).strftime("%Y-%m-%d")
        self.current_log = self._get_log_filename()

    def _get_log_filename(self):
        filename = f"{self.log_file_prefix}{self.today}.jsonl"  # JSON lines format
        return os.path.join(self.output_directory, filename)

    def _write(self, entries):
        os.makedirs(self.output_directory, exist_ok=True)
        with open(self.current_log, "a", encoding="utf-8") as f:
            for entry in entries:
                f.write(json.dumps(entry) + "\n")

    @staticmethod
    def _timestamp():
        return datetime.now(timezone.utc).isoformat()

    def log(self, entry: dict):
        """Log a single entry with a UTC timestamp; a caller-supplied timestamp wins."""
        self._write([{"timestamp": self._timestamp(), **entry}])

    def log_batch(self, entries: list):
        """Log several entries with one file open."""
        stamp = self._timestamp()
        self._write([{"timestamp": stamp, **entry} for entry in entries])

    def log_conversion(self, input_path, output_path, result):
        self.log({
            "input": str(input_path),
            "output": str(output_path),
            "status": "converted",
            "machine_type": result.machine_type.label,
            "target_type": result.target.label,
            "source_transitions": len(result.source_transitions),
            "generated_transitions": len(result.transitions)
        })

    def log_failure(self, input_path, error):
        self.log({
            "input": str(input_path),
            "status": "failed",
            "error_type": type(error).__name__,
            "error": str(error)
        })

class NullLogger:
    """Stands in for JSONLogger when logging is disabled in the config."""

    def log(self, entry: dict):
        pass

    def log_batch(self, entries: list):
        pass

    def log_conversion(self, input_path, output_path, result):
        pass

    def log_failure(self, input_path, error):
        pass

def build_logger(config):
    if not config.get("enable_logging", True):
        return NullLogger()
    return JSONLogger(config["output_directory"], config["log_file_prefix"])
