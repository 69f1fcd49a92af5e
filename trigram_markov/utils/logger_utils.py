# logger_utils.py - logging messages and timing metrics for the markov engine and CLI

import os
import sys
import time
from datetime import datetime
from typing import Optional

# Directory where the CLI keeps its log file, created lazily on first write
LOG_DIR = "logs"

# Library use writes no file until Log.configure(path=...) or the env var sets one
DEFAULT_LOG_PATH = os.path.join(LOG_DIR, "trigram_markov.log")
ENV_LOG_PATH = "TRIGRAM_MARKOV_LOG"


class Log:
    """Lightweight logger for writing messages and tracking metrics."""
    COLORS = {
        "DEBUG": "\033[90m",   # gray
        "INFO": "\033[94m",    # blue
        "WARNING": "\033[93m", # yellow
        "ERROR": "\033[91m",   # red
        "RESET": "\033[0m",
    }

    path: Optional[str] = None
    echo: bool = False
    use_color: bool = True

    @classmethod
    def configure(cls, path: Optional[str] = None, echo: Optional[bool] = None,
                  use_color: Optional[bool] = None) -> None:
        """Change where/how messages go. Arguments left as None keep their value."""
        if path is not None:
            cls.path = path
        if echo is not None:
            cls.echo = echo
        if use_color is not None:
            cls.use_color = use_color

    @classmethod
    def log_path(cls) -> Optional[str]:
        return cls.path or os.environ.get(ENV_LOG_PATH) or None

    @classmethod
    def write(cls, msg: str, level: str = "INFO") -> None:
        """
        Append a log message to the log file with a timestamp.
        Each entry is written as: [YYYY-MM-DD HH:MM:SS] LEVEL   | message
        """
        ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        line = f"[{ts}] {level:<7} | {msg}"

        path = cls.log_path()
        if path:
            try:
                folder = os.path.dirname(path)
                if folder:
                    os.makedirs(folder, exist_ok=True)
                with open(path, "a", encoding="utf-8") as f:
                    f.write(line + "\n")
            except OSError as e:
                # log failures never reach the caller, ingestion stays total
                print(f"[Log] cannot write {path}: {e}", file=sys.stderr)

        if not cls.echo:
            return
        # print to console (color enabled etc)
        if cls.use_color and level in cls.COLORS:
            print(f"{cls.COLORS[level]}{line}{cls.COLORS['RESET']}")
        else:
            print(line)

    # Public logging methods
    @classmethod
    def debug(cls, msg: str) -> None:
        cls.write(msg, "DEBUG")

    @classmethod
    def info(cls, msg: str) -> None:
        cls.write(msg, "INFO")

    @classmethod
    def warning(cls, msg: str) -> None:
        cls.write(msg, "WARNING")

    @classmethod
    def error(cls, msg: str) -> None:
        cls.write(msg, "ERROR")

    @classmethod
    def metric(cls, tag, value, unit=""):
        """
        Record a metric (like timing, counts, or corpus sizes).
        Example: [12:45:02] ingest corpus done: 0.123s
        """
        cls.write(f"{tag}: {value}{unit}", "METRIC")

    @staticmethod
    def time_block(label):
        """
        Helper for measuring execution time of a code block.
        To use:
            with Log.time_block("ingest"):
                model.ingest_many(lines)
        It automatically logs how long the block took.
        """
        return _Timer(label)


class _Timer:
    """Context manager used internally to measure time for a code block."""
    def __init__(self, label):
        self.label = label
        self.start = time.perf_counter()
        self.elapsed = 0.0

    def __enter__(self):
        self.start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb):
        """When exiting the 'with' block, record how long it took as a metric."""
        self.elapsed = round(time.perf_counter() - self.start, 3)
        Log.metric(f"{self.label} done", self.elapsed, "s")
