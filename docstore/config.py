import os
from enum import Enum
from pathlib import Path


class LogLevel(Enum):
    DEBUG = "DEBUG"
    RELEASE = "RELEASE"


# Change to RELEASE to only log warnings and errors
CURRENT_LOG_LEVEL = LogLevel.DEBUG

LOG_FILENAME = "DocStore.log"


def default_log_dir() -> Path:
    """DOCSTORE_LOG_DIR if set, otherwise the current working directory."""
    return Path(os.environ.get("DOCSTORE_LOG_DIR", os.getcwd()))


# Directory the log file is written to
LOG_DIR = default_log_dir()
