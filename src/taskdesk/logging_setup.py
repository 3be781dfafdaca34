# src/taskdesk/logging_setup.py

from __future__ import annotations

import logging
import sys
from pathlib import Path

# Store / editing loggers narrate every mutation and rejected edit. The user
# already sees the table and the [!] notifications, so on the console these
# only pass from WARNING up; the log file keeps them all.
QUIET_ON_CONSOLE: tuple[str, ...] = ("taskdesk.tasks", "taskdesk.editing")


class _ConsoleNoiseFilter(logging.Filter):
    """Console-only filter: taskdesk logs pass, store/editing chatter and third parties are held back."""

    def __init__(self, quiet: tuple[str, ...] = QUIET_ON_CONSOLE) -> None:
        super().__init__()
        self._quiet = quiet

    def filter(self, record: logging.LogRecord) -> bool:
        name = record.name

        if any(name == q or name.startswith(q + ".") for q in self._quiet):
            return record.levelno >= logging.WARNING

        if name == "taskdesk" or name.startswith("taskdesk."):
            return True

        # py.warnings and any third-party logger.
        return record.levelno >= logging.ERROR


def setup_logging(
    *,
    log_dir: str | Path = ".local/taskdesk",
    console_level: int = logging.WARNING,
    file_level: int = logging.DEBUG,
) -> Path:
    """
    Send logs to stderr (filtered, at `console_level`) and to
    `<log_dir>/taskdesk.log` (at `file_level`). Replaces any handlers already
    on the root logger. Returns the log file path.
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / "taskdesk.log"

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    # stderr, so log lines stay out of the table printed on stdout
    console = logging.StreamHandler(sys.stderr)
    console.setLevel(console_level)
    console.setFormatter(fmt)
    console.addFilter(_ConsoleNoiseFilter())
    root.addHandler(console)

    file_handler = logging.FileHandler(str(log_file), encoding="utf-8")
    file_handler.setLevel(file_level)
    file_handler.setFormatter(fmt)
    root.addHandler(file_handler)

    logging.captureWarnings(True)
    return log_file
