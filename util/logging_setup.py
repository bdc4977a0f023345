from __future__ import annotations

import logging
from pathlib import Path


def setup_logging(*, log_dir: str | Path, level: str | int = logging.INFO) -> Path:
    """
    Send all logs to ``<log_dir>/taskpane.log``.

    No console handler: the full-screen TUI owns the terminal. Call once,
    before the first log record.
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / "taskpane.log"

    root = logging.getLogger()
    root.setLevel(level if isinstance(level, int) else logging.getLevelName(level.upper()))

    # Remove any pre-existing handlers to avoid duplicates.
    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    fh = logging.FileHandler(str(log_file), encoding="utf-8")
    fh.setFormatter(fmt)
    root.addHandler(fh)

    # prompt_toolkit and asyncio are chatty at DEBUG.
    logging.getLogger("asyncio").setLevel(logging.WARNING)
    logging.captureWarnings(True)
    return log_file
