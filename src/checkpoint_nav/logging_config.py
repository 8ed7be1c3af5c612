"""
Central logging for the navigation node.

Configure once at startup to get one run-dated log file plus console output.
"""

from __future__ import annotations

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

# Repo root: checkpoint_nav -> src -> repo root
_PKG_DIR = Path(__file__).resolve().parent
_REPO_ROOT = _PKG_DIR.parent.parent
DEFAULT_LOG_DIR = _REPO_ROOT / "logs"

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(
    log_dir: Optional[Path] = None,
    level: int = logging.INFO,
    console: bool = True,
) -> Path:
    """
    Configure the "checkpoint_nav" logger for this run.

    - Creates a run-dated log file under log_dir (default: repo_root/logs).
    - Adds a console handler unless console=False.
    - Returns the path to the log file.

    Calling it again replaces the handlers instead of stacking them.
    """
    log_dir = Path(log_dir or DEFAULT_LOG_DIR)
    log_dir.mkdir(parents=True, exist_ok=True)

    stamp = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
    log_path = log_dir / f"navigation_run_{stamp}.log"

    with open(log_path, "w", encoding="utf-8") as f:
        f.write(f"# checkpoint_nav log | run started {datetime.now().isoformat()} | file: {log_path}\n")
    fh = logging.FileHandler(log_path, encoding="utf-8", mode="a")
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    root = logging.getLogger("checkpoint_nav")
    root.setLevel(level)
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()

    fh.setLevel(level)
    fh.setFormatter(formatter)
    root.addHandler(fh)

    if console:
        ch = logging.StreamHandler(sys.stdout)
        ch.setLevel(level)
        ch.setFormatter(formatter)
        root.addHandler(ch)

    return log_path
