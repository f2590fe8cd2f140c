# src/config/logging_config.py

"""Per-run logging for property_admin.

Every ``property_admin.*`` logger writes DEBUG and up to one file per
launch, ``logs/run_YYYYMMDD_HHMMSS.log``.  Warnings and errors are also
echoed on a console handler that depends on who owns the terminal:

* headless CLI: a plain stderr stream, next to the Rich status lines;
* TUI: :class:`textual.logging.TextualHandler`, which feeds the running
  app's log (visible with ``textual console``) and only falls back to
  stderr once no app is active, so nothing is drawn over the screen.
"""

import logging
import sys
from datetime import datetime
from pathlib import Path

from textual.logging import TextualHandler

from src.config.settings import Settings

_FILE_FORMAT = (
    "%(asctime)s | %(levelname)-8s | %(name)s | "
    "%(module)s:%(funcName)s:%(lineno)d | %(message)s"
)
_CONSOLE_FORMAT = "%(levelname)s %(name)s: %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

ROOT_LOGGER = "property_admin"


def _file_handler() -> logging.FileHandler:
    logs_dir: Path = Settings.LOGS_DIR
    logs_dir.mkdir(parents=True, exist_ok=True)
    stamp = datetime.now().strftime("%Y%m%d_%H%M%S")

    handler = logging.FileHandler(logs_dir / f"run_{stamp}.log", encoding="utf-8")
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter(_FILE_FORMAT, datefmt=_DATE_FORMAT))
    return handler


def _console_handler(interactive: bool) -> logging.Handler:
    handler: logging.Handler
    if interactive:
        handler = TextualHandler()
    else:
        handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(logging.WARNING)
    handler.setFormatter(logging.Formatter(_CONSOLE_FORMAT))
    return handler


def setup_logging(interactive: bool = False) -> Path:
    """Attach the run log and the console handler for this launch mode.

    Args:
        interactive: ``True`` when the Textual TUI will own the terminal.

    Returns:
        Path of the run's log file.  Repeated calls reuse the same file
        and only swap the console handler.
    """
    root_logger = logging.getLogger(ROOT_LOGGER)
    root_logger.setLevel(logging.DEBUG)

    file_handler = next(
        (h for h in root_logger.handlers if isinstance(h, logging.FileHandler)),
        None,
    )
    if file_handler is None:
        file_handler = _file_handler()
        root_logger.addHandler(file_handler)

    for handler in list(root_logger.handlers):
        if handler is not file_handler:
            root_logger.removeHandler(handler)
            handler.close()
    root_logger.addHandler(_console_handler(interactive))

    log_file = Path(file_handler.baseFilename)
    root_logger.debug(
        "Logging to %s (%s console)", log_file, "tui" if interactive else "cli"
    )
    return log_file
