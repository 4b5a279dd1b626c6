import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

import colorlog


def setup_logging(level: str = "INFO", logs_dir: Optional[str] = "logs") -> Optional[Path]:
    """
    Configure the root logger with a colored console handler and, when
    logs_dir is given, a per-run log file.

    Returns the log file path, or None when file logging is disabled.
    """
    log_level = logging.getLevelName(level.upper())
    if not isinstance(log_level, int):
        raise ValueError(f"Unknown log level: {level}")

    # NOTE: keeping different formatter since .log can't handle colors
    file_formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)-8s - %(message)s'
    )

    console_formatter = colorlog.ColoredFormatter(
        "%(green)s%(asctime)s%(reset)s - %(purple)s%(name)s - %(log_color)s%(levelname)s%(reset)s - %(message)s",
        log_colors={
            'DEBUG':    'cyan',
            'INFO':     'blue',
            'WARNING':  'yellow',
            'ERROR':    'red',
            'CRITICAL': 'red,bg_white',
        },
        secondary_log_colors={},
        style='%'
    )

    console_handler = colorlog.StreamHandler()
    console_handler.setLevel(log_level)
    console_handler.setFormatter(console_formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Remove any existing handlers
    root_logger.handlers = []

    root_logger.addHandler(console_handler)

    if not logs_dir:
        return None

    log_path = Path(logs_dir)
    log_path.mkdir(parents=True, exist_ok=True)
    log_file = log_path / f"laliga_{datetime.now().strftime('%Y%m%d_%H%M%S')}.log"

    file_handler = logging.FileHandler(log_file)
    file_handler.setLevel(log_level)
    file_handler.setFormatter(file_formatter)
    root_logger.addHandler(file_handler)

    return log_file
