"""Logging setup for applications embedding evemit.

The registry modules only ever log through loggers under the ``evemit``
namespace and never touch the root logger. ``configure_logger`` attaches
handlers to that namespace so its records can be sent to the console and a
log file without changing how the host application logs.
"""

import logging
import logging.handlers
from datetime import datetime
from pathlib import Path

from evemit.config import ConfigType
from evemit.constants import PACKAGE, get_data_directory

LOG_FILE_PREFIX = f"{PACKAGE}_"
FILE_FORMAT = "[%(asctime)s] %(levelname)-8s %(name)s: %(message)s"
CONSOLE_FORMAT = "%(levelname)s %(message)s"


def get_log_directory() -> Path:
    """Get the log directory path, inside the per-user data directory

    Returns:
        Path: The path to the log directory
    """
    return Path(get_data_directory()) / "logs"


def clean_old_logs(log_dir: Path, max_files: int = 5) -> list[Path]:
    """Remove old evemit log files, keeping only the most recent `max_files`

    Only files named like the ones `configure_logger` writes are considered, so the
    directory may be shared with other applications' logs.

    Args:
        log_dir (Path): The directory where the log files are stored.
        max_files (int, optional): The maximum number of log files to keep. Defaults to 5.

    Returns:
        list[Path]: The files that were deleted.
    """
    log_files = sorted(
        log_dir.glob(f"{LOG_FILE_PREFIX}*.log"), key=lambda path: path.stat().st_mtime
    )
    removed = log_files[: max(len(log_files) - max_files, 0)]
    for old_log in removed:
        old_log.unlink()
    return removed


def reset_logger(logger_name: str = PACKAGE) -> None:
    """Detach and close the handlers installed by `configure_logger`."""
    logger = logging.getLogger(logger_name)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


def configure_logger(
    log_level: int | None = None,
    log_dir: Path | None = None,
    max_log_files: int | None = None,
    config_type: ConfigType = ConfigType.PRODUCTION,
    logger_name: str = PACKAGE,
) -> list[logging.Handler]:
    """Send evemit's log records to the console and, if configured, a log file

    Handlers go on the `logger_name` logger, which stops propagating to the root logger
    so records are not written twice. Calling this again replaces the previous handlers.
    Arguments left as None are taken from the selected configuration.

    Args:
        log_level (int | None): logging.[DEBUG | INFO | WARNING | ERROR | CRITICAL].
        log_dir (Path | None): Where to store the logs. Defaults to the data directory.
        max_log_files (int | None): Keeps only the previous (n) number of log files.
        config_type (ConfigType): Configuration supplying the defaults.
        logger_name (str): Logger to configure. Defaults to the whole evemit namespace.

    Returns:
        list[logging.Handler]: The handlers that were installed.
    """
    config = config_type.value
    if log_level is None:
        log_level = config.LOG_LEVEL
    if max_log_files is None:
        max_log_files = config.MAX_LOG_FILES

    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    handlers: list[logging.Handler] = [stream_handler]

    if config.LOG_TO_FILE:
        if log_dir is None:
            log_dir = get_log_directory()
        log_dir.mkdir(exist_ok=True, parents=True)
        # One slot is taken by the file about to be created
        clean_old_logs(log_dir=log_dir, max_files=max(max_log_files - 1, 0))

        log_filename = log_dir / datetime.now().strftime(f"{LOG_FILE_PREFIX}%Y-%m-%d_%H-%M-%S.log")
        file_handler = logging.handlers.RotatingFileHandler(
            log_filename, maxBytes=10 * 1024**2, backupCount=5, encoding="utf-8"
        )
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt="%d.%m.%Y %H:%M:%S"))
        handlers.insert(0, file_handler)

    reset_logger(logger_name)
    logger = logging.getLogger(logger_name)
    for handler in handlers:
        logger.addHandler(handler)
    logger.setLevel(log_level)
    logger.propagate = False

    return handlers
