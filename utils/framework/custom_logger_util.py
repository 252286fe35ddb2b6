import logging
import os
from datetime import datetime
from pathlib import Path

LOGGER = None  # Global variable to store the session logger

DEFAULT_LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"


def get_logger(name: str = __name__) -> logging.Logger:
    """
    Return a logger with the specified name.

    Args:
        name (str): Name of the logger, default is the module's __name__.

    Returns:
        logging.Logger: Configured logger instance.
    """
    return logging.getLogger(name)


def setup_logging(config: any):
    """
    Send the logs of a pytest session to a timestamped file under <rootdir>/logs

    Args:
        config (pytest.Config): The pytest configuration object

    Returns:
        logging.Logger: The session logger
    """
    global LOGGER  # Ensure we are modifying the global LOGGER variable

    if not hasattr(config, "workerinput"):
        logs_dir = Path(config.rootdir) / "logs" / datetime.now().strftime("%Y%m%d_%H%M%S")
        logs_dir.mkdir(parents=True, exist_ok=True)
        os.environ["LOGS_DIR"] = str(logs_dir)
    else:
        logs_dir = Path(os.environ["LOGS_DIR"])

    worker_id = os.environ.get("PYTEST_XDIST_WORKER")
    log_file = logs_dir / f"tests_{worker_id}.log" if worker_id else logs_dir / "tests.log"

    logging.basicConfig(
        format=config.getini("log_file_format") or DEFAULT_LOG_FORMAT,
        filename=str(log_file),
        level=config.getini("log_file_level") or logging.DEBUG,
    )

    LOGGER = logging.getLogger("pytest_session_logger")
    LOGGER.setLevel(logging.DEBUG)

    config.logs_dir = str(logs_dir)
    return LOGGER


def setup_console_logging(level: str | int = logging.INFO, fmt: str | None = None) -> logging.Logger:
    """
    Configure the root logger to write to the console, used when running outside pytest

    Args:
        level (str | int): Log level name or number, e.g. 'DEBUG' or logging.INFO
        fmt (str | None): Log record format, DEFAULT_LOG_FORMAT when not provided

    Returns:
        logging.Logger: The root logger

    Raises:
        ValueError: If the level name is not a known logging level
    """
    if isinstance(level, str):
        level_name = level.upper()
        if level_name not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {level}")
        level = logging.getLevelNamesMapping()[level_name]

    logging.basicConfig(format=fmt or DEFAULT_LOG_FORMAT, level=level)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    return root_logger
