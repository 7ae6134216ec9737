import logging
import os
import sys

from config.settings import AppSettings

APP_LOGGER = "csvgrid"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(settings: AppSettings) -> logging.Logger:
    """
    Attaches the running-log file handler to the application logger.
    Calling it again with the same file does not add a second handler.
    """
    logger = logging.getLogger(APP_LOGGER)
    logger.setLevel(settings.log_level)

    target = os.path.abspath(settings.log_file)
    for h in logger.handlers:
        if isinstance(h, logging.FileHandler) and h.baseFilename == target:
            return logger

    try:
        settings.log_file.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(settings.log_file, mode="a", encoding="utf-8")
    except OSError as e:
        # The viewer still works without its log file
        print(f"Could not open log file {settings.log_file}: {e}", file=sys.stderr)
        return logger

    fh.setLevel(settings.log_level)
    fh.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(fh)
    return logger


def install_exception_hooks(logger: logging.Logger):
    previous = sys.excepthook

    def _hook(exc_type, exc, tb):
        if issubclass(exc_type, KeyboardInterrupt):
            previous(exc_type, exc, tb)
            return
        logger.critical("Unhandled exception", exc_info=(exc_type, exc, tb))
        previous(exc_type, exc, tb)

    sys.excepthook = _hook
    return _hook
