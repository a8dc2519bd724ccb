"""Logging configuration shared by the command-line entrypoints."""

from __future__ import annotations

import logging
import os

from techies_site.config import LOG_DIR, LOG_FORMAT


def file_logs_disabled() -> bool:
    """True when file logging is switched off (tests, CI)."""
    return bool(os.environ.get("DISABLE_FILE_LOGS") or os.environ.get("PYTEST_CURRENT_TEST"))


def configure_logging(
    log_level: str = "INFO", log_filename: str | None = None, enable_file: bool = True
) -> None:
    r"""Configure console and optional file logging for a pipeline run.

    Parameters
    ----------
    log_level : str, optional
        The logging level (e.g., "INFO", "DEBUG"). Defaults to "INFO".
    log_filename : str | None, optional
        File name inside ``LOG_DIR``; no file handler when ``None``.
    enable_file : bool, optional
        Whether to add the file handler at all. Defaults to True.

    Notes
    -----
    All existing root handlers are replaced, so the function is safe to
    call repeatedly. A file handler that cannot be created is skipped and
    logging continues on the console only.

    Examples
    --------
    >>> configure_logging(log_level="DEBUG", enable_file=False)
    """
    for h in logging.root.handlers[:]:
        logging.root.removeHandler(h)
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if enable_file and log_filename and not file_logs_disabled():
        try:
            LOG_DIR.mkdir(exist_ok=True)
            handlers.insert(0, logging.FileHandler(LOG_DIR / log_filename, mode="a"))
        except OSError:
            logging.getLogger(__name__).debug("File logging unavailable in %s", LOG_DIR)
    logging.basicConfig(
        level=getattr(logging, log_level.upper(), logging.INFO),
        format=LOG_FORMAT,
        handlers=handlers,
    )


def flush_and_close_log_handlers() -> None:
    """Flush and close all root logging handlers."""
    for handler in logging.root.handlers:
        handler.flush()
        handler.close()
