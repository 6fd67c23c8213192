"""Logging configuration for the match-3 board engine."""

import logging
import sys


def setup_logging(level: str = "INFO", format_style: str = "simple") -> None:
    """
    Set up logging for an application embedding the engine.

    The library never calls this itself; module loggers stay silent until the
    host application configures logging.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_style: Format style - "simple" or "detailed"
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    formats = {
        "simple": "%(name)s - %(levelname)s - %(message)s",
        "detailed": "%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s",
    }
    log_format = formats.get(format_style, formats["simple"])

    logging.basicConfig(
        level=numeric_level,
        format=log_format,
        handlers=[
            logging.StreamHandler(sys.stdout)
        ],
        force=True,
    )


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for a specific module.

    Args:
        name: Logger name (typically __name__ from the calling module)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)


def get_game_logger(module_name: str) -> logging.Logger:
    """
    Get a logger with a shortened name for engine modules.

    Args:
        module_name: Full module name (e.g., 'match3.systems.match_resolution')

    Returns:
        Logger with shortened name (e.g., 'systems.match_resolution')
    """
    if module_name.startswith('match3.'):
        short_name = module_name[len('match3.'):]
    else:
        short_name = module_name

    return logging.getLogger(short_name)
