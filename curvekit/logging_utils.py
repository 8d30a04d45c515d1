"""
Console logging for the curvekit command line. The library itself only
creates module loggers and never installs handlers.
"""

__all__ = ["configure_logging", "ColorFormatter"]

import logging

from colorama import Fore, Style, init as colorama_init


class ColorFormatter(logging.Formatter):
    """Colorized console formatter."""
    COLORS = {
        "DEBUG":    Fore.CYAN,
        "INFO":     Fore.GREEN,
        "WARNING":  Fore.YELLOW,
        "ERROR":    Fore.RED,
        "CRITICAL": Fore.RED + Style.BRIGHT,
    }

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelname, "")
        return (
            f"[{self.formatTime(record, self.datefmt)}] "
            f"[{color}{record.levelname:<5s}{Style.RESET_ALL}] "
            f"{record.name}: {record.getMessage()}"
        )


def configure_logging(level: int | str = logging.INFO, name: str = "curvekit") -> logging.Logger:
    """Install a single colorized stderr handler on the `name` logger."""
    colorama_init()
    logger = logging.getLogger(name)
    logger.setLevel(level)
    for h in list(logger.handlers):
        logger.removeHandler(h)

    ch = logging.StreamHandler()
    ch.setFormatter(ColorFormatter(datefmt="%H:%M:%S"))
    logger.addHandler(ch)
    return logger
