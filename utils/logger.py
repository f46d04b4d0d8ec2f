# This module contains a custom formatter and helpers for application logging.
import logging
import os
import sys


class CustomFormatter(logging.Formatter):
    """
    A custom formatter for logging messages with different log levels.

    Attributes:
        grey (str): ANSI escape sequence for grey color.
        yellow (str): ANSI escape sequence for yellow color.
        red (str): ANSI escape sequence for red color.
        bold_red (str): ANSI escape sequence for bold red color.
        reset (str): ANSI escape sequence to reset color.
        format_str (str): The log message format.
        FORMATS (dict): A dictionary mapping log levels to their respective log message formats.

    Usage:
        formatter = CustomFormatter()
        handler = logging.StreamHandler()
        handler.setFormatter(formatter)
    """
    grey = "\x1b[37;20m"
    yellow = "\x1b[33;20m"
    red = "\x1b[31;20m"
    bold_red = "\x1b[31;1m"
    dark_grey = "\x1b[30;1m"
    reset = "\x1b[0m"
    format_str = '[%(levelname)s] %(asctime)s - %(name)s - %(message)s'

    FORMATS = {
        logging.DEBUG: dark_grey + format_str + reset,
        logging.INFO: grey + format_str + reset,
        logging.WARNING: yellow + format_str + reset,
        logging.ERROR: red + format_str + reset,
        logging.CRITICAL: bold_red + format_str + reset
    }

    def __init__(self, use_color: bool = True):
        super().__init__(self.format_str)
        self.use_color = use_color

    def format(self, record):
        """
        Formats the log record based on its log level.

        Args:
            record (logging.LogRecord): The log record to be formatted.

        Returns:
            str: The formatted log message.
        """
        if not self.use_color:
            return super().format(record)
        log_fmt = self.FORMATS.get(record.levelno, self.format_str)
        formatter = logging.Formatter(log_fmt)
        return formatter.format(record)


APP_LOGGER_NAME = "gm_poster"


def get_logger(name: str) -> logging.Logger:
    """Return a child of the application logger for the given module name."""
    return logging.getLogger(f"{APP_LOGGER_NAME}.{name}")


def setup_logging(level: int = logging.INFO) -> logging.Logger:
    """
    Configure the application logger with a single console handler.

    Colors are turned off when running inside AWS Lambda, where output
    goes to CloudWatch rather than a terminal. Calling this more than
    once only updates the level.

    Args:
        level: Logging level for the application logger.

    Returns:
        logging.Logger: The configured application logger.
    """
    log = logging.getLogger(APP_LOGGER_NAME)
    log.setLevel(level)

    if not log.handlers:
        ch = logging.StreamHandler(sys.stdout)
        ch.setFormatter(CustomFormatter(use_color="AWS_LAMBDA_FUNCTION_NAME" not in os.environ))
        log.addHandler(ch)
        # The Lambda runtime already has a handler on the root logger
        log.propagate = False

    for handler in log.handlers:
        handler.setLevel(level)

    return log
