"""
Application logging configuration.

Sets up a single stdout logger for the files manager service. Detailed error
information goes to the log while clients only receive short, static messages.
"""
import logging
import sys


def setup_logging() -> logging.Logger:
    """
    Configure and return the application logger.

    The logger outputs to stdout with the format
    ``timestamp - logger name - level - message``, which works the same under
    uvicorn in development and behind gunicorn in production.

    Returns:
        logging.Logger: Configured logger instance
    """
    logger = logging.getLogger("files_manager")
    logger.setLevel(logging.INFO)

    # Calling this from several modules must not stack handlers
    if not logger.handlers:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(logging.INFO)

        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    return logger
