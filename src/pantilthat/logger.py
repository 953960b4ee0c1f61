"""
This module provides logging functionality for the pan-tilt driver.
"""

import logging
import os
from pathlib import Path

from pantilthat.singleton import Singleton

PANTILT = 'PanTilt'
LOG_DIR_ENV = 'PANTILTHAT_LOG_DIR'


class Logger(metaclass=Singleton):
    """A singleton logger class for setting up logging handlers."""

    def __init__(self):
        """Initialize the logger with file and stream handlers."""
        logs_folder = Path(os.environ.get(LOG_DIR_ENV, 'logs'))
        logs_folder.mkdir(parents=True, exist_ok=True)

        # file handler receives everything the logger lets through
        self.logging_file_handler = logging.FileHandler(logs_folder / (PANTILT + '.log'))

        # console handler is only attached on request (CLI)
        self.logging_stream_handler = logging.StreamHandler()

        formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
        self.logging_file_handler.setFormatter(formatter)
        self.logging_stream_handler.setFormatter(formatter)

    def setup_logger(self, logger_name=None, enable_stream_handler=False):
        """Set up a logger with the given name and return it.

        Args:
            logger_name (str, optional): Name of the logger. Defaults to None.
            enable_stream_handler (bool): Whether to add the stream handler for console output. Defaults to False.

        Returns:
            logging.Logger: The configured logger.
        """
        if not logger_name:
            logger_name = PANTILT
        else:
            logger_name = PANTILT + ' ' + logger_name

        logger = logging.getLogger(f"{logger_name:<24}")

        logger.setLevel(logging.INFO)

        if self.logging_file_handler not in logger.handlers:
            logger.addHandler(self.logging_file_handler)
        if enable_stream_handler and self.logging_stream_handler not in logger.handlers:
            logger.addHandler(self.logging_stream_handler)

        return logger

    def set_level(self, level: int) -> None:
        """Change the level of every logger created through this class."""
        for name, logger in logging.Logger.manager.loggerDict.items():
            if isinstance(logger, logging.Logger) and name.startswith(PANTILT):
                logger.setLevel(level)

    def enable_console(self) -> None:
        """Attach the console handler to every logger created through this class."""
        for name, logger in logging.Logger.manager.loggerDict.items():
            if isinstance(logger, logging.Logger) and name.startswith(PANTILT):
                if self.logging_stream_handler not in logger.handlers:
                    logger.addHandler(self.logging_stream_handler)
