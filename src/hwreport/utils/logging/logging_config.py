# Copyright (C) 2025 Intel Corporation
# SPDX-License-Identifier: Apache-2.0

"""
Logging configuration utilities.

This module provides centralized logging configuration, including console
and file handler management and log level configuration.
"""

import logging
import os
import sys
from typing import Optional

# Default logging format
DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s:%(lineno)d - %(levelname)s - %(message)s"
# Simple message-only format for regular console output
MESSAGE_ONLY_FORMAT = "%(message)s"

CONSOLE_HANDLER_NAME = "hwreport.console"


def configure_logging(verbose: bool = False, debug: bool = False) -> None:
    """
    Configure logging level based on verbose and debug flags.

    Args:
        verbose: Whether to display INFO level logs
        debug: Whether to display DEBUG level logs

    Note:
        By default only warnings and errors reach the console so that the
        report itself stays readable.
    """
    # Remove existing file handlers to avoid duplicates
    remove_log_handlers()

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    # Rebind the console handler to the current stdout
    for handler in list(root_logger.handlers):
        if handler.get_name() == CONSOLE_HANDLER_NAME:
            root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.set_name(CONSOLE_HANDLER_NAME)
    console_handler.setFormatter(logging.Formatter(MESSAGE_ONLY_FORMAT))
    if debug:
        console_handler.setLevel(logging.DEBUG)
    elif verbose:
        console_handler.setLevel(logging.INFO)
    else:
        console_handler.setLevel(logging.WARNING)
    root_logger.addHandler(console_handler)


def remove_log_handlers() -> None:
    """
    Remove all file handlers from the root logger to avoid duplicates when reconfiguring.
    """
    root_logger = logging.getLogger()
    handlers_to_remove = []

    for handler in root_logger.handlers:
        if isinstance(handler, logging.FileHandler):
            handlers_to_remove.append(handler)

    for handler in handlers_to_remove:
        root_logger.removeHandler(handler)
        handler.close()


def add_file_log_handler(log_file: str) -> None:
    """
    Add a file handler writing DEBUG logs to the given file.

    Args:
        log_file: Path of the log file, overwritten on each run
    """
    log_dir = os.path.dirname(os.path.abspath(log_file))
    os.makedirs(log_dir, exist_ok=True)

    file_handler = logging.FileHandler(log_file, mode="w")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(DEFAULT_LOG_FORMAT))

    logging.getLogger().addHandler(file_handler)


def setup_command_logging(verbose: bool = False, debug: bool = False, log_file: Optional[str] = None) -> None:
    """
    Set up logging for a command with console and optional file output.

    Args:
        verbose: Whether to enable verbose console output
        debug: Whether to enable debug console output
        log_file: Optional path of a log file
    """
    configure_logging(verbose=verbose, debug=debug)

    if log_file:
        add_file_log_handler(log_file)


def log_system_info() -> None:
    """
    Log interpreter and platform details for debugging purposes.
    """
    logger = logging.getLogger(__name__)

    import platform

    logger.debug(f"Python version: {sys.version}")
    logger.debug(f"Platform: {platform.platform()}")
    logger.debug(f"Architecture: {platform.machine()}")


def cleanup_logging() -> None:
    """
    Clean up logging handlers on application exit.
    """
    remove_log_handlers()
