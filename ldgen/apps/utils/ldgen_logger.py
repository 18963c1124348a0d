#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Logging setup of ldgen applications: colored console output and a debug log file."""

import logging
import logging.config
import logging.handlers
import os
import platform
import re
import sys
from datetime import datetime
from typing import Optional, TextIO

import colorama

from ldgen import LDGEN_DEBUG, LDGEN_DEBUG_LOG_FILE, LDGEN_DEBUG_LOGGING_DISABLED, __version__
from ldgen.utils.misc import find_file, load_configuration

colorama.just_fix_windows_console()

ANSI_ESCAPE = re.compile(r"\x1b\[\d{1,3}m")
DEBUG_LOG_MAX_BYTES = 1_000_000
DEBUG_LOG_BACKUP_COUNT = 5


def load_logging_config() -> Optional[str]:
    """Apply user logging configuration (``logging.yaml`` in ``~/.ldgen``), if present.

    :return: Path of the applied configuration or None.
    """
    config_file = find_file(
        "logging.yaml",
        use_cwd=False,
        search_paths=[os.path.expanduser("~/.ldgen")],
        raise_exc=False,
    )
    if not config_file:
        return None
    logging.config.dictConfig(load_configuration(config_file))
    return config_file


class ColoredFormatter(logging.Formatter):
    """Formatter coloring records by level; debug records carry source location and time."""

    FORMAT = logging.BASIC_FORMAT
    FORMAT_DEBUG = FORMAT + " (%(relativeCreated)dms since start, %(filename)s:%(lineno)d)"

    LEVEL_STYLES = {
        logging.DEBUG: (colorama.Fore.BLUE, FORMAT_DEBUG),
        logging.INFO: (colorama.Fore.WHITE + colorama.Style.BRIGHT, FORMAT),
        logging.WARNING: (colorama.Fore.YELLOW, FORMAT_DEBUG),
        logging.ERROR: (colorama.Fore.RED, FORMAT_DEBUG),
        logging.CRITICAL: (colorama.Fore.RED + colorama.Style.BRIGHT, FORMAT_DEBUG),
    }

    def __init__(self, colored: bool = True) -> None:
        """Create the formatter.

        :param colored: Put ANSI colors into the output.
        """
        super().__init__()
        self.colored = colored
        self.formatters: dict[int, logging.Formatter] = {}
        for level, (color, fmt) in self.LEVEL_STYLES.items():
            if colored:
                fmt = color + fmt + colorama.Style.RESET_ALL
            self.formatters[level] = logging.Formatter(fmt)

    def format(self, record: logging.LogRecord) -> str:
        """Format the record with the format of its level.

        :param record: Input logging record to print.
        :return: Formatted logging string.
        """
        formatter = self.formatters.get(record.levelno, logging.Formatter(self.FORMAT))
        if not self.colored and isinstance(record.msg, str):
            record.msg = ANSI_ESCAPE.sub("", record.msg)
        return formatter.format(record)


def _has_debug_handler(logger: logging.Logger) -> bool:
    return any(
        isinstance(handler, logging.handlers.RotatingFileHandler)
        and handler.baseFilename == os.path.abspath(LDGEN_DEBUG_LOG_FILE)
        for handler in logger.handlers
    )


def _install_debug_handler(logger: logging.Logger) -> None:
    if _has_debug_handler(logger):
        return
    try:
        os.makedirs(os.path.dirname(LDGEN_DEBUG_LOG_FILE), exist_ok=True)
        debug_handler = logging.handlers.RotatingFileHandler(
            LDGEN_DEBUG_LOG_FILE,
            mode="a",
            maxBytes=DEBUG_LOG_MAX_BYTES,
            backupCount=DEBUG_LOG_BACKUP_COUNT,
            encoding="utf-8",
        )
    except OSError as exc:
        logger.warning(f"Failed to initialize debug logging: {exc}")
        return
    debug_handler.setFormatter(ColoredFormatter(colored=False))
    debug_handler.setLevel(logging.DEBUG)
    logger.addHandler(debug_handler)

    starter = f"* LDGEN DEBUG LOGGING STARTED {datetime.now().strftime('%Y-%m-%d %H:%M:%S')} *"
    padding = len(starter) - 2
    logger.debug("*" * len(starter))
    logger.debug(starter)
    logger.debug(f"* ldgen version: {__version__}".ljust(padding) + " *")
    logger.debug(f"* Python version: {sys.version.split()[0]}".ljust(padding) + " *")
    logger.debug(f"* OS version: {platform.platform()}".ljust(padding) + " *")
    logger.debug(f"* Last command: {sys.argv}".ljust(padding) + " *")
    logger.debug("*" * len(starter))


def install(
    level: Optional[int] = None,
    stream: TextIO = sys.stderr,
    colored: Optional[bool] = None,
    logger: Optional[logging.Logger] = None,
    create_debug_logger: bool = True,
) -> None:
    """Install ldgen log handlers.

    :param level: Console logging level, defaults to logging.WARNING (DEBUG with LDGEN_DEBUG set)
    :param stream: Stream to output logging, defaults to sys.stderr
    :param colored: Force colored output on or off; by default colors are used on a console
    :param logger: Logger to install the handlers to, defaults to the "ldgen" logger
    :param create_debug_logger: Also log everything into the debug log file
    """
    target_logger = logger or logging.getLogger("ldgen")
    target_logger.setLevel(logging.DEBUG)

    if colored is None:
        # See https://no-color.org/
        colored = "NO_COLOR" not in os.environ and hasattr(stream, "isatty") and stream.isatty()

    handler = logging.StreamHandler(stream)
    handler.setLevel(level or (logging.DEBUG if LDGEN_DEBUG else logging.WARNING))
    handler.setFormatter(ColoredFormatter(colored))
    target_logger.addHandler(handler)

    if create_debug_logger and not LDGEN_DEBUG_LOGGING_DISABLED:
        _install_debug_handler(target_logger)

    config_file = load_logging_config()
    if config_file:
        target_logger.debug(f"Logging config loaded from {config_file}")
