#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""ldgen application utilities: application error, integer parameter and error handling."""

import logging
import sys
from functools import wraps
from typing import Any, Callable, Optional

import click

from ldgen import LDGEN_DEBUG_LOG_FILE, LDGEN_DEBUG_LOGGING_DISABLED
from ldgen.exceptions import LDGenError
from ldgen.utils.misc import value_to_int

logger = logging.getLogger(__name__)


class LDGenAppError(LDGenError):
    """Non-fatal error of a command line application with its own exit code."""

    fmt = "{description}"

    def __init__(self, desc: Optional[str] = None, error_code: int = 1) -> None:
        """Initialize the application error.

        :param desc: Description to print out on command line, defaults to None
        :param error_code: Error code passed to OS, defaults to 1
        """
        super().__init__(desc)
        self.description = desc
        self.error_code = error_code


class INT(click.ParamType):
    """Click parameter accepting integers in decimal, hex (0x), octal (0o) or binary (0b) form."""

    name = "integer"

    def convert(
        self,
        value: Any,
        param: Optional[click.Parameter] = None,
        ctx: Optional[click.Context] = None,
    ) -> int:
        """Perform the conversion str -> int.

        :param value: value to convert
        :param param: Click parameter, defaults to None
        :param ctx: Click context, defaults to None
        :return: value as integer
        """
        try:
            return value_to_int(value)
        except LDGenError:
            self.fail(f"{value!r} is not a valid integer", param, ctx)


def catch_ldgen_error(function: Callable) -> Callable:
    """Catch and handle LDGenError and other exceptions.

    LDGenAppError exits with its own error code, LDGenError and AssertionError with
    code 2 and any other exception with code 3. Details are put into the debug log.

    :param function: The function to be decorated.
    :return: The decorated function.
    """

    @wraps(function)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            retval = function(*args, **kwargs)
            return retval
        except LDGenAppError as app_exc:
            if app_exc.description:
                click.echo(f"{app_exc.__class__.__name__}: {app_exc}", err=True)
            if 0 < app_exc.error_code < 256:
                sys.exit(app_exc.error_code)
            sys.exit(1)
        except (AssertionError, LDGenError) as ldgen_exc:
            click.echo(f"{ldgen_exc.__class__.__name__}: {ldgen_exc}", err=True)
            logger.debug(str(ldgen_exc), exc_info=True)
            if not LDGEN_DEBUG_LOGGING_DISABLED:
                click.secho(
                    f"See debug log file: {LDGEN_DEBUG_LOG_FILE} for more info", fg="yellow"
                )
            sys.exit(2)
        except (Exception, KeyboardInterrupt) as base_exc:  # pylint: disable=broad-except
            click.echo(f"GENERAL ERROR: {type(base_exc).__name__}: {base_exc}", err=True)
            logger.debug(str(base_exc), exc_info=True)
            if not LDGEN_DEBUG_LOGGING_DISABLED:
                click.secho(
                    f"See debug log file: {LDGEN_DEBUG_LOG_FILE} for more info.", fg="yellow"
                )
            sys.exit(3)

    return wrapper
