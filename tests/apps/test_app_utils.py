#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Tests of ldgen application utilities."""

import io
import logging

import click
import pytest

from ldgen.apps.utils import ldgen_logger
from ldgen.apps.utils.utils import INT, LDGenAppError, catch_ldgen_error
from ldgen.exceptions import LDGenError, LDGenValueError


@pytest.mark.parametrize(
    "exception,exit_code",
    [
        (LDGenAppError("app failure"), 1),
        (LDGenAppError("app failure", error_code=5), 5),
        (LDGenAppError(error_code=300), 1),
        (LDGenError("generic"), 2),
        (LDGenValueError("inverted"), 2),
        (AssertionError(), 2),
        (ValueError("other"), 3),
        (KeyboardInterrupt(), 3),
    ],
)
def test_catch_ldgen_error(exception: BaseException, exit_code: int) -> None:
    """Exceptions are turned into process exit codes.

    :param exception: Exception raised by the wrapped function.
    :param exit_code: Expected exit code.
    """

    @catch_ldgen_error
    def failing() -> None:
        raise exception

    with pytest.raises(SystemExit) as exc:
        failing()
    assert exc.value.code == exit_code


def test_catch_ldgen_error_passes_result() -> None:
    @catch_ldgen_error
    def working() -> int:
        return 42

    assert working() == 42


@pytest.mark.parametrize(
    "value,expected",
    [("10", 10), ("0x10", 16), ("0b101", 5), ("0o17", 15), ("0x1FC0_0000", 0x1FC0_0000)],
)
def test_int_param(value: str, expected: int) -> None:
    assert INT().convert(value) == expected


def test_int_param_invalid() -> None:
    with pytest.raises(click.BadParameter):
        INT().convert("ten")


def test_logger_install() -> None:
    logger = logging.getLogger("ldgen.test_logger_install")
    logger.propagate = False
    stream = io.StringIO()
    ldgen_logger.install(
        level=logging.INFO, stream=stream, colored=False, logger=logger, create_debug_logger=False
    )
    logger.debug("hidden message")
    logger.info("visible message")
    logger.warning("warning message")
    output = stream.getvalue()
    assert "hidden message" not in output
    assert "INFO:ldgen.test_logger_install:visible message" in output
    assert "warning message (" in output
    assert "\x1b[" not in output


def test_colored_formatter() -> None:
    record = logging.LogRecord("ldgen", logging.ERROR, __file__, 1, "failure", None, None)
    assert ldgen_logger.ColoredFormatter(colored=True).format(record).startswith("\x1b[")
    record = logging.LogRecord("ldgen", logging.ERROR, __file__, 1, "\x1b[31mfailure", None, None)
    assert ldgen_logger.ColoredFormatter(colored=False).format(record).startswith("ERROR:")
