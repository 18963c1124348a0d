#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Pytest fixtures shared by the ldgen test suite."""

import logging
import os
from typing import Any

import pytest

# Must be set before ldgen is imported
os.environ["LDGEN_DEBUG_LOGGING_DISABLED"] = "True"

from tests.cli_runner import CliRunner  # noqa: E402  # pylint: disable=wrong-import-position


@pytest.fixture
def cli_runner() -> CliRunner:
    """Get CLI runner instance for testing.

    :return: CliRunner instance for testing CLI commands.
    """
    return CliRunner()


@pytest.fixture(scope="module")
def data_dir(request: Any) -> str:
    """Get test data directory path for the current test module.

    The directory is the 'data' folder located alongside the test file.

    :param request: Pytest request fixture containing test execution context.
    :return: Absolute path to the test data directory.
    """
    data_path = os.path.join(os.path.dirname(request.fspath), "data")
    logging.debug(f"data_dir: {data_path}")
    return data_path


@pytest.fixture
def tests_root_dir() -> str:
    """Get the root directory of tests."""
    return os.path.dirname(os.path.abspath(__file__))
