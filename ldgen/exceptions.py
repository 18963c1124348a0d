#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""ldgen exception classes.

This module defines the exception hierarchy used throughout the ldgen library
for consistent error handling and reporting.
"""

from typing import Optional

#######################################################################
# # Linker script generator exceptions
#######################################################################


class LDGenError(Exception):
    """Linker script generator base exception.

    All ldgen-specific exceptions inherit from this class, so callers driving
    a batch of devices can catch a single type per device pass.

    :cvar fmt: Default error message format template.
    """

    fmt = "LDGEN: {description}"

    def __init__(self, desc: Optional[str] = None) -> None:
        """Initialize the base ldgen exception.

        :param desc: Optional description of the exception.
        """
        super().__init__()
        self.description = desc

    def __str__(self) -> str:
        return self.fmt.format(description=self.description or "Unknown Error")


class LDGenKeyError(LDGenError, KeyError):
    """Missing or unknown key, e.g. an unknown enumeration label."""


class LDGenValueError(LDGenError, ValueError):
    """Invalid value, e.g. an address range whose end lies below its start."""


class LDGenTypeError(LDGenError, TypeError):
    """Value of unexpected type."""


class LDGenIOError(LDGenError, IOError):
    """The output sink could not be written."""


class LDGenParsingError(LDGenError):
    """Textual input (typically an address) could not be decoded."""
