#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""ldgen - linker script MEMORY layout generator for microcontrollers.

The package computes the memory regions (address ranges, access permissions
and names) a linker needs to place code and data on a target device and
renders them as a linker script MEMORY command.

Two target architectures are supported:
    - MIPS32 (PIC32) devices with kernel segment address views
    - ARM Cortex-M devices with a flat address space
"""

import os
from typing import Optional, Union

from packaging.version import Version, parse
from platformdirs import PlatformDirs

from .__version__ import __version__ as _ldgen_version


def get_ldgen_version() -> Version:
    """Get ldgen version information.

    :return: Parsed version object.
    """
    return parse(_ldgen_version)


def value_to_bool(value: Optional[Union[bool, int, str]]) -> bool:
    """Convert value to boolean from various input formats.

    Supports conversion from string representations like "True", "true", "T", "1"
    and standard Python truthy/falsy values for other types.

    :param value: Value to convert to boolean (string, int, bool, or None).
    :return: Boolean representation of the input value.
    """
    if isinstance(value, str):
        return value in ("True", "true", "T", "1")
    return bool(value)


version = get_ldgen_version()

__author__ = "NXP"
__license__ = "BSD-3-Clause"
__version__ = str(version)

LDGEN_VERSION_BASE = version.base_version

LDGEN_DATA_FOLDER = os.environ.get("LDGEN_DATA_FOLDER") or os.path.join(
    os.path.dirname(os.path.abspath(__file__)), "data"
)
LDGEN_PLATFORM_DIRS = PlatformDirs(
    appauthor="nxp",
    appname="ldgen",
    version=LDGEN_VERSION_BASE,
)

LDGEN_DEBUG = value_to_bool(os.environ.get("LDGEN_DEBUG"))

LDGEN_DEBUG_LOGGING_DISABLED = value_to_bool(os.environ.get("LDGEN_DEBUG_LOGGING_DISABLED"))
LDGEN_DEBUG_LOG_FILE = os.environ.get(
    "LDGEN_DEBUG_LOG_FILE", os.path.join(LDGEN_PLATFORM_DIRS.user_log_dir, "debug.log")
)
