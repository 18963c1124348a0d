#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Tests of exception memory region computation."""

import pytest

from ldgen.linker.vectors import (
    DEFAULT_EBASE_ADDRESS,
    EXCEPTION_REGION_NAME,
    InterruptVectorTable,
    exception_region,
)
from ldgen.utils.config import Config


@pytest.mark.parametrize(
    "last_vector_number,length",
    [
        (0, 0x220),
        (63, 0xA00),
        (190, 0x200 + 32 * 191),
    ],
)
def test_exception_region_length(last_vector_number: int, length: int) -> None:
    """Exception memory holds the fixed entry points and one slot per vector.

    :param last_vector_number: Number of the last vector.
    :param length: Expected region length.
    """
    region = exception_region(0, last_vector_number, False, False)
    assert region is not None
    assert region.name == EXCEPTION_REGION_NAME
    assert region.start == DEFAULT_EBASE_ADDRESS
    assert region.length == length


def test_exception_region_custom_base() -> None:
    region = exception_region(0x9FC0_1000, 0, False, False)
    assert region is not None
    assert region.start == 0x9FC0_1000


@pytest.mark.parametrize(
    "variable_offsets,excluded",
    [(True, False), (False, True), (True, True)],
)
def test_no_exception_region(variable_offsets: bool, excluded: bool) -> None:
    assert exception_region(0, 63, variable_offsets, excluded) is None


@pytest.mark.parametrize(
    "subfamily,expected",
    [("PIC32MX", True), ("pic32mm", False), ("PIC32MM", False), ("", True)],
)
def test_vector_table_subfamily(subfamily: str, expected: bool) -> None:
    table = InterruptVectorTable(last_vector_number=63)
    assert (table.get_exception_region(subfamily) is not None) == expected


def test_vector_table_from_config() -> None:
    table = InterruptVectorTable.load_from_config(
        Config({"default_base_address": "0x9FC01000", "last_vector_number": 75})
    )
    assert table.base_address == 0x9FC0_1000
    assert table.last_vector_number == 75
    assert not table.uses_variable_offsets

    table = InterruptVectorTable.load_from_config(Config({"variable_offsets": True}))
    assert table.base_address == DEFAULT_EBASE_ADDRESS
    assert table.get_exception_region("PIC32MZ") is None
