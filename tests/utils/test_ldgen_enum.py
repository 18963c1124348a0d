#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Tests of ldgen enumeration."""

import pytest

from ldgen.exceptions import LDGenKeyError, LDGenTypeError
from ldgen.linker.region import Kseg, RegionType
from ldgen.utils.ldgen_enum import LDGenEnum


class SampleEnum(LDGenEnum):
    """Enum used by the tests."""

    FIRST = (1, "first", "First member")
    SECOND = (2, "second")


def test_comparison() -> None:
    assert SampleEnum.FIRST == 1
    assert SampleEnum.FIRST == "first"
    assert SampleEnum.FIRST != SampleEnum.SECOND
    assert SampleEnum.SECOND.description is None
    assert len({SampleEnum.FIRST, SampleEnum.FIRST, SampleEnum.SECOND}) == 2


def test_lookup() -> None:
    assert SampleEnum.from_tag(2) is SampleEnum.SECOND
    assert SampleEnum.from_label("FIRST") is SampleEnum.FIRST
    assert SampleEnum.from_attr("second") is SampleEnum.SECOND
    assert SampleEnum.from_attr(1) is SampleEnum.FIRST
    assert SampleEnum.labels() == ["first", "second"]
    assert SampleEnum.tags() == [1, 2]


def test_lookup_failure() -> None:
    with pytest.raises(LDGenKeyError):
        SampleEnum.from_tag(3)
    with pytest.raises(LDGenKeyError):
        SampleEnum.from_label("third")
    assert not SampleEnum.contains("third")
    assert SampleEnum.contains(2)
    with pytest.raises(LDGenTypeError):
        SampleEnum.contains(1.5)  # type: ignore[arg-type]


def test_region_types() -> None:
    assert RegionType.from_label("SRAM") == RegionType.SRAM
    assert "peripheral" in RegionType.labels()


def test_kseg_bases() -> None:
    assert Kseg.tags() == [0x8000_0000, 0xA000_0000, 0xC000_0000, 0xE000_0000]
    assert Kseg.KSEG1.overlay(0x9D00_0000) == 0xBD00_0000
