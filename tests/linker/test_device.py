#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Tests of target device loading."""

import os

import pytest

from ldgen.exceptions import LDGenError, LDGenParsingError
from ldgen.linker.device import Architecture, ConfigRegister, TargetDevice
from ldgen.linker.region import RegionType
from ldgen.utils.config import Config


def test_load_from_file(data_dir: str) -> None:
    device = TargetDevice.load_from_file(os.path.join(data_dir, "pic32mx795f512l.yaml"))
    assert device.name == "PIC32MX795F512L"
    assert device.architecture == Architecture.MIPS32
    assert device.is_mips32
    assert device.subfamily == "PIC32MX"
    assert [region.region_type for region in device.regions] == [
        RegionType.BOOT,
        RegionType.CODE,
        RegionType.SRAM,
        RegionType.PERIPHERAL,
        RegionType.UNSPECIFIED,
    ]
    assert device.interrupts.last_vector_number == 63
    assert device.config_registers[1] == ConfigRegister("DEVCFG0", 0x1FC0_2FFC)
    assert device.config_registers[1].region_name == "config_DEVCFG0"


def test_load_minimal_config() -> None:
    """Optional blocks fall back to defaults."""
    config = Config(
        {
            "device": "same70q21b",
            "architecture": "CORTEX-M",
            "regions": [{"name": "IFLASH", "type": "code", "begin": 0x40_0000, "end": 0x60_0000}],
        }
    )
    config.check(TargetDevice.get_validation_schemas())
    device = TargetDevice.load_from_config(config)
    assert device.name == "SAME70Q21B"
    assert device.architecture == Architecture.CORTEX_M
    assert not device.is_mips32
    assert device.subfamily == ""
    assert device.config_registers == []
    assert device.interrupts.last_vector_number == 0
    assert "SAME70Q21B (cortex-m" in str(device)


def test_malformed_address() -> None:
    config = Config(
        {
            "device": "PIC32MX110F016B",
            "architecture": "mips32",
            "regions": [{"name": "code", "type": "code", "begin": "0x1D00G000", "end": 0}],
        }
    )
    with pytest.raises(LDGenParsingError, match="begin_addr"):
        TargetDevice.load_from_config(config)


def test_malformed_config_register_address() -> None:
    config = Config(
        {
            "device": "PIC32MX110F016B",
            "architecture": "mips32",
            "regions": [{"name": "code", "type": "code", "begin": 0x1D00_0000, "end": 0x1D00_4000}],
            "config_registers": [{"name": "DEVCFG0", "address": "0x1FC00BFG"}],
        }
    )
    with pytest.raises(LDGenParsingError, match="'DEVCFG0': cannot decode address"):
        TargetDevice.load_from_config(config)


@pytest.mark.parametrize(
    "config",
    [
        {"architecture": "mips32", "regions": [{"name": "a", "begin": 0, "end": 1}]},
        {"device": "X", "architecture": "mips32"},
        {"device": "X", "architecture": "mips32", "regions": [{"name": "a", "begin": 0}]},
        {
            "device": "X",
            "architecture": "mips32",
            "regions": [{"name": "a", "type": "flash", "begin": 0, "end": 1}],
        },
        {
            "device": "X",
            "architecture": "mips32",
            "regions": [{"name": "a", "begin": "0xKK", "end": 1}],
        },
    ],
)
def test_schema_validation(config: dict) -> None:
    with pytest.raises(LDGenError, match="Configuration validation failed"):
        Config(config).check(TargetDevice.get_validation_schemas())
