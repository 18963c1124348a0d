#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Tests of configuration access."""

import os

import pytest

from ldgen.exceptions import LDGenError
from ldgen.utils.config import Config
from ldgen.utils.misc import write_file


@pytest.fixture
def config() -> Config:
    return Config(
        {
            "device": "PIC32MX795F512L",
            "regions": [
                {"name": "boot", "begin": "0x1FC00000", "end": 0x1FC0_2FF0},
                {"name": "code", "begin": "0x1D000000", "end": "0x1D080000"},
            ],
            "interrupts": {"variable_offsets": "true", "last_vector_number": "63"},
        }
    )


def test_nested_access(config: Config) -> None:
    assert config["regions/1/name"] == "code"
    assert config.get("regions/5/name") is None
    assert config.get("interrupts/missing", "default") == "default"
    assert config.get_int("regions/0/end") == 0x1FC0_2FF0
    assert config.get_int("regions/0/begin") == 0x1FC0_0000
    assert config.get_int("interrupts/last_vector_number") == 63
    assert config.get_bool("interrupts/variable_offsets")
    assert config.get_str("device") == "PIC32MX795F512L"


def test_missing_values(config: Config) -> None:
    with pytest.raises(LDGenError):
        config.get_int("interrupts/default_base_address")
    with pytest.raises(LDGenError):
        config.get_str("subfamily")
    with pytest.raises(LDGenError):
        config.get_list_of_configs("config_registers")
    assert config.get_int("interrupts/default_base_address", 0) == 0
    assert config.get_str("subfamily", "") == ""
    assert config.get_list_of_configs("config_registers", []) == []


def test_sub_configs(config: Config) -> None:
    regions = config.get_list_of_configs("regions")
    assert [region.get_str("name") for region in regions] == ["boot", "code"]
    interrupts = config.get_config("interrupts")
    assert isinstance(interrupts, Config)
    assert interrupts.get_int("last_vector_number") == 63
    assert config.get_list("regions")[0]["name"] == "boot"
    with pytest.raises(LDGenError):
        config.get_list("device")


def test_create_from_file(tmpdir: str) -> None:
    path = os.path.join(tmpdir, "device.yaml")
    write_file("device: SAME70Q21B\narchitecture: cortex-m\n", path)
    config = Config.create_from_file(path)
    assert config.get_str("architecture") == "cortex-m"
    assert config.config_name == "device.yaml"
    assert config.config_dir == os.path.abspath(tmpdir).replace("\\", "/")
    assert config.search_paths == [config.config_dir]
