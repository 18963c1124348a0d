#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Target device description consumed by the linker script generator.

The description carries exactly what the device database would deliver: the
architecture, the subfamily, raw memory regions with decoded addresses, interrupt
metadata and device configuration registers.
"""

import logging
from dataclasses import dataclass, field
from typing import Any

from typing_extensions import Self

from ldgen.exceptions import LDGenError, LDGenParsingError
from ldgen.linker.region import AccessFlags, MemoryRegion, RegionType
from ldgen.linker.vectors import InterruptVectorTable
from ldgen.utils.config import Config
from ldgen.utils.ldgen_enum import LDGenEnum
from ldgen.utils.misc import value_to_int
from ldgen.utils.schema_validator import get_schema_file

logger = logging.getLogger(__name__)


class Architecture(LDGenEnum):
    """Target CPU architecture."""

    MIPS32 = (0, "mips32", "MIPS32 with kernel segment address views (PIC32MX/MM/MK/MZ)")
    CORTEX_M = (1, "cortex-m", "ARM Cortex-M with flat address space")


@dataclass(frozen=True)
class ConfigRegister:
    """Device configuration register (fuse word) at a physical address."""

    name: str
    address: int

    @property
    def region_name(self) -> str:
        """Name of the memory region and section holding the register."""
        return f"config_{self.name}"

    @classmethod
    def load_from_config(cls, config: Config) -> Self:
        """Create configuration register from its configuration block.

        :param config: Block with ``name`` and ``address``.
        :raises LDGenParsingError: The address cannot be decoded.
        :return: Configuration register.
        """
        name = config.get_str("name")
        value = config["address"]
        try:
            address = value_to_int(value)
        except LDGenError as exc:
            raise LDGenParsingError(
                f"Configuration register '{name}': cannot decode address value '{value}'"
            ) from exc
        return cls(name=name, address=address)


@dataclass
class TargetDevice:
    """Device for which a linker script is generated."""

    name: str
    architecture: Architecture
    subfamily: str = ""
    regions: list[MemoryRegion] = field(default_factory=list)
    interrupts: InterruptVectorTable = field(default_factory=InterruptVectorTable)
    config_registers: list[ConfigRegister] = field(default_factory=list)

    def __str__(self) -> str:
        return (
            f"{self.name} ({self.architecture.label}, subfamily '{self.subfamily}', "
            f"{len(self.regions)} regions)"
        )

    @property
    def is_mips32(self) -> bool:
        """The device uses MIPS32 kernel segments."""
        return self.architecture == Architecture.MIPS32

    @staticmethod
    def get_validation_schemas() -> list[dict[str, Any]]:
        """Get validation schemas of device configuration.

        :return: List of validation schemas.
        """
        sch = get_schema_file("device")
        return [sch["device"], sch["regions"], sch["interrupts"], sch["config_registers"]]

    @classmethod
    def load_from_config(cls, config: Config) -> Self:
        """Create device from a validated configuration.

        :param config: Device configuration.
        :return: Target device.
        """
        regions = [
            MemoryRegion.from_descriptor(
                name=region_cfg.get_str("name"),
                access=AccessFlags.NONE,
                begin_addr=region_cfg["begin"],
                end_addr=region_cfg["end"],
                region_type=RegionType.from_label(region_cfg.get_str("type", "unspecified")),
            )
            for region_cfg in config.get_list_of_configs("regions")
        ]
        config_registers = [
            ConfigRegister.load_from_config(reg_cfg)
            for reg_cfg in config.get_list_of_configs("config_registers", [])
        ]
        interrupts = (
            InterruptVectorTable.load_from_config(config.get_config("interrupts"))
            if "interrupts" in config
            else InterruptVectorTable()
        )
        device = cls(
            name=config.get_str("device").upper(),
            architecture=Architecture.from_label(config.get_str("architecture")),
            subfamily=config.get_str("subfamily", ""),
            regions=regions,
            interrupts=interrupts,
            config_registers=config_registers,
        )
        logger.debug(f"Loaded device {device}")
        return device

    @classmethod
    def load_from_file(cls, path: str) -> Self:
        """Load, validate and create device from configuration file.

        :param path: Path to YAML/JSON device configuration.
        :return: Target device.
        """
        config = Config.create_from_file(path)
        config.check(cls.get_validation_schemas())
        return cls.load_from_config(config)
