#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Linker script memory layout generator.

One generation pass takes a :class:`TargetDevice`, turns its raw regions into the
regions the linker script needs (using the strategy of the device architecture),
sorts them by address and renders them. Every pass owns its own catalog, so a
failure for one device never affects another.
"""

import logging
import os
from typing import Callable, Optional

from ldgen.linker.boot_layout import is_reset_boot_region, layout_boot_regions
from ldgen.linker.catalog import RegionCatalog
from ldgen.linker.device import Architecture, TargetDevice
from ldgen.linker.region import AccessFlags, MemoryRegion, RegionType
from ldgen.linker.renderer import render_linker_script, write_linker_script

logger = logging.getLogger(__name__)

CONFIG_REGISTER_SIZE = 4

RegionStrategy = Callable[[TargetDevice], RegionCatalog]


def _mips32_region(region: MemoryRegion) -> list[MemoryRegion]:
    """Map one raw MIPS32 region to the regions of the linker script."""
    name = region.name.lower()
    if region.region_type == RegionType.BOOT:
        if is_reset_boot_region(region):
            return layout_boot_regions(region)
        return [region.to_kseg1()]
    if region.region_type == RegionType.CODE:
        if name == "code":
            return [
                region.with_name("kseg0_program_mem")
                .with_access(AccessFlags.READ | AccessFlags.EXECUTE)
                .to_kseg0()
            ]
        return []
    if region.region_type == RegionType.SRAM:
        data_access = AccessFlags.WRITE | AccessFlags.NOT_EXECUTABLE
        if name == "kseg0_data_mem":
            return [region.with_access(data_access).to_kseg0()]
        if name == "kseg1_data_mem":
            return [region.with_access(data_access).to_kseg1()]
        return []
    if region.region_type in (RegionType.EBI, RegionType.SQI):
        return [
            region.with_name(f"kseg2_{region.name}").to_kseg2(),
            region.with_name(f"kseg3_{region.name}").to_kseg3(),
        ]
    if region.region_type == RegionType.SDRAM:
        return [region.to_kseg0()]
    if region.region_type in (RegionType.FUSE, RegionType.PERIPHERAL):
        return [region.to_kseg1()]
    return []


def mips32_regions(device: TargetDevice) -> RegionCatalog:
    """Create the regions of a MIPS32 (PIC32) device.

    Boot flash at the reset address is split according to the device family, other
    regions are placed into the kernel segment the linker script uses for them.
    Exception memory and one region per configuration register are appended.

    :param device: Target device.
    :return: Unsorted catalog.
    """
    catalog = RegionCatalog()
    for region in device.regions:
        mapped = _mips32_region(region)
        if not mapped:
            logger.debug(f"Region {region.name} ({region.region_type.label}) is not used")
        catalog.extend(mapped)

    exception_mem = device.interrupts.get_exception_region(device.subfamily)
    if exception_mem:
        catalog.add(exception_mem)

    # Each configuration register has its own region, so the values given in code
    # are placed exactly at the register.
    for register in device.config_registers:
        catalog.add(
            MemoryRegion.from_bounds(
                register.region_name,
                0,
                register.address,
                register.address + CONFIG_REGISTER_SIZE,
                RegionType.FUSE,
            ).to_kseg1()
        )
    return catalog


# Cortex-M regions used by the linker script: database name -> (linker name, access)
CORTEX_M_NAMED_REGIONS: dict[RegionType, dict[str, tuple[str, AccessFlags]]] = {
    RegionType.CODE: {
        "iflash": ("rom", AccessFlags.READ | AccessFlags.EXECUTE),
        "itcm": ("itcm", AccessFlags.ALL),
    },
    RegionType.SRAM: {
        "iram": ("ram", AccessFlags.ALL),
        "hsram": ("ram", AccessFlags.ALL),
        "dtcm": ("dtcm", AccessFlags.ALL),
    },
}


def cortex_m_regions(device: TargetDevice) -> RegionCatalog:
    """Create the regions of an ARM Cortex-M device.

    Regions are renamed to the names the linker script expects; the address space
    is flat, so addresses are used as they are.

    :param device: Target device.
    :return: Unsorted catalog.
    """
    catalog = RegionCatalog()
    for region in device.regions:
        if region.region_type in CORTEX_M_NAMED_REGIONS:
            known = CORTEX_M_NAMED_REGIONS[region.region_type].get(region.name.lower())
            if known:
                name, access = known
                catalog.add(region.with_name(name).with_access(access))
                continue
        elif region.region_type in (RegionType.EBI, RegionType.SQI, RegionType.SDRAM):
            catalog.add(region.with_name(region.name.lower()))
            continue
        logger.debug(f"Region {region.name} ({region.region_type.label}) is not used")
    return catalog


REGION_STRATEGIES: dict[Architecture, RegionStrategy] = {
    Architecture.MIPS32: mips32_regions,
    Architecture.CORTEX_M: cortex_m_regions,
}


def build_memory_catalog(device: TargetDevice) -> RegionCatalog:
    """Create sorted memory regions of the device.

    :param device: Target device.
    :return: Catalog sorted by start address.
    """
    catalog = REGION_STRATEGIES[device.architecture](device)
    catalog.sort_by_address()
    logger.info(f"{device.name}: {len(catalog)} memory regions")
    return catalog


def get_linker_script_relative_path(device: TargetDevice) -> str:
    """Get path of the linker script relative to the output directory.

    MIPS32 scripts follow the XC32 naming (``32MX795F512L/p32MX795F512L.ld``), Cortex-M
    scripts the Atmel naming (``ATSAME70Q21B/ATSAME70Q21B.ld``).

    :param device: Target device.
    :return: Relative path with '/' separators.
    """
    device_name = device.name.upper()
    if device.is_mips32:
        if device_name.startswith("PIC"):
            device_name = device_name[len("PIC") :]
        return f"{device_name}/p{device_name}.ld"
    if device_name.startswith("SAM"):
        device_name = "AT" + device_name
    return f"{device_name}/{device_name}.ld"


class LinkerScriptGenerator:
    """Generator of the MEMORY part of a linker script for one device."""

    def __init__(self, device: TargetDevice) -> None:
        """Create the generator and compute the memory layout.

        :param device: Target device.
        """
        self.device = device
        self.catalog = build_memory_catalog(device)

    def __repr__(self) -> str:
        return f"LinkerScriptGenerator({self.device.name})"

    @property
    def relative_path(self) -> str:
        """Path of the linker script relative to the output directory."""
        return get_linker_script_relative_path(self.device)

    def find_region(self, name: str) -> Optional[MemoryRegion]:
        """Find first region with given name."""
        return self.catalog.find_by_name(name)

    def export(self) -> str:
        """Render the linker script.

        :return: Linker script text.
        """
        return render_linker_script(self.catalog, self.device.name)

    def write(self, output_dir: str) -> str:
        """Render the linker script and write it under the output directory.

        :param output_dir: Base directory of generated scripts.
        :return: Path of the written file.
        """
        path = os.path.join(output_dir, self.relative_path).replace("\\", "/")
        write_linker_script(self.export(), path)
        logger.info(f"{self.device.name}: linker script written to {path}")
        return path
