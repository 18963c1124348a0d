#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Boot flash layout of MIPS32 (PIC32) devices.

The device database describes the boot flash as one region, but the hardware and
the debugger carve it into several differently named parts whose addresses are
fixed in silicon for each device family. The family is recognized by the size of
the boot flash: 3 KiB, 12 KiB, 20 KiB or larger. The region reported by the
database is a bit smaller than those sizes because the boot flash also holds the
configuration registers.
"""

import logging
from typing import NamedTuple, Optional

from ldgen.linker.region import MemoryRegion
from ldgen.utils.ldgen_enum import LDGenEnum

logger = logging.getLogger(__name__)

# Physical address at which a MIPS32 CPU starts execution after reset
MIPS_RESET_PHYS_ADDR = 0x1FC0_0000


class BootTier(LDGenEnum):
    """Device family class recognized by the boot flash size."""

    SMALL = (0, "small", "PIC32MM and small PIC32MX")
    MID_RANGE = (1, "mid-range", "Large PIC32MX")
    HIGH_END_A = (2, "high-end-a", "PIC32MK")
    HIGH_END_B = (3, "high-end-b", "PIC32MZ, no flash reserved for the debugger")


class BootRegion(NamedTuple):
    """Literal boot region definition: name, start and end address."""

    name: str
    start: int
    end: int

    def create(self) -> MemoryRegion:
        """Create memory region of this definition."""
        return MemoryRegion.from_bounds(self.name, 0, self.start, self.end)


# Upper boot flash size limits (inclusive), evaluated in order; None matches everything
BOOT_TIER_LIMITS: tuple[tuple[Optional[int], BootTier], ...] = (
    (3 * 1024, BootTier.SMALL),
    (12 * 1024, BootTier.MID_RANGE),
    (20 * 1024, BootTier.HIGH_END_A),
    (None, BootTier.HIGH_END_B),
)

# The zero-length kseg0_boot_mem regions and the gap between 0xBFC00480 and 0xBFC004B0
# are present in the XC32 linker scripts and are kept for compatibility.
BOOT_LAYOUTS: dict[BootTier, tuple[BootRegion, ...]] = {
    BootTier.SMALL: (
        BootRegion("debug_exec_mem", 0x9FC0_0490, 0x9FC0_0BF0),
        BootRegion("kseg0_boot_mem", 0x9FC0_0490, 0x9FC0_0490),
        BootRegion("kseg1_boot_mem", 0xBFC0_0000, 0xBFC0_0490),
    ),
    BootTier.MID_RANGE: (
        BootRegion("kseg0_boot_mem", 0x9FC0_0490, 0x9FC0_0E00),
        BootRegion("kseg1_boot_mem", 0xBFC0_0000, 0xBFC0_0490),
        BootRegion("debug_exec_mem", 0xBFC0_2000, 0xBFC0_2FF0),
    ),
    BootTier.HIGH_END_A: (
        BootRegion("kseg0_boot_mem", 0x9FC0_04B0, 0x9FC0_04B0),
        BootRegion("debug_exec_mem", 0x9FC2_0490, 0x9FC2_3FB0),
        BootRegion("kseg0_boot_mem", 0x9FC2_0490, 0x9FC2_0490),
        BootRegion("kseg1_boot_mem", 0xBFC0_0000, 0xBFC0_0480),
        BootRegion("kseg1_boot_mem_4B0", 0xBFC0_04B0, 0xBFC0_3FB0),
    ),
    BootTier.HIGH_END_B: (
        BootRegion("kseg0_boot_mem", 0x9FC0_04B0, 0x9FC0_04B0),
        BootRegion("kseg1_boot_mem", 0xBFC0_0000, 0xBFC0_0480),
        BootRegion("kseg1_boot_mem_4B0", 0xBFC0_04B0, 0xBFC0_FF00),
    ),
}


def select_boot_tier(length: int) -> BootTier:
    """Select the device family class by the boot flash size.

    :param length: Length of the raw boot flash region in bytes.
    :return: First tier whose limit is not exceeded.
    """
    for limit, tier in BOOT_TIER_LIMITS:
        if limit is None or length <= limit:
            return tier
    raise AssertionError("Boot tier table has no catch-all entry")  # pragma: no cover


def is_reset_boot_region(region: MemoryRegion) -> bool:
    """Check whether the region is the boot flash the CPU starts executing from."""
    return region.start == MIPS_RESET_PHYS_ADDR


def layout_boot_regions(raw_boot_region: MemoryRegion) -> list[MemoryRegion]:
    """Replace the raw boot flash region by the regions the hardware actually uses.

    :param raw_boot_region: Boot flash region as reported by the device database.
    :return: New regions in table order; the same name may appear more than once.
    """
    tier = select_boot_tier(raw_boot_region.length)
    logger.debug(
        f"Boot region '{raw_boot_region.name}' with length 0x{raw_boot_region.length:X} "
        f"uses {tier.label} layout ({tier.description})"
    )
    return [boot_region.create() for boot_region in BOOT_LAYOUTS[tier]]
