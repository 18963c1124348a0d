#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Exception and interrupt vector table region of MIPS32 devices."""

import logging
from dataclasses import dataclass
from typing import Optional

from typing_extensions import Self

from ldgen.linker.region import MemoryRegion
from ldgen.utils.config import Config

logger = logging.getLogger(__name__)

EXCEPTION_REGION_NAME = "exception_mem"
# Default EBASE when the device database does not provide one
DEFAULT_EBASE_ADDRESS = 0x9D00_0000
# General exception and TLB refill entry points precede the vector table
VECTOR_TABLE_OFFSET = 0x200
VECTOR_SIZE = 32
# Subfamily which keeps its vectors in the program flash region
EXCLUDED_SUBFAMILIES = ("PIC32MM",)


def exception_region(
    base_address: int,
    last_vector_number: int,
    uses_variable_offsets: bool,
    is_excluded_subfamily: bool,
) -> Optional[MemoryRegion]:
    """Compute the separate exception memory region, if the device needs one.

    Devices with variable vector offsets, as well as the excluded subfamily, place
    their vectors in another region that is already defined.

    :param base_address: Vector table base address, 0 for the architecture default.
    :param last_vector_number: Number of the last interrupt vector.
    :param uses_variable_offsets: The interrupt controller uses programmable vector offsets.
    :param is_excluded_subfamily: The device belongs to a subfamily with no separate region.
    :return: The ``exception_mem`` region or None.
    """
    if uses_variable_offsets or is_excluded_subfamily:
        return None

    start = base_address or DEFAULT_EBASE_ADDRESS
    length = VECTOR_TABLE_OFFSET + VECTOR_SIZE * (last_vector_number + 1)
    return MemoryRegion.from_bounds(EXCEPTION_REGION_NAME, 0, start, start + length)


@dataclass(frozen=True)
class InterruptVectorTable:
    """Interrupt metadata of a device."""

    default_base_address: int = 0
    last_vector_number: int = 0
    uses_variable_offsets: bool = False

    @property
    def base_address(self) -> int:
        """Vector table base address with the architecture default applied."""
        return self.default_base_address or DEFAULT_EBASE_ADDRESS

    def get_exception_region(self, subfamily: str) -> Optional[MemoryRegion]:
        """Get the exception memory region for a device of given subfamily.

        :param subfamily: Device subfamily name, e.g. "PIC32MX".
        :return: The ``exception_mem`` region or None.
        """
        region = exception_region(
            base_address=self.default_base_address,
            last_vector_number=self.last_vector_number,
            uses_variable_offsets=self.uses_variable_offsets,
            is_excluded_subfamily=subfamily.upper() in EXCLUDED_SUBFAMILIES,
        )
        if region is None:
            logger.debug(f"No separate exception region for subfamily {subfamily}")
        return region

    @classmethod
    def load_from_config(cls, config: Config) -> Self:
        """Load interrupt metadata from the ``interrupts`` block of device configuration.

        :param config: The ``interrupts`` sub configuration.
        :return: Interrupt vector table metadata.
        """
        return cls(
            default_base_address=config.get_int("default_base_address", 0),
            last_vector_number=config.get_int("last_vector_number", 0),
            uses_variable_offsets=config.get_bool("variable_offsets", False),
        )
