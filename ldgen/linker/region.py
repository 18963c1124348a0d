#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Memory region of a linker script MEMORY command.

A region is an immutable value: every modification (access flags, name, kernel
segment view) produces a new region, so a catalog can be re-sorted mechanically
after any transformation.
"""

import logging
from dataclasses import dataclass, replace
from enum import IntFlag
from typing import Union

from typing_extensions import Self

from ldgen.exceptions import LDGenError, LDGenParsingError, LDGenValueError
from ldgen.utils.ldgen_enum import LDGenEnum
from ldgen.utils.misc import ADDRESS_MASK, value_to_int

logger = logging.getLogger(__name__)

# Column width of "<name><access>" in a rendered MEMORY line
NAME_COLUMN_WIDTH = 32


class AccessFlags(IntFlag):
    """Access attributes of a memory region as the linker understands them.

    No flag set means the linker decides placement on its own; sections are then
    put into the region explicitly by the rest of the script.
    """

    NONE = 0
    READ = 0x01
    WRITE = 0x02
    EXECUTE = 0x04
    NOT_EXECUTABLE = 0x08

    ALL = READ | WRITE | EXECUTE

    def to_suffix(self) -> str:
        """Get the linker access attribute string, e.g. ``(rx)``; empty when no flag is set."""
        if not self:
            return ""
        letters = ""
        for flag, letter in (
            (AccessFlags.READ, "r"),
            (AccessFlags.WRITE, "w"),
            (AccessFlags.EXECUTE, "x"),
            (AccessFlags.NOT_EXECUTABLE, "!x"),
        ):
            if self & flag:
                letters += letter
        return f"({letters})"


class RegionType(LDGenEnum):
    """Category of a raw memory region as delivered by the device database."""

    UNSPECIFIED = (0, "unspecified", "Region with no special meaning")
    BOOT = (1, "boot", "Boot flash")
    CODE = (2, "code", "Program flash")
    SRAM = (3, "sram", "Data RAM")
    EBI = (4, "ebi", "External bus interface memory")
    SQI = (5, "sqi", "Serial quad interface memory")
    SDRAM = (6, "sdram", "External DDR/SDRAM")
    FUSE = (7, "fuse", "Configuration fuses")
    PERIPHERAL = (8, "peripheral", "Special function registers")


class Kseg(LDGenEnum):
    """MIPS32 kernel segments; the tag holds the segment base address.

    All four segments are views of the same 512 MiB of physical memory.
    """

    KSEG0 = (0x8000_0000, "kseg0", "Kernel, cached")
    KSEG1 = (0xA000_0000, "kseg1", "Kernel, uncached")
    KSEG2 = (0xC000_0000, "kseg2", "Kernel, mapped")
    KSEG3 = (0xE000_0000, "kseg3", "Kernel, mapped")

    @staticmethod
    def physical(address: int) -> int:
        """Get physical address, i.e. the low 29 bits of the address."""
        return address & 0x1FFF_FFFF

    def overlay(self, address: int) -> int:
        """Get the view of an address in this segment."""
        return self.physical(address) | self.tag


@dataclass(frozen=True)
class MemoryRegion:
    """Named address range with linker access attributes.

    ``start`` is always a 32-bit value; ``length`` is derived from the begin/end pair
    once, at creation, and preserved by all segment overlays.
    """

    name: str
    start: int
    length: int
    access: AccessFlags = AccessFlags.NONE
    region_type: RegionType = RegionType.UNSPECIFIED

    def __post_init__(self) -> None:
        if self.length < 0:
            raise LDGenValueError(f"Region '{self.name}' has negative length {self.length}")
        object.__setattr__(self, "start", self.start & ADDRESS_MASK)

    @classmethod
    def from_bounds(
        cls,
        name: str,
        access: Union[AccessFlags, int],
        start: int,
        end: int,
        region_type: RegionType = RegionType.UNSPECIFIED,
    ) -> Self:
        """Create region from its begin (inclusive) and end (exclusive) addresses.

        Both addresses are truncated to 32 bits first.

        :param name: Region name.
        :param access: Access flags.
        :param start: First address of the region.
        :param end: First address after the region.
        :param region_type: Category of the region.
        :raises LDGenValueError: The end address lies below the start address.
        :return: New memory region.
        """
        start &= ADDRESS_MASK
        end &= ADDRESS_MASK
        if end < start:
            raise LDGenValueError(
                f"Region '{name}' has end address 0x{end:08X} below its start address 0x{start:08X}"
            )
        return cls(
            name=name,
            start=start,
            length=end - start,
            access=AccessFlags(access),
            region_type=region_type,
        )

    @classmethod
    def from_descriptor(
        cls,
        name: str,
        access: Union[AccessFlags, int],
        begin_addr: Union[str, int],
        end_addr: Union[str, int],
        region_type: RegionType = RegionType.UNSPECIFIED,
    ) -> Self:
        """Create region from a raw descriptor with textual (hex or decimal) addresses.

        :param name: Region name.
        :param access: Access flags.
        :param begin_addr: Begin address, e.g. "0x1FC00000".
        :param end_addr: End address, e.g. "0x1FC02FF0".
        :param region_type: Category of the region.
        :raises LDGenParsingError: One of the addresses cannot be decoded.
        :return: New memory region.
        """
        addresses = {}
        for field_name, value in (("begin_addr", begin_addr), ("end_addr", end_addr)):
            try:
                addresses[field_name] = value_to_int(value)
            except LDGenError as exc:
                raise LDGenParsingError(
                    f"Region '{name}': cannot decode {field_name} value '{value}'"
                ) from exc
        return cls.from_bounds(
            name, access, addresses["begin_addr"], addresses["end_addr"], region_type
        )

    @property
    def end(self) -> int:
        """First address after the region."""
        return self.start + self.length

    def with_name(self, name: str) -> Self:
        """Get copy of the region under a different name."""
        return replace(self, name=name)

    def with_access(self, access: Union[AccessFlags, int]) -> Self:
        """Get copy of the region with different access flags.

        The combination of flags is not checked; EXECUTE and NOT_EXECUTABLE may coexist.
        """
        return replace(self, access=AccessFlags(access))

    def to_kseg(self, kseg: Kseg) -> Self:
        """Get copy of the region placed into a kernel segment.

        Only the low 29 bits of the start address are kept, so the result does not
        depend on the segment the region was in before.
        """
        return replace(self, start=kseg.overlay(self.start))

    def to_kseg0(self) -> Self:
        """Get cached kernel view of the region."""
        return self.to_kseg(Kseg.KSEG0)

    def to_kseg1(self) -> Self:
        """Get uncached kernel view of the region."""
        return self.to_kseg(Kseg.KSEG1)

    def to_kseg2(self) -> Self:
        """Get mapped kernel view of the region."""
        return self.to_kseg(Kseg.KSEG2)

    def to_kseg3(self) -> Self:
        """Get mapped kernel view of the region."""
        return self.to_kseg(Kseg.KSEG3)

    # Regions are ordered by start address only. Equal starts are unordered,
    # which keeps zero-length markers in insertion order after a stable sort.
    def __lt__(self, other: object) -> bool:
        if not isinstance(other, MemoryRegion):
            return NotImplemented
        return self.start < other.start

    def __le__(self, other: object) -> bool:
        if not isinstance(other, MemoryRegion):
            return NotImplemented
        return self.start <= other.start

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, MemoryRegion):
            return NotImplemented
        return self.start > other.start

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, MemoryRegion):
            return NotImplemented
        return self.start >= other.start

    def to_linker_line(self) -> str:
        """Get the region as one line of a linker script MEMORY command.

        :return: Line like ``kseg0_program_mem (rx)           : ORIGIN = 0x9D000000, LENGTH = 0x80000``
        """
        access = self.access.to_suffix()
        name_column = f"{self.name:<{NAME_COLUMN_WIDTH - len(access)}}{access}"
        return f"{name_column} : ORIGIN = 0x{self.start:08X}, LENGTH = 0x{self.length:X}"

    def __str__(self) -> str:
        return self.to_linker_line()
