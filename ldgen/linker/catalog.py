#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Ordered collection of memory regions owned by one generation pass."""

import logging
from typing import Iterable, Iterator, Optional

from ldgen.exceptions import LDGenValueError
from ldgen.linker.region import MemoryRegion
from ldgen.utils.misc import find_first, format_address

logger = logging.getLogger(__name__)


class RegionCatalog:
    """Memory regions of one linker script.

    The catalog keeps insertion order until :meth:`sort_by_address` is called and it
    does not re-sort on its own. Neither duplicate names nor overlapping ranges are
    checked; boot layouts legitimately contain two zero-length regions of the same name.
    """

    def __init__(self, regions: Optional[Iterable[MemoryRegion]] = None) -> None:
        self._regions: list[MemoryRegion] = list(regions or [])

    def __repr__(self) -> str:
        return f"RegionCatalog({len(self._regions)} regions)"

    def __str__(self) -> str:
        return "\n".join(str(region) for region in self._regions)

    def __len__(self) -> int:
        return len(self._regions)

    def __iter__(self) -> Iterator[MemoryRegion]:
        return iter(self._regions)

    def __getitem__(self, index: int) -> MemoryRegion:
        return self._regions[index]

    def add(self, region: MemoryRegion) -> None:
        """Append a region to the end of the catalog."""
        logger.debug(f"Adding region {region.name} at {format_address(region.start)}")
        self._regions.append(region)

    def extend(self, regions: Iterable[MemoryRegion]) -> None:
        """Append several regions, keeping their order."""
        for region in regions:
            self.add(region)

    def find_by_name(self, name: str) -> Optional[MemoryRegion]:
        """Find the first region with given name.

        :param name: Exact region name.
        :return: The region or None if there is no such region.
        """
        return find_first(self._regions, lambda region: region.name == name)

    def replace(self, old: MemoryRegion, new: MemoryRegion) -> None:
        """Put a transformed region in place of the original one.

        :param old: Region currently stored in the catalog.
        :param new: Region to store at the same position.
        :raises LDGenValueError: The old region is not in the catalog.
        """
        for index, region in enumerate(self._regions):
            if region is old:
                self._regions[index] = new
                return
        raise LDGenValueError(f"Region '{old.name}' is not in the catalog")

    def names(self) -> list[str]:
        """Get names of all regions in catalog order."""
        return [region.name for region in self._regions]

    def sort_by_address(self) -> None:
        """Sort regions by start address, lower addresses first.

        The sort is stable, regions with the same start address keep their mutual order.
        """
        self._regions.sort(key=lambda region: region.start)
