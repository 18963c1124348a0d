#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Rendering of a region catalog into linker script text.

Rendering is a pure projection of a catalog that has already been sorted; the only
side effect lives in :func:`write_linker_script`.
"""

import logging
import textwrap

from ldgen import __version__
from ldgen.exceptions import LDGenIOError
from ldgen.linker.catalog import RegionCatalog
from ldgen.utils.misc import write_file

logger = logging.getLogger(__name__)

COMMENT_WIDTH = 100


def write_c_comment(text: str, indent: int = 0) -> str:
    """Format text as a multi-line C comment wrapped to fixed width.

    :param text: Comment text, paragraphs separated by blank lines.
    :param indent: Number of spaces before every line.
    :return: The comment block, terminated by a new line.
    """
    prefix = " " * indent
    lines = [prefix + "/*"]
    for paragraph in text.split("\n\n"):
        if len(lines) > 1:
            lines.append(prefix + " *")
        wrapped = textwrap.wrap(paragraph, width=COMMENT_WIDTH - indent - 3) or [""]
        lines.extend((prefix + " * " + line).rstrip() for line in wrapped)
    lines.append(prefix + " */")
    return "\n".join(lines) + "\n"


def render_header(device_name: str, version: str = __version__) -> str:
    """Render the comment at the top of a generated linker script.

    :param device_name: Name of the target device.
    :param version: Generator version put into the header.
    :return: Header comment.
    """
    return write_c_comment(
        f"Linker script MEMORY layout for {device_name}.\n\n"
        f"Generated by ldgen {version}. Changes to this file will be lost "
        "when it is generated again."
    )


def render_memory_block(catalog: RegionCatalog) -> str:
    """Render the MEMORY command of a linker script.

    The catalog is expected to be sorted already; regions are emitted in catalog order.

    :param catalog: Regions to render.
    :return: The MEMORY command text.
    """
    lines = ["MEMORY", "{"]
    lines.extend(f"  {region.to_linker_line()}" for region in catalog)
    lines.append("}")
    return "\n".join(lines) + "\n"


def render_linker_script(catalog: RegionCatalog, device_name: str) -> str:
    """Render complete linker script fragment: header comment and MEMORY command.

    :param catalog: Sorted regions of the device.
    :param device_name: Name of the target device.
    :return: Linker script text.
    """
    return render_header(device_name) + "\n" + render_memory_block(catalog)


def write_linker_script(text: str, path: str) -> int:
    """Write rendered linker script to a file.

    :param text: Rendered linker script.
    :param path: Output file path; missing directories are created.
    :raises LDGenIOError: The file cannot be written.
    :return: Number of characters written.
    """
    try:
        return write_file(text, path)
    except OSError as exc:
        raise LDGenIOError(f"Cannot write linker script '{path}': {exc}") from exc
