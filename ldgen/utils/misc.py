#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Miscellaneous utilities: number decoding, file access and configuration loading."""

import json
import logging
import os
import re
from typing import Callable, Iterable, Optional, TypeVar, Union

import yaml

from ldgen.exceptions import LDGenError

# for generics
T = TypeVar("T")  # pylint: disable=invalid-name

logger = logging.getLogger(__name__)

ADDRESS_MASK = 0xFFFF_FFFF


def find_first(iterable: Iterable[T], predicate: Callable[[T], bool]) -> Optional[T]:
    """Find first element from iterable that matches the given condition.

    :param iterable: Iterable collection of elements to search through.
    :param predicate: Function that takes an element and returns True if it matches the condition.
    :return: First matching element or None if no element matches the predicate.
    """
    return next((a for a in iterable if predicate(a)), None)


def value_to_int(value: Union[bytes, bytearray, int, str], default: Optional[int] = None) -> int:
    """Convert value from multiple formats to integer.

    Supports conversion from integers, bytes (big endian) and string representations
    (binary, octal, decimal and hexadecimal with optional prefixes, underscores and
    C-style integer suffixes like ``UL``).

    :param value: Input value to convert.
    :param default: Default value returned when conversion fails.
    :return: Converted integer value.
    :raises LDGenError: Unsupported input type or invalid conversion without default.
    """
    if isinstance(value, bool):
        raise LDGenError(f"Invalid input number type({type(value)}) with value ({value})")

    if isinstance(value, int):
        return value

    if isinstance(value, (bytes, bytearray)):
        return int.from_bytes(value, "big")

    if isinstance(value, str) and value != "":
        match = re.match(
            r"(?P<prefix>0[box])?(?P<number>[0-9a-f_]+)(?P<suffix>[ul]{0,3})$",
            value.strip().lower(),
        )
        if match:
            base = {"0b": 2, "0o": 8, "0x": 16, None: 10}[match.group("prefix")]
            try:
                return int(match.group("number"), base=base)
            except ValueError:
                pass

    if default is not None:
        return default
    raise LDGenError(f"Invalid input number type({type(value)}) with value ({value})")


def value_to_bool(value: Optional[Union[bool, int, str]]) -> bool:
    """Convert value to boolean from various input formats.

    :param value: Value to convert to boolean (string, int, bool, or None).
    :return: Boolean representation of the input value.
    """
    if isinstance(value, str):
        return value in ("True", "true", "T", "1")
    return bool(value)


def format_address(address: int) -> str:
    """Format 32-bit address the way linker scripts print it, e.g. ``0x9D000000``."""
    return f"0x{address & ADDRESS_MASK:08X}"


def size_fmt(num: Union[float, int], use_kibibyte: bool = True) -> str:
    """Size format."""
    base, suffix = [(1000.0, "B"), (1024.0, "iB")][use_kibibyte]
    i = "B"
    for i in ["B"] + [i + suffix for i in list("kMGTP")]:
        if num < base:
            break
        num /= base

    return f"{int(num)} {i}" if i == "B" else f"{num:3.1f} {i}"


def get_abs_path(file_path: str, base_dir: Optional[str] = None) -> str:
    """Convert relative or absolute file path to normalized absolute path.

    :param file_path: File path to be converted to absolute path.
    :param base_dir: Base directory to create absolute path, if not specified the system CWD is used.
    :return: Absolute file path with normalized separators.
    """
    if os.path.isabs(file_path):
        return file_path.replace("\\", "/")

    return os.path.abspath(os.path.join(base_dir or os.getcwd(), file_path)).replace("\\", "/")


def find_file(
    file_path: str,
    use_cwd: bool = True,
    search_paths: Optional[list[str]] = None,
    raise_exc: bool = True,
) -> str:
    """Find file in filesystem.

    Search paths take precedence over current working directory when both are enabled.

    :param file_path: File name, part of file path or full path to search for.
    :param use_cwd: Try current working directory to find the file, defaults to True.
    :param search_paths: List of paths where to search for the file, defaults to None.
    :param raise_exc: Raise exception if file is not found, defaults to True.
    :return: Full absolute path to the found file, empty string if not found and raise_exc is False.
    :raises LDGenError: File not found in any of the search locations.
    """
    path = file_path.replace("\\", "/")

    if os.path.isabs(path):
        if not os.path.isfile(path):
            if raise_exc:
                raise LDGenError(f"Path '{path}' not found")
            return ""
        return path
    for dir_candidate in search_paths or []:
        if not dir_candidate:
            continue
        path_candidate = get_abs_path(path, base_dir=dir_candidate.replace("\\", "/"))
        if os.path.isfile(path_candidate):
            return path_candidate
    if use_cwd and os.path.isfile(path):
        return get_abs_path(path)

    searched_in: list[str] = []
    if use_cwd:
        searched_in.append(os.path.abspath(os.curdir))
    if search_paths:
        searched_in.extend(filter(None, search_paths))
    err_str = f"Path '{path}' not found, Searched in: {', '.join(searched_in)}"
    if not raise_exc:
        logger.debug(err_str)
        return ""
    raise LDGenError(err_str)


def load_text(path: str, search_paths: Optional[list[str]] = None) -> str:
    """Load text file content into string.

    :param path: Path to the text file to load.
    :param search_paths: List of directories to search for the file, defaults to None.
    :return: Content of the text file as string.
    """
    path = find_file(path, search_paths=search_paths)
    logger.debug(f"Loading text file from {path}")
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


def write_file(
    data: str,
    path: str,
    encoding: str = "utf-8",
    newline: Optional[str] = "\n",
) -> int:
    """Write text data to a file, creating parent directories when needed.

    Linker scripts are always written with Unix line separators.

    :param data: Data to write to the file.
    :param path: Path to the target file.
    :param encoding: Text encoding, defaults to 'utf-8'.
    :param newline: Line separator used when writing, defaults to '\\n'.
    :return: Number of characters written to the file.
    """
    path = path.replace("\\", "/")
    folder = os.path.dirname(path)
    if folder and not os.path.exists(folder):
        os.makedirs(folder, exist_ok=True)

    logger.debug(f"Storing text file at {path}")
    with open(path, "w", encoding=encoding, newline=newline) as f:
        return f.write(data)


def load_configuration(path: str, search_paths: Optional[list[str]] = None) -> dict:
    """Load configuration from YAML or JSON file.

    The file content is parsed as JSON first, YAML is used as a fallback.

    :param path: Path to configuration file (relative or absolute).
    :param search_paths: List of paths where to search for the file, defaults to None.
    :raises LDGenError: When file cannot be loaded, parsed, or contains invalid format.
    :return: Content of configuration as dictionary.
    """
    try:
        config = load_text(path, search_paths=search_paths)
    except Exception as exc:
        raise LDGenError(f"Can't load configuration file: {str(exc)}") from exc

    config_data: Optional[dict] = None
    try:
        config_data = json.loads(config)
    except json.JSONDecodeError:
        try:
            config_data = yaml.safe_load(config)
        except (yaml.YAMLError, UnicodeDecodeError):
            pass

    if not config_data:
        raise LDGenError(f"Can't parse configuration file: {path}")
    if not isinstance(config_data, dict):
        raise LDGenError(f"Invalid configuration file: {path}")

    return config_data


def get_printable_path(path: str) -> str:
    """Get path in form suitable for printing to the user."""
    return path.replace("\\", "/")
