#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Schema-based configuration validation.

Device configuration files are checked against JSON schemas before any region
is derived from them, so that malformed input is reported with the exact path
of the offending item.
"""

import copy
import logging
import os
from typing import Any, Callable, Optional

import fastjsonschema
from deepmerge import always_merger

from ldgen import LDGEN_DATA_FOLDER
from ldgen.exceptions import LDGenError
from ldgen.utils.misc import load_configuration, value_to_int

logger = logging.getLogger(__name__)


def _is_number(param: Any) -> bool:
    """Check if the input parameter represents a number.

    :param param: Input value to analyze for numeric representation.
    :return: True if input represents a number, False otherwise.
    """
    try:
        value_to_int(param)
        return True
    except LDGenError:
        return False


def _print_validation_fail_reason(exc: fastjsonschema.JsonSchemaValueException) -> str:
    """Format JSON schema validation failure into human-readable error message.

    :param exc: The JSON schema validation exception to process.
    :return: Formatted error message explaining the validation failure reason.
    """
    message = str(exc)
    path = exc.path if hasattr(exc, "path") else exc.name
    if exc.rule == "required":
        missing = [x for x in exc.rule_definition if x not in (exc.value or {})]
        message += f"; Missing: {', '.join(missing)}"
    elif exc.rule == "format":
        message += f"; Expected format: {exc.rule_definition}, got: {exc.value!r}"
    elif exc.rule == "enum":
        message += f"; Allowed values: {', '.join(str(x) for x in exc.rule_definition)}"
    logger.debug(f"Validation failed at {path}: {message}")
    return message


def get_schema_file(name: str) -> dict[str, Any]:
    """Load validation schemas from the package data folder.

    :param name: Base name of the schema file (without extension).
    :return: Dictionary with all schema blocks defined in the file.
    """
    path = os.path.join(LDGEN_DATA_FOLDER, "jsonschemas", f"{name}.yaml")
    return load_configuration(path)


def check_config(
    config: dict[str, Any],
    schemas: list[dict[str, Any]],
    extra_formatters: Optional[dict[str, Callable[[str], bool]]] = None,
) -> None:
    """Check the configuration by provided list of validation schemas.

    All schemas are merged together and the configuration is validated against the result.

    :param config: Configuration dictionary to validate.
    :param schemas: List of JSON schema dictionaries for validation.
    :param extra_formatters: Additional custom format validators for schema validation.
    :raises LDGenError: Invalid validation schema or configuration validation failed.
    """
    custom_formatters: dict[str, Callable[[str], bool]] = {
        "number": _is_number,
    }

    config_to_check = copy.deepcopy(config)

    schema: dict[str, Any] = {}
    for sch in schemas:
        always_merger.merge(schema, copy.deepcopy(sch))
    formats = always_merger.merge(custom_formatters, extra_formatters or {})

    try:
        validator = fastjsonschema.compile(schema, formats=formats)
    except (TypeError, fastjsonschema.JsonSchemaDefinitionException) as exc:
        raise LDGenError(f"Invalid validation schema to check config: {str(exc)}") from exc
    try:
        validator(config_to_check)
    except fastjsonschema.JsonSchemaValueException as exc:
        message = _print_validation_fail_reason(exc)
        raise LDGenError(f"Configuration validation failed: {message}") from exc
