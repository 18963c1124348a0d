#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""CLI application generating linker script MEMORY layouts."""

import logging
import os
import sys
from typing import Optional

import click
import colorama
import prettytable

from ldgen import LDGEN_DATA_FOLDER
from ldgen.apps.utils import ldgen_logger
from ldgen.apps.utils.common_cli_options import (
    CommandsTreeGroup,
    ldgen_apps_common_options,
    ldgen_config_option,
    ldgen_output_option,
)
from ldgen.apps.utils.utils import INT, LDGenAppError, catch_ldgen_error
from ldgen.exceptions import LDGenError
from ldgen.linker.boot_layout import BOOT_LAYOUTS, BOOT_TIER_LIMITS, select_boot_tier
from ldgen.linker.builder import LinkerScriptGenerator
from ldgen.linker.device import TargetDevice
from ldgen.utils.misc import get_printable_path, load_text, size_fmt, write_file

logger = logging.getLogger(__name__)

DEVICE_TEMPLATE_FILE = os.path.join(LDGEN_DATA_FOLDER, "device_template.yaml")


@click.group(name="ldgen", no_args_is_help=True, cls=CommandsTreeGroup)
@ldgen_apps_common_options
def main(log_level: int) -> None:
    """Generator of linker script MEMORY layouts for PIC32 and Cortex-M devices."""
    ldgen_logger.install(level=log_level)


def generate_linker_script(config: str, output: str) -> str:
    """Generate linker script of one device.

    :param config: Path to the device configuration.
    :param output: Output directory.
    :return: Path of the generated linker script.
    """
    device = TargetDevice.load_from_file(config)
    return LinkerScriptGenerator(device).write(output)


@main.command(name="generate", no_args_is_help=True)
@ldgen_config_option(multiple=True)
@ldgen_output_option(directory=True, force=True)
def generate_command(config: tuple[str, ...], output: str) -> None:
    """Generate linker scripts of one or more devices.

    A device which fails is reported and skipped; the remaining devices are still
    generated. The command fails when any of the devices failed.
    """
    failed: list[str] = []
    for config_file in config:
        try:
            path = generate_linker_script(config_file, output)
        except LDGenError as exc:
            logger.error(f"{get_printable_path(config_file)}: {exc}")
            logger.debug(str(exc), exc_info=True)
            failed.append(config_file)
            continue
        click.echo(f"Linker script has been generated into '{get_printable_path(path)}'")

    if failed:
        raise LDGenAppError(
            f"Generation failed for {len(failed)} of {len(config)} devices: "
            + ", ".join(get_printable_path(path) for path in failed)
        )


@main.command(name="print", no_args_is_help=True)
@ldgen_config_option()
def print_command(config: str) -> None:
    """Print the generated linker script of a device."""
    device = TargetDevice.load_from_file(config)
    generator = LinkerScriptGenerator(device)
    logger.info(f"Output file name: {generator.relative_path}")
    click.echo(generator.export(), nl=False)


@main.command(name="boot-tiers", no_args_is_help=False)
@click.option(
    "-s",
    "--size",
    type=INT(),
    required=False,
    help="Size of the boot flash region; the tier used for this size gets highlighted.",
)
def boot_tiers_command(size: Optional[int]) -> None:
    """List boot flash layouts of MIPS32 device families."""
    selected = select_boot_tier(size) if size is not None else None

    table = prettytable.PrettyTable(["#", "Tier", "Boot size", "Regions", "Devices"])
    table.set_style(prettytable.DOUBLE_BORDER)
    table.align["Regions"] = "l"
    for limit, tier in BOOT_TIER_LIMITS:
        color = colorama.Fore.GREEN if tier == selected else colorama.Fore.WHITE
        regions = "\n".join(
            str(boot_region.create()).rstrip() for boot_region in BOOT_LAYOUTS[tier]
        )
        table.add_row(
            [
                colorama.Fore.YELLOW + str(tier.tag) + colorama.Style.RESET_ALL,
                color + tier.label + colorama.Style.RESET_ALL,
                "up to " + size_fmt(limit) if limit is not None else "larger",
                colorama.Fore.BLUE + regions + colorama.Style.RESET_ALL,
                tier.description,
            ]
        )
    click.echo(table)
    if selected:
        click.echo(f"Boot flash of {size_fmt(size or 0)} uses the {selected.label} layout.")


@main.command(name="get-template", no_args_is_help=True)
@ldgen_output_option(force=True)
def get_template_command(output: str) -> None:
    """Create template of device configuration in YAML format."""
    write_file(load_text(DEVICE_TEMPLATE_FILE), output)
    click.echo(
        f"The device configuration template has been saved into '{get_printable_path(output)}'"
    )


@catch_ldgen_error
def safe_main() -> None:
    """Call the main function."""
    sys.exit(main())  # pylint: disable=no-value-for-parameter


if __name__ == "__main__":
    safe_main()
