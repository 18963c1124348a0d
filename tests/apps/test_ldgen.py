#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Test suite for the ldgen command-line application."""

import os

import pytest
import yaml

from ldgen import __version__
from ldgen.apps import ldgen
from ldgen.exceptions import LDGenError
from tests.cli_runner import CliRunner


def test_app_help(cli_runner: CliRunner) -> None:
    """Help lists all commands.

    :param cli_runner: Click CLI test runner instance.
    """
    ret = cli_runner.invoke(
        ldgen.main, "", expected_code=cli_runner.get_help_error_code(use_help_flag=False)
    )
    for command in ["generate", "print", "boot-tiers", "get-template"]:
        assert command in ret.output


def test_app_version(cli_runner: CliRunner) -> None:
    ret = cli_runner.invoke(ldgen.main, "--version")
    assert __version__ in ret.output


def test_print(cli_runner: CliRunner, data_dir: str) -> None:
    config = os.path.join(data_dir, "pic32mx795f512l.yaml")
    ret = cli_runner.invoke(ldgen.main, ["print", "-c", config])
    assert "MEMORY\n{\n" in ret.output
    assert "kseg0_program_mem           (rx) : ORIGIN = 0x9D000000, LENGTH = 0x80000" in ret.output
    assert "exception_mem" in ret.output


def test_generate(cli_runner: CliRunner, data_dir: str, tmpdir: str) -> None:
    """One linker script is generated per device.

    :param cli_runner: Click CLI test runner instance.
    :param data_dir: Path to test data directory.
    :param tmpdir: Temporary output directory.
    """
    output = os.path.join(tmpdir, "scripts")
    cmd = [
        "generate",
        "-c",
        os.path.join(data_dir, "pic32mx795f512l.yaml"),
        "-c",
        os.path.join(data_dir, "atsame70q21b.yaml"),
        "-o",
        output,
    ]
    cli_runner.invoke(ldgen.main, cmd)
    assert os.path.isfile(os.path.join(output, "32MX795F512L", "p32MX795F512L.ld"))
    assert os.path.isfile(os.path.join(output, "ATSAME70Q21B", "ATSAME70Q21B.ld"))


def test_generate_continues_after_failure(
    cli_runner: CliRunner, data_dir: str, tmpdir: str
) -> None:
    """A failing device is skipped, the others are generated and the command fails.

    :param cli_runner: Click CLI test runner instance.
    :param data_dir: Path to test data directory.
    :param tmpdir: Temporary output directory.
    """
    output = os.path.join(tmpdir, "scripts")
    cmd = [
        "generate",
        "-c",
        os.path.join(data_dir, "inverted_range.yaml"),
        "-c",
        os.path.join(data_dir, "atsame70q21b.yaml"),
        "-o",
        output,
    ]
    ret = cli_runner.invoke(ldgen.main, cmd, expected_code=1)
    assert isinstance(ret.exception, LDGenError)
    assert "1 of 2 devices" in str(ret.exception)
    assert os.path.isfile(os.path.join(output, "ATSAME70Q21B", "ATSAME70Q21B.ld"))
    assert not os.path.exists(os.path.join(output, "PIC32MX110F016B"))


def test_generate_force(cli_runner: CliRunner, data_dir: str, tmpdir: str) -> None:
    output = str(tmpdir)
    config = os.path.join(data_dir, "atsame70q21b.yaml")
    cli_runner.invoke(ldgen.main, ["generate", "-c", config, "-o", output])
    # the output directory is not empty anymore
    cli_runner.invoke(ldgen.main, ["generate", "-c", config, "-o", output], expected_code=1)
    cli_runner.invoke(ldgen.main, ["generate", "-c", config, "-o", output, "--force"])


@pytest.mark.parametrize(
    "size,selected",
    [("3072", "small"), ("0x2FF0", "mid-range"), ("16384", "high-end-a"), ("0xFF00", "high-end-b")],
)
def test_boot_tiers(cli_runner: CliRunner, size: str, selected: str) -> None:
    ret = cli_runner.invoke(ldgen.main, ["boot-tiers", "--size", size])
    assert f"uses the {selected} layout" in ret.output
    for label in ["small", "mid-range", "high-end-a", "high-end-b"]:
        assert label in ret.output
    assert "debug_exec_mem" in ret.output


def test_boot_tiers_invalid_size(cli_runner: CliRunner) -> None:
    cli_runner.invoke(ldgen.main, ["boot-tiers", "--size", "large"], expected_code=2)


def test_get_template(cli_runner: CliRunner, tmpdir: str) -> None:
    """Template is a valid device configuration which generates a linker script.

    :param cli_runner: Click CLI test runner instance.
    :param tmpdir: Temporary output directory.
    """
    template = os.path.join(tmpdir, "device.yaml")
    cli_runner.invoke(ldgen.main, ["get-template", "-o", template])
    with open(template, "r", encoding="utf-8") as f:
        config = yaml.safe_load(f)
    assert config["device"] == "PIC32MX795F512L"

    ret = cli_runner.invoke(ldgen.main, ["print", "-c", template])
    assert "debug_exec_mem" in ret.output
    assert "config_DEVCFG0" in ret.output

    cli_runner.invoke(ldgen.main, ["get-template", "-o", template], expected_code=1)
    cli_runner.invoke(ldgen.main, ["get-template", "-o", template, "--force"])
