#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Configuration handling for device description files."""

import logging
import os
from typing import Any, Optional, Union

from typing_extensions import Self

from ldgen.exceptions import LDGenError, LDGenKeyError
from ldgen.utils.misc import load_configuration, value_to_bool, value_to_int
from ldgen.utils.schema_validator import check_config

logger = logging.getLogger(__name__)


class Config(dict):
    """Configuration dictionary with typed getters and nested key addressing.

    Nested items are addressed with '/' separated key paths, e.g. ``interrupts/last_vector_number``
    or ``regions/0/name``.

    :cvar SEP: Path separator used for nested key addressing in configuration.
    """

    SEP = "/"

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.config_dir = os.getcwd()
        self.config_name = ""
        self.search_paths: list[str] = []

    @classmethod
    def create_from_file(cls, file_path: str) -> Self:
        """Create configuration object from file.

        :param file_path: Path to the configuration file to load.
        :return: Configuration object with loaded data and set search paths.
        """
        cfg_abs_path = os.path.abspath(file_path).replace("\\", "/")
        cfg = cls(load_configuration(cfg_abs_path))
        cfg_dir = os.path.dirname(cfg_abs_path)
        cfg.search_paths = [cfg_dir]
        cfg.config_dir = cfg_dir
        cfg.config_name = os.path.basename(cfg_abs_path)
        return cfg

    @classmethod
    def get_path(cls, key: Union[str, int]) -> list:
        """Get keypath in list format.

        :param key: Key to convert - either string path with separators or single integer.
        :return: List of path components as integers or strings.
        """
        ret: list[Union[int, str]] = []

        if isinstance(key, int):
            return [str(key)]
        for k in key.split(cls.SEP):
            try:
                ret.append(value_to_int(k))
            except LDGenError:
                ret.append(k)
        return ret

    def get(self, key: str, defaults: Optional[Any] = None) -> Any:
        """Get configuration value with nested key support.

        :param key: Key name including support of key path with '/'.
        :param defaults: Default value in case that item doesn't exist, defaults to None.
        :return: Configuration value or default if key not found.
        """
        try:
            return self.__getitem__(key)
        except (LDGenError, IndexError):
            return defaults

    def __getitem__(self, key: str) -> Any:
        def gets(source: Any, key_path: list) -> Any:
            key = key_path.pop(0)
            if isinstance(source, list):
                if not isinstance(key, int):
                    raise LDGenError("Invalid key path - from list must be used number as key")
                ret = source[key]
            elif isinstance(source, dict):
                ret = dict.get(source, key)
            else:
                raise LDGenError("Invalid configuration key path.")

            if ret is None:
                raise LDGenKeyError(f"The {key} doesn't exists in {self.config_name or 'config'}")

            if len(key_path):
                return gets(ret, key_path)

            return ret

        try:
            return gets(self, self.get_path(key))
        except LDGenKeyError:
            return gets(self, [key])

    def get_config(self, key: str, default: Optional["Config"] = None) -> "Config":
        """Get the key value as Config object.

        :param key: Key name of the sub configuration.
        :param default: Default value if configuration doesn't contain the key.
        :raises LDGenKeyError: The key is not found in configuration and no default provided.
        :return: Sub configuration as Config object.
        """
        cfg = self.get(key, default)
        if cfg is None:
            raise LDGenKeyError(f"The value is not in config at key: {key}")
        ret = Config(cfg)
        ret.search_paths = self.search_paths
        ret.config_dir = self.config_dir
        ret.config_name = self.config_name
        return ret

    def get_list_of_configs(
        self, key: str, default: Optional[list["Config"]] = None
    ) -> list["Config"]:
        """Get list of sub configurations.

        :param key: Key name of the list of sub configuration.
        :param default: Default value if configuration doesn't contain the key.
        :raises LDGenError: When the key is not found and no default value is provided.
        :return: List of sub configuration objects.
        """
        if key not in self:
            if default is not None:
                return default
            raise LDGenError(f"The value is not in config at key: {key}")

        return [self.get_config(f"{key}/{i}") for i in range(len(self[key]))]

    def get_list(self, key: str, default: Optional[list] = None) -> list:
        """Get the key value as list.

        :param key: Key name of the configuration entry.
        :param default: Default value if configuration doesn't contain the key.
        :raises LDGenError: If the value at the specified key is not a list.
        :return: Configuration value as list.
        """
        ret = self.get(key, default)
        if not isinstance(ret, list):
            raise LDGenError(f"The value is not list at key: {key}")
        return ret

    def get_int(self, key: str, default: Optional[int] = None) -> int:
        """Get the key value as integer.

        :param key: Key name of the sub configuration.
        :param default: Default value if configuration doesn't contain it.
        :raises LDGenError: The value is not integer at specified key.
        :return: Integer loaded from configuration.
        """
        ret = self.get(key, default)
        if ret is None:
            raise LDGenError(f"The value is not integer at key: {key}")
        return value_to_int(ret)

    def get_str(self, key: str, default: Optional[str] = None) -> str:
        """Get the key value as string.

        :param key: Key name of the sub configuration.
        :param default: Default value if configuration doesn't contain it.
        :raises LDGenError: The value is not string at specified key.
        :return: String loaded from configuration.
        """
        ret = self.get(key, default)
        if ret is None:
            raise LDGenError(f"The value is not string at key: {key}")
        return str(ret)

    def get_bool(self, key: str, default: Optional[bool] = None) -> bool:
        """Get the key value as boolean.

        :param key: Key name of the sub configuration.
        :param default: Default value if configuration doesn't contain it.
        :raises LDGenError: The value is not boolean at specified key.
        :return: Boolean loaded from configuration.
        """
        ret = self.get(key, default)
        if ret is None:
            raise LDGenError(f"The value is not boolean at key: {key}")
        return value_to_bool(ret)

    def check(self, schemas: list[dict[str, Any]]) -> None:
        """Validate the configuration against the schemas.

        :param schemas: Validation schemas.
        """
        check_config(self, schemas)
