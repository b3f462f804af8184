"""Helper classes and functions for handling configurations from multiple
sources.
"""

from __future__ import annotations

import errno
import os

from dataclasses import dataclass
from importlib import import_module
from logging import Logger
from typing import Any, Dict, Optional

from .errors import InvalidTypeTagError
from .message import BooleanCoercion
from .tags import DEFAULT_ALPHABET, TypeTagAlphabet

__all__ = ("AppConfigurator", "Configuration", "MessageSettings")

Configuration = Dict[str, Any]


class AppConfigurator:
    """Helper object that manages loading the configuration of the message
    builder from various sources.
    """

    def __init__(
        self,
        config: Optional[Configuration] = None,
        *,
        default_filename: Optional[str] = None,
        environment_variable: Optional[str] = None,
        log: Optional[Logger] = None,
        package_name: Optional[str] = None,
    ):
        """Constructor.

        Parameters:
            config: the configuration object that the configurator will
                populate. May contain default values.
            default_filename: name of the default configuration file that the
                configurator will look for in the current working directory
            environment_variable: name of the environment variable in which
                the configurator will look for the name of an additional
                configuration file to load
            log: logger to report loaded and missing configuration files to
            package_name: name of the package to import the base configuration
                from
        """
        self._config = config if config is not None else {}
        self._default_filename = default_filename
        self._environment_variable = environment_variable
        self._log = log
        self._package_name = package_name

    def configure(self, filename: Optional[str] = None) -> bool:
        """Loads the configuration from all the sources, in the following
        order:

        - The default configuration in the `.config` module of the package,
          if there is one.

        - The configuration file referred to by the `filename` argument,
          if present. If it is `None` and a default configuration filename
          was specified at construction time, it will be used instead.

        - The configuration file referred to by the environment variable
          provided at construction time, if it is specified.

        Parameters:
            filename: name of the configuration file to load, passed from the
                command line

        Returns:
            whether all configuration files were processed successfully
        """
        self._load_base_configuration()

        config_files = []

        if filename:
            config_files.append((filename, True))
        elif self._default_filename:
            config_files.append((self._default_filename, False))

        if self._environment_variable:
            config_files.append((os.environ.get(self._environment_variable), True))

        return all(
            [
                self._load_configuration_from_file(config_file, mandatory)
                for config_file, mandatory in config_files
                if config_file
            ]
        )

    @property
    def result(self) -> Configuration:
        """Returns the result of the configuration process."""
        return self._config

    def _load_base_configuration(self) -> None:
        if not self._package_name:
            return

        try:
            config = import_module(".config", self._package_name)
        except ModuleNotFoundError:
            return

        for key in dir(config):
            if key.isupper():
                self._set(key, getattr(config, key))

    def _load_configuration_from_file(
        self, filename: str, mandatory: bool = True
    ) -> bool:
        """Loads configuration settings from the given Python file.

        Parameters:
            filename: name of the configuration file to load. Relative
                paths are resolved from the current directory.
            mandatory: whether the configuration file must exist. If this is
                ``False`` and the file does not exist, no warning is logged and
                loading is considered successful.

        Returns:
            whether the configuration was loaded successfully
        """
        original, filename = filename, os.path.abspath(filename)

        config: Dict[str, Any] = {}
        try:
            with open(filename, mode="rb") as config_file:
                exec(compile(config_file.read(), filename, "exec"), config)
        except IOError as e:
            if e.errno in (errno.ENOENT, errno.EISDIR, errno.ENOTDIR):
                if mandatory and self._log:
                    self._log.warning(f"Cannot load configuration from {original!r}")
                return not mandatory
            raise

        for key, value in config.items():
            if key.isupper():
                self._set(key, value)

        if self._log:
            self._log.info(f"Loaded configuration from {original!r}")

        return True

    def _set(self, key: str, value: Any) -> None:
        # Partial type tag tables are merged into the ones loaded earlier
        existing = self._config.get(key)
        if isinstance(existing, dict) and isinstance(value, dict):
            self._config[key] = {**existing, **value}
        elif isinstance(value, dict):
            self._config[key] = dict(value)
        else:
            self._config[key] = value


@dataclass(frozen=True)
class MessageSettings:
    """Settings of the message builder derived from a configuration."""

    address: str = "/"
    alphabet: TypeTagAlphabet = DEFAULT_ALPHABET
    boolean_coercion: BooleanCoercion = BooleanCoercion.NONE

    @classmethod
    def from_configuration(cls, config: Configuration) -> MessageSettings:
        """Creates a settings object from a configuration dictionary with
        uppercase keys, using defaults for missing keys.

        Raises:
            InvalidTypeTagError: if the type tag table is invalid
            ValueError: if the boolean coercion mode is unknown or the leading
                comma setting is not a boolean
        """
        type_tags = config.get("TYPE_TAGS") or {}
        if not isinstance(type_tags, dict):
            raise InvalidTypeTagError("TYPE_TAGS must be a dictionary")

        unknown = sorted(
            str(key)
            for key in type_tags
            if key not in ("integer", "double", "text", "null")
        )
        if unknown:
            raise InvalidTypeTagError(
                f"Unknown scalar kinds in TYPE_TAGS: {', '.join(unknown)}"
            )

        leading_comma = config.get("LEADING_COMMA", True)
        if not isinstance(leading_comma, bool):
            raise ValueError(
                f"LEADING_COMMA must be True or False, got {leading_comma!r}"
            )

        alphabet = TypeTagAlphabet(leading_comma=leading_comma, **type_tags)

        try:
            coercion = BooleanCoercion.from_string(
                config.get("BOOLEAN_COERCION", "none")
            )
        except ValueError:
            raise ValueError(
                f"Invalid boolean coercion mode: {config.get('BOOLEAN_COERCION')!r}"
            ) from None

        return cls(
            address=str(config.get("ADDRESS", "/")),
            alphabet=alphabet,
            boolean_coercion=coercion,
        )
