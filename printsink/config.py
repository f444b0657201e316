"""
Configuration for printsink outputs.

OutputConfig is an immutable bundle of defaults that can be built from a
dictionary section or a YAML file, with environment variable overrides,
and then used as a factory for outputs:

    # etc/app.yaml
    printsink:
      debounce_interval: 0.25
      buffer_separator: "\\n"
      log_level: debug

    config = OutputConfig.from_yaml("etc/app.yaml")
    buffer = config.buffered()
    clipboard = config.pasteboard()

Environment overrides use the ``PRINTSINK_`` prefix followed by the field
name in upper case, e.g. ``PRINTSINK_DEBOUNCE_INTERVAL=0.5``.
"""

from __future__ import annotations

import dataclasses
import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from .constants import (
    DEFAULT_DEBOUNCE_INTERVAL,
    DEFAULT_ENCODING,
    ENV_PREFIX,
    MAX_CONFIG_SIZE_BYTES,
)
from .exceptions import ConfigError, InvalidLogLevelError
from .output.buffer import BufferedOutput
from .output.console import ConsoleOutput
from .output.file import FileOutput
from .output.log import LogOutput, resolve_level, resolve_privacy
from .output.pasteboard import Clipboard, PasteboardOutput
from .output.worker import ErrorCallback

_CONSOLE_STREAMS = ("stdout", "stderr")


def _navigate_to_section(config_dict: dict, section: str) -> dict:
    """Navigate to a dotted section in a config dict ({} if missing)."""
    current: Any = config_dict
    for part in section.split("."):
        if isinstance(current, dict) and part in current:
            current = current[part]
        else:
            return {}
    if current is None:
        return {}
    if not isinstance(current, dict):
        raise ConfigError("Config section is not a mapping", section=section)
    return current


def _convert_env_value(value: str) -> bool | int | float | str | None:
    """Convert an environment variable string to the most likely type."""
    if value.lower() in ("null", "none", ""):
        return None
    if value.lower() in ("true", "false"):
        return value.lower() == "true"
    try:
        if "." in value:
            return float(value)
        return int(value)
    except ValueError:
        pass
    return value


def _coerce_env_value(key: str, value: str, default: Any) -> Any:
    """Convert an override to the type of the field it replaces."""
    if isinstance(default, bool):
        converted = _convert_env_value(value)
        if converted is not None and not isinstance(converted, bool):
            raise ConfigError("Expected true or false", variable=key, value=value)
        return converted
    if isinstance(default, float):
        converted = _convert_env_value(value)
        if converted is None:
            return None
        if isinstance(converted, bool) or not isinstance(converted, (int, float)):
            raise ConfigError("Expected a number", variable=key, value=value)
        return float(converted)
    return value


def _collect_env_overrides(prefix: str, defaults: dict[str, Any]) -> dict[str, Any]:
    overrides = {}
    for key, value in os.environ.items():
        if not key.startswith(prefix):
            continue
        name = key[len(prefix) :].lower()
        if name in defaults:
            overrides[name] = _coerce_env_value(key, value, defaults[name])
    return overrides


def _check_file_size(path: Path) -> None:
    size = path.stat().st_size
    if size > MAX_CONFIG_SIZE_BYTES:
        raise ConfigError(
            f"Configuration file is {size} bytes, exceeding maximum size of "
            f"{MAX_CONFIG_SIZE_BYTES} bytes",
            path=str(path),
        )


@dataclass(frozen=True)
class OutputConfig:
    """
    Immutable defaults for building outputs.

    Attributes:
        debounce_interval: Pasteboard debounce delay in seconds
        buffer_separator: Text inserted between buffered writes
        file_encoding: Encoding for file outputs
        create_parents: Create missing parent directories for file outputs
        console_stream: "stdout" or "stderr"
        log_subsystem: Logger name prefix for log outputs
        log_category: Logger name suffix for log outputs
        log_level: Level name or number for log outputs
        log_privacy: "public", "private", "sensitive" or "auto"
    """

    debounce_interval: float = DEFAULT_DEBOUNCE_INTERVAL
    buffer_separator: str = ""
    file_encoding: str = DEFAULT_ENCODING
    create_parents: bool = False
    console_stream: str = "stdout"
    log_subsystem: str = "printsink"
    log_category: str = "LogOutput"
    log_level: str | int = "info"
    log_privacy: str = "public"

    def __post_init__(self) -> None:
        if isinstance(self.debounce_interval, bool) or not isinstance(
            self.debounce_interval, (int, float)
        ):
            raise ConfigError(
                "debounce_interval must be a number", value=self.debounce_interval
            )
        if self.debounce_interval < 0:
            raise ConfigError(
                "debounce_interval must be >= 0", value=self.debounce_interval
            )
        if self.console_stream not in _CONSOLE_STREAMS:
            raise ConfigError(
                f"console_stream must be one of {_CONSOLE_STREAMS}",
                value=self.console_stream,
            )
        if not isinstance(self.buffer_separator, str):
            raise ConfigError(
                "buffer_separator must be a string", value=self.buffer_separator
            )
        try:
            resolve_level(self.log_level)
            resolve_privacy(self.log_privacy)
        except (InvalidLogLevelError, ValueError) as e:
            raise ConfigError(str(e)) from e

    @classmethod
    def field_names(cls) -> set[str]:
        return {f.name for f in dataclasses.fields(cls)}

    @classmethod
    def field_defaults(cls) -> dict[str, Any]:
        return {f.name: f.default for f in dataclasses.fields(cls)}

    @classmethod
    def from_config(cls, config_dict: dict, section: str = "printsink") -> OutputConfig:
        """
        Create an OutputConfig from a configuration dictionary.

        Unknown keys in the section are ignored; a missing section yields
        the defaults.

        Args:
            config_dict: Configuration dictionary
            section: Dotted path to the section (default: "printsink")
        """
        return cls._from_values(_navigate_to_section(config_dict, section))

    @classmethod
    def _from_values(cls, values: dict[str, Any]) -> OutputConfig:
        names = cls.field_names()
        return cls(**{k: v for k, v in values.items() if k in names and v is not None})

    @classmethod
    def from_yaml(
        cls,
        path: str | os.PathLike[str],
        section: str = "printsink",
        enable_env_overrides: bool = True,
        env_prefix: str = ENV_PREFIX,
    ) -> OutputConfig:
        """
        Load an OutputConfig from a YAML file.

        Args:
            path: YAML file path
            section: Dotted path to the section (default: "printsink")
            enable_env_overrides: Apply ``{env_prefix}<FIELD>`` variables
            env_prefix: Environment variable prefix

        Raises:
            ConfigError: File missing, too large, malformed, or invalid values
        """
        fpath = Path(path)
        try:
            _check_file_size(fpath)
            with open(fpath, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except OSError as e:
            raise ConfigError(
                "Cannot read configuration file", path=str(fpath), reason=e.strerror
            ) from e
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML: {e}", path=str(fpath)) from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigError("Configuration root must be a mapping", path=str(fpath))

        values = dict(_navigate_to_section(data, section))
        if enable_env_overrides:
            values.update(_collect_env_overrides(env_prefix, cls.field_defaults()))
        return cls._from_values(values)

    # -- factories ---------------------------------------------------------------

    def buffered(self, on_error: ErrorCallback | None = None) -> BufferedOutput:
        return BufferedOutput(separator=self.buffer_separator, on_error=on_error)

    def console(self, on_error: ErrorCallback | None = None) -> ConsoleOutput:
        stream = sys.stderr if self.console_stream == "stderr" else None
        return ConsoleOutput(stream=stream, on_error=on_error)

    def pasteboard(
        self, clipboard: Clipboard | None = None, on_error: ErrorCallback | None = None
    ) -> PasteboardOutput:
        return PasteboardOutput(
            clipboard=clipboard,
            debounce_interval=self.debounce_interval,
            on_error=on_error,
        )

    def file(
        self, path: str | os.PathLike[str], on_error: ErrorCallback | None = None
    ) -> FileOutput:
        return FileOutput(
            path,
            encoding=self.file_encoding,
            create_parents=self.create_parents,
            on_error=on_error,
        )

    def log(self, on_error: ErrorCallback | None = None) -> LogOutput:
        return LogOutput(
            subsystem=self.log_subsystem,
            category=self.log_category,
            level=self.log_level,
            privacy=self.log_privacy,
            on_error=on_error,
        )
