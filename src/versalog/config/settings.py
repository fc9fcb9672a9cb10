# topmark:header:start
#
#   project      : Versalog
#   file         : settings.py
#   file_relpath : src/versalog/config/settings.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Logger and I/O settings from TOML files and the environment.

Settings live either in ``versalog.toml``:

```toml
[logger]
file = "logs/app.log"      # relative to the TOML file
timestamps = true
min_level = "info"
min_file_level = "debug"
preset = "console"         # console | file-only | debugger

[io]
min_level = "info"

[io.colors]
warning = "dark-yellow"    # color name or hex code ("6")
```

or in ``pyproject.toml`` under ``[tool.versalog.logger]`` / ``[tool.versalog.io]``.

Environment variables (``VERSALOG_MIN_LEVEL``, ``VERSALOG_MIN_FILE_LEVEL``,
``VERSALOG_LOG_FILE``, ``VERSALOG_TIMESTAMPS``) override file values.

Parsing is done with `tomlkit`. Unreadable files are logged and treated as
empty; invalid *values* raise `ConfigError`.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from versalog.config.logging import get_logger
from versalog.constants import (
    ENV_LOG_FILE,
    ENV_MIN_FILE_LEVEL,
    ENV_MIN_LEVEL,
    ENV_TIMESTAMPS,
    PYPROJECT_TOML_NAME,
    VERSALOG_TOML_NAME,
)
from versalog.core.errors import ConfigError
from versalog.core.levels import LogLevel
from versalog.interaction.colors import ConsoleColor
from versalog.interaction.versatile import DEFAULT_LEVEL_COLORS, VersatileIO
from versalog.logger.presets import PresetType, initialize_preset
from versalog.logger.slot import DEFAULT_SLOT, LoggerSlot

if TYPE_CHECKING:
    from collections.abc import Mapping

    from versalog.config.logging import VersalogLogger
    from versalog.interaction.protocols import VersatileHandler
    from versalog.logger.logger import Logger

logger: VersalogLogger = get_logger(__name__)

TomlTable = Dict[str, Any]

_LOGGER_KEYS: frozenset[str] = frozenset(
    {"file", "timestamps", "min_level", "min_file_level", "preset"}
)
_IO_KEYS: frozenset[str] = frozenset({"min_level", "colors"})

_TRUE_TOKENS: frozenset[str] = frozenset({"1", "true", "yes", "on"})
_FALSE_TOKENS: frozenset[str] = frozenset({"0", "false", "no", "off"})


# --- TOML file I/O ---


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document.

    Returns:
        TomlTable: The parsed TOML content; empty when unreadable.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
        data_any: Any = doc.unwrap()
        return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        return {}
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        return {}


def versalog_table(data: TomlTable, *, is_pyproject: bool) -> TomlTable:
    """Return the Versalog part of a parsed TOML document."""
    if not is_pyproject:
        return data
    tool = data.get("tool", {})
    table = tool.get("versalog", {}) if isinstance(tool, dict) else {}
    return cast("TomlTable", table) if isinstance(table, dict) else {}


# --- Value coercion ---


def _as_level(value: object, key: str) -> LogLevel:
    level = LogLevel.parse(value) if isinstance(value, str) else None
    if isinstance(value, int) and not isinstance(value, bool):
        level = LogLevel(value) if value in LogLevel._value2member_map_ else None
    if level is None:
        raise ConfigError(f"Invalid log level for '{key}': {value!r}", key=key)
    return level


def _as_bool(value: object, key: str) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        token = value.strip().lower()
        if token in _TRUE_TOKENS:
            return True
        if token in _FALSE_TOKENS:
            return False
    raise ConfigError(f"Invalid boolean for '{key}': {value!r}", key=key)


def _as_color(value: object, key: str) -> ConsoleColor:
    color = ConsoleColor.parse(value) if isinstance(value, str) else None
    if color is None:
        raise ConfigError(f"Invalid color for '{key}': {value!r}", key=key)
    return color


def _as_table(value: object, key: str) -> TomlTable:
    if not isinstance(value, dict):
        raise ConfigError(f"Expected a table for '{key}', got {type(value).__name__}", key=key)
    return cast("TomlTable", value)


def _warn_unknown(table: TomlTable, known: frozenset[str], section: str) -> None:
    for name in sorted(set(table) - known):
        logger.warning("Ignoring unknown key '%s.%s'", section, name)


@dataclass(frozen=True)
class Settings:
    """Resolved settings for a logger and its versatile I/O.

    Attributes:
        output_file (Path | None): File mirror, ``None`` for none.
        include_timestamps (bool): Prefix lines with ``"[HH:MM:SS] "``.
        min_logging (LogLevel): Threshold for the preset sink.
        min_file_logging (LogLevel): Threshold for the file mirror.
        preset (PresetType): Sink attached to the logger.
        io_min_level (LogLevel): Threshold of `VersatileIO.write_line_level`.
        level_colors (Mapping[LogLevel, ConsoleColor]): Color table for the I/O layer.
    """

    output_file: Path | None = None
    include_timestamps: bool = True
    min_logging: LogLevel = LogLevel.INFO
    min_file_logging: LogLevel = LogLevel.DEBUG
    preset: PresetType = PresetType.CONSOLE
    io_min_level: LogLevel = LogLevel.INFO
    level_colors: Mapping[LogLevel, ConsoleColor] = field(
        default_factory=lambda: dict(DEFAULT_LEVEL_COLORS)
    )

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any], *, base: Path | None = None) -> Settings:
        """Build settings from a ``{"logger": {...}, "io": {...}}`` mapping.

        Args:
            data (Mapping[str, Any]): Parsed settings.
            base (Path | None): Directory that relative file paths are resolved against.

        Returns:
            Settings: The resolved settings.

        Raises:
            ConfigError: If a value has the wrong type or is out of range.
        """
        defaults = cls()
        log_tbl = _as_table(data.get("logger", {}), "logger")
        io_tbl = _as_table(data.get("io", {}), "io")
        _warn_unknown(log_tbl, _LOGGER_KEYS, "logger")
        _warn_unknown(io_tbl, _IO_KEYS, "io")

        output_file: Path | None = defaults.output_file
        if "file" in log_tbl:
            raw_file = log_tbl["file"]
            if not isinstance(raw_file, str):
                raise ConfigError(f"Invalid path for 'logger.file': {raw_file!r}", key="logger.file")
            output_file = Path(raw_file)
            if base is not None and not output_file.is_absolute():
                output_file = base / output_file

        preset = defaults.preset
        if "preset" in log_tbl:
            raw_preset = log_tbl["preset"]
            parsed = PresetType.parse(raw_preset) if isinstance(raw_preset, str) else None
            if parsed is None:
                raise ConfigError(
                    f"Invalid preset for 'logger.preset': {raw_preset!r}", key="logger.preset"
                )
            preset = parsed

        colors = dict(defaults.level_colors)
        for name, raw_color in _as_table(io_tbl.get("colors", {}), "io.colors").items():
            key = f"io.colors.{name}"
            level = LogLevel.parse(name)
            if level is None or not level.is_emittable:
                raise ConfigError(f"Invalid level name for '{key}'", key=key)
            colors[level] = _as_color(raw_color, key)

        return cls(
            output_file=output_file,
            include_timestamps=_as_bool(
                log_tbl.get("timestamps", defaults.include_timestamps), "logger.timestamps"
            ),
            min_logging=_as_level(log_tbl.get("min_level", defaults.min_logging), "logger.min_level"),
            min_file_logging=_as_level(
                log_tbl.get("min_file_level", defaults.min_file_logging), "logger.min_file_level"
            ),
            preset=preset,
            io_min_level=_as_level(io_tbl.get("min_level", defaults.io_min_level), "io.min_level"),
            level_colors=colors,
        )

    @classmethod
    def from_toml_file(cls, path: Path) -> Settings:
        """Load settings from ``versalog.toml`` or ``pyproject.toml``."""
        data = load_toml_dict(path)
        table = versalog_table(data, is_pyproject=path.name == PYPROJECT_TOML_NAME)
        logger.debug("loaded settings from %s", path)
        return cls.from_mapping(table, base=path.parent)

    @classmethod
    def discover(cls, directory: Path | None = None) -> Settings:
        """Load settings from the first settings file found in ``directory``.

        ``versalog.toml`` wins over ``pyproject.toml``; defaults are returned
        when neither exists.
        """
        root = directory or Path.cwd()
        for name in (VERSALOG_TOML_NAME, PYPROJECT_TOML_NAME):
            candidate = root / name
            if candidate.is_file():
                return cls.from_toml_file(candidate)
        return cls()

    def with_env(self, environ: Mapping[str, str] | None = None) -> Settings:
        """Return a copy with environment overrides applied."""
        env = os.environ if environ is None else environ
        changes: dict[str, Any] = {}
        if env.get(ENV_MIN_LEVEL):
            changes["min_logging"] = _as_level(env[ENV_MIN_LEVEL], ENV_MIN_LEVEL)
        if env.get(ENV_MIN_FILE_LEVEL):
            changes["min_file_logging"] = _as_level(env[ENV_MIN_FILE_LEVEL], ENV_MIN_FILE_LEVEL)
        if env.get(ENV_LOG_FILE):
            changes["output_file"] = Path(env[ENV_LOG_FILE])
        if env.get(ENV_TIMESTAMPS):
            changes["include_timestamps"] = _as_bool(env[ENV_TIMESTAMPS], ENV_TIMESTAMPS)
        return replace(self, **changes) if changes else self

    def build_io(self, handler: VersatileHandler | None = None) -> VersatileIO:
        """Create a `VersatileIO` using these colors and threshold.

        Args:
            handler (VersatileHandler | None): Installed before the table and
                threshold are applied (installing resets them).
        """
        io = VersatileIO()
        if handler is not None:
            io.set_handler(handler, message=False)
        io.initialize_levels(self.level_colors)
        io.min_log_level = self.io_min_level
        return io

    def build(self, *, slot: LoggerSlot = DEFAULT_SLOT, io: VersatileIO | None = None) -> Logger:
        """Initialize ``slot`` with a logger configured from these settings."""
        return initialize_preset(
            self.preset,
            self.output_file,
            self.min_logging,
            self.min_file_logging,
            include_timestamps=self.include_timestamps,
            slot=slot,
            io=io,
        )
