# topmark:header:start
#
#   project      : SrcDiag
#   file         : settings.py
#   file_relpath : src/srcdiag/config/settings.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Settings file support for the SrcDiag CLI.

Settings are read from TOML with `tomlkit`, from the first of:

1. an explicit path (``--config``);
2. ``srcdiag.toml`` in the working directory (top-level table);
3. ``pyproject.toml`` in the working directory (``[tool.srcdiag]`` table).

Example ``srcdiag.toml``:

```toml
color = "never"          # auto | always | never
format = "default"       # default | json | ndjson
encoding = "utf-8"       # encoding of source files read by the CLI
fallback_filename = "main.less"
```

Unknown keys are logged and ignored. Invalid values raise `SettingsError`.
Command-line flags take precedence over settings (see `Settings.merged`).
"""

from __future__ import annotations

import codecs
from dataclasses import dataclass, replace
from pathlib import Path
from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from srcdiag.cli_shared.color import ColorMode
from srcdiag.cli_shared.formats import OutputFormat
from srcdiag.config.logging import get_logger
from srcdiag.constants import (
    DEFAULT_ENCODING,
    PYPROJECT_FILE_NAME,
    PYPROJECT_TOOL_TABLE,
    SETTINGS_FILE_NAME,
)
from srcdiag.errors import SettingsError

if TYPE_CHECKING:
    from collections.abc import Mapping

    from srcdiag.config.logging import SrcDiagLogger


logger: SrcDiagLogger = get_logger(__name__)

TomlTable = dict[str, Any]

_KNOWN_KEYS: frozenset[str] = frozenset({"color", "format", "encoding", "fallback_filename"})


@dataclass(frozen=True, slots=True)
class Settings:
    """Effective settings for a CLI run.

    Attributes:
        color: Color intent for human output.
        output_format: Default output format.
        encoding: Encoding used to read source files.
        fallback_filename: File to attribute failures to when they name none.
        source: Path of the settings file these values came from, if any.
    """

    color: ColorMode = ColorMode.AUTO
    output_format: OutputFormat = OutputFormat.DEFAULT
    encoding: str = DEFAULT_ENCODING
    fallback_filename: str | None = None
    source: Path | None = None

    @classmethod
    def from_table(cls, table: Mapping[str, Any], *, source: Path | None = None) -> Settings:
        """Build settings from a parsed TOML table.

        Args:
            table: Plain mapping of setting keys to values.
            source: File the table was read from (for messages).

        Returns:
            The validated settings.

        Raises:
            SettingsError: If a value has the wrong type or an unknown choice.
        """
        where: str = f" in {source}" if source else ""
        for key in table:
            if key not in _KNOWN_KEYS:
                logger.warning("Ignoring unknown setting %r%s", key, where)

        color: ColorMode = _parse_choice(table, "color", ColorMode, ColorMode.AUTO, where)
        output_format: OutputFormat = _parse_choice(
            table, "format", OutputFormat, OutputFormat.DEFAULT, where
        )

        encoding: object = table.get("encoding", DEFAULT_ENCODING)
        if not isinstance(encoding, str):
            raise SettingsError(f"Setting 'encoding'{where} must be a string")
        try:
            codecs.lookup(encoding)
        except LookupError as e:
            raise SettingsError(f"Unknown encoding {encoding!r}{where}") from e

        fallback: object = table.get("fallback_filename")
        if fallback is not None and not isinstance(fallback, str):
            raise SettingsError(f"Setting 'fallback_filename'{where} must be a string")

        return cls(
            color=color,
            output_format=output_format,
            encoding=encoding,
            fallback_filename=fallback,
            source=source,
        )

    def merged(
        self,
        *,
        color: ColorMode | None = None,
        output_format: OutputFormat | None = None,
    ) -> Settings:
        """Return a copy with command-line overrides applied (None = keep)."""
        return replace(
            self,
            color=color if color is not None else self.color,
            output_format=output_format if output_format is not None else self.output_format,
        )


def _parse_choice(
    table: Mapping[str, Any],
    key: str,
    enum_cls: type[Any],
    default: Any,
    where: str,
) -> Any:
    value: object = table.get(key)
    if value is None:
        return default
    if not isinstance(value, str):
        raise SettingsError(f"Setting {key!r}{where} must be a string")
    try:
        return enum_cls(value.lower())
    except ValueError as e:
        choices: str = ", ".join(m.value for m in enum_cls)
        raise SettingsError(
            f"Invalid value {value!r} for setting {key!r}{where} (expected one of: {choices})"
        ) from e


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path: Path to a TOML document.

    Returns:
        The parsed TOML content as plain Python values.

    Raises:
        SettingsError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except OSError as e:
        raise SettingsError(f"Cannot read settings from {path}: {e}") from e
    except TomlkitParseError as e:
        raise SettingsError(f"Invalid TOML in {path}: {e}") from e
    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def find_settings_file(cwd: Path) -> tuple[Path, bool] | None:
    """Locate the settings file for ``cwd``.

    Returns:
        ``(path, is_pyproject)`` for the first candidate found, or None.
    """
    candidate: Path = cwd / SETTINGS_FILE_NAME
    if candidate.is_file():
        return candidate, False
    pyproject: Path = cwd / PYPROJECT_FILE_NAME
    if pyproject.is_file():
        return pyproject, True
    return None


def load_settings(path: Path | None = None, *, cwd: Path | None = None) -> Settings:
    """Resolve the effective settings.

    Args:
        path: Explicit settings file (always a plain ``srcdiag.toml``-style table,
            unless it is named ``pyproject.toml``).
        cwd: Directory searched when ``path`` is None; defaults to the working directory.

    Returns:
        Settings: The loaded settings, or defaults when no file applies.

    Raises:
        SettingsError: If the chosen file is unreadable or invalid.
    """
    is_pyproject: bool
    if path is not None:
        is_pyproject = path.name == PYPROJECT_FILE_NAME
    else:
        found: tuple[Path, bool] | None = find_settings_file(cwd or Path.cwd())
        if found is None:
            logger.debug("No settings file found; using defaults")
            return Settings()
        path, is_pyproject = found

    data: TomlTable = load_toml_dict(path)
    if is_pyproject:
        tool: object = data.get("tool", {})
        table: object = tool.get(PYPROJECT_TOOL_TABLE) if isinstance(tool, dict) else None
        if table is None:
            logger.debug("%s has no [tool.%s] table; using defaults", path, PYPROJECT_TOOL_TABLE)
            return Settings()
        if not isinstance(table, dict):
            raise SettingsError(f"[tool.{PYPROJECT_TOOL_TABLE}] in {path} must be a table")
        data = cast("TomlTable", table)

    logger.debug("Loading settings from %s", path)
    return Settings.from_table(data, source=path)
