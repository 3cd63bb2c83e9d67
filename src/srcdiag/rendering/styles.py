# topmark:header:start
#
#   project      : SrcDiag
#   file         : styles.py
#   file_relpath : src/srcdiag/rendering/styles.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pluggable text styling for diagnostic reports.

The renderer never talks to a color library directly. It calls a *stylizer*:
any callable ``(text, style_name) -> str``. This module provides the two
stock stylizers and the configuration record that carries one.

Key types:
    - `Colorizer`: Protocol describing any callable compatible with
      `yachalk.ChalkBuilder.__call__`.
    - `StyleName`: `str, Enum` of the style names used by the renderer. The
      enum `.value` remains a plain string, while the yachalk colorizer is
      exposed via `.color`.
    - `Stylizer`: Protocol for the ``stylize`` strategy.
    - `RenderConfig`: frozen record holding the strategy (identity by default).

Example:
    ```python
    from srcdiag.rendering.styles import RenderConfig, chalk_stylize

    config = RenderConfig(stylize=chalk_stylize)
    print(render_diagnostic(diagnostic, config))
    ```
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Protocol

from yachalk import chalk


class Colorizer(Protocol):
    """Callable that decorates a string for display.

    Designed to be compatible with `yachalk.ChalkBuilder.__call__`, which
    accepts a variadic list of arguments and a `sep` keyword. SrcDiag
    calls colorizers with a single string.
    """

    def __call__(self, *args: object, sep: str = " ") -> str:
        """Colorize and concatenate provided arguments into a display string."""
        ...


class Stylizer(Protocol):
    """The ``stylize`` strategy used by the renderer.

    Implementations receive the text and a style name and return the text to
    emit. Unknown style names must be tolerated (typically by returning the
    text unchanged).
    """

    def __call__(self, text: str, style_name: str, /) -> str:
        """Return ``text`` decorated according to ``style_name``."""
        ...


class StyleName(str, Enum):
    """Style names emitted by the renderer, each with its yachalk colorizer.

    The enum member remains a `str` (so Enum internals, hashing, repr, etc.
    behave normally), and the colorizer is stored separately on the instance.
    """

    _value_: str
    _color: Colorizer

    GREY = ("grey", chalk.gray)
    RED = ("red", chalk.red)
    BOLD = ("bold", chalk.bold)
    INVERSE = ("inverse", chalk.inverse)
    RESET = ("reset", chalk.reset)

    def __new__(cls, text: str, color: Colorizer) -> StyleName:
        """Construct a style member.

        Args:
            text (str): The style name (stored in `_value_`).
            color (Colorizer): The yachalk builder implementing the style.

        Returns:
            StyleName: The newly constructed enum member.
        """
        obj: StyleName = str.__new__(cls, text)
        obj._value_ = text
        obj._color = color
        return obj

    @property
    def color(self) -> Colorizer:
        """Return the colorizer associated with this style."""
        return self._color

    @classmethod
    def lookup(cls, name: str) -> StyleName | None:
        """Return the member named ``name``, or None for unknown names."""
        try:
            return cls(name)
        except ValueError:
            return None


def identity_stylize(text: str, style_name: str, /) -> str:
    """Return ``text`` unchanged (the default, colorless strategy)."""
    return text


def chalk_stylize(text: str, style_name: str, /) -> str:
    """Style ``text`` with yachalk according to ``style_name``.

    Unknown style names leave the text unchanged. An empty text stays empty
    for every style.
    """
    style: StyleName | None = StyleName.lookup(style_name)
    if style is None or not text:
        return text
    return style.color(text)


@dataclass(frozen=True, slots=True)
class RenderConfig:
    """Configuration for `render_diagnostic`.

    Attributes:
        stylize: Styling strategy; ``None`` means identity (no styling). The
            value is validated at render time, not here, so a misconfigured
            record can be built but never rendered.
    """

    stylize: object = None

    @classmethod
    def for_color(cls, enabled: bool) -> RenderConfig:
        """Return a config using yachalk styling when ``enabled``, identity otherwise."""
        return cls(stylize=chalk_stylize if enabled else None)
