# topmark:header:start
#
#   project      : SrcDiag
#   file         : test_styles.py
#   file_relpath : tests/rendering/test_styles.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Stock stylizers and the yachalk-backed style names."""

from __future__ import annotations

import pytest

from srcdiag.rendering import RenderConfig, StyleName, chalk_stylize, identity_stylize


def test_identity_stylize_returns_text() -> None:
    assert identity_stylize("body", "red") == "body"


@pytest.mark.parametrize("name", ["grey", "red", "bold", "inverse", "reset"])
def test_style_names_resolve(name: str) -> None:
    style: StyleName | None = StyleName.lookup(name)
    assert style is not None
    assert style.value == name
    assert style == name


def test_unknown_style_name_lookup_is_none() -> None:
    assert StyleName.lookup("blink") is None


@pytest.mark.parametrize("style", list(StyleName))
def test_chalk_stylize_delegates_to_yachalk(style: StyleName) -> None:
    assert chalk_stylize("text", style.value) == style.color("text")


def test_chalk_stylize_leaves_unknown_styles_unchanged() -> None:
    assert chalk_stylize("text", "sparkle") == "text"


def test_chalk_stylize_keeps_empty_text_empty() -> None:
    assert chalk_stylize("", "red") == ""


def test_render_config_for_color() -> None:
    assert RenderConfig.for_color(True).stylize is chalk_stylize
    assert RenderConfig.for_color(False).stylize is None
