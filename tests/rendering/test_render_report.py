# topmark:header:start
#
#   project      : SrcDiag
#   file         : test_render_report.py
#   file_relpath : tests/rendering/test_render_report.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Human-readable report rendering with pluggable styling."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from srcdiag.diagnostic import SourceDiagnostic, build_diagnostic
from srcdiag.errors import ConfigurationError
from srcdiag.rendering import RenderConfig, render_diagnostic, resolve_stylizer
from srcdiag.rendering.styles import identity_stylize
from srcdiag.sources import SourceSession

if TYPE_CHECKING:
    from collections.abc import Callable

EXPECTED_PLAIN = (
    "SyntaxError: Unrecognised input in a.less on line 2, column 11:\n"
    "1 body {\n"
    "2   color: red;\n"
    "3 }\n"
)


class RecordingStylizer:
    """Stylizer that records its calls and returns the text unchanged."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, str]] = []

    def __call__(self, text: str, style_name: str, /) -> str:
        self.calls.append((text, style_name))
        return text


def tag_stylize(text: str, style_name: str, /) -> str:
    return f"<{style_name}>{text}</{style_name}>"


@pytest.fixture
def sample_diagnostic(
    sample_session: SourceSession, sample_failure: dict[str, object]
) -> SourceDiagnostic:
    return build_diagnostic(sample_failure, sample_session)


def test_identity_rendering_of_running_example(sample_diagnostic: SourceDiagnostic) -> None:
    assert render_diagnostic(sample_diagnostic) == EXPECTED_PLAIN


@pytest.mark.parametrize(
    "config",
    [None, RenderConfig(), RenderConfig(stylize=None), {}, {"stylize": None}],
)
def test_absent_stylize_means_identity(
    sample_diagnostic: SourceDiagnostic, config: object
) -> None:
    assert render_diagnostic(sample_diagnostic, config) == EXPECTED_PLAIN  # type: ignore[arg-type]


def test_rendering_is_deterministic(sample_diagnostic: SourceDiagnostic) -> None:
    config = RenderConfig(stylize=tag_stylize)
    assert render_diagnostic(sample_diagnostic, config) == render_diagnostic(
        sample_diagnostic, config
    )


def test_str_is_plain_rendering(sample_diagnostic: SourceDiagnostic) -> None:
    assert str(sample_diagnostic) == EXPECTED_PLAIN


def test_stylize_call_sequence(sample_diagnostic: SourceDiagnostic) -> None:
    """The stylizer is called with each fragment and its style name, in order."""
    recorder = RecordingStylizer()
    text: str = render_diagnostic(sample_diagnostic, RenderConfig(stylize=recorder))

    assert text == EXPECTED_PLAIN
    assert recorder.calls == [
        ("SyntaxError: Unrecognised input", "red"),
        (" in ", "red"),
        (" on line 2, column 11:", "grey"),
        ("1 body {", "grey"),
        ("r", "bold"),
        ("red;", "red"),
        ("red;", "inverse"),
        ("3 }", "grey"),
        ("", "reset"),
    ]


def test_error_line_nests_styles(sample_diagnostic: SourceDiagnostic) -> None:
    """The column character is bold inside the red tail, all wrapped in inverse."""
    lines: list[str] = render_diagnostic(
        sample_diagnostic, RenderConfig(stylize=tag_stylize)
    ).split("\n")

    assert lines[0] == (
        "<red>SyntaxError: Unrecognised input</red><red> in </red>a.less"
        "<grey> on line 2, column 11:</grey>"
    )
    assert lines[1] == "<grey>1 body {</grey>"
    assert lines[2] == "2   color: <inverse><red><bold>r</bold>ed;</red></inverse>"
    assert lines[3] == "<grey>3 }</grey><reset></reset>"


def test_mapping_config_is_accepted(sample_diagnostic: SourceDiagnostic) -> None:
    recorder = RecordingStylizer()
    render_diagnostic(sample_diagnostic, {"stylize": recorder})
    assert recorder.calls


@pytest.mark.parametrize("bad", ["red", 3, True, ["bold"], {"red": "x"}])
def test_non_callable_stylize_raises_before_any_output(
    sample_diagnostic: SourceDiagnostic, bad: object
) -> None:
    with pytest.raises(ConfigurationError) as excinfo:
        render_diagnostic(sample_diagnostic, RenderConfig(stylize=bad))

    assert str(excinfo.value) == f"stylize must be a function, got a {type(bad).__name__}"
    assert isinstance(excinfo.value, TypeError)


def test_resolve_stylizer_returns_configured_callable() -> None:
    recorder = RecordingStylizer()
    assert resolve_stylizer(RenderConfig(stylize=recorder)) is recorder
    assert resolve_stylizer(None) is identity_stylize


def test_call_site_block() -> None:
    """Failures inside an inclusion get a trailing ``from`` block."""
    text = '@import "a.less";\n.b { color: @x; }\n'
    session = SourceSession({"main.less": text})
    diag = build_diagnostic(
        {
            "type": "Name",
            "filename": "main.less",
            "index": text.index("@x"),
            "message": "variable @x is undefined",
            "call": 0,
        },
        session,
    )

    assert render_diagnostic(diag) == (
        "NameError: variable @x is undefined in main.less on line 2, column 13:\n"
        '1 @import "a.less";\n'
        "2 .b { color: @x; }\n"
        "3 \n"
        "from main.less\n"
        '1 @import "a.less";\n'
    )


def test_call_site_without_extract_renders_empty_text() -> None:
    diag = SourceDiagnostic(filename="f.less", message="m", call_line=5, call_extract=None)
    assert render_diagnostic(diag).endswith("from f.less\n5 \n")


def test_empty_current_line_renders_number_only() -> None:
    """An empty (but present) error line renders as just its number."""
    session = SourceSession({"f": "a\n\nb"})
    diag = build_diagnostic({"filename": "f", "index": 2, "message": "m"}, session)

    assert render_diagnostic(diag) == (
        "SyntaxError: m in f on line 2, column 1:\n1 a\n2 \n3 b\n"
    )


def test_absent_neighbour_lines_are_skipped() -> None:
    session = SourceSession({"f": "only line"})
    diag = build_diagnostic({"filename": "f", "index": 5, "message": "m"}, session)

    assert render_diagnostic(diag) == "SyntaxError: m in f on line 1, column 6:\n1 only line\n"


@pytest.mark.parametrize(
    ("diag", "expected"),
    [
        (SourceDiagnostic(message="boom"), "SyntaxError: boom\n\n"),
        (SourceDiagnostic(filename="x.less", message="boom"), "SyntaxError: boom in x.less\n\n"),
        (SourceDiagnostic(kind="Parse"), "ParseError: \n\n"),
    ],
)
def test_partially_populated_diagnostics_render(diag: SourceDiagnostic, expected: str) -> None:
    assert render_diagnostic(diag) == expected


def test_rendering_does_not_mutate_diagnostic(sample_diagnostic: SourceDiagnostic) -> None:
    before: dict[str, object] = sample_diagnostic.to_dict()
    stylizers: list[Callable[[str, str], str]] = [tag_stylize, identity_stylize]
    for stylize in stylizers:
        render_diagnostic(sample_diagnostic, RenderConfig(stylize=stylize))
    assert sample_diagnostic.to_dict() == before


def test_failure_at_end_of_file_renders_its_line_number() -> None:
    """The error row is present even when the failing line is empty."""
    session = SourceSession({"a.less": "a {\n"})
    diag = build_diagnostic({"filename": "a.less", "index": 4, "message": "missing }"}, session)

    assert render_diagnostic(diag) == (
        "SyntaxError: missing } in a.less on line 2, column 1:\n1 a {\n2 \n"
    )
