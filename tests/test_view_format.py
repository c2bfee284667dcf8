from __future__ import annotations

import pytest

from register_list.store import (
    FrameLayout,
    Location,
    Malformed,
    Marker,
    Number,
    RectangleBlock,
    StyleSpan,
    Text,
    Unprintable,
    WindowLayout,
)
from register_list.view import (
    FormatOptions,
    PRINTABLE_TAGS,
    TypeTag,
    classify,
    diagnose,
    format_payload,
)


@pytest.mark.parametrize(
    ("payload", "tag"),
    [
        (Text("x"), TypeTag.TEXT),
        (Number(3), TypeTag.NUMBER),
        (Location(Marker("notes", 4)), TypeTag.MARKER),
        (RectangleBlock(("a", "b")), TypeTag.RECTANGLE),
        (WindowLayout("main"), TypeTag.WINDOW),
        (FrameLayout(), TypeTag.FRAME),
        (Unprintable(), TypeTag.UNPRINTABLE),
        (Malformed("broken"), TypeTag.ERROR),
        ("raw string", TypeTag.ERROR),
        (None, TypeTag.ERROR),
    ],
)
def test_classify_is_total_and_deterministic(payload: object, tag: TypeTag) -> None:
    assert classify(payload) is tag
    assert classify(payload) is classify(payload)


def test_printable_tags_exclude_error() -> None:
    assert len(PRINTABLE_TAGS) == 7
    assert TypeTag.ERROR not in PRINTABLE_TAGS


def test_diagnose_reports_only_errors() -> None:
    assert diagnose(Text("fine")) is None
    assert diagnose(Malformed("bad shape")) == "bad shape"
    assert "int" in (diagnose(17) or "")


def test_format_markers() -> None:
    live = Location(Marker("notes", 12))
    no_position = Location(Marker("notes"))
    gone = Location(Marker(None))

    assert format_payload(live, TypeTag.MARKER).text == (
        "[Marker at point 12 in buffer notes]"
    )
    assert format_payload(no_position, TypeTag.MARKER).text == "[Marker in buffer notes]"
    assert format_payload(gone, TypeTag.MARKER).text == "[Marker gone?]"


def test_format_simple_types() -> None:
    assert format_payload(Number(-4), TypeTag.NUMBER).text == "Number: -4"
    assert format_payload(Text("a\nb\r\tc"), TypeTag.TEXT).text == "a b  c"
    assert format_payload(RectangleBlock(("ab", "cd", "ef")), TypeTag.RECTANGLE).text == (
        "ab\\ cd\\ ef"
    )
    assert format_payload(WindowLayout("main"), TypeTag.WINDOW).text == (
        '[Window configuration in frame "main"]'
    )
    assert format_payload(FrameLayout(), TypeTag.FRAME).text == "[Frame configuration]"
    assert format_payload(Unprintable(), TypeTag.UNPRINTABLE).text == (
        "[Error: unknow type]"
    )
    assert format_payload(Malformed("x"), TypeTag.ERROR).text == "[Error: unknow type]"


def test_elision_keeps_exact_length() -> None:
    options = FormatOptions(elide_length=10)

    display = format_payload(Text("abcdefghijklmnopqrst"), TypeTag.TEXT, options)

    assert display.text == "abcdefg..."
    assert len(display.text) == 10


@pytest.mark.parametrize("elide, expected", [(0, ""), (1, "a"), (2, "ab"), (3, "abc"), (4, "a...")])
def test_short_elide_length_never_overshoots(elide: int, expected: str) -> None:
    options = FormatOptions(elide_length=elide)

    display = format_payload(Text("abcdefgh"), TypeTag.TEXT, options)

    assert display.text == expected
    assert len(display.text) <= elide


def test_elision_only_applies_to_text() -> None:
    options = FormatOptions(elide_length=5)

    display = format_payload(Number(123456789), TypeTag.NUMBER, options)

    assert display.text == "Number: 123456789"


def test_width_clamp_truncates_without_ellipsis() -> None:
    options = FormatOptions(max_width=8)

    display = format_payload(WindowLayout("main"), TypeTag.WINDOW, options)

    assert display.text == "[Window "


def test_fontify_controls_style_spans() -> None:
    payload = Text("bold text", (StyleSpan(0, 4, "bold"), StyleSpan(5, 9, "italic")))

    stripped = format_payload(payload, TypeTag.TEXT, FormatOptions(fontify=False))
    kept = format_payload(payload, TypeTag.TEXT, FormatOptions(fontify=True))
    clipped = format_payload(
        payload, TypeTag.TEXT, FormatOptions(fontify=True, max_width=6)
    )

    assert stripped.spans == ()
    assert kept.spans == payload.styles
    assert clipped.text == "bold t"
    assert clipped.spans == (StyleSpan(0, 4, "bold"), StyleSpan(5, 6, "italic"))
