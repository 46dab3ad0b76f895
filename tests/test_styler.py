#!/usr/bin/env python3
"""Tests for the styler module."""

import pytest

import colored_text
from colored_text import (
    Styled,
    blue,
    bold,
    clear,
    colorize,
    hsl,
    italic,
    on_hex,
    on_hsl,
    on_rgb,
    on_yellow,
    red,
    rgb,
)
from colored_text import hex as hex_color

ESC = "\x1b"


def wrap(code: str, text: str) -> str:
    return f"{ESC}[{code}m{text}{ESC}[0m"


@pytest.mark.parametrize(
    ("name", "code"),
    [
        ("red", "31"),
        ("green", "32"),
        ("yellow", "33"),
        ("blue", "34"),
        ("magenta", "35"),
        ("cyan", "36"),
        ("white", "37"),
        ("black", "30"),
        ("bright_red", "91"),
        ("bright_green", "92"),
        ("bright_yellow", "93"),
        ("bright_blue", "94"),
        ("bright_magenta", "95"),
        ("bright_cyan", "96"),
        ("bright_white", "97"),
        ("on_red", "41"),
        ("on_green", "42"),
        ("on_yellow", "43"),
        ("on_blue", "44"),
        ("on_magenta", "45"),
        ("on_cyan", "46"),
        ("on_white", "47"),
        ("on_black", "40"),
        ("bold", "1"),
        ("dim", "2"),
        ("italic", "3"),
        ("underline", "4"),
        ("inverse", "7"),
        ("strikethrough", "9"),
    ],
)
def test_named_operations(name: str, code: str) -> None:
    """Test every named color and style emits its SGR code."""
    assert getattr(colored_text, name)("test") == wrap(code, "test")
    assert getattr(Styled("test"), name)() == wrap(code, "test")
    assert colored_text.STYLES[name] == code


def test_colorize_arbitrary_code() -> None:
    """Test colorize applies any SGR code string."""
    assert colorize("test", "38;5;208") == wrap("38;5;208", "test")


def test_non_string_values() -> None:
    """Test values are styled through their str() form."""
    assert red(42) == wrap("31", "42")
    assert bold(None) == wrap("1", "None")
    assert clear(3.5) == f"{ESC}[0m3.5{ESC}[0m"


def test_str_and_subclass_identical() -> None:
    """Test plain and subclassed strings of equal content style identically."""

    class Name(str):
        pass

    assert red(Name("test")) == red("test")
    assert blue(Styled("test")) == blue("test")
    assert colorize(Name("test"), "35") == colorize("test", "35")


@pytest.mark.parametrize(("r", "g", "b"), [(255, 128, 0), (0, 255, 0), (128, 128, 128), (0, 0, 0), (255, 255, 255)])
def test_rgb(r: int, g: int, b: int) -> None:
    """Test truecolor foreground and background sequences."""
    assert rgb("test", r, g, b) == wrap(f"38;2;{r};{g};{b}", "test")
    assert on_rgb("test", r, g, b) == wrap(f"48;2;{r};{g};{b}", "test")


@pytest.mark.parametrize(("r", "g", "b"), [(256, 0, 0), (0, -1, 0), (0, 0, 1.5), (True, 0, 0)])
def test_rgb_rejects_invalid_channels(r: int, g: int, b: int) -> None:
    """Test channels outside 0-255 or of the wrong type raise ValueError."""
    with pytest.raises(ValueError, match="channel"):
        rgb("test", r, g, b)
    with pytest.raises(ValueError, match="channel"):
        on_rgb("test", r, g, b)


@pytest.mark.parametrize(
    ("color", "r", "g", "b"),
    [
        ("#ff8000", 255, 128, 0),
        ("#00ff00", 0, 255, 0),
        ("#808080", 128, 128, 128),
        ("#000000", 0, 0, 0),
        ("#FFFFFF", 255, 255, 255),
    ],
)
def test_hex(color: str, r: int, g: int, b: int) -> None:
    """Test hex colors with and without the leading #."""
    assert hex_color("test", color) == rgb("test", r, g, b)
    assert hex_color("test", color.lstrip("#")) == rgb("test", r, g, b)
    assert on_hex("test", color) == on_rgb("test", r, g, b)
    assert on_hex("test", color.lstrip("#")) == on_rgb("test", r, g, b)


@pytest.mark.parametrize("color", ["invalid", "#12", "not-a-color", "#12345", "#1234567", "#xyz", "", "#"])
def test_invalid_hex_falls_back_to_clear(color: str) -> None:
    """Test invalid hex colors yield reset-wrapped text."""
    assert hex_color("test", color) == f"{ESC}[0mtest{ESC}[0m"
    assert on_hex("test", color) == clear("test")


def test_hex_round_trip() -> None:
    """Test hex strings built from RGB values style like rgb()."""
    for r in range(0, 256, 15):
        for g in range(0, 256, 17):
            for b in (0, 1, 127, 128, 254, 255):
                encoded = f"#{r:02x}{g:02x}{b:02x}"
                assert hex_color("x", encoded) == rgb("x", r, g, b)


def test_hsl() -> None:
    """Test HSL primaries, gray, white and black."""
    assert hsl("test", 0, 100, 50) == rgb("test", 255, 0, 0)
    assert hsl("test", 120, 100, 50) == rgb("test", 0, 255, 0)
    assert hsl("test", 240, 100, 50) == rgb("test", 0, 0, 255)
    assert hsl("test", 0, 0, 50) in (rgb("test", 127, 127, 127), rgb("test", 128, 128, 128))
    assert hsl("test", 0, 0, 100) == rgb("test", 255, 255, 255)
    assert hsl("test", 0, 0, 0) == rgb("test", 0, 0, 0)


def test_on_hsl() -> None:
    """Test HSL background colors."""
    assert on_hsl("test", 0, 100, 50) == on_rgb("test", 255, 0, 0)
    assert on_hsl("test", 120, 100, 50) == on_rgb("test", 0, 255, 0)
    assert on_hsl("test", 240, 100, 50) == on_rgb("test", 0, 0, 255)


def test_hsl_out_of_range_does_not_raise() -> None:
    """Test unconventional HSL input still produces a color."""
    assert hsl("test", 720, 150, -20).startswith(f"{ESC}[38;2;")
    assert on_hsl("test", -90, 50, 50).startswith(f"{ESC}[48;2;")


def test_chaining_nests() -> None:
    """Test each wrap nests around the previous one without merging resets."""
    assert bold(red("test")) == f"{ESC}[1m{ESC}[31mtest{ESC}[0m{ESC}[0m"
    assert on_yellow(italic(blue("test"))) == f"{ESC}[43m{ESC}[3m{ESC}[34mtest{ESC}[0m{ESC}[0m{ESC}[0m"


def test_styled_chaining() -> None:
    """Test Styled methods chain and match the free functions."""
    chained = Styled("test").red().bold()
    assert isinstance(chained, Styled)
    assert chained == bold(red("test"))
    assert Styled("test").blue().italic().on_yellow() == on_yellow(italic(blue("test")))
    assert Styled("test").rgb(255, 128, 0).on_blue() == f"{ESC}[44m{ESC}[38;2;255;128;0mtest{ESC}[0m{ESC}[0m"
    assert Styled("test").hex("#zz0000").red() == red(clear("test"))
    assert Styled("test").hsl(0, 100, 50).on_hsl(240, 100, 50) == on_rgb(rgb("test", 255, 0, 0), 0, 0, 255)
    assert Styled("test").on_hex("0080ff").clear() == clear(on_rgb("test", 0, 128, 255))


def test_styled_in_format() -> None:
    """Test styled strings embed in f-strings unchanged."""
    name = Styled("World").blue().bold()
    assert f"Hello, {name}!" == f"Hello, {ESC}[1m{ESC}[34mWorld{ESC}[0m{ESC}[0m!"
    assert f"{red('test')}" == wrap("31", "test")


@pytest.mark.usefixtures("no_color")
def test_no_color_returns_plain_text() -> None:
    """Test NO_COLOR suppresses every suppression-aware operation."""
    for name in colored_text.STYLES:
        assert getattr(colored_text, name)("test") == "test"
        assert getattr(Styled("test"), name)() == "test"
    assert colorize("test", "31") == "test"
    assert rgb("test", 255, 128, 0) == "test"
    assert on_rgb("test", 255, 128, 0) == "test"
    assert hsl("test", 0, 100, 50) == "test"
    assert on_hsl("test", 0, 100, 50) == "test"
    assert hex_color("test", "#ff8000") == "test"
    assert on_hex("test", "ff8000") == "test"
    assert bold(red("test")) == "test"
    assert Styled("test").red().bold().on_rgb(1, 2, 3) == "test"
    assert red(Styled("test")) == "test"


@pytest.mark.usefixtures("no_color")
def test_clear_ignores_no_color() -> None:
    """Test clear and the invalid-hex fallback emit resets even with NO_COLOR."""
    assert clear("test") == f"{ESC}[0mtest{ESC}[0m"
    assert hex_color("test", "#xyz") == f"{ESC}[0mtest{ESC}[0m"
    assert on_hex("test", "12345") == f"{ESC}[0mtest{ESC}[0m"


def test_empty_no_color_disables(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test an empty NO_COLOR value still disables styling."""
    monkeypatch.setenv("NO_COLOR", "")
    assert red("test") == "test"


def test_takes_effect_immediately(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test toggling NO_COLOR between calls is seen on the next call."""
    assert red("test") == wrap("31", "test")
    monkeypatch.setenv("NO_COLOR", "1")
    assert red("test") == "test"
    monkeypatch.delenv("NO_COLOR")
    assert red("test") == wrap("31", "test")


def test_injected_policy() -> None:
    """Test an explicit policy overrides the process environment."""
    policy = colored_text.ColorPolicy(environ={"NO_COLOR": "yes"})
    assert red("test", policy=policy) == "test"
    assert Styled("test", policy).red().bold() == "test"
    assert red("test", policy=colored_text.ColorPolicy(environ={})) == wrap("31", "test")
