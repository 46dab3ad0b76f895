"""Command-line parsing utilities."""

import argparse
import sys
from dataclasses import dataclass, field

from .colors import STYLES


@dataclass
class ColorArg:
    """A truecolor option applied after the named styles."""

    kind: str  # "rgb", "hex" or "hsl"
    background: bool
    value: tuple[int, int, int] | tuple[float, float, float] | str


@dataclass
class ParsedArgs:
    """Parsed command-line arguments."""

    text: str | None
    styles: list[str] = field(default_factory=list)
    colors: list[ColorArg] = field(default_factory=list)
    force_color: bool = False


def parse_triple(raw: str, convert: type) -> tuple:
    """Parse "a,b,c" into a 3-tuple of *convert* values.

    Raises:
        argparse.ArgumentTypeError: If the value is not three comma-separated numbers

    """
    parts = [part.strip() for part in raw.split(",")]
    if len(parts) != 3:
        msg = f"expected three comma-separated values, got {raw!r}"
        raise argparse.ArgumentTypeError(msg)
    try:
        return tuple(convert(part) for part in parts)
    except ValueError as e:
        msg = f"invalid value {raw!r}: {e}"
        raise argparse.ArgumentTypeError(msg) from e


def _rgb_triple(raw: str) -> tuple[int, int, int]:
    triple = parse_triple(raw, int)
    if not all(0 <= channel <= 255 for channel in triple):
        msg = f"RGB channels must be 0-255, got {raw!r}"
        raise argparse.ArgumentTypeError(msg)
    return triple


def _hsl_triple(raw: str) -> tuple[float, float, float]:
    return parse_triple(raw, float)


class _AppendColor(argparse.Action):
    """Record truecolor options in command-line order."""

    def __init__(self, option_strings: list[str], dest: str, kind: str, background: bool, **kwargs) -> None:
        self.kind = kind
        self.background = background
        super().__init__(option_strings, dest, **kwargs)

    def __call__(self, parser, namespace, values, option_string=None) -> None:
        colors = getattr(namespace, self.dest) or []
        colors.append(ColorArg(kind=self.kind, background=self.background, value=values))
        setattr(namespace, self.dest, colors)


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the colored-text command."""
    parser = argparse.ArgumentParser(
        prog="colored-text",
        description="Style terminal text with ANSI colors",
        epilog="Without TEXT, prints a showcase of every color and style. "
        "Set NO_COLOR to disable styling.",
    )

    parser.add_argument(
        "text",
        nargs="?",
        help="Text to style",
    )
    parser.add_argument(
        "-s",
        "--style",
        action="append",
        default=[],
        choices=sorted(STYLES),
        metavar="NAME",
        help="Named color or style, applied in order (e.g. red, bold, on_blue)",
    )

    for kind, convert, metavar in (
        ("rgb", _rgb_triple, "R,G,B"),
        ("hex", str, "HEX"),
        ("hsl", _hsl_triple, "H,S,L"),
    ):
        parser.add_argument(
            f"--{kind}",
            dest="colors",
            action=_AppendColor,
            kind=kind,
            background=False,
            type=convert,
            metavar=metavar,
            help=f"Foreground color as {metavar}",
        )
        parser.add_argument(
            f"--on-{kind}",
            dest="colors",
            action=_AppendColor,
            kind=kind,
            background=True,
            type=convert,
            metavar=metavar,
            help=f"Background color as {metavar}",
        )

    parser.add_argument(
        "--force-color",
        action="store_true",
        help="Emit colors even when output is not a terminal",
    )
    return parser


def parse_args(argv: list[str] | None = None) -> ParsedArgs:
    """Parse command-line arguments.

    Args:
        argv: Command line arguments (defaults to sys.argv)

    Returns:
        ParsedArgs with the text, styles and colors to apply

    """
    if argv is None:
        argv = sys.argv

    args = build_parser().parse_args(argv[1:])

    return ParsedArgs(
        text=args.text,
        styles=args.style,
        colors=args.colors or [],
        force_color=args.force_color,
    )
