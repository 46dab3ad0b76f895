"""colored-text: Add colors and styles to terminal text.

Every operation takes any object and returns its text wrapped in ANSI SGR
escape codes::

    from colored_text import Styled, bold, red

    print(red("Error"))
    print(bold(red("Loud error")))
    print(Styled("Chained").green().underline())

Styling is suppressed (plain text returned) when ``NO_COLOR`` is set to any
value, or when stdout is not a terminal unless the terminal check has been
turned off with :func:`set_terminal_check`. :func:`clear` and the fallback
for an invalid hex color always emit reset codes.
"""

import sys

from .colors import STYLES, Colors
from .convert import hex_to_rgb, hsl_to_rgb
from .demo import showcase, style_text
from .parser import parse_args
from .policy import (
    ColorPolicy,
    set_terminal_check,
    should_colorize,
    terminal_check,
    terminal_check_enabled,
)
from .styler import (
    Styled,
    black,
    blue,
    bold,
    bright_blue,
    bright_cyan,
    bright_green,
    bright_magenta,
    bright_red,
    bright_white,
    bright_yellow,
    clear,
    colorize,
    cyan,
    dim,
    green,
    hex,  # noqa: A004
    hsl,
    inverse,
    italic,
    magenta,
    on_black,
    on_blue,
    on_cyan,
    on_green,
    on_hex,
    on_hsl,
    on_magenta,
    on_red,
    on_rgb,
    on_white,
    on_yellow,
    red,
    rgb,
    strikethrough,
    underline,
    white,
    yellow,
)

__all__ = [
    "STYLES",
    "ColorPolicy",
    "Colors",
    "Styled",
    "black",
    "blue",
    "bold",
    "bright_blue",
    "bright_cyan",
    "bright_green",
    "bright_magenta",
    "bright_red",
    "bright_white",
    "bright_yellow",
    "clear",
    "colorize",
    "cyan",
    "dim",
    "green",
    "hex",
    "hex_to_rgb",
    "hsl",
    "hsl_to_rgb",
    "inverse",
    "italic",
    "magenta",
    "main",
    "on_black",
    "on_blue",
    "on_cyan",
    "on_green",
    "on_hex",
    "on_hsl",
    "on_magenta",
    "on_red",
    "on_rgb",
    "on_white",
    "on_yellow",
    "red",
    "rgb",
    "set_terminal_check",
    "should_colorize",
    "strikethrough",
    "terminal_check",
    "terminal_check_enabled",
    "underline",
    "white",
    "yellow",
]


def main(argv: list[str] | None = None) -> None:
    """Execute main program entry point."""
    try:
        args = parse_args(argv)

        if args.force_color:
            set_terminal_check(False)

        if args.text is None:
            for line in showcase():
                print(line)
        else:
            print(style_text(args))

    except ValueError as e:
        print(red(f"Error: {e}", policy=ColorPolicy(stream=sys.stderr)), file=sys.stderr)
        sys.exit(1)
    except KeyboardInterrupt:
        print(red("\nInterrupted", policy=ColorPolicy(stream=sys.stderr)), file=sys.stderr)
        sys.exit(130)


if __name__ == "__main__":
    main()
