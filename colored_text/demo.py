"""Showcase output and argument-driven styling for the command line."""

from . import styler
from .parser import ColorArg, ParsedArgs
from .styler import Styled


def apply_color(text: str, color: ColorArg) -> str:
    """Apply one truecolor option to *text*."""
    match color:
        case ColorArg(kind="rgb", background=False, value=(r, g, b)):
            return styler.rgb(text, r, g, b)
        case ColorArg(kind="rgb", background=True, value=(r, g, b)):
            return styler.on_rgb(text, r, g, b)
        case ColorArg(kind="hsl", background=False, value=(h, s, l)):
            return styler.hsl(text, h, s, l)
        case ColorArg(kind="hsl", background=True, value=(h, s, l)):
            return styler.on_hsl(text, h, s, l)
        case ColorArg(kind="hex", background=False, value=str(value)):
            return styler.hex(text, value)
        case ColorArg(kind="hex", background=True, value=str(value)):
            return styler.on_hex(text, value)
        case _:
            msg = f"Unknown color option: {color}"
            raise ValueError(msg)


def style_text(args: ParsedArgs) -> str:
    """Style ``args.text`` with each named style, then each color, in order."""
    text = Styled(args.text or "")
    for name in args.styles:
        text = getattr(text, name)()
    result = str(text)
    for color in args.colors:
        result = apply_color(result, color)
    return result


def showcase() -> list[str]:
    """Return the lines of the color and style showcase."""
    name = "World"
    lines = [
        "",
        "Basic colors:",
        styler.red("Red text"),
        styler.green("Green text"),
        styler.blue("Blue text"),
        styler.yellow("Yellow text"),
        styler.magenta("Magenta text"),
        styler.cyan("Cyan text"),
        styler.white("White text"),
        styler.black("Black text"),
        "",
        "Bright colors:",
        styler.bright_red("Bright red text"),
        styler.bright_green("Bright green text"),
        styler.bright_yellow("Bright yellow text"),
        styler.bright_blue("Bright blue text"),
        styler.bright_magenta("Bright magenta text"),
        styler.bright_cyan("Bright cyan text"),
        styler.bright_white("Bright white text"),
        "",
        "Background colors:",
        styler.on_red("Red background"),
        styler.on_green("Green background"),
        styler.on_blue("Blue background"),
        styler.on_yellow("Yellow background"),
        "",
        "Text styles:",
        styler.bold("Bold text"),
        styler.dim("Dim text"),
        styler.italic("Italic text"),
        styler.underline("Underlined text"),
        styler.inverse("Inverse text"),
        styler.strikethrough("Strikethrough text"),
        "",
        "RGB, HSL and Hex colors:",
        styler.rgb("Custom RGB color", 255, 128, 0),
        styler.on_rgb("Custom RGB background", 0, 128, 255),
        styler.hsl("HSL color (30, 100%, 50%)", 30, 100, 50),
        styler.on_hsl("HSL background (210, 100%, 50%)", 210, 100, 50),
        styler.hex("Hex color (#ff8000)", "#ff8000"),
        styler.on_hex("Hex background (#0080ff)", "#0080ff"),
        "",
        "Chained styles:",
        Styled("Bold red text").red().bold(),
        Styled("Italic blue text on yellow background").blue().italic().on_yellow(),
        Styled("RGB text with background").rgb(255, 128, 0).on_blue(),
        "",
        "Inside f-strings:",
        f"Hello, {Styled(name).blue().bold()}!",
        "",
        "Mixing styles:",
        "{}. {} {} {}!".format(
            Styled("Notice").red().bold(),
            styler.blue("This"),
            styler.green("is"),
            Styled("important").yellow().underline(),
        ),
    ]
    return [str(line) for line in lines]
