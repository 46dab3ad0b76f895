"""ANSI SGR code table."""

ESC = "\033"
RESET = f"{ESC}[0m"


class Colors:
    """ANSI SGR codes for named colors and styles."""

    RED = "31"
    GREEN = "32"
    YELLOW = "33"
    BLUE = "34"
    MAGENTA = "35"
    CYAN = "36"
    WHITE = "37"
    BLACK = "30"

    BRIGHT_RED = "91"
    BRIGHT_GREEN = "92"
    BRIGHT_YELLOW = "93"
    BRIGHT_BLUE = "94"
    BRIGHT_MAGENTA = "95"
    BRIGHT_CYAN = "96"
    BRIGHT_WHITE = "97"

    ON_RED = "41"
    ON_GREEN = "42"
    ON_YELLOW = "43"
    ON_BLUE = "44"
    ON_MAGENTA = "45"
    ON_CYAN = "46"
    ON_WHITE = "47"
    ON_BLACK = "40"

    BOLD = "1"
    DIM = "2"
    ITALIC = "3"
    UNDERLINE = "4"
    INVERSE = "7"
    STRIKETHROUGH = "9"

    RESET = "0"

    FOREGROUND_RGB = "38;2"
    BACKGROUND_RGB = "48;2"


# Operation name -> SGR code for every named operation.
STYLES: dict[str, str] = {
    "red": Colors.RED,
    "green": Colors.GREEN,
    "yellow": Colors.YELLOW,
    "blue": Colors.BLUE,
    "magenta": Colors.MAGENTA,
    "cyan": Colors.CYAN,
    "white": Colors.WHITE,
    "black": Colors.BLACK,
    "bright_red": Colors.BRIGHT_RED,
    "bright_green": Colors.BRIGHT_GREEN,
    "bright_yellow": Colors.BRIGHT_YELLOW,
    "bright_blue": Colors.BRIGHT_BLUE,
    "bright_magenta": Colors.BRIGHT_MAGENTA,
    "bright_cyan": Colors.BRIGHT_CYAN,
    "bright_white": Colors.BRIGHT_WHITE,
    "on_red": Colors.ON_RED,
    "on_green": Colors.ON_GREEN,
    "on_yellow": Colors.ON_YELLOW,
    "on_blue": Colors.ON_BLUE,
    "on_magenta": Colors.ON_MAGENTA,
    "on_cyan": Colors.ON_CYAN,
    "on_white": Colors.ON_WHITE,
    "on_black": Colors.ON_BLACK,
    "bold": Colors.BOLD,
    "dim": Colors.DIM,
    "italic": Colors.ITALIC,
    "underline": Colors.UNDERLINE,
    "inverse": Colors.INVERSE,
    "strikethrough": Colors.STRIKETHROUGH,
}


def sgr(code: str) -> str:
    """Return the escape sequence selecting SGR *code*."""
    return f"{ESC}[{code}m"
