"""Escape-sequence composer.

Every operation takes any object, styles its ``str()`` and returns a new
string. Operations nest when chained: the already-styled string becomes the
text of the next wrap, and resets are never merged::

    >>> bold(red("x")) == "\\033[1m\\033[31mx\\033[0m\\033[0m"
    True

All operations except :func:`clear` (and the invalid-hex fallback of
:func:`hex` / :func:`on_hex`, which is :func:`clear`) return the plain text
when :func:`~colored_text.policy.should_colorize` says no.
"""

from .colors import RESET, Colors, sgr
from .convert import hex_to_rgb, hsl_to_rgb
from .policy import ColorPolicy, should_colorize


def colorize(value: object, code: str, *, policy: ColorPolicy | None = None) -> str:
    """Wrap *value* in SGR *code* if colors are enabled."""
    text = str(value)
    if not should_colorize(policy):
        return text
    return f"{sgr(code)}{text}{RESET}"


def clear(value: object) -> str:
    """Wrap *value* in reset codes. Emitted even when colors are disabled."""
    return f"{RESET}{str(value)}{RESET}"


def _channel(name: str, value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        msg = f"{name} channel must be an int, got {type(value).__name__}"
        raise ValueError(msg)
    if not 0 <= value <= 255:
        msg = f"{name} channel must be 0-255, got {value}"
        raise ValueError(msg)
    return value


def _truecolor(prefix: str, r: int, g: int, b: int) -> str:
    return f"{prefix};{_channel('red', r)};{_channel('green', g)};{_channel('blue', b)}"


def red(value: object, *, policy: ColorPolicy | None = None) -> str:
    """Format text in red."""
    return colorize(value, Colors.RED, policy=policy)


def green(value: object, *, policy: ColorPolicy | None = None) -> str:
    """Format text in green."""
    return colorize(value, Colors.GREEN, policy=policy)


def yellow(value: object, *, policy: ColorPolicy | None = None) -> str:
    """Format text in yellow."""
    return colorize(value, Colors.YELLOW, policy=policy)


def blue(value: object, *, policy: ColorPolicy | None = None) -> str:
    """Format text in blue."""
    return colorize(value, Colors.BLUE, policy=policy)


def magenta(value: object, *, policy: ColorPolicy | None = None) -> str:
    """Format text in magenta."""
    return colorize(value, Colors.MAGENTA, policy=policy)


def cyan(value: object, *, policy: ColorPolicy | None = None) -> str:
    """Format text in cyan."""
    return colorize(value, Colors.CYAN, policy=policy)


def white(value: object, *, policy: ColorPolicy | None = None) -> str:
    """Format text in white."""
    return colorize(value, Colors.WHITE, policy=policy)


def black(value: object, *, policy: ColorPolicy | None = None) -> str:
    """Format text in black."""
    return colorize(value, Colors.BLACK, policy=policy)


def bright_red(value: object, *, policy: ColorPolicy | None = None) -> str:
    return colorize(value, Colors.BRIGHT_RED, policy=policy)


def bright_green(value: object, *, policy: ColorPolicy | None = None) -> str:
    return colorize(value, Colors.BRIGHT_GREEN, policy=policy)


def bright_yellow(value: object, *, policy: ColorPolicy | None = None) -> str:
    return colorize(value, Colors.BRIGHT_YELLOW, policy=policy)


def bright_blue(value: object, *, policy: ColorPolicy | None = None) -> str:
    return colorize(value, Colors.BRIGHT_BLUE, policy=policy)


def bright_magenta(value: object, *, policy: ColorPolicy | None = None) -> str:
    return colorize(value, Colors.BRIGHT_MAGENTA, policy=policy)


def bright_cyan(value: object, *, policy: ColorPolicy | None = None) -> str:
    return colorize(value, Colors.BRIGHT_CYAN, policy=policy)


def bright_white(value: object, *, policy: ColorPolicy | None = None) -> str:
    return colorize(value, Colors.BRIGHT_WHITE, policy=policy)


def on_red(value: object, *, policy: ColorPolicy | None = None) -> str:
    """Format text on a red background."""
    return colorize(value, Colors.ON_RED, policy=policy)


def on_green(value: object, *, policy: ColorPolicy | None = None) -> str:
    """Format text on a green background."""
    return colorize(value, Colors.ON_GREEN, policy=policy)


def on_yellow(value: object, *, policy: ColorPolicy | None = None) -> str:
    """Format text on a yellow background."""
    return colorize(value, Colors.ON_YELLOW, policy=policy)


def on_blue(value: object, *, policy: ColorPolicy | None = None) -> str:
    """Format text on a blue background."""
    return colorize(value, Colors.ON_BLUE, policy=policy)


def on_magenta(value: object, *, policy: ColorPolicy | None = None) -> str:
    """Format text on a magenta background."""
    return colorize(value, Colors.ON_MAGENTA, policy=policy)


def on_cyan(value: object, *, policy: ColorPolicy | None = None) -> str:
    """Format text on a cyan background."""
    return colorize(value, Colors.ON_CYAN, policy=policy)


def on_white(value: object, *, policy: ColorPolicy | None = None) -> str:
    """Format text on a white background."""
    return colorize(value, Colors.ON_WHITE, policy=policy)


def on_black(value: object, *, policy: ColorPolicy | None = None) -> str:
    """Format text on a black background."""
    return colorize(value, Colors.ON_BLACK, policy=policy)


def bold(value: object, *, policy: ColorPolicy | None = None) -> str:
    """Format text as bold."""
    return colorize(value, Colors.BOLD, policy=policy)


def dim(value: object, *, policy: ColorPolicy | None = None) -> str:
    """Format text as dim."""
    return colorize(value, Colors.DIM, policy=policy)


def italic(value: object, *, policy: ColorPolicy | None = None) -> str:
    """Format text as italic."""
    return colorize(value, Colors.ITALIC, policy=policy)


def underline(value: object, *, policy: ColorPolicy | None = None) -> str:
    """Format text as underlined."""
    return colorize(value, Colors.UNDERLINE, policy=policy)


def inverse(value: object, *, policy: ColorPolicy | None = None) -> str:
    """Swap foreground and background colors."""
    return colorize(value, Colors.INVERSE, policy=policy)


def strikethrough(value: object, *, policy: ColorPolicy | None = None) -> str:
    """Format text as struck through."""
    return colorize(value, Colors.STRIKETHROUGH, policy=policy)


def rgb(value: object, r: int, g: int, b: int, *, policy: ColorPolicy | None = None) -> str:
    """Format text in a 24-bit foreground color.

    Raises:
        ValueError: If a channel is not an int in 0-255

    """
    return colorize(value, _truecolor(Colors.FOREGROUND_RGB, r, g, b), policy=policy)


def on_rgb(value: object, r: int, g: int, b: int, *, policy: ColorPolicy | None = None) -> str:
    """Format text on a 24-bit background color.

    Raises:
        ValueError: If a channel is not an int in 0-255

    """
    return colorize(value, _truecolor(Colors.BACKGROUND_RGB, r, g, b), policy=policy)


def hsl(value: object, h: float, s: float, l: float, *, policy: ColorPolicy | None = None) -> str:  # noqa: E741
    """Format text in a foreground color given as hue (degrees), saturation and lightness (percent)."""
    return rgb(value, *hsl_to_rgb(h, s, l), policy=policy)


def on_hsl(value: object, h: float, s: float, l: float, *, policy: ColorPolicy | None = None) -> str:  # noqa: E741
    """Format text on a background color given as HSL."""
    return on_rgb(value, *hsl_to_rgb(h, s, l), policy=policy)


def hex(value: object, color: str, *, policy: ColorPolicy | None = None) -> str:  # noqa: A001
    """Format text in a foreground color given as "#rrggbb" or "rrggbb".

    An invalid color yields :func:`clear` output, whatever the policy says.
    """
    parsed = hex_to_rgb(color)
    if parsed is None:
        return clear(value)
    return rgb(value, *parsed, policy=policy)


def on_hex(value: object, color: str, *, policy: ColorPolicy | None = None) -> str:
    """Format text on a background color given as hex; invalid colors yield :func:`clear` output."""
    parsed = hex_to_rgb(color)
    if parsed is None:
        return clear(value)
    return on_rgb(value, *parsed, policy=policy)


class Styled(str):
    """A string whose styling methods return :class:`Styled`, so calls chain.

    >>> Styled("x").red().bold() == bold(red("x"))
    True

    Compares equal to the plain string with the same content.
    """

    policy: ColorPolicy | None

    def __new__(cls, value: object = "", policy: ColorPolicy | None = None) -> "Styled":
        self = super().__new__(cls, value)
        self.policy = policy
        return self

    def _wrap(self, text: str) -> "Styled":
        return Styled(text, self.policy)

    def colorize(self, code: str) -> "Styled":
        return self._wrap(colorize(self, code, policy=self.policy))

    def red(self) -> "Styled":
        return self.colorize(Colors.RED)

    def green(self) -> "Styled":
        return self.colorize(Colors.GREEN)

    def yellow(self) -> "Styled":
        return self.colorize(Colors.YELLOW)

    def blue(self) -> "Styled":
        return self.colorize(Colors.BLUE)

    def magenta(self) -> "Styled":
        return self.colorize(Colors.MAGENTA)

    def cyan(self) -> "Styled":
        return self.colorize(Colors.CYAN)

    def white(self) -> "Styled":
        return self.colorize(Colors.WHITE)

    def black(self) -> "Styled":
        return self.colorize(Colors.BLACK)

    def bright_red(self) -> "Styled":
        return self.colorize(Colors.BRIGHT_RED)

    def bright_green(self) -> "Styled":
        return self.colorize(Colors.BRIGHT_GREEN)

    def bright_yellow(self) -> "Styled":
        return self.colorize(Colors.BRIGHT_YELLOW)

    def bright_blue(self) -> "Styled":
        return self.colorize(Colors.BRIGHT_BLUE)

    def bright_magenta(self) -> "Styled":
        return self.colorize(Colors.BRIGHT_MAGENTA)

    def bright_cyan(self) -> "Styled":
        return self.colorize(Colors.BRIGHT_CYAN)

    def bright_white(self) -> "Styled":
        return self.colorize(Colors.BRIGHT_WHITE)

    def on_red(self) -> "Styled":
        return self.colorize(Colors.ON_RED)

    def on_green(self) -> "Styled":
        return self.colorize(Colors.ON_GREEN)

    def on_yellow(self) -> "Styled":
        return self.colorize(Colors.ON_YELLOW)

    def on_blue(self) -> "Styled":
        return self.colorize(Colors.ON_BLUE)

    def on_magenta(self) -> "Styled":
        return self.colorize(Colors.ON_MAGENTA)

    def on_cyan(self) -> "Styled":
        return self.colorize(Colors.ON_CYAN)

    def on_white(self) -> "Styled":
        return self.colorize(Colors.ON_WHITE)

    def on_black(self) -> "Styled":
        return self.colorize(Colors.ON_BLACK)

    def bold(self) -> "Styled":
        return self.colorize(Colors.BOLD)

    def dim(self) -> "Styled":
        return self.colorize(Colors.DIM)

    def italic(self) -> "Styled":
        return self.colorize(Colors.ITALIC)

    def underline(self) -> "Styled":
        return self.colorize(Colors.UNDERLINE)

    def inverse(self) -> "Styled":
        return self.colorize(Colors.INVERSE)

    def strikethrough(self) -> "Styled":
        return self.colorize(Colors.STRIKETHROUGH)

    def rgb(self, r: int, g: int, b: int) -> "Styled":
        return self._wrap(rgb(self, r, g, b, policy=self.policy))

    def on_rgb(self, r: int, g: int, b: int) -> "Styled":
        return self._wrap(on_rgb(self, r, g, b, policy=self.policy))

    def hsl(self, h: float, s: float, l: float) -> "Styled":  # noqa: E741
        return self._wrap(hsl(self, h, s, l, policy=self.policy))

    def on_hsl(self, h: float, s: float, l: float) -> "Styled":  # noqa: E741
        return self._wrap(on_hsl(self, h, s, l, policy=self.policy))

    def hex(self, color: str) -> "Styled":
        return self._wrap(hex(self, color, policy=self.policy))

    def on_hex(self, color: str) -> "Styled":
        return self._wrap(on_hex(self, color, policy=self.policy))

    def clear(self) -> "Styled":
        return self._wrap(clear(self))
