"""Color suppression policy.

Decides, on every styling call, whether escape codes are emitted. Nothing is
cached: the environment and the output stream are read fresh each time, so
toggling ``NO_COLOR`` or redirecting ``sys.stdout`` takes effect on the next
call.
"""

import os
import sys
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import TextIO

# Per thread / per asyncio task; new threads start from the default.
_terminal_check: ContextVar[bool] = ContextVar("terminal_check", default=True)


@dataclass(frozen=True)
class ColorPolicy:
    """Where the suppression policy reads its inputs from.

    Fields left as ``None`` resolve at call time to ``os.environ`` and
    ``sys.stdout`` respectively.
    """

    env_var: str = "NO_COLOR"
    environ: Mapping[str, str] | None = None
    stream: TextIO | None = None

    def disabled_by_env(self) -> bool:
        """Return True if the disabling variable is present with any value."""
        environ = os.environ if self.environ is None else self.environ
        try:
            return self.env_var in environ
        except (OSError, TypeError):
            return False

    def is_terminal(self) -> bool:
        """Return True if the output stream is an interactive terminal."""
        stream = sys.stdout if self.stream is None else self.stream
        if stream is None:
            return False
        try:
            return bool(stream.isatty())
        except (AttributeError, OSError, ValueError):
            # Missing isatty, or the stream has been closed
            return False


DEFAULT_POLICY = ColorPolicy()


def set_terminal_check(enabled: bool) -> None:
    """Enable or disable the interactive-terminal check for this context.

    With the check disabled, styling is emitted even when output is piped.
    ``NO_COLOR`` still takes precedence.
    """
    _terminal_check.set(enabled)


def terminal_check_enabled() -> bool:
    """Return whether the terminal check is enabled in this context."""
    return _terminal_check.get()


@contextmanager
def terminal_check(enabled: bool) -> Iterator[None]:
    """Set the terminal check for the duration of a ``with`` block."""
    token = _terminal_check.set(enabled)
    try:
        yield
    finally:
        _terminal_check.reset(token)


def should_colorize(policy: ColorPolicy | None = None) -> bool:
    """Check whether styling should be emitted.

    Args:
        policy: Inputs to consult (defaults to ``NO_COLOR`` and ``sys.stdout``)

    Returns:
        False if the disabling variable is set; otherwise True when the
        terminal check is disabled or the stream is a terminal

    """
    if policy is None:
        policy = DEFAULT_POLICY

    if policy.disabled_by_env():
        return False

    if not terminal_check_enabled():
        return True

    return policy.is_terminal()
