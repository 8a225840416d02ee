"""Operator-facing output: stdout progress lines and stderr diagnostics."""

import sys

# ANSI color codes for TTY output
IS_TTY = sys.stdout.isatty()
RED = "\033[91m" if IS_TTY else ""
GREEN = "\033[92m" if IS_TTY else ""
RESET = "\033[0m" if IS_TTY else ""
RED_BG = "\033[41m" if IS_TTY else ""
GREEN_BG = "\033[42m" if IS_TTY else ""
BOLD = "\033[1m" if IS_TTY else ""


def log(msg: str = "") -> None:
    """Print a message and flush stdout immediately."""
    print(msg, flush=True)


def warn(msg: str) -> None:
    print(f"Warning: {msg}", file=sys.stderr, flush=True)


def error(msg: str) -> None:
    print(f"Error: {msg}", file=sys.stderr, flush=True)


def elapsed_ms(start: float, end: float) -> str:
    return f"{(end - start) * 1000:.1f}ms"
