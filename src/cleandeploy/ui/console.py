"""Console output formatting utilities for cleandeploy."""

from __future__ import annotations

import sys
from typing import Optional


class Console:
    """Centralized console output formatting."""

    def __init__(self, debug: bool = False):
        """
        Initialize console formatter.

        Args:
            debug: If True, show detailed output including stack traces
        """
        self.debug = debug

    def print_banner(self, line: str) -> None:
        """Print a phase status line, escaping what stdout cannot encode."""
        try:
            print(line, flush=True)
        except UnicodeEncodeError:
            encoding = getattr(sys.stdout, "encoding", None) or "ascii"
            print(line.encode(encoding, "backslashreplace").decode(encoding), flush=True)

    def print_failure(
        self,
        name: str,
        cmd: str,
        exit_code: int,
        hint: Optional[str] = None,
    ) -> None:
        """
        Print failure message for a step.

        Goes to stderr so the last status line on stdout stays the
        announcement of the failing phase.

        Args:
            name: Step name
            cmd: Command that failed
            exit_code: Exit status the run will end with
            hint: Optional hint for user
        """
        print(f"STEP FAILED: {name}", file=sys.stderr)
        print(f"Command: {cmd}", file=sys.stderr)
        print(f"Exit code: {exit_code}", file=sys.stderr)
        if hint:
            print(f"Hint: {hint}", file=sys.stderr)

    def print_exception(self, exc: BaseException) -> None:
        """Print exception, with full traceback only in debug mode."""
        if self.debug:
            import traceback
            traceback.print_exception(type(exc), exc, exc.__traceback__)
        else:
            print(f"Error: {exc}", file=sys.stderr)

    def print_info(self, message: str) -> None:
        print(message)

    def print_debug(self, message: str) -> None:
        """Print debug message (only if debug mode enabled)."""
        if self.debug:
            print(f"[DEBUG] {message}", file=sys.stderr)


# Global console instance
_console: Optional[Console] = None


def get_console() -> Console:
    """Get the global console instance."""
    global _console
    if _console is None:
        _console = Console()
    return _console


def set_console(console: Console) -> None:
    """Set the global console instance."""
    global _console
    _console = console
