"""Status reporting port and its rich console implementation."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from rich.console import Console


@runtime_checkable
class LoggerPort(Protocol):
    """Receives step and outcome messages, each prefixed by a preamble."""

    def log(self, preamble: str, message: str) -> None:
        """Report progress or success."""
        ...

    def error(self, preamble: str, message: str) -> None:
        """Report a failure."""
        ...


class ConsoleLogger:
    """Prints status lines through rich consoles."""

    def __init__(
        self,
        console: Console | None = None,
        error_console: Console | None = None,
    ) -> None:
        self.console = console or Console()
        self.error_console = error_console or Console(stderr=True)

    def log(self, preamble: str, message: str) -> None:
        self.console.print(preamble, message, markup=False, highlight=False)

    def error(self, preamble: str, message: str) -> None:
        self.error_console.print(
            preamble,
            message,
            style="red",
            markup=False,
            highlight=False,
        )
