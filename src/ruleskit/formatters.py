"""Composable formatters turning configuration values into file content.

A formatter is a plain callable taking the output of its predecessor. A
pipeline is an ordered sequence of formatters folded over a configuration
value; the last formatter must produce a string.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from functools import reduce
from typing import Any

import yaml

from .exceptions import RenderError

Formatter = Callable[[Any], Any]


def to_yaml(value: Any) -> str:
    """Serialize a mapping or sequence as block-style YAML."""
    return yaml.dump(
        value,
        default_flow_style=False,
        sort_keys=False,
        allow_unicode=True,
    )


def to_multiline(lines: Sequence[str]) -> str:
    """Serialize a sequence of strings as one newline-terminated line each."""
    return "".join(f"{line}\n" for line in lines)


@dataclass(frozen=True)
class SingleLine:
    """A one-line header."""

    text: str

    def lines(self) -> tuple[str, ...]:
        return (self.text,)


@dataclass(frozen=True)
class MultiLine:
    """A header spanning several lines."""

    texts: tuple[str, ...]

    def lines(self) -> tuple[str, ...]:
        return self.texts


HeaderInput = SingleLine | MultiLine


def header_input(value: str | Sequence[str]) -> HeaderInput:
    """Resolve a plain string or a sequence of strings into a header variant."""
    if isinstance(value, str):
        return SingleLine(value)
    return MultiLine(tuple(value))


def make_header_formatter(
    prefix: str = "",
    suffix: str = "\n",
) -> Callable[[HeaderInput], Formatter]:
    """Build a formatter factory prepending a header block to rendered content.

    Args:
        prefix: Text placed before every header line (e.g. a comment marker)
        suffix: Text placed after every header line once trailing
            whitespace has been trimmed

    Returns:
        A function taking the header and returning the formatter
    """

    def with_header(header: HeaderInput) -> Formatter:
        block = "".join(
            f"{(prefix + line).rstrip()}{suffix}" for line in header.lines()
        )

        def add_header(content: str = "") -> str:
            return f"{block}{content}"

        return add_header

    return with_header


add_hashed_header = make_header_formatter("# ")


def render(value: Any, formatters: Sequence[Formatter]) -> str:
    """Thread a configuration value through its formatters, in order.

    Raises:
        RenderError: If a formatter fails or the pipeline does not end
            with a string
    """
    try:
        content = reduce(lambda current, format_: format_(current), formatters, value)
    except Exception as e:
        msg = f"Failed to render configuration: {e}"
        raise RenderError(msg) from e

    if not isinstance(content, str):
        msg = f"Formatter pipeline produced {type(content).__name__}, expected str"
        raise RenderError(msg)

    return content
