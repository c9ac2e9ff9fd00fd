"""Human-readable rendering of validation errors.

File: src/object_graph_validator/ui/render.py

Purpose
- Turn a ``ValidateError`` (possibly a composite ``AnyOf`` failure) into
  plain text or a ``rich`` tree.

Functional requirements
- Plain-text rendering is deterministic: one ``- path: message`` line per
  error, composite children indented below their parent.
- Respect the ``NO_COLOR`` environment variable when printing.
"""

from __future__ import annotations

import os
from typing import Final

from rich.console import Console
from rich.style import Style
from rich.text import Text
from rich.tree import Tree

from object_graph_validator.domain.errors import (
    CompositeValidateError,
    ValidateError,
    display_path,
)

_INDENT: Final[str] = "  "

_S_PATH = Style(color="cyan", bold=True)
_S_MESSAGE = Style(color="red")
_S_CODE = Style(color="bright_black")
_S_COMPOSITE = Style(color="yellow", bold=True)


def render_text(error: ValidateError) -> str:
    """Render ``error`` as indented plain-text lines."""

    lines: list[str] = []
    _append_lines(error, 0, lines)
    return "\n".join(lines)


def render_tree(error: ValidateError) -> Tree:
    """Render ``error`` as a ``rich`` tree rooted at the outermost failure."""

    tree = Tree(_label(error))
    _attach_children(tree, error)
    return tree


def print_error(error: ValidateError, console: Console | None = None) -> None:
    """Print the error tree to ``console`` (stderr by default)."""

    target = console if console is not None else _default_console()
    target.print(render_tree(error))


def _append_lines(error: ValidateError, depth: int, lines: list[str]) -> None:
    lines.append(f"{_INDENT * depth}- {display_path(error.path)}: {error.message}")
    if isinstance(error, CompositeValidateError):
        for child in error.children:
            _append_lines(child, depth + 1, lines)


def _attach_children(branch: Tree, error: ValidateError) -> None:
    if not isinstance(error, CompositeValidateError):
        return
    for child in error.children:
        _attach_children(branch.add(_label(child)), child)


def _label(error: ValidateError) -> Text:
    text = Text()
    text.append(display_path(error.path), style=_S_PATH)
    text.append(": ")
    message_style = _S_COMPOSITE if isinstance(error, CompositeValidateError) else _S_MESSAGE
    text.append(error.message, style=message_style)
    text.append(f" [{error.code.value}]", style=_S_CODE)
    return text


def _default_console() -> Console:
    return Console(stderr=True, no_color=bool(os.environ.get("NO_COLOR", "")))


__all__ = ["print_error", "render_text", "render_tree"]
