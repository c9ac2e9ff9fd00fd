"""
object-graph-validator — unit tests for error rendering

File: tests/unit/ui/test_render.py

Purpose
- Validate plain-text and ``rich`` tree rendering of validation errors.
"""

from __future__ import annotations

from rich.console import Console
from rich.tree import Tree

from object_graph_validator.domain.errors import CompositeValidateError, ErrorCode, ValidateError
from object_graph_validator.engine import check
from object_graph_validator.schema import AnyOf, Digit, Int32Type, MapType, StringType
from object_graph_validator.ui.render import print_error, render_text, render_tree


def _composite() -> CompositeValidateError:
    result = check(MapType({"id": AnyOf(Int32Type(), Digit(StringType()))}), {"id": "x1"})
    assert isinstance(result.error, CompositeValidateError)
    return result.error


def test_render_text_single_error() -> None:
    error = ValidateError(ErrorCode.MISSING_KEY, "")
    assert render_text(error) == "- <root>: Missing key."


def test_render_text_indents_composite_children() -> None:
    assert render_text(_composite()) == (
        "- /id: All failure.\n  - /id: Type mismatch.\n  - /id: Not digit."
    )


def test_render_tree_mirrors_error_structure() -> None:
    tree = render_tree(_composite())

    assert isinstance(tree, Tree)
    assert len(tree.children) == 2
    assert "All failure." in str(tree.label)
    assert "not_digit" in str(tree.children[1].label)


def test_print_error_writes_to_console() -> None:
    console = Console(record=True, width=100, color_system=None)

    print_error(_composite(), console=console)

    output = console.export_text()
    assert "/id: All failure. [all_failure]" in output
    assert "Type mismatch. [type_mismatch]" in output
