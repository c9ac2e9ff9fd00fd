"""Error rendering for terminals."""

from object_graph_validator.ui.render import print_error, render_text, render_tree

__all__ = ["print_error", "render_text", "render_tree"]
