"""Validation engine entrypoints."""

from object_graph_validator.engine.context import ValidationContext, join_path
from object_graph_validator.engine.facade import Validator
from object_graph_validator.engine.outcome import Invalid, Outcome, Valid, ValidationResult
from object_graph_validator.engine.validator import check, check_node, validate

__all__ = [
    "Invalid",
    "Outcome",
    "Valid",
    "ValidationContext",
    "ValidationResult",
    "Validator",
    "check",
    "check_node",
    "join_path",
    "validate",
]
