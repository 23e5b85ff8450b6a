# =============================================================================
# core/arguments.py  —  Argument Validation & Defaulting
# =============================================================================
#
# Tool arguments arrive as an untyped dict straight off the wire.  These
# helpers pull out the two kinds of values our tools take (a required text
# field and an optional topK) and either return a clean value or a
# ToolFailure describing what was wrong.
#
# topK RULES:
#   missing / null      → the tool's default
#   integral number     → clamped to [TOP_K_FLOOR, upper]
#   anything else       → validation failure
# =============================================================================

from typing import Any, Mapping, Union

from core.config import TOP_K_FLOOR
from core.models import ErrorKind, ToolFailure


def require_text(arguments: Mapping[str, Any], name: str, message: str) -> Union[str, ToolFailure]:
    """Return arguments[name] if it is a non-empty string."""
    value = arguments.get(name)
    if not isinstance(value, str) or not value:
        return ToolFailure(ErrorKind.VALIDATION, message)
    return value


def resolve_top_k(value: Any, default: int, upper: int) -> Union[int, ToolFailure]:
    """Apply the default and clamp topK into [TOP_K_FLOOR, upper].

    Floats are accepted when they hold a whole number (JSON clients often
    send 5.0 for 5).  Booleans are rejected even though bool is an int
    subclass in Python.
    """
    if value is None:
        return default

    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return ToolFailure(ErrorKind.VALIDATION, "topK must be an integer")
    if isinstance(value, float):
        if not value.is_integer():
            return ToolFailure(ErrorKind.VALIDATION, "topK must be an integer")
        value = int(value)

    return max(TOP_K_FLOOR, min(value, upper))
