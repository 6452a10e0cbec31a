r"""Utilities shared across the package."""

from __future__ import annotations

__all__ = [
    "StructuredFormatter",
    "call_id_scope",
    "clear_call_id",
    "get_call_id",
    "log_structured",
    "set_call_id",
]

from apicontext.utils.structured_logging import (
    StructuredFormatter,
    call_id_scope,
    clear_call_id,
    get_call_id,
    log_structured,
    set_call_id,
)
