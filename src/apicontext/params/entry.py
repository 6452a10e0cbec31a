r"""Named request parameter entries."""

from __future__ import annotations

__all__ = ["ParameterEntry"]

from dataclasses import dataclass
from typing import Any

from apicontext.exceptions import InvalidParameterStateError


@dataclass(frozen=True)
class ParameterEntry:
    r"""One named request parameter.

    Args:
        field_key: The name of the parameter in the caller's structure.
        value: The parameter value. ``None``, empty and blank values are
            never emitted.
        wire_key: The key used on the wire. Defaults to ``field_key``.

    Example:
        ```pycon
        >>> from apicontext.params import ParameterEntry
        >>> entry = ParameterEntry("name", "alice", wire_key="user")
        >>> entry.wire_key
        'user'
        >>> ParameterEntry("age", "").is_empty()
        True
        >>> ParameterEntry("age", 42).wire_key
        'age'

        ```
    """

    field_key: str
    value: Any = None
    wire_key: str | None = None

    def __post_init__(self) -> None:
        if not self.wire_key:
            object.__setattr__(self, "wire_key", self.field_key)

    def to_text(self) -> str | None:
        r"""Return the value converted to text, or ``None`` if there is no
        value.

        Raises:
            InvalidParameterStateError: if the value cannot be converted.
        """
        if self.value is None:
            return None
        try:
            return str(self.value)
        except Exception as exc:
            raise InvalidParameterStateError(self.field_key, cause=exc) from exc

    def is_empty(self) -> bool:
        r"""Indicate whether the value is ``None``, empty or blank."""
        text = self.to_text()
        return text is None or not text.strip()
