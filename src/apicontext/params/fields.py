r"""Field-level metadata marking dataclass fields as request
parameters."""

from __future__ import annotations

__all__ = ["PARAMETER_METADATA_KEY", "ParameterMapping", "get_parameter_mapping", "parameter"]

from dataclasses import MISSING, Field, dataclass, field
from typing import Any

PARAMETER_METADATA_KEY = "apicontext.parameter"


@dataclass(frozen=True)
class ParameterMapping:
    r"""Metadata attached to a request parameter field.

    Args:
        alias: Optional key used on the wire instead of the field name.
    """

    alias: str | None = None


def parameter(
    *,
    alias: str | None = None,
    default: Any = MISSING,
    default_factory: Any = MISSING,
) -> Any:
    r"""Declare a dataclass field as a request parameter.

    Only the fields declared with ``parameter`` are encoded. The field
    name is used as the wire key unless ``alias`` is given.

    Args:
        alias: Optional key used on the wire instead of the field name.
        default: Optional default value of the field.
        default_factory: Optional factory building the default value.

    Returns:
        A ``dataclasses.field`` carrying the parameter metadata.

    Example:
        ```pycon
        >>> from dataclasses import dataclass
        >>> from apicontext.params import RequestParameter, parameter
        >>> @dataclass
        ... class UserQuery(RequestParameter):
        ...     name: str = parameter(alias="user")
        ...     age: str = parameter(default="")
        ...
        >>> [entry.wire_key for entry in UserQuery(name="alice").extract_entries()]
        ['user', 'age']

        ```
    """
    return field(
        default=default,
        default_factory=default_factory,
        metadata={PARAMETER_METADATA_KEY: ParameterMapping(alias=alias)},
    )


def get_parameter_mapping(dataclass_field: Field) -> ParameterMapping | None:
    r"""Return the parameter metadata of a dataclass field, or ``None``
    if the field is not a request parameter."""
    return dataclass_field.metadata.get(PARAMETER_METADATA_KEY)
