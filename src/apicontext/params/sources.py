r"""Parameter sources extracting ordered entries from caller
structures.

A parameter source turns whatever structure the caller uses into an
ordered tuple of ``ParameterEntry``. Three sources are provided:

- ``DataclassParameterSource``: fields declared with ``parameter()``
- ``MappingParameterSource``: a mapping, with optional aliases
- ``EntryListParameterSource``: an explicit list of entries
"""

from __future__ import annotations

__all__ = [
    "DataclassParameterSource",
    "EntryListParameterSource",
    "MappingParameterSource",
    "ParameterSource",
    "RequestParameter",
    "to_parameter_source",
]

import dataclasses
from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from apicontext.exceptions import InvalidParameterStateError
from apicontext.params.entry import ParameterEntry
from apicontext.params.fields import get_parameter_mapping

if TYPE_CHECKING:
    from collections.abc import Iterable


class ParameterSource(ABC):
    r"""Abstract base class of the parameter sources."""

    @abstractmethod
    def extract_entries(self) -> tuple[ParameterEntry, ...]:
        r"""Extract the request parameter entries, in order.

        Returns:
            The extracted entries.

        Raises:
            InvalidParameterStateError: if a value cannot be read.
        """


class DataclassParameterSource(ParameterSource):
    r"""Extract the fields declared with ``parameter()`` from a
    dataclass instance, in declaration order.

    Args:
        obj: The dataclass instance.

    Raises:
        TypeError: if ``obj`` is not a dataclass instance.
    """

    def __init__(self, obj: Any) -> None:
        if not dataclasses.is_dataclass(obj) or isinstance(obj, type):
            msg = f"expected a dataclass instance, got {type(obj).__qualname__}"
            raise TypeError(msg)
        self._obj = obj

    def extract_entries(self) -> tuple[ParameterEntry, ...]:
        entries = []
        for dataclass_field in dataclasses.fields(self._obj):
            mapping = get_parameter_mapping(dataclass_field)
            if mapping is None:
                continue
            try:
                value = getattr(self._obj, dataclass_field.name)
            except Exception as exc:
                raise InvalidParameterStateError(dataclass_field.name, cause=exc) from exc
            entries.append(
                ParameterEntry(field_key=dataclass_field.name, value=value, wire_key=mapping.alias)
            )
        return tuple(entries)


class MappingParameterSource(ParameterSource):
    r"""Extract the entries of a mapping, in iteration order.

    Args:
        mapping: The parameter values indexed by field key.
        aliases: Optional wire keys indexed by field key.

    Example:
        ```pycon
        >>> from apicontext.params import MappingParameterSource
        >>> source = MappingParameterSource({"name": "alice"}, aliases={"name": "user"})
        >>> source.extract_entries()
        (ParameterEntry(field_key='name', value='alice', wire_key='user'),)

        ```
    """

    def __init__(self, mapping: Mapping[str, Any], aliases: Mapping[str, str] | None = None) -> None:
        self._mapping = mapping
        self._aliases = aliases or {}

    def extract_entries(self) -> tuple[ParameterEntry, ...]:
        return tuple(
            ParameterEntry(field_key=key, value=value, wire_key=self._aliases.get(key))
            for key, value in self._mapping.items()
        )


class EntryListParameterSource(ParameterSource):
    r"""Wrap an explicit sequence of entries.

    Args:
        entries: The entries, in emission order.
    """

    def __init__(self, entries: Iterable[ParameterEntry]) -> None:
        self._entries = tuple(entries)

    def extract_entries(self) -> tuple[ParameterEntry, ...]:
        return self._entries


class RequestParameter:
    r"""Base class for request parameter dataclasses.

    Subclasses are dataclasses whose request parameters are declared with
    ``parameter()``.
    """

    def extract_entries(self) -> tuple[ParameterEntry, ...]:
        return DataclassParameterSource(self).extract_entries()


def to_parameter_source(obj: Any) -> ParameterSource:
    r"""Wrap a caller structure into a parameter source.

    Args:
        obj: A ``ParameterSource``, a dataclass instance (typically a
            ``RequestParameter``) or a mapping.

    Returns:
        The parameter source.

    Raises:
        TypeError: if ``obj`` is ``None`` or of an unsupported type.
    """
    if obj is None:
        msg = "request parameter must not be None"
        raise TypeError(msg)
    if isinstance(obj, ParameterSource):
        return obj
    if isinstance(obj, Mapping):
        return MappingParameterSource(obj)
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return DataclassParameterSource(obj)
    msg = f"unsupported request parameter type: {type(obj).__qualname__}"
    raise TypeError(msg)
