r"""URL-encoding of request parameters.

This module is the only place where parameter values are converted to
their wire representation. Values are encoded with UTF-8 form encoding
(spaces become ``+`` and reserved characters are percent-escaped).
"""

from __future__ import annotations

__all__ = ["create_request_parameter", "encode_parameters"]

import logging
from typing import TYPE_CHECKING, Any
from urllib.parse import quote_plus

from apicontext.params.sources import to_parameter_source

if TYPE_CHECKING:
    from collections.abc import Iterable

    from apicontext.params.entry import ParameterEntry

logger: logging.Logger = logging.getLogger(__name__)


def encode_parameters(entries: Iterable[ParameterEntry]) -> str:
    r"""Encode parameter entries into a ``key=value&key2=value2``
    string.

    Entries with an empty or blank value are skipped. The result is an
    empty string if every entry is skipped.

    Args:
        entries: The entries to encode, in emission order.

    Returns:
        The encoded parameters.

    Raises:
        InvalidParameterStateError: if a value cannot be converted to
            text.

    Example:
        ```pycon
        >>> from apicontext.params import ParameterEntry, encode_parameters
        >>> encode_parameters(
        ...     [
        ...         ParameterEntry("name", "alice", wire_key="user"),
        ...         ParameterEntry("age", ""),
        ...         ParameterEntry("q", "a b&c"),
        ...     ]
        ... )
        'user=alice&q=a+b%26c'

        ```
    """
    pairs = []
    for entry in entries:
        text = entry.to_text()
        if text is None or not text.strip():
            logger.debug(f"Skipping empty request parameter {entry.field_key!r}")
            continue
        pairs.append(f"{entry.wire_key}={quote_plus(text, safe='', encoding='utf-8')}")
    return "&".join(pairs)


def create_request_parameter(parameter: Any) -> str:
    r"""Extract and encode the request parameters of a caller
    structure.

    Args:
        parameter: A ``ParameterSource``, a ``RequestParameter`` dataclass
            instance or a mapping.

    Returns:
        The encoded parameters.

    Raises:
        TypeError: if ``parameter`` is ``None`` or of an unsupported type.
        InvalidParameterStateError: if a value cannot be read.

    Example:
        ```pycon
        >>> from apicontext.params import create_request_parameter
        >>> create_request_parameter({"lang": "ja", "q": "東京"})
        'lang=ja&q=%E6%9D%B1%E4%BA%AC'

        ```
    """
    return encode_parameters(to_parameter_source(parameter).extract_entries())
