r"""JSON logging of API calls.

The executors report every attempt through ``log_structured`` with the
attempt number and the status code as extra fields. The default
``logging`` formatters ignore these fields. ``StructuredFormatter``
renders each record as a single JSON line which carries them under
``fields``, together with the id of the call being logged when one is
bound with ``call_id_scope`` or ``set_call_id``.

Example:
    ```python
    import logging

    from apicontext import ApiContext
    from apicontext.utils.structured_logging import StructuredFormatter, call_id_scope

    handler = logging.StreamHandler()
    handler.setFormatter(StructuredFormatter())
    logging.getLogger("apicontext").addHandler(handler)
    logging.getLogger("apicontext").setLevel(logging.DEBUG)

    with call_id_scope("fetch-user-42"):
        ApiContext(communicator).execute()
    ```
"""

from __future__ import annotations

__all__ = [
    "StructuredFormatter",
    "call_id_scope",
    "clear_call_id",
    "get_call_id",
    "log_structured",
    "set_call_id",
]

import contextlib
import contextvars
import json
import logging
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Generator

_call_id: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "apicontext_call_id", default=None
)

# Attributes every LogRecord has, so anything else came from ``extra``
_RECORD_ATTRIBUTES = frozenset(vars(logging.LogRecord("", 0, "", 0, "", (), None))) | {
    "message",
    "asctime",
}


def get_call_id() -> str | None:
    r"""Return the id of the call bound to the current context, if
    any."""
    return _call_id.get()


def set_call_id(call_id: str) -> None:
    r"""Bind a call id to the current context.

    The id lives in a context variable: each thread and each asyncio task
    sees its own value.

    Args:
        call_id: The id attached to the records logged from now on.

    Example:
        ```pycon
        >>> from apicontext.utils.structured_logging import clear_call_id, get_call_id, set_call_id
        >>> set_call_id("fetch-user-42")
        >>> get_call_id()
        'fetch-user-42'
        >>> clear_call_id()
        >>> print(get_call_id())
        None

        ```
    """
    _call_id.set(call_id)


def clear_call_id() -> None:
    r"""Unbind the call id of the current context."""
    _call_id.set(None)


@contextlib.contextmanager
def call_id_scope(call_id: str) -> Generator[str, None, None]:
    r"""Bind a call id for the duration of a ``with`` block.

    The previous id, if any, is restored when the block exits.

    Args:
        call_id: The id attached to the records logged inside the block.

    Example:
        ```pycon
        >>> from apicontext.utils.structured_logging import call_id_scope, get_call_id
        >>> with call_id_scope("outer"):
        ...     with call_id_scope("inner"):
        ...         print(get_call_id())
        ...     print(get_call_id())
        ...
        inner
        outer

        ```
    """
    token = _call_id.set(call_id)
    try:
        yield call_id
    finally:
        _call_id.reset(token)


class StructuredFormatter(logging.Formatter):
    r"""Render log records as one JSON object per line.

    The object has the keys ``time`` (ISO 8601 in UTC, millisecond
    precision), ``level``, ``logger``, ``message`` and ``location``
    (``module:function:line``). ``call_id`` is added when a call id is
    bound, ``error`` when the record carries exception info, and
    ``fields`` when the record has extra attributes. Values that JSON
    cannot represent are rendered with ``str``.

    Example:
        ```pycon
        >>> import json
        >>> import logging
        >>> from io import StringIO
        >>> from apicontext.utils.structured_logging import StructuredFormatter
        >>> buffer = StringIO()
        >>> handler = logging.StreamHandler(buffer)
        >>> handler.setFormatter(StructuredFormatter())
        >>> logger = logging.getLogger("doctest.structured")
        >>> logger.addHandler(handler)
        >>> logger.warning("Attempt 1/3 returned status 500", extra={"status_code": 500})
        >>> json.loads(buffer.getvalue())["fields"]
        {'status_code': 500}

        ```
    """

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "time": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "location": f"{record.module}:{record.funcName}:{record.lineno}",
        }
        call_id = get_call_id()
        if call_id is not None:
            payload["call_id"] = call_id
        if record.exc_info:
            payload["error"] = self.formatException(record.exc_info)
        fields = {
            key: value for key, value in vars(record).items() if key not in _RECORD_ATTRIBUTES
        }
        if fields:
            payload["fields"] = fields
        return json.dumps(payload, default=str)

    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:  # noqa: ARG002
        moment = datetime.fromtimestamp(record.created, tz=timezone.utc)
        return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def log_structured(logger: logging.Logger, level: int, message: str, **fields: Any) -> None:
    r"""Log a message with extra structured fields.

    Args:
        logger: The logger to use.
        level: The log level, e.g. ``logging.DEBUG``.
        message: The log message.
        **fields: The fields attached to the record.
    """
    logger.log(level, message, extra=fields)
