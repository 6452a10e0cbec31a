r"""Exceptions raised by the API context layer.

Three kinds of errors are raised, all deriving from ``ApiContextError``:

- ``InvalidContextStateError``: the context was configured incorrectly
  (missing communicator, negative delay, ...). Raised at build time.
- ``UnsupportedHttpStatusError``: the communicator returned a status code
  that is not part of the status catalog. Never retried.
- ``InvalidParameterStateError``: a request parameter value could not be
  read while encoding. Never retried.

A non-success response that is not retried, or whose retry budget is
exhausted, is not an exception: ``ApiContext.execute`` returns ``None``.
"""

from __future__ import annotations

__all__ = [
    "ApiContextError",
    "InvalidContextStateError",
    "InvalidParameterStateError",
    "UnsupportedHttpStatusError",
]


class ApiContextError(Exception):
    r"""Base class of all the errors raised by ``apicontext``."""


class InvalidContextStateError(ApiContextError, ValueError):
    r"""Raised when an ``ApiContext`` is built with an invalid
    configuration.

    Example:
        ```pycon
        >>> from apicontext.exceptions import InvalidContextStateError
        >>> try:
        ...     raise InvalidContextStateError("delay must be >= 0, got -1")
        ... except ValueError as exc:
        ...     print(exc)
        ...
        delay must be >= 0, got -1

        ```
    """


class UnsupportedHttpStatusError(ApiContextError):
    r"""Raised when a response status code is not in the status catalog.

    Args:
        status_code: The unknown status code.
        message: Optional custom message.

    Example:
        ```pycon
        >>> from apicontext.exceptions import UnsupportedHttpStatusError
        >>> error = UnsupportedHttpStatusError(status_code=299)
        >>> error.status_code
        299
        >>> str(error)
        'unsupported HTTP status code: 299'

        ```
    """

    def __init__(self, status_code: int, message: str | None = None) -> None:
        super().__init__(message or f"unsupported HTTP status code: {status_code}")
        self.status_code = status_code


class InvalidParameterStateError(ApiContextError):
    r"""Raised when a request parameter value cannot be read.

    Args:
        field_key: The name of the field that could not be read.
        cause: The exception raised while reading the field.

    Example:
        ```pycon
        >>> from apicontext.exceptions import InvalidParameterStateError
        >>> error = InvalidParameterStateError("name", cause=AttributeError("boom"))
        >>> error.field_key
        'name'
        >>> str(error)
        "cannot read request parameter 'name': boom"

        ```
    """

    def __init__(self, field_key: str, cause: Exception | None = None) -> None:
        message = f"cannot read request parameter {field_key!r}"
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)
        self.field_key = field_key
        self.cause = cause
