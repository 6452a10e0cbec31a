r"""Closed catalog of the HTTP status codes understood by the context.

The catalog is a curated subset of the IANA registry. It is the single
source of truth used to classify responses: a code that is not listed here
is unsupported, even if it is a valid HTTP status code.
"""

from __future__ import annotations

__all__ = ["HttpStatus"]

from enum import IntEnum


class HttpStatus(IntEnum):
    r"""HTTP status codes supported by ``ApiContext``.

    Example:
        ```pycon
        >>> from apicontext.catalog import HttpStatus
        >>> HttpStatus.from_code(200)
        <HttpStatus.OK: 200>
        >>> HttpStatus.from_code(418) is None
        True
        >>> HttpStatus.NOT_FOUND.is_client_error()
        True

        ```
    """

    # 1xx Information
    CONTINUE = 100
    SWITCHING_PROTOCOLS = 101
    PROCESSING = 102

    # 2xx Success
    OK = 200
    CREATED = 201
    ACCEPTED = 202
    NON_AUTHORITATIVE_INFORMATION = 203
    NO_CONTENT = 204
    RESET_CONTENT = 205
    PARTIAL_CONTENT = 206
    MULTI_STATUS = 207

    # 3xx Redirection
    MULTIPLE_CHOICES = 300
    MOVED_PERMANENTLY = 301
    MOVED_TEMPORARILY = 302
    SEE_OTHER = 303
    NOT_MODIFIED = 304
    USE_PROXY = 305
    TEMPORARY_REDIRECT = 307

    # 4xx Client Error
    BAD_REQUEST = 400
    UNAUTHORIZED = 401
    PAYMENT_REQUIRED = 402
    FORBIDDEN = 403
    NOT_FOUND = 404
    METHOD_NOT_ALLOWED = 405
    NOT_ACCEPTABLE = 406
    PROXY_AUTHENTICATION_REQUIRED = 407
    REQUEST_TIMEOUT = 408
    CONFLICT = 409
    GONE = 410
    LENGTH_REQUIRED = 411
    PRECONDITION_FAILED = 412
    REQUEST_TOO_LONG = 413
    REQUEST_URI_TOO_LONG = 414
    UNSUPPORTED_MEDIA_TYPE = 415
    REQUESTED_RANGE_NOT_SATISFIABLE = 416
    EXPECTATION_FAILED = 417
    INSUFFICIENT_SPACE_ON_RESOURCE = 419
    METHOD_FAILURE = 420
    UNPROCESSABLE_ENTITY = 422
    LOCKED = 423
    FAILED_DEPENDENCY = 424

    # 5xx Server Error
    INTERNAL_SERVER_ERROR = 500
    NOT_IMPLEMENTED = 501
    BAD_GATEWAY = 502
    SERVICE_UNAVAILABLE = 503
    GATEWAY_TIMEOUT = 504
    HTTP_VERSION_NOT_SUPPORTED = 505
    INSUFFICIENT_STORAGE = 507

    @property
    def code(self) -> int:
        r"""The numeric status code."""
        return int(self.value)

    @classmethod
    def from_code(cls, code: int) -> HttpStatus | None:
        r"""Look up the catalog entry of a numeric status code.

        Args:
            code: The numeric status code.

        Returns:
            The matching entry, or ``None`` if the code is not in the
                catalog.
        """
        try:
            return cls(code)
        except ValueError:
            return None

    def is_success(self) -> bool:
        return 200 <= self.value < 300

    def is_client_error(self) -> bool:
        return 400 <= self.value < 500

    def is_server_error(self) -> bool:
        return self.value >= 500
