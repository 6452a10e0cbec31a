r"""Closed catalog of the content types used in API calls."""

from __future__ import annotations

__all__ = ["ContentType"]

from enum import Enum


class ContentType(Enum):
    r"""MIME content types, each bound to its header value (the tag).

    Example:
        ```pycon
        >>> from apicontext.catalog import ContentType
        >>> ContentType.JSON.tag
        'application/json'
        >>> ContentType.from_tag("image/png")
        <ContentType.PNG: 'image/png'>
        >>> ContentType.from_tag("application/x-unknown") is None
        True

        ```
    """

    PLAIN = "text/plain"
    CSV = "text/csv"
    HTML = "text/html"
    CSS = "text/css"
    JAVASCRIPT = "text/javascript"
    EXE = "application/octet-stream"
    JSON = "application/json"
    PDF = "application/pdf"
    EXCEL_BEFORE_2007 = "application/vnd.ms-excel"
    EXCEL = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
    JPEG = "image/jpeg"
    PNG = "image/png"
    GIF = "image/gif"
    BMP = "image/bmp"
    SVG = "image/svg+xml"
    ZIP = "application/zip"
    LZH = "application/x-lzh"
    TAR = "application/x-tar"
    MP3 = "audio/mpeg"
    MP4 = "video/mp4"
    MPEG = "video/mpeg"

    @property
    def tag(self) -> str:
        r"""The value of the ``Content-Type`` header."""
        return self.value

    @classmethod
    def from_tag(cls, tag: str) -> ContentType | None:
        r"""Look up a content type by header value.

        Parameters such as ``charset`` are ignored.

        Args:
            tag: The header value, e.g. ``"application/json; charset=utf-8"``.

        Returns:
            The matching content type, or ``None`` if it is not in the
                catalog.
        """
        try:
            return cls(tag.split(";")[0].strip().lower())
        except ValueError:
            return None
