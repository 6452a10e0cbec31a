r"""Resource path templates with positional placeholders."""

from __future__ import annotations

__all__ = ["ResourcePath", "StaticResourcePath"]

from abc import ABC, abstractmethod
from string import Formatter


class ResourcePath(ABC):
    r"""Abstract base class of API resource paths.

    A resource path is a template whose ``{}`` placeholders are bound, from
    left to right, to the values given to ``bind``.
    """

    @property
    @abstractmethod
    def resource_path(self) -> str:
        r"""The resource path template."""

    def bind(self, *values: str) -> str:
        r"""Bind values to the placeholders of the resource path.

        Args:
            *values: The values to substitute, from left to right.

        Returns:
            The resource path with every placeholder substituted.

        Raises:
            TypeError: if a value is ``None``.
            ValueError: if no value is given, if the template has a named
                or numbered placeholder, or if the number of values does
                not match the number of placeholders.

        Example:
            ```pycon
            >>> from apicontext.resource import StaticResourcePath
            >>> path = StaticResourcePath("/users/{}/repos/{}")
            >>> path.bind("octocat", "hello-world")
            '/users/octocat/repos/hello-world'

            ```
        """
        if not values:
            msg = "at least one value is required to bind a resource path"
            raise ValueError(msg)
        if any(value is None for value in values):
            msg = "resource path values must not be None"
            raise TypeError(msg)

        template = self.resource_path
        names = [name for _, name, _, _ in Formatter().parse(template) if name is not None]
        if any(names):
            msg = f"resource path {template!r} must only use positional '{{}}' placeholders"
            raise ValueError(msg)
        placeholders = len(names)
        if placeholders != len(values):
            msg = (
                f"resource path {template!r} has {placeholders} placeholder(s) "
                f"but {len(values)} value(s) were given"
            )
            raise ValueError(msg)
        return template.format(*values)


class StaticResourcePath(ResourcePath):
    r"""Resource path built from a fixed template.

    Args:
        template: The resource path template.
    """

    def __init__(self, template: str) -> None:
        self._template = template

    @property
    def resource_path(self) -> str:
        return self._template

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}({self._template!r})"
