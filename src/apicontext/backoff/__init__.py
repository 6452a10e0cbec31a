r"""Backoff strategies for the wait between two attempts."""

from __future__ import annotations

__all__ = ["BaseBackoffStrategy", "ConstantBackoff"]

from apicontext.backoff.base import BaseBackoffStrategy
from apicontext.backoff.constant import ConstantBackoff
