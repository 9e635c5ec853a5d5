"""Textual host adapter and demo editor."""

from .host import TextAreaHost

__all__ = ["TextAreaHost"]
