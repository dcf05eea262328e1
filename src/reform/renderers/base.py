"""Renderer base class."""

from __future__ import annotations


class BaseRenderer:
    """Renderer that wraps nothing.

    Subclasses set the four fragment attributes; the methods satisfy the
    `Renderer` protocol by returning them.
    """

    inner_open: str = ""
    inner_close: str = ""
    item_open: str = ""
    item_close: str = ""

    def inner_form_open(self) -> str:
        """Return the fragment opening the form body."""
        return self.inner_open

    def inner_form_close(self) -> str:
        """Return the fragment closing the form body."""
        return self.inner_close

    def label_outer_open(self) -> str:
        """Return the fragment opening a field container."""
        return self.item_open

    def field_outer_close(self) -> str:
        """Return the fragment closing a field container."""
        return self.item_close
