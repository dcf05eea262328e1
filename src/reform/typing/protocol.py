"""Collaborator interfaces consumed by forms.

`Field` and `Renderer` are runtime checkable so tooling and tests can check an
implementation with `isinstance`; forms and the composer never inspect types.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence


@runtime_checkable
class Field(Protocol):
    """A form field bound to a single value."""

    def label(self) -> str:
        """Return the markup labelling the field.

        Returns:
            str: Label markup fragment.
        """

    def render(self) -> str:
        """Return the markup of the field itself.

        Returns:
            str: Field markup fragment.
        """


class FieldFactory(Protocol):
    """Anything that builds a field from an options mapping, usually a field class."""

    def __call__(self, options: Mapping[str, object], /) -> Field:
        """Build a field.

        Args:
            options: Declared options plus the bound `value`.

        Returns:
            Field: The field instance.
        """


@runtime_checkable
class Renderer(Protocol):
    """Markup fragments wrapping the form body and each field.

    Implementations are built with no arguments.
    """

    def inner_form_open(self) -> str:
        """Return the fragment opening the form body."""

    def inner_form_close(self) -> str:
        """Return the fragment closing the form body."""

    def label_outer_open(self) -> str:
        """Return the fragment opening a field container, before the label."""

    def field_outer_close(self) -> str:
        """Return the fragment closing a field container."""


class RenderableForm(Protocol):
    """What the render composer reads from a form instance."""

    action: str
    method: str
    renderer: Renderer

    @property
    def fields(self) -> Sequence[Field]:
        """Return the bound fields in declaration order."""
