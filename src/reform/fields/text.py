"""Text-like input fields."""

from __future__ import annotations

from html import escape

from reform.fields.base import BaseField, format_attributes


class InputField(BaseField):
    """A single `<input>` element of a given type."""

    input_type = "text"

    def render(self) -> str:
        """Return the `<input>` element."""
        attributes = {"type": self.input_type, **self._base_attributes(), "value": self._rendered_value()}
        attributes.update(self.attrs)
        return f"<input{format_attributes(attributes)} />"

    def _rendered_value(self) -> object:
        return self.value


class TextField(InputField):
    """Single-line text input."""


class PasswordField(InputField):
    """Password input; the bound value is never written back to the page."""

    input_type = "password"

    def _rendered_value(self) -> object:
        return None


class HiddenField(InputField):
    """Hidden input, rendered without a visible label."""

    input_type = "hidden"

    def label(self) -> str:
        """Return no label."""
        return ""


class TextAreaField(BaseField):
    """Multi-line text input."""

    def render(self) -> str:
        """Return the `<textarea>` element."""
        attributes = self._base_attributes()
        attributes.update(self.attrs)
        content = "" if self.value is None else escape(str(self.value))
        return f"<textarea{format_attributes(attributes)}>{content}</textarea>"
