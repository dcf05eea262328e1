"""Bundled form fields."""

from reform.fields.base import BaseField, format_attributes
from reform.fields.choice import CheckboxField, SelectField
from reform.fields.text import HiddenField, InputField, PasswordField, TextAreaField, TextField
from reform.typing.protocol import Field, FieldFactory

__all__ = [
    "BaseField",
    "CheckboxField",
    "Field",
    "FieldFactory",
    "HiddenField",
    "InputField",
    "PasswordField",
    "SelectField",
    "TextAreaField",
    "TextField",
    "format_attributes",
]
