"""Core domain model exports."""

from reform.typing.models.form import FieldSpec, FormOptions, FormTypeMetadata

__all__ = [
    "FieldSpec",
    "FormOptions",
    "FormTypeMetadata",
]
