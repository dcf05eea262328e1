"""Typing-centric domain modules."""

from reform.typing.enums import FormMethod, RendererKind
from reform.typing.models import FieldSpec, FormOptions, FormTypeMetadata
from reform.typing.protocol import Field, FieldFactory, RenderableForm, Renderer

__all__ = [
    "Field",
    "FieldFactory",
    "FieldSpec",
    "FormMethod",
    "FormOptions",
    "FormTypeMetadata",
    "RenderableForm",
    "Renderer",
    "RendererKind",
]
