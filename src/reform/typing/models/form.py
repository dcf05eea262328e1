"""Form definition and construction models."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class FieldSpec(BaseModel):
    """Declaration-time record of a field: what builds it and with which options.

    The options are frozen once the spec exists, so the defaulted `name` and
    `id` cannot change afterwards.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    field_type: Any
    options: Mapping[str, Any] = Field(default_factory=dict)

    @field_validator("options", mode="after")
    @classmethod
    def freeze_options(cls, value: Mapping[str, Any]) -> Mapping[str, Any]:
        """Store options behind a read-only view of a private copy."""
        return MappingProxyType(dict(value))

    @property
    def name(self) -> str | None:
        """Return the field name, if the spec carries one."""
        name = self.options.get("name")
        return None if name is None else str(name)

    @property
    def id(self) -> str | None:
        """Return the field id, if the spec carries one."""
        field_id = self.options.get("id")
        return None if field_id is None else str(field_id)

    def bind(self, value: object) -> dict[str, Any]:
        """Return a fresh options dict carrying `value`; the spec itself is untouched."""
        bound = dict(self.options)
        bound["value"] = value
        return bound

    def describe(self) -> dict[str, Any]:
        """Return a JSON-friendly summary of the spec."""
        field_type = self.field_type
        type_name = getattr(field_type, "__qualname__", None) or type(field_type).__qualname__
        return {
            "field_type": type_name,
            "options": {key: _describe_value(value) for key, value in self.options.items()},
        }


def _describe_value(value: object) -> object:
    if value is None or isinstance(value, str | int | float | bool):
        return value
    if isinstance(value, Mapping):
        return {str(key): _describe_value(item) for key, item in value.items()}
    if isinstance(value, list | tuple):
        return [_describe_value(item) for item in value]
    return repr(value)


class FormTypeMetadata(BaseModel):
    """Per form type metadata, allocated once when the type is registered.

    Every attribute has its own default factory so each record starts from an
    independent copy of the default shape.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    action: str = ""
    field_lookup: dict[str, FieldSpec] = Field(default_factory=dict)
    field_names: list[str] = Field(default_factory=list)
    fields: list[FieldSpec] = Field(default_factory=list)
    fieldsets: list[Any] = Field(default_factory=list)
    method: str = "post"
    renderer: Any = None
    values: dict[str, Any] = Field(default_factory=dict)

    def add_field(self, spec: FieldSpec) -> None:
        """Append a spec, keeping the name indexes in step."""
        self.fields.append(spec)
        if spec.name is not None:
            self.field_names.append(spec.name)
            self.field_lookup[spec.name] = spec


class FormOptions(BaseModel):
    """Run-time overrides supplied when a form is instantiated."""

    model_config = ConfigDict(extra="forbid", arbitrary_types_allowed=True)

    action: str | None = None
    method: str | None = None
    values: Mapping[str, Any] | None = None
    renderer: Any = None
