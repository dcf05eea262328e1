"""Field base class."""

from __future__ import annotations

from collections.abc import Mapping
from html import escape
from typing import Any


def format_attributes(attributes: Mapping[str, object]) -> str:
    """Render HTML attributes, escaped, in the given order.

    `None` and `False` drop the attribute; `True` renders it bare.

    Args:
        attributes: Attribute name to value.

    Returns:
        str: Attribute string with a leading space per attribute.
    """
    parts: list[str] = []
    for key, value in attributes.items():
        if value is None or value is False:
            continue
        if value is True:
            parts.append(f" {escape(key)}")
            continue
        parts.append(f' {escape(key)}="{escape(str(value))}"')
    return "".join(parts)


class BaseField:
    """A field built from an options mapping and bound to one value.

    Recognised options are `name`, `id`, `value`, `label` (label text,
    derived from the name when absent) and `attrs` (extra HTML attributes).
    Other options are kept in `options` for subclasses.
    """

    def __init__(self, options: Mapping[str, Any]) -> None:
        self.options = dict(options)
        self.name: str | None = options.get("name")
        self.id: str | None = options.get("id")
        self.value: Any = options.get("value")
        self.attrs: dict[str, object] = dict(options.get("attrs") or {})

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, value={self.value!r})"

    def __str__(self) -> str:
        return self.render()

    @property
    def label_text(self) -> str:
        """Return the human readable label."""
        text = self.options.get("label")
        if text is not None:
            return str(text)
        return (self.name or "").replace("_", " ").strip().capitalize()

    def label(self) -> str:
        """Return the `<label>` element for this field."""
        return f"<label{format_attributes({'for': self.id})}>{escape(self.label_text)}</label>"

    def render(self) -> str:
        """Return the field markup; subclasses must override."""
        raise NotImplementedError

    def _base_attributes(self) -> dict[str, object]:
        return {"id": self.id, "name": self.name}
