"""Choice fields."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from html import escape
from typing import Any

from reform.fields.base import BaseField, format_attributes


class CheckboxField(BaseField):
    """Checkbox, checked when the bound value is truthy.

    The submitted value defaults to "1" and can be changed with the
    `checked_value` option.
    """

    def render(self) -> str:
        """Return the checkbox `<input>` element."""
        attributes = {
            "type": "checkbox",
            **self._base_attributes(),
            "value": self.options.get("checked_value", "1"),
            "checked": bool(self.value),
        }
        attributes.update(self.attrs)
        return f"<input{format_attributes(attributes)} />"


class SelectField(BaseField):
    """Drop-down list.

    `choices` is either a mapping of value to text or a sequence of values or
    `(value, text)` pairs. The option whose value equals the bound value, as a
    string, is selected.
    """

    def __init__(self, options: Mapping[str, Any]) -> None:
        super().__init__(options)
        self.choices = _normalize_choices(options.get("choices") or ())

    def render(self) -> str:
        """Return the `<select>` element and its options."""
        attributes = self._base_attributes()
        attributes.update(self.attrs)
        selected = None if self.value is None else str(self.value)
        rendered = "".join(
            f"<option{format_attributes({'value': value, 'selected': value == selected})}>{escape(text)}</option>"
            for value, text in self.choices
        )
        return f"<select{format_attributes(attributes)}>{rendered}</select>"


def _normalize_choices(choices: Mapping[object, object] | Iterable[object]) -> list[tuple[str, str]]:
    if isinstance(choices, Mapping):
        return [(str(value), str(text)) for value, text in choices.items()]
    normalized: list[tuple[str, str]] = []
    for choice in choices:
        if isinstance(choice, tuple | list) and len(choice) == 2:  # noqa: PLR2004
            normalized.append((str(choice[0]), str(choice[1])))
        else:
            normalized.append((str(choice), str(choice)))
    return normalized
