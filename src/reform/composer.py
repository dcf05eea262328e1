"""Compose the markup of a form from its fields and renderer."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from reform.typing.protocol import RenderableForm


def form_open_tag(method: str, action: str) -> str:
    """Return the opening `<form>` tag; attribute values are written as given."""
    return f'<form method="{method}" action="{action}">'


def compose(form: RenderableForm) -> str:
    """Render a form instance.

    The renderer opens the body, each field is wrapped as label-open, label,
    field, field-close, then the renderer closes the body. Nothing is escaped
    here; fields and renderers own their markup.

    Args:
        form: Form instance to render.

    Returns:
        str: The form markup.
    """
    renderer = form.renderer
    parts = [form_open_tag(form.method, form.action), renderer.inner_form_open()]
    for field in form.fields:
        parts.extend(
            (
                renderer.label_outer_open(),
                field.label(),
                field.render(),
                renderer.field_outer_close(),
            ),
        )
    parts.extend((renderer.inner_form_close(), "</form>"))
    return "".join(parts)
