"""Bundled HTML renderers."""

from __future__ import annotations

from reform.renderers.base import BaseRenderer


class OlRenderer(BaseRenderer):
    """Lay fields out as items of an ordered list."""

    inner_open = "<ol>"
    inner_close = "</ol>"
    item_open = "<li>"
    item_close = "</li>"


class UlRenderer(BaseRenderer):
    """Lay fields out as items of an unordered list."""

    inner_open = "<ul>"
    inner_close = "</ul>"
    item_open = "<li>"
    item_close = "</li>"


class DivRenderer(BaseRenderer):
    """Wrap each field in its own `div`."""

    inner_open = '<div class="form-body">'
    inner_close = "</div>"
    item_open = '<div class="form-field">'
    item_close = "</div>"


class TableRenderer(BaseRenderer):
    """One table row per field; label and field share a cell."""

    inner_open = "<table><tbody>"
    inner_close = "</tbody></table>"
    item_open = "<tr><td>"
    item_close = "</td></tr>"
