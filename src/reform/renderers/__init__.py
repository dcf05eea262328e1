"""Form renderers."""

from __future__ import annotations

from reform.exceptions import UnknownRendererError
from reform.renderers.base import BaseRenderer
from reform.renderers.html import DivRenderer, OlRenderer, TableRenderer, UlRenderer
from reform.typing.enums import RendererKind
from reform.typing.protocol import Renderer

RENDERERS: dict[RendererKind, type[Renderer]] = {
    RendererKind.OL: OlRenderer,
    RendererKind.UL: UlRenderer,
    RendererKind.DIV: DivRenderer,
    RendererKind.TABLE: TableRenderer,
}


def get_renderer_type(kind: RendererKind | str) -> type[Renderer]:
    """Resolve a renderer name to its class.

    Args:
        kind: Renderer kind or its string name.

    Raises:
        UnknownRendererError: If the name is not a bundled renderer.

    Returns:
        type[Renderer]: Renderer class.
    """
    try:
        parsed = kind if isinstance(kind, RendererKind) else RendererKind.from_str(kind)
    except ValueError as exc:
        raise UnknownRendererError(name=str(kind), supported=tuple(RendererKind)) from exc
    return RENDERERS[parsed]


__all__ = [
    "RENDERERS",
    "BaseRenderer",
    "DivRenderer",
    "OlRenderer",
    "Renderer",
    "TableRenderer",
    "UlRenderer",
    "get_renderer_type",
]
