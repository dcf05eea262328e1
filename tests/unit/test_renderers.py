from __future__ import annotations

import pytest

from reform.exceptions import UnknownRendererError
from reform.renderers import (
    RENDERERS,
    BaseRenderer,
    DivRenderer,
    OlRenderer,
    Renderer,
    TableRenderer,
    UlRenderer,
    get_renderer_type,
)
from reform.typing.enums import RendererKind


def test_ol_renderer_fragments() -> None:
    renderer = OlRenderer()

    assert renderer.inner_form_open() == "<ol>"
    assert renderer.inner_form_close() == "</ol>"
    assert renderer.label_outer_open() == "<li>"
    assert renderer.field_outer_close() == "</li>"


def test_base_renderer_wraps_nothing() -> None:
    renderer = BaseRenderer()

    assert renderer.inner_form_open() + renderer.label_outer_open() == ""


def test_every_kind_has_a_renderer() -> None:
    assert set(RENDERERS) == set(RendererKind)
    for renderer_type in RENDERERS.values():
        assert isinstance(renderer_type(), Renderer)


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("ol", OlRenderer),
        ("UL", UlRenderer),
        (" div ", DivRenderer),
        (RendererKind.TABLE, TableRenderer),
    ],
)
def test_get_renderer_type(name: str, expected: type) -> None:
    assert get_renderer_type(name) is expected


def test_get_renderer_type_rejects_unknown() -> None:
    with pytest.raises(UnknownRendererError, match="Expected one of: ol, ul, div, table"):
        get_renderer_type("marquee")
