from __future__ import annotations

import gc

import pytest

from doubles import MarkerRenderer, RecordingField
from reform.exceptions import FormDefinitionError, FormSealedError, UnknownFormTypeError, UnknownRendererError
from reform.registry import FormRegistry
from reform.renderers import OlRenderer, TableRenderer, UlRenderer
from reform.settings import get_settings


class _Alpha:
    pass


class _Beta(_Alpha):
    pass


def test_register_allocates_default_shape(registry: FormRegistry) -> None:
    metadata = registry.register(_Alpha)

    assert metadata.action == ""
    assert metadata.method == "post"
    assert metadata.renderer is OlRenderer
    assert metadata.values == {}
    assert metadata.fields == []
    assert metadata.field_names == []
    assert metadata.field_lookup == {}
    assert metadata.fieldsets == []


def test_register_gives_each_type_independent_metadata(registry: FormRegistry) -> None:
    alpha = registry.register(_Alpha)
    beta = registry.register(_Beta)

    assert alpha is not beta
    assert alpha.fields is not beta.fields
    assert alpha.values is not beta.values

    registry.declare_field(_Beta, "email", RecordingField)

    assert registry.list_fields(_Alpha) == ()
    assert [spec.name for spec in registry.list_fields(_Beta)] == ["email"]


def test_register_applies_definition_defaults(registry: FormRegistry) -> None:
    metadata = registry.register(
        _Alpha,
        action="/go",
        method="get",
        values={"q": "x"},
        renderer="table",
    )

    assert metadata.action == "/go"
    assert metadata.method == "get"
    assert metadata.values == {"q": "x"}
    assert metadata.renderer is TableRenderer


def test_register_twice_is_rejected(registry: FormRegistry) -> None:
    registry.register(_Alpha)
    with pytest.raises(FormDefinitionError, match="already registered"):
        registry.register(_Alpha)


def test_unknown_type_raises(registry: FormRegistry) -> None:
    with pytest.raises(UnknownFormTypeError, match="_Alpha"):
        registry.metadata(_Alpha)


def test_declare_field_defaults_name_and_id(registry: FormRegistry) -> None:
    registry.register(_Alpha)

    spec = registry.declare_field(_Alpha, "email", RecordingField, {"label": "E-mail"})

    assert spec.field_type is RecordingField
    assert spec.options == {"label": "E-mail", "name": "email", "id": "_Alpha_email"}


def test_declare_field_keeps_explicit_name_and_id(registry: FormRegistry) -> None:
    registry.register(_Alpha)

    spec = registry.declare_field(_Alpha, "email", RecordingField, {"name": "user[email]", "id": "mail"})

    assert spec.name == "user[email]"
    assert spec.id == "mail"
    assert registry.metadata(_Alpha).field_lookup == {"user[email]": spec}


def test_declare_field_does_not_keep_caller_options(registry: FormRegistry) -> None:
    registry.register(_Alpha)
    options = {"label": "E-mail"}

    spec = registry.declare_field(_Alpha, "email", RecordingField, options)
    options["label"] = "changed"

    assert spec.options["label"] == "E-mail"
    with pytest.raises(TypeError):
        spec.options["name"] = "other"  # type: ignore[index]


def test_duplicate_names_produce_duplicate_specs(registry: FormRegistry) -> None:
    registry.register(_Alpha)
    registry.declare_field(_Alpha, "email", RecordingField)
    registry.declare_field(_Alpha, "email", RecordingField)

    assert [spec.name for spec in registry.list_fields(_Alpha)] == ["email", "email"]
    assert registry.metadata(_Alpha).field_names == ["email", "email"]


def test_renderer_reads_and_sets(registry: FormRegistry) -> None:
    registry.register(_Alpha)

    assert registry.renderer(_Alpha) is OlRenderer
    assert registry.renderer(_Alpha, MarkerRenderer) is MarkerRenderer
    assert registry.renderer(_Alpha) is MarkerRenderer
    assert registry.renderer(_Alpha, "ul") is UlRenderer


def test_renderer_rejects_unknown_name(registry: FormRegistry) -> None:
    registry.register(_Alpha)
    with pytest.raises(UnknownRendererError):
        registry.renderer(_Alpha, "marquee")


def test_sealed_type_rejects_changes(registry: FormRegistry) -> None:
    registry.register(_Alpha)
    registry.declare_field(_Alpha, "email", RecordingField)

    registry.seal(_Alpha)

    assert registry.is_sealed(_Alpha)
    with pytest.raises(FormSealedError, match="declare a field"):
        registry.declare_field(_Alpha, "name", RecordingField)
    with pytest.raises(FormSealedError, match="change the renderer"):
        registry.renderer(_Alpha, UlRenderer)
    assert registry.renderer(_Alpha) is OlRenderer


def test_registry_container_protocol(registry: FormRegistry) -> None:
    registry.register(_Alpha)

    assert _Alpha in registry
    assert _Beta not in registry
    assert list(registry) == [_Alpha]
    assert len(registry) == 1


def test_default_renderer_follows_settings(monkeypatch) -> None:
    get_settings.cache_clear()
    monkeypatch.setenv("DEFAULT_RENDERER", "UL")

    try:
        assert FormRegistry().default_renderer is UlRenderer
    finally:
        get_settings.cache_clear()


def test_unregister_forgets_type(registry: FormRegistry) -> None:
    registry.register(_Alpha)
    registry.seal(_Alpha)

    registry.unregister(_Alpha)

    assert _Alpha not in registry
    assert not registry.is_sealed(_Alpha)
    registry.register(_Alpha)
    assert registry.list_fields(_Alpha) == ()


def test_unregister_unknown_type_raises(registry: FormRegistry) -> None:
    with pytest.raises(UnknownFormTypeError):
        registry.unregister(_Alpha)


def test_types_out_of_scope_leave_registry(registry: FormRegistry) -> None:
    temporary = type("Temporary", (), {})
    registry.register(temporary)
    registry.declare_field(temporary, "email", RecordingField)
    assert len(registry) == 1

    del temporary
    gc.collect()

    assert len(registry) == 0
