"""Per form type metadata registry."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any
from weakref import WeakKeyDictionary, WeakSet

from reform.exceptions import FormDefinitionError, FormSealedError, UnknownFormTypeError
from reform.logging import get_logger
from reform.renderers import get_renderer_type
from reform.settings import get_settings
from reform.typing.models import FieldSpec, FormTypeMetadata

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping

    from reform.typing.enums import RendererKind
    from reform.typing.protocol import FieldFactory, Renderer

logger = get_logger(__name__)


def _type_name(form_type: type) -> str:
    return form_type.__name__


def resolve_renderer(renderer: type[Renderer] | RendererKind | str) -> type[Renderer]:
    """Return a renderer class, looking names up among the bundled renderers.

    Args:
        renderer: Renderer class, kind or name.

    Returns:
        type[Renderer]: Renderer class.
    """
    if isinstance(renderer, str):
        return get_renderer_type(renderer)
    return renderer


class FormRegistry:
    """Metadata for every registered form type, keyed by the type itself.

    Each registration allocates a fresh `FormTypeMetadata`; nothing is shared
    between types, whatever their inheritance. A type is sealed the first time
    it is instantiated, after which its declarations can no longer change.
    Types are held weakly, so form classes that go out of scope leave the
    registry with them.
    """

    def __init__(self, *, default_renderer: type[Renderer] | RendererKind | str | None = None) -> None:
        """Initialize an empty registry.

        Args:
            default_renderer: Renderer for newly registered types. Falls back
                to the `DEFAULT_RENDERER` setting when omitted.
        """
        self._default_renderer = default_renderer
        self._metadata: WeakKeyDictionary[type, FormTypeMetadata] = WeakKeyDictionary()
        self._sealed: WeakSet[type] = WeakSet()

    def __contains__(self, form_type: object) -> bool:
        return form_type in self._metadata

    def __iter__(self) -> Iterator[type]:
        return iter(self._metadata)

    def __len__(self) -> int:
        return len(self._metadata)

    @property
    def default_renderer(self) -> type[Renderer]:
        """Return the renderer given to types registered without one."""
        if self._default_renderer is None:
            return get_renderer_type(get_settings().default_renderer)
        return resolve_renderer(self._default_renderer)

    def register(
        self,
        form_type: type,
        *,
        action: str | None = None,
        method: str | None = None,
        values: Mapping[str, Any] | None = None,
        renderer: type[Renderer] | RendererKind | str | None = None,
    ) -> FormTypeMetadata:
        """Allocate the metadata of a new form type.

        Args:
            form_type: The form class.
            action: Default form action.
            method: Default form method.
            values: Default field values.
            renderer: Default renderer class or name.

        Raises:
            FormDefinitionError: If the type is already registered.

        Returns:
            FormTypeMetadata: The fresh metadata record.
        """
        if form_type in self._metadata:
            raise FormDefinitionError(message=f"Form type '{_type_name(form_type)}' is already registered")

        metadata = FormTypeMetadata(
            renderer=self.default_renderer if renderer is None else resolve_renderer(renderer),
        )
        if action is not None:
            metadata.action = action
        if method is not None:
            metadata.method = method
        if values is not None:
            metadata.values = dict(values)

        self._metadata[form_type] = metadata
        logger.debug("Form type registered", extra={"form_type": _type_name(form_type)})
        return metadata

    def unregister(self, form_type: type) -> None:
        """Forget a form type and its metadata.

        Raises:
            UnknownFormTypeError: If the type was never registered here.
        """
        try:
            del self._metadata[form_type]
        except KeyError:
            raise UnknownFormTypeError(form_type=_type_name(form_type)) from None
        self._sealed.discard(form_type)
        logger.debug("Form type unregistered", extra={"form_type": _type_name(form_type)})

    def metadata(self, form_type: type) -> FormTypeMetadata:
        """Return the metadata of a registered type.

        Raises:
            UnknownFormTypeError: If the type was never registered here.
        """
        try:
            return self._metadata[form_type]
        except KeyError:
            raise UnknownFormTypeError(form_type=_type_name(form_type)) from None

    def declare_field(
        self,
        form_type: type,
        name: object,
        field_type: FieldFactory,
        options: Mapping[str, Any] | None = None,
    ) -> FieldSpec:
        """Append a field declaration to a form type.

        `name` defaults to the declared name and `id` to
        `"<TypeName>_<name>"`. Declaring the same name twice is allowed and
        yields two fields.

        Args:
            form_type: The form class being defined.
            name: Declared field name.
            field_type: Field class or factory.
            options: Options passed to the field on instantiation.

        Raises:
            FormSealedError: If the type has already been instantiated.

        Returns:
            FieldSpec: The recorded spec.
        """
        self._ensure_open(form_type, "declare a field")
        metadata = self.metadata(form_type)

        declared = dict(options or {})
        if declared.get("name") is None:
            declared["name"] = str(name)
        if declared.get("id") is None:
            declared["id"] = f"{_type_name(form_type)}_{name}"

        spec = FieldSpec(field_type=field_type, options=declared)
        metadata.add_field(spec)
        logger.debug(
            "Field declared",
            extra={"form_type": _type_name(form_type), "field_name": spec.name, "field_id": spec.id},
        )
        return spec

    def renderer(
        self,
        form_type: type,
        renderer_type: type[Renderer] | RendererKind | str | None = None,
    ) -> type[Renderer]:
        """Read, or set then read, the renderer of a form type.

        Raises:
            FormSealedError: If setting a renderer on an instantiated type.
        """
        metadata = self.metadata(form_type)
        if renderer_type is not None:
            self._ensure_open(form_type, "change the renderer")
            metadata.renderer = resolve_renderer(renderer_type)
        return metadata.renderer

    def list_fields(self, form_type: type) -> tuple[FieldSpec, ...]:
        """Return the declared field specs in declaration order."""
        return tuple(self.metadata(form_type).fields)

    def seal(self, form_type: type) -> None:
        """Freeze the declarations of a form type."""
        if form_type in self._sealed:
            return
        self.metadata(form_type)
        self._sealed.add(form_type)
        logger.debug("Form type sealed", extra={"form_type": _type_name(form_type)})

    def is_sealed(self, form_type: type) -> bool:
        """Return whether the form type has been sealed."""
        return form_type in self._sealed

    def _ensure_open(self, form_type: type, operation: str) -> None:
        if form_type in self._sealed:
            raise FormSealedError(form_type=_type_name(form_type), operation=operation)


default_registry = FormRegistry()
