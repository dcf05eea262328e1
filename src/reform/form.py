"""Declarative form base class."""

from __future__ import annotations

from dataclasses import dataclass, field as dataclass_field
from typing import TYPE_CHECKING, Any, ClassVar

from reform.composer import compose
from reform.exceptions import FormDefinitionError
from reform.logging import get_logger
from reform.registry import FormRegistry, default_registry, resolve_renderer
from reform.typing.models import FieldSpec, FormOptions

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping

    from reform.typing.enums import RendererKind
    from reform.typing.protocol import Field, FieldFactory, Renderer

logger = get_logger(__name__)


@dataclass(frozen=True)
class FieldDeclaration:
    """A field declared in a class body, named after the attribute holding it."""

    field_type: FieldFactory
    options: dict[str, Any] = dataclass_field(default_factory=dict)


def field(field_type: FieldFactory, /, **options: Any) -> FieldDeclaration:
    """Declare a field in a form class body.

    Example:
        class ContactForm(Form):
            email = field(TextField, label="E-mail")

    Args:
        field_type: Field class or factory.
        **options: Options passed to the field when a form is built.

    Returns:
        FieldDeclaration: Placeholder collected when the class is created.
    """
    return FieldDeclaration(field_type=field_type, options=options)


class Form:
    """Base class of every form type.

    Each subclass, at any depth, is registered with its own metadata when it
    is created. Fields come from `field(...)` attributes in the class body, in
    order, and from `declare_field` calls made before the first instance is
    built. Class keywords set the type's defaults::

        class SearchForm(Form, action="/search", method="get", renderer="ul"):
            query = field(TextField)
    """

    registry: ClassVar[FormRegistry] = default_registry

    def __init_subclass__(
        cls,
        *,
        registry: FormRegistry | None = None,
        action: str | None = None,
        method: str | None = None,
        values: Mapping[str, Any] | None = None,
        renderer: type[Renderer] | RendererKind | str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init_subclass__(**kwargs)
        declarations = [
            (name, declaration) for name, declaration in vars(cls).items() if isinstance(declaration, FieldDeclaration)
        ]
        for name, _ in declarations:
            if hasattr(Form, name):
                raise FormDefinitionError(
                    message=(
                        f"Field '{name}' on '{cls.__name__}' would hide Form.{name}; "
                        f"use another attribute with field(..., name='{name}') or declare_field(..., name='{name}')"
                    ),
                )

        if registry is not None:
            cls.registry = registry
        cls.registry.register(cls, action=action, method=method, values=values, renderer=renderer)

        for name, declaration in declarations:
            spec = cls.registry.declare_field(cls, name, declaration.field_type, declaration.options)
            setattr(cls, name, spec)

    @classmethod
    def declare_field(cls, name: object, field_type: FieldFactory, /, **options: Any) -> FieldSpec:
        """Append a field to this form type.

        Args:
            name: Field name; also the default `name` option.
            field_type: Field class or factory.
            **options: Options passed to the field on instantiation.

        Returns:
            FieldSpec: The recorded spec.
        """
        return cls.registry.declare_field(cls, name, field_type, options)

    @classmethod
    def set_renderer(cls, renderer_type: type[Renderer] | RendererKind | str | None = None) -> type[Renderer]:
        """Return this type's renderer class, setting it first when one is given."""
        return cls.registry.renderer(cls, renderer_type)

    @classmethod
    def list_fields(cls) -> tuple[FieldSpec, ...]:
        """Return this type's field specs in declaration order."""
        return cls.registry.list_fields(cls)

    def __init__(
        self,
        *,
        action: str | None = None,
        method: str | None = None,
        values: Mapping[str, Any] | None = None,
        renderer: type[Renderer] | RendererKind | str | None = None,
        registry: FormRegistry | None = None,
    ) -> None:
        """Build a form bound to run-time values.

        Run-time options win over the type's defaults. Each declared field is
        built, in order, with its options plus `value` looked up by name in
        `values`; missing names bind `None`.

        Args:
            action: Form action.
            method: Form method.
            values: Field name to value.
            renderer: Renderer class or name replacing the type's renderer.
            registry: Registry to read the type from; defaults to the type's own.
        """
        options = FormOptions(action=action, method=method, values=values, renderer=renderer)
        form_type = type(self)
        self.registry = form_type.registry if registry is None else registry
        meta = self.registry.metadata(form_type)
        self.registry.seal(form_type)

        self.action: str = meta.action if options.action is None else options.action
        self.method: str = meta.method if options.method is None else options.method
        self.values: dict[str, Any] = dict(meta.values if options.values is None else options.values)

        renderer_type = meta.renderer if options.renderer is None else resolve_renderer(options.renderer)
        self.renderer: Renderer = renderer_type()

        self.fields: tuple[Field, ...] = tuple(self._build_field(spec) for spec in meta.fields)
        logger.debug(
            "Form instantiated",
            extra={"form_type": form_type.__name__, "field_count": len(self.fields)},
        )

    def __iter__(self) -> Iterator[Field]:
        return iter(self.fields)

    def __str__(self) -> str:
        return self.render()

    def _build_field(self, spec: FieldSpec) -> Field:
        if spec.name is None:
            return spec.field_type(dict(spec.options))
        return spec.field_type(spec.bind(self.values.get(spec.name)))

    def is_valid(self) -> bool:
        """Return whether the form is valid; subclasses add their own checks."""
        return True

    def render(self) -> str:
        """Return the form markup."""
        markup = compose(self)
        logger.debug("Form rendered", extra={"form_type": type(self).__name__, "length": len(markup)})
        return markup
