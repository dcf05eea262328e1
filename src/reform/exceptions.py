"""Package exceptions."""

from __future__ import annotations

from dataclasses import dataclass


class PackageError(Exception):
    """Root exception for the package."""


@dataclass(frozen=True)
class SettingsError(PackageError):
    """Raised when settings cannot be loaded or validated."""

    message: str = "Failed to load settings"
    exc: BaseException | None = None

    def __str__(self) -> str:
        """Return error message payload."""
        return f"{self.message}: {self.exc}" if self.exc else self.message


@dataclass(frozen=True)
class FormDefinitionError(PackageError):
    """Raised when a form type definition is inconsistent."""

    message: str

    def __str__(self) -> str:
        """Return error message payload."""
        return self.message


@dataclass(frozen=True)
class UnknownFormTypeError(PackageError):
    """Raised when a registry is asked about a type it never registered."""

    form_type: str

    def __str__(self) -> str:
        """Return error message payload."""
        return f"Form type '{self.form_type}' is not registered"


@dataclass(frozen=True)
class FormSealedError(PackageError):
    """Raised when a form type is modified after its first instantiation."""

    form_type: str
    operation: str

    def __str__(self) -> str:
        """Return error message payload."""
        return f"Cannot {self.operation} on '{self.form_type}': the form type is sealed once instantiated"


@dataclass(frozen=True)
class UnknownRendererError(PackageError):
    """Raised when a renderer name cannot be resolved."""

    name: str
    supported: tuple[str, ...] = ()

    def __str__(self) -> str:
        """Return error message payload."""
        if not self.supported:
            return f"Unknown renderer '{self.name}'"
        return f"Unknown renderer '{self.name}'. Expected one of: {', '.join(self.supported)}"


@dataclass(frozen=True)
class FormLoadError(PackageError):
    """Raised when a `module:FormClass` target cannot be loaded."""

    target: str
    message: str

    def __str__(self) -> str:
        """Return error message payload."""
        return f"Cannot load form '{self.target}': {self.message}"
