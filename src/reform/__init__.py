"""Reform package."""

from reform.composer import compose
from reform.exceptions import (
    FormDefinitionError,
    FormLoadError,
    FormSealedError,
    PackageError,
    SettingsError,
    UnknownFormTypeError,
    UnknownRendererError,
)
from reform.form import FieldDeclaration, Form, field
from reform.logging import configure_logging, get_logger
from reform.registry import FormRegistry, default_registry
from reform.settings import Settings, get_settings

__version__ = "0.1.0"

# Initialize package logger at import time via `get_logger`.
logger = get_logger("reform")

__all__ = [
    "FieldDeclaration",
    "Form",
    "FormDefinitionError",
    "FormLoadError",
    "FormRegistry",
    "FormSealedError",
    "PackageError",
    "Settings",
    "SettingsError",
    "UnknownFormTypeError",
    "UnknownRendererError",
    "__version__",
    "compose",
    "configure_logging",
    "default_registry",
    "field",
    "get_logger",
    "get_settings",
    "logger",
]
