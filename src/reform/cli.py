"""CLI entry point for Reform."""

from __future__ import annotations

import argparse
import importlib
import json
from pathlib import Path

from reform import __version__, logger
from reform.exceptions import FormLoadError, PackageError
from reform.form import Form
from reform.logging import configure_logging
from reform.settings import get_settings
from reform.typing.enums import FormMethod, RendererKind


def _value_pair(value: str) -> tuple[str, str]:
    """Parse a `--value name=value` argument.

    Args:
        value (str): Raw CLI value.

    Raises:
        argparse.ArgumentTypeError: If the value has no `=`.

    Returns:
        tuple[str, str]: Field name and value.
    """
    name, sep, raw = value.partition("=")
    if not sep or not name:
        raise argparse.ArgumentTypeError("--value must look like name=value")  # noqa: TRY003
    return name, raw


def _form_method(value: str) -> str:
    """Validate a `--method` argument.

    Raises:
        argparse.ArgumentTypeError: If the method is not supported.
    """
    try:
        return FormMethod.from_str(value).to_str()
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def build_parser() -> argparse.ArgumentParser:
    """Create the command-line parser.

    Returns:
        argparse.ArgumentParser: The configured argument parser.
    """
    parser = argparse.ArgumentParser(prog="reform")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    subparsers = parser.add_subparsers(dest="command")

    render_parser = subparsers.add_parser("render", help="Render a form class to HTML")
    render_parser.add_argument("target", help="Form class as 'package.module:FormClass'")
    render_parser.add_argument("--action", default=None)
    render_parser.add_argument("--method", type=_form_method, default=None)
    render_parser.add_argument(
        "--value",
        type=_value_pair,
        action="append",
        default=[],
        dest="values",
        help="Field value as name=value; repeatable",
    )
    render_parser.add_argument(
        "--renderer",
        choices=[kind.value for kind in RendererKind],
        default=None,
    )
    render_parser.add_argument("--output", type=Path, default=None, dest="output_path")

    fields_parser = subparsers.add_parser("fields", help="List the fields declared by a form class")
    fields_parser.add_argument("target", help="Form class as 'package.module:FormClass'")

    return parser


def load_form_type(target: str) -> type[Form]:
    """Import a form class from a `module:FormClass` reference.

    Args:
        target (str): Dotted module path and class name separated by a colon.

    Raises:
        FormLoadError: If the module or class cannot be found or is not a form.

    Returns:
        type[Form]: The form class.
    """
    module_name, sep, class_name = target.partition(":")
    if not sep or not module_name or not class_name:
        raise FormLoadError(target=target, message="expected 'package.module:FormClass'")

    try:
        module = importlib.import_module(module_name)
    except ImportError as exc:
        raise FormLoadError(target=target, message=str(exc)) from exc

    form_type = module
    for part in class_name.split("."):
        form_type = getattr(form_type, part, None)
        if form_type is None:
            raise FormLoadError(target=target, message=f"'{class_name}' not found in '{module_name}'")

    if not isinstance(form_type, type) or not issubclass(form_type, Form) or form_type is Form:
        raise FormLoadError(target=target, message=f"'{class_name}' is not a Form subclass")
    return form_type


def _render(args: argparse.Namespace) -> str:
    form_type = load_form_type(args.target)
    form = form_type(
        action=args.action,
        method=args.method,
        values=dict(args.values) if args.values else None,
        renderer=args.renderer,
    )
    return form.render()


def _describe_fields(args: argparse.Namespace) -> str:
    form_type = load_form_type(args.target)
    return json.dumps([spec.describe() for spec in form_type.list_fields()], indent=2)


def main(argv: list[str] | None = None) -> int:
    """Run the CLI.

    Args:
        argv: Arguments to parse instead of `sys.argv`.

    Returns:
        int: Exit code (0 for success, 1 for error).
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        configure_logging(settings=get_settings())
        if args.command not in {"render", "fields"}:
            parser.print_help()
            return 0
        output = _render(args) if args.command == "render" else _describe_fields(args)
    except PackageError:
        logger.exception("Command failed", extra={"command": args.command})
        return 1

    output_path = getattr(args, "output_path", None)
    if output_path is None:
        print(output)  # noqa: T201
        return 0

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(output, encoding="utf-8")
    logger.info("Form written", extra={"output_path": str(output_path)})
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
