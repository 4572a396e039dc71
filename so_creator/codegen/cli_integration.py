"""
CLI integration for code generation functionality.

Provides the ``generate`` and ``languages`` subcommands.
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Optional

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

from so_creator.logging_config import get_logger
from so_creator.utils import DocumentLoaderError, load_document, load_document_from_url
from . import (
    ClassSpec,
    GeneratorConfig,
    SchemaError,
    convert_spec_document,
    generate_from_spec,
    list_all_language_info,
    list_supported_languages,
    load_config,
)
from .core.config import PRESETS, ConfigError
from .core.resolver import ResolverError, StaticTypeResolver, TypeResolver, load_type_catalog
from .languages.csharp import create_unity_resolver
from .registry import is_language_supported

logger = get_logger(__name__)


class CLIError(Exception):
    """Exception raised for CLI-related errors."""

    pass


# Initialize rich console
console = Console()


def create_generate_subparser(subparsers) -> argparse.ArgumentParser:
    """
    Create the ``generate`` subcommand parser.

    Args:
        subparsers: Subparser group from main parser

    Returns:
        Configured subparser
    """
    parser = subparsers.add_parser(
        "generate",
        help="Generate a class declaration from a class spec document",
        description="Generate a class declaration from a JSON class spec",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  so-creator generate player_stats.json
  so-creator generate player_stats.json -o Assets/Scripts/PlayerStats.cs
  so-creator generate --url https://example.com/spec.json --preset scriptable_object
  so-creator generate spec.json --types game_types.json --no-usings
        """.strip(),
    )

    input_group = parser.add_mutually_exclusive_group(required=False)
    input_group.add_argument("file", nargs="?", help="Class spec JSON file")
    input_group.add_argument("--url", help="URL to fetch the class spec from")
    input_group.add_argument(
        "--stdin", action="store_true", help="Read the class spec from standard input"
    )

    parser.add_argument(
        "--language", "-l", default="csharp", help="Target language (default: csharp)"
    )
    parser.add_argument("--output", "-o", help="Output file (default: stdout)")
    parser.add_argument("--config", help="Configuration file path (JSON)")
    parser.add_argument(
        "--preset", choices=sorted(PRESETS), help="Named configuration preset"
    )

    types_group = parser.add_argument_group("type resolution")
    types_group.add_argument(
        "--types",
        metavar="CATALOG",
        action="append",
        default=[],
        help="Type catalog file or URL (repeatable)",
    )
    types_group.add_argument(
        "--no-builtin-types",
        action="store_true",
        help="Don't preload the built-in UnityEngine type catalog",
    )

    style_group = parser.add_argument_group("output options")
    style_group.add_argument(
        "--using",
        metavar="NAMESPACE",
        action="append",
        dest="usings",
        help="Namespace for a using line (repeatable, replaces the default)",
    )
    style_group.add_argument(
        "--no-usings", action="store_true", help="Don't emit any using lines"
    )
    style_group.add_argument("--base-class", metavar="NAME", help="Base class to derive from")
    style_group.add_argument(
        "--spaces",
        metavar="N",
        type=int,
        help="Indent with N spaces instead of a tab",
    )
    style_group.add_argument(
        "--verbose",
        action="store_true",
        help="Show generation result metadata",
    )

    parser.set_defaults(func=handle_generate_command)
    return parser


def create_languages_subparser(subparsers) -> argparse.ArgumentParser:
    """Create the ``languages`` subcommand parser."""
    parser = subparsers.add_parser("languages", help="List supported target languages")
    parser.set_defaults(func=handle_languages_command)
    return parser


def handle_generate_command(args: argparse.Namespace) -> int:
    """
    Handle code generation from CLI arguments.

    Args:
        args: Parsed command line arguments

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    try:
        if not _validate_language(args.language):
            return 1

        spec = _load_spec(args)
        resolver = build_resolver(args.types, builtin=not args.no_builtin_types)
        config = _build_config(args)

        return _generate_and_output(spec, args.language, config, resolver, args)

    except CLIError as e:
        logger.error("%s", e)
        console.print(f"[red]✗ Error:[/red] {e}")
        return 1


def handle_languages_command(args: argparse.Namespace) -> int:
    """List supported languages with details."""
    language_info = list_all_language_info()

    if not language_info:
        console.print("[yellow]⚠️ No code generators available[/yellow]")
        return 0

    table = Table(title="📋 Supported Languages", box=box.ROUNDED, title_style="bold cyan")
    table.add_column("Language", style="bold green", no_wrap=True)
    table.add_column("Extension", style="cyan")
    table.add_column("Generator Class", style="dim")
    table.add_column("Aliases", style="blue")

    for lang_name, info in sorted(language_info.items()):
        aliases = ", ".join(info["aliases"]) if info["aliases"] else "[dim]none[/dim]"
        table.add_row(f"🔧 {lang_name}", info["file_extension"], info["class"], aliases)

    console.print()
    console.print(table)
    console.print()
    console.print(
        Panel(
            "[bold]Usage:[/bold] so-creator generate [dim]spec.json[/dim] "
            "--language [cyan]LANGUAGE[/cyan]",
            title="💡 Quick Start",
            border_style="blue",
        )
    )
    return 0


def _validate_language(language: str) -> bool:
    """Validate that a language is supported."""
    if not is_language_supported(language):
        supported = list_supported_languages()
        console.print(f"[red]✗ Unsupported language '{language}'[/red]")
        console.print(f"[dim]Supported languages: {', '.join(supported)}[/dim]")
        return False
    return True


def _load_spec(args: argparse.Namespace) -> ClassSpec:
    """Load and convert the class spec from the selected input."""
    try:
        if args.file:
            document = load_document(args.file)
        elif args.url:
            document = load_document_from_url(args.url)
        elif args.stdin:
            document = json.load(sys.stdin)
        else:
            raise CLIError("Input source required (file, --url, or --stdin)")

        return convert_spec_document(document)

    except json.JSONDecodeError as e:
        raise CLIError(f"Invalid JSON input: {e}") from e
    except (DocumentLoaderError, FileNotFoundError) as e:
        raise CLIError(f"Failed to load input: {e}") from e
    except SchemaError as e:
        raise CLIError(f"Invalid class spec: {e}") from e


def build_resolver(catalogs: list, builtin: bool = True) -> TypeResolver:
    """
    Build the type resolver for a generation run.

    Args:
        catalogs: Type catalog files or URLs
        builtin: Preload the built-in UnityEngine types

    Returns:
        Resolver holding every requested type
    """
    try:
        if builtin:
            return create_unity_resolver(catalogs)

        resolver = StaticTypeResolver()
        for catalog in catalogs:
            load_type_catalog(catalog, resolver)
        return resolver

    except (ResolverError, DocumentLoaderError, FileNotFoundError) as e:
        raise CLIError(f"Failed to load type catalog: {e}") from e


def _build_config(args: argparse.Namespace) -> GeneratorConfig:
    """Build configuration from CLI arguments."""
    overrides = {}

    if args.no_usings:
        overrides["usings"] = []
    elif args.usings:
        overrides["usings"] = args.usings

    if args.base_class:
        overrides["base_class"] = args.base_class

    if args.spaces is not None:
        overrides["use_tabs"] = False
        overrides["indent_size"] = args.spaces

    if args.output:
        overrides["output_file"] = args.output

    try:
        return load_config(
            "csharp",
            custom_config=overrides,
            config_file=args.config,
            preset=args.preset,
        )
    except ConfigError as e:
        raise CLIError(f"Configuration error: {e}") from e


def _generate_and_output(
    spec: ClassSpec,
    language: str,
    config: GeneratorConfig,
    resolver: Optional[TypeResolver],
    args: argparse.Namespace,
) -> int:
    """Generate code and handle output with rich formatting."""
    result = generate_from_spec(spec, language, config, resolver)

    if not result.success:
        console.print(f"[red]✗ Code generation failed:[/red] {result.error_message}")
        if result.exception:
            console.print(f"[dim]Details: {result.exception}[/dim]")
        return 1

    output_file = config.output_file
    if output_file:
        output_path = Path(output_file)
        try:
            write_output(output_path, result.code)
        except OSError as e:
            logger.error("Failed to write %s: %s", output_path, e)
            console.print(f"[red]✗ Failed to write to {output_path}:[/red] {e}")
            return 1
        console.print(
            f"[green]✓[/green] Generated {language} code saved to [cyan]{output_path}[/cyan]"
        )
    else:
        console.print(Syntax(result.code, "csharp", theme="monokai"))

    if getattr(args, "verbose", False) and result.metadata:
        metadata_table = Table(
            title="📊 Generation Metadata",
            box=box.SIMPLE,
            show_header=True,
            header_style="bold cyan",
        )
        metadata_table.add_column("Property", style="bold")
        metadata_table.add_column("Value", style="green")

        for key, value in result.metadata.items():
            metadata_table.add_row(key.replace("_", " ").title(), str(value))

        console.print()
        console.print(metadata_table)

    if result.warnings:
        console.print("\n[yellow]⚠️  Warnings:[/yellow]")
        for warning in result.warnings:
            console.print(f"  [yellow]•[/yellow] {warning}")
        console.print()

    return 0


def write_output(path: Path, code: str):
    """Write generated code, creating parent directories as needed."""
    path.parent.mkdir(parents=True, exist_ok=True)
    # newline="" keeps the configured line ending as-is
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(code)
    logger.info("Wrote %d characters to %s", len(code), path)
