"""
CLI integration for code generation functionality.

Provides the ``generate``, ``options`` and ``manifest`` subcommands.
"""

import argparse
import json
from pathlib import Path
from typing import Any, Dict, List, Optional

from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.syntax import Syntax
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich import box

from . import MANIFEST, generate_from_dmmf, get_document_options
from .core.config import ConfigError, describe_options, load_config_file
from ..logging_config import get_logger
from ..utils import JSONLoaderError, load_json, load_json_from_stream, write_output

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
        Configured subparser for the generate command
    """
    parser = subparsers.add_parser(
        "generate",
        help="Generate TypeScript declarations from a DMMF document",
        description="Generate dependency-free TypeScript declarations from a DMMF JSON document",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  schema-interfaces generate dmmf.json -o src/generated/interfaces.ts
  schema-interfaces generate dmmf.json -O enumType=enum -O modelSuffix=Model
  schema-interfaces generate --stdin --stdout < dmmf.json
  schema-interfaces generate --url https://example.com/dmmf.json --config options.json
        """.strip(),
    )

    # Input options (mutually exclusive)
    input_group = parser.add_mutually_exclusive_group(required=True)
    input_group.add_argument("file", nargs="?", help="DMMF JSON file")
    input_group.add_argument("--url", help="URL to fetch the DMMF JSON from")
    input_group.add_argument(
        "--stdin", action="store_true", help="Read the DMMF JSON from standard input"
    )

    # Output options
    output_group = parser.add_mutually_exclusive_group()
    output_group.add_argument(
        "--output",
        "-o",
        metavar="FILE",
        help=f"Output file (default: from the document, else {MANIFEST['defaultOutput']})",
    )
    output_group.add_argument(
        "--stdout",
        action="store_true",
        help="Print the generated code instead of writing a file",
    )

    # Generator options
    parser.add_argument(
        "--config", metavar="FILE", help="JSON file with generator options"
    )
    parser.add_argument(
        "--option",
        "-O",
        metavar="KEY=VALUE",
        action="append",
        default=[],
        help="Generator option, may be repeated (see 'schema-interfaces options')",
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Show generation result metadata",
    )

    parser.set_defaults(func=handle_generate_command)
    return parser


def create_options_subparser(subparsers) -> argparse.ArgumentParser:
    """Create the ``options`` subcommand parser."""
    parser = subparsers.add_parser(
        "options", help="List generator options with their defaults"
    )
    parser.set_defaults(func=handle_options_command)
    return parser


def create_manifest_subparser(subparsers) -> argparse.ArgumentParser:
    """Create the ``manifest`` subcommand parser."""
    parser = subparsers.add_parser("manifest", help="Print the generator manifest as JSON")
    parser.set_defaults(func=handle_manifest_command)
    return parser


def handle_generate_command(args: argparse.Namespace) -> int:
    """
    Handle the generate command.

    Args:
        args: Parsed command line arguments

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    try:
        document = _get_input_data(args)
        options, document_output = _build_options(args, document)

        output_path = None
        if not args.stdout:
            output_path = args.output or document_output or MANIFEST["defaultOutput"]

        return _generate_and_output(document, options, output_path, args)

    except (CLIError, ConfigError) as e:
        console.print(f"[red]✗ Error:[/red] {e}")
        return 1


def handle_options_command(args: argparse.Namespace) -> int:
    """List the supported generator options in a table."""
    table = Table(title="⚙️  Generator Options", box=box.ROUNDED, title_style="bold cyan")

    table.add_column("Option", style="bold green", no_wrap=True)
    table.add_column("Default", style="cyan")
    table.add_column("Allowed Values", style="blue")
    table.add_column("Description", style="dim")

    for spec in describe_options():
        allowed = " | ".join(spec.choices) if spec.choices else "[dim]any[/dim]"
        if spec.default in ("true", "false") and not spec.choices:
            allowed = "true | false"
        table.add_row(spec.key, repr(spec.default), allowed, spec.description)

    console.print()
    console.print(table)
    console.print()
    console.print(
        Panel(
            "[bold]Usage:[/bold] schema-interfaces generate [dim]dmmf.json[/dim] "
            "-O [cyan]enumType=enum[/cyan] -O [cyan]optionalNullables=true[/cyan]",
            title="💡 Quick Start",
            border_style="blue",
        )
    )
    return 0


def handle_manifest_command(args: argparse.Namespace) -> int:
    """Print the generator manifest."""
    print(json.dumps(MANIFEST, indent=2))
    return 0


def parse_option_assignments(assignments: List[str]) -> Dict[str, str]:
    """Parse ``KEY=VALUE`` strings; the value may itself contain ``=``."""
    options = {}
    for assignment in assignments:
        key, sep, value = assignment.partition("=")
        if not sep or not key.strip():
            raise CLIError(f"Invalid option '{assignment}', expected KEY=VALUE")
        options[key.strip()] = value
    return options


def _get_input_data(args: argparse.Namespace) -> Any:
    """Get the DMMF document from the selected source."""
    try:
        if args.file:
            return load_json(file_path=args.file)[1]
        elif args.url:
            return load_json(url=args.url)[1]
        elif args.stdin:
            return load_json_from_stream()[1]
        else:
            raise CLIError("No input source specified")
    except (JSONLoaderError, FileNotFoundError) as e:
        raise CLIError(f"Failed to load input: {e}") from e


def _build_options(
    args: argparse.Namespace, document: Any
) -> tuple[Dict[str, Any], Optional[str]]:
    """Merge options: document, then config file, then -O flags."""
    options, document_output = get_document_options(document)

    if args.config:
        options.update(load_config_file(args.config))

    options.update(parse_option_assignments(args.option))
    logger.debug("Raw generator options: %s", options)
    return options, document_output


def _generate_and_output(
    document: Any,
    options: Dict[str, Any],
    output_path: Optional[str],
    args: argparse.Namespace,
) -> int:
    """Generate code and handle output with rich formatting."""
    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
        transient=True,
    ) as progress:
        progress.add_task("[green]Generating TypeScript declarations...", total=None)
        result = generate_from_dmmf(document, options, output_path)

    if not result.success:
        console.print(f"[red]✗ Code generation failed:[/red] {result.error_message}")
        return 1

    if output_path:
        try:
            written = write_output(output_path, result.code)
        except OSError as e:
            console.print(f"[red]✗ Failed to write to {output_path}:[/red] {e}")
            return 1
        result.metadata["output_file"] = str(written)
        console.print(
            f"[green]✓[/green] Generated TypeScript saved to [cyan]{Path(written)}[/cyan]"
        )
    else:
        if console.is_terminal:
            console.print(Syntax(result.code, "typescript", theme="monokai"))
        else:
            # Plain text keeps piped output byte-exact
            print(result.code, end="")

    if args.verbose and result.metadata:
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
