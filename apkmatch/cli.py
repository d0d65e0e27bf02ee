"""
apkmatch CLI.

Command-line interface for resolving the APKs a device should receive.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional, TypeVar

import typer
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError
from rich.console import Console
from rich.table import Table

from .core.config import get_config, parse_module_list
from .core.exceptions import ApkMatchError
from .core.logging import bind_context, clear_context, setup_logging
from .models.build_output import BuildApksResult
from .models.device import DeviceSpec

app = typer.Typer(
    name="apkmatch",
    help="Resolve which APKs of a multi-variant build a device should receive",
    add_completion=False,
)

console = Console()
err_console = Console(stderr=True)

M = TypeVar("M", bound=BaseModel)


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        from . import __version__
        console.print(f"apkmatch v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """apkmatch: device targeting for split APK builds."""
    pass


def _load_model(path: Path, model: type[M], label: str) -> M:
    try:
        return model.model_validate_json(path.read_text(encoding="utf-8"))
    except PydanticValidationError as e:
        err_console.print(f"[red]Invalid {label} in {path}:[/red]\n{e}")
        raise typer.Exit(1)


@app.command()
def match(
    device_spec_path: Path = typer.Argument(
        ...,
        help="Path to the device spec JSON file",
        exists=True,
        file_okay=True,
        dir_okay=False,
        resolve_path=True,
    ),
    build_result_path: Path = typer.Argument(
        ...,
        help="Path to the build output (table of contents) JSON file",
        exists=True,
        file_okay=True,
        dir_okay=False,
        resolve_path=True,
    ),
    modules: Optional[str] = typer.Option(
        None,
        "--modules",
        "-m",
        help="Comma separated modules to deliver (default: all modules)",
    ),
    as_json: bool = typer.Option(
        False,
        "--json",
        help="Print matching APK paths as a JSON list",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        help="Enable verbose logging",
    ),
) -> None:
    """Print the APKs of a build that should be installed on a device."""
    from .services.matching import ApkMatcher

    config = get_config()
    if verbose:
        config = config.model_copy(update={"log_level": "DEBUG"})
    setup_logging(config)

    device_spec = _load_model(device_spec_path, DeviceSpec, "device spec")
    build_result = _load_model(build_result_path, BuildApksResult, "build output")

    if modules is not None:
        allowed_modules = parse_module_list(modules)
        if allowed_modules is None:
            err_console.print("[red]--modules must name at least one module[/red]")
            raise typer.Exit(1)
    else:
        allowed_modules = config.matching.allowed_modules

    if allowed_modules:
        unknown = [name for name in allowed_modules if name not in build_result.module_names]
        if unknown:
            err_console.print(f"[yellow]Modules not found in this build: {', '.join(unknown)}[/yellow]")

    bind_context(package_name=build_result.package_name, device_spec=device_spec_path.name)
    try:
        matcher = ApkMatcher(device_spec, allowed_modules)
        variant = matcher.get_matching_variant(build_result)
        apks = matcher.get_matching_apks_from_variant(variant) if variant is not None else []
    except ApkMatchError as e:
        err_console.print(f"[bold red]✗ {e}[/bold red]")
        raise typer.Exit(1)
    finally:
        clear_context()

    if as_json or config.matching.output_format == "json":
        console.print_json(json.dumps([str(apk) for apk in apks]))
        return

    if variant is None:
        console.print("[yellow]No variant of this build matches the device.[/yellow]")
        return

    table = Table(title=f"Matching APKs (variant {variant.variant_number})")
    table.add_column("#", style="dim")
    table.add_column("Path", style="green")
    for index, apk in enumerate(apks, start=1):
        table.add_row(str(index), str(apk))

    console.print(table)
    if not apks:
        console.print("[yellow]The variant matches, but none of its APKs do.[/yellow]")


@app.command()
def config() -> None:
    """Show the current configuration."""
    cfg = get_config()

    table = Table(title="Current Configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value")

    table.add_row("Log Level", cfg.log_level)
    table.add_row(
        "Allowed Modules",
        ", ".join(cfg.matching.allowed_modules) if cfg.matching.allowed_modules else "all",
    )
    table.add_row("Output Format", cfg.matching.output_format)

    console.print(table)

    console.print("\n[dim]Configure via environment variables:[/dim]")
    console.print("  APKMATCH_LOG_LEVEL, APKMATCH_MODULES, APKMATCH_OUTPUT_FORMAT")


def run() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    run()
