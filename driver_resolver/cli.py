import json
import sys

import click
from rich.console import Console
from rich.table import Table

from . import __version__
from .config import ResolverConfig
from .errors import DriverResolverError
from .logging_config import setup_logging
from .models import BrowserOptions

console = Console()
err_console = Console(stderr=True)


@click.group()
@click.version_option(version=__version__, prog_name="driver-resolver")
@click.option("--log-level", default=None, help="Log level (default: DRIVER_RESOLVER_LOG_LEVEL or WARNING)")
@click.option("--log-json", is_flag=True, help="Emit logs as JSON lines")
def main(log_level: str, log_json: bool):
    """driver-resolver - locate browser drivers via selenium-manager."""
    setup_logging(level=log_level, json_format=log_json or None)


def _load_config(timeout: float = None) -> ResolverConfig:
    try:
        config = ResolverConfig.from_env()
        if timeout is not None:
            config = ResolverConfig(timeout=timeout, manager_path=config.manager_path)
    except ValueError as e:
        raise click.BadParameter(str(e))
    return config


@main.command()
@click.option("--browser", "browser_name", required=True, help="Browser name, e.g. chrome or firefox")
@click.option("--browser-version", default=None, help="Browser version to resolve a driver for")
@click.option("--browser-path", "binary_path", default=None, help="Path to the browser binary")
@click.option("--timeout", type=float, default=None, help="Seconds to wait for selenium-manager")
@click.option("--json", "as_json", is_flag=True, help="Print the full resolution as JSON")
def resolve(browser_name: str, browser_version: str, binary_path: str, timeout: float, as_json: bool):
    """Resolve the driver path for a browser."""
    from .resolver import DriverResolver

    options = BrowserOptions(
        browser_name=browser_name,
        browser_version=browser_version,
        binary_path=binary_path,
    )
    resolver = DriverResolver(config=_load_config(timeout))
    resolution = resolver.resolve(options)

    if as_json:
        click.echo(json.dumps(resolution.to_dict()))
        if not resolution.ok:
            sys.exit(1)
        return

    for warning in resolution.warnings:
        err_console.print(f"[yellow]Warning:[/yellow] {warning}", highlight=False)

    if not resolution.ok:
        err_console.print(f"[red]Error ({resolution.kind.value}):[/red] {resolution.detail}", highlight=False)
        sys.exit(1)

    click.echo(resolution.path)


@main.command()
def locate():
    """Print the path of the selenium-manager helper."""
    from .locator import PlatformBinaryLocator, get_default_locator

    config = _load_config()
    locator = PlatformBinaryLocator(manager_path=config.manager_path) if config.manager_path else get_default_locator()
    try:
        click.echo(locator.locate())
    except DriverResolverError as e:
        err_console.print(f"[red]Error:[/red] {e}", highlight=False)
        sys.exit(1)


@main.command()
def config():
    """Show the effective configuration."""
    from .locator import PlatformBinaryLocator

    settings = _load_config()

    table = Table(show_header=False, box=None)
    table.add_column("Label", style="dim")
    table.add_column("Value")

    table.add_row("Version", f"v{__version__}")
    table.add_row("Timeout", "none" if settings.timeout is None else f"{settings.timeout:g}s")
    table.add_row("Manager path", settings.manager_path or "[dim]bundled[/dim]")
    try:
        table.add_row("Helper", str(PlatformBinaryLocator(manager_path=settings.manager_path).candidate_path()))
    except DriverResolverError as e:
        table.add_row("Helper", f"[red]{e}[/red]")

    console.print(table)


if __name__ == "__main__":
    main()
