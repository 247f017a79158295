"""CLI entry point for tsscaffold."""

import logging
import subprocess
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from tsscaffold import __version__
from tsscaffold.config import ScaffoldSettings, get_settings
from tsscaffold.core import (
    POST_INIT,
    ExecutionContext,
    PluginRegistry,
    ServiceInfo,
    User,
    load_service_info,
    save_service_info,
)
from tsscaffold.core.service import SERVICE_INFO_FILE
from tsscaffold.typescript import ManifestParseError, TypescriptService, get_plugin

logger = logging.getLogger(__name__)

console = Console()


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )


def make_registry() -> PluginRegistry:
    """Build the registry with the Typescript plugin."""
    registry = PluginRegistry()
    registry.register(get_plugin())
    return registry


def parse_pairs(values: tuple[str, ...]) -> dict[str, str]:
    """Parse NAME=VALUE options into a mapping."""
    pairs = {}
    for value in values:
        name, sep, rest = value.partition("=")
        if not sep or not name:
            raise click.BadParameter(f"Expected NAME=VALUE, got {value!r}")
        pairs[name] = rest
    return pairs


def make_context(settings: ScaffoldSettings, author_name: str | None, author_email: str | None) -> ExecutionContext:
    name = author_name or settings.user_name
    email = author_email or settings.user_email
    if name and email:
        return ExecutionContext(user=User(name=name, email=email))
    return ExecutionContext()


def load_info(directory: Path, **overrides: str | None) -> ServiceInfo:
    """Load the service identity of a directory and apply overrides.

    The identifier defaults to the directory name.
    """
    info = load_service_info(directory / SERVICE_INFO_FILE) or ServiceInfo(identifier=directory.resolve().name)
    updates = {key: value for key, value in overrides.items() if value is not None}
    return info.model_copy(update=updates)


@click.group()
@click.version_option(version=__version__, prog_name="tsscaffold")
@click.pass_context
def cli(ctx: click.Context) -> None:
    """tsscaffold - Typescript service scaffolding."""
    settings = get_settings()
    configure_logging(settings.log_level)
    logger.debug(f"Package manager: {settings.package_manager}")
    ctx.obj = settings


@cli.command()
@click.argument("directory", type=click.Path(file_okay=False, path_type=Path), default=".")
@click.option("--name", "identifier", help="Service identifier (package name)")
@click.option("--description", help="Service description")
@click.option("--version", "version", help="Service version")
@click.option("--license", "license_", help="Service license")
@click.option("--author-name", help="Owning user name")
@click.option("--author-email", help="Owning user email")
@click.option("--dependency", "-d", multiple=True, help="Dependency as NAME=VERSION")
@click.option("--dev-dependency", "-D", multiple=True, help="Dev dependency as NAME=VERSION")
@click.option("--script", "-s", multiple=True, help="Script as NAME=COMMAND")
@click.option("--no-install", is_flag=True, help="Skip package installation")
@click.pass_obj
def init(
    settings: ScaffoldSettings,
    directory: Path,
    identifier: str | None,
    description: str | None,
    version: str | None,
    license_: str | None,
    author_name: str | None,
    author_email: str | None,
    dependency: tuple[str, ...],
    dev_dependency: tuple[str, ...],
    script: tuple[str, ...],
    no_install: bool,
) -> None:
    """Initialize a Typescript service in DIRECTORY."""
    info = load_info(
        directory,
        identifier=identifier,
        description=description,
        version=version,
        license=license_,
    )
    service = TypescriptService(
        make_context(settings, author_name, author_email),
        info,
        directory,
        dependencies=parse_pairs(dependency),
        dev_dependencies=parse_pairs(dev_dependency),
        scripts=parse_pairs(script),
        settings=settings,
    )
    if no_install:
        service.hooks.unregister(POST_INIT, service.install_packages)
        console.print("[yellow]Skipping package installation.[/yellow]")
    try:
        service.post_init()
    except subprocess.CalledProcessError as e:
        console.print(f"[red]Package installation failed with exit code {e.returncode}[/red]")
        sys.exit(1)
    save_service_info(info, directory / SERVICE_INFO_FILE)
    console.print(f"[green]Service {info.identifier} initialized in {directory}[/green]")


@cli.command()
@click.argument("entry")
@click.argument("directory", type=click.Path(file_okay=False, exists=True, path_type=Path), default=".")
@click.pass_obj
def make(settings: ScaffoldSettings, entry: str, directory: Path) -> None:
    """Create the file ENTRY (see `tsscaffold files`) in DIRECTORY."""
    registry = make_registry()
    info = load_info(directory)
    service = TypescriptService(make_context(settings, None, None), info, directory, settings=settings)
    try:
        path = registry.make_file(service, get_plugin().NAME, entry)
    except KeyError as e:
        console.print(f"[red]{e.args[0]}[/red]")
        sys.exit(1)
    console.print(f"[green]Created {path}[/green]")


@cli.command()
@click.argument("version")
@click.argument("directory", type=click.Path(file_okay=False, exists=True, path_type=Path), default=".")
@click.pass_obj
def bump(settings: ScaffoldSettings, version: str, directory: Path) -> None:
    """Bump the service in DIRECTORY to VERSION."""
    info = load_info(directory, version=version)
    service = TypescriptService(make_context(settings, None, None), info, directory, settings=settings)
    try:
        service.post_version_bump()
    except ManifestParseError as e:
        console.print(f"[red]{e}[/red]")
        sys.exit(1)
    save_service_info(info, directory / SERVICE_INFO_FILE)
    console.print(f"[green]Service {info.identifier} bumped to {version}[/green]")


@cli.command()
def files() -> None:
    """List the files that can be created with `make`."""
    plugin = get_plugin()
    table = Table(title=f"{plugin.LABEL} make files")
    table.add_column("Name", style="cyan")
    table.add_column("File")
    table.add_column("Method", style="dim")
    for entry in plugin.get_make_files():
        row = entry.to_dict()
        table.add_row(row["name"], row["file"], row["method"])
    console.print(table)


def main() -> None:
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
