"""Main CLI entry point for ajaxwire.

Commands:
    show      Bootstrap a container from init parameters and display its bindings
    version   Print the installed version
"""

import sys

import click
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from ajaxwire import __version__
from ajaxwire.base.errors import ConfigurationError
from ajaxwire.cli.styles import Messages, Styles, console
from ajaxwire.container import bootstrap_container, describe_container
from ajaxwire.container.introspection import ContainerDump
from ajaxwire.hosting import HostConfig, HostContext


def _parse_init_params(ctx, param, values) -> dict[str, str]:
    """Turn repeated NAME=VALUE options into an ordered mapping."""
    params: dict[str, str] = {}
    for item in values:
        name, sep, value = item.partition("=")
        if not sep or not name.strip():
            raise click.BadParameter(f"expected NAME=VALUE, got '{item}'")
        params[name.strip()] = value
    return params


@click.group()
@click.version_option(version=__version__, prog_name="ajaxwire")
def cli():
    """ajaxwire - container bootstrap for the ajaxwire remoting runtime.

    Use 'ajaxwire COMMAND --help' for more information on a specific command.

    Examples:

    \b
      ajaxwire show                               Defaults and ./ajaxwire.yml
      ajaxwire show -p config=/remoting.yml       Load a named resource
      ajaxwire show -p debug=true --verbose       Include capability report
    """


@cli.command()
@click.option(
    "-p",
    "--param",
    "init_params",
    multiple=True,
    callback=_parse_init_params,
    metavar="NAME=VALUE",
    help="Init parameter passed to the bootstrap (repeatable)",
)
@click.option(
    "--resource-root",
    type=click.Path(file_okay=False, path_type=str),
    default=None,
    help="Directory declarative resources resolve against",
)
@click.option("--verbose", "-v", is_flag=True, help="Also show bound capability types")
def show(init_params: dict[str, str], resource_root: str | None, verbose: bool):
    """Bootstrap a container and display its bindings."""
    host_config = HostConfig("ajaxwire-cli", init_params, HostContext("ajaxwire-cli", resource_root))

    try:
        container = bootstrap_container(host_config)
    except ConfigurationError as e:
        console.print(Messages.error(f"Configuration failed: {escape(str(e))}"))
        sys.exit(1)

    dump = describe_container(container)

    console.print()
    console.print(Panel(Text("Container Bindings", style=Styles.HEADER), border_style=Styles.BORDER, expand=False))
    _display_bindings_table(dump)

    if verbose:
        _display_capabilities_table(dump)

    console.print(Messages.success(f"{len(dump.bindings)} bindings configured"))


def _display_bindings_table(dump: ContainerDump) -> None:
    table = Table(show_header=True, header_style=Styles.HEADER, border_style=Styles.DIM, expand=False)
    table.add_column("Name", style=Styles.ACCENT, overflow="fold")
    table.add_column("Kind", style=Styles.DIM)
    table.add_column("Value / Type", style=Styles.VALUE, overflow="fold")

    for binding in dump.bindings:
        shown = binding.value if binding.kind == "param" else binding.type_name
        table.add_row(escape(binding.name), binding.kind, escape(shown))

    console.print(table)
    console.print()


def _display_capabilities_table(dump: ContainerDump) -> None:
    console.print(f"[{Styles.HEADER}]Capabilities[/{Styles.HEADER}]\n")

    table = Table(show_header=True, header_style=Styles.HEADER, border_style=Styles.DIM, expand=False)
    table.add_column("Capability", style=Styles.ACCENT, overflow="fold")
    table.add_column("Bound Type", style=Styles.VALUE, overflow="fold")

    for capability in dump.capabilities:
        table.add_row(capability.name, capability.type_name or "[dim]not bound[/dim]")
        for creator in capability.creators:
            table.add_row(f"  creator {escape(creator.name)}", creator.type_name)

    console.print(table)
    console.print()


@cli.command()
def version():
    """Print the installed ajaxwire version."""
    console.print(f"ajaxwire {__version__}")


def main():
    """Entry point for the ajaxwire CLI."""
    try:
        cli()
    except KeyboardInterrupt:
        click.echo("\nGoodbye!", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
