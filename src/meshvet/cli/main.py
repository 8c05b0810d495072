"""Main CLI entry point."""

import sys

import click

from meshvet.cli.commands import RESOURCE_KINDS, list_in_mesh, show_exempted
from meshvet.utils.config import MeshVetConfig, load_config
from meshvet.utils.logging import setup_logging


@click.group()
@click.version_option(package_name="meshvet")
@click.option("--kubeconfig", type=click.Path(dir_okay=False), help="Path to kubeconfig (in-cluster/default if unset)")
@click.option("--config", "config_path", type=click.Path(dir_okay=False), help="Path to meshvet config file")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, kubeconfig: str | None, config_path: str | None, verbose: bool) -> None:
    """meshvet - Istio sidecar mesh membership for Kubernetes."""
    try:
        config = load_config(config_path)
    except (FileNotFoundError, ValueError) as e:
        raise click.ClickException(str(e)) from e

    if kubeconfig:
        config.kubeconfig = kubeconfig

    setup_logging("DEBUG" if verbose else config.log_level, config.log_file)
    ctx.obj = config


def _register_list_command(kind: str) -> None:
    @cli.command(kind, help=f"List {kind} in the mesh.")
    @click.option("--output", "-o", type=click.Choice(["table", "json"]), default="table", help="Output format")
    @click.option(
        "--policy-file",
        type=click.Path(exists=True, dir_okay=False),
        help="Read the injector config from a local file instead of the cluster ConfigMap",
    )
    @click.pass_obj
    def command(config: MeshVetConfig, output: str, policy_file: str | None) -> None:
        sys.exit(list_in_mesh(kind, output, config, policy_file))


for _kind in RESOURCE_KINDS:
    _register_list_command(_kind)


@cli.command("exempted")
@click.option("--output", "-o", type=click.Choice(["table", "json"]), default="table", help="Output format")
@click.pass_obj
def exempted(config: MeshVetConfig, output: str) -> None:
    """Show namespaces that are never part of the mesh."""
    show_exempted(config.exemptions(), output)


if __name__ == "__main__":
    cli()
