"""Cluster info command."""

import click

from .common import console, make_api, run, show_result


@click.command()
def info():
    """Show target, auth mode and cluster info."""
    with make_api() as api:
        config = api.config
        console.print(f"[bold]Target:[/bold] {config.base_url}")
        console.print(f"[bold]Basic auth:[/bold] {'enabled' if config.basic_auth else 'disabled'}")
        signing = f"enabled ({config.aws_service}, {config.aws_region})" if config.signing_enabled else "disabled"
        console.print(f"[bold]AWS signing:[/bold] {signing}")
        console.print()

        show_result(run(api.info))
