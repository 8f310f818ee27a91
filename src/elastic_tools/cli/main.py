"""Main CLI entry point."""

import logging
from pathlib import Path

import click
from dotenv import load_dotenv

from elastic_tools import __version__
from elastic_tools.client.config import ElasticConfig

# Load .env from cwd
_env_file = Path.cwd() / ".env"
if _env_file.exists():
    load_dotenv(_env_file)


@click.group()
@click.version_option(version=__version__, prog_name="elastic")
@click.option("--retries", default=0, show_default=True, help="Retry transport errors, 429 and 5xx")
@click.pass_context
def cli(ctx: click.Context, retries: int):
    """Elastic CLI - Talk to your Elasticsearch store."""
    ctx.ensure_object(dict)
    ctx.obj["retries"] = max(retries, 0)
    logging.basicConfig(
        level=ElasticConfig().log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def setup_cli():
    """Register all commands."""
    from .bulk import bulk
    from .documents import doc
    from .indices import index
    from .info import info
    from .search import count, search

    cli.add_command(info)
    cli.add_command(index)
    cli.add_command(search)
    cli.add_command(count)
    cli.add_command(doc)
    cli.add_command(bulk)


setup_cli()


def main():
    """Entry point for elastic CLI."""
    cli()


if __name__ == "__main__":
    main()
