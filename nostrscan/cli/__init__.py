"""CLI entry point for nostrscan."""

import rich_click as click
from pydantic import ValidationError

from .. import __version__
from ..config import get_config_path, get_settings
from . import config_cmd as _config_mod
from . import extract as _extract_mod
from . import web as _web_mod
from ._console import configure_logging, err_console


def _configured_level() -> str:
    # A broken config file must not lock the user out of `config set`.
    try:
        return get_settings().logging.level
    except ValidationError:
        err_console.print(f"[yellow]Ignoring invalid config at {get_config_path()}[/yellow]", soft_wrap=True)
        return "WARNING"


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose: bool):
    """Extract media, links, quotes, hashtags and mentions from Nostr note text."""
    configure_logging("DEBUG" if verbose else _configured_level())


# Register commands
cli.add_command(_extract_mod.extract)
cli.add_command(_config_mod.config)
cli.add_command(_web_mod.web)


if __name__ == "__main__":
    cli()
