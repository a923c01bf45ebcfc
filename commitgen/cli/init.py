"""CLI command for initializing commitgen configuration."""

import typer

from commitgen import global_config
from commitgen.config import default_config


def init_config() -> None:
    """Write a default ~/.commitgen/config.yaml."""
    if global_config.is_configured():
        overwrite = typer.confirm(
            "Configuration already exists at ~/.commitgen/config.yaml. Overwrite?",
            default=False
        )
        if not overwrite:
            typer.echo("Keeping existing configuration.")
            raise typer.Exit(0)

    defaults = default_config()
    try:
        global_config.initialize_default_config(defaults)
    except global_config.GlobalConfigError as e:
        typer.echo(f"Error saving configuration: {e}", err=True)
        raise typer.Exit(1)

    typer.echo("✓ Configuration saved to ~/.commitgen/config.yaml")
    typer.echo(f"  Model: {defaults['model']}")
    typer.echo(f"  Endpoint: {defaults['endpoint']}")
    typer.echo()
    typer.echo("Edit it with 'commitgen config set KEY VALUE'.")
