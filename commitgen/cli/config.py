"""CLI commands for global configuration management."""

import typer

from commitgen import global_config

# Subcommand group for configuration management
config_app = typer.Typer(
    name="config",
    help="Manage global commitgen configuration in ~/.commitgen/",
    add_completion=False,
)


@config_app.command("show")
def config_show() -> None:
    """Show current global configuration."""
    try:
        if not global_config.is_configured():
            typer.echo("No configuration found. Run 'commitgen init' to set up.")
            return

        config = global_config.load_global_config()
    except global_config.GlobalConfigError as e:
        typer.echo(f"Error reading configuration: {e}", err=True)
        raise typer.Exit(1)

    typer.echo("Current commitgen configuration (~/.commitgen/config.yaml):")
    typer.echo()
    for key in global_config.CONFIG_KEYS:
        typer.echo(f"  {key}: {config.get(key, 'not set')}")
    typer.echo()


@config_app.command("set")
def config_set(
    key: str = typer.Argument(..., help="Configuration key"),
    value: str = typer.Argument(..., help="New value"),
) -> None:
    """Set one configuration value."""
    try:
        stored = global_config.set_config_value(key, value)
    except global_config.GlobalConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"✓ {key} set to {stored}")
