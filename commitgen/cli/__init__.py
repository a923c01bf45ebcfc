"""CLI entry point for commitgen.

This module provides the main CLI application that combines all commands
and subcommands into a single unified interface.
"""

import typer

from commitgen.cli.config import config_app
from commitgen.cli.init import init_config
from commitgen.cli.main import main_command

# Main application
app = typer.Typer(
    name="commitgen",
    help="commitgen: commit messages from a local Ollama model",
    add_completion=False,
)

# Add subcommand groups
app.add_typer(config_app, name="config")

# Add individual commands
app.command("init")(init_config)

# Set the main callback for default behavior (includes --version flag)
app.callback(invoke_without_command=True)(main_command)


__all__ = ["app"]
