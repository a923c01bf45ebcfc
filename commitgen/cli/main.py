"""Main CLI command for generating commit messages."""

from pathlib import Path
from typing import Optional

import typer

from commitgen import __version__
from commitgen.config import Settings, load_settings
from commitgen.deadline import Deadline
from commitgen.git import GitError, GitRepository, NoStagedChangesError
from commitgen.global_config import GlobalConfigError
from commitgen.llm import LLMError, OllamaClient
from commitgen.service import (
    CommitService,
    EmptyMessageError,
    GenerationOptions,
)
from commitgen.cli.utils import display_debug_info, display_review


def build_service(repo: GitRepository) -> CommitService:
    """Create the service wired to the real Ollama client."""
    return CommitService(client=OllamaClient(), repo=repo)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"commitgen {__version__}")
        raise typer.Exit()


def main_command(
    ctx: typer.Context,
    model: Optional[str] = typer.Option(
        None,
        "--model",
        "-m",
        help="Ollama model for the commit message",
    ),
    review_model: Optional[str] = typer.Option(
        None,
        "--review-model",
        help="Ollama model for the review (defaults to --model)",
    ),
    endpoint: Optional[str] = typer.Option(
        None,
        "--endpoint",
        help="Ollama base URL",
    ),
    max_bytes: Optional[int] = typer.Option(
        None,
        "--max-bytes",
        help="Maximum bytes of staged diff sent to the model (0 disables trimming)",
    ),
    timeout: Optional[str] = typer.Option(
        None,
        "--timeout",
        help="Overall deadline, e.g. 40s, 1m30s or a number of seconds",
    ),
    review: Optional[bool] = typer.Option(
        None,
        "--review/--no-review",
        help="Run a code review of the staged diff first",
    ),
    commit: Optional[bool] = typer.Option(
        None,
        "--commit/--no-commit",
        help="Run git commit with the generated message",
    ),
    hook: Optional[Path] = typer.Option(
        None,
        "--hook",
        help="Write the message to this file instead of committing (prepare-commit-msg)",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        "-d",
        help="Show the raw model response and fallback reason",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
) -> None:
    """Generate a commit message for the staged changes with a local Ollama model."""
    # If a subcommand is invoked, don't run the default behavior
    if ctx.invoked_subcommand is not None:
        return

    try:
        settings = load_settings({
            "model": model,
            "review_model": review_model,
            "endpoint": endpoint,
            "max_bytes": max_bytes,
            "timeout": timeout,
            "review": review,
            "commit": commit,
            "hook_path": hook,
        })
    except GlobalConfigError as e:
        typer.echo(f"Error reading configuration: {e}", err=True)
        raise typer.Exit(1)

    deadline = Deadline(settings.timeout)
    repo = GitRepository(deadline)
    service = build_service(repo)

    try:
        result = service.execute(_options(settings), deadline)
    except NoStagedChangesError:
        typer.echo("No staged changes. Stage your changes first: `git add ...`", err=True)
        raise typer.Exit(1)
    except GitError as e:
        typer.echo(f"Git error: {e}", err=True)
        raise typer.Exit(1)
    except LLMError as e:
        typer.echo(f"Failed to generate message: {e}", err=True)
        raise typer.Exit(1)
    except EmptyMessageError:
        typer.echo(
            "Model returned an empty message. Consider a larger model/temp or smaller diff.",
            err=True,
        )
        raise typer.Exit(1)

    if debug:
        display_debug_info(result)

    display_review(result)

    message = result.message
    rendered = message.render()

    try:
        if settings.hook_path is not None:
            repo.write_hook(settings.hook_path, rendered)
        elif settings.commit:
            repo.commit(message.headline, message.body)
    except GitError as e:
        typer.echo(f"Git error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(rendered)


def _options(settings: Settings) -> GenerationOptions:
    return GenerationOptions(
        model=settings.model,
        review_model=settings.review_model,
        endpoint=settings.endpoint,
        max_bytes=settings.max_bytes,
        review=settings.review,
    )
