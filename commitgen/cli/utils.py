"""Shared output helpers for CLI commands."""

import typer

from commitgen.service import GenerationResult


def display_review(result: GenerationResult) -> None:
    """Print the review outcome, if a review was requested.

    A failed review only produces a warning on stderr.

    Args:
        result: The pipeline result.
    """
    if result.review_error is not None:
        typer.echo(f"⚠️ review failed: {result.review_error}", err=True)
        return

    review = result.review
    if review is None or not review.text:
        return

    if review.is_clean:
        typer.echo(review.text)
    else:
        typer.echo("Review findings:")
        typer.echo(review.text)
    typer.echo()


def display_debug_info(result: GenerationResult) -> None:
    """Print the raw model response and any fallback reason to stderr.

    Args:
        result: The pipeline result.
    """
    typer.echo("\n[RAW LLM RESPONSE]", err=True)
    typer.echo(result.raw_response or "(empty)", err=True)

    if result.used_fallback:
        typer.echo("\n[FALLBACK]", err=True)
        typer.echo(f"  Strict parse failed: {result.parse_error}", err=True)

    if result.review is not None and not result.review.is_clean:
        typer.echo("\n[REVIEW]", err=True)
        typer.echo(f"  Findings: {len(result.review.findings)}", err=True)

    typer.echo(f"\n  Branch: {result.branch}", err=True)
    typer.echo(f"  Diff bytes sent: {len(result.diff_used.encode('utf-8')):,}", err=True)
    typer.echo("", err=True)
