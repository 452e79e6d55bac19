"""Terminal output helpers shared by the CLI commands."""

import click

_STATUS_COLORS = {"delivered": "green", "gone": "yellow", "failed": "red"}


def success(message: str) -> None:
    click.secho(f"✓ {message}", fg="green")


def error(message: str) -> None:
    """Print an error message to stderr."""
    click.secho(f"✗ {message}", fg="red", err=True)


def warning(message: str) -> None:
    click.secho(f"⚠ {message}", fg="yellow")


def info(message: str) -> None:
    click.secho(f"ℹ {message}", fg="blue")


def header(title: str) -> None:
    """Print a bold title underlined to its own width."""
    click.secho(f"\n{title}", fg="cyan", bold=True)
    click.secho("─" * len(title), fg="cyan", dim=True)


def delivery_line(status: str, endpoint: str, *, pruned: bool = False) -> None:
    """Print one per-endpoint broadcast outcome, colored by status."""
    label = f"{status} (pruned)" if pruned else status
    click.secho(f"  {label:<18}", fg=_STATUS_COLORS.get(status, "white"), nl=False)
    click.echo(shorten_endpoint(endpoint))


def shorten_endpoint(endpoint: str, width: int = 72) -> str:
    # Push service URLs end in a long opaque token
    if len(endpoint) <= width:
        return endpoint
    return endpoint[: width - 1] + "…"
