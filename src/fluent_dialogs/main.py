"""CLI entry point for fluent-dialogs.

This module defines the Click-based command-line interface: a demo that
shows a dialog in a Textual app, and settings inspection.
"""

from __future__ import annotations

import json
import logging
from enum import IntEnum
from pathlib import Path

import click
import yaml

from fluent_dialogs import __version__
from fluent_dialogs.config import DialogSettings, load_settings
from fluent_dialogs.exceptions import ConfigError
from fluent_dialogs.logging import configure_logging, get_logger
from fluent_dialogs.models import ActionKind, DialogStyle

__all__ = ["ExitCode", "cli", "parse_action"]


class ExitCode(IntEnum):
    """Exit codes for the fluent-dialogs CLI."""

    SUCCESS = 0
    FAILURE = 1
    INTERRUPTED = 130


_VERBOSITY_LEVELS = {
    "error": logging.ERROR,
    "warning": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
}

_STYLE_CHOICES = {
    "alert": DialogStyle.ALERT,
    "action-sheet": DialogStyle.ACTION_SHEET,
}


def parse_action(value: str) -> tuple[str, ActionKind]:
    """Parse ``TITLE[:KIND]`` into a title and an ActionKind.

    Raises:
        click.BadParameter: If KIND is not a known action kind.
    """
    title, sep, kind = value.rpartition(":")
    if not sep:
        return value, ActionKind.DEFAULT
    try:
        return title, ActionKind(kind.lower())
    except ValueError:
        choices = ", ".join(k.value for k in ActionKind)
        raise click.BadParameter(
            f"unknown action kind {kind!r} (expected one of: {choices})"
        ) from None


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="fluent-dialogs")
@click.option(
    "-c",
    "--config",
    "config_file",
    type=click.Path(exists=False, path_type=Path),
    default=None,
    help="Path to a settings file (overrides ./fluent_dialogs.yaml).",
)
@click.option(
    "-v",
    "--verbose",
    count=True,
    help="Increase verbosity (-v for INFO, -vv for DEBUG).",
)
@click.option(
    "-q",
    "--quiet",
    is_flag=True,
    default=False,
    help="Only log errors.",
)
@click.pass_context
def cli(
    ctx: click.Context, config_file: Path | None, verbose: int, quiet: bool
) -> None:
    """fluent-dialogs - build and present modal dialogs in the terminal."""
    ctx.ensure_object(dict)

    try:
        settings = load_settings(config_file)
    except ConfigError as e:
        error_parts = [f"Error: {e.message}"]
        if e.field:
            error_parts.append(f"  Field: {e.field}")
        if e.value is not None:
            error_parts.append(f"  Value: {e.value}")
        click.echo("\n".join(error_parts), err=True)
        ctx.exit(ExitCode.FAILURE)
    ctx.obj["settings"] = settings

    # Priority: quiet > verbose > settings
    if quiet:
        level = logging.ERROR
    elif verbose > 0:
        level = logging.INFO if verbose == 1 else logging.DEBUG
    else:
        level = _VERBOSITY_LEVELS.get(settings.verbosity, logging.WARNING)
    configure_logging(level=level)

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@cli.command()
@click.option(
    "--style",
    type=click.Choice(list(_STYLE_CHOICES)),
    default="alert",
    show_default=True,
    help="Dialog style.",
)
@click.option("--title", default=None, help="Dialog title.")
@click.option("--message", default=None, help="Dialog message.")
@click.option(
    "--field",
    "fields",
    multiple=True,
    help="Add a text field with this placeholder (alerts only). Repeatable.",
)
@click.option(
    "--action",
    "actions",
    multiple=True,
    help="Add a button as TITLE[:default|cancel|destructive]. Repeatable.",
)
@click.option("--preferred", default=None, help="Title of the preferred action.")
@click.option("--no-animate", is_flag=True, default=False, help="Skip the fade-in.")
@click.option(
    "--no-anchor",
    is_flag=True,
    default=False,
    help="Do not anchor action sheets (fails on wide terminals).",
)
@click.pass_context
def demo(
    ctx: click.Context,
    style: str,
    title: str | None,
    message: str | None,
    fields: tuple[str, ...],
    actions: tuple[str, ...],
    preferred: str | None,
    no_animate: bool,
    no_anchor: bool,
) -> None:
    """Show a dialog and print what the user chose.

    Examples:
        fluent-dialogs demo --title "Save changes?" --action Save --action Cancel:cancel
        fluent-dialogs demo --style action-sheet --action Delete:destructive
    """
    from fluent_dialogs.tui.demo import DemoAction, DemoApp, DemoRequest

    logger = get_logger(__name__)
    settings: DialogSettings = ctx.obj["settings"]

    try:
        parsed = tuple(DemoAction(*parse_action(value)) for value in actions)
    except click.BadParameter as e:
        raise click.UsageError(e.format_message(), ctx) from e

    request = DemoRequest(
        style=_STYLE_CHOICES[style],
        title=title,
        message=message,
        fields=fields,
        actions=parsed,
        preferred=preferred,
        animated=not no_animate,
        anchored=not no_anchor,
    )
    logger.debug("demo_starting", style=style, actions=len(parsed))

    outcome = DemoApp(request, settings).run()
    if outcome is None:
        click.echo("Dialog closed without a choice.", err=True)
        ctx.exit(ExitCode.INTERRUPTED)
    if outcome.failure is not None:
        click.echo(f"Error: dialog not presented ({outcome.failure.error.value})", err=True)
        ctx.exit(ExitCode.FAILURE)

    assert outcome.action is not None
    click.echo(f"Selected: {outcome.action.title}")
    for value in outcome.text_values or []:
        click.echo(f"  {value}")


@cli.group()
def settings() -> None:
    """Inspect fluent-dialogs settings."""


@settings.command("show")
@click.option(
    "-f",
    "--format",
    "fmt",
    type=click.Choice(["yaml", "json"]),
    default="yaml",
    help="Output format (yaml or json).",
)
@click.pass_context
def settings_show(ctx: click.Context, fmt: str) -> None:
    """Display the merged settings from all sources.

    Examples:
        fluent-dialogs settings show
        fluent-dialogs settings show --format json
    """
    current: DialogSettings = ctx.obj["settings"]
    data = current.model_dump(mode="json")
    if fmt == "json":
        click.echo(json.dumps(data, indent=2))
    else:
        click.echo(yaml.dump(data, default_flow_style=False, sort_keys=False))


if __name__ == "__main__":
    cli()
