# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Command line entry point: inspect and dry-run trade message actions."""

from __future__ import annotations

import asyncio
import json
from pathlib import Path

import click
from pydantic import ValidationError

from tradewhisper.actions import TradeAction
from tradewhisper.adapters import LoggingChatPort, LoggingHighlightPort, LoggingNotifierPort, StaticGameInfoPort
from tradewhisper.executor import ActionExecutor
from tradewhisper.logging import configure_logging
from tradewhisper.messages import TradeExchangeMessage, parse_message
from tradewhisper.session import TradeMessageSession
from tradewhisper.settings import Settings
from tradewhisper.visibility import compute_initial_visibility

ACTION_CHOICES = [action.value for action in TradeAction]


def _load_message(source: str) -> TradeExchangeMessage:
    """Load a message from a JSON file path, ``-`` for stdin, or inline JSON."""
    if source == "-":
        raw = click.get_text_stream("stdin").read()
    elif source.lstrip().startswith("{"):
        raw = source
    else:
        path = Path(source)
        if not path.exists():
            raise click.BadParameter(f"No such file: {source}", param_hint="MESSAGE")
        raw = path.read_text(encoding="utf-8")
    try:
        return parse_message(raw)
    except ValidationError as e:
        raise click.BadParameter(str(e), param_hint="MESSAGE") from e


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.pass_context
def cli(ctx: click.Context) -> None:
    """tradewhisper command line interface."""
    settings = Settings()
    configure_logging(settings)
    ctx.obj = settings


@cli.command("actions")
@click.argument("message")
def actions(message: str) -> None:
    """Print the actions initially offered for MESSAGE (JSON file, inline JSON or -)."""
    visible = compute_initial_visibility(_load_message(message))
    for action in TradeAction:
        if visible[action]:
            click.echo(action.value)


@cli.command("run")
@click.argument("message")
@click.argument("action_names", metavar="ACTION...", nargs=-1, required=True, type=click.Choice(ACTION_CHOICES))
@click.option("--zone", default=None, help="Current zone reported by the game.")
@click.option("--character", default=None, help="Local character name reported by the game.")
@click.pass_obj
def run(settings: Settings, message: str, action_names: tuple[str, ...], zone: str | None, character: str | None) -> None:
    """Execute ACTIONs on MESSAGE against logging ports and print the chat commands."""
    trade_message = _load_message(message)
    chat = LoggingChatPort()
    notifier = LoggingNotifierPort()
    executor = ActionExecutor(
        chat=chat,
        game_info=StaticGameInfoPort(zone=zone, character_name=character),
        highlight=LoggingHighlightPort(),
        notifier=notifier,
        settings=settings.trade,
    )
    session = TradeMessageSession(trade_message, executor)

    async def _run() -> None:
        for name in action_names:
            if not session.is_active:
                click.echo(f"session dismissed, skipping {name}", err=True)
                continue
            await session.activate(TradeAction(name))

    asyncio.run(_run())

    for command, name, text in chat.sent:
        click.echo(f"{command} {name}" + (f": {text}" if text else ""))
    for kind in notifier.shown:
        click.echo(f"notification {kind}")
    click.echo(f"state {session.state.value}")


@cli.command("settings")
@click.pass_obj
def show_settings(settings: Settings) -> None:
    """Print the effective settings as JSON."""
    click.echo(json.dumps(settings.model_dump(mode="json"), indent=2))


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
