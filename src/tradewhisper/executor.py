# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Side effects of trade message actions.

Every TradeAction maps to exactly one handler. A handler performs the port
calls for its action and returns an ActionOutcome describing how the owning
session should change; the executor never mutates session state itself.
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from typing import Protocol

from tradewhisper.actions import TradeAction
from tradewhisper.constants import NOTIFICATION_KICK_ERROR
from tradewhisper.context import MessageContextBuilder
from tradewhisper.errors import GameInfoUnavailableError, IncompleteDispatchError
from tradewhisper.game_info import require_character_name
from tradewhisper.logging import get_logger
from tradewhisper.messages import (
    TradeBulkMessage,
    TradeExchangeMessage,
    TradeItemMessage,
    TradeMapMessage,
    TradeWhisperDirection,
)
from tradewhisper.ports import ChatPort, GameInfoPort, HighlightPort, HighlightRequest, NotifierPort
from tradewhisper.settings import TradeSettings
from tradewhisper.templating import render_template

logger = get_logger(__name__)


@dataclass(frozen=True)
class ActionOutcome:
    """Result of executing one action."""

    show: frozenset[TradeAction] = frozenset()
    hide: frozenset[TradeAction] = frozenset()
    dismiss: bool = False
    highlight_shown: bool | None = None  # New highlight flag, None leaves it unchanged
    # Whisper still in flight; the session awaits it after dismissal
    pending: asyncio.Task[None] | None = field(default=None, compare=False)


class SessionView(Protocol):
    """Read-only view of the session an action runs against."""

    @property
    def message(self) -> TradeExchangeMessage: ...

    @property
    def highlight_shown(self) -> bool: ...


Handler = Callable[[SessionView], Awaitable[ActionOutcome]]


class ActionExecutor:
    """Executes trade actions against the chat, game info, highlight and notifier ports."""

    def __init__(
        self,
        chat: ChatPort,
        game_info: GameInfoPort,
        highlight: HighlightPort,
        notifier: NotifierPort,
        settings: TradeSettings | None = None,
        context_builder: MessageContextBuilder | None = None,
    ) -> None:
        """Initialize executor.

        Args:
            chat: Chat transport
            game_info: Live game state
            highlight: Stash highlight overlay
            notifier: User notifications
            settings: Trade settings holding the whisper templates
            context_builder: Template context builder (defaults to one over ``game_info``)

        Raises:
            IncompleteDispatchError: If an action has no handler
        """
        self.settings = settings or TradeSettings()
        self._chat = chat
        self._game_info = game_info
        self._highlight = highlight
        self._notifier = notifier
        self._contexts = context_builder or MessageContextBuilder(
            game_info, timeout=self.settings.game_info_timeout_seconds
        )
        self._handlers: dict[TradeAction, Handler] = {
            TradeAction.INVITE: self._invite,
            TradeAction.TRADE: self._trade,
            TradeAction.WHISPER: self._whisper,
            TradeAction.WAIT: self._wait,
            TradeAction.INTERESTED: self._interested,
            TradeAction.ITEM_GONE: self._item_gone,
            TradeAction.RESEND: self._resend,
            TradeAction.FINISHED: self._finished,
            TradeAction.ITEM_HIGHLIGHT: self._item_highlight,
        }
        missing = set(TradeAction) - set(self._handlers)
        if missing:
            raise IncompleteDispatchError(f"No handler for actions: {sorted(missing)}")

    async def execute(self, session: SessionView, action: TradeAction) -> ActionOutcome:
        """Run the handler for ``action``.

        Port failures propagate to the caller; nothing is retried.
        """
        handler = self._handlers[TradeAction(action)]
        logger.debug("trade_action_executing", action=str(action), trader=session.message.name)
        outcome = await handler(session)
        logger.info(
            "trade_action_executed",
            action=str(action),
            trader=session.message.name,
            direction=str(session.message.direction),
            dismiss=outcome.dismiss,
        )
        return outcome

    # Handlers

    async def _invite(self, session: SessionView) -> ActionOutcome:
        await self._chat.invite(session.message.name)
        return ActionOutcome()

    async def _trade(self, session: SessionView) -> ActionOutcome:
        if session.highlight_shown:
            await self.close_highlight()
        await self._chat.trade(session.message.name)
        return ActionOutcome(
            show=frozenset({TradeAction.FINISHED}),
            hide=frozenset({TradeAction.ITEM_HIGHLIGHT}),
            highlight_shown=False,
        )

    async def _whisper(self, session: SessionView) -> ActionOutcome:
        await self._chat.whisper(session.message.name)
        return ActionOutcome()

    async def _wait(self, session: SessionView) -> ActionOutcome:
        await self.whisper_template(session.message, self.settings.trade_message_wait)
        return ActionOutcome(
            show=frozenset({TradeAction.INTERESTED}),
            hide=frozenset({TradeAction.WAIT}),
        )

    async def _interested(self, session: SessionView) -> ActionOutcome:
        await self.whisper_template(session.message, self.settings.trade_message_still_interested)
        return ActionOutcome()

    async def _item_gone(self, session: SessionView) -> ActionOutcome:
        whisper = await self.start_whisper(session.message, self.settings.trade_message_item_gone)
        return ActionOutcome(dismiss=True, pending=whisper)

    async def _resend(self, session: SessionView) -> ActionOutcome:
        await self._chat.whisper(session.message.name, session.message.message)
        return ActionOutcome()

    async def _finished(self, session: SessionView) -> ActionOutcome:
        whisper = await self.start_whisper(session.message, self.settings.trade_message_thanks)
        await self.kick(session.message)
        return ActionOutcome(dismiss=True, pending=whisper)

    async def _item_highlight(self, session: SessionView) -> ActionOutcome:
        request = highlight_request(session.message)
        if request is None:
            return ActionOutcome()
        await self._highlight.toggle(request)
        return ActionOutcome(highlight_shown=not session.highlight_shown)

    # Shared steps

    async def close_highlight(self) -> None:
        await self._highlight.close()

    async def whisper_template(self, message: TradeExchangeMessage, template: str) -> None:
        """Render ``template`` against a freshly built context and whisper it."""
        context = await self._contexts.build(message)
        text = render_template(template, context.as_dict())
        await self._chat.whisper(message.name, text)

    async def start_whisper(self, message: TradeExchangeMessage, template: str) -> asyncio.Task[None]:
        """Start a templated whisper without waiting for its context build.

        The task gets one loop iteration to run before returning, so the
        whisper is issued ahead of whatever the caller does next. Failures are
        logged even if nobody awaits the task.
        """
        task = asyncio.create_task(self.whisper_template(message, template))
        task.add_done_callback(_log_whisper_failure)
        await asyncio.sleep(0)
        return task

    async def kick(self, message: TradeExchangeMessage) -> bool:
        """Kick the party member that closes this trade.

        Outgoing trades kick the local character, incoming trades kick the
        trader. A missing local character name is reported to the user and
        does not raise.

        Returns:
            True if a kick was sent
        """
        match message.direction:
            case TradeWhisperDirection.INCOMING:
                await self._chat.kick(message.name)
                return True
            case TradeWhisperDirection.OUTGOING:
                try:
                    name = await require_character_name(
                        self._game_info, timeout=self.settings.game_info_timeout_seconds
                    )
                except GameInfoUnavailableError as e:
                    logger.warning("trade_kick_failed", trader=message.name, error=str(e))
                    await self._notifier.show(NOTIFICATION_KICK_ERROR)
                    return False
                await self._chat.kick(name)
                return True
        return False


def _log_whisper_failure(task: asyncio.Task[None]) -> None:
    if task.cancelled():
        return
    error = task.exception()
    if error is not None:
        logger.error("trade_whisper_failed", error=str(error))


def highlight_request(message: TradeExchangeMessage) -> HighlightRequest | None:
    """Stash highlight for a message, None where the variant has nothing to highlight."""
    match message:
        case TradeItemMessage():
            return HighlightRequest(
                items=(message.item_name,),
                left=message.left,
                top=message.top,
                stash=message.stash,
            )
        case TradeMapMessage():
            if message.direction == TradeWhisperDirection.INCOMING:
                return HighlightRequest(items=message.maps1.maps)
            return HighlightRequest(items=message.maps2.maps)
        case TradeBulkMessage():
            return None
        case _:
            raise TypeError(f"Unsupported trade message: {type(message).__name__}")
