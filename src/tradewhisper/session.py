# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Action state machine for one displayed trade message."""

from __future__ import annotations

import asyncio
import uuid
from enum import StrEnum
from typing import TYPE_CHECKING

import structlog

from tradewhisper.actions import DISMISSING_ACTIONS, ActionState, TradeAction
from tradewhisper.logging import get_logger
from tradewhisper.visibility import compute_initial_visibility

if TYPE_CHECKING:
    from collections.abc import Callable

    from tradewhisper.executor import ActionExecutor, ActionOutcome
    from tradewhisper.messages import TradeExchangeMessage

logger = get_logger(__name__)


class SessionState(StrEnum):
    ACTIVE = "active"
    DISMISSED = "dismissed"


class TradeMessageSession:
    """Lifetime of one displayed trade message, from display to dismissal.

    The session owns its visible/activated action state and the highlight
    flag. Actions are executed one at a time; dismissal (by the user or by a
    completing action) tears the highlight down once and notifies the owner.
    """

    def __init__(
        self,
        message: TradeExchangeMessage,
        executor: ActionExecutor,
        session_id: str | None = None,
    ) -> None:
        """Initialize session.

        Args:
            message: Trade message being displayed
            executor: Executor performing action side effects
            session_id: Optional specific session ID (defaults to UUID)
        """
        self.session_id = session_id or str(uuid.uuid4())
        self._message = message
        self._executor = executor
        self._visible = compute_initial_visibility(message)
        self._activated = ActionState()
        self._highlight_shown = False
        self._state = SessionState.ACTIVE
        self._lock = asyncio.Lock()
        self._dismiss_callbacks: list[Callable[[TradeMessageSession], None]] = []

    @property
    def message(self) -> TradeExchangeMessage:
        return self._message

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def is_active(self) -> bool:
        return self._state is SessionState.ACTIVE

    @property
    def highlight_shown(self) -> bool:
        return self._highlight_shown

    @property
    def visible(self) -> ActionState:
        """Copy of the visible action state."""
        return self._visible.copy()

    @property
    def activated(self) -> ActionState:
        """Copy of the activated action state."""
        return self._activated.copy()

    def available_actions(self) -> list[TradeAction]:
        """Visible actions in declaration order."""
        return [action for action in TradeAction if self._visible[action]]

    def on_dismiss(self, callback: Callable[[TradeMessageSession], None]) -> None:
        """Register a callback invoked once when the session is dismissed."""
        self._dismiss_callbacks.append(callback)

    async def activate(self, action: TradeAction) -> ActionOutcome | None:
        """Execute an action on this message.

        Returns:
            The action outcome, or None if the session was already dismissed
        """
        action = TradeAction(action)
        async with self._lock:
            if not self.is_active:
                logger.warning(
                    "trade_action_on_dismissed_session",
                    session_id=self.session_id,
                    action=str(action),
                )
                return None

            self._activated[action] = True
            outcome: ActionOutcome | None = None
            try:
                with structlog.contextvars.bound_contextvars(session_id=self.session_id):
                    outcome = await self._executor.execute(self, action)
            finally:
                # Completing actions retire the message even when a port call failed
                if action in DISMISSING_ACTIONS or (outcome is not None and outcome.dismiss):
                    await self.dismiss()

            if self.is_active:
                self._visible.update(show=outcome.show, hide=outcome.hide)
                if outcome.highlight_shown is not None:
                    self._highlight_shown = outcome.highlight_shown
            elif outcome.highlight_shown:
                # Dismissed while the toggle was in flight
                await self._executor.close_highlight()

        if outcome.pending is not None:
            await outcome.pending
        return outcome

    async def dismiss(self) -> None:
        """Retire the message. Safe to call multiple times."""
        if not self.is_active:
            return
        self._state = SessionState.DISMISSED

        try:
            if self._highlight_shown:
                self._highlight_shown = False
                await self._executor.close_highlight()
        finally:
            logger.info("trade_session_dismissed", session_id=self.session_id, trader=self._message.name)
            callbacks, self._dismiss_callbacks = self._dismiss_callbacks, []
            for callback in callbacks:
                callback(self)
