# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Displayed trade messages and their sessions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from tradewhisper.logging import get_logger
from tradewhisper.session import TradeMessageSession

if TYPE_CHECKING:
    from tradewhisper.executor import ActionExecutor
    from tradewhisper.messages import TradeExchangeMessage
    from tradewhisper.settings import TradeSettings

logger = get_logger(__name__)


class TradeMessageBoard:
    """Owns the sessions of every displayed trade message."""

    def __init__(self, executor: ActionExecutor, settings: TradeSettings | None = None) -> None:
        self._executor = executor
        self._settings = settings or executor.settings
        self._sessions: dict[str, TradeMessageSession] = {}

    def __len__(self) -> int:
        return len(self._sessions)

    def __contains__(self, session_id: object) -> bool:
        return session_id in self._sessions

    @property
    def sessions(self) -> list[TradeMessageSession]:
        """Active sessions in display order (oldest first)."""
        return list(self._sessions.values())

    def add(self, message: TradeExchangeMessage, session_id: str | None = None) -> TradeMessageSession | None:
        """Display a message.

        Returns:
            The new session, or None if the trade filter hides the message
        """
        trade_filter = self._settings.trade_filter
        if not trade_filter.accepts(message.direction):
            logger.debug(
                "trade_message_filtered",
                trader=message.name,
                direction=str(message.direction),
                trade_filter=str(trade_filter),
            )
            return None

        session = TradeMessageSession(message, self._executor, session_id=session_id)
        if session.session_id in self._sessions:
            raise ValueError(f"Session {session.session_id} already displayed")
        session.on_dismiss(self._remove)
        self._sessions[session.session_id] = session
        logger.info(
            "trade_message_displayed",
            session_id=session.session_id,
            trader=message.name,
            type=message.type,
            direction=str(message.direction),
        )
        return session

    def get(self, session_id: str) -> TradeMessageSession:
        """Get a displayed session.

        Raises:
            KeyError: If no session with this ID is displayed
        """
        if session_id not in self._sessions:
            raise KeyError(f"Session {session_id} not found")
        return self._sessions[session_id]

    async def dismiss(self, session_id: str) -> None:
        """Dismiss a displayed message (user closed it)."""
        await self.get(session_id).dismiss()

    async def dismiss_all(self) -> None:
        for session in self.sessions:
            await session.dismiss()

    def _remove(self, session: TradeMessageSession) -> None:
        self._sessions.pop(session.session_id, None)
