# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Port implementations that only log, for dry runs from the command line."""

from __future__ import annotations

from tradewhisper.logging import get_logger
from tradewhisper.ports import GameInfo, HighlightRequest, MatchInfo, PlayerInfo

logger = get_logger(__name__)


class LoggingChatPort:
    """Records chat commands instead of sending them to the game."""

    def __init__(self) -> None:
        self.sent: list[tuple[str, str, str | None]] = []

    async def invite(self, name: str) -> None:
        self._record("invite", name)

    async def trade(self, name: str) -> None:
        self._record("trade", name)

    async def whisper(self, name: str, text: str | None = None) -> None:
        self._record("whisper", name, text)

    async def kick(self, name: str) -> None:
        self._record("kick", name)

    def _record(self, command: str, name: str, text: str | None = None) -> None:
        self.sent.append((command, name, text))
        logger.info("chat_command", command=command, name=name, text=text)


class StaticGameInfoPort:
    """Game info with fixed values, wrapped the way the game reports them."""

    def __init__(self, zone: str | None = None, character_name: str | None = None, delimiter: str = '"') -> None:
        self._info = GameInfo(
            me=PlayerInfo(character_name=_wrap(character_name, delimiter)),
            match_info=MatchInfo(current_zone=_wrap(zone, delimiter)),
        )

    async def get_info(self) -> GameInfo | None:
        return self._info


class LoggingHighlightPort:
    def __init__(self) -> None:
        self.current: HighlightRequest | None = None

    async def toggle(self, request: HighlightRequest) -> None:
        if self.current == request:
            self.current = None
        else:
            self.current = request
        logger.info("highlight_toggled", items=list(request.items), shown=self.current is not None)

    async def close(self) -> None:
        self.current = None
        logger.info("highlight_closed")


class LoggingNotifierPort:
    def __init__(self) -> None:
        self.shown: list[str] = []

    async def show(self, kind: str) -> None:
        self.shown.append(kind)
        logger.warning("notification", kind=kind)


def _wrap(value: str | None, delimiter: str) -> str | None:
    if value is None:
        return None
    return f"{delimiter}{value}{delimiter}"
