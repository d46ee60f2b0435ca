# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Protocols for the collaborators consumed by the trade actions.

The overlay wires concrete implementations (game client chat, game events,
highlight window, toast notifications). All calls are fire-and-forget from
the action's perspective: return values are not consumed.
"""

from __future__ import annotations

from typing import Protocol

from pydantic import BaseModel, ConfigDict, Field


class PlayerInfo(BaseModel):
    """Local player section of the game info."""

    character_name: str | None = None  # Wrapped in delimiter characters

    model_config = ConfigDict(extra="ignore")


class MatchInfo(BaseModel):
    """Match section of the game info."""

    current_zone: str | None = None  # Wrapped in delimiter characters

    model_config = ConfigDict(extra="ignore")


class GameInfo(BaseModel):
    """Snapshot of live game state as reported by the game events API."""

    me: PlayerInfo | None = None
    match_info: MatchInfo | None = None

    model_config = ConfigDict(extra="ignore")


class HighlightRequest(BaseModel):
    """Items to mark in the stash overlay."""

    items: tuple[str, ...] = Field(default_factory=tuple)
    left: int | None = None
    top: int | None = None
    stash: str | None = None

    model_config = ConfigDict(frozen=True)


class ChatPort(Protocol):
    """Sends chat commands to the game client."""

    async def invite(self, name: str) -> None:
        """Invite the trader to the party."""
        ...

    async def trade(self, name: str) -> None:
        """Open a trade request with the trader."""
        ...

    async def whisper(self, name: str, text: str | None = None) -> None:
        """Whisper the trader.

        Args:
            name: Trader character name
            text: Message text; None opens a blank whisper for the user to fill in
        """
        ...

    async def kick(self, name: str) -> None:
        """Remove a character from the party."""
        ...


class GameInfoPort(Protocol):
    """Reads live game state."""

    async def get_info(self) -> GameInfo | None:
        """Return the current game info, or None when the game is not running.

        May raise on transport failure; callers treat that as unavailable.
        """
        ...


class HighlightPort(Protocol):
    """Stash highlight overlay.

    ``toggle`` closes any previously shown highlight before opening a new one.
    """

    async def toggle(self, request: HighlightRequest) -> None: ...

    async def close(self) -> None: ...


class NotifierPort(Protocol):
    """User facing notifications."""

    async def show(self, kind: str) -> None:
        """Show the notification registered under ``kind`` (e.g. ``trade.kick-error``)."""
        ...
