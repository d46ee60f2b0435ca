# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Typed lookups on top of GameInfoPort.

Game info strings are wrapped in one leading and one trailing delimiter
character. The lookups here strip them and turn every failure into ``None``
so callers never see a partially valid value.
"""

from __future__ import annotations

import asyncio

from tradewhisper.constants import DEFAULT_GAME_INFO_TIMEOUT_S, MIN_WRAPPED_LENGTH
from tradewhisper.errors import GameInfoUnavailableError
from tradewhisper.logging import get_logger
from tradewhisper.ports import GameInfo, GameInfoPort

logger = get_logger(__name__)


def unwrap(value: str | None) -> str | None:
    """Strip the delimiter characters around a game info string.

    Returns None for missing values and values too short to hold anything
    besides the delimiters.
    """
    if value is None or len(value) < MIN_WRAPPED_LENGTH:
        return None
    return value[1:-1]


async def fetch_info(port: GameInfoPort, timeout: float = DEFAULT_GAME_INFO_TIMEOUT_S) -> GameInfo | None:
    """Fetch game info, mapping failures and timeouts to None."""
    try:
        async with asyncio.timeout(timeout):
            return await port.get_info()
    except TimeoutError:
        logger.warning("game_info_timeout", timeout=timeout)
    except Exception as e:
        logger.warning("game_info_lookup_failed", error=str(e))
    return None


async def lookup_zone(port: GameInfoPort, timeout: float = DEFAULT_GAME_INFO_TIMEOUT_S) -> str | None:
    """Current zone name, or None when unavailable."""
    info = await fetch_info(port, timeout)
    if info is None or info.match_info is None:
        return None
    return unwrap(info.match_info.current_zone)


async def lookup_character_name(port: GameInfoPort, timeout: float = DEFAULT_GAME_INFO_TIMEOUT_S) -> str | None:
    """Local character name, or None when unavailable."""
    info = await fetch_info(port, timeout)
    if info is None or info.me is None:
        return None
    return unwrap(info.me.character_name)


async def require_character_name(port: GameInfoPort, timeout: float = DEFAULT_GAME_INFO_TIMEOUT_S) -> str:
    """Local character name.

    Raises:
        GameInfoUnavailableError: If the name is missing or malformed
    """
    name = await lookup_character_name(port, timeout)
    if name is None:
        raise GameInfoUnavailableError("character name was not set")
    return name
