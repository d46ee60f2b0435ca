# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Substitution context for templated whispers."""

from __future__ import annotations

from dataclasses import asdict, dataclass

from tradewhisper.constants import DEFAULT_GAME_INFO_TIMEOUT_S, UNKNOWN
from tradewhisper.game_info import lookup_zone
from tradewhisper.logging import get_logger
from tradewhisper.messages import (
    TradeBulkMessage,
    TradeExchangeMessage,
    TradeItemMessage,
    TradeMapMessage,
    format_quantity,
)
from tradewhisper.ports import GameInfoPort

logger = get_logger(__name__)


@dataclass(frozen=True)
class MessageContext:
    """Values available to whisper templates as ``@zone``, ``@itemname``, ``@price``."""

    zone: str = UNKNOWN
    itemname: str = UNKNOWN
    price: str = UNKNOWN

    def as_dict(self) -> dict[str, str]:
        return asdict(self)


def describe_trade(message: TradeExchangeMessage) -> tuple[str, str]:
    """Return ``(itemname, price)`` for a message, ``unknown`` where missing."""
    match message:
        case TradeItemMessage():
            price = UNKNOWN
            if message.price and message.currency_type:
                price = f"{format_quantity(message.price)} {message.currency_type}"
            return message.item_name, price
        case TradeBulkMessage():
            return (
                f"{format_quantity(message.count1)} × {message.type1}",
                f"{format_quantity(message.count2)} × {message.type2}",
            )
        case TradeMapMessage():
            return ", ".join(message.maps1.maps), ", ".join(message.maps2.maps)
        case _:
            raise TypeError(f"Unsupported trade message: {type(message).__name__}")


class MessageContextBuilder:
    """Builds a fresh MessageContext for every templated whisper."""

    def __init__(self, game_info: GameInfoPort, timeout: float = DEFAULT_GAME_INFO_TIMEOUT_S) -> None:
        self._game_info = game_info
        self._timeout = timeout

    async def build(self, message: TradeExchangeMessage) -> MessageContext:
        """Build the context for a message.

        Never raises for unavailable game state: the zone falls back to
        ``unknown`` when the lookup fails.
        """
        itemname, price = describe_trade(message)
        zone = await lookup_zone(self._game_info, self._timeout)
        if zone is None:
            logger.debug("trade_zone_unavailable", trader=message.name)
            zone = UNKNOWN
        return MessageContext(zone=zone, itemname=itemname, price=price)
