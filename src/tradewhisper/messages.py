# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Structured trade messages produced by the upstream chat parser.

Each parser type has its own frozen model; ``TradeExchangeMessage`` is the
discriminated union of all of them. Upstream payloads use camelCase keys
(``itemName``, ``currencyType``), snake_case is accepted as well.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter
from pydantic.alias_generators import to_camel


class TradeWhisperDirection(StrEnum):
    """Who sent the whisper."""

    INCOMING = "incoming"  # Sent by the other trader
    OUTGOING = "outgoing"  # Sent by the local player


class TradeParserType(StrEnum):
    """Parser that recognized the message."""

    TRADE_ITEM = "TradeItem"
    TRADE_BULK = "TradeBulk"
    TRADE_MAP = "TradeMap"


class _TradeModel(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        alias_generator=to_camel,
        populate_by_name=True,
    )


class TradeMessageBase(_TradeModel):
    """Fields shared by every trade message."""

    name: str  # Trader character name
    direction: TradeWhisperDirection
    message: str  # Raw whisper text


class TradeItemMessage(TradeMessageBase):
    """A single listed item offered for a price."""

    type: Literal["TradeItem"] = TradeParserType.TRADE_ITEM.value
    item_name: str
    price: float | None = None
    currency_type: str | None = None
    stash: str | None = None
    left: int | None = None
    top: int | None = None


class TradeBulkMessage(TradeMessageBase):
    """Bulk currency exchange: count1 × type1 for count2 × type2."""

    type: Literal["TradeBulk"] = TradeParserType.TRADE_BULK.value
    count1: float
    type1: str
    count2: float
    type2: str


class TradeMapList(_TradeModel):
    """One side of a map trade."""

    maps: tuple[str, ...] = ()


class TradeMapMessage(TradeMessageBase):
    """Map-for-map exchange."""

    type: Literal["TradeMap"] = TradeParserType.TRADE_MAP.value
    maps1: TradeMapList = Field(default_factory=TradeMapList)
    maps2: TradeMapList = Field(default_factory=TradeMapList)


TradeExchangeMessage = Annotated[
    TradeItemMessage | TradeBulkMessage | TradeMapMessage,
    Field(discriminator="type"),
]

_exchange_adapter: TypeAdapter[TradeExchangeMessage] = TypeAdapter(TradeExchangeMessage)


def parse_message(data: dict[str, Any] | str | bytes) -> TradeExchangeMessage:
    """Validate an upstream payload into the matching message variant.

    Args:
        data: Mapping or JSON document produced by the chat parser

    Returns:
        TradeItemMessage, TradeBulkMessage or TradeMapMessage

    Raises:
        pydantic.ValidationError: If the payload matches no variant
    """
    if isinstance(data, str | bytes):
        return _exchange_adapter.validate_json(data)
    return _exchange_adapter.validate_python(data)


def format_quantity(count: float) -> str:
    """Render a count without a trailing ``.0`` for whole numbers."""
    if float(count).is_integer():
        return str(int(count))
    return str(count)
