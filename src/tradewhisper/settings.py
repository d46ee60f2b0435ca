# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Application settings."""

from __future__ import annotations

from enum import StrEnum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from tradewhisper.constants import (
    DEFAULT_GAME_INFO_TIMEOUT_S,
    DEFAULT_TRADE_MESSAGE_ITEM_GONE,
    DEFAULT_TRADE_MESSAGE_STILL_INTERESTED,
    DEFAULT_TRADE_MESSAGE_THANKS,
    DEFAULT_TRADE_MESSAGE_WAIT,
    DEFAULT_TRADE_SOUND_VOLUME,
)
from tradewhisper.messages import TradeWhisperDirection


class TradeFilter(StrEnum):
    """Which trade messages are displayed."""

    INCOMING = "incoming"
    OUTGOING = "outgoing"
    INCOMING_OUTGOING = "incoming_outgoing"

    def accepts(self, direction: TradeWhisperDirection) -> bool:
        if self is TradeFilter.INCOMING_OUTGOING:
            return True
        return self.value == direction.value


class TradeSettings(BaseModel):
    """Trade feature settings read by the message actions."""

    trade_message_wait: str = DEFAULT_TRADE_MESSAGE_WAIT
    trade_message_still_interested: str = DEFAULT_TRADE_MESSAGE_STILL_INTERESTED
    trade_message_item_gone: str = DEFAULT_TRADE_MESSAGE_ITEM_GONE
    trade_message_thanks: str = DEFAULT_TRADE_MESSAGE_THANKS
    trade_sound_volume: int = Field(default=DEFAULT_TRADE_SOUND_VOLUME, ge=0, le=100)
    trade_filter: TradeFilter = TradeFilter.INCOMING_OUTGOING
    game_info_timeout_seconds: float = Field(default=DEFAULT_GAME_INFO_TIMEOUT_S, gt=0)

    model_config = ConfigDict(extra="ignore")


class Settings(BaseSettings):
    log_level: str = "WARNING"
    log_format: Literal["console", "json"] = "console"
    trade: TradeSettings = Field(default_factory=TradeSettings)

    model_config = SettingsConfigDict(
        env_prefix="TRADEWHISPER_",
        env_nested_delimiter="__",
        extra="ignore",
    )
