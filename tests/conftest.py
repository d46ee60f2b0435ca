# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Pytest configuration and fixtures."""

from __future__ import annotations

from collections.abc import Callable
from unittest.mock import AsyncMock

import pytest
import structlog

from tradewhisper.executor import ActionExecutor
from tradewhisper.messages import (
    TradeBulkMessage,
    TradeExchangeMessage,
    TradeItemMessage,
    TradeMapList,
    TradeMapMessage,
    TradeWhisperDirection,
)
from tradewhisper.ports import GameInfo, MatchInfo, PlayerInfo
from tradewhisper.session import TradeMessageSession
from tradewhisper.settings import TradeSettings


@pytest.fixture(autouse=True)
def _reset_logging():
    """Drop logging config bound to streams of a finished CliRunner invocation."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def trade_settings() -> TradeSettings:
    """Short templates that are easy to assert on."""
    return TradeSettings(
        trade_message_wait="wait in @zone",
        trade_message_still_interested="still want @itemname for @price?",
        trade_message_item_gone="@itemname is gone",
        trade_message_thanks="thanks for @itemname",
    )


@pytest.fixture
def game_info_value() -> GameInfo:
    return GameInfo(
        me=PlayerInfo(character_name='"MyWitch"'),
        match_info=MatchInfo(current_zone='"Hideout"'),
    )


@pytest.fixture
def chat() -> AsyncMock:
    """Mock ChatPort."""
    return AsyncMock()


@pytest.fixture
def game_info(game_info_value: GameInfo) -> AsyncMock:
    """Mock GameInfoPort returning ``game_info_value``."""
    port = AsyncMock()
    port.get_info = AsyncMock(return_value=game_info_value)
    return port


@pytest.fixture
def highlight() -> AsyncMock:
    """Mock HighlightPort."""
    return AsyncMock()


@pytest.fixture
def notifier() -> AsyncMock:
    """Mock NotifierPort."""
    return AsyncMock()


@pytest.fixture
def executor(
    chat: AsyncMock,
    game_info: AsyncMock,
    highlight: AsyncMock,
    notifier: AsyncMock,
    trade_settings: TradeSettings,
) -> ActionExecutor:
    return ActionExecutor(
        chat=chat,
        game_info=game_info,
        highlight=highlight,
        notifier=notifier,
        settings=trade_settings,
    )


@pytest.fixture
def make_session(executor: ActionExecutor) -> Callable[[TradeExchangeMessage], TradeMessageSession]:
    def _make(message: TradeExchangeMessage) -> TradeMessageSession:
        return TradeMessageSession(message, executor)

    return _make


@pytest.fixture
def item_message() -> TradeItemMessage:
    return TradeItemMessage(
        name="Trader",
        direction=TradeWhisperDirection.INCOMING,
        message="Hi, I would like to buy your Tabula Rasa listed for 5 chaos",
        item_name="Tabula Rasa",
        price=5,
        currency_type="chaos",
        stash="Sale",
        left=3,
        top=7,
    )


@pytest.fixture
def outgoing_item_message(item_message: TradeItemMessage) -> TradeItemMessage:
    return item_message.model_copy(update={"direction": TradeWhisperDirection.OUTGOING})


@pytest.fixture
def bulk_message() -> TradeBulkMessage:
    return TradeBulkMessage(
        name="Trader",
        direction=TradeWhisperDirection.INCOMING,
        message="Hi, I'd like to buy your 5 Chaos for my 1 Exalted",
        count1=5,
        type1="Chaos",
        count2=1,
        type2="Exalted",
    )


@pytest.fixture
def map_message() -> TradeMapMessage:
    return TradeMapMessage(
        name="Trader",
        direction=TradeWhisperDirection.INCOMING,
        message="I'd like to exchange my Strand, Beach for your Tower",
        maps1=TradeMapList(maps=("Tower Map",)),
        maps2=TradeMapList(maps=("Strand Map", "Beach Map")),
    )
