"""Tests for whisper context building and template rendering."""

from __future__ import annotations

import asyncio
from unittest.mock import AsyncMock

import pytest

from tradewhisper.context import MessageContext, MessageContextBuilder
from tradewhisper.ports import GameInfo, MatchInfo
from tradewhisper.templating import render_template


def _zone_port(zone: str | None) -> AsyncMock:
    port = AsyncMock()
    port.get_info = AsyncMock(return_value=GameInfo(match_info=MatchInfo(current_zone=zone)))
    return port


@pytest.mark.asyncio
async def test_item_context(item_message, game_info) -> None:
    context = await MessageContextBuilder(game_info).build(item_message)

    assert context == MessageContext(zone="Hideout", itemname="Tabula Rasa", price="5 chaos")


@pytest.mark.asyncio
async def test_item_without_currency_keeps_unknown_price(item_message, game_info) -> None:
    message = item_message.model_copy(update={"currency_type": None})

    context = await MessageContextBuilder(game_info).build(message)

    assert context.itemname == "Tabula Rasa"
    assert context.price == "unknown"


@pytest.mark.asyncio
async def test_bulk_context(bulk_message, game_info) -> None:
    context = await MessageContextBuilder(game_info).build(bulk_message)

    assert context.itemname == "5 × Chaos"
    assert context.price == "1 × Exalted"


@pytest.mark.asyncio
async def test_map_context(map_message, game_info) -> None:
    context = await MessageContextBuilder(game_info).build(map_message)

    assert context.itemname == "Tower Map"
    assert context.price == "Strand Map, Beach Map"


@pytest.mark.asyncio
async def test_zone_strips_first_and_last_character(item_message) -> None:
    context = await MessageContextBuilder(_zone_port("LZoneNameL")).build(item_message)

    assert context.zone == "ZoneName"


@pytest.mark.asyncio
@pytest.mark.parametrize("zone", [None, "", "ab"])
async def test_short_or_missing_zone_is_unknown(item_message, zone) -> None:
    context = await MessageContextBuilder(_zone_port(zone)).build(item_message)

    assert context.zone == "unknown"


@pytest.mark.asyncio
async def test_zone_lookup_failure_is_swallowed(item_message) -> None:
    port = AsyncMock()
    port.get_info = AsyncMock(side_effect=RuntimeError("game not running"))

    context = await MessageContextBuilder(port).build(item_message)

    assert context.zone == "unknown"
    assert context.itemname == "Tabula Rasa"


@pytest.mark.asyncio
async def test_zone_lookup_timeout_is_swallowed(item_message) -> None:
    async def _slow() -> GameInfo:
        await asyncio.sleep(1)
        return GameInfo(match_info=MatchInfo(current_zone='"Hideout"'))

    port = AsyncMock()
    port.get_info = _slow

    context = await MessageContextBuilder(port, timeout=0.01).build(item_message)

    assert context.zone == "unknown"


@pytest.mark.asyncio
async def test_context_is_built_fresh_each_time(item_message) -> None:
    port = _zone_port('"Hideout"')
    builder = MessageContextBuilder(port)

    first = await builder.build(item_message)
    port.get_info.return_value = GameInfo(match_info=MatchInfo(current_zone='"Lioneye\'s Watch"'))
    second = await builder.build(item_message)

    assert first.zone == "Hideout"
    assert second.zone == "Lioneye's Watch"


def test_render_template_replaces_all_tokens() -> None:
    context = MessageContext(zone="Hideout", itemname="Tabula Rasa", price="5 chaos").as_dict()

    text = render_template("@itemname for @price, @itemname in @zone", context)

    assert text == "Tabula Rasa for 5 chaos, Tabula Rasa in Hideout"


def test_render_template_keeps_unknown_tokens() -> None:
    assert render_template("hi @someone", {"zone": "Hideout"}) == "hi @someone"


def test_render_template_does_not_expand_tokens_inside_values() -> None:
    context = MessageContext(zone="Hideout", itemname="Sign @zone", price="5 chaos").as_dict()

    assert render_template("@itemname in @zone", context) == "Sign @zone in Hideout"


def test_render_template_token_followed_by_punctuation() -> None:
    assert render_template("In @zone. @price?", {"zone": "Hideout", "price": "1 ex"}) == "In Hideout. 1 ex?"
