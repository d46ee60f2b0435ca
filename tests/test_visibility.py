"""Tests for initial action visibility."""

from __future__ import annotations

import pytest

from tradewhisper.actions import TradeAction
from tradewhisper.messages import TradeWhisperDirection
from tradewhisper.visibility import compute_initial_visibility


def test_incoming_item_message(item_message) -> None:
    visible = compute_initial_visibility(item_message)

    assert visible.enabled() == {
        TradeAction.INVITE,
        TradeAction.TRADE,
        TradeAction.WHISPER,
        TradeAction.WAIT,
        TradeAction.ITEM_GONE,
        TradeAction.ITEM_HIGHLIGHT,
    }


def test_incoming_map_message_has_no_highlight(map_message) -> None:
    visible = compute_initial_visibility(map_message)

    assert visible[TradeAction.ITEM_HIGHLIGHT] is False
    assert TradeAction.ITEM_HIGHLIGHT not in visible.enabled()


def test_incoming_bulk_message_has_no_highlight(bulk_message) -> None:
    assert compute_initial_visibility(bulk_message)[TradeAction.ITEM_HIGHLIGHT] is False


def test_outgoing_message(outgoing_item_message) -> None:
    visible = compute_initial_visibility(outgoing_item_message)

    assert visible.enabled() == {
        TradeAction.INVITE,
        TradeAction.TRADE,
        TradeAction.WHISPER,
        TradeAction.RESEND,
        TradeAction.FINISHED,
    }


def test_outgoing_map_message_has_no_highlight(map_message) -> None:
    outgoing = map_message.model_copy(update={"direction": TradeWhisperDirection.OUTGOING})

    assert compute_initial_visibility(outgoing)[TradeAction.ITEM_HIGHLIGHT] is False


@pytest.mark.parametrize(
    ("direction", "expected"),
    [
        (TradeWhisperDirection.INCOMING, TradeAction.WAIT),
        (TradeWhisperDirection.OUTGOING, TradeAction.RESEND),
    ],
)
def test_exactly_one_of_wait_and_resend(direction, expected, item_message, bulk_message, map_message) -> None:
    for message in (item_message, bulk_message, map_message):
        visible = compute_initial_visibility(message.model_copy(update={"direction": direction}))
        shown = visible.enabled() & {TradeAction.WAIT, TradeAction.RESEND}
        assert shown == {expected}


def test_interested_never_initially_visible(item_message, outgoing_item_message) -> None:
    for message in (item_message, outgoing_item_message):
        assert compute_initial_visibility(message)[TradeAction.INTERESTED] is False
