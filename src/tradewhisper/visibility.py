# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Initial action visibility for a trade message."""

from __future__ import annotations

from tradewhisper.actions import ActionState, TradeAction
from tradewhisper.messages import TradeExchangeMessage, TradeItemMessage, TradeWhisperDirection


def compute_initial_visibility(message: TradeExchangeMessage) -> ActionState:
    """Actions offered when the message is first displayed.

    Interested is never initially visible; it appears after Wait.
    """
    visible = ActionState()
    visible[TradeAction.INVITE] = True
    visible[TradeAction.TRADE] = True
    visible[TradeAction.WHISPER] = True

    match message.direction:
        case TradeWhisperDirection.INCOMING:
            visible[TradeAction.WAIT] = True
            visible[TradeAction.ITEM_GONE] = True
            visible[TradeAction.ITEM_HIGHLIGHT] = isinstance(message, TradeItemMessage)
        case TradeWhisperDirection.OUTGOING:
            visible[TradeAction.RESEND] = True
            visible[TradeAction.FINISHED] = True
            # Map highlighting for outgoing trades is disabled pending product decision:
            # visible[TradeAction.ITEM_HIGHLIGHT] = isinstance(message, TradeMapMessage)

    return visible
