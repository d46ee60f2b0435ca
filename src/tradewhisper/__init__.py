# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Trade message actions for the game overlay.

Public API:
    - TradeMessageSession: per-message action state machine
    - TradeMessageBoard: owner of the displayed sessions
    - ActionExecutor / MessageContextBuilder / compute_initial_visibility
    - Message models and port protocols
"""

from __future__ import annotations

from tradewhisper.actions import ActionState, TradeAction
from tradewhisper.board import TradeMessageBoard
from tradewhisper.context import MessageContext, MessageContextBuilder
from tradewhisper.errors import GameInfoUnavailableError, IncompleteDispatchError, TradeError
from tradewhisper.executor import ActionExecutor, ActionOutcome
from tradewhisper.messages import (
    TradeBulkMessage,
    TradeExchangeMessage,
    TradeItemMessage,
    TradeMapList,
    TradeMapMessage,
    TradeParserType,
    TradeWhisperDirection,
    parse_message,
)
from tradewhisper.ports import ChatPort, GameInfo, GameInfoPort, HighlightPort, HighlightRequest, NotifierPort
from tradewhisper.session import SessionState, TradeMessageSession
from tradewhisper.visibility import compute_initial_visibility

__all__ = [
    # Session
    "TradeMessageSession",
    "TradeMessageBoard",
    "SessionState",
    # Components
    "ActionExecutor",
    "ActionOutcome",
    "MessageContext",
    "MessageContextBuilder",
    "compute_initial_visibility",
    # Actions
    "ActionState",
    "TradeAction",
    # Messages
    "TradeBulkMessage",
    "TradeExchangeMessage",
    "TradeItemMessage",
    "TradeMapList",
    "TradeMapMessage",
    "TradeParserType",
    "TradeWhisperDirection",
    "parse_message",
    # Ports
    "ChatPort",
    "GameInfo",
    "GameInfoPort",
    "HighlightPort",
    "HighlightRequest",
    "NotifierPort",
    # Exceptions
    "TradeError",
    "GameInfoUnavailableError",
    "IncompleteDispatchError",
]
