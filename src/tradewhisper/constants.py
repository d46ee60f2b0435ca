# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Centralized default values for tradewhisper."""

from __future__ import annotations

# Placeholder used for every context field that cannot be resolved
UNKNOWN = "unknown"

# Game info strings are wrapped in one leading and one trailing delimiter
MIN_WRAPPED_LENGTH = 3

TEMPLATE_TOKEN_PREFIX = "@"

NOTIFICATION_KICK_ERROR = "trade.kick-error"

DEFAULT_GAME_INFO_TIMEOUT_S = 2.0

DEFAULT_TRADE_MESSAGE_WAIT = "Currently in @zone. Will invite you in a bit. Have fun!"
DEFAULT_TRADE_MESSAGE_STILL_INTERESTED = "Are you still interested in my @itemname listed for @price?"
DEFAULT_TRADE_MESSAGE_ITEM_GONE = "Sorry, my @itemname is already gone. Have fun!"
DEFAULT_TRADE_MESSAGE_THANKS = "Thank you very much. Good luck and have fun!"
DEFAULT_TRADE_SOUND_VOLUME = 75
