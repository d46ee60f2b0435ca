# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Exception hierarchy for trade message handling."""


class TradeError(Exception):
    """Base exception for trade message handling."""

    pass


class GameInfoUnavailableError(TradeError):
    """Game info is missing or a required field is malformed."""

    pass


class IncompleteDispatchError(TradeError):
    """An action has no registered handler."""

    pass
