# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Trade message actions and their per-session boolean state."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from enum import StrEnum


class TradeAction(StrEnum):
    """Actions offered on a displayed trade message."""

    INVITE = "invite"
    TRADE = "trade"
    WHISPER = "whisper"
    WAIT = "wait"
    INTERESTED = "interested"
    ITEM_GONE = "item_gone"
    RESEND = "resend"
    FINISHED = "finished"
    ITEM_HIGHLIGHT = "item_highlight"


# Actions whose completion retires the message
DISMISSING_ACTIONS = frozenset({TradeAction.ITEM_GONE, TradeAction.FINISHED})


class ActionState:
    """Sparse action -> bool map where an absent action reads as False.

    Used for both the "visible" and the "activated" projection of a session.
    Only real booleans are stored.
    """

    __slots__ = ("_values",)

    def __init__(self, values: dict[TradeAction, bool] | None = None) -> None:
        self._values: dict[TradeAction, bool] = {}
        for action, value in (values or {}).items():
            self[action] = value

    def __getitem__(self, action: TradeAction) -> bool:
        return self._values.get(action, False)

    def __setitem__(self, action: TradeAction, value: bool) -> None:
        if not isinstance(value, bool):
            raise TypeError(f"Action state must be a bool, got {type(value).__name__}")
        self._values[TradeAction(action)] = value

    def __contains__(self, action: object) -> bool:
        return action in self._values

    def __iter__(self) -> Iterator[TradeAction]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ActionState):
            return NotImplemented
        return self.enabled() == other.enabled()

    def __repr__(self) -> str:
        return f"ActionState({sorted(self.enabled())})"

    def update(self, show: Iterable[TradeAction] = (), hide: Iterable[TradeAction] = ()) -> None:
        """Mark actions as shown and hidden (hide wins on overlap)."""
        for action in show:
            self[action] = True
        for action in hide:
            self[action] = False

    def enabled(self) -> frozenset[TradeAction]:
        """Actions currently set to True."""
        return frozenset(action for action, value in self._values.items() if value)

    def copy(self) -> ActionState:
        return ActionState(dict(self._values))

    def as_dict(self) -> dict[str, bool]:
        """Plain mapping for serialization (explicit keys only)."""
        return {action.value: value for action, value in self._values.items()}
