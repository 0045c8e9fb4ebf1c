"""Effect resolution — applies one area effect to the player set."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

from loguru import logger

from sugoroku.board import Area, Board
from sugoroku.effects import (
    Effect,
    GoToStart,
    PullOthersAll,
    PullSelf,
    PushOthersAll,
    PushSelf,
    SkipSelf,
)

if TYPE_CHECKING:
    from sugoroku.game import Player


@dataclass(frozen=True)
class MovementOutcome:
    """Where the acting player ended up, and whether that is a new area.

    Only the acting player is reported: players moved by someone else's
    effect resolve their new area on their own turn, not now.
    """

    moved: bool
    position: int


def apply_effect(
    effect: Effect,
    acting: Player,
    players: list[Player],
    board: Board,
) -> MovementOutcome:
    """Apply *effect* on behalf of *acting*. Mutates players in place."""
    before = acting.position

    match effect:
        case GoToStart():
            acting.position = 0
        case SkipSelf(times=times):
            acting.skip_count += times
        case PushSelf(num=num):
            acting.position = board.clamp(acting.position + num)
        case PullSelf(num=num):
            acting.position = board.clamp(acting.position - num)
        case PushOthersAll(num=num):
            _shift_others(acting, players, board, num)
        case PullOthersAll(num=num):
            _shift_others(acting, players, board, -num)
        case _:
            raise TypeError(f"Not an area effect: {effect!r}")

    logger.debug(f"{acting.name}: {effect!r} ({before} -> {acting.position})")
    return MovementOutcome(moved=acting.position != before, position=acting.position)


def _shift_others(acting: Player, players: list[Player], board: Board, delta: int) -> None:
    for other in players:
        if other is acting:
            continue
        other.position = board.clamp(other.position + delta)


def resolve_area(
    area: Area,
    acting: Player,
    players: list[Player],
    board: Board,
    on_effect: Callable[[Effect, MovementOutcome], None] | None = None,
) -> MovementOutcome:
    """Apply every effect of *area* in order and aggregate the outcome.

    ``moved`` is true only when the acting player finishes on a different
    area than the one they arrived on; a push followed by an equal pull
    is not a move. *on_effect* is called after each effect is applied.
    """
    arrived = acting.position
    for effect in area.effects:
        outcome = apply_effect(effect, acting, players, board)
        if on_effect is not None:
            on_effect(effect, outcome)
    return MovementOutcome(moved=acting.position != arrived, position=acting.position)
