"""Area effects — the closed set of things that happen when a player lands."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class GoToStart:
    """Send the acting player back to the Start area."""


@dataclass(frozen=True)
class SkipSelf:
    """The acting player forfeits the next *times* turns."""

    times: int


@dataclass(frozen=True)
class PushSelf:
    num: int


@dataclass(frozen=True)
class PullSelf:
    num: int


@dataclass(frozen=True)
class PushOthersAll:
    """Every player except the acting one advances *num* areas."""

    num: int


@dataclass(frozen=True)
class PullOthersAll:
    """Every player except the acting one goes back *num* areas."""

    num: int


Effect = Union[GoToStart, SkipSelf, PushSelf, PullSelf, PushOthersAll, PullOthersAll]

EFFECT_TYPES: dict[str, type] = {
    cls.__name__: cls
    for cls in (GoToStart, SkipSelf, PushSelf, PullSelf, PushOthersAll, PullOthersAll)
}


def describe_effect(effect: Effect) -> str:
    """One-line, player-facing text for *effect*."""
    match effect:
        case GoToStart():
            return "Go back to the start."
        case SkipSelf(times=times):
            noun = "turn" if times == 1 else "turns"
            return f"Skip your next {times} {noun}."
        case PushSelf(num=num):
            return f"Advance {num} areas."
        case PullSelf(num=num):
            return f"Go back {num} areas."
        case PushOthersAll(num=num):
            return f"Every other player advances {num} areas."
        case PullOthersAll(num=num):
            return f"Every other player goes back {num} areas."
    raise TypeError(f"Not an area effect: {effect!r}")
