"""Exceptions raised by the engine, the loader and the console boundary."""

from __future__ import annotations

from typing import Any


class SugorokuError(Exception):
    """Base class for every error this package raises on purpose."""


class ConfigurationError(SugorokuError):
    """A world or player file is missing, unreadable or malformed."""


class InvalidInput(SugorokuError):
    """A declared dice value outside ``[1, dice_max]`` (or not a number)."""

    def __init__(self, value: Any, dice_max: int):
        self.value = value
        self.dice_max = dice_max
        super().__init__(f"Dice value must be between 1 and {dice_max}, got {value!r}.")


class InfiniteEffectLoop(SugorokuError):
    """Cascading area effects kept moving the acting player past the guard."""

    def __init__(self, area_index: int, effect: Any, player_name: str, limit: int):
        self.area_index = area_index
        self.effect = effect
        self.player_name = player_name
        self.limit = limit
        super().__init__(
            f"Effects cascaded more than {limit} times for {player_name}; "
            f"last resolved area {area_index} ({effect!r}). "
            "Check the world file for areas that send players back and forth."
        )


class GameFinished(SugorokuError):
    """A turn was requested after the game already has a winner."""
