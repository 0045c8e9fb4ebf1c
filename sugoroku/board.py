"""Board layout: the ordered areas and the global game settings."""

from __future__ import annotations

from dataclasses import dataclass, field

from sugoroku.effects import Effect, describe_effect


@dataclass(frozen=True)
class Area:
    """One position on the board and the effects triggered on arrival."""

    description: str
    effects: tuple[Effect, ...] = ()

    def text(self) -> str:
        """Description followed by the effect list, as shown to players."""
        lines = [self.description.rstrip(), ""]
        if not self.effects:
            lines.append("Effects: none")
        else:
            lines.append("Effects:")
            lines.extend(f"- {describe_effect(e)}" for e in self.effects)
        return "\n".join(lines)


@dataclass(frozen=True)
class Board:
    """Immutable board. Index 0 is Start, the last index is Goal."""

    areas: tuple[Area, ...]
    dice_max: int
    title: str = ""
    opening: str = ""
    start_description: str = field(default="", repr=False)
    goal_description: str = field(default="", repr=False)

    def __post_init__(self):
        # Tuples keep the board hashable and read-only even if a list was passed
        object.__setattr__(self, "areas", tuple(self.areas))

    @property
    def goal_index(self) -> int:
        return len(self.areas) - 1

    def area(self, index: int) -> Area:
        return self.areas[index]

    def clamp(self, position: int) -> int:
        """Clamp *position* into ``[0, goal_index]`` — never wrap, never bounce."""
        return max(0, min(position, self.goal_index))


def build_board(
    areas: list[Area],
    dice_max: int,
    title: str = "",
    opening: str = "",
    start_description: str = "Start",
    goal_description: str = "Goal",
) -> Board:
    """Wrap the body *areas* between an effect-free Start and Goal."""
    return Board(
        areas=(Area(start_description), *areas, Area(goal_description)),
        dice_max=dice_max,
        title=title,
        opening=opening,
        start_description=start_description,
        goal_description=goal_description,
    )
