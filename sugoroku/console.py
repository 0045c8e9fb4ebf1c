"""Console players and display — the interactive side of a game."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable

from loguru import logger

from sugoroku.board import Board
from sugoroku.errors import InvalidInput
from sugoroku.game import GameResult, LogEntry, Player, TurnEngine, new_game


def parse_dice(raw: str, dice_max: int) -> int:
    """Turn a typed declaration into a dice value, or raise InvalidInput."""
    text = raw.strip()
    try:
        value = int(text)
    except ValueError:
        raise InvalidInput(text, dice_max) from None
    if not 1 <= value <= dice_max:
        raise InvalidInput(value, dice_max)
    return value


# ── Declarer ─────────────────────────────────────────────────────────

@dataclass
class ConsoleDeclarer:
    """Asks the acting player at the keyboard for their dice value.

    Waits as long as it takes and keeps asking until the answer is usable.
    """

    input_fn: Callable[[str], str] = input
    output_fn: Callable[[str], None] = print

    def declare(self, player: Player, board: Board) -> int:
        prompt = f"{player.name}, declare your dice (1-{board.dice_max}): "
        while True:
            raw = self.input_fn(prompt)
            try:
                return parse_dice(raw, board.dice_max)
            except InvalidInput as exc:
                logger.debug(f"Rejected declaration from {player.name}: {raw!r}")
                self.output_fn(str(exc))


# ── Display ──────────────────────────────────────────────────────────

@dataclass
class ConsoleObserver:
    """Prints every event so the whole table sees what happened."""

    output_fn: Callable[[str], None] = print
    names: list[str] = field(default_factory=list)

    def on_event(self, entry: LogEntry) -> None:
        kind = entry.kind
        if kind == "move" or kind == "skip":
            self.output_fn(entry.message)
        elif kind == "area":
            self.output_fn(f"\n[Area {entry.area_index}]\n{entry.message}\n")
        elif kind == "cascade":
            self.output_fn(
                f"{entry.player} is carried to area {entry.area_index}."
                f"\n[Area {entry.area_index}]\n{entry.message}\n"
            )
        elif kind == "effect":
            self.output_fn(f"  * {entry.message}")
            self._show_moves(entry)
        elif kind == "game_over":
            self.output_fn(f"\n{entry.message}")

    def _show_moves(self, entry: LogEntry) -> None:
        if not self.names:
            return
        for name, old, new in zip(self.names, entry.positions_before, entry.positions_after):
            if old != new:
                self.output_fn(f"    {name}: area {old} -> {new}")


# ── Game loop ────────────────────────────────────────────────────────

def play_console_game(
    board: Board,
    names: list[str],
    input_fn: Callable[[str], str] = input,
    output_fn: Callable[[str], None] = print,
    max_turns: int | None = None,
) -> GameResult:
    """Run a full interactive game on the console."""
    state = new_game(board, names)
    engine = TurnEngine(
        state,
        declarer=ConsoleDeclarer(input_fn=input_fn, output_fn=output_fn),
        observer=ConsoleObserver(output_fn=output_fn, names=list(names)),
        max_turns=max_turns,
    )

    output_fn(board.title)
    if board.opening:
        output_fn(board.opening)
    output_fn(f"\n[Area 0]\n{board.area(0).text()}\n")

    result = engine.play()

    if result.winner is None:
        output_fn(f"No winner after {result.turns} turns.")
    output_fn("Final positions:")
    for rank, (name, position) in enumerate(result.standings, start=1):
        output_fn(f"  {rank}. {name:20s} area {position}")
    return result
