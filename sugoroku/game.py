"""Game runner — the per-turn state machine for a blind-board race."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Protocol, runtime_checkable

from loguru import logger

from sugoroku.board import Board
from sugoroku.effects import Effect, describe_effect
from sugoroku.errors import GameFinished, InfiniteEffectLoop, InvalidInput
from sugoroku.resolver import MovementOutcome, resolve_area


# ── Players and state ────────────────────────────────────────────────

@dataclass
class Player:
    """A racer on the board. Mutated only through the engine."""

    name: str
    position: int = 0
    skip_count: int = 0


class Phase(Enum):
    AWAITING_ROLL = "awaiting_roll"
    MOVING = "moving"
    RESOLVING_EFFECTS = "resolving_effects"
    TURN_COMPLETE = "turn_complete"
    GAME_OVER = "game_over"


@dataclass
class GameState:
    """Everything that changes during one game. Turn order = list order."""

    board: Board
    players: list[Player]
    active_index: int = 0
    phase: Phase = Phase.AWAITING_ROLL
    winner: Player | None = None
    turn_number: int = 0

    @property
    def active_player(self) -> Player:
        return self.players[self.active_index]

    @property
    def positions(self) -> list[int]:
        return [p.position for p in self.players]

    @property
    def is_over(self) -> bool:
        return self.phase is Phase.GAME_OVER


def new_game(board: Board, names: list[str]) -> GameState:
    """Fresh state with every player on Start, first name to move first."""
    return GameState(board=board, players=[Player(name) for name in names])


def _is_dice(value, dice_max: int) -> bool:
    return type(value) is int and 1 <= value <= dice_max


# ── Dice declaration interface ───────────────────────────────────────

@runtime_checkable
class DiceDeclarer(Protocol):
    """Supplies the dice value a player claims for their turn.

    The value is trusted; the engine only checks it is in range.
    """

    def declare(self, player: Player, board: Board) -> int: ...


# ── Structured types ────────────────────────────────────────────────

@dataclass
class LogEntry:
    """One visible event during a turn.

    ``kind`` is one of ``"skip"``, ``"move"``, ``"area"``, ``"cascade"``,
    ``"effect"`` or ``"game_over"``.
    """

    turn_number: int
    player: str
    kind: str
    positions_before: list[int]
    positions_after: list[int]
    dice: int | None = None
    area_index: int | None = None
    effect: Effect | None = None
    message: str = ""


@dataclass
class TurnRecord:
    """Summary of one completed turn."""

    turn_number: int
    player: str
    start_position: int
    end_position: int = 0
    dice: int | None = None
    skipped: bool = False
    cascades: int = 0
    won: bool = False


@dataclass
class GameResult:
    winner: str | None  # None when the turn limit stopped the game
    reason: str  # "goal" | "max_turns"
    turns: int = 0
    standings: list[tuple[str, int]] = field(default_factory=list)


# ── Observer ────────────────────────────────────────────────────────

class GameObserver(Protocol):
    """Receives structured events as a game is played."""

    def on_event(self, entry: LogEntry) -> None: ...


@dataclass
class ListObserver:
    """Default observer — collects entries into a list."""

    entries: list[LogEntry] = field(default_factory=list)

    def on_event(self, entry: LogEntry) -> None:
        self.entries.append(entry)


# ── Engine ───────────────────────────────────────────────────────────

class TurnEngine:
    """Drive one game, a turn at a time, until someone reaches Goal."""

    def __init__(
        self,
        state: GameState,
        declarer: DiceDeclarer,
        observer: GameObserver | None = None,
        max_turns: int | None = None,
    ):
        self.state = state
        self.declarer = declarer
        self.observer = observer or ListObserver()
        self.max_turns = max_turns

    def play(self) -> GameResult:
        while not self.state.is_over:
            if self.max_turns is not None and self.state.turn_number >= self.max_turns:
                logger.info(f"Stopped after {self.state.turn_number} turns without a winner")
                return self._result(reason="max_turns")
            self.play_turn()
        return self._result(reason="goal")

    def play_turn(self) -> TurnRecord:
        """Run the active player's whole turn and hand over to the next one.

        Raises InvalidInput, without touching the state, when the declared
        value is out of range; the caller may simply call again.
        """
        state = self.state
        if state.is_over:
            raise GameFinished(f"{state.winner.name} already reached the goal.")

        board = state.board
        player = state.active_player
        turn_number = state.turn_number + 1
        record = TurnRecord(turn_number, player.name, start_position=player.position)

        if player.skip_count > 0:
            before = state.positions
            player.skip_count -= 1
            record.skipped = True
            self._emit(
                turn_number, player, "skip", before,
                message=f"{player.name} rests ({player.skip_count} more to skip).",
            )
        else:
            value = self.declarer.declare(player, board)
            if not _is_dice(value, board.dice_max):
                raise InvalidInput(value, board.dice_max)
            record.dice = value

            state.phase = Phase.MOVING
            before = state.positions
            player.position = board.clamp(player.position + value)
            self._emit(
                turn_number, player, "move", before, dice=value,
                area_index=player.position,
                message=f"{player.name} declares {value} and moves to area {player.position}.",
            )

            state.phase = Phase.RESOLVING_EFFECTS
            record.cascades = self._resolve_effects(player, turn_number)

        state.phase = Phase.TURN_COMPLETE
        state.turn_number = turn_number
        record.end_position = player.position
        logger.info(
            f"Turn {turn_number}: {player.name} "
            f"{record.start_position} -> {record.end_position}"
        )

        if player.position == board.goal_index:
            state.phase = Phase.GAME_OVER
            state.winner = player
            record.won = True
            self._emit(
                turn_number, player, "game_over", state.positions,
                area_index=player.position,
                message=f"{player.name} reached the goal!",
            )
            logger.info(f"Game over after {turn_number} turns, winner {player.name}")
        else:
            state.active_index = (state.active_index + 1) % len(state.players)
            state.phase = Phase.AWAITING_ROLL
        return record

    def _resolve_effects(self, player: Player, turn_number: int) -> int:
        """Resolve the landed area, re-entering while the player keeps moving.

        Returns the number of cascades. A player can only ever be on
        ``len(areas)`` different areas, so more re-entries than that means
        the effects form a cycle.
        """
        state = self.state
        board = state.board
        limit = len(board.areas)
        index = player.position
        cascades = 0
        last_effect: Effect | None = None
        snapshot = state.positions

        def on_effect(effect: Effect, outcome: MovementOutcome) -> None:
            nonlocal last_effect, snapshot
            last_effect = effect
            self._emit(
                turn_number, player, "effect", snapshot,
                area_index=index, effect=effect, message=describe_effect(effect),
            )
            snapshot = state.positions

        while True:
            self._emit(
                turn_number, player, "area" if cascades == 0 else "cascade",
                state.positions, area_index=index, message=board.area(index).text(),
            )
            outcome = resolve_area(board.area(index), player, state.players, board, on_effect)
            if not outcome.moved:
                return cascades

            cascades += 1
            if cascades > limit:
                logger.warning(
                    f"Cascade guard tripped for {player.name} at area {index} "
                    f"after {limit} re-entries"
                )
                raise InfiniteEffectLoop(index, last_effect, player.name, limit)
            logger.debug(f"{player.name} cascades from area {index} to {outcome.position}")
            index = outcome.position

    def _emit(
        self,
        turn_number: int,
        player: Player,
        kind: str,
        positions_before: list[int],
        **details,
    ) -> None:
        entry = LogEntry(
            turn_number=turn_number,
            player=player.name,
            kind=kind,
            positions_before=positions_before,
            positions_after=self.state.positions,
            **details,
        )
        self.observer.on_event(entry)

    def _result(self, reason: str) -> GameResult:
        state = self.state
        ranked = sorted(state.players, key=lambda p: p.position, reverse=True)
        return GameResult(
            winner=state.winner.name if state.winner else None,
            reason=reason,
            turns=state.turn_number,
            standings=[(p.name, p.position) for p in ranked],
        )
