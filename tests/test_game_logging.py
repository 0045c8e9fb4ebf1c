"""Tests that TurnEngine reports every visible event to its observer."""

from sugoroku.board import Area, Board
from sugoroku.effects import PushOthersAll, PushSelf, SkipSelf
from sugoroku.game import ListObserver, TurnEngine, new_game


class ScriptedDeclarer:
    def __init__(self, values: list[int]):
        self.values = list(values)

    def declare(self, player, board) -> int:
        return self.values.pop(0)


def _play(board: Board, names: list[str], values: list[int], turns: int = 1) -> ListObserver:
    observer = ListObserver()
    engine = TurnEngine(new_game(board, names), ScriptedDeclarer(values), observer=observer)
    for _ in range(turns):
        engine.play_turn()
    return observer


def _board(length: int, effects: dict | None = None, dice_max: int = 6) -> Board:
    effects = effects or {}
    return Board(
        areas=tuple(Area(f"area {i}", tuple(effects.get(i, ()))) for i in range(length)),
        dice_max=dice_max,
    )


def test_move_entry_has_board_state():
    observer = _play(_board(10), ["Aoi", "Kenta"], [3])

    move = observer.entries[0]
    assert move.kind == "move"
    assert move.turn_number == 1
    assert move.player == "Aoi"
    assert move.dice == 3
    assert move.positions_before == [0, 0]
    assert move.positions_after == [3, 0]


def test_landing_shows_area_text():
    observer = _play(_board(10), ["Aoi", "Kenta"], [3])

    area = observer.entries[1]
    assert area.kind == "area"
    assert area.area_index == 3
    assert area.message.startswith("area 3")


def test_each_effect_is_reported_with_its_own_board_change():
    board = _board(10, effects={2: [SkipSelf(1), PushOthersAll(2)]})
    observer = _play(board, ["Aoi", "Kenta"], [2])

    effects = [e for e in observer.entries if e.kind == "effect"]
    assert [e.effect for e in effects] == [SkipSelf(1), PushOthersAll(2)]
    assert effects[0].positions_before == effects[0].positions_after == [2, 0]
    assert effects[1].positions_before == [2, 0]
    assert effects[1].positions_after == [2, 2]
    assert effects[1].message == "Every other player advances 2 areas."


def test_cascade_entries_follow_the_player():
    board = _board(10, effects={1: [PushSelf(3)]})
    observer = _play(board, ["Aoi", "Kenta"], [1])

    kinds = [e.kind for e in observer.entries]
    assert kinds == ["move", "area", "effect", "cascade"]
    assert observer.entries[-1].area_index == 4


def test_skip_entry():
    board = _board(10)
    observer = ListObserver()
    state = new_game(board, ["Aoi", "Kenta"])
    state.players[0].skip_count = 1
    TurnEngine(state, ScriptedDeclarer([]), observer=observer).play_turn()

    (entry,) = observer.entries
    assert entry.kind == "skip"
    assert entry.positions_before == entry.positions_after == [0, 0]


def test_game_over_entry_is_last():
    observer = _play(_board(5, dice_max=4), ["Aoi", "Kenta"], [4])

    last = observer.entries[-1]
    assert last.kind == "game_over"
    assert last.player == "Aoi"
    assert last.area_index == 4
    assert "reached the goal" in last.message
