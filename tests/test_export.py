"""Tests for the LaTeX board export."""

from __future__ import annotations

from pathlib import Path

from sugoroku.board import Area, build_board
from sugoroku.effects import GoToStart, PushSelf
from sugoroku.export import board_to_tex, escape_tex, write_tex


def _board():
    return build_board(
        [Area("100% fun_time", (PushSelf(2),)), Area("Fox & friends", (GoToStart(),))],
        dice_max=6,
        title="Road #1",
        start_description="Gate",
        goal_description="Shrine",
    )


def test_escape_tex():
    assert escape_tex("a & b") == r"a \& b"
    assert escape_tex("50%") == r"50\%"
    assert escape_tex("x_y {z}") == r"x\_y \{z\}"
    assert escape_tex("plain") == "plain"


def test_document_structure():
    tex = board_to_tex(_board())
    assert tex.startswith(r"\documentclass")
    assert r"\begin{document}" in tex
    assert tex.rstrip().endswith(r"\end{document}")
    assert r"\title{Road \#1}" in tex


def test_one_box_per_area_in_order():
    board = _board()
    tex = board_to_tex(board)

    assert tex.count(r"\begin{areabox}") == len(board.areas)
    positions = [tex.index(rf"\begin{{areabox}}{{{i}}}") for i in range(len(board.areas))]
    assert positions == sorted(positions)


def test_area_text_and_effects_are_rendered():
    tex = board_to_tex(_board())
    assert r"100\% fun\_time\\" in tex
    assert r"Fox \& friends\\" in tex
    assert r"- Advance 2 areas.\\" in tex
    assert r"- Go back to the start.\\" in tex
    assert r"Effects: none\\" in tex


def test_write_tex_next_to_world_file(tmp_path: Path):
    world = tmp_path / "lantern.toml"
    out = write_tex(_board(), world)
    assert out == tmp_path / "lantern.tex"
    assert out.read_text(encoding="utf-8") == board_to_tex(_board())


def test_write_tex_to_explicit_output(tmp_path: Path):
    out = write_tex(_board(), tmp_path / "lantern.toml", tmp_path / "print" / "board.tex")
    assert out == tmp_path / "print" / "board.tex"
    assert out.exists()
