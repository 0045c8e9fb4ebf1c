"""Export a board to a LaTeX document for printing the hidden layout."""

from __future__ import annotations

from pathlib import Path

from sugoroku.board import Board

_PREAMBLE = r"""\documentclass[11pt]{article}

\usepackage{tcolorbox}
\newtcolorbox{areabox}[2][]{colbacktitle=black,coltitle=white,title={#2}}

\begin{document}
"""

_TEX_SPECIALS = {
    "\\": r"\textbackslash{}",
    "&": r"\&",
    "%": r"\%",
    "$": r"\$",
    "#": r"\#",
    "_": r"\_",
    "{": r"\{",
    "}": r"\}",
    "~": r"\textasciitilde{}",
    "^": r"\textasciicircum{}",
}


def escape_tex(text: str) -> str:
    return "".join(_TEX_SPECIALS.get(ch, ch) for ch in text)


def board_to_tex(board: Board) -> str:
    """Render *board* as a standalone LaTeX article, one box per area."""
    lines = [
        _PREAMBLE,
        rf"\title{{{escape_tex(board.title)}}}",
        r"\author{}",
        r"\date{}",
        r"\maketitle",
        "",
    ]
    for index, area in enumerate(board.areas):
        lines.append(rf"\begin{{areabox}}{{{index}}}")
        for text_line in area.text().splitlines():
            # Blank lines would end the paragraph inside the box
            lines.append(escape_tex(text_line) + r"\\" if text_line else r"\medskip")
        lines.append(r"\end{areabox}")
        lines.append("")
    lines.append(r"\end{document}")
    return "\n".join(lines) + "\n"


def write_tex(board: Board, world_path: Path | str, output: Path | str | None = None) -> Path:
    """Write the document next to *world_path* (``<stem>.tex``) unless *output* is given.

    Returns the path written.
    """
    world_path = Path(world_path)
    out = Path(output) if output is not None else world_path.with_suffix(".tex")
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(board_to_tex(board), encoding="utf-8")
    return out
