"""
JSON codec for board snapshots.

The scraper reports the board as:

    {
      "guessesRemaining": 7,
      "nextGuessIndex": 2,
      "language": "en",
      "boardState": [
        [{"x": 0, "y": 0, "letter": "S", "hints": [{"letter": "S", "type": "Green"}]}, ...],
        ...
      ]
    }

Hint types come from the page's CSS classes:
  Green                              -> EXACT
  Horizontal{Simple,Double,Triple}   -> ROW, strength 1/2/3
  Vertical{Simple,Double,Triple}     -> COLUMN, strength 1/2/3
  Orange<V>Vertical<H>Horizontal     -> ROW_AND_COLUMN, (H, V)
  White                              -> MISPLACED
  Black                              -> ABSENT
"""

from __future__ import annotations

import json
import re
from pathlib import Path
from typing import Dict, List

from packages.engine import Board, Cell, GameState, Hint, HintKind

_STRENGTH = {"Simple": 1, "Double": 2, "Triple": 3}
_STRENGTH_NAME = {v: k for k, v in _STRENGTH.items()}
_SINGLE_RE = re.compile(r"^(Horizontal|Vertical)(Simple|Double|Triple)$")
_COMBINED_RE = re.compile(r"^Orange(Simple|Double|Triple)Vertical(Simple|Double|Triple)Horizontal$")


def hint_from_dict(data: Dict) -> Hint:
    letter, kind = data["letter"], data["type"]
    if kind == "Green":
        return Hint(letter, HintKind.EXACT)
    if kind == "White":
        return Hint(letter, HintKind.MISPLACED)
    if kind == "Black":
        return Hint(letter, HintKind.ABSENT)
    m = _SINGLE_RE.match(kind)
    if m:
        if m.group(1) == "Horizontal":
            return Hint(letter, HintKind.ROW, row_strength=_STRENGTH[m.group(2)])
        return Hint(letter, HintKind.COLUMN, column_strength=_STRENGTH[m.group(2)])
    m = _COMBINED_RE.match(kind)
    if m:
        return Hint(letter, HintKind.ROW_AND_COLUMN,
                    row_strength=_STRENGTH[m.group(2)], column_strength=_STRENGTH[m.group(1)])
    raise ValueError(f"Unknown hint type: {kind!r}")


def hint_to_dict(hint: Hint) -> Dict:
    if hint.kind is HintKind.EXACT:
        kind = "Green"
    elif hint.kind is HintKind.MISPLACED:
        kind = "White"
    elif hint.kind is HintKind.ABSENT:
        kind = "Black"
    elif hint.kind is HintKind.ROW:
        kind = f"Horizontal{_STRENGTH_NAME[hint.row_strength]}"
    elif hint.kind is HintKind.COLUMN:
        kind = f"Vertical{_STRENGTH_NAME[hint.column_strength]}"
    else:
        kind = (f"Orange{_STRENGTH_NAME[hint.column_strength]}"
                f"Vertical{_STRENGTH_NAME[hint.row_strength]}Horizontal")
    return {"letter": hint.letter, "type": kind}


def board_from_rows(rows: List[List[Dict]]) -> Board:
    """
    Build a Board from scraper rows. Cells are placed by their own (x, y),
    so the row ordering of the payload does not matter.
    """
    grid = Board.empty()
    for row in rows:
        for c in row:
            x, y = int(c["x"]), int(c["y"])
            grid.rows[y][x] = Cell(
                x, y,
                letter=c.get("letter") or None,
                hints=[hint_from_dict(h) for h in c.get("hints", [])],
            )
    # Re-run Board validation on the filled grid.
    return Board(grid.rows)


def state_from_dict(data: Dict) -> GameState:
    return GameState(
        guesses_remaining=int(data["guessesRemaining"]),
        next_guess_index=int(data.get("nextGuessIndex", 0)),
        language=data.get("language", "en"),
        board=board_from_rows(data["boardState"]),
    )


def state_to_dict(state: GameState) -> Dict:
    return {
        "guessesRemaining": state.guesses_remaining,
        "nextGuessIndex": state.next_guess_index,
        "language": state.language,
        "boardState": [
            [
                {"x": c.x, "y": c.y, "letter": c.letter, "hints": [hint_to_dict(h) for h in c.hints]}
                for c in row
            ]
            for row in state.board.rows
        ],
    }


def load_state(path: Path | str) -> GameState:
    p = Path(path)
    with p.open("r", encoding="utf-8") as f:
        return state_from_dict(json.load(f))


def save_state(state: GameState, path: Path | str) -> str:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(state_to_dict(state), f, indent=2)
    return str(p)
