from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, List, Optional, Tuple

from .board import Board, Coord
from .errors import ConfigurationError
from .keys import parse_coord_key
from .layouts import parse_layout, preset

if TYPE_CHECKING:
    from .engine import BoardEngine


def board_to_json(b: Board) -> Dict[str, Any]:
    return {
        "size": int(b.size),
        "cells": [[cell.value for cell in line] for line in b.snapshot()],
        "voids": [[int(r), int(c)] for (r, c) in sorted(b.voids)],
        "pegs": b.peg_count(),
    }


def engine_to_json(engine: "BoardEngine") -> Dict[str, Any]:
    out = board_to_json(engine.board)
    sel = engine.selection
    out["selected"] = [int(sel[0]), int(sel[1])] if sel is not None else None
    out["complete"] = engine.check_win()
    out["legalTargets"] = [[r, c] for (r, c) in engine.legal_targets()]
    return out


def layout_from_json(obj: Dict[str, Any], default_layout: Optional[str] = None) -> Tuple[List[List[bool]], List[Coord]]:
    """
    Reads a layout request body.

    Either ``layout`` names a preset, or ``cells`` carries rows of booleans
    (with optional ``voids`` keys) or rows of layout text.
    """
    cells = obj.get("cells")
    if cells is None:
        name = obj.get("layout", default_layout)
        if not isinstance(name, str):
            raise ConfigurationError("layout name or cells required")
        return preset(name)
    if not isinstance(cells, list) or not cells:
        raise ConfigurationError("cells must be a non-empty list of rows")
    if all(isinstance(row, str) for row in cells):
        layout, voids = parse_layout(cells)
    else:
        layout = []
        for row in cells:
            if not isinstance(row, list):
                raise ConfigurationError("each row of cells must be a list")
            layout.append([_peg_flag(v) for v in row])
        voids = []
    raw_voids = obj.get("voids")
    if raw_voids is None:
        raw_voids = []
    if not isinstance(raw_voids, list):
        raise ConfigurationError("voids must be a list of coordinates")
    voids.extend(parse_coord_key(v) for v in raw_voids)
    return layout, voids


def _peg_flag(value: Any) -> bool:
    # JSON booleans, or 0/1
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    raise ConfigurationError(f"cell values must be true/false or 0/1, got {value!r}")


def coord_from_json(raw: Any) -> Coord:
    return parse_coord_key(raw)
