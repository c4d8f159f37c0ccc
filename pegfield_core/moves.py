from __future__ import annotations

from enum import Enum
from typing import List, Optional, Tuple

from .board import Board, Cell, Coord


class Direction(Enum):
    LEFT = (0, -1)
    RIGHT = (0, 1)
    UP = (-1, 0)
    DOWN = (1, 0)

    @classmethod
    def parse(cls, text: str) -> "Direction":
        """Accepts 'left', 'RIGHT', 'u', 'd' and similar."""
        key = str(text).strip().upper()
        for d in cls:
            if key == d.name or (len(key) == 1 and d.name.startswith(key)):
                return d
        raise ValueError(f"unknown direction: {text!r}")


class MoveCheck(str, Enum):
    OK = "ok"
    NO_SELECTION = "no_selection"
    ORIGIN_NOT_PEG = "origin_not_peg"
    OUT_OF_BOUNDS = "out_of_bounds"
    DESTINATION_OCCUPIED = "destination_occupied"
    DESTINATION_VOID = "destination_void"
    NOT_A_JUMP = "not_a_jump"
    NO_PEG_TO_JUMP = "no_peg_to_jump"


def jump_target(origin: Coord, direction: Direction) -> Coord:
    """Cell two steps from origin along the direction; may be off the board."""
    dr, dc = direction.value
    return origin[0] + 2 * dr, origin[1] + 2 * dc


def midpoint(origin: Coord, dest: Coord) -> Optional[Coord]:
    """Cell jumped over, or None if dest is not exactly two cells away on one axis."""
    dr = dest[0] - origin[0]
    dc = dest[1] - origin[1]
    if (abs(dr), abs(dc)) not in ((2, 0), (0, 2)):
        return None
    return origin[0] + dr // 2, origin[1] + dc // 2


def check_move(board: Board, origin: Optional[Coord], dest: Coord) -> MoveCheck:
    """Runs the jump preconditions in order and returns the first that fails."""
    if origin is None:
        return MoveCheck.NO_SELECTION
    if not board.in_bounds(origin) or board.at(*origin) is not Cell.PEG:
        return MoveCheck.ORIGIN_NOT_PEG
    if not board.in_bounds(dest):
        return MoveCheck.OUT_OF_BOUNDS
    status = board.at(*dest)
    if status is Cell.PEG:
        return MoveCheck.DESTINATION_OCCUPIED
    if status is Cell.VOID:
        return MoveCheck.DESTINATION_VOID
    mid = midpoint(origin, dest)
    if mid is None:
        return MoveCheck.NOT_A_JUMP
    if board.at(*mid) is not Cell.PEG:
        return MoveCheck.NO_PEG_TO_JUMP
    return MoveCheck.OK


def apply_jump(board: Board, origin: Coord, dest: Coord) -> Tuple[Board, Coord]:
    """Returns a new board with the jump applied; the input board is untouched."""
    mid = midpoint(origin, dest)
    if mid is None:
        raise ValueError(f"{origin} -> {dest} is not a jump")
    next_board = board.copy()
    next_board.set(origin, Cell.EMPTY)
    next_board.set(mid, Cell.EMPTY)
    next_board.set(dest, Cell.PEG)
    return next_board, mid


def legal_targets(board: Board, origin: Coord) -> List[Coord]:
    """All destinations the peg at origin can jump to."""
    if not board.in_bounds(origin) or board.at(*origin) is not Cell.PEG:
        return []
    out: List[Coord] = []
    for d in Direction:
        dest = jump_target(origin, d)
        if check_move(board, origin, dest) is MoveCheck.OK:
            out.append(dest)
    return sorted(out)


def any_legal_move(board: Board) -> bool:
    return any(legal_targets(board, coord) for coord in board.coords())
