from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Iterable, List, Optional, Sequence, Tuple

from .board import Board, Cell, Coord
from .moves import Direction, MoveCheck, apply_jump, any_legal_move, check_move, jump_target, legal_targets

LOG = logging.getLogger("pegfield.engine")

WinListener = Callable[["BoardEngine"], None]


@dataclass
class MoveResult:
    applied: bool
    reason: MoveCheck
    origin: Optional[Coord] = None
    midpoint: Optional[Coord] = None
    destination: Optional[Coord] = None
    won: bool = False
    just_won: bool = False


class BoardEngine:
    """Owns one board, the current selection and the win notification state.

    Every call runs to completion; nothing here blocks or is shared between
    sessions, so each session keeps its own engine.
    """

    def __init__(
        self,
        initial_layout: Sequence[Sequence[Any]],
        void_cells: Iterable[Any] = (),
        size: Optional[int] = None,
    ) -> None:
        self._listeners: List[WinListener] = []
        self.size = size
        self.size = self.initialize(initial_layout, void_cells).size

    def initialize(self, initial_layout: Sequence[Sequence[Any]], void_cells: Iterable[Any] = ()) -> Board:
        """Builds the grid from a boolean layout; raises ConfigurationError on bad input."""
        voids = list(void_cells)
        board = Board.from_layout(initial_layout, voids, size=self.size)
        self._initial_layout: List[List[bool]] = [[bool(v) for v in row] for row in initial_layout]
        self._void_cells: Tuple[Coord, ...] = tuple(sorted(board.voids))
        self.board = board
        self.selection: Optional[Coord] = None
        self._won_announced = False
        return board

    def on_win(self, listener: WinListener) -> None:
        self._listeners.append(listener)

    # ---------- queries ----------

    def status(self, coord: Coord) -> Optional[Cell]:
        if not self.board.in_bounds(coord):
            return None
        return self.board.at(*coord)

    def peg_count(self) -> int:
        return self.board.peg_count()

    def check_win(self) -> bool:
        return self.board.peg_count() <= 1

    def snapshot(self) -> Tuple[Tuple[Cell, ...], ...]:
        return self.board.snapshot()

    def legal_targets(self) -> List[Coord]:
        if self.selection is None:
            return []
        return legal_targets(self.board, self.selection)

    def has_moves(self) -> bool:
        return any_legal_move(self.board)

    # ---------- input ----------

    def select_or_deselect(self, coord: Coord) -> Optional[Coord]:
        """
        Toggles the selection from a tap on a peg.

        Taps on anything but a peg are ignored. A tap selects the peg unless
        a selection already exists in the same row or column, in which case
        the selection is cleared (not only when re-tapping the same peg).
        """
        if self.status(coord) is not Cell.PEG:
            return self.selection
        cur = self.selection
        if cur is None or (cur[0] != coord[0] and cur[1] != coord[1]):
            self.selection = (coord[0], coord[1])
        else:
            self.selection = None
        return self.selection

    def attempt_move(self, target: Coord) -> MoveResult:
        """Move triggered by tapping an empty cell; the selection is cleared afterwards."""
        result = self._move(target)
        self.selection = None
        return result

    def attempt_move_direction(self, direction: Direction) -> MoveResult:
        """Move triggered by a swipe; on success the landed peg stays selected."""
        if self.selection is None:
            return self._reject(MoveCheck.NO_SELECTION, None, None)
        target = jump_target(self.selection, direction)
        result = self._move(target)
        self.selection = result.destination if result.applied else None
        return result

    def reset(self, new_layout: Optional[Sequence[Sequence[Any]]] = None, void_cells: Optional[Iterable[Any]] = None) -> Board:
        """Re-seeds the board from a new layout or the remembered one."""
        layout = self._initial_layout if new_layout is None else new_layout
        voids = self._void_cells if void_cells is None else void_cells
        board = self.initialize(layout, voids)
        LOG.debug("board reset: %d pegs on %dx%d", board.peg_count(), board.size, board.size)
        return board

    # ---------- internals ----------

    def _move(self, target: Coord) -> MoveResult:
        origin = self.selection
        target = (target[0], target[1])
        verdict = check_move(self.board, origin, target)
        if verdict is not MoveCheck.OK or origin is None:
            return self._reject(verdict, origin, target)

        # Built on a copy and swapped in, so the three cells change together
        self.board, mid = apply_jump(self.board, origin, target)
        won = self.check_win()
        just_won = won and not self._won_announced
        if just_won:
            self._won_announced = True
            LOG.info("board won with %d peg(s) left", self.board.peg_count())
            for listener in list(self._listeners):
                listener(self)
        return MoveResult(
            applied=True,
            reason=MoveCheck.OK,
            origin=origin,
            midpoint=mid,
            destination=target,
            won=won,
            just_won=just_won,
        )

    def _reject(self, reason: MoveCheck, origin: Optional[Coord], target: Optional[Coord]) -> MoveResult:
        LOG.debug("move %s -> %s rejected: %s", origin, target, reason.value)
        return MoveResult(applied=False, reason=reason, origin=origin, destination=target, won=self.check_win())
