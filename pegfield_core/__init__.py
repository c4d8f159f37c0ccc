"""
Pegfield core Python package.

Pure-logic pieces of the peg-solitaire rules engine, kept free of any
rendering or input handling so front ends only call in and re-render.
Modules:
- board.py: Board, Cell, Coord
- engine.py: BoardEngine, MoveResult
- moves.py: Direction, MoveCheck, jump validation
- keys.py, layouts.py, serialize.py, config.py, cli.py
"""
