from __future__ import annotations

# Facade module that re-exports Pegfield core functionality.
# Kept as the single import surface for the Flask app and tests.
# Single-responsibility modules live under pegfield_core/*.

# Prefer relative imports when part of a package, then the top-level package.
try:
    from .pegfield_core.board import Board, Cell, Coord  # type: ignore
    from .pegfield_core.engine import BoardEngine, MoveResult  # type: ignore
    from .pegfield_core.errors import ConfigurationError  # type: ignore
    from .pegfield_core.keys import coord_key, parse_coord_key  # type: ignore
    from .pegfield_core.layouts import PRESETS, layout_names, parse_layout, preset, read_layout_file  # type: ignore
    from .pegfield_core.moves import (  # type: ignore
        Direction,
        MoveCheck,
        jump_target,
        midpoint,
        check_move,
        apply_jump,
        legal_targets,
        any_legal_move,
    )
    from .pegfield_core.serialize import (  # type: ignore
        board_to_json,
        engine_to_json,
        layout_from_json,
        coord_from_json,
    )
except ImportError:
    from pegfield_core.board import Board, Cell, Coord  # type: ignore
    from pegfield_core.engine import BoardEngine, MoveResult  # type: ignore
    from pegfield_core.errors import ConfigurationError  # type: ignore
    from pegfield_core.keys import coord_key, parse_coord_key  # type: ignore
    from pegfield_core.layouts import PRESETS, layout_names, parse_layout, preset, read_layout_file  # type: ignore
    from pegfield_core.moves import (  # type: ignore
        Direction,
        MoveCheck,
        jump_target,
        midpoint,
        check_move,
        apply_jump,
        legal_targets,
        any_legal_move,
    )
    from pegfield_core.serialize import (  # type: ignore
        board_to_json,
        engine_to_json,
        layout_from_json,
        coord_from_json,
    )


def new_engine(name: str) -> BoardEngine:
    """Engine seeded from a bundled preset layout."""
    layout, voids = preset(name)
    return BoardEngine(layout, voids)


def main() -> None:
    # CLI driver delegated to pegfield_core.cli
    try:
        from .pegfield_core.cli import main as _main  # type: ignore
    except ImportError:
        from pegfield_core.cli import main as _main  # type: ignore
    raise SystemExit(_main())


if __name__ == '__main__':
    main()
