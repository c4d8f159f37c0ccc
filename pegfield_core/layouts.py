from __future__ import annotations

from typing import Dict, Iterable, List, Sequence, Tuple

from .board import Coord
from .errors import ConfigurationError

PEG_CHARS = "oO1"
EMPTY_CHARS = ".0"
VOID_CHARS = " #xX"

# Row strings: 'o' peg, '.' empty, ' ' void
PRESETS: Dict[str, Tuple[str, ...]] = {
    "english": (
        "  ooo  ",
        "  ooo  ",
        "ooooooo",
        "ooo.ooo",
        "ooooooo",
        "  ooo  ",
        "  ooo  ",
    ),
    "square3": (
        "ooo",
        "o.o",
        "ooo",
    ),
    "plus5": (
        " ooo ",
        "ooooo",
        "oo.oo",
        "ooooo",
        " ooo ",
    ),
}


def parse_layout(rows: Sequence[str]) -> Tuple[List[List[bool]], List[Coord]]:
    """Parses layout text rows into a boolean peg layout and a list of void coordinates."""
    rows = list(rows)
    n = max((len(r) for r in rows), default=0)
    if n == 0:
        raise ConfigurationError("layout text is empty")
    layout: List[List[bool]] = []
    voids: List[Coord] = []
    for r, text in enumerate(rows):
        # Trailing voids are often trimmed by editors
        text = text.ljust(n)
        line: List[bool] = []
        for c, ch in enumerate(text):
            if ch in PEG_CHARS:
                line.append(True)
            elif ch in EMPTY_CHARS:
                line.append(False)
            elif ch in VOID_CHARS:
                line.append(False)
                voids.append((r, c))
            else:
                raise ConfigurationError(f"unknown layout character {ch!r} at row {r}, col {c}")
        layout.append(line)
    return layout, voids


def preset(name: str) -> Tuple[List[List[bool]], List[Coord]]:
    try:
        rows = PRESETS[name]
    except KeyError:
        raise ConfigurationError(f"unknown layout {name!r}; choose from {', '.join(sorted(PRESETS))}") from None
    return parse_layout(rows)


def read_layout_file(path: str) -> Tuple[List[List[bool]], List[Coord]]:
    with open(path, "r", encoding="utf-8") as f:
        rows = [line.rstrip("\r\n") for line in f]
    while rows and not rows[-1].strip():
        rows.pop()
    return parse_layout(rows)


def layout_names() -> Iterable[str]:
    return sorted(PRESETS)
