from __future__ import annotations

from typing import Any, Tuple

from .errors import ConfigurationError


def coord_key(coord: Tuple[int, int]) -> str:
    """Canonical external key for a coordinate: "row,col"."""
    return f"{int(coord[0])},{int(coord[1])}"


def parse_coord_key(raw: Any) -> Tuple[int, int]:
    """
    Turns an external coordinate key into a (row, col) tuple.

    Accepted forms: a 2-item sequence of ints, "r,c" or "r:c" strings, and the
    legacy concatenated-digit form only when it is exactly two digits. A
    longer bare digit string such as "123" could mean (1, 23) or (12, 3) and
    is rejected.
    """
    if isinstance(raw, str):
        text = raw.strip()
        for sep in (",", ":"):
            if sep in text:
                parts = [p.strip() for p in text.split(sep)]
                if len(parts) != 2:
                    raise ConfigurationError(f"bad coordinate key: {raw!r}")
                try:
                    return int(parts[0]), int(parts[1])
                except ValueError:
                    raise ConfigurationError(f"bad coordinate key: {raw!r}") from None
        if len(text) == 2 and text.isdigit():
            return int(text[0]), int(text[1])
        if text.isdigit():
            raise ConfigurationError(f"ambiguous coordinate key {raw!r}; use 'row,col'")
        raise ConfigurationError(f"bad coordinate key: {raw!r}")

    if isinstance(raw, (list, tuple)) and len(raw) == 2:
        r, c = raw
        if isinstance(r, bool) or isinstance(c, bool) or not isinstance(r, int) or not isinstance(c, int):
            raise ConfigurationError(f"bad coordinate: {raw!r}")
        return r, c
    raise ConfigurationError(f"bad coordinate: {raw!r}")
