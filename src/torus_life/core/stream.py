"""Reading and writing grids as plain character text."""

import re
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Union

LIVE_CELL = "*"
DEAD_CELL = "-"

_LINE_BREAK = re.compile(r"[\r\n]+")


def read_grid(text: Optional[str]) -> List[List[bool]]:
    """Parse a text block into a matrix of cells.

    Each non-empty line becomes a row; '*' is a live cell and any other
    character is a dead cell. Rows keep the length of their line, so the
    result may be ragged.

    Args:
        text: Grid text, lines separated by CR and/or LF

    Returns:
        List of rows of cell states (empty list for empty text)

    Raises:
        ValueError: If text is None
    """
    if text is None:
        raise ValueError("Grid text must not be None")

    lines = [line for line in _LINE_BREAK.split(text) if line]
    return [[char == LIVE_CELL for char in line] for line in lines]


def write_grid(grid: Sequence[Iterable[bool]]) -> str:
    """Render a grid as text, '*' for live and '-' for dead cells.

    Accepts a TorusGrid or any sequence of rows. Rows are joined by line
    breaks with no trailing line break.
    """
    rows = getattr(grid, "rows", grid)
    return "\n".join("".join(LIVE_CELL if cell else DEAD_CELL for cell in row) for row in rows)


def load_grid(path: Union[str, Path]) -> str:
    """Read the whole grid file as text.

    Raises:
        OSError: If the file cannot be read
    """
    return Path(path).read_text(encoding="utf-8")
