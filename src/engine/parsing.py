"""Text layout parsing for preset grids."""

import re
from typing import List, Optional

from .errors import LayoutError
from .grid import Grid


ROW_PATTERN = re.compile(r'^[A-Za-z.]+$')


def extract_layout_content(spec: str) -> str:
    """Extract content from between <grid> and </grid> tags."""
    match = re.search(r'<grid>(.*?)</grid>', spec, re.DOTALL)
    if match:
        return match.group(1).strip()
    return spec.strip()


def parse_layout(
    spec: str,
    rows: Optional[int] = None,
    cols: Optional[int] = None,
) -> Grid:
    """
    Parse a text layout into a Grid.

    Each non-blank line is one row, top to bottom. ``.`` marks an empty cell,
    letters are filled cells, and whitespace inside a line is ignored so
    ``C A T S`` and ``CATS`` read the same. Lines starting with ``#`` are
    comments.

    When ``rows`` is larger than the layout, empty rows are added on top so
    the layout sits on the floor. When ``cols`` is larger, rows are padded
    with empty cells on the right.

    Raises:
        LayoutError: If the layout is empty, has an invalid character,
            is ragged, or does not fit in the requested size
    """
    spec = extract_layout_content(spec)
    lines: List[str] = []
    for i, raw in enumerate(spec.split('\n'), start=1):
        line = re.sub(r'\s+', '', raw)
        if not line or line.startswith('#'):
            continue
        if not ROW_PATTERN.match(line):
            raise LayoutError(f"Invalid layout line {i}: '{raw.strip()}'")
        lines.append(line.upper())

    if not lines:
        raise LayoutError("Layout is empty")

    width = len(lines[0])
    for line in lines[1:]:
        if len(line) != width:
            raise LayoutError(
                f"Ragged layout: expected rows of width {width}, got '{line}'"
            )

    rows = rows if rows is not None else len(lines)
    cols = cols if cols is not None else width
    if len(lines) > rows or width > cols:
        raise LayoutError(
            f"Layout is {len(lines)}x{width}, larger than the {rows}x{cols} grid"
        )

    padded = ['.' * cols] * (rows - len(lines))
    padded.extend(line + '.' * (cols - width) for line in lines)

    return Grid.from_rows(padded)
