from typing import List

from ..engine.models import GameSnapshot


def render_cell(letter, highlighted: bool) -> str:
    """Three-character cell: ``[A]`` highlighted, `` A `` filled, `` . `` empty."""
    if highlighted:
        return f"[{letter or ' '}]"
    return f" {letter or '.'} "


def render_snapshot(snapshot: GameSnapshot) -> str:
    """Render a snapshot for the terminal, cursor marker above the grid."""
    cols = len(snapshot.grid[0]) if snapshot.grid else 0
    lines: List[str] = []

    lines.append(f"Current letter: {snapshot.current_letter}")
    lines.append(f"Target words: {', '.join(snapshot.target_words) or '-'}")
    lines.append("")

    # Column numbers are 1-based for the player
    lines.append("".join(f"{x + 1:^3}" for x in range(cols)))
    lines.append("".join(" v " if x == snapshot.cursor_column else "   " for x in range(cols)))

    for y, row in enumerate(snapshot.grid):
        lines.append("".join(
            render_cell(letter, snapshot.is_highlighted(y, x))
            for x, letter in enumerate(row)
        ))

    if snapshot.pending_clear:
        lines.append("")
        lines.append("Word found! Any move clears it.")
    elif snapshot.board_full:
        lines.append("")
        lines.append("The board is full. Press n for a new game.")

    return "\n".join(lines)


if __name__ == '__main__':
    example = GameSnapshot(
        grid=[
            [None, None, None, None],
            [None, None, None, "E"],
            ["W", "O", "R", "D"],
        ],
        cursor_column=1,
        current_letter="S",
        target_words=["CAT", "HOUSE", "ELEPHANT"],
        highlighted_positions=[(2, 0), (2, 1), (2, 2), (2, 3)],
        pending_clear=True,
    )
    print(render_snapshot(example))
