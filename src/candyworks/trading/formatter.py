"""text formatting for exploration statistics and trade routes.

routes render either as plain console lines or as unicode box-drawing
tables inside discord code blocks (monospace, ansi-colored).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from candyworks.trading.models import DEFAULT_VOCABULARY

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from candyworks.trading.models import (
        Basket,
        ExplorationStats,
        KindVocabulary,
        Trade,
    )

# -- ansi color code constants --

ANSI_BOLD_BLUE = "1;34"
ANSI_GREEN = "0;32"

NO_COMBINATIONS = "No combinations found"
NO_ROUTE = "No route found"

# discord embed descriptions are capped at 4096 chars
EMBED_DESCRIPTION_LIMIT = 4096


def _align_cell(text: str, width: int, alignment: str) -> str:
    """Pad a cell value to the given width ("l", "r" or "c")."""
    if alignment == "r":
        return text.rjust(width)
    if alignment == "c":
        return text.center(width)
    return text.ljust(width)


def _compute_col_widths(headers: list[str], rows: list[list[str]]) -> list[int]:
    """Size each column to its widest header or cell."""
    col_widths = []
    for i, header in enumerate(headers):
        w = len(header)
        for row in rows:
            if i < len(row):
                w = max(w, len(row[i]))
        col_widths.append(w)
    return col_widths


def _build_row_line(
    cells: list[str],
    col_widths: list[int],
    alignments: list[str],
    cell_colors: list[str | Callable[[str], str | None] | None] | None = None,
) -> str:
    """Build a single box-drawing row line like "│ val1 │ val2 │".

    Args:
        cells: cell values for this row
        col_widths: column widths
        alignments: per-column alignment
        cell_colors: per-column color spec (None, static code, or callable)

    Returns:
        formatted row string
    """
    parts = []
    for i, width in enumerate(col_widths):
        raw_val = cells[i] if i < len(cells) else ""
        aligned = _align_cell(raw_val, width, alignments[i])

        if cell_colors and i < len(cell_colors) and cell_colors[i] is not None:
            color_spec = cell_colors[i]
            code = color_spec(raw_val) if callable(color_spec) else color_spec
            if code:
                aligned = f"\x1b[{code}m{aligned}\x1b[0m"

        parts.append(" " + aligned + " ")
    return "│" + "│".join(parts) + "│"


def _build_separator(col_widths: list[int], left: str, mid: str, right: str) -> str:
    return left + mid.join("─" * (w + 2) for w in col_widths) + right


def format_table(
    headers: list[str],
    rows: list[list[str]],
    alignments: list[str] | None = None,
    cell_colors: list[str | Callable[[str], str | None] | None] | None = None,
) -> str:
    """Build a unicode box-drawing table string.

    Args:
        headers: column header labels
        rows: list of row data (each row is a list of cell strings)
        alignments: per-column alignment ("l", "r", "c"). defaults to "l"
        cell_colors: per-column ansi color spec. each entry is None (no color),
            a static ansi code string, or a callable that takes the raw cell
            value and returns an ansi code or None.

    Returns:
        complete table string with box-drawing borders, no trailing newline
    """
    if alignments is None:
        alignments = ["l"] * len(headers)

    col_widths = _compute_col_widths(headers, rows)

    top_border = _build_separator(col_widths, "┌", "┬", "┐")
    mid_sep = _build_separator(col_widths, "├", "┼", "┤")
    bottom_border = _build_separator(col_widths, "└", "┴", "┘")

    # header is never colored
    header_line = _build_row_line(headers, col_widths, alignments)
    data_lines = [
        _build_row_line(row, col_widths, alignments, cell_colors=cell_colors)
        for row in rows
    ]

    parts = [top_border, header_line, mid_sep]
    for i, line in enumerate(data_lines):
        parts.append(line)
        if i < len(data_lines) - 1:
            parts.append(mid_sep)
    parts.append(bottom_border)
    return "\n".join(parts)


def format_table_for_embed(
    headers: list[str],
    rows: list[list[str]],
    alignments: list[str] | None = None,
    footer: str | None = None,
    cell_colors: list[str | Callable[[str], str | None] | None] | None = None,
) -> str:
    """Wrap format_table output in a discord code block.

    uses the ```ansi language tag when cell_colors are provided.
    """
    table = format_table(headers, rows, alignments, cell_colors=cell_colors)
    lang = "ansi" if cell_colors else ""
    result = f"```{lang}\n{table}\n```"
    if footer:
        result += f"\n{footer}"
    return result


def format_statistics(stats: ExplorationStats | None) -> str:
    """Render exploration statistics, one "label: value" per line."""
    if stats is None:
        return NO_COMBINATIONS
    return "\n".join(
        [
            f"Total combinations: {stats.combinations}",
            f"Min candies: {stats.min_total}",
            f"Max candies: {stats.max_total}",
            f"Max trades: {stats.max_trades}",
        ]
    )


def format_route_lines(
    baskets: Sequence[Basket],
    route: Sequence[Trade],
    vocabulary: KindVocabulary = DEFAULT_VOCABULARY,
) -> list[str]:
    """Render a replayed route as "(<basket>) <trade>" lines.

    the last line holds the final basket alone. zero counts are shown so
    the columns line up between steps.

    Args:
        baskets: output of Explorer.replay (one more than the route)
        route: trades applied between consecutive baskets
        vocabulary: kind names

    Returns:
        one line per trade plus the final basket
    """
    lines = [
        f"({basket.display(vocabulary, include_zeros=True)}) "
        f"{trade.display(vocabulary)}"
        for basket, trade in zip(baskets, route, strict=False)
    ]
    lines.append(f"({baskets[-1].display(vocabulary, include_zeros=True)})")
    return lines


def _step_color(value: str) -> str | None:
    """Highlight the final "=" row, leave numbered steps plain."""
    if value == "=":
        return ANSI_GREEN
    return None


def format_route_table(
    baskets: Sequence[Basket],
    route: Sequence[Trade],
    vocabulary: KindVocabulary = DEFAULT_VOCABULARY,
) -> str:
    """Render a replayed route as a Step / Basket / Trade table for discord.

    falls back to a truncation note when the table would not fit in an
    embed description.
    """
    rows = [
        [str(step + 1), basket.display(vocabulary), trade.display(vocabulary)]
        for step, (basket, trade) in enumerate(zip(baskets, route, strict=False))
    ]
    rows.append(["=", baskets[-1].display(vocabulary), ""])
    desc = format_table_for_embed(
        ["Step", "Basket", "Trade"],
        rows,
        ["r", "l", "l"],
        cell_colors=[_step_color, ANSI_BOLD_BLUE, None],
    )
    if len(desc) > EMBED_DESCRIPTION_LIMIT:
        return f"Route has {len(route)} trades, too long to show here."
    return desc
