from __future__ import annotations

from typing import Any

from tabulate import tabulate


def _trim_cell(x: Any, max_width: int | None) -> Any:
    """Truncate long cell strings with … (does not wrap)."""
    if max_width is None:
        return x
    s = "" if x is None else str(x)
    if len(s) <= max_width:
        return s
    if max_width <= 1:
        return "…"
    return s[: max_width - 1] + "…"


def format_table(
    columns: list[str],
    rows: list[tuple],
    *,
    tablefmt: str = "plain",
    max_cell_width: int | None = 80,
    **tabulate_kwargs,
) -> str:
    """Render rows with tabulate, trimming cells wider than ``max_cell_width``."""
    if max_cell_width is not None:
        rows = [tuple(_trim_cell(v, max_cell_width) for v in r) for r in rows]
    return tabulate(rows, headers=columns, tablefmt=tablefmt, **tabulate_kwargs)
